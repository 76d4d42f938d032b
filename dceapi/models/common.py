"""Модели общих данных: торговый день, товары, статистика по товарам."""

from pydantic import Field

from dceapi.models.base import DceModel, DceRequest, NullableFloat, NullableStr


class TradeDate(DceModel):
    """Текущий торговый день."""

    # Формат YYYYMMDD
    date: NullableStr = Field(default="", alias="tradeDate")


class Variety(DceModel):
    """Товар (вид контракта)."""

    code: NullableStr = Field(default="", alias="varietyId")
    name: NullableStr = Field(default="", alias="varietyName")
    english_name: NullableStr = Field(default="", alias="varietyEnglishName")
    pic: NullableStr = ""
    variety_type: NullableStr = ""


class VarietyMonthYearStatRequest(DceRequest):
    """Запрос статистики товара за месяц и год."""

    # Формат YYYYMM
    trade_month: str
    trade_type: str = "1"
    lang: str | None = None


class VarietyMonthYearStat(DceModel):
    """Объёмы и обороты по товару за месяц и с начала года."""

    variety: NullableStr = ""
    variety_order: NullableStr = ""
    this_month_volume: NullableFloat = Field(default=0, alias="thisMonthVolumn")
    volume_ratio: NullableFloat = Field(default=0, alias="volumnBalance")
    this_month_turnover: NullableFloat = 0
    turnover_ratio: NullableFloat = Field(default=0, alias="turnoverBalance")
    this_year_volume: NullableFloat = Field(default=0, alias="thisYearVolumn")
    year_volume_ratio: NullableFloat = Field(default=0, alias="yearVolumnBalance")
    this_year_turnover: NullableFloat = 0
    year_turnover_ratio: NullableFloat = Field(default=0, alias="yearTurnoverBalance")
    this_month_openi: NullableFloat = 0
