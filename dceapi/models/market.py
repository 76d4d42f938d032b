"""Модели рыночных данных: котировки, статистика по контрактам."""

from pydantic import Field

from dceapi.models.base import (
    DceModel,
    DceRequest,
    NullableFloat,
    NullableInt,
    NullableStr,
)

# Значения stat_content для ContractMonthMaxRequest
STAT_CONTENT_VOLUME = "0"
STAT_CONTENT_TURNOVER = "1"
STAT_CONTENT_OPENI = "2"
STAT_CONTENT_PRICE = "3"


class Quote(DceModel):
    """Котировка контракта (дневная, ночная, недельная, месячная)."""

    variety: NullableStr = ""
    contract_id: NullableStr = ""
    # Только для ночных котировок
    deliv_month: NullableStr = ""
    open: NullableStr = ""
    high: NullableStr = ""
    low: NullableStr = ""
    close: NullableStr = ""
    last_clear: NullableStr = ""
    # Только для ночных котировок
    last_price: NullableStr = ""
    clear_price: NullableStr = ""
    diff: NullableStr = ""
    diff1: NullableStr = ""
    # Сервер отдаёт поле с опечаткой: volumn
    volume: NullableInt = Field(default=0, alias="volumn")
    open_interest: NullableInt = 0
    diff_i: NullableInt = Field(default=0, alias="diffI")
    turnover: NullableStr = ""


class QuotesRequest(DceRequest):
    """Запрос котировок за торговый день."""

    variety_id: str | None = None
    # Код товара для ночных котировок
    variety: str | None = None
    trade_date: str
    trade_type: str = "1"
    lang: str | None = None
    # Для опционов: 0 контракт, 1 серия, 2 товар
    statistics_type: int | None = None


class ContractMonthMaxRequest(DceRequest):
    """Запрос месячной статистики по контрактам.

    stat_content выбирает вид статистики: объём, оборот,
    открытый интерес или цена (STAT_CONTENT_*).
    """

    variety_id: str
    start_month: str
    end_month: str
    stat_content: str = STAT_CONTENT_VOLUME
    trade_type: str = "1"
    lang: str | None = None


class ContractMonthMaxVolume(DceModel):
    contract_id: NullableStr = ""
    sum_amount: NullableInt = 0
    max_amount: NullableInt = 0
    max_amount_date: NullableStr = ""
    min_amount: NullableInt = 0
    min_amount_date: NullableStr = ""
    avg_amount: NullableFloat = 0


class ContractMonthMaxTurnover(DceModel):
    contract_id: NullableStr = ""
    sum_turnover: NullableFloat = 0
    max_turnover: NullableFloat = 0
    max_turnover_date: NullableStr = ""
    min_turnover: NullableFloat = 0
    min_turnover_date: NullableStr = ""
    avg_turnover: NullableFloat = 0


class ContractMonthMaxOpeni(DceModel):
    contract_id: NullableStr = ""
    max_openi: NullableInt = 0
    max_openi_date: NullableStr = ""
    min_openi: NullableInt = 0
    min_openi_date: NullableStr = ""
    avg_openi: NullableFloat = 0


class ContractMonthMaxPrice(DceModel):
    contract_id: NullableStr = ""
    open: NullableStr = ""
    high: NullableStr = ""
    high_date: NullableStr = ""
    low: NullableStr = ""
    low_date: NullableStr = ""
    close: NullableStr = ""
    price_change: NullableStr = ""


class RiseFallEventRequest(DceRequest):
    """Запрос событий достижения ценовых лимитов за период."""

    start_date: str
    end_date: str
    variety_id: str = "all"


class RiseFallEvent(DceModel):
    trade_date: NullableStr = ""
    contract_id: NullableStr = ""
    variety: NullableStr = ""
    # Направление: рост или падение
    direction: NullableStr = ""
    times: NullableInt = 0


class DivisionPriceInfoRequest(DceRequest):
    variety_id: str
    trade_date: str
    trade_type: str = "1"


class DivisionPriceInfo(DceModel):
    """Расчётная цена контракта на момент времени."""

    contract_id: NullableStr = ""
    calculate_time: NullableStr = ""
    calculate_price: NullableStr = ""


class WarehouseReceiptRequest(DceRequest):
    variety_id: str
    trade_date: str


class WarehouseReceiptEntry(DceModel):
    """Строка отчёта о складских свидетельствах по складу."""

    variety: NullableStr = ""
    wh_abbr: NullableStr = ""
    last_wbill_qty: NullableInt = 0
    wbill_qty: NullableInt = 0
    diff: NullableInt = 0


class WarehouseReceipt(DceModel):
    """Дневной отчёт о складских свидетельствах."""

    variety: NullableStr = ""
    trade_date: NullableStr = ""
    entity_list: list[WarehouseReceiptEntry] = Field(default_factory=list)
