"""Модели рейтингов участников торгов."""

from pydantic import Field

from dceapi.models.base import (
    DceModel,
    DceRequest,
    NullableFloat,
    NullableInt,
    NullableStr,
)


class Ranking(DceModel):
    """Строка дневного рейтинга: объём, длинные и короткие позиции."""

    rank: NullableStr = ""
    qty_abbr: NullableStr = ""
    today_qty: NullableInt = 0
    qty_sub: NullableInt = 0
    buy_abbr: NullableStr = ""
    today_buy_qty: NullableInt = 0
    buy_sub: NullableInt = 0
    sell_abbr: NullableStr = ""
    today_sell_qty: NullableInt = 0
    sell_sub: NullableInt = 0


class DailyRankingRequest(DceRequest):
    variety_id: str
    contract_id: str
    trade_date: str
    trade_type: str = "1"


class DailyRankingResponse(DceModel):
    contract_id: NullableStr = ""
    today_qty: NullableInt = 0
    qty_sub: NullableInt = 0
    today_buy_qty: NullableInt = 0
    buy_sub: NullableInt = 0
    today_sell_qty: NullableInt = 0
    sell_sub: NullableInt = 0
    qty_future_list: list[Ranking] = Field(default_factory=list)
    buy_future_list: list[Ranking] = Field(default_factory=list)
    sell_future_list: list[Ranking] = Field(default_factory=list)


class PhaseRankingRequest(DceRequest):
    """Запрос рейтинга участников за период (месяцы YYYYMM)."""

    variety: str
    start_month: str
    end_month: str
    trade_type: str = "1"


class PhaseRanking(DceModel):
    seq: NullableStr = ""
    member_id: NullableStr = ""
    member_name: NullableStr = ""
    month_qty: NullableFloat = 0
    qty_ratio: NullableFloat = 0
    month_amt: NullableFloat = 0
    amt_ratio: NullableFloat = 0
