"""Модели расчётных параметров."""

from dceapi.models.base import DceModel, DceRequest, NullableStr


class SettleParam(DceModel):
    """Расчётная цена, комиссии и ставки маржи по контракту."""

    variety: NullableStr = ""
    variety_order: NullableStr = ""
    contract_id: NullableStr = ""
    clear_price: NullableStr = ""
    open_fee: NullableStr = ""
    offset_fee: NullableStr = ""
    # Внутридневные комиссии
    short_open_fee: NullableStr = ""
    short_offset_fee: NullableStr = ""
    style: NullableStr = ""
    spec_buy_rate: NullableStr = ""
    spec_sell_rate: NullableStr = ""
    hedge_buy_rate: NullableStr = ""
    hedge_sell_rate: NullableStr = ""


class SettleParamRequest(DceRequest):
    variety_id: str
    trade_date: str
    trade_type: str = "1"
    lang: str = "zh"
