"""Модели торговых параметров и справочника контрактов."""

from dceapi.models.base import (
    DceModel,
    DceRequest,
    NullableFloat,
    NullableInt,
    NullableStr,
)


class TradeParam(DceModel):
    """Маржа и ценовые лимиты контракта на торговый день."""

    contract_id: NullableStr = ""
    spec_buy_rate: NullableFloat = 0
    spec_buy: NullableFloat = 0
    hedge_buy_rate: NullableFloat = 0
    hedge_buy: NullableFloat = 0
    rise_limit_rate: NullableFloat = 0
    rise_limit: NullableFloat = 0
    fall_limit: NullableFloat = 0
    trade_date: NullableStr = ""


class DayTradeParamRequest(DceRequest):
    variety_id: str
    trade_type: str = "1"
    lang: str = "zh"


class ContractInfo(DceModel):
    """Параметры контракта: даты торгов, единица, шаг цены."""

    contract_id: NullableStr = ""
    variety: NullableStr = ""
    variety_order: NullableStr = ""
    unit: NullableInt = 0
    tick: NullableStr = ""
    start_trade_date: NullableStr = ""
    end_trade_date: NullableStr = ""
    end_delivery_date: NullableStr = ""
    trade_type: NullableStr = ""


class ContractInfoRequest(DceRequest):
    variety_id: str
    trade_type: str = "1"
    lang: str = "zh"


class ArbitrageContract(DceModel):
    """Арбитражный (спредовый) контракт."""

    arbi_name: NullableStr = ""
    variety_name: NullableStr = ""
    arbi_contract_id: NullableStr = ""
    max_hand: NullableInt = 0
    tick: NullableFloat = 0


class ArbitrageContractRequest(DceRequest):
    lang: str = "zh"


class TradingParam(DceModel):
    """Сводные торговые параметры товара: маржа, комиссии, лимиты."""

    variety: NullableStr = ""
    variety_id: NullableStr = ""
    trade_margin_rate: NullableStr = ""
    settlement_margin_rate: NullableStr = ""
    price_limit: NullableStr = ""
    open_fee: NullableStr = ""
    offset_fee: NullableStr = ""
    short_open_fee: NullableStr = ""
    short_offset_fee: NullableStr = ""
    max_hand: NullableStr = ""
    position_limit: NullableStr = ""


class TradingParamRequest(DceRequest):
    lang: str = "zh"


class MarginArbiPerfPara(DceModel):
    """Маржа и комиссии для арбитражной стратегии."""

    arbi_name: NullableStr = ""
    variety_name: NullableStr = ""
    arbi_contract_id: NullableStr = ""
    perf_sh_margin: NullableFloat = 0
    perf_sp_margin: NullableFloat = 0


class MarginArbiPerfParaRequest(DceRequest):
    variety_id: str
    lang: str | None = None


class NewContractInfo(DceModel):
    """Недавно добавленный контракт."""

    contract_id: NullableStr = ""
    variety: NullableStr = ""
    trade_type: NullableStr = ""
    start_trade_date: NullableStr = ""
    end_trade_date: NullableStr = ""
    ref_price: NullableStr = ""


class NewContractInfoRequest(DceRequest):
    variety_id: str
    trade_type: str = "1"
    # Формат YYYYMM
    contract_month: str | None = None


class MainSeriesInfo(DceModel):
    """Контракт для непрерывного котирования маркет-мейкером."""

    variety: NullableStr = ""
    series_id: NullableStr = ""
    contract_id: NullableStr = ""
    trade_date: NullableStr = ""


class MainSeriesInfoRequest(DceRequest):
    variety_id: str
    trade_type: str = "1"
