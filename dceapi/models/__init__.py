"""Модели запросов и ответов DCE API."""

from dceapi.models.base import (
    ApiResponse,
    DceModel,
    DceRequest,
    NullableFloat,
    NullableInt,
    NullableStr,
    RequestOptions,
    TokenResponse,
)
from dceapi.models.common import (
    TradeDate,
    Variety,
    VarietyMonthYearStat,
    VarietyMonthYearStatRequest,
)
from dceapi.models.delivery import (
    BondedDelivery,
    BondedDeliveryRequest,
    DeliveryCost,
    DeliveryCostRequest,
    DeliveryData,
    DeliveryDataRequest,
    DeliveryMatch,
    DeliveryMatchRequest,
    FactorySpotAgio,
    FactorySpotAgioRequest,
    PlywoodDeliveryCommodity,
    PlywoodDeliveryCommodityRequest,
    RollDeliverySellerIntention,
    RollDeliverySellerIntentionRequest,
    TcCongregateDelivery,
    TcCongregateDeliveryRequest,
    TdBondedDelivery,
    TdBondedDeliveryRequest,
    VarietyTradeDateRequest,
    WarehousePremium,
    WarehousePremiumRequest,
    WarehousePremiumResponse,
)
from dceapi.models.market import (
    STAT_CONTENT_OPENI,
    STAT_CONTENT_PRICE,
    STAT_CONTENT_TURNOVER,
    STAT_CONTENT_VOLUME,
    ContractMonthMaxOpeni,
    ContractMonthMaxPrice,
    ContractMonthMaxRequest,
    ContractMonthMaxTurnover,
    ContractMonthMaxVolume,
    DivisionPriceInfo,
    DivisionPriceInfoRequest,
    Quote,
    QuotesRequest,
    RiseFallEvent,
    RiseFallEventRequest,
    WarehouseReceipt,
    WarehouseReceiptEntry,
    WarehouseReceiptRequest,
)
from dceapi.models.member import (
    DailyRankingRequest,
    DailyRankingResponse,
    PhaseRanking,
    PhaseRankingRequest,
    Ranking,
)
from dceapi.models.news import (
    Article,
    ArticleDetail,
    ArticleDetailRequest,
    GetArticleByPageRequest,
    GetArticleByPageResponse,
)
from dceapi.models.settle import SettleParam, SettleParamRequest
from dceapi.models.trade import (
    ArbitrageContract,
    ArbitrageContractRequest,
    ContractInfo,
    ContractInfoRequest,
    DayTradeParamRequest,
    MainSeriesInfo,
    MainSeriesInfoRequest,
    MarginArbiPerfPara,
    MarginArbiPerfParaRequest,
    NewContractInfo,
    NewContractInfoRequest,
    TradeParam,
    TradingParam,
    TradingParamRequest,
)

__all__ = [
    # Base
    "ApiResponse",
    "DceModel",
    "DceRequest",
    "NullableFloat",
    "NullableInt",
    "NullableStr",
    "RequestOptions",
    "TokenResponse",
    # Common
    "TradeDate",
    "Variety",
    "VarietyMonthYearStat",
    "VarietyMonthYearStatRequest",
    # News
    "Article",
    "ArticleDetail",
    "ArticleDetailRequest",
    "GetArticleByPageRequest",
    "GetArticleByPageResponse",
    # Market
    "STAT_CONTENT_OPENI",
    "STAT_CONTENT_PRICE",
    "STAT_CONTENT_TURNOVER",
    "STAT_CONTENT_VOLUME",
    "ContractMonthMaxOpeni",
    "ContractMonthMaxPrice",
    "ContractMonthMaxRequest",
    "ContractMonthMaxTurnover",
    "ContractMonthMaxVolume",
    "DivisionPriceInfo",
    "DivisionPriceInfoRequest",
    "Quote",
    "QuotesRequest",
    "RiseFallEvent",
    "RiseFallEventRequest",
    "WarehouseReceipt",
    "WarehouseReceiptEntry",
    "WarehouseReceiptRequest",
    # Trade
    "ArbitrageContract",
    "ArbitrageContractRequest",
    "ContractInfo",
    "ContractInfoRequest",
    "DayTradeParamRequest",
    "MainSeriesInfo",
    "MainSeriesInfoRequest",
    "MarginArbiPerfPara",
    "MarginArbiPerfParaRequest",
    "NewContractInfo",
    "NewContractInfoRequest",
    "TradeParam",
    "TradingParam",
    "TradingParamRequest",
    # Settle
    "SettleParam",
    "SettleParamRequest",
    # Member
    "DailyRankingRequest",
    "DailyRankingResponse",
    "PhaseRanking",
    "PhaseRankingRequest",
    "Ranking",
    # Delivery
    "BondedDelivery",
    "BondedDeliveryRequest",
    "DeliveryCost",
    "DeliveryCostRequest",
    "DeliveryData",
    "DeliveryDataRequest",
    "DeliveryMatch",
    "DeliveryMatchRequest",
    "FactorySpotAgio",
    "FactorySpotAgioRequest",
    "PlywoodDeliveryCommodity",
    "PlywoodDeliveryCommodityRequest",
    "RollDeliverySellerIntention",
    "RollDeliverySellerIntentionRequest",
    "TcCongregateDelivery",
    "TcCongregateDeliveryRequest",
    "TdBondedDelivery",
    "TdBondedDeliveryRequest",
    "VarietyTradeDateRequest",
    "WarehousePremium",
    "WarehousePremiumRequest",
    "WarehousePremiumResponse",
]
