"""Эндпоинты торговых параметров и справочника контрактов."""

from typing import TYPE_CHECKING, Any

from dceapi.models.base import RequestOptions
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

if TYPE_CHECKING:
    from dceapi.api_client_manager import DceApiClientManager

PATH_GET_DAY_TRADE_PARAM = "/dceapi/forward/publicweb/tradepara/dayTradPara"
PATH_GET_MONTH_TRADE_PARAM = "/dceapi/forward/publicweb/tradepara/monthTradPara"
PATH_GET_CONTRACT_INFO = "/dceapi/forward/publicweb/tradepara/contractInfo"
PATH_GET_ARBITRAGE_CONTRACT = "/dceapi/forward/publicweb/tradepara/arbitrageContract"
PATH_GET_TRADING_PARAM = "/dceapi/forward/publicweb/tradepara/tradingParam"
PATH_GET_MARGIN_ARBI_PERF_PARA = (
    "/dceapi/forward/publicweb/tradepara/marginArbiPerfPara"
)
PATH_GET_NEW_CONTRACT_INFO = "/dceapi/forward/publicweb/tradepara/newContractInfo"
PATH_GET_MAIN_SERIES_INFO = "/dceapi/forward/publicweb/tradepara/mainSeriesInfo"


class TradeService:
    """Торговые параметры: маржа, лимиты, контракты."""

    def __init__(self, client: "DceApiClientManager") -> None:
        self._client = client

    async def get_day_trade_param(
        self, req: DayTradeParamRequest, options: RequestOptions | None = None
    ) -> list[TradeParam]:
        """Получить дневные торговые параметры товара.

        Ставки маржи и ценовые лимиты по каждому контракту.
        """
        return await self._client.post(
            PATH_GET_DAY_TRADE_PARAM, list[TradeParam], body=req, options=options
        )

    async def get_month_trade_param(
        self, options: RequestOptions | None = None
    ) -> dict[str, Any]:
        """Получить месячные торговые параметры.

        Формат ответа не фиксирован, данные возвращаются как есть.
        """
        return await self._client.post(
            PATH_GET_MONTH_TRADE_PARAM, dict[str, Any], body={}, options=options
        )

    async def get_contract_info(
        self, req: ContractInfoRequest, options: RequestOptions | None = None
    ) -> list[ContractInfo]:
        """Получить параметры контрактов товара."""
        return await self._client.post(
            PATH_GET_CONTRACT_INFO, list[ContractInfo], body=req, options=options
        )

    async def get_arbitrage_contract(
        self, lang: str | None = None, options: RequestOptions | None = None
    ) -> list[ArbitrageContract]:
        """Получить список арбитражных контрактов.

        Args:
            lang: Язык (zh или en), по умолчанию zh
            options: Переопределения параметров запроса
        """
        return await self._client.post(
            PATH_GET_ARBITRAGE_CONTRACT,
            list[ArbitrageContract],
            body=ArbitrageContractRequest(lang=lang or "zh"),
            options=options,
        )

    async def get_trading_param(
        self, lang: str | None = None, options: RequestOptions | None = None
    ) -> list[TradingParam]:
        """Получить сводные торговые параметры по всем товарам.

        Args:
            lang: Язык (zh или en), по умолчанию zh
            options: Переопределения параметров запроса
        """
        return await self._client.post(
            PATH_GET_TRADING_PARAM,
            list[TradingParam],
            body=TradingParamRequest(lang=lang or "zh"),
            options=options,
        )

    async def get_margin_arbi_perf_para(
        self, req: MarginArbiPerfParaRequest, options: RequestOptions | None = None
    ) -> list[MarginArbiPerfPara]:
        """Получить маржу и комиссии арбитражных стратегий."""
        return await self._client.post(
            PATH_GET_MARGIN_ARBI_PERF_PARA,
            list[MarginArbiPerfPara],
            body=req,
            options=options,
        )

    async def get_new_contract_info(
        self, req: NewContractInfoRequest, options: RequestOptions | None = None
    ) -> list[NewContractInfo]:
        """Получить недавно добавленные контракты."""
        return await self._client.post(
            PATH_GET_NEW_CONTRACT_INFO,
            list[NewContractInfo],
            body=req,
            options=options,
        )

    async def get_main_series_info(
        self, req: MainSeriesInfoRequest, options: RequestOptions | None = None
    ) -> list[MainSeriesInfo]:
        """Получить контракты для непрерывного котирования маркет-мейкерами."""
        return await self._client.post(
            PATH_GET_MAIN_SERIES_INFO, list[MainSeriesInfo], body=req, options=options
        )
