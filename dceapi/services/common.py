"""Общие эндпоинты: торговый день, список товаров, статистика товаров."""

from typing import TYPE_CHECKING

from dceapi.models.base import RequestOptions
from dceapi.models.common import (
    TradeDate,
    Variety,
    VarietyMonthYearStat,
    VarietyMonthYearStatRequest,
)

if TYPE_CHECKING:
    from dceapi.api_client_manager import DceApiClientManager

PATH_GET_CURR_TRADE_DATE = "/dceapi/forward/publicweb/maxTradeDate"
PATH_GET_VARIETY_LIST = "/dceapi/forward/publicweb/variety"
PATH_GET_VARIETY_MONTH_YEAR_STAT = (
    "/dceapi/forward/publicweb/phasestat/varietyMonthYearStat"
)


class CommonService:
    """Общие справочные данные."""

    def __init__(self, client: "DceApiClientManager") -> None:
        self._client = client

    async def get_curr_trade_date(
        self, options: RequestOptions | None = None
    ) -> TradeDate:
        """Получить текущий (последний) торговый день."""
        return await self._client.get(
            PATH_GET_CURR_TRADE_DATE, TradeDate, options=options
        )

    async def get_variety_list(
        self, options: RequestOptions | None = None
    ) -> list[Variety]:
        """Получить список товаров.

        Args:
            options: trade_type выбирает фьючерсы (1) или опционы (2)

        Returns:
            Список товаров
        """
        return await self._client.get(
            PATH_GET_VARIETY_LIST, list[Variety], options=options
        )

    async def get_variety_month_year_stat(
        self,
        req: VarietyMonthYearStatRequest,
        options: RequestOptions | None = None,
    ) -> list[VarietyMonthYearStat]:
        """Получить статистику товаров за месяц и с начала года."""
        return await self._client.post(
            PATH_GET_VARIETY_MONTH_YEAR_STAT,
            list[VarietyMonthYearStat],
            body=req,
            options=options,
        )
