"""Эндпоинты рыночных данных: котировки и статистика по контрактам."""

from typing import TYPE_CHECKING

from dceapi.models.base import RequestOptions
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
    WarehouseReceiptRequest,
)

if TYPE_CHECKING:
    from dceapi.api_client_manager import DceApiClientManager

PATH_GET_NIGHT_QUOTES = "/dceapi/forward/publicweb/dailystat/tiNightQuotes"
PATH_GET_DAY_QUOTES = "/dceapi/forward/publicweb/dailystat/dayQuotes"
PATH_GET_WEEK_QUOTES = "/dceapi/forward/publicweb/dailystat/weekQuotes"
PATH_GET_MONTH_QUOTES = "/dceapi/forward/publicweb/dailystat/monthQuotes"
PATH_GET_CONTRACT_MONTH_MAX = "/dceapi/forward/publicweb/phasestat/contractMonthMax"
PATH_GET_RISE_FALL_EVENT = "/dceapi/forward/publicweb/phasestat/riseFallEvent"
PATH_GET_DIVISION_PRICE_INFO = "/dceapi/forward/publicweb/dailystat/divisionPriceInfo"
PATH_GET_WAREHOUSE_RECEIPT = "/dceapi/forward/publicweb/dailystat/wbillWeeklyQuotes"


class MarketService:
    """Котировки и рыночная статистика."""

    def __init__(self, client: "DceApiClientManager") -> None:
        self._client = client

    # ========== Котировки ==========

    async def get_night_quotes(
        self, req: QuotesRequest, options: RequestOptions | None = None
    ) -> list[Quote]:
        """Получить котировки ночной сессии."""
        return await self._client.post(
            PATH_GET_NIGHT_QUOTES, list[Quote], body=req, options=options
        )

    async def get_day_quotes(
        self, req: QuotesRequest, options: RequestOptions | None = None
    ) -> list[Quote]:
        """Получить котировки дневной сессии."""
        return await self._client.post(
            PATH_GET_DAY_QUOTES, list[Quote], body=req, options=options
        )

    async def get_week_quotes(
        self, req: QuotesRequest, options: RequestOptions | None = None
    ) -> list[Quote]:
        """Получить недельные котировки."""
        return await self._client.post(
            PATH_GET_WEEK_QUOTES, list[Quote], body=req, options=options
        )

    async def get_month_quotes(
        self, req: QuotesRequest, options: RequestOptions | None = None
    ) -> list[Quote]:
        """Получить месячные котировки."""
        return await self._client.post(
            PATH_GET_MONTH_QUOTES, list[Quote], body=req, options=options
        )

    # ========== Месячная статистика по контрактам ==========
    #
    # Один эндпоинт, вид статистики задаётся полем stat_content.
    # Методы ниже подставляют нужное значение сами.

    async def get_contract_month_max_volume(
        self, req: ContractMonthMaxRequest, options: RequestOptions | None = None
    ) -> list[ContractMonthMaxVolume]:
        """Получить месячную статистику объёма торгов."""
        return await self._client.post(
            PATH_GET_CONTRACT_MONTH_MAX,
            list[ContractMonthMaxVolume],
            body=req.model_copy(update={"stat_content": STAT_CONTENT_VOLUME}),
            options=options,
        )

    async def get_contract_month_max_turnover(
        self, req: ContractMonthMaxRequest, options: RequestOptions | None = None
    ) -> list[ContractMonthMaxTurnover]:
        """Получить месячную статистику оборота."""
        return await self._client.post(
            PATH_GET_CONTRACT_MONTH_MAX,
            list[ContractMonthMaxTurnover],
            body=req.model_copy(update={"stat_content": STAT_CONTENT_TURNOVER}),
            options=options,
        )

    async def get_contract_month_max_openi(
        self, req: ContractMonthMaxRequest, options: RequestOptions | None = None
    ) -> list[ContractMonthMaxOpeni]:
        """Получить месячную статистику открытого интереса."""
        return await self._client.post(
            PATH_GET_CONTRACT_MONTH_MAX,
            list[ContractMonthMaxOpeni],
            body=req.model_copy(update={"stat_content": STAT_CONTENT_OPENI}),
            options=options,
        )

    async def get_contract_month_max_price(
        self, req: ContractMonthMaxRequest, options: RequestOptions | None = None
    ) -> list[ContractMonthMaxPrice]:
        """Получить месячную статистику цен."""
        return await self._client.post(
            PATH_GET_CONTRACT_MONTH_MAX,
            list[ContractMonthMaxPrice],
            body=req.model_copy(update={"stat_content": STAT_CONTENT_PRICE}),
            options=options,
        )

    # ========== Прочее ==========

    async def get_rise_fall_event(
        self, req: RiseFallEventRequest, options: RequestOptions | None = None
    ) -> list[RiseFallEvent]:
        """Получить случаи достижения ценовых лимитов за период."""
        return await self._client.post(
            PATH_GET_RISE_FALL_EVENT, list[RiseFallEvent], body=req, options=options
        )

    async def get_division_price_info(
        self, req: DivisionPriceInfoRequest, options: RequestOptions | None = None
    ) -> list[DivisionPriceInfo]:
        """Получить расчётные цены контрактов по времени."""
        return await self._client.post(
            PATH_GET_DIVISION_PRICE_INFO,
            list[DivisionPriceInfo],
            body=req,
            options=options,
        )

    async def get_warehouse_receipt(
        self, req: WarehouseReceiptRequest, options: RequestOptions | None = None
    ) -> WarehouseReceipt:
        """Получить дневной отчёт о складских свидетельствах."""
        return await self._client.post(
            PATH_GET_WAREHOUSE_RECEIPT, WarehouseReceipt, body=req, options=options
        )
