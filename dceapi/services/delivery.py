"""Эндпоинты данных о поставке."""

from typing import TYPE_CHECKING

from dceapi.exceptions import DceApiValidationException
from dceapi.models.base import RequestOptions
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
    WarehousePremiumRequest,
    WarehousePremiumResponse,
)

if TYPE_CHECKING:
    from dceapi.api_client_manager import DceApiClientManager

PATH_GET_DELIVERY_DATA = "/dceapi/forward/publicweb/deliverystat/delivery"
PATH_GET_DELIVERY_MATCH = "/dceapi/forward/publicweb/deliverystat/deliveryMatch"
PATH_GET_DELIVERY_COST = "/dceapi/forward/publicweb/deliverypara/deliveryCosts"
PATH_GET_WAREHOUSE_PREMIUM = "/dceapi/forward/publicweb/deliverypara/floatingAgio"
PATH_GET_TC_CONGREGATE_DELIVERY = (
    "/dceapi/forward/publicweb/DeliveryStatistics/tcCongregateDeliveryQuotes"
)
PATH_GET_ROLL_DELIVERY_SELLER_INTENTION = (
    "/dceapi/forward/publicweb/DeliveryStatistics/rollDeliverySellerIntention"
)
PATH_GET_BONDED_DELIVERY = "/dceapi/forward/publicweb/quotesdata/bondedDelivery"
PATH_GET_TD_BONDED_DELIVERY = "/dceapi/forward/publicweb/quotesdata/tdBondedDelivery"
PATH_GET_FACTORY_SPOT_AGIO = (
    "/dceapi/forward/publicweb/quotesdata/queryFactorySpotAgioQuotes"
)
PATH_GET_PLYWOOD_DELIVERY_COMMODITY = (
    "/dceapi/forward/publicweb/deliverystat/queryPlywoodDeliveryCommodity"
)


class DeliveryService:
    """Статистика поставки, издержки, склады и премии."""

    def __init__(self, client: "DceApiClientManager") -> None:
        self._client = client

    # ========== Статистика поставки ==========

    async def get_delivery_data(
        self, req: DeliveryDataRequest, options: RequestOptions | None = None
    ) -> list[DeliveryData]:
        """Получить объёмы поставки за период."""
        return await self._client.post(
            PATH_GET_DELIVERY_DATA, list[DeliveryData], body=req, options=options
        )

    async def get_delivery_match(
        self, req: DeliveryMatchRequest, options: RequestOptions | None = None
    ) -> list[DeliveryMatch]:
        """Получить сопоставления покупателей и продавцов при поставке."""
        return await self._client.post(
            PATH_GET_DELIVERY_MATCH, list[DeliveryMatch], body=req, options=options
        )

    # ========== Параметры поставки ==========

    async def get_delivery_cost(
        self,
        variety_id: str,
        variety_type: str = "0",
        options: RequestOptions | None = None,
    ) -> list[DeliveryCost]:
        """Получить издержки поставки по товару.

        Args:
            variety_id: Товар, "all" для всех товаров
            variety_type: "0" физическая поставка, "1" по средней цене
            options: Переопределения параметров запроса

        Returns:
            Список издержек

        Raises:
            DceApiValidationException: Если variety_id пустой
        """
        if not variety_id:
            raise DceApiValidationException("variety_id", "variety_id обязателен")

        return await self._client.post(
            PATH_GET_DELIVERY_COST,
            list[DeliveryCost],
            body=DeliveryCostRequest(variety_id=variety_id, variety_type=variety_type),
            options=options,
        )

    async def get_warehouse_premium(
        self,
        variety_id: str,
        trade_date: str,
        options: RequestOptions | None = None,
    ) -> WarehousePremiumResponse:
        """Получить надбавки складов к цене поставки.

        Args:
            variety_id: Товар
            trade_date: Торговый день в формате YYYYMMDD
            options: Переопределения параметров запроса

        Raises:
            DceApiValidationException: Если variety_id пустой
        """
        if not variety_id:
            raise DceApiValidationException("variety_id", "variety_id обязателен")

        return await self._client.post(
            PATH_GET_WAREHOUSE_PREMIUM,
            WarehousePremiumResponse,
            body=WarehousePremiumRequest(variety_id=variety_id, trade_date=trade_date),
            options=options,
        )

    # ========== Поставка по режимам ==========

    async def get_tc_congregate_delivery(
        self, req: TcCongregateDeliveryRequest, options: RequestOptions | None = None
    ) -> list[TcCongregateDelivery]:
        """Получить сводную статистику двусторонней поставки."""
        return await self._client.post(
            PATH_GET_TC_CONGREGATE_DELIVERY,
            list[TcCongregateDelivery],
            body=req,
            options=options,
        )

    async def get_roll_delivery_seller_intention(
        self,
        req: RollDeliverySellerIntentionRequest,
        options: RequestOptions | None = None,
    ) -> list[RollDeliverySellerIntention]:
        """Получить намерения продавцов по скользящей поставке."""
        return await self._client.post(
            PATH_GET_ROLL_DELIVERY_SELLER_INTENTION,
            list[RollDeliverySellerIntention],
            body=req,
            options=options,
        )

    async def get_bonded_delivery(
        self, req: BondedDeliveryRequest, options: RequestOptions | None = None
    ) -> list[BondedDelivery]:
        """Получить расчётные цены поставки через таможенный склад."""
        return await self._client.post(
            PATH_GET_BONDED_DELIVERY, list[BondedDelivery], body=req, options=options
        )

    async def get_td_bonded_delivery(
        self, req: TdBondedDeliveryRequest, options: RequestOptions | None = None
    ) -> list[TdBondedDelivery]:
        return await self._client.post(
            PATH_GET_TD_BONDED_DELIVERY,
            list[TdBondedDelivery],
            body=req,
            options=options,
        )

    async def get_factory_spot_agio(
        self, req: FactorySpotAgioRequest, options: RequestOptions | None = None
    ) -> list[FactorySpotAgio]:
        """Получить базис заводской спот-цены к фьючерсу."""
        return await self._client.post(
            PATH_GET_FACTORY_SPOT_AGIO, list[FactorySpotAgio], body=req, options=options
        )

    async def get_plywood_delivery_commodity(
        self,
        req: PlywoodDeliveryCommodityRequest,
        options: RequestOptions | None = None,
    ) -> list[PlywoodDeliveryCommodity]:
        return await self._client.post(
            PATH_GET_PLYWOOD_DELIVERY_COMMODITY,
            list[PlywoodDeliveryCommodity],
            body=req,
            options=options,
        )
