"""Модели данных о поставке: статистика, издержки, склады, премии."""

from typing import Any

from pydantic import Field

from dceapi.models.base import (
    DceModel,
    DceRequest,
    NullableFloat,
    NullableInt,
    NullableStr,
)


class VarietyTradeDateRequest(DceRequest):
    """Запрос по товару на торговый день."""

    variety_id: str
    trade_date: str


class DeliveryDataRequest(DceRequest):
    """Запрос статистики поставки за период (месяцы YYYYMM)."""

    variety_id: str
    start_month: str
    end_month: str
    # 0 физическая поставка, 1 поставка по средней цене
    variety_type: str = "0"


class DeliveryData(DceModel):
    variety: NullableStr = ""
    contract_id: NullableStr = ""
    delivery_date: NullableStr = ""
    delivery_qty: NullableInt = 0
    delivery_amt: NullableFloat = 0


class DeliveryMatchRequest(DceRequest):
    variety_id: str
    contract_id: str | None = None
    start_month: str
    end_month: str


class DeliveryMatch(DceModel):
    """Сопоставление покупателя и продавца при поставке."""

    contract_id: NullableStr = ""
    match_date: NullableStr = ""
    buy_member_id: NullableStr = ""
    sell_member_id: NullableStr = ""
    delivery_qty: NullableInt = 0
    delivery_price: NullableFloat = 0


class DeliveryCostRequest(DceRequest):
    variety_id: str
    variety_type: str = "0"
    lang: str = "zh"


class DeliveryCost(DceModel):
    variety: NullableStr = ""
    variety_id: NullableStr = ""
    delivery_fee: NullableFloat = 0
    inspection_fee: NullableFloat = 0
    storage_fee: NullableFloat = 0


class WarehousePremiumRequest(VarietyTradeDateRequest):
    pass


class WarehousePremium(DceModel):
    """Надбавка (скидка) склада к цене поставки."""

    variety: NullableStr = ""
    wh_name: NullableStr = ""
    agio: NullableFloat = 0
    avg_agio: NullableFloat = 0


class WarehousePremiumResponse(DceModel):
    column_list: list[Any] = Field(default_factory=list)
    entity_list: list[WarehousePremium] = Field(default_factory=list)


class TcCongregateDeliveryRequest(VarietyTradeDateRequest):
    pass


class TcCongregateDelivery(DceModel):
    """Сводная статистика двусторонней поставки."""

    variety: NullableStr = ""
    contract_id: NullableStr = ""
    wh_name: NullableStr = ""
    delivery_qty: NullableInt = 0
    delivery_price: NullableFloat = 0


class RollDeliverySellerIntentionRequest(VarietyTradeDateRequest):
    pass


class RollDeliverySellerIntention(DceModel):
    variety: NullableStr = ""
    contract_id: NullableStr = ""
    wh_name: NullableStr = ""
    quantity: NullableInt = 0
    intention_date: NullableStr = ""


class BondedDeliveryRequest(VarietyTradeDateRequest):
    pass


class BondedDelivery(DceModel):
    """Расчётная цена поставки через таможенный склад."""

    variety: NullableStr = ""
    contract_id: NullableStr = ""
    delivery_date: NullableStr = ""
    bonded_price: NullableStr = ""


class TdBondedDeliveryRequest(VarietyTradeDateRequest):
    pass


class TdBondedDelivery(DceModel):
    variety: NullableStr = ""
    contract_id: NullableStr = ""
    delivery_date: NullableStr = ""
    td_bonded_price: NullableStr = ""


class FactorySpotAgioRequest(DceRequest):
    variety_id: str
    trade_date: str | None = None


class FactorySpotAgio(DceModel):
    """Базис заводской спот-цены к фьючерсу."""

    variety: NullableStr = ""
    factory_name: NullableStr = ""
    agio: NullableFloat = 0
    trade_date: NullableStr = ""


class PlywoodDeliveryCommodityRequest(DceRequest):
    variety_id: str


class PlywoodDeliveryCommodity(DceModel):
    variety: NullableStr = ""
    factory_name: NullableStr = ""
    brand: NullableStr = ""
    specification: NullableStr = ""
    thickness: NullableStr = ""
