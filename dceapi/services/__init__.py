"""Сервисы DCE API по категориям.

Каждый сервис держит ссылку на DceApiClientManager и переводит
типизированный запрос в вызов эндпоинта.
"""

from dceapi.services.common import CommonService
from dceapi.services.delivery import DeliveryService
from dceapi.services.market import MarketService
from dceapi.services.member import MemberService
from dceapi.services.news import NewsService, is_valid_column_id
from dceapi.services.settle import SettleService
from dceapi.services.trade import TradeService

__all__ = [
    "CommonService",
    "DeliveryService",
    "MarketService",
    "MemberService",
    "NewsService",
    "SettleService",
    "TradeService",
    "is_valid_column_id",
]
