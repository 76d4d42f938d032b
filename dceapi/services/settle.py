"""Эндпоинты расчётных параметров."""

from typing import TYPE_CHECKING

from dceapi.models.base import RequestOptions
from dceapi.models.settle import SettleParam, SettleParamRequest

if TYPE_CHECKING:
    from dceapi.api_client_manager import DceApiClientManager

PATH_GET_SETTLE_PARAM = "/dceapi/forward/publicweb/tradepara/futAndOptSettle"


class SettleService:
    def __init__(self, client: "DceApiClientManager") -> None:
        self._client = client

    async def get_settle_param(
        self,
        req: SettleParamRequest,
        options: RequestOptions | None = None,
    ) -> list[SettleParam]:
        """Получить расчётные цены, комиссии и ставки маржи по контрактам.

        Args:
            req: Товар, торговый день, тип торговли и язык
            options: Переопределения параметров запроса

        Returns:
            Список расчётных параметров
        """
        return await self._client.post(
            PATH_GET_SETTLE_PARAM, list[SettleParam], body=req, options=options
        )
