"""Эндпоинты рейтингов участников торгов."""

from typing import TYPE_CHECKING

from dceapi.models.base import RequestOptions
from dceapi.models.member import (
    DailyRankingRequest,
    DailyRankingResponse,
    PhaseRanking,
    PhaseRankingRequest,
)

if TYPE_CHECKING:
    from dceapi.api_client_manager import DceApiClientManager

PATH_GET_DAILY_RANKING = "/dceapi/forward/publicweb/dailystat/memberDealPosi"
PATH_GET_PHASE_RANKING = "/dceapi/forward/publicweb/phasestat/memberDealCh"


class MemberService:
    """Рейтинги участников по объёму и позициям."""

    def __init__(self, client: "DceApiClientManager") -> None:
        self._client = client

    async def get_daily_ranking(
        self,
        req: DailyRankingRequest,
        options: RequestOptions | None = None,
    ) -> DailyRankingResponse:
        """Получить дневной рейтинг по контракту.

        Рейтинг по объёму, длинным и коротким позициям.
        """
        return await self._client.post(
            PATH_GET_DAILY_RANKING, DailyRankingResponse, body=req, options=options
        )

    async def get_phase_ranking(
        self,
        req: PhaseRankingRequest,
        options: RequestOptions | None = None,
    ) -> list[PhaseRanking]:
        """Получить рейтинг участников за период."""
        return await self._client.post(
            PATH_GET_PHASE_RANKING, list[PhaseRanking], body=req, options=options
        )
