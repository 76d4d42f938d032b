"""Эндпоинты новостей и объявлений биржи."""

from typing import TYPE_CHECKING

from dceapi.exceptions import DceApiValidationException
from dceapi.models.base import RequestOptions
from dceapi.models.news import (
    DEFAULT_SITE_ID,
    ArticleDetail,
    ArticleDetailRequest,
    GetArticleByPageRequest,
    GetArticleByPageResponse,
)

if TYPE_CHECKING:
    from dceapi.api_client_manager import DceApiClientManager

PATH_GET_ARTICLE_BY_PAGE = "/dceapi/cms/info/articleByPage"
PATH_GET_ARTICLE_DETAIL = "/dceapi/cms/info/articleDetail"

# Разделы сайта, доступные через API
VALID_COLUMN_IDS = frozenset(
    {
        "244",  # Объявления биржи
        "245",  # Уведомления биржи
        "246",  # Информация о поставке
        "248",  # Объявления системы обслуживания участников
        "1076",  # Объявления по опционам
        "242",  # Новости
    }
)


def is_valid_column_id(column_id: str) -> bool:
    """Проверить, что раздел доступен через API."""
    return column_id in VALID_COLUMN_IDS


class NewsService:
    """Статьи и объявления."""

    def __init__(self, client: "DceApiClientManager") -> None:
        self._client = client

    async def get_article_by_page(
        self,
        req: GetArticleByPageRequest,
        options: RequestOptions | None = None,
    ) -> GetArticleByPageResponse:
        """Получить страницу статей раздела.

        Args:
            req: Раздел, номер и размер страницы
            options: Переопределения параметров запроса

        Returns:
            Страница статей с общим количеством

        Raises:
            DceApiValidationException: Если раздел не из VALID_COLUMN_IDS
        """
        if not is_valid_column_id(req.column_id):
            raise DceApiValidationException(
                "column_id",
                "допустимые значения: " + ", ".join(sorted(VALID_COLUMN_IDS)),
            )
        if not req.site_id:
            req = req.model_copy(update={"site_id": DEFAULT_SITE_ID})

        return await self._client.post(
            PATH_GET_ARTICLE_BY_PAGE,
            GetArticleByPageResponse,
            body=req,
            options=options,
        )

    async def get_article_detail(
        self,
        article_id: str,
        options: RequestOptions | None = None,
    ) -> ArticleDetail:
        """Получить статью по идентификатору.

        Raises:
            DceApiValidationException: Если article_id пустой
        """
        if not article_id:
            raise DceApiValidationException("article_id", "article_id обязателен")

        return await self._client.post(
            PATH_GET_ARTICLE_DETAIL,
            ArticleDetail,
            body=ArticleDetailRequest(article_id=article_id),
            options=options,
        )
