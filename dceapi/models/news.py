"""Модели новостей и объявлений биржи."""

from pydantic import Field

from dceapi.models.base import DceModel, DceRequest, NullableInt, NullableStr

DEFAULT_SITE_ID = 5


class Article(DceModel):
    """Статья или объявление."""

    id: NullableStr = ""
    title: NullableStr = ""
    sub_title: NullableStr = ""
    summary: NullableStr = Field(default="", alias="infoSummary")
    show_date: NullableStr = ""
    create_date: NullableStr = ""
    content: NullableStr = ""
    keywords: NullableStr = ""
    page_name: NullableStr = ""


# Детальная карточка приходит в том же формате
ArticleDetail = Article


class GetArticleByPageRequest(DceRequest):
    """Запрос страницы статей раздела."""

    column_id: str
    page_no: int = 1
    page_size: int = 10
    site_id: int = DEFAULT_SITE_ID


class GetArticleByPageResponse(DceModel):
    """Страница статей раздела."""

    column_id: NullableStr = ""
    total_count: NullableInt = 0
    result_list: list[Article] = Field(default_factory=list)


class ArticleDetailRequest(DceRequest):
    article_id: str
