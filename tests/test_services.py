"""Тесты для сервисов DCE API.

Проверяют пути, типы ответов и тела запросов без обращения к сети:
методы get/post менеджера подменяются моками.
"""

from collections.abc import Callable
from typing import Any
from unittest.mock import AsyncMock, patch

import pytest

from dceapi import (
    DceApiClientManager,
    DceApiValidationException,
    RequestOptions,
    is_valid_column_id,
)
from dceapi.models import (
    ArbitrageContractRequest,
    ArticleDetail,
    ArticleDetailRequest,
    ContractMonthMaxOpeni,
    ContractMonthMaxPrice,
    ContractMonthMaxRequest,
    ContractMonthMaxTurnover,
    ContractMonthMaxVolume,
    DeliveryCost,
    DeliveryCostRequest,
    GetArticleByPageRequest,
    GetArticleByPageResponse,
    TradeDate,
    Variety,
    WarehousePremiumRequest,
    WarehousePremiumResponse,
)
from dceapi.services import common, delivery, market, news, trade

# Маркируем все тесты в этом модуле как unit-тесты
pytestmark = pytest.mark.unit


class TestColumnIds:
    """Тесты для is_valid_column_id."""

    @pytest.mark.parametrize("column_id", ["244", "245", "246", "248", "1076", "242"])
    def test_valid(self, column_id: str) -> None:
        assert is_valid_column_id(column_id) is True

    @pytest.mark.parametrize("column_id", ["", "243", "999", " 244"])
    def test_invalid(self, column_id: str) -> None:
        assert is_valid_column_id(column_id) is False


class TestCommonService:
    """Тесты общих эндпоинтов."""

    async def test_curr_trade_date(self, client_manager: DceApiClientManager) -> None:
        with patch.object(
            client_manager, "get", new_callable=AsyncMock, return_value=TradeDate()
        ) as mock_get:
            await client_manager.common.get_curr_trade_date()

        mock_get.assert_awaited_once_with(
            common.PATH_GET_CURR_TRADE_DATE, TradeDate, options=None
        )

    async def test_variety_list_passes_options(
        self, client_manager: DceApiClientManager
    ) -> None:
        options = RequestOptions(trade_type=2)
        with patch.object(
            client_manager, "get", new_callable=AsyncMock, return_value=[]
        ) as mock_get:
            await client_manager.common.get_variety_list(options)

        mock_get.assert_awaited_once_with(
            common.PATH_GET_VARIETY_LIST, list[Variety], options=options
        )


class TestNewsService:
    """Тесты эндпоинтов новостей."""

    async def test_invalid_column_rejected(
        self, client_manager: DceApiClientManager
    ) -> None:
        """Недопустимый раздел отклоняется без запроса."""
        with patch.object(client_manager, "post", new_callable=AsyncMock) as mock_post:
            with pytest.raises(DceApiValidationException) as exc_info:
                await client_manager.news.get_article_by_page(
                    GetArticleByPageRequest(column_id="999")
                )

        assert exc_info.value.field == "column_id"
        mock_post.assert_not_awaited()

    async def test_zero_site_id_defaults(
        self, client_manager: DceApiClientManager
    ) -> None:
        """site_id = 0 заменяется значением по умолчанию."""
        with patch.object(client_manager, "post", new_callable=AsyncMock) as mock_post:
            await client_manager.news.get_article_by_page(
                GetArticleByPageRequest(column_id="244", site_id=0)
            )

        mock_post.assert_awaited_once_with(
            news.PATH_GET_ARTICLE_BY_PAGE,
            GetArticleByPageResponse,
            body=GetArticleByPageRequest(column_id="244", site_id=5),
            options=None,
        )

    async def test_empty_article_id_rejected(
        self, client_manager: DceApiClientManager
    ) -> None:
        with patch.object(client_manager, "post", new_callable=AsyncMock) as mock_post:
            with pytest.raises(DceApiValidationException) as exc_info:
                await client_manager.news.get_article_detail("")

        assert exc_info.value.field == "article_id"
        mock_post.assert_not_awaited()

    async def test_article_detail(self, client_manager: DceApiClientManager) -> None:
        with patch.object(client_manager, "post", new_callable=AsyncMock) as mock_post:
            await client_manager.news.get_article_detail("12345")

        mock_post.assert_awaited_once_with(
            news.PATH_GET_ARTICLE_DETAIL,
            ArticleDetail,
            body=ArticleDetailRequest(article_id="12345"),
            options=None,
        )


class TestMarketService:
    """Тесты рыночных эндпоинтов."""

    @pytest.mark.parametrize(
        ("method_name", "response_type", "stat_content"),
        [
            ("get_contract_month_max_volume", ContractMonthMaxVolume, "0"),
            ("get_contract_month_max_turnover", ContractMonthMaxTurnover, "1"),
            ("get_contract_month_max_openi", ContractMonthMaxOpeni, "2"),
            ("get_contract_month_max_price", ContractMonthMaxPrice, "3"),
        ],
    )
    async def test_contract_month_max_sets_stat_content(
        self,
        client_manager: DceApiClientManager,
        method_name: str,
        response_type: Any,
        stat_content: str,
    ) -> None:
        """Каждый вид статистики задаёт свой stat_content."""
        req = ContractMonthMaxRequest(
            variety_id="a",
            start_month="202401",
            end_month="202403",
            stat_content="3" if stat_content == "0" else "0",
        )
        method: Callable[..., Any] = getattr(client_manager.market, method_name)

        with patch.object(client_manager, "post", new_callable=AsyncMock) as mock_post:
            await method(req)

        args, kwargs = mock_post.await_args
        assert args == (market.PATH_GET_CONTRACT_MONTH_MAX, list[response_type])
        assert kwargs["body"].stat_content == stat_content
        assert kwargs["body"].variety_id == "a"


class TestTradeService:
    """Тесты торговых параметров."""

    async def test_arbitrage_contract_default_lang(
        self, client_manager: DceApiClientManager
    ) -> None:
        with patch.object(client_manager, "post", new_callable=AsyncMock) as mock_post:
            await client_manager.trade.get_arbitrage_contract()

        kwargs = mock_post.await_args.kwargs
        assert mock_post.await_args.args[0] == trade.PATH_GET_ARBITRAGE_CONTRACT
        assert kwargs["body"] == ArbitrageContractRequest(lang="zh")

    async def test_month_trade_param_empty_body(
        self, client_manager: DceApiClientManager
    ) -> None:
        with patch.object(client_manager, "post", new_callable=AsyncMock) as mock_post:
            await client_manager.trade.get_month_trade_param()

        mock_post.assert_awaited_once_with(
            trade.PATH_GET_MONTH_TRADE_PARAM, dict[str, Any], body={}, options=None
        )


class TestDeliveryService:
    """Тесты эндпоинтов поставки."""

    async def test_delivery_cost_requires_variety(
        self, client_manager: DceApiClientManager
    ) -> None:
        with patch.object(client_manager, "post", new_callable=AsyncMock) as mock_post:
            with pytest.raises(DceApiValidationException) as exc_info:
                await client_manager.delivery.get_delivery_cost("")

        assert exc_info.value.field == "variety_id"
        mock_post.assert_not_awaited()

    async def test_delivery_cost(self, client_manager: DceApiClientManager) -> None:
        with patch.object(client_manager, "post", new_callable=AsyncMock) as mock_post:
            await client_manager.delivery.get_delivery_cost("a", variety_type="1")

        mock_post.assert_awaited_once_with(
            delivery.PATH_GET_DELIVERY_COST,
            list[DeliveryCost],
            body=DeliveryCostRequest(variety_id="a", variety_type="1"),
            options=None,
        )

    async def test_warehouse_premium_requires_variety(
        self, client_manager: DceApiClientManager
    ) -> None:
        with patch.object(client_manager, "post", new_callable=AsyncMock) as mock_post:
            with pytest.raises(DceApiValidationException):
                await client_manager.delivery.get_warehouse_premium("", "20240115")

        mock_post.assert_not_awaited()

    async def test_warehouse_premium(self, client_manager: DceApiClientManager) -> None:
        with patch.object(client_manager, "post", new_callable=AsyncMock) as mock_post:
            await client_manager.delivery.get_warehouse_premium("a", "20240115")

        mock_post.assert_awaited_once_with(
            delivery.PATH_GET_WAREHOUSE_PREMIUM,
            WarehousePremiumResponse,
            body=WarehousePremiumRequest(variety_id="a", trade_date="20240115"),
            options=None,
        )


class TestEndpointPaths:
    """Все эндпоинты обращаются к сервису DCE по путям /dceapi/."""

    def test_paths_are_absolute(self) -> None:
        for module in (common, news, market, trade, delivery):
            paths = [
                value
                for name, value in vars(module).items()
                if name.startswith("PATH_")
            ]
            assert paths
            assert all(path.startswith("/dceapi/") for path in paths)
