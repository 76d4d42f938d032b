"""Тесты для token_manager модуля."""

import asyncio
from collections.abc import Callable
from unittest.mock import AsyncMock, patch

import pytest

from dceapi.api_client import ApiClient
from dceapi.exceptions import (
    DceApiAuthException,
    DceApiNetworkException,
    DceApiParseException,
)
from dceapi.token_manager import (
    AUTH_ENDPOINT,
    TOKEN_EXPIRY_BUFFER,
    TOKEN_EXPIRY_SECONDS,
    TokenManager,
    auth_error_for_code,
)

from conftest import FakeClock

# Маркируем все тесты в этом модуле как unit-тесты
pytestmark = pytest.mark.unit


class TestTokenManagerState:
    """Тесты начального состояния и clear()."""

    def test_initially_expired(self, token_manager: TokenManager) -> None:
        """Без токена менеджер считает токен истёкшим."""
        assert token_manager.is_expired() is True
        assert token_manager.token == ""
        assert token_manager.token_version == 0
        assert token_manager.expires_at is None

    async def test_clear_resets_token(
        self,
        token_manager: TokenManager,
        api_client: ApiClient,
        token_envelope: Callable[..., str],
    ) -> None:
        """clear() сбрасывает токен без запроса к серверу."""
        with patch.object(
            api_client, "call", new_callable=AsyncMock, return_value=token_envelope()
        ) as mock_call:
            await token_manager.get_token()
            token_manager.clear()

        assert token_manager.token == ""
        assert token_manager.is_expired() is True
        assert mock_call.await_count == 1


class TestGetToken:
    """Тесты получения токена."""

    async def test_fetches_token_on_first_call(
        self,
        token_manager: TokenManager,
        api_client: ApiClient,
        token_envelope: Callable[..., str],
    ) -> None:
        """Первый вызов запрашивает токен у сервера."""
        with patch.object(
            api_client, "call", new_callable=AsyncMock, return_value=token_envelope()
        ) as mock_call:
            token = await token_manager.get_token()

        assert token == "token-1"
        assert token_manager.token_version == 1
        mock_call.assert_awaited_once_with(
            "POST",
            AUTH_ENDPOINT,
            headers={"Content-Type": "application/json", "apikey": "test-api-key"},
            json_body={"secret": "test-secret"},
        )

    async def test_returns_cached_token(
        self,
        token_manager: TokenManager,
        api_client: ApiClient,
        token_envelope: Callable[..., str],
    ) -> None:
        """Повторный вызов возвращает закэшированный токен."""
        with patch.object(
            api_client, "call", new_callable=AsyncMock, return_value=token_envelope()
        ) as mock_call:
            first = await token_manager.get_token()
            second = await token_manager.get_token()

        assert first == second == "token-1"
        assert mock_call.await_count == 1

    async def test_concurrent_calls_make_single_request(
        self,
        token_manager: TokenManager,
        api_client: ApiClient,
        token_envelope: Callable[..., str],
    ) -> None:
        """Параллельные вызовы при пустом кэше делают один запрос."""

        async def slow_auth(*args: object, **kwargs: object) -> str:
            await asyncio.sleep(0.05)
            return token_envelope()

        with patch.object(
            api_client, "call", new_callable=AsyncMock, side_effect=slow_auth
        ) as mock_call:
            tokens = await asyncio.gather(
                *(token_manager.get_token() for _ in range(10))
            )

        assert mock_call.await_count == 1
        assert set(tokens) == {"token-1"}
        assert token_manager.token_version == 1

    async def test_waits_for_refresh_in_progress(
        self,
        token_manager: TokenManager,
        api_client: ApiClient,
        token_envelope: Callable[..., str],
    ) -> None:
        """Во время обновления get_token ждёт и получает новый токен."""

        async def slow_auth(*args: object, **kwargs: object) -> str:
            await asyncio.sleep(0.05)
            return token_envelope("token-2")

        with patch.object(
            api_client, "call", new_callable=AsyncMock, return_value=token_envelope()
        ):
            await token_manager.get_token()

        with patch.object(
            api_client, "call", new_callable=AsyncMock, side_effect=slow_auth
        ) as mock_call:
            refresh = asyncio.create_task(token_manager.force_refresh())
            await asyncio.sleep(0)
            token = await token_manager.get_token()
            await refresh

        assert token == "token-2"
        assert mock_call.await_count == 1


class TestExpiry:
    """Тесты расчёта срока жизни токена."""

    async def test_expires_with_buffer(
        self,
        token_manager: TokenManager,
        api_client: ApiClient,
        clock: FakeClock,
        token_envelope: Callable[..., str],
    ) -> None:
        """Токен истекает за TOKEN_EXPIRY_BUFFER секунд до серверного срока."""
        start = clock()
        with patch.object(
            api_client,
            "call",
            new_callable=AsyncMock,
            return_value=token_envelope(expires_in=3600),
        ):
            await token_manager.get_token()

        clock.now = start + 3600 - TOKEN_EXPIRY_BUFFER - 0.1
        assert token_manager.is_expired() is False

        clock.now = start + 3600 - TOKEN_EXPIRY_BUFFER
        assert token_manager.is_expired() is True

    async def test_expired_token_is_refreshed(
        self,
        token_manager: TokenManager,
        api_client: ApiClient,
        clock: FakeClock,
        token_envelope: Callable[..., str],
    ) -> None:
        """После истечения get_token запрашивает новый токен."""
        with patch.object(
            api_client,
            "call",
            new_callable=AsyncMock,
            side_effect=[token_envelope("token-1"), token_envelope("token-2")],
        ) as mock_call:
            await token_manager.get_token()
            clock.advance(TOKEN_EXPIRY_SECONDS)
            token = await token_manager.get_token()

        assert token == "token-2"
        assert mock_call.await_count == 2
        assert token_manager.token_version == 2

    @pytest.mark.parametrize("expires_in", [0, -5])
    async def test_default_expiry_when_missing(
        self,
        token_manager: TokenManager,
        api_client: ApiClient,
        clock: FakeClock,
        token_envelope: Callable[..., str],
        expires_in: int,
    ) -> None:
        """Без срока от сервера используется TOKEN_EXPIRY_SECONDS."""
        start = clock()
        with patch.object(
            api_client,
            "call",
            new_callable=AsyncMock,
            return_value=token_envelope(expires_in=expires_in),
        ):
            await token_manager.get_token()

        expected = start + TOKEN_EXPIRY_SECONDS - TOKEN_EXPIRY_BUFFER
        assert token_manager.expires_at == expected

    async def test_short_lifetime_expires_immediately(
        self,
        token_manager: TokenManager,
        api_client: ApiClient,
        token_envelope: Callable[..., str],
    ) -> None:
        """Срок меньше буфера делает токен сразу истёкшим."""
        with patch.object(
            api_client,
            "call",
            new_callable=AsyncMock,
            return_value=token_envelope(expires_in=30),
        ):
            token = await token_manager.get_token()

        assert token == "token-1"
        assert token_manager.is_expired() is True


class TestForceRefresh:
    """Тесты принудительного обновления."""

    async def test_refreshes_valid_token(
        self,
        token_manager: TokenManager,
        api_client: ApiClient,
        token_envelope: Callable[..., str],
    ) -> None:
        """force_refresh обновляет даже действующий токен."""
        with patch.object(
            api_client,
            "call",
            new_callable=AsyncMock,
            side_effect=[token_envelope("token-1"), token_envelope("token-2")],
        ) as mock_call:
            await token_manager.get_token()
            await token_manager.force_refresh()

        assert token_manager.token == "token-2"
        assert mock_call.await_count == 2

    async def test_skips_when_stale_token_already_replaced(
        self,
        token_manager: TokenManager,
        api_client: ApiClient,
        token_envelope: Callable[..., str],
    ) -> None:
        """Если отвергнутый токен уже заменён, запрос не повторяется."""
        with patch.object(
            api_client,
            "call",
            new_callable=AsyncMock,
            side_effect=[token_envelope("token-1"), token_envelope("token-2")],
        ) as mock_call:
            await token_manager.get_token()
            await token_manager.force_refresh()
            await token_manager.force_refresh(stale_token="token-1")

        assert token_manager.token == "token-2"
        assert mock_call.await_count == 2

    async def test_concurrent_refresh_of_same_stale_token(
        self,
        token_manager: TokenManager,
        api_client: ApiClient,
        token_envelope: Callable[..., str],
    ) -> None:
        """Несколько корутин с одним отвергнутым токеном делают один запрос."""
        with patch.object(
            api_client, "call", new_callable=AsyncMock, return_value=token_envelope()
        ):
            await token_manager.get_token()

        with patch.object(
            api_client,
            "call",
            new_callable=AsyncMock,
            return_value=token_envelope("token-2"),
        ) as mock_call:
            await asyncio.gather(
                *(token_manager.force_refresh(stale_token="token-1") for _ in range(5))
            )

        assert mock_call.await_count == 1
        assert token_manager.token == "token-2"

    async def test_empty_token_keeps_previous(
        self,
        token_manager: TokenManager,
        api_client: ApiClient,
        token_envelope: Callable[..., str],
    ) -> None:
        """Пустой токен от сервера не затирает действующий."""
        with patch.object(
            api_client,
            "call",
            new_callable=AsyncMock,
            side_effect=[token_envelope("token-1"), token_envelope("")],
        ):
            await token_manager.get_token()
            expires_at = token_manager.expires_at

            with pytest.raises(DceApiAuthException, match="пустой токен"):
                await token_manager.force_refresh()

        assert token_manager.token == "token-1"
        assert token_manager.expires_at == expires_at
        assert token_manager.token_version == 1


class TestFetchErrors:
    """Тесты ошибок получения токена."""

    @pytest.mark.parametrize(
        ("code", "fragment"),
        [
            (400, "Некорректные параметры"),
            (401, "Доступ запрещён"),
            (500, "Ошибка сервера"),
            (501, "лимит"),
            (999, "код 999"),
        ],
    )
    async def test_non_success_code(
        self,
        token_manager: TokenManager,
        api_client: ApiClient,
        envelope: Callable[..., str],
        code: int,
        fragment: str,
    ) -> None:
        """Код != 200 даёт DceApiAuthException с этим кодом."""
        with patch.object(
            api_client,
            "call",
            new_callable=AsyncMock,
            return_value=envelope(code=code, msg="denied"),
        ):
            with pytest.raises(DceApiAuthException, match=fragment) as exc_info:
                await token_manager.get_token()

        assert exc_info.value.code == code
        assert token_manager.token == ""
        assert token_manager.token_version == 0

    async def test_network_error_wrapped(
        self, token_manager: TokenManager, api_client: ApiClient
    ) -> None:
        """Сетевая ошибка оборачивается в DceApiAuthException."""
        network_error = DceApiNetworkException("connection refused")
        with patch.object(
            api_client, "call", new_callable=AsyncMock, side_effect=network_error
        ):
            with pytest.raises(DceApiAuthException) as exc_info:
                await token_manager.get_token()

        assert exc_info.value.original_error is network_error

    async def test_malformed_body_wrapped(
        self, token_manager: TokenManager, api_client: ApiClient
    ) -> None:
        """Нечитаемый ответ оборачивается в DceApiAuthException."""
        with patch.object(
            api_client, "call", new_callable=AsyncMock, return_value="<html>502</html>"
        ):
            with pytest.raises(DceApiAuthException) as exc_info:
                await token_manager.get_token()

        assert isinstance(exc_info.value.original_error, DceApiParseException)

    async def test_missing_data(
        self,
        token_manager: TokenManager,
        api_client: ApiClient,
        envelope: Callable[..., str],
    ) -> None:
        """Ответ 200 без data считается ошибкой авторизации."""
        with patch.object(
            api_client, "call", new_callable=AsyncMock, return_value=envelope(None)
        ):
            with pytest.raises(DceApiAuthException, match="Некорректные данные"):
                await token_manager.get_token()

    async def test_message_field_alias(
        self, token_manager: TokenManager, api_client: ApiClient
    ) -> None:
        """Сообщение сервера читается и из поля message."""
        with patch.object(
            api_client,
            "call",
            new_callable=AsyncMock,
            return_value='{"code": 401, "message": "apikey disabled"}',
        ):
            with pytest.raises(DceApiAuthException, match="apikey disabled"):
                await token_manager.get_token()

    async def test_failed_refresh_allows_retry(
        self,
        token_manager: TokenManager,
        api_client: ApiClient,
        envelope: Callable[..., str],
        token_envelope: Callable[..., str],
    ) -> None:
        """После ошибки следующий get_token снова запрашивает токен."""
        with patch.object(
            api_client,
            "call",
            new_callable=AsyncMock,
            side_effect=[envelope(code=500, msg="busy"), token_envelope()],
        ) as mock_call:
            with pytest.raises(DceApiAuthException):
                await token_manager.get_token()
            token = await token_manager.get_token()

        assert token == "token-1"
        assert mock_call.await_count == 2


class TestAuthErrorForCode:
    """Тесты для auth_error_for_code."""

    def test_keeps_server_message(self) -> None:
        exc = auth_error_for_code(401, "apikey disabled")

        assert exc.code == 401
        assert "apikey disabled" in str(exc)
