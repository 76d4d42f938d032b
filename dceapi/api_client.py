"""HTTP-клиент DCE API поверх aiohttp.

Отправляет запрос, читает тело ответа текстом и разбирает
единый конверт {code, msg, data}. Токены и retry здесь не участвуют.
"""

import asyncio
import logging
from typing import Any

import aiohttp
from pydantic import ValidationError

from dceapi.exceptions import DceApiNetworkException, DceApiParseException
from dceapi.models.base import ApiResponse

logger = logging.getLogger(__name__)


def parse_envelope(raw_response: str) -> ApiResponse:
    """Разобрать конверт ответа сервера.

    Args:
        raw_response: Тело ответа как текст

    Returns:
        Конверт с кодом, сообщением и сырыми данными

    Raises:
        DceApiParseException: Если тело не является корректным конвертом
    """
    try:
        return ApiResponse.model_validate_json(raw_response)
    except ValidationError as exc:
        raise DceApiParseException(raw_response=raw_response, cause=exc) from exc


class ApiClient:
    """Тонкая обёртка над aiohttp.ClientSession.

    Сессия создаётся лениво внутри работающего event loop.
    Таймаут общий для всего запроса.
    """

    def __init__(self, base_url: str, timeout: float) -> None:
        self._base_url = base_url.rstrip("/")
        self._timeout = timeout
        self._session: aiohttp.ClientSession | None = None

    @property
    def base_url(self) -> str:
        return self._base_url

    @property
    def is_closed(self) -> bool:
        return self._session is None or self._session.closed

    def _get_session(self) -> aiohttp.ClientSession:
        if self._session is None or self._session.closed:
            timeout = aiohttp.ClientTimeout(total=self._timeout)
            self._session = aiohttp.ClientSession(timeout=timeout)
        return self._session

    async def call(
        self,
        method: str,
        path: str,
        headers: dict[str, str],
        json_body: Any = None,
    ) -> str:
        """Выполнить HTTP-запрос и вернуть тело ответа.

        Args:
            method: HTTP-метод (GET или POST)
            path: Путь относительно base_url
            headers: Заголовки запроса
            json_body: Тело запроса, сериализуется в JSON

        Returns:
            Тело ответа как текст

        Raises:
            DceApiNetworkException: При ошибке соединения или таймауте
        """
        url = f"{self._base_url}{path}"
        session = self._get_session()

        try:
            async with session.request(
                method, url, headers=headers, json=json_body
            ) as response:
                # Невалидные байты заменяются на U+FFFD
                text = await response.text(errors="replace")
                logger.debug("%s %s -> HTTP %s", method, path, response.status)
                return text
        except asyncio.TimeoutError as exc:
            raise DceApiNetworkException(
                f"Превышено время ожидания ({self._timeout} с) для {path}",
                original_error=exc,
            ) from exc
        except aiohttp.ClientError as exc:
            raise DceApiNetworkException(
                f"Сетевая ошибка при запросе {path}: {exc}", original_error=exc
            ) from exc

    async def close(self) -> None:
        """Закрыть HTTP-сессию."""
        if self._session is not None and not self._session.closed:
            await self._session.close()
        self._session = None
