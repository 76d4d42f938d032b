"""Менеджер токенов для DCE API.

Получает bearer-токен по паре apikey/secret, кэширует его и обновляет
с запасом до истечения срока. Обновление идёт под одним asyncio.Lock:
сколько бы корутин ни обнаружили устаревший токен, в сеть уходит
один запрос авторизации.
"""

import asyncio
import logging
import time
from collections.abc import Callable

from pydantic import ValidationError

from dceapi.api_client import ApiClient, parse_envelope
from dceapi.exceptions import DceApiAuthException, DceApiException, ErrorCode
from dceapi.models.base import TokenResponse

logger = logging.getLogger(__name__)
logger.setLevel(level=logging.DEBUG)

# Срок жизни токена, если сервер его не прислал
TOKEN_EXPIRY_SECONDS = 3600

# Токен считается истёкшим на столько секунд раньше серверного срока
TOKEN_EXPIRY_BUFFER = 60

AUTH_ENDPOINT = "/dceapi/cms/auth/accessToken"


def auth_error_for_code(code: int, message: str) -> DceApiAuthException:
    """Собрать исключение авторизации по коду ответа сервера.

    Args:
        code: Код из конверта ответа
        message: Сообщение сервера

    Returns:
        DceApiAuthException с понятным описанием
    """
    match ErrorCode.from_code(code):
        case ErrorCode.PARAM_ERROR:
            text = f"Некорректные параметры авторизации: {message}"
        case ErrorCode.NO_PERMISSION:
            text = f"Доступ запрещён: {message}"
        case ErrorCode.SERVER_ERROR:
            text = f"Ошибка сервера авторизации: {message}"
        case ErrorCode.RATE_LIMIT:
            text = f"Превышен лимит запросов авторизации: {message}"
        case _:
            text = f"Ошибка авторизации (код {code}): {message}"
    return DceApiAuthException(text, code=code)


class TokenManager:
    """Менеджер токена для одной пары apikey/secret.

    Токен запрашивается при первом обращении и обновляется, когда
    истекает его срок (минус TOKEN_EXPIRY_BUFFER) либо по явному
    force_refresh(). Пока идёт обновление, другие корутины ждут на lock
    и затем получают уже установленный токен.
    """

    def __init__(
        self,
        api_client: ApiClient,
        api_key: str,
        secret: str,
        key_id: str,
        clock: Callable[[], float] = time.monotonic,
    ) -> None:
        """Инициализация менеджера токенов.

        Args:
            api_client: HTTP-клиент для запроса токена
            api_key: Ключ API (заголовок apikey)
            secret: Секрет для получения токена
            key_id: Идентификатор для логов, без секретов
            clock: Источник монотонного времени в секундах
        """
        self._api_client = api_client
        self._api_key = api_key
        self._secret = secret
        self._key_id = key_id
        self._clock = clock
        self._token: str = ""
        self._expires_at: float | None = None
        self._token_version: int = 0
        self._lock = asyncio.Lock()

    @property
    def token(self) -> str:
        """Закэшированный токен без обновления (может быть пустым)."""
        return self._token

    @property
    def token_version(self) -> int:
        """Число успешных обновлений токена."""
        return self._token_version

    @property
    def expires_at(self) -> float | None:
        return self._expires_at

    def is_expired(self) -> bool:
        """Проверить, истёк ли токен. Побочных эффектов нет."""
        if not self._token or self._expires_at is None:
            return True
        return self._clock() >= self._expires_at

    def clear(self) -> None:
        """Сбросить токен без обращения к серверу."""
        self._token = ""
        self._expires_at = None

    async def get_token(self) -> str:
        """Получить действующий токен, при необходимости обновив его.

        Returns:
            Bearer-токен

        Raises:
            DceApiAuthException: При ошибке получения токена
        """
        # Пока идёт обновление, старый токен не отдаём
        if not self._lock.locked() and not self.is_expired():
            return self._token

        async with self._lock:
            # Double-check после получения lock
            if not self.is_expired():
                logger.debug(
                    "Токен уже обновлён другой корутиной для key_id=%s",
                    self._key_id,
                )
                return self._token

            await self._refresh_locked()
            return self._token

    async def force_refresh(self, stale_token: str | None = None) -> None:
        """Принудительно обновить токен.

        Args:
            stale_token: Токен, который отверг сервер. Если за время
                ожидания lock его уже заменили действующим, повторный
                запрос не делается.

        Raises:
            DceApiAuthException: При ошибке обновления токена
        """
        async with self._lock:
            if (
                stale_token is not None
                and self._token != stale_token
                and not self.is_expired()
            ):
                logger.debug(
                    "Токен уже заменён другой корутиной для key_id=%s (версия: %d)",
                    self._key_id,
                    self._token_version,
                )
                return

            await self._refresh_locked()

    async def _fetch_token(self) -> TokenResponse:
        """Запросить новый токен у сервера.

        Returns:
            Данные токена из ответа

        Raises:
            DceApiAuthException: При сетевой ошибке, коде != 200,
                некорректном ответе или пустом токене
        """
        headers = {
            "Content-Type": "application/json",
            "apikey": self._api_key,
        }

        logger.debug("Запрос токена для key_id=%s", self._key_id)
        try:
            raw_response = await self._api_client.call(
                "POST",
                AUTH_ENDPOINT,
                headers=headers,
                json_body={"secret": self._secret},
            )
            envelope = parse_envelope(raw_response)
        except DceApiException as exc:
            logger.error(
                "Ошибка при получении токена для key_id=%s: %s", self._key_id, exc
            )
            raise DceApiAuthException(
                f"Ошибка при получении токена: {exc}", original_error=exc
            ) from exc

        if envelope.code != ErrorCode.SUCCESS:
            logger.error(
                "Сервер отклонил запрос токена для key_id=%s: код %d",
                self._key_id,
                envelope.code,
            )
            raise auth_error_for_code(envelope.code, envelope.msg)

        try:
            payload = TokenResponse.model_validate(envelope.data)
        except ValidationError as exc:
            raise DceApiAuthException(
                f"Некорректные данные токена: {exc}", original_error=exc
            ) from exc

        if not payload.access_token:
            raise DceApiAuthException("Сервер вернул пустой токен")
        return payload

    def _set_token(self, payload: TokenResponse) -> None:
        """Установить токен и рассчитать момент истечения."""
        expires_in = payload.expires_in
        if expires_in <= 0:
            expires_in = TOKEN_EXPIRY_SECONDS
        effective = max(expires_in - TOKEN_EXPIRY_BUFFER, 0)

        self._token = payload.access_token
        self._expires_at = self._clock() + effective
        self._token_version += 1

    async def _refresh_locked(self) -> None:
        """Обновить токен (вызывать только под self._lock)."""
        payload = await self._fetch_token()
        self._set_token(payload)
        logger.info(
            "Токен получен для key_id=%s (версия: %d)",
            self._key_id,
            self._token_version,
        )
