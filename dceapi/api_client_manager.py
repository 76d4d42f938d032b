"""Фасад DCE API с retry при истёкшем токене.

Реализует Multitone паттерн: один экземпляр на уникальную комбинацию
base_url + api_key. Каждый вызов получает токен у TokenManager; если
сервер ответил кодом 402, токен принудительно обновляется и вызов
повторяется ровно один раз.
"""

import asyncio
import logging
from collections.abc import Awaitable, Callable
from dataclasses import dataclass, field
from functools import lru_cache
from typing import Any, TypeVar

from pydantic import BaseModel, SecretStr, TypeAdapter, ValidationError

from dceapi.api_client import ApiClient, parse_envelope
from dceapi.config_reader import (
    DEFAULT_BASE_URL,
    DEFAULT_LANG,
    DEFAULT_TIMEOUT_SECS,
    DEFAULT_TRADE_TYPE,
    DceApiConfig,
)
from dceapi.exceptions import (
    DceApiParseException,
    DceApiResponseException,
    DceApiValidationException,
    ErrorCode,
)
from dceapi.models.base import RequestOptions
from dceapi.services import (
    CommonService,
    DeliveryService,
    MarketService,
    MemberService,
    NewsService,
    SettleService,
    TradeService,
)
from dceapi.token_manager import TokenManager

logger = logging.getLogger(__name__)
logger.setLevel(level=logging.DEBUG)

T = TypeVar("T")


@lru_cache
def _type_adapter(response_type: Any) -> TypeAdapter[Any]:
    return TypeAdapter(response_type)


@dataclass(frozen=True)
class ApiCredentials:
    """Учетные данные для DCE API.

    Attributes:
        api_key: Ключ API
        secret: Секрет для получения токена
        base_url: Базовый адрес API
    """

    api_key: str = field(repr=False)
    secret: str = field(repr=False)
    base_url: str = DEFAULT_BASE_URL

    def __post_init__(self) -> None:
        if not self.api_key:
            raise DceApiValidationException("api_key", "API-ключ обязателен")
        if not self.secret:
            raise DceApiValidationException("secret", "секрет обязателен")

    @property
    def key_id(self) -> str:
        """Уникальный идентификатор для multitone паттерна."""
        return f"{self.base_url}:{self.api_key}"

    @property
    def log_id(self) -> str:
        """Идентификатор для логов с замаскированным ключом."""
        return f"{self.base_url}:{self.api_key[:4]}***"


class DceApiClientManager:
    """Multitone-фасад для работы с DCE API.

    Содержит: ApiClient, TokenManager и сервисы по категориям API.

    Использование:
        manager = await DceApiClientManager.get_instance(credentials)
        trade_date = await manager.common.get_curr_trade_date()
    """

    _instances: dict[str, "DceApiClientManager"] = {}
    _lock: asyncio.Lock | None = None

    def __init__(
        self,
        credentials: ApiCredentials,
        timeout: float = DEFAULT_TIMEOUT_SECS,
        lang: str = DEFAULT_LANG,
        trade_type: int = DEFAULT_TRADE_TYPE,
        clock: Callable[[], float] | None = None,
    ) -> None:
        """Инициализация менеджера.

        Для общего экземпляра используйте get_instance().

        Args:
            credentials: Учетные данные API
            timeout: Общий таймаут HTTP-запроса в секундах
            lang: Язык ответов по умолчанию
            trade_type: Тип торговли по умолчанию
            clock: Источник времени для TokenManager (для тестов)
        """
        self._credentials = credentials
        self._timeout = timeout
        self._lang = lang
        self._trade_type = trade_type
        self._api_client = ApiClient(base_url=credentials.base_url, timeout=timeout)

        token_kwargs: dict[str, Any] = {}
        if clock is not None:
            token_kwargs["clock"] = clock
        self._token_manager = TokenManager(
            api_client=self._api_client,
            api_key=credentials.api_key,
            secret=credentials.secret,
            key_id=credentials.log_id,
            **token_kwargs,
        )

        self.common = CommonService(self)
        self.news = NewsService(self)
        self.market = MarketService(self)
        self.trade = TradeService(self)
        self.settle = SettleService(self)
        self.member = MemberService(self)
        self.delivery = DeliveryService(self)

        logger.debug(
            "Создан экземпляр DceApiClientManager для key_id=%s",
            credentials.log_id,
        )

    @classmethod
    async def get_instance(
        cls,
        credentials: ApiCredentials,
        **settings: Any,
    ) -> "DceApiClientManager":
        """Получить или создать экземпляр менеджера для key_id.

        Args:
            credentials: Учетные данные API
            **settings: timeout, lang, trade_type для нового экземпляра

        Returns:
            Экземпляр DceApiClientManager
        """
        if cls._lock is None:
            cls._lock = asyncio.Lock()

        async with cls._lock:
            key = credentials.key_id
            if key not in cls._instances:
                cls._instances[key] = cls(credentials=credentials, **settings)
            return cls._instances[key]

    @classmethod
    async def from_config(cls, config: DceApiConfig) -> "DceApiClientManager":
        """Создать экземпляр из конфигурации DCE API.

        Args:
            config: Конфигурация из YAML-файла или окружения

        Returns:
            Экземпляр DceApiClientManager
        """
        credentials = ApiCredentials(
            api_key=config.api_key.get_secret_value(),
            secret=config.secret.get_secret_value(),
            base_url=config.base_url,
        )
        return await cls.get_instance(
            credentials=credentials,
            timeout=config.timeout,
            lang=config.lang,
            trade_type=config.trade_type,
        )

    @classmethod
    async def from_env(cls) -> "DceApiClientManager":
        """Создать экземпляр по переменным DCE_API_KEY и DCE_SECRET."""
        return await cls.from_config(DceApiConfig.from_env())

    @classmethod
    async def close_all(cls) -> None:
        """Закрыть все соединения и сбросить экземпляры."""
        instance_count = len(cls._instances)

        for manager in cls._instances.values():
            await manager.close()

        cls._instances.clear()
        cls._lock = None
        logger.debug("Закрыты все соединения (%d экземпляров)", instance_count)

    async def close(self) -> None:
        """Сбросить токен и закрыть HTTP-сессию."""
        self._token_manager.clear()
        await self._api_client.close()

    async def __aenter__(self) -> "DceApiClientManager":
        return self

    async def __aexit__(self, *exc_info: object) -> None:
        await self.close()

    @property
    def credentials(self) -> ApiCredentials:
        return self._credentials

    @property
    def config(self) -> DceApiConfig:
        """Действующие настройки клиента."""
        return DceApiConfig(
            base_url=self._credentials.base_url,
            api_key=SecretStr(self._credentials.api_key),
            secret=SecretStr(self._credentials.secret),
            timeout=self._timeout,
            lang=self._lang,
            trade_type=self._trade_type,
        )

    @property
    def token_manager(self) -> TokenManager:
        """Менеджер токена, например для принудительного обновления."""
        return self._token_manager

    async def execute_with_retry(self, api_call: Callable[[str], Awaitable[T]]) -> T:
        """Выполнить API-вызов с одним retry при истёкшем токене.

        Args:
            api_call: Асинхронная функция, принимающая bearer-токен

        Returns:
            Результат вызова

        Raises:
            DceApiAuthException: Если не удалось получить токен
            DceApiResponseException: Любой код кроме 402 сразу, а 402 только
                если повторный вызов тоже его вернул
        """
        token = await self._token_manager.get_token()

        try:
            return await api_call(token)
        except DceApiResponseException as exc:
            if not exc.is_token_expired:
                logger.error("Ошибка API: %s", exc)
                raise
            logger.debug("Токен истёк, обновляем")

        await self._token_manager.force_refresh(stale_token=token)
        # clear() во время обновления оставляет токен пустым
        token = self._token_manager.token or await self._token_manager.get_token()
        return await api_call(token)

    def _build_headers(self, token: str, options: RequestOptions) -> dict[str, str]:
        trade_type = options.trade_type
        if trade_type is None:
            trade_type = self._trade_type
        return {
            "Content-Type": "application/json",
            "Authorization": f"Bearer {token}",
            "apikey": self._credentials.api_key,
            "tradeType": str(trade_type),
            "lang": options.lang or self._lang,
        }

    async def _execute(
        self,
        token: str,
        method: str,
        path: str,
        response_type: Any,
        payload: Any,
        options: RequestOptions,
    ) -> Any:
        """Один HTTP-вызов без retry: отправка, конверт, декодирование data."""
        raw_response = await self._api_client.call(
            method,
            path,
            headers=self._build_headers(token, options),
            json_body=payload if method == "POST" else None,
        )
        envelope = parse_envelope(raw_response)

        if envelope.code != ErrorCode.SUCCESS:
            raise DceApiResponseException(envelope.code, envelope.msg)

        try:
            return _type_adapter(response_type).validate_python(envelope.data)
        except ValidationError as exc:
            raise DceApiParseException(raw_response=raw_response, cause=exc) from exc

    async def request(
        self,
        method: str,
        path: str,
        response_type: type[T] | Any,
        body: BaseModel | dict[str, Any] | None = None,
        options: RequestOptions | None = None,
    ) -> T:
        """Выполнить вызов API и декодировать поле data.

        Args:
            method: GET или POST
            path: Путь эндпоинта
            response_type: Ожидаемый тип data (модель, list[модель], dict)
            body: Тело POST-запроса
            options: Переопределения trade_type и lang

        Returns:
            Декодированное поле data
        """
        method = method.upper()
        options = options or RequestOptions()
        if isinstance(body, BaseModel):
            payload: Any = body.model_dump(by_alias=True, exclude_none=True)
        else:
            payload = body

        async def api_call(token: str) -> T:
            return await self._execute(
                token, method, path, response_type, payload, options
            )

        return await self.execute_with_retry(api_call)

    async def get(
        self,
        path: str,
        response_type: type[T] | Any,
        options: RequestOptions | None = None,
    ) -> T:
        return await self.request("GET", path, response_type, options=options)

    async def post(
        self,
        path: str,
        response_type: type[T] | Any,
        body: BaseModel | dict[str, Any] | None = None,
        options: RequestOptions | None = None,
    ) -> T:
        if body is None:
            body = {}
        return await self.request(
            "POST", path, response_type, body=body, options=options
        )
