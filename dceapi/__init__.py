"""Модуль для работы с DCE API (Даляньская товарная биржа).

Предоставляет клиента с автоматическим управлением токенами
и retry при истёкшем токене (код 402).

Пример использования:
    from dceapi import get_dceapi_config, DceApiClientManager

    config = get_dceapi_config()
    manager = await DceApiClientManager.from_config(config)

    # Общие данные
    trade_date = await manager.common.get_curr_trade_date()
    varieties = await manager.common.get_variety_list()

    # Опционы вместо фьючерсов, ответ на английском
    options = RequestOptions(trade_type=2, lang="en")
    varieties = await manager.common.get_variety_list(options)
"""

from dceapi.api_client_manager import (
    ApiCredentials,
    DceApiClientManager,
)
from dceapi.config_reader import (
    DEFAULT_BASE_URL,
    DEFAULT_LANG,
    DEFAULT_TIMEOUT_SECS,
    DEFAULT_TRADE_TYPE,
    DceApiConfig,
    get_config,
    get_dceapi_config,
    parse_config_file,
)
from dceapi.exceptions import (
    DceApiAuthException,
    DceApiException,
    DceApiNetworkException,
    DceApiParseException,
    DceApiResponseException,
    DceApiValidationException,
    ErrorCode,
)
from dceapi.models import RequestOptions
from dceapi.services import is_valid_column_id
from dceapi.token_manager import TokenManager

__all__ = [
    # API Client Manager
    "ApiCredentials",
    "DceApiClientManager",
    "RequestOptions",
    # Configuration
    "DEFAULT_BASE_URL",
    "DEFAULT_LANG",
    "DEFAULT_TIMEOUT_SECS",
    "DEFAULT_TRADE_TYPE",
    "DceApiConfig",
    "get_config",
    "get_dceapi_config",
    "parse_config_file",
    # Exceptions
    "DceApiAuthException",
    "DceApiException",
    "DceApiNetworkException",
    "DceApiParseException",
    "DceApiResponseException",
    "DceApiValidationException",
    "ErrorCode",
    # Token Management
    "TokenManager",
    # Helpers
    "is_valid_column_id",
]
