"""Конфигурация для DCE API клиента.

Читает настройки из YAML-файла, путь к которому указывается
в переменной окружения DCEAPI_CONFIG. Либо берёт ключи напрямую
из DCE_API_KEY и DCE_SECRET.

Переменные окружения автоматически загружаются из .env файла.
"""

from functools import lru_cache
from os import getenv
from typing import Any, TypeVar, cast

from dotenv import load_dotenv
from pydantic import BaseModel, SecretStr, field_validator
from yaml import CSafeLoader as SafeLoader
from yaml import load

# Автоматически загружаем переменные из .env файла
load_dotenv()

ConfigType = TypeVar("ConfigType", bound=BaseModel)

DEFAULT_BASE_URL = "http://www.dce.com.cn"
DEFAULT_TIMEOUT_SECS = 30.0
DEFAULT_LANG = "zh"
# 1 = фьючерсы, 2 = опционы
DEFAULT_TRADE_TYPE = 1

ENV_CONFIG_PATH = "DCEAPI_CONFIG"
ENV_API_KEY = "DCE_API_KEY"
ENV_SECRET = "DCE_SECRET"


class DceApiConfig(BaseModel):
    """Конфигурация для подключения к DCE API."""

    # Базовый адрес API
    base_url: str = DEFAULT_BASE_URL

    # Ключ API (передаётся в заголовке apikey)
    api_key: SecretStr = SecretStr("")

    # Секрет для получения токена
    secret: SecretStr = SecretStr("")

    # Общий таймаут HTTP-запроса в секундах
    timeout: float = DEFAULT_TIMEOUT_SECS

    # Язык ответов: zh или en
    lang: str = DEFAULT_LANG

    # Тип торговли по умолчанию
    trade_type: int = DEFAULT_TRADE_TYPE

    @field_validator("base_url", mode="before")
    @classmethod
    def _default_base_url(cls, value: Any) -> Any:
        if not value:
            return DEFAULT_BASE_URL
        return str(value).rstrip("/")

    @field_validator("timeout", mode="before")
    @classmethod
    def _default_timeout(cls, value: Any) -> Any:
        return value or DEFAULT_TIMEOUT_SECS

    @field_validator("lang", mode="before")
    @classmethod
    def _default_lang(cls, value: Any) -> Any:
        return value or DEFAULT_LANG

    @field_validator("trade_type", mode="before")
    @classmethod
    def _default_trade_type(cls, value: Any) -> Any:
        return value or DEFAULT_TRADE_TYPE

    @classmethod
    def from_env(cls) -> "DceApiConfig":
        """Собрать конфигурацию из DCE_API_KEY и DCE_SECRET.

        Остальные параметры берутся по умолчанию.
        """
        return cls(
            api_key=SecretStr(getenv(ENV_API_KEY, "")),
            secret=SecretStr(getenv(ENV_SECRET, "")),
        )


@lru_cache
def parse_config_file() -> dict[str, Any]:
    """Прочитать YAML-файл, на который указывает DCEAPI_CONFIG.

    Файл может содержать несколько разделов; клиент DCE читает
    раздел dceapi.

    Raises:
        ValueError: Если DCEAPI_CONFIG не задана или в файле не словарь
        FileNotFoundError: Если файла нет
    """
    file_path = getenv(ENV_CONFIG_PATH)
    if not file_path:
        raise ValueError(
            f"Не задана переменная окружения {ENV_CONFIG_PATH} "
            "с путём к config.yml клиента DCE API"
        )

    with open(file_path, "rb") as file:
        config_data = load(file, Loader=SafeLoader)

    if not isinstance(config_data, dict):
        raise ValueError(
            f"{file_path}: ожидался словарь разделов, "
            f"получен {type(config_data).__name__}"
        )
    return config_data


@lru_cache
def get_config(model: type[ConfigType], root_key: str) -> ConfigType:  # noqa: UP047
    """Провалидировать раздел root_key файла конфигурации моделью model.

    Например, раздел dceapi моделью DceApiConfig.

    Raises:
        ValueError: Если раздела нет в файле
    """
    sections = parse_config_file()
    try:
        section = sections[root_key]
    except KeyError:
        raise ValueError(f"В конфигурации нет раздела '{root_key}'") from None
    return model.model_validate(section)


def get_dceapi_config() -> DceApiConfig:
    """Получить конфигурацию DCE API из раздела dceapi файла DCEAPI_CONFIG."""
    return cast(DceApiConfig, get_config(DceApiConfig, "dceapi"))
