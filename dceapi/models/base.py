"""Базовые модели DCE API: конверт ответа, токен, опции запроса.

Сервер отдаёт поля в camelCase и нередко присылает null вместо
строк и чисел, а числа иногда строками. Типы NullableStr/NullableInt/
NullableFloat сводят такие значения к "" и 0.
"""

from dataclasses import dataclass
from typing import Annotated, Any

from pydantic import AliasChoices, BaseModel, BeforeValidator, ConfigDict, Field
from pydantic.alias_generators import to_camel


def _blank_to_str(value: Any) -> Any:
    if value is None:
        return ""
    if isinstance(value, (int, float)) and not isinstance(value, bool):
        return str(value)
    return value


def _blank_to_zero(value: Any) -> Any:
    if value is None:
        return 0
    if isinstance(value, str) and not value.strip():
        return 0
    return value


NullableStr = Annotated[str, BeforeValidator(_blank_to_str)]
NullableInt = Annotated[int, BeforeValidator(_blank_to_zero)]
NullableFloat = Annotated[float, BeforeValidator(_blank_to_zero)]


class DceModel(BaseModel):
    """Модель ответа: camelCase-алиасы, неизвестные поля сохраняются."""

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        extra="allow",
    )


class DceRequest(BaseModel):
    """Модель тела запроса."""

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
    )


class ApiResponse(BaseModel):
    """Единый конверт ответа сервера."""

    code: int
    msg: NullableStr = Field(
        default="", validation_alias=AliasChoices("msg", "message")
    )
    data: Any = None


class TokenResponse(DceModel):
    """Данные ответа эндпоинта авторизации."""

    token_type: NullableStr = ""
    access_token: NullableStr = Field(default="", alias="token")
    expires_in: NullableInt = 0


@dataclass(frozen=True)
class RequestOptions:
    """Переопределения параметров клиента для одного вызова.

    Attributes:
        trade_type: Тип торговли (1 фьючерсы, 2 опционы)
        lang: Язык ответа (zh или en)
    """

    trade_type: int | None = None
    lang: str | None = None
