"""Исключения для работы с DCE API.

Коды ответов сервера описаны в ErrorCode. Любой неизвестный код
сохраняется в исключении как есть (error_code при этом None).
"""

from enum import IntEnum


class ErrorCode(IntEnum):
    """Коды ответа DCE API."""

    SUCCESS = 200
    PARAM_ERROR = 400
    NO_PERMISSION = 401
    TOKEN_EXPIRED = 402
    SERVER_ERROR = 500
    RATE_LIMIT = 501

    @classmethod
    def from_code(cls, code: int) -> "ErrorCode | None":
        """Получить ErrorCode по числовому коду.

        Args:
            code: Код из ответа сервера

        Returns:
            Элемент перечисления или None для неизвестного кода
        """
        try:
            return cls(code)
        except ValueError:
            return None


TRANSIENT_CODES = frozenset({ErrorCode.SERVER_ERROR, ErrorCode.RATE_LIMIT})


class DceApiException(Exception):
    """Базовое исключение для ошибок DCE API."""

    def __init__(self, message: str, original_error: Exception | None = None) -> None:
        super().__init__(message)
        self.original_error = original_error

    @property
    def is_transient(self) -> bool:
        """Имеет ли смысл повторить вызов позже."""
        return False


class DceApiAuthException(DceApiException):
    """Исключение при ошибках аутентификации.

    Выбрасывается при:
    - Сетевой ошибке на запрос токена
    - Коде ответа != 200 от эндпоинта авторизации
    - Некорректном ответе или пустом токене
    """

    def __init__(
        self,
        message: str,
        code: int | None = None,
        original_error: Exception | None = None,
    ) -> None:
        super().__init__(message, original_error=original_error)
        self.code = code


class DceApiResponseException(DceApiException):
    """Сервер вернул код ответа, отличный от 200."""

    def __init__(self, code: int, message: str) -> None:
        super().__init__(f"Ошибка API {code}: {message}")
        self.code = code
        self.message = message

    @property
    def error_code(self) -> ErrorCode | None:
        return ErrorCode.from_code(self.code)

    @property
    def is_token_expired(self) -> bool:
        return self.code == ErrorCode.TOKEN_EXPIRED

    @property
    def is_transient(self) -> bool:
        return self.error_code in TRANSIENT_CODES


class DceApiNetworkException(DceApiException):
    """Ошибка транспорта: соединение, TLS, таймаут."""

    @property
    def is_transient(self) -> bool:
        return True


class DceApiParseException(DceApiException):
    """Ответ сервера не удалось разобрать в ожидаемую структуру.

    Attributes:
        raw_response: Исходный текст ответа
        cause: Исключение декодера
    """

    def __init__(self, raw_response: str, cause: Exception) -> None:
        super().__init__(
            f"Не удалось разобрать ответ сервера: {cause}", original_error=cause
        )
        self.raw_response = raw_response
        self.cause = cause


class DceApiValidationException(DceApiException):
    """Параметры запроса не прошли проверку до отправки."""

    def __init__(self, field: str, message: str) -> None:
        super().__init__(f"Некорректное значение поля '{field}': {message}")
        self.field = field
        self.message = message
