"""Общие фикстуры для тестов dceapi.

Содержит фикстуры, используемые в различных тестовых модулях.
"""

from __future__ import annotations

import json
from collections.abc import AsyncGenerator, Callable
from os import getenv
from typing import Any

import pytest

from dceapi import (
    ApiCredentials,
    DceApiClientManager,
    get_dceapi_config,
)
from dceapi.api_client import ApiClient
from dceapi.token_manager import TokenManager


class FakeClock:
    """Управляемый источник времени для TokenManager."""

    def __init__(self, start: float = 1000.0) -> None:
        self.now = start

    def __call__(self) -> float:
        return self.now

    def advance(self, seconds: float) -> None:
        self.now += seconds


# ========== Unit-фикстуры ==========


@pytest.fixture
def envelope() -> Callable[..., str]:
    """Собрать тело ответа сервера {code, msg, data}."""

    def _envelope(data: Any = None, code: int = 200, msg: str = "ok") -> str:
        return json.dumps({"code": code, "msg": msg, "data": data})

    return _envelope


@pytest.fixture
def token_envelope(envelope: Callable[..., str]) -> Callable[..., str]:
    """Собрать ответ эндпоинта авторизации."""

    def _token_envelope(token: str = "token-1", expires_in: int = 3600) -> str:
        return envelope(
            {"tokenType": "Bearer", "token": token, "expiresIn": expires_in}
        )

    return _token_envelope


@pytest.fixture
def clock() -> FakeClock:
    return FakeClock()


@pytest.fixture
def credentials() -> ApiCredentials:
    return ApiCredentials(
        api_key="test-api-key",
        secret="test-secret",
        base_url="http://dce.test",
    )


@pytest.fixture
def api_client() -> ApiClient:
    return ApiClient(base_url="http://dce.test", timeout=5)


@pytest.fixture
def token_manager(api_client: ApiClient, clock: FakeClock) -> TokenManager:
    """Создать экземпляр TokenManager для тестов."""
    return TokenManager(
        api_client=api_client,
        api_key="test-api-key",
        secret="test-secret",
        key_id="test-key",
        clock=clock,
    )


@pytest.fixture
async def client_manager(
    credentials: ApiCredentials, clock: FakeClock
) -> AsyncGenerator[DceApiClientManager, None]:
    """Создать отдельный менеджер (не из multitone-реестра)."""
    mgr = DceApiClientManager(credentials, clock=clock)
    yield mgr
    await mgr.close()


# ========== Интеграционные фикстуры ==========


@pytest.fixture
async def manager() -> AsyncGenerator[DceApiClientManager, None]:
    """Создать менеджер из реальной конфигурации."""
    if getenv("DCEAPI_CONFIG") is None:
        pytest.skip("DCEAPI_CONFIG не задан")

    await DceApiClientManager.close_all()
    config = get_dceapi_config()
    mgr = await DceApiClientManager.from_config(config)
    yield mgr
    # Cleanup после каждого теста
    await DceApiClientManager.close_all()
