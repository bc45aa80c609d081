"""Pytest configuration and shared fixtures for restconnector tests."""

from __future__ import annotations

import logging
from typing import Any

import pytest

import restconnector.config.settings
from restconnector.core.context import FetchContext
from restconnector.models import AuthConfig
from restconnector.models import ConnectorConfig
from restconnector.models import GeneralConfig
from restconnector.models import QueryConfig
from restconnector.models import RequestDescriptor
from restconnector.models import TransportResponse


class FakeTransport:
    """Transport that replays scripted outcomes in call order.

    Each outcome is a TransportResponse (returned), an exception
    (raised) or None (returned as-is).
    """

    def __init__(self, *outcomes: Any) -> None:
        self.outcomes = list(outcomes)
        self.sent: list[RequestDescriptor] = []

    async def send(self, descriptor: RequestDescriptor) -> TransportResponse | None:
        self.sent.append(descriptor)
        if not self.outcomes:
            raise AssertionError(f"Unexpected request to {descriptor.url}")
        outcome = self.outcomes.pop(0)
        if isinstance(outcome, BaseException):
            raise outcome
        return outcome

    @property
    def urls(self) -> list[str]:
        return [descriptor.url for descriptor in self.sent]


@pytest.fixture(autouse=True)
def isolated_environment(monkeypatch, tmp_path):
    """Keep settings and package logging independent between tests."""
    monkeypatch.setenv("RESTCONNECTOR_CONFIG_DIR", str(tmp_path / "config"))
    monkeypatch.delenv("RESTCONNECTOR_TIMEOUT", raising=False)
    monkeypatch.delenv("RESTCONNECTOR_LOG_LEVEL", raising=False)
    restconnector.config.settings._settings = None

    yield

    restconnector.config.settings._settings = None
    package_logger = logging.getLogger("restconnector")
    for handler in list(package_logger.handlers):
        package_logger.removeHandler(handler)
    package_logger.setLevel(logging.NOTSET)
    package_logger.propagate = True


@pytest.fixture
def base_config() -> ConnectorConfig:
    """Connector config with a base URL and no query mapping."""
    return ConnectorConfig(
        auth_config=AuthConfig(
            url="https://api.example.com",
            headers={"Accept": "application/json"},
            template="example",
        ),
    )


@pytest.fixture
def query_config() -> ConnectorConfig:
    """Connector config mapping start/end onto from/to."""
    return ConnectorConfig(
        auth_config=AuthConfig(url="https://api.example.com", template="example"),
        general_config=GeneralConfig(query=QueryConfig(start="from", end="to")),
        parameters={"start": 10, "end": 20},
    )


@pytest.fixture
def fake_transport() -> type[FakeTransport]:
    """The scripted transport class."""
    return FakeTransport


@pytest.fixture
def make_context():
    """Factory for FetchContext with a scripted transport."""

    def _make(config: ConnectorConfig, *outcomes: Any, handler=None) -> FetchContext:
        kwargs = {"handler": handler} if handler is not None else {}
        return FetchContext(
            config=config,
            transport=FakeTransport(*outcomes),
            logger=logging.getLogger("restconnector.tests"),
            **kwargs,
        )

    return _make
