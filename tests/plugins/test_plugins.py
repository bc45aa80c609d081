"""Tests for plugin capabilities, pipeline and registry."""

from __future__ import annotations

import logging
from unittest.mock import AsyncMock, MagicMock

import msgspec
import pytest

from restconnector.errors.types import FetchError
from restconnector.errors.types import TransportError
from restconnector.models import ConnectorConfig
from restconnector.models import RequestDescriptor
from restconnector.plugins import Capability
from restconnector.plugins import Plugin
from restconnector.plugins import PluginNotFoundError
from restconnector.plugins import get_plugin
from restconnector.plugins import list_plugin_names
from restconnector.plugins import register_plugin
from restconnector.plugins import resolve_plugins
from restconnector.plugins import run_error_hooks
from restconnector.plugins import run_request_hooks
from restconnector.plugins import transform_body
from restconnector.plugins import unregister_plugin

CONFIG = ConnectorConfig()


def add_header(name: str):
    def hook(config, descriptor: RequestDescriptor) -> RequestDescriptor:
        return msgspec.structs.replace(
            descriptor, headers={**descriptor.headers, name: "1"}
        )

    return hook


class TestPlugin:
    """Tests for Plugin capability slots."""

    def test_has(self):
        plugin = Plugin(name="p", onerror=lambda config, error: None)

        assert plugin.has(Capability.ONERROR) is True
        assert plugin.has(Capability.REQUEST) is False
        assert plugin.has(Capability.DATA_MANIPULATION) is False

    def test_hook_missing(self):
        with pytest.raises(LookupError):
            Plugin(name="p").hook(Capability.REQUEST)


class TestRunRequestHooks:
    """Tests for run_request_hooks function."""

    @pytest.mark.asyncio
    async def test_chains_every_plugin_in_order(self):
        """Each hook sees the previous hook's descriptor."""
        seen = []

        async def spy(config, descriptor):
            seen.append(dict(descriptor.headers))
            return descriptor

        plugins = [
            Plugin(name="a", request=add_header("X-A")),
            Plugin(name="skip", onerror=lambda config, error: None),
            Plugin(name="spy", request=spy),
            Plugin(name="b", request=add_header("X-B")),
        ]

        result = await run_request_hooks(
            plugins, CONFIG, RequestDescriptor(url="https://a.test")
        )

        assert seen == [{"X-A": "1"}]
        assert result.headers == {"X-A": "1", "X-B": "1"}

    @pytest.mark.asyncio
    async def test_no_hooks_returns_descriptor(self):
        descriptor = RequestDescriptor(url="https://a.test")
        assert await run_request_hooks([], CONFIG, descriptor) is descriptor

    @pytest.mark.asyncio
    async def test_hook_returning_wrong_type(self):
        plugins = [Plugin(name="bad", request=lambda config, descriptor: None)]

        with pytest.raises(FetchError) as exc_info:
            await run_request_hooks(plugins, CONFIG, RequestDescriptor(url="x"))

        assert "bad" in exc_info.value.reference


class TestRunErrorHooks:
    """Tests for run_error_hooks function."""

    @pytest.mark.asyncio
    async def test_first_capable_plugin_wins(self):
        first = AsyncMock(return_value="first")
        second = AsyncMock(return_value="second")
        plugins = [
            Plugin(name="none", request=add_header("X")),
            Plugin(name="first", onerror=first),
            Plugin(name="second", onerror=second),
        ]
        error = TransportError(401, "Unauthorized")

        assert await run_error_hooks(plugins, CONFIG, error) == "first"
        first.assert_awaited_once_with(CONFIG, error)
        second.assert_not_awaited()

    @pytest.mark.asyncio
    async def test_sync_hook(self):
        plugins = [Plugin(name="sync", onerror=lambda config, error: error.status_code)]
        assert await run_error_hooks(plugins, CONFIG, TransportError(409, "")) == 409

    @pytest.mark.asyncio
    async def test_no_capable_plugin(self):
        with pytest.raises(FetchError) as exc_info:
            await run_error_hooks(
                [Plugin(name="none")], CONFIG, TransportError(409, "Conflict")
            )

        assert exc_info.value.http_status_code == 409
        assert exc_info.value.message == "Internal Server Error."


class TestTransformBody:
    """Tests for transform_body function."""

    @pytest.mark.asyncio
    async def test_first_data_manipulation_wins(self):
        first = MagicMock(return_value="first")
        second = MagicMock(return_value="second")
        plugins = [
            Plugin(name="first", data_manipulation=first),
            Plugin(name="second", data_manipulation=second),
        ]

        assert await transform_body(plugins, "<xml/>") == "first"
        first.assert_called_once_with("<xml/>")
        second.assert_not_called()

    @pytest.mark.asyncio
    async def test_async_data_manipulation(self):
        plugins = [Plugin(name="a", data_manipulation=AsyncMock(return_value=[1]))]
        assert await transform_body(plugins, "raw") == [1]

    @pytest.mark.asyncio
    async def test_default_json_parse(self):
        assert await transform_body([], '{"items": [1, 2]}') == {"items": [1, 2]}
        assert await transform_body([], b"[true]") == [True]

    @pytest.mark.asyncio
    async def test_malformed_body_logged_not_raised(self, caplog):
        log = logging.getLogger("restconnector.tests.body")

        with caplog.at_level(logging.ERROR, logger="restconnector.tests.body"):
            assert await transform_body([], "not json", log) is None

        assert "Failed to parse response body." in caplog.text

    @pytest.mark.asyncio
    async def test_missing_body(self):
        assert await transform_body([], None) is None


class TestRegistry:
    """Tests for the plugin registry."""

    def test_builtins_registered(self):
        names = list_plugin_names()

        assert "bearer-token" in names
        assert "retry-once" in names
        assert "plain-text" in names

    def test_register_and_get(self):
        @register_plugin("test-echo")
        def echo() -> Plugin:
            return Plugin(name="test-echo", data_manipulation=lambda body: body)

        try:
            plugin = get_plugin("test-echo")
            assert plugin.name == "test-echo"
            assert plugin.has(Capability.DATA_MANIPULATION)
        finally:
            unregister_plugin("test-echo")

        assert "test-echo" not in list_plugin_names()

    def test_unknown_plugin(self):
        with pytest.raises(PluginNotFoundError) as exc_info:
            get_plugin("does-not-exist")

        assert "does-not-exist" in exc_info.value.message

    def test_resolve_keeps_order_and_instances(self):
        custom = Plugin(name="custom")

        resolved = resolve_plugins(["retry-once", custom, "plain-text"])

        assert [plugin.name for plugin in resolved] == [
            "retry-once",
            "custom",
            "plain-text",
        ]
        assert resolved[1] is custom


class TestBuiltinPlugins:
    """Tests for plugins shipped with the package."""

    def test_bearer_token_adds_header(self):
        plugin = get_plugin("bearer-token")
        config = ConnectorConfig(parameters={"token": "abc"})
        descriptor = RequestDescriptor(url="x", headers={"Accept": "*/*"})

        result = plugin.request(config, descriptor)

        assert result.headers == {"Accept": "*/*", "Authorization": "Bearer abc"}
        assert descriptor.headers == {"Accept": "*/*"}

    def test_bearer_token_without_token(self):
        plugin = get_plugin("bearer-token")
        descriptor = RequestDescriptor(url="x")

        assert plugin.request(ConnectorConfig(), descriptor) is descriptor

    @pytest.mark.asyncio
    async def test_retry_once_resolves(self, caplog):
        plugin = get_plugin("retry-once")

        with caplog.at_level(logging.WARNING, logger="restconnector.plugins.builtin"):
            result = await plugin.onerror(ConnectorConfig(), TransportError(401, "no"))

        assert result is None
        assert "Retrying after status code 401" in caplog.text

    def test_plain_text(self):
        plugin = get_plugin("plain-text")

        assert plugin.data_manipulation(b"caf\xc3\xa9") == "café"
        assert plugin.data_manipulation("text") == "text"
