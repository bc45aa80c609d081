"""Collaborators shared by every stage of one fetch run."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field

from restconnector.core.http import Transport
from restconnector.core.response import ResponseHandler
from restconnector.core.response import passthrough_handler
from restconnector.models import ConnectorConfig
from restconnector.plugins.base import Plugin


@dataclass(frozen=True)
class FetchContext:
    """Config plus the transport, downstream handler and logger to use."""

    config: ConnectorConfig
    transport: Transport
    handler: ResponseHandler = passthrough_handler
    logger: logging.Logger = field(
        default_factory=lambda: logging.getLogger("restconnector")
    )

    @property
    def plugins(self) -> list[Plugin]:
        return self.config.plugins

    @property
    def label(self) -> str:
        """Prefix for log lines about this connector."""
        return self.config.template or "restconnector"
