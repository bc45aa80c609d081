"""CLI framework for restconnector."""
from __future__ import annotations

from restconnector.cli.app import ExitCode
from restconnector.cli.app import app
from restconnector.cli.app import run_app

__all__ = ["app", "run_app", "ExitCode"]
