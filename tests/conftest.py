"""Shared fixtures for manylicenses tests."""

import json
from typing import Callable

import pytest
from click.testing import CliRunner


@pytest.fixture
def cli_runner() -> CliRunner:
    """Provide a Click CLI test runner."""
    return CliRunner()


@pytest.fixture
def inventory_text() -> Callable[..., str]:
    """Build newline-delimited JSON inventory input from (name, license) pairs."""

    def build(*packages: tuple[str, str], version: str = "1.0.0") -> str:
        table = {
            "type": "table",
            "data": {
                "head": ["Name", "Version", "License"],
                "body": [[name, version, license_id] for name, license_id in packages],
            },
        }
        lines = [
            json.dumps({"type": "info", "data": "Resolving dependencies"}),
            json.dumps(table),
        ]
        return "\n".join(lines) + "\n"

    return build
