# *******************************************************************************
# Copyright (c) 2025 Contributors to the Eclipse Foundation
#
# See the NOTICE file(s) distributed with this work for additional
# information regarding copyright ownership.
#
# This program and the accompanying materials are made available under the
# terms of the Apache License Version 2.0 which is available at
# https://www.apache.org/licenses/LICENSE-2.0
#
# SPDX-License-Identifier: Apache-2.0
# *******************************************************************************
from pathlib import Path
from typing import Any
from unittest.mock import patch

import pytest

from src.namespace_manager.gh_logging import Logger
from src.namespace_manager.maven_version import MavenVersion
from src.namespace_manager.namespace import build_registry


class MockLogger(Logger):
    """Logger that captures messages for testing."""

    def __init__(self):
        super().__init__("test")
        self.debug_messages: list[str] = []
        self.info_messages: list[str] = []
        self.warning_messages: list[str] = []
        self.error_messages: list[str] = []
        self.locations: list[tuple[Path | None, int | None]] = []

    def debug(self, msg: str) -> None:
        # Always captured, independent of the debug environment variables
        self._print("debug", msg)

    def _print(
        self, prefix: str, msg: str, file: Path | None = None, line: int | None = None
    ) -> None:
        if prefix == "debug":
            self.debug_messages.append(msg)
        elif prefix == "info":
            self.info_messages.append(msg)
        elif prefix == "warning":
            self.warning_messages.append(msg)
            self.locations.append((file, line))
        elif prefix == "error":
            self.error_messages.append(msg)


@pytest.fixture
def mock_logger() -> MockLogger:
    """Create a mock logger for testing."""
    return MockLogger()


@pytest.fixture
def registry_logger(mock_logger: MockLogger):
    """Capture everything the namespace registry logs."""
    with patch("src.namespace_manager.namespace.log", mock_logger):
        yield mock_logger


@pytest.fixture
def build_fake_filesystem(fs: Any):
    """Convenience helper to build a fake filesystem from a nested dict."""

    def _build(structure: dict[str, object], base_path: str = "") -> None:
        base = base_path or "/"
        for name, value in structure.items():
            path = f"{base.rstrip('/')}/{name}"
            if isinstance(value, dict):
                fs.makedirs(path, exist_ok=True)
                _build(value, path)
            else:
                fs.create_file(path, contents=value)

    return _build


@pytest.fixture
def fake_registry(build_fake_filesystem, registry_logger):
    """Build a registry from token files with the given contents."""

    def _setup(reserved: str = "", aliases: str = ""):
        build_fake_filesystem({"config": {"reserved": reserved, "aliases": aliases}})
        return build_registry(
            reserved_file=Path("/config/reserved"),
            aliases_file=Path("/config/aliases"),
        )

    return _setup


def versions(*values: str) -> list[MavenVersion]:
    return [MavenVersion(v) for v in values]
