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

import os
import sys
from pathlib import Path
from typing import NoReturn, TextIO

DEBUG_ENV_VARS = ("NAMESPACE_MANAGER_DEBUG", "RUNNER_DEBUG")

# https://docs.github.com/en/actions/reference/workflow-commands-for-github-actions
GITHUB_COMMANDS = {
    "debug": "debug",
    "info": "notice",
    "warning": "warning",
    "error": "error",
}


def is_running_in_github_actions() -> bool:
    return "GITHUB_ACTIONS" in os.environ


def is_debug_enabled() -> bool:
    """Debug output is opt-in, either locally or via GitHub's "debug logging" re-run."""
    return any(os.environ.get(var, "0") not in ("", "0") for var in DEBUG_ENV_VARS)


def format_location(file: Path | None, line: int | None, github: bool) -> str:
    if not file:
        return ""
    if file.is_absolute() and file.is_relative_to(Path.cwd()):
        file = file.relative_to(Path.cwd())

    if github:
        return f" file={file},line={line}" if line else f" file={file}"
    return f" {file}:{line}" if line else f" {file}"


class Logger:
    """Minimal logger for diagnostics.

    Locally, messages go to stderr so that command results on stdout can be
    piped. On GitHub Actions they are emitted as workflow commands instead,
    which the runner only picks up from stdout.
    """

    def __init__(self, name: str, stream: TextIO | None = None):
        self.name = name
        self.stream = stream
        self.warnings: list[str] = []

    def _print(
        self, prefix: str, msg: str, file: Path | None = None, line: int | None = None
    ) -> None:
        if is_running_in_github_actions():
            location = format_location(file, line, github=True)
            print(f"::{GITHUB_COMMANDS[prefix]}{location}::{self.name} {msg}")
            return

        location = format_location(file, line, github=False)
        print(
            f"{prefix.upper()}:{location} {self.name} {msg}",
            file=self.stream or sys.stderr,
        )

    def debug(self, msg: str) -> None:
        if is_debug_enabled():
            self._print("debug", msg)

    def info(self, msg: str) -> None:
        self._print("info", msg)

    def warning(
        self, msg: str, file: Path | None = None, line: int | None = None
    ) -> None:
        self.warnings.append(msg)
        self._print("warning", msg, file, line)

    def fatal(
        self, msg: str, file: Path | None = None, line: int | None = None
    ) -> NoReturn:
        self._print("error", msg, file, line)
        raise SystemExit(1)
