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

"""The namespace registry.

Every namespace token maps to a NamespaceManager, a set of parsing functions
for that namespace. The registry is assembled once from the built-in
managers plus the reserved and alias token files, and is read-only after that.
"""

import functools
from collections.abc import Callable, Mapping
from dataclasses import dataclass, replace
from pathlib import Path
from types import MappingProxyType

from . import Context, Identifier, Scope, Version, VersionRange
from .errors import InvalidFormatError, NullInputError, UnknownNamespaceError, require
from .gh_logging import Logger
from .maven import MavenCoordinate, MavenRepository, MavenScope, maven_central
from .maven_requirement import MavenVersionRequirement
from .maven_version import MavenVersion
from .semantic import SemVer

log = Logger(__name__)

DATA_DIR = Path(__file__).parent / "data"
DEFAULT_RESERVED_FILE = DATA_DIR / "reserved"
DEFAULT_ALIASES_FILE = DATA_DIR / "aliases"

# Version types with a total order of their own.
ORDERED_VERSIONS = (MavenVersion, SemVer)


@dataclass(frozen=True)
class NamespaceManager:
    """The capabilities of a single namespace.

    All parse functions raise InvalidFormatError for malformed input and
    NullInputError for None.
    """

    namespace: str
    parse_context: Callable[[str], Context]
    parse_identifier: Callable[[str], Identifier]
    parse_version: Callable[[str], Version]
    parse_range: Callable[[str], VersionRange]
    parse_scope: Callable[[str], Scope]
    default_context: Callable[[], Context] | None = None
    # The namespace this one delegates to, if it is an alias.
    alias_of: str | None = None
    reserved: bool = False

    def __post_init__(self) -> None:
        object.__setattr__(self, "namespace", self.namespace.lower())

    def is_valid_context(self, value: str | None) -> bool:
        return _is_valid(value, self.parse_context)

    def is_valid_identifier(self, value: str | None) -> bool:
        return _is_valid(value, self.parse_identifier)

    def is_valid_version(self, value: str | None) -> bool:
        return _is_valid(value, self.parse_version)

    def is_valid_range(self, value: str | None) -> bool:
        return _is_valid(value, self.parse_range)

    def is_valid_scope(self, value: str | None) -> bool:
        return _is_valid(value, self.parse_scope)


def _is_valid(value: str | None, parser: Callable[[str], object]) -> bool:
    try:
        parser(value)  # type: ignore[arg-type]
    except (InvalidFormatError, NullInputError):
        return False
    return True


MAVEN = NamespaceManager(
    namespace="maven",
    parse_context=MavenRepository.parse,
    parse_identifier=MavenCoordinate.parse,
    parse_version=MavenVersion.parse,
    parse_range=MavenVersionRequirement.parse,
    parse_scope=MavenScope.parse,
    default_context=maven_central,
)

BUILTIN_MANAGERS = (MAVEN,)


@dataclass(frozen=True)
class ReservedValue:
    """Any value of a reserved namespace; kept verbatim, never interpreted."""

    namespace: str
    value: str

    def __post_init__(self) -> None:
        require(self.value, "value")

    def __str__(self) -> str:
        return self.value


class ReservedContext(ReservedValue):
    def locate(self, identifier: object) -> None:
        raise NotImplementedError(
            f"cannot resolve locator for reserved namespace {self.namespace}"
        )


class ReservedIdentifier(ReservedValue):
    @property
    def context(self) -> None:
        return None


class ReservedVersion(ReservedValue):
    pass


class ReservedVersionRange(ReservedValue):
    def test(self, version: object) -> bool:
        return False


class ReservedScope(ReservedValue):
    pass


def reserved_manager(namespace: str) -> NamespaceManager:
    """A manager for a namespace that is recognized but not supported yet."""
    namespace = namespace.lower()
    return NamespaceManager(
        namespace=namespace,
        parse_context=functools.partial(ReservedContext, namespace),
        parse_identifier=functools.partial(ReservedIdentifier, namespace),
        parse_version=functools.partial(ReservedVersion, namespace),
        parse_range=functools.partial(ReservedVersionRange, namespace),
        parse_scope=functools.partial(ReservedScope, namespace),
        reserved=True,
    )


def alias_manager(alias: str, target: NamespaceManager) -> NamespaceManager:
    """A manager exposing the functionality of target under another name."""
    return replace(
        target, namespace=alias, alias_of=target.alias_of or target.namespace
    )


def _read_token_lines(path: Path) -> list[tuple[int, str]]:
    """Return (line number, entry) pairs, skipping blanks, comments and repeats."""
    if not path.exists():
        log.warning(f"{path} does not exist; skipping")
        return []

    try:
        with open(path, encoding="utf-8") as f:
            lines = f.read().splitlines()
    except (OSError, UnicodeDecodeError) as e:
        log.warning(f"{path} could not be read: {e}")
        return []

    entries: list[tuple[int, str]] = []
    seen: set[str] = set()
    for number, line in enumerate(lines, start=1):
        line = line.strip()
        if not line or line.startswith("#") or line in seen:
            continue
        seen.add(line)
        entries.append((number, line))
    return entries


def build_registry(
    reserved_file: Path | None = None, aliases_file: Path | None = None
) -> Mapping[str, NamespaceManager]:
    """Assemble the namespace registry.

    Later layers win: reserved namespaces are overridden by aliases, which are
    overridden by the built-in managers.
    """
    reserved_file = reserved_file or DEFAULT_RESERVED_FILE
    aliases_file = aliases_file or DEFAULT_ALIASES_FILE

    managers: dict[str, NamespaceManager] = {}
    for _, token in _read_token_lines(reserved_file):
        managers[token.lower()] = reserved_manager(token)

    builtins = {m.namespace: m for m in BUILTIN_MANAGERS}
    known = {**managers, **builtins}
    for number, line in _read_token_lines(aliases_file):
        *aliases, target = line.lower().split()
        if not aliases:
            log.warning(
                f"alias entry '{line}' does not name an alias; skipping",
                file=aliases_file,
                line=number,
            )
            continue
        if target not in known:
            log.warning(
                f"alias target '{target}' is not a known namespace; skipping",
                file=aliases_file,
                line=number,
            )
            continue
        for alias in aliases:
            managers[alias] = known[alias] = alias_manager(alias, known[target])

    managers.update(builtins)
    log.debug(
        f"Registered {len(managers)} namespaces "
        f"({sum(m.reserved for m in managers.values())} reserved)"
    )
    return MappingProxyType(managers)


@functools.cache
def default_registry() -> Mapping[str, NamespaceManager]:
    return build_registry()


def get(
    namespace: str, registry: Mapping[str, NamespaceManager] | None = None
) -> NamespaceManager:
    """Look up a namespace manager, ignoring case."""
    require(namespace, "namespace")
    if registry is None:
        registry = default_registry()
    try:
        return registry[namespace.lower()]
    except KeyError:
        raise UnknownNamespaceError(namespace) from None


def compare(version1: object, version2: object) -> int | None:
    """Compare two versions of the same namespace.

    Returns -1, 0 or 1, or None when the versions have no common order.
    """
    for version_type in ORDERED_VERSIONS:
        if isinstance(version1, version_type) and isinstance(version2, version_type):
            return version1.compare_to(version2)
    return None


def matches(version_range: VersionRange, version: object) -> bool:
    """Test a version against a range; versions of other namespaces never match."""
    return require(version_range, "version range").test(version)
