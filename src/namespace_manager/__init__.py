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

from typing import Protocol, runtime_checkable

from .errors import (
    IllegalStateError,
    InvalidFormatError,
    NamespaceError,
    NullInputError,
    UnknownNamespaceError,
)
from .maven import (
    MavenCoordinate,
    MavenDependency,
    MavenLocator,
    MavenRepository,
    MavenScope,
    maven_central,
)
from .maven_requirement import MavenVersionRequirement, RequirementBuilder
from .maven_version import MavenVersion
from .semantic import PUBLIC_API, SemVer


class Version(Protocol):
    """A version number or tag of a component.

    Versions are opaque. Namespaces that define an order make their versions
    comparable, but only with versions of the same namespace.
    """


@runtime_checkable
class VersionRange(Protocol):
    """A request for one or more versions.

    Testing a version of another namespace is never an error, it just does
    not match.
    """

    def test(self, version: object) -> bool: ...


class Context(Protocol):
    """The base (e.g. a repository) an identifier is resolved against."""

    def locate(self, identifier: object) -> "Locator": ...


class Identifier(Protocol):
    @property
    def context(self) -> Context | None: ...


class Locator(Protocol):
    """The actual location of a single package, usually a URI."""

    @property
    def context(self) -> Context: ...

    @property
    def identifier(self) -> Identifier: ...

    def to_uri_string(self) -> str: ...


class Scope(Protocol):
    pass


class Dependency(Protocol):
    @property
    def version_range(self) -> VersionRange: ...


__all__ = [
    "Context",
    "Dependency",
    "Identifier",
    "IllegalStateError",
    "InvalidFormatError",
    "Locator",
    "MavenCoordinate",
    "MavenDependency",
    "MavenLocator",
    "MavenRepository",
    "MavenScope",
    "MavenVersion",
    "MavenVersionRequirement",
    "NamespaceError",
    "NullInputError",
    "PUBLIC_API",
    "RequirementBuilder",
    "Scope",
    "SemVer",
    "UnknownNamespaceError",
    "Version",
    "VersionRange",
    "maven_central",
]
