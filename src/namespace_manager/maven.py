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

"""Maven coordinates, repositories, locators, scopes and dependencies."""

import xml.etree.ElementTree as ET
from dataclasses import dataclass, replace
from enum import Enum

from .errors import IllegalStateError, InvalidFormatError, require
from .maven_requirement import MavenVersionRequirement
from .maven_version import MavenVersion

DEFAULT_PACKAGING = "jar"


@dataclass(frozen=True, eq=False)
class MavenCoordinate:
    """A Maven identifier: https://maven.apache.org/pom.html#Maven_Coordinates"""

    group_id: str
    artifact_id: str
    version: MavenVersion | None = None
    packaging: str | None = None
    classifier: str | None = None

    def __post_init__(self) -> None:
        require(self.group_id, "group id")
        require(self.artifact_id, "artifact id")
        if self.classifier is not None and self.packaging is None:
            raise IllegalStateError("packaging is required when using classifier")

    @property
    def context(self) -> None:
        # Maven coordinates are always relative to the default context
        return None

    @classmethod
    def parse(cls, value: str) -> "MavenCoordinate":
        require(value, "identifier")
        parts = value.split(":")
        if not 3 <= len(parts) <= 5 or not all(parts):
            raise InvalidFormatError(f"invalid Maven identifier: {value}")

        return cls(
            group_id=parts[0],
            artifact_id=parts[1],
            packaging=parts[2] if len(parts) >= 4 else None,
            classifier=parts[3] if len(parts) == 5 else None,
            version=MavenVersion(parts[-1]),
        )

    def with_version(self, version: MavenVersion | str | None) -> "MavenCoordinate":
        if isinstance(version, str):
            version = MavenVersion(version)
        return replace(self, version=version)

    def without_version(self) -> "MavenCoordinate":
        return self.with_version(None) if self.version is not None else self

    def with_packaging_if_needed(
        self, packaging: str, classifier: str | None = None
    ) -> "MavenCoordinate":
        """Only record the packaging when it carries information.

        That is, when there is a classifier or it is not the default packaging.
        """
        if classifier is not None:
            return replace(self, packaging=packaging, classifier=classifier)
        if packaging != DEFAULT_PACKAGING:
            return replace(self, packaging=packaging)
        return self

    def _key(self) -> tuple:
        return (
            self.group_id,
            self.artifact_id,
            self.version,
            self.packaging or DEFAULT_PACKAGING,
            self.classifier,
        )

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, MavenCoordinate):
            return NotImplemented
        return self._key() == other._key()

    def __hash__(self) -> int:
        return hash(self._key())

    def __str__(self) -> str:
        parts = [self.group_id, self.artifact_id]
        if self.packaging is not None:
            parts.append(self.packaging)
        if self.classifier is not None:
            parts.append(self.classifier)
        if self.version is not None:
            parts.append(str(self.version))
        return ":".join(parts)


@dataclass(frozen=True, eq=False)
class MavenRepository:
    """A Maven repository, the context for Maven coordinates.

    The string form follows the ``id::layout::url`` convention of
    ``dependency:get -DremoteRepositories``.
    """

    url: str
    id: str | None = None
    name: str | None = None
    layout: str | None = None

    def __post_init__(self) -> None:
        require(self.url, "url")
        if self.layout == "":
            object.__setattr__(self, "layout", None)

    @classmethod
    def parse(cls, value: str) -> "MavenRepository":
        require(value, "context")
        parts = value.split("::")
        if len(parts) == 1:
            return cls(url=parts[0])
        if len(parts) == 3:
            return cls(id=parts[0], layout=parts[1], url=parts[2])
        raise InvalidFormatError(f"invalid Maven context: {value}")

    @property
    def is_default_layout(self) -> bool:
        return self.layout is None or self.layout == "default"

    @property
    def is_legacy_layout(self) -> bool:
        return self.layout == "legacy"

    def locate(self, identifier: object) -> "MavenLocator":
        if not isinstance(identifier, MavenCoordinate):
            raise TypeError(f"incorrect namespace for Maven locator: {identifier!r}")
        return MavenLocator(self, identifier)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, MavenRepository):
            return NotImplemented
        return self.url == other.url

    def __hash__(self) -> int:
        return hash(self.url)

    def __str__(self) -> str:
        if self.id is not None:
            return f"{self.id}::{self.layout or ''}::{self.url}"
        return self.url


def maven_central() -> MavenRepository:
    """The Central Repository, as configured by the Super POM."""
    return MavenRepository(
        id="central",
        name="Central Repository",
        url="https://repo.maven.apache.org/maven2",
    )


@dataclass(frozen=True)
class MavenLocator:
    """The location of a single artifact.

    See https://cwiki.apache.org/confluence/display/MAVENOLD/Repository+Layout+-+Final
    """

    repository: MavenRepository
    coordinate: MavenCoordinate

    def __post_init__(self) -> None:
        require(self.repository, "repository")
        require(self.coordinate, "identifier")
        if self.coordinate.version is None:
            raise IllegalStateError(f"locator requires version: {self.coordinate}")

    @property
    def context(self) -> MavenRepository:
        return self.repository

    @property
    def identifier(self) -> MavenCoordinate:
        return self.coordinate

    def to_uri_string(self) -> str:
        base = self.repository.url
        if not base.endswith("/"):
            base += "/"

        c = self.coordinate
        extension = c.packaging or DEFAULT_PACKAGING
        if self.repository.is_default_layout:
            path = "/".join(c.group_id.split("."))
            file_name = f"{c.artifact_id}-{c.version}"
            if c.classifier is not None:
                file_name += f"-{c.classifier}"
            return f"{base}{path}/{c.artifact_id}/{c.version}/{file_name}.{extension}"
        if self.repository.is_legacy_layout:
            directory = "poms" if c.packaging == "pom" else "jars"
            file_name = f"{c.artifact_id}-{c.version}.{extension}"
            return f"{base}{c.group_id}/{directory}/{file_name}"
        raise NotImplementedError(f"unsupported layout: {self.repository.layout}")

    def __str__(self) -> str:
        if self.repository.is_default_layout or self.repository.is_legacy_layout:
            return self.to_uri_string()
        return f"{self.repository.url}{{{self.coordinate}}}"


class MavenScope(Enum):
    """Dependency scopes: https://maven.apache.org/pom.html#Dependencies"""

    COMPILE = "compile"
    PROVIDED = "provided"
    RUNTIME = "runtime"
    TEST = "test"
    SYSTEM = "system"

    @classmethod
    def parse(cls, value: str) -> "MavenScope":
        require(value, "scope")
        try:
            return cls(value)
        except ValueError:
            raise InvalidFormatError(f"invalid Maven scope: {value}") from None

    def __str__(self) -> str:
        return self.value


DEFAULT_TYPE = "jar"
DEFAULT_SCOPE = MavenScope.COMPILE
DEFAULT_OPTIONAL = False

_DEPENDENCY_FIELDS = (
    ("group_id", "groupId"),
    ("artifact_id", "artifactId"),
    ("version", "version"),
    ("classifier", "classifier"),
    ("type", "type"),
    ("scope", "scope"),
    ("system_path", "systemPath"),
    ("optional", "optional"),
)


@dataclass(frozen=True, eq=False)
class MavenDependency:
    """A ``<dependency>`` entry of a POM."""

    group_id: str
    artifact_id: str
    version: MavenVersionRequirement
    classifier: str | None = None
    type: str | None = None
    scope: MavenScope | None = None
    system_path: str | None = None
    optional: bool | None = None

    def __post_init__(self) -> None:
        require(self.group_id, "group id")
        require(self.artifact_id, "artifact id")
        require(self.version, "version")
        if self.system_path is not None and self.scope is not MavenScope.SYSTEM:
            raise IllegalStateError("system path requires scope of system")

    @property
    def version_range(self) -> MavenVersionRequirement:
        return self.version

    def resolve(self, version: object) -> MavenCoordinate | None:
        """Return the coordinate of this dependency at the given version.

        Returns None when the version does not satisfy the requirement.
        """
        if not isinstance(version, MavenVersion) or not self.version.test(version):
            return None
        # TODO: map dependency types such as "test-jar" to their packaging and
        # classifier using the artifact handler table instead of copying them.
        packaging = self.type
        if packaging is None and self.classifier is not None:
            packaging = DEFAULT_TYPE
        return MavenCoordinate(
            group_id=self.group_id,
            artifact_id=self.artifact_id,
            version=version,
            packaging=packaging,
            classifier=self.classifier,
        )

    def _key(self) -> tuple:
        return (
            self.group_id,
            self.artifact_id,
            self.version,
            self.classifier,
            self.type or DEFAULT_TYPE,
            self.scope or DEFAULT_SCOPE,
            self.system_path,
            DEFAULT_OPTIONAL if self.optional is None else self.optional,
        )

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, MavenDependency):
            return NotImplemented
        return self._key() == other._key()

    def __hash__(self) -> int:
        return hash(self._key())

    def to_element(self) -> ET.Element:
        element = ET.Element("dependency")
        for attr, tag in _DEPENDENCY_FIELDS:
            value = getattr(self, attr)
            if value is None:
                continue
            if isinstance(value, bool):
                value = str(value).lower()
            ET.SubElement(element, tag).text = str(value)
        return element

    def __str__(self) -> str:
        # The closest thing to a string representation is the POM XML
        return ET.tostring(self.to_element(), encoding="unicode")

    @classmethod
    def from_xml(cls, value: str | ET.Element) -> "MavenDependency":
        require(value, "dependency")
        if isinstance(value, str):
            try:
                element = ET.fromstring(value)
            except ET.ParseError as e:
                raise InvalidFormatError(f"invalid dependency XML: {e}") from e
        else:
            element = value

        # POMs are usually namespaced, match on the local name only
        fields: dict[str, str] = {}
        for child in element:
            tag = child.tag.rsplit("}", 1)[-1]
            fields[tag] = (child.text or "").strip()

        for required in ("groupId", "artifactId", "version"):
            if not fields.get(required):
                raise InvalidFormatError(f"dependency is missing <{required}>")

        optional = fields.get("optional")
        if optional is not None and optional not in ("true", "false"):
            raise InvalidFormatError(f"invalid <optional> value: {optional}")

        return cls(
            group_id=fields["groupId"],
            artifact_id=fields["artifactId"],
            version=MavenVersionRequirement.parse(fields["version"]),
            classifier=fields.get("classifier"),
            type=fields.get("type"),
            scope=MavenScope.parse(fields["scope"]) if "scope" in fields else None,
            system_path=fields.get("systemPath"),
            optional=None if optional is None else optional == "true",
        )
