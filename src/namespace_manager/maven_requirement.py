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

"""Maven dependency version requirements.

See https://maven.apache.org/pom.html#Dependency_Version_Requirement_Specification
"""

import re
from dataclasses import dataclass, replace

from .errors import IllegalStateError, InvalidFormatError, require
from .maven_version import MavenVersion

# Only commas between two bracketed ranges separate a range set.
_RANGE_SET_SEPARATOR = re.compile(r"(?<=[)\]]),(?=[(\[])")

_RANGE = re.compile(r"([(\[])([^,]*),([^,]*)([)\]])")


@dataclass(frozen=True)
class Empty:
    """Matches nothing."""

    def test(self, version: MavenVersion) -> bool:
        return False

    def __str__(self) -> str:
        return ""


@dataclass(frozen=True)
class SoftRequirement:
    """A recommended version, matched by ordering: "1.0" accepts "1"."""

    version: MavenVersion

    def test(self, version: MavenVersion) -> bool:
        return self.version.compare_to(version) == 0

    def __str__(self) -> str:
        return str(self.version)


@dataclass(frozen=True)
class HardRequirement:
    """An exact version, "[1.0]" only accepts "1.0"."""

    version: MavenVersion

    def test(self, version: MavenVersion) -> bool:
        return self.version == version

    def __str__(self) -> str:
        return f"[{self.version}]"


@dataclass(frozen=True)
class Range:
    lower: MavenVersion | None
    lower_open: bool
    upper: MavenVersion | None
    upper_open: bool

    def __post_init__(self) -> None:
        if self.lower is None and self.upper is None:
            raise InvalidFormatError("both versions in range cannot be None")

    def test(self, version: MavenVersion) -> bool:
        if not isinstance(version, MavenVersion):
            return False
        if self.lower is not None:
            result = self.lower.compare_to(version)
            if result > 0 or (result == 0 and self.lower_open):
                return False
        if self.upper is not None:
            result = self.upper.compare_to(version)
            if result < 0 or (result == 0 and self.upper_open):
                return False
        return True

    def __str__(self) -> str:
        return "".join(
            (
                "(" if self.lower_open else "[",
                str(self.lower) if self.lower is not None else "",
                ",",
                str(self.upper) if self.upper is not None else "",
                ")" if self.upper_open else "]",
            )
        )


@dataclass(frozen=True)
class Multiple:
    """A set of ranges; matches when any of them does."""

    ranges: tuple[Range, ...]

    def test(self, version: MavenVersion) -> bool:
        return any(r.test(version) for r in self.ranges)

    def __str__(self) -> str:
        return ",".join(str(r) for r in self.ranges)


Predicate = Empty | SoftRequirement | HardRequirement | Range | Multiple


class MavenVersionRequirement:
    """A parsed Maven version requirement, usable as a predicate over versions."""

    __slots__ = ("_predicate",)

    def __init__(self, predicate: Predicate) -> None:
        self._predicate = require(predicate, "predicate")

    @property
    def predicate(self) -> Predicate:
        return self._predicate

    def test(self, version: object) -> bool:
        # Versions of other namespaces never match.
        if not isinstance(version, MavenVersion):
            return False
        return self._predicate.test(version)

    def __contains__(self, version: object) -> bool:
        return self.test(version)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, MavenVersionRequirement):
            return NotImplemented
        return self._predicate == other._predicate

    def __hash__(self) -> int:
        return hash((type(self._predicate), self._predicate))

    def __str__(self) -> str:
        return str(self._predicate)

    def __repr__(self) -> str:
        return f"MavenVersionRequirement({str(self)!r})"

    @classmethod
    def parse(cls, value: str) -> "MavenVersionRequirement":
        require(value, "version requirement")
        builder = RequirementBuilder()
        elements = _RANGE_SET_SEPARATOR.split(value)
        if len(elements) == 1:
            element = elements[0]
            if not element:
                builder = builder.reset()
            elif not element.startswith(("(", "[")) and not element.endswith(
                (")", "]")
            ):
                builder = builder.soft_requirement(MavenVersion(element))
            elif "," not in element:
                builder = builder.hard_requirement(_parse_hard_requirement(element))
            else:
                builder = _apply_range(builder, element)
        else:
            for element in elements:
                builder = _apply_range(builder, element)
        return builder.build()


def _parse_hard_requirement(element: str) -> MavenVersion:
    if len(element) < 3 or element[0] != "[" or element[-1] != "]":
        raise InvalidFormatError(f"invalid version requirement: {element}")
    return MavenVersion(element[1:-1])


def _apply_range(builder: "RequirementBuilder", element: str) -> "RequirementBuilder":
    m = _RANGE.fullmatch(element)
    if not m:
        raise InvalidFormatError(f"invalid range: {element}")

    lower, upper = m.group(2), m.group(3)
    return builder.range(
        MavenVersion(lower) if lower else None,
        m.group(1) == "(",
        MavenVersion(upper) if upper else None,
        m.group(4) == ")",
    )


@dataclass(frozen=True)
class RequirementBuilder:
    """Immutable builder, every method returns a new builder.

    Once a range has been added only further ranges may follow; the result is
    a range set.
    """

    predicate: Predicate = Empty()

    def reset(self) -> "RequirementBuilder":
        return replace(self, predicate=Empty())

    def soft_requirement(self, version: MavenVersion) -> "RequirementBuilder":
        return self._requirement(SoftRequirement(require(version, "version")))

    def hard_requirement(self, version: MavenVersion) -> "RequirementBuilder":
        return self._requirement(HardRequirement(require(version, "version")))

    def _requirement(self, predicate: Predicate) -> "RequirementBuilder":
        if isinstance(self.predicate, (Range, Multiple)):
            raise IllegalStateError(
                f"cannot add requirement {predicate} after range {self.predicate}"
            )
        return replace(self, predicate=predicate)

    def range(
        self,
        lower: MavenVersion | None,
        lower_open: bool,
        upper: MavenVersion | None,
        upper_open: bool,
    ) -> "RequirementBuilder":
        new_range = Range(lower, lower_open, upper, upper_open)
        if isinstance(self.predicate, Empty):
            return replace(self, predicate=new_range)
        if isinstance(self.predicate, Range):
            return replace(self, predicate=Multiple((self.predicate, new_range)))
        if isinstance(self.predicate, Multiple):
            return replace(
                self, predicate=Multiple(self.predicate.ranges + (new_range,))
            )
        raise IllegalStateError(f"cannot append range to {self.predicate}")

    def open(
        self, lower: MavenVersion | None, upper: MavenVersion | None
    ) -> "RequirementBuilder":
        return self.range(lower, True, upper, True)

    def closed(
        self, lower: MavenVersion | None, upper: MavenVersion | None
    ) -> "RequirementBuilder":
        return self.range(lower, False, upper, False)

    def closed_open(
        self, lower: MavenVersion | None, upper: MavenVersion | None
    ) -> "RequirementBuilder":
        return self.range(lower, False, upper, True)

    def open_closed(
        self, lower: MavenVersion | None, upper: MavenVersion | None
    ) -> "RequirementBuilder":
        return self.range(lower, True, upper, False)

    def equal_to(self, version: MavenVersion) -> "RequirementBuilder":
        return self.hard_requirement(version)

    def not_equal_to(self, version: MavenVersion) -> "RequirementBuilder":
        return self.open(None, version).open(version, None)

    def less_than(self, version: MavenVersion) -> "RequirementBuilder":
        return self.open(None, version)

    def less_than_or_equal_to(self, version: MavenVersion) -> "RequirementBuilder":
        return self.open_closed(None, version)

    def greater_than(self, version: MavenVersion) -> "RequirementBuilder":
        return self.open(version, None)

    def greater_than_or_equal_to(self, version: MavenVersion) -> "RequirementBuilder":
        return self.closed_open(version, None)

    def build(self) -> MavenVersionRequirement:
        return MavenVersionRequirement(self.predicate)
