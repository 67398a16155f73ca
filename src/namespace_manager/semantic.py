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

"""Semantic Versioning 2.0.0, see https://semver.org/spec/v2.0.0.html"""

import re
from dataclasses import dataclass, field, replace

from .errors import InvalidFormatError, require

# Only suitable for tokenization, identifiers are validated separately.
_TOKEN_PATTERN = re.compile(
    r"([0-9]+)\.([0-9]+)\.([0-9]+)(?:-([0-9A-Za-z.-]*))?(?:\+([0-9A-Za-z.-]*))?"
)

_IDENTIFIER = re.compile(r"[0-9A-Za-z-]+")

_NUMERIC = re.compile(r"[0-9]+")


def _check_version(value: int, what: str) -> int:
    if value < 0:
        raise InvalidFormatError(f"{what} must be non-negative: {value}")
    return value


def _check_identifier(identifier: str, allow_leading_zero: bool, what: str) -> str:
    require(identifier, f"{what} identifier")
    if not identifier:
        raise InvalidFormatError(f"{what} identifier must not be empty")
    if not _IDENTIFIER.fullmatch(identifier):
        raise InvalidFormatError(
            f"{what} identifier must be alphanumeric or hyphen: {identifier}"
        )
    if (
        not allow_leading_zero
        and len(identifier) > 1
        and identifier[0] == "0"
        and _NUMERIC.fullmatch(identifier)
    ):
        raise InvalidFormatError(
            f"{what} identifier must not include leading zeros: {identifier}"
        )
    return identifier


def compare_identifiers(identifier1: str, identifier2: str) -> int:
    """Compare two pre-release identifiers.

    Numeric identifiers compare numerically and always have lower precedence
    than alphanumeric ones, which compare lexically in ASCII order.
    """
    numeric1 = _NUMERIC.fullmatch(identifier1) is not None
    numeric2 = _NUMERIC.fullmatch(identifier2) is not None
    if numeric1 and numeric2:
        a, b = int(identifier1), int(identifier2)
    elif numeric1 or numeric2:
        return -1 if numeric1 else 1
    else:
        a, b = identifier1, identifier2
    return (a > b) - (a < b)


@dataclass(frozen=True)
class SemVer:
    """A semantic version.

    Note: the ordering is inconsistent with ``==``. Build metadata is ignored
    for precedence but is part of equality.
    """

    major: int
    minor: int
    patch: int
    pre_release: tuple[str, ...] = ()
    build_metadata: tuple[str, ...] = ()
    # Original text when parsed, so str() round-trips exactly.
    _text: str | None = field(default=None, compare=False, repr=False)

    def __post_init__(self) -> None:
        _check_version(self.major, "major version")
        _check_version(self.minor, "minor version")
        _check_version(self.patch, "patch version")
        object.__setattr__(
            self,
            "pre_release",
            tuple(
                _check_identifier(i, False, "pre-release version")
                for i in self.pre_release
            ),
        )
        object.__setattr__(
            self,
            "build_metadata",
            tuple(
                _check_identifier(i, True, "build metadata")
                for i in self.build_metadata
            ),
        )

    @classmethod
    def parse(cls, value: str) -> "SemVer":
        require(value, "version")
        m = _TOKEN_PATTERN.fullmatch(value)
        if not m:
            raise InvalidFormatError(f"invalid SemVer input: {value}")

        pre_release, build_metadata = m.group(4), m.group(5)
        return cls(
            major=int(m.group(1)),
            minor=int(m.group(2)),
            patch=int(m.group(3)),
            pre_release=_split(pre_release),
            build_metadata=_split(build_metadata),
            _text=value,
        )

    @property
    def is_public_api(self) -> bool:
        return self.major >= 1

    def with_pre_release(self, *identifiers: str) -> "SemVer":
        return replace(self, pre_release=identifiers, _text=None)

    def with_build_metadata(self, *identifiers: str) -> "SemVer":
        return replace(self, build_metadata=identifiers, _text=None)

    def increment_major(self) -> "SemVer":
        return replace(self, major=self.major + 1, minor=0, patch=0, _text=None)

    def increment_minor(self) -> "SemVer":
        return replace(self, minor=self.minor + 1, patch=0, _text=None)

    def increment_patch(self) -> "SemVer":
        return replace(self, patch=self.patch + 1, _text=None)

    def compare_to(self, other: object) -> int | None:
        """Return -1, 0 or 1, or None when other is not a semantic version."""
        if not isinstance(other, SemVer):
            return None
        return self._compare(other)

    def _compare(self, other: "SemVer") -> int:
        core1 = (self.major, self.minor, self.patch)
        core2 = (other.major, other.minor, other.patch)
        if core1 != core2:
            return -1 if core1 < core2 else 1

        if self.pre_release and other.pre_release:
            for identifier1, identifier2 in zip(self.pre_release, other.pre_release):
                result = compare_identifiers(identifier1, identifier2)
                if result != 0:
                    return result
            return _sign(len(self.pre_release), len(other.pre_release))
        if not self.pre_release:
            # a release has higher precedence than any of its pre-releases
            return 0 if not other.pre_release else 1
        return -1

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, SemVer):
            return NotImplemented
        return self._compare(other) < 0

    def __le__(self, other: object) -> bool:
        if not isinstance(other, SemVer):
            return NotImplemented
        return self._compare(other) <= 0

    def __gt__(self, other: object) -> bool:
        if not isinstance(other, SemVer):
            return NotImplemented
        return self._compare(other) > 0

    def __ge__(self, other: object) -> bool:
        if not isinstance(other, SemVer):
            return NotImplemented
        return self._compare(other) >= 0

    def __str__(self) -> str:
        if self._text is not None:
            return self._text

        result = f"{self.major}.{self.minor}.{self.patch}"
        if self.pre_release:
            result += "-" + ".".join(self.pre_release)
        if self.build_metadata:
            result += "+" + ".".join(self.build_metadata)
        return result


def _sign(a: int, b: int) -> int:
    return (a > b) - (a < b)


def _split(identifiers: str | None) -> tuple[str, ...]:
    # "1.0.0-" yields one empty identifier, which validation rejects
    return tuple(identifiers.split(".")) if identifiers is not None else ()


# The version that defines the public API, see https://semver.org/#spec-item-5
PUBLIC_API = SemVer(1, 0, 0)

