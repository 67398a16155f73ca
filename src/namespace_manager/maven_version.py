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

"""Maven version ordering.

Implements the "Version Order Specification" of the Maven POM reference:
https://maven.apache.org/pom.html#Version_Order_Specification
"""

import re
from dataclasses import dataclass
from enum import Enum

from .errors import require

# Values that are stripped before each dash delimited token or at the end.
NULL_VALUES = frozenset({"0", "", "final", "ga"})

# Sort order of well-known qualifiers; anything else ranks 0.
QUALIFIER_ORDER = {
    "alpha": 1,
    "beta": 2,
    "milestone": 3,
    "rc": 4,
    "cr": 4,
    "snapshot": 5,
    "": 6,
    "final": 6,
    "ga": 6,
    "sp": 7,
}

# "a1" -> "alpha-1" etc., only when the shorthand is a whole token.
_SHORTHANDS = (
    (re.compile(r"(?<![^.-])a([0-9]+)(?![^.-])"), r"alpha-\1"),
    (re.compile(r"(?<![^.-])b([0-9]+)(?![^.-])"), r"beta-\1"),
    (re.compile(r"(?<![^.-])m([0-9]+)(?![^.-])"), r"milestone-\1"),
)

_SPLIT = re.compile(r"(?=[.-])|(?<=[0-9])(?=[a-z])|(?<=[a-z])(?=[0-9])")

_DIGITS = re.compile(r"[0-9]+")


class Delimiter(Enum):
    NONE = ""
    DOT = "."
    DASH = "-"


class TokenKind(Enum):
    NUMERIC = "numeric"
    QUALIFIER = "qualifier"


@dataclass(frozen=True)
class Token:
    delimiter: Delimiter
    value: str

    @classmethod
    def parse(cls, text: str) -> "Token":
        if text[:1] in (".", "-"):
            return cls(Delimiter(text[0]), text[1:])
        return cls(Delimiter.NONE, text)

    @property
    def kind(self) -> TokenKind:
        if _DIGITS.fullmatch(self.value):
            return TokenKind.NUMERIC
        return TokenKind.QUALIFIER

    @property
    def is_null(self) -> bool:
        return self.value in NULL_VALUES

    def __str__(self) -> str:
        return self.delimiter.value + self.value


# Padding used when one token list is shorter than the other.
_DOT_FILLER = Token(Delimiter.DOT, "0")
_DASH_FILLER = Token(Delimiter.DASH, "")


def _sign(a, b) -> int:
    return (a > b) - (a < b)


def tokenize(value: str) -> tuple[Token, ...]:
    """Split an arbitrary version string into its list of sorting tokens."""
    text = value.lower()
    for pattern, replacement in _SHORTHANDS:
        text = pattern.sub(replacement, text)

    pieces = _SPLIT.split(text)
    if len(pieces) > 1 and pieces[0] == "":
        # a leading delimiter stays attached to the first token
        del pieces[0]

    tokens = [Token.parse(pieces[0])]
    for piece in pieces[1:]:
        if piece in (".", "-"):
            piece += "0"
        elif not piece.startswith((".", "-")):
            piece = "-" + piece
        tokens.append(Token.parse(piece))

    # Walk backwards removing null values. A non-null token protects everything
    # back to (and including) the dash token that starts its sub-list.
    i = len(tokens) - 1
    while i > 0:
        if tokens[i].is_null:
            del tokens[i]
        else:
            while tokens[i].delimiter is not Delimiter.DASH and i > 1:
                i -= 1
        i -= 1

    return tuple(tokens)


def compare_tokens(token1: Token, token2: Token) -> int:
    number1 = token1.kind is TokenKind.NUMERIC
    number2 = token2.kind is TokenKind.NUMERIC

    if token1.delimiter is token2.delimiter:
        if number1 and number2:
            return _sign(int(token1.value), int(token2.value))
        if number1 or number2:
            return 1 if number1 else -1

        qualifier1 = QUALIFIER_ORDER.get(token1.value, 0)
        qualifier2 = QUALIFIER_ORDER.get(token2.value, 0)
        if qualifier1 == 0 and qualifier2 == 0:
            return _sign(token1.value, token2.value)
        return _sign(qualifier1, qualifier2)

    if token1.delimiter is Delimiter.DOT:
        return 1 if number1 else -1
    return -1 if number2 else 1


class MavenVersion:
    """A Maven artifact version.

    Any string is a valid Maven version. Note: the ordering of this class is
    inconsistent with ``==``. For example "1.0.0" and "1.0" are not equal, but
    neither sorts before the other because trailing null values are ignored.
    """

    __slots__ = ("_value", "_tokens")

    def __init__(self, value: str) -> None:
        require(value, "version")
        if not isinstance(value, str):
            raise TypeError("Version must be a string")

        self._value = value
        self._tokens = tokenize(value)

    @classmethod
    def parse(cls, value: str) -> "MavenVersion":
        return cls(value)

    @property
    def tokens(self) -> tuple[Token, ...]:
        return self._tokens

    def compare_to(self, other: object) -> int | None:
        """Return -1, 0 or 1, or None when other is not a Maven version."""
        if not isinstance(other, MavenVersion):
            return None
        return self._compare(other)

    def _compare(self, other: "MavenVersion") -> int:
        tokens1, tokens2 = self._tokens, other._tokens
        for i in range(max(len(tokens1), len(tokens2))):
            token1 = tokens1[i] if i < len(tokens1) else None
            token2 = tokens2[i] if i < len(tokens2) else None
            if token1 is None:
                token1 = _DOT_FILLER if token2.delimiter is Delimiter.DOT else _DASH_FILLER
            elif token2 is None:
                token2 = _DOT_FILLER if token1.delimiter is Delimiter.DOT else _DASH_FILLER

            result = compare_tokens(token1, token2)
            if result != 0:
                return result
        return 0

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, MavenVersion):
            return NotImplemented
        return self._compare(other) < 0

    def __le__(self, other: object) -> bool:
        if not isinstance(other, MavenVersion):
            return NotImplemented
        return self._compare(other) <= 0

    def __gt__(self, other: object) -> bool:
        if not isinstance(other, MavenVersion):
            return NotImplemented
        return self._compare(other) > 0

    def __ge__(self, other: object) -> bool:
        if not isinstance(other, MavenVersion):
            return NotImplemented
        return self._compare(other) >= 0

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, MavenVersion):
            return NotImplemented
        # Intentionally the raw strings: "1.0" and "1" are different versions
        # even though they sort the same.
        return self._value == other._value

    def __hash__(self) -> int:
        return hash(self._value)

    def __str__(self) -> str:
        return self._value

    def __repr__(self) -> str:
        return f"MavenVersion({self._value!r})"
