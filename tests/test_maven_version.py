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

import itertools

import pytest

from src.namespace_manager.errors import NullInputError
from src.namespace_manager.maven_version import (
    Delimiter,
    MavenVersion,
    TokenKind,
    tokenize,
)
from src.namespace_manager.semantic import SemVer


def v(value: str) -> MavenVersion:
    return MavenVersion(value)


def assert_equivalent(a: str, b: str) -> None:
    assert v(a).compare_to(v(b)) == 0
    assert v(b).compare_to(v(a)) == 0


def test_number_padding():
    assert v("1") < v("1.1")


def test_qualifier_padding():
    assert v("1-snapshot") < v("1")
    assert v("1") < v("1-sp")


def test_switching_to_numeric_order():
    assert v("1-foo2") < v("1-foo10")


def test_delimiter_precedence():
    assert v("1.foo") < v("1-foo")
    assert v("1-foo") < v("1-1")
    assert v("1-1") < v("1.1")


def test_removing_trailing_null_values():
    assert_equivalent("1.ga", "1-ga")
    assert_equivalent("1-ga", "1-0")
    assert_equivalent("1-0", "1.0")
    assert_equivalent("1.0", "1")


def test_service_pack_after_release():
    assert v("1-sp") > v("1-ga")
    assert v("1-sp.1") > v("1-ga.1")


def test_trailing_null_values_at_each_hyphen():
    assert v("1-sp-1") < v("1-ga-1")
    assert_equivalent("1-ga-1", "1-1")


def test_shorthand_qualifiers():
    assert_equivalent("1-a1", "1-alpha-1")
    assert_equivalent("1-b2", "1-beta-2")
    assert_equivalent("1-m3", "1-milestone-3")


def test_shorthand_only_at_token_boundaries():
    # "ba1" is not a shorthand, so it stays an unknown qualifier
    assert [str(t) for t in v("1-ba1").tokens] == ["1", "-ba", "-1"]


def test_well_known_qualifier_order():
    ordered = [
        "1-alpha",
        "1-beta",
        "1-milestone",
        "1-rc",
        "1-snapshot",
        "1",
        "1-sp",
    ]
    assert sorted(v(x) for x in reversed(ordered)) == [v(x) for x in ordered]


def test_cr_is_rc():
    assert_equivalent("1-cr", "1-rc")


def test_unknown_qualifiers_are_lexical():
    assert v("1-abc") < v("1-abd")
    # both are unknown, so they are not ranked against alpha
    assert v("1-xyz") > v("1-abc")


def test_unknown_qualifier_before_known_ones():
    assert v("1-zzz") < v("1-alpha")


def test_case_insensitive():
    assert_equivalent("1.0-RC1", "1.0-rc-1")
    assert_equivalent("1.0-Final", "1.0")


def test_large_numbers():
    assert v("1.99999999999999999999") < v("1.100000000000000000000")


def test_trailing_zeros_not_equal():
    # equivalent for ordering, still different versions
    assert_equivalent("1.0.0", "1")
    assert v("1.0.0") != v("1")
    assert not v("1.0.0") < v("1")
    assert not v("1.0.0") > v("1")


def test_equality_and_hash_use_raw_text():
    assert v("1.0") == v("1.0")
    assert hash(v("1.0")) == hash(v("1.0"))
    assert len({v("1.0"), v("1.0"), v("1")}) == 2


def test_str_round_trips():
    for value in ("1.0-SNAPSHOT", "2.0.0.RELEASE", "", "1-a1"):
        assert str(v(value)) == value


def test_repr():
    assert repr(v("1.0")) == "MavenVersion('1.0')"


def test_tokens():
    tokens = v("1.2-beta3").tokens
    assert [str(t) for t in tokens] == ["1", ".2", "-beta", "-3"]
    assert tokens[0].delimiter is Delimiter.NONE
    assert tokens[1].kind is TokenKind.NUMERIC
    assert tokens[2].kind is TokenKind.QUALIFIER
    assert tokens[2].delimiter is Delimiter.DASH


def test_empty_tokens_become_zero():
    assert [str(t) for t in tokenize("1..1")] == ["1", ".0", ".1"]


def test_null_values_elided():
    assert [str(t) for t in tokenize("1.0.0")] == ["1"]
    assert [str(t) for t in tokenize("1-ga-1")] == ["1", "-1"]
    assert [str(t) for t in tokenize("1.0-final")] == ["1"]


def test_non_null_token_protects_its_group():
    assert [str(t) for t in tokenize("1.0.1")] == ["1", ".0", ".1"]


def test_any_string_is_a_version():
    assert str(v("not a version")) == "not a version"
    assert v("") < v("1")


def test_comparison_with_other_types():
    assert v("1") != "1"
    with pytest.raises(TypeError):
        _ = v("1") < "2"


def test_none_is_rejected():
    with pytest.raises(NullInputError):
        MavenVersion(None)  # type: ignore[arg-type]


def test_parse():
    assert MavenVersion.parse("1.0") == v("1.0")


def test_adjacent_shorthands_all_expand():
    assert [str(t) for t in tokenize("1-a1.a2")] == [
        "1",
        "-alpha",
        "-1",
        ".alpha",
        "-2",
    ]
    assert_equivalent("1-a1.a2", "1-alpha-1.alpha-2")
    # a bare "a" is an unknown qualifier, which sorts below alpha
    assert v("1-a1.a") < v("1-a1.a2")


def test_compare_to_other_namespace():
    assert v("1.0.0").compare_to(SemVer.parse("1.0.0")) is None
    assert SemVer.parse("1.0.0").compare_to(v("1.0.0")) is None
    assert v("1").compare_to("1") is None


GENERATED_VERSIONS = [
    base + suffix
    for base, suffix in itertools.product(
        ["1", "1.0", "1.1", "2", "1sp"],
        [
            "",
            "-alpha",
            "-1",
            ".sp",
            "-sp.1",
            "-ga-1",
            "-snapshot",
            "a1",
            "-foo",
            ".0.0",
            ".sp10",
        ],
    )
]


def test_ordering_is_total_and_antisymmetric():
    versions = [v(x) for x in GENERATED_VERSIONS]
    for a, b in itertools.product(versions, repeat=2):
        result = a.compare_to(b)
        assert result in (-1, 0, 1), (a, b)
        assert result == -b.compare_to(a), (a, b)
    for a in versions:
        assert a.compare_to(a) == 0


def test_ordering_is_not_transitive_for_mixed_delimiters():
    # Token-wise comparison with padding admits cycles; Maven itself
    # behaves the same way.
    a, b, c = v("1.0"), v("1sp.sp10"), v("1.0.sp")
    assert a < b
    assert b < c
    assert a > c
