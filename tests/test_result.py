# SPDX-License-Identifier: MIT
#
#  █████╗ ██████╗  █████╗ ███████╗
# ██╔══██╗██╔══██╗██╔══██╗██╔════╝
# ███████║██████╔╝███████║███████╗
# ██╔══██║██╔══██╗██╔══██║╚════██║
# ██║  ██║██║  ██║██║  ██║███████║
# ╚═╝  ╚═╝╚═╝  ╚═╝╚═╝  ╚═╝╚══════╝
# Copyright (C) 2026 Riza Emre ARAS <r.emrearas@proton.me>
#
# Licensed under the MIT License.
# See LICENSE and THIRD_PARTY_LICENSES for details.

import pytest

from resultkit import Err, Ok, Result, err, is_err, is_ok, ok


@pytest.mark.parametrize("value", [0, "", None, [1, 2], {"a": 1}])
def test_ok_predicates(value: object) -> None:
    r = ok(value)
    assert is_ok(r)
    assert not is_err(r)
    assert r.ok is True
    assert r.value == value


@pytest.mark.parametrize("error", ["bad", 42, ValueError("boom"), None])
def test_err_predicates(error: object) -> None:
    r = err(error)
    assert is_err(r)
    assert not is_ok(r)
    assert r.ok is False
    assert r.error is error


def test_constructors_build_variants() -> None:
    assert ok(1) == Ok(1)
    assert err("x") == Err("x")
    assert Ok(1) != Err(1)


def test_discriminator_is_not_an_init_field() -> None:
    with pytest.raises(TypeError):
        Ok(1, False)  # type: ignore[call-arg]


def test_results_are_immutable() -> None:
    r = ok(1)
    with pytest.raises(AttributeError):
        r.value = 2  # type: ignore[misc]
    e = err("x")
    with pytest.raises(AttributeError):
        e.ok = True  # type: ignore[misc]


def test_structural_pattern_matching() -> None:
    def describe(r: Result[int, str]) -> str:
        match r:
            case Ok(value):
                return f"ok {value}"
            case Err(error):
                return f"err {error}"
        return "unreachable"

    assert describe(ok(3)) == "ok 3"
    assert describe(err("nope")) == "err nope"


def test_result_alias_is_subscriptable() -> None:
    alias = Result[int, str]
    assert alias is not None
