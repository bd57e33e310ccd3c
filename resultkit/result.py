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

"""Result type: explicit success-or-failure values.

Provides Ok[T] and Err[E] as an alternative to raising exceptions.
Every function that can fail returns Result[T, E] = Ok[T] | Err[E].
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Generic, TypeGuard, TypeVar

T = TypeVar("T")
E = TypeVar("E")


@dataclass(frozen=True, slots=True)
class Ok(Generic[T]):
    """Successful result carrying a value."""

    __match_args__ = ("value",)

    value: T
    ok: bool = field(default=True, init=False)


@dataclass(frozen=True, slots=True)
class Err(Generic[E]):
    """Failed result carrying an error payload of any type."""

    __match_args__ = ("error",)

    error: E
    ok: bool = field(default=False, init=False)


Result = Ok[T] | Err[E]


def ok(value: T) -> Ok[T]:
    """Wrap a value in Ok."""
    return Ok(value)


def err(error: E) -> Err[E]:
    """Wrap an error in Err."""
    return Err(error)


def is_ok(result: Result[T, E]) -> TypeGuard[Ok[T]]:
    """Return True if the result is Ok. Narrows the type for checkers."""
    return isinstance(result, Ok)


def is_err(result: Result[T, E]) -> TypeGuard[Err[E]]:
    """Return True if the result is Err. Narrows the type for checkers."""
    return isinstance(result, Err)
