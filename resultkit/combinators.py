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

"""Combinators over Result values.

Transform, chain, extract, dispatch and aggregate. All functions are
pure: they build new Result instances and never catch faults raised by
the callables passed to them.
"""

from __future__ import annotations

from typing import Any, Callable, Iterable, Mapping, TypeVar

from resultkit.errors import UnwrapError, render_error
from resultkit.result import Err, Ok, Result

T = TypeVar("T")
E = TypeVar("E")
U = TypeVar("U")
F = TypeVar("F")


# ── Transform ─────────────────────────────────────────────────

def map(result: Result[T, E], fn: Callable[[T], U]) -> Result[U, E]:  # noqa: A001
    """Apply fn to the Ok value. An Err is returned as-is, fn is not called."""
    if result.ok:
        return Ok(fn(result.value))
    return Err(result.error)


def map_err(result: Result[T, E], fn: Callable[[E], F]) -> Result[T, F]:
    """Apply fn to the Err payload. An Ok is returned as-is."""
    if result.ok:
        return Ok(result.value)
    return Err(fn(result.error))


# ── Chain ─────────────────────────────────────────────────────

def and_then(
    result: Result[T, E],
    fn: Callable[[T], Result[U, F]],
) -> Result[U, E | F]:
    """Feed the Ok value into a fallible step and return its Result directly.

    On Err the chain stops here: fn is never invoked.
    """
    if result.ok:
        return fn(result.value)
    return Err(result.error)


# ── Extract ───────────────────────────────────────────────────

def unwrap(result: Result[T, E]) -> T:
    """Return the Ok value or raise UnwrapError carrying the rendered error."""
    if not result.ok:
        raise UnwrapError(
            f"Tried to unwrap Err: {render_error(result.error)}",
            result.error,
        )
    return result.value


def expect(result: Result[T, E], message: str) -> T:
    """Like unwrap, with the fault message prefixed by ``message``."""
    if not result.ok:
        raise UnwrapError(f"{message}: {render_error(result.error)}", result.error)
    return result.value


def unwrap_or(result: Result[T, E], fallback: T) -> T:
    return result.value if result.ok else fallback


def unwrap_or_else(result: Result[T, E], fallback_fn: Callable[[E], T]) -> T:
    """Return the Ok value, or fallback_fn(error). fallback_fn runs at most once."""
    if result.ok:
        return result.value
    return fallback_fn(result.error)


# ── Dispatch ──────────────────────────────────────────────────

def match(
    result: Result[T, E],
    cases: Mapping[str, Callable[[Any], U]] | None = None,
    *,
    ok: Callable[[T], U] | None = None,
    err: Callable[[E], U] | None = None,
) -> U:
    """Collapse a Result into a plain value by calling exactly one handler.

    Handlers are given as ``ok=``/``err=`` keywords, or as a mapping with
    "ok" and "err" keys.
    """
    if cases is not None:
        if ok is not None or err is not None:
            raise TypeError("match() takes a cases mapping or ok=/err= handlers, not both")
        ok, err = cases["ok"], cases["err"]
    if ok is None or err is None:
        raise TypeError("match() requires both 'ok' and 'err' handlers")
    if result.ok:
        return ok(result.value)
    return err(result.error)


# ── Aggregate ─────────────────────────────────────────────────

def combine(results: Iterable[Result[T, E]]) -> Result[list[T], E]:
    """Turn a sequence of Results into a Result of a list.

    The first Err wins; iteration stops there, so lazy inputs are not
    advanced past it. An empty input gives Ok([]).
    """
    values: list[T] = []
    for result in results:
        if not result.ok:
            return Err(result.error)
        values.append(result.value)
    return Ok(values)
