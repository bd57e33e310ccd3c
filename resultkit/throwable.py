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

"""Exception adapter: turns raising callables into Result-returning ones.

This is the only place where a raised fault is caught and converted into
an Err value.
"""

from __future__ import annotations

import functools
import logging
from typing import Any, Callable, TypeVar, overload

from resultkit.result import Err, Ok, Result

log = logging.getLogger(__name__)

R = TypeVar("R")
E = TypeVar("E")


@overload
def from_throwable(
    fn: Callable[..., R],
    map_error: Callable[[Exception], E] | None = None,
) -> Callable[..., Result[R, E]]: ...


@overload
def from_throwable(
    fn: None = None,
    map_error: Callable[[Exception], E] | None = None,
) -> Callable[[Callable[..., R]], Callable[..., Result[R, E]]]: ...


def from_throwable(fn=None, map_error=None):
    """Wrap fn so that a raised Exception becomes an Err.

    Args:
        fn: Callable that may raise. When omitted, a decorator is returned.
        map_error: Optional transform applied to the caught exception. Its
            output replaces the exception as the Err payload.

    Returns Ok(fn(...)) when fn returns normally. KeyboardInterrupt,
    SystemExit and other non-Exception raises are not caught.
    """
    if fn is None:
        return lambda f: from_throwable(f, map_error)

    @functools.wraps(fn)
    def wrapper(*args: Any, **kwargs: Any) -> Result[Any, Any]:
        try:
            value = fn(*args, **kwargs)
        except Exception as exc:
            log.debug(
                "Caught %s from %s",
                type(exc).__name__,
                getattr(fn, "__qualname__", repr(fn)),
            )
            return Err(map_error(exc) if map_error is not None else exc)
        return Ok(value)

    return wrapper
