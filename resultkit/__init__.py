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

"""Explicit success-or-failure values and the combinators over them."""

from resultkit.combinators import (
    and_then,
    combine,
    expect,
    map,
    map_err,
    match,
    unwrap,
    unwrap_or,
    unwrap_or_else,
)
from resultkit.errors import UnwrapError, render_error
from resultkit.result import Err, Ok, Result, err, is_err, is_ok, ok
from resultkit.throwable import from_throwable

__all__ = [
    "Ok",
    "Err",
    "Result",
    "ok",
    "err",
    "is_ok",
    "is_err",
    "map",
    "map_err",
    "and_then",
    "unwrap",
    "expect",
    "unwrap_or",
    "unwrap_or_else",
    "match",
    "combine",
    "from_throwable",
    "UnwrapError",
    "render_error",
]
