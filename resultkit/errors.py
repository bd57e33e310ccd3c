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

"""Raised faults and error rendering.

Modeled failure lives in Err values. UnwrapError is the one fault this
package raises on purpose: extracting a value from an Err.
"""

from __future__ import annotations

import json
from typing import Any


def render_error(error: Any) -> str:
    """Render an error payload for a fault message.

    Strings are used verbatim. Anything else goes through json.dumps,
    falling back to repr for payloads JSON cannot encode.
    """
    if isinstance(error, str):
        return error
    try:
        return json.dumps(error)
    except (TypeError, ValueError):
        return repr(error)


class UnwrapError(Exception):
    """Raised by unwrap/expect when the result is Err.

    The original payload stays available on ``error``.
    """

    def __init__(self, message: str, error: Any) -> None:
        super().__init__(message)
        self.error = error
