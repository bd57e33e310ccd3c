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

"""Per-section record of scenario outcomes.

Each section keeps the Results it produced. Counts and the first failure
are derived from them with the package's own combinators.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

from resultkit.combinators import combine, match
from resultkit.errors import render_error
from resultkit.result import Result, is_ok


@dataclass
class SectionTally:
    """Results recorded for one scenario section, in run order."""

    name: str
    results: list[Result[Any, Any]] = field(default_factory=list)

    def record(self, result: Result[Any, Any]) -> None:
        self.results.append(result)

    @property
    def ok(self) -> int:
        return sum(1 for r in self.results if is_ok(r))

    @property
    def err(self) -> int:
        return len(self.results) - self.ok

    def first_error(self) -> Result[list[Any], Any]:
        """Ok of every value when nothing failed, else the earliest Err."""
        return combine(self.results)

    def line(self) -> str:
        return match(
            self.first_error(),
            ok=lambda values: f"{self.name}: {len(values)} ok",
            err=lambda error: (
                f"{self.name}: {self.ok} ok  {self.err} err"
                f"  (first: {render_error(error)})"
            ),
        )


@dataclass
class RunSummary:
    sections: dict[str, SectionTally] = field(default_factory=dict)

    def section(self, name: str) -> SectionTally:
        """Get or create the tally for a named section."""
        return self.sections.setdefault(name, SectionTally(name=name))

    def report(self) -> str:
        rule = "=" * 40
        body = [tally.line() for tally in self.sections.values()]
        return "\n".join(["", "Scenario Summary", rule, *body, rule])
