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

"""Walkthrough scenarios exercising every combinator.

  1. Age check: parse text → validate adult → describe (and_then, match,
     map, unwrap_or, unwrap_or_else, expect)
  2. JSON parse: json.loads behind from_throwable
  3. Combine: groups of values where strings stand in for failures

All inputs come from ScenarioConfig. Outcomes are logged and tallied.
"""

from __future__ import annotations

import json
import math
from typing import Any

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
from resultkit.config import DEFAULT_MINIMUM_AGE, ScenarioConfig
from resultkit.errors import UnwrapError
from resultkit.logger import get_logger
from resultkit.result import Err, Ok, Result, err, is_ok, ok
from resultkit.summary import RunSummary
from resultkit.throwable import from_throwable

log = get_logger(__name__)

Number = int | float

_to_float = from_throwable(float)

safe_parse_json = from_throwable(json.loads, lambda exc: f"Parse error: {exc}")


# ── Age check ─────────────────────────────────────────────────

def _finite(value: float) -> Result[Number, str]:
    if not math.isfinite(value):
        return err("not a number")
    return ok(int(value) if value.is_integer() else value)


def parse_age(raw: str) -> Result[Number, str]:
    """Parse numeric text. Whole numbers come back as int, "21.5" as 21.5.

    Surrounding whitespace is allowed; nan and inf are not numbers here.
    """
    parsed = map_err(_to_float(raw), lambda _: "not a number")
    return and_then(parsed, _finite)


def validate_adult(age: Number, minimum: int = DEFAULT_MINIMUM_AGE) -> Result[Number, str]:
    return ok(age) if age >= minimum else err("too young")


def check_age(raw: str, minimum: int = DEFAULT_MINIMUM_AGE) -> Result[Number, str]:
    """Parse then validate; a parse failure skips validation entirely."""
    return and_then(
        and_then(ok(raw), parse_age),
        lambda age: validate_adult(age, minimum),
    )


def describe_age(result: Result[Number, str]) -> str:
    return match(
        result,
        ok=lambda age: f"Access granted to user age {age}",
        err=lambda error: f"Access denied: {error}",
    )


def _run_age_check(config: ScenarioConfig, summary: RunSummary) -> None:
    tally = summary.section("age_check")
    minimum = config.age_check.minimum_age

    for raw in config.age_check.inputs:
        result = check_age(raw, minimum)
        tally.record(result)
        log.info("Age %r: %s", raw, describe_age(result))

        if is_ok(result):
            log.info("  confirmed (unwrap): %s", unwrap(result))
            log.info("  doubled (map): %s", unwrap(map(result, lambda age: age * 2)))

        log.info("  or fallback (unwrap_or): %s", unwrap_or(result, 0))

        def _report(error: str) -> int:
            log.warning("  error encountered: %s", error)
            return minimum

        log.info("  or fallback (unwrap_or_else): %s", unwrap_or_else(result, _report))

        try:
            log.info("  expect returned: %s", expect(result, "User age not valid"))
        except UnwrapError as exc:
            log.warning("  expect raised: %s", exc)


# ── JSON parse ────────────────────────────────────────────────

def describe_parsed(result: Result[Any, str]) -> str:
    return match(
        result,
        {"ok": lambda value: json.dumps(value), "err": lambda error: f"Error: {error}"},
    )


def _run_json_parse(config: ScenarioConfig, summary: RunSummary) -> None:
    tally = summary.section("json_parse")
    for text in config.json_parse.inputs:
        result = safe_parse_json(text)
        tally.record(result)
        log.info("Parse %r: %s", text, describe_parsed(result))


# ── Combine ───────────────────────────────────────────────────

def to_result(value: Any) -> Result[Any, str]:
    """Strings stand for failures, anything else for successes."""
    if isinstance(value, str):
        return Err(value)
    return Ok(value)


def combine_values(values: list[Any]) -> Result[list[Any], str]:
    return combine(to_result(v) for v in values)


def describe_combined(combined: Result[list[Any], str]) -> str:
    return match(
        combined,
        ok=lambda items: "Values: " + ", ".join(str(i) for i in items),
        err=lambda error: f"Error: {error}",
    )


def _run_combine(config: ScenarioConfig, summary: RunSummary) -> None:
    tally = summary.section("combine")
    for group in config.combine.groups:
        combined = combine_values(group)
        tally.record(combined)
        log.info("Combine %r: %s", group, describe_combined(combined))


def run_scenarios(config: ScenarioConfig) -> Result[RunSummary, str]:
    """Run every configured scenario section and tally outcomes."""
    summary = RunSummary()

    _run_age_check(config, summary)
    _run_json_parse(config, summary)
    _run_combine(config, summary)

    log.info(summary.report())
    return Ok(summary)
