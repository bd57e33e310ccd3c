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

"""Loads the demo scenario YAML into typed dataclasses.

Pure loader with no scenario logic. Failures come back as Err, never raised.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

import yaml

from resultkit.result import Err, Ok, Result

DEFAULT_MINIMUM_AGE = 18


# ── Sections ───────────────────────────────────────────────────

@dataclass(frozen=True, slots=True)
class AgeCheckConfig:
    minimum_age: int = DEFAULT_MINIMUM_AGE
    inputs: list[str] = field(default_factory=list)


@dataclass(frozen=True, slots=True)
class JsonParseConfig:
    inputs: list[str] = field(default_factory=list)


@dataclass(frozen=True, slots=True)
class CombineConfig:
    """Each group is one combine() call. Numbers become Ok, strings Err."""
    groups: list[list[Any]] = field(default_factory=list)


# ── Top-level ──────────────────────────────────────────────────

@dataclass(frozen=True, slots=True)
class ScenarioConfig:
    age_check: AgeCheckConfig = field(default_factory=AgeCheckConfig)
    json_parse: JsonParseConfig = field(default_factory=JsonParseConfig)
    combine: CombineConfig = field(default_factory=CombineConfig)


def default_scenarios() -> ScenarioConfig:
    """The built-in walkthrough used when no scenario file is given."""
    return ScenarioConfig(
        age_check=AgeCheckConfig(inputs=["21", "15", "abc"]),
        json_parse=JsonParseConfig(inputs=['{"a": 1}', "invalid json"]),
        combine=CombineConfig(groups=[[1, 2, 3], [1, "error in second", 3]]),
    )


# ── Loader ─────────────────────────────────────────────────────

def _section(raw: dict[str, Any], name: str) -> dict[str, Any]:
    """A missing or empty section is {}; anything but a mapping is rejected."""
    value = raw.get(name)
    if value is None:
        return {}
    if not isinstance(value, dict):
        raise TypeError(f"'{name}' must be a mapping")
    return value


def _list(section: dict[str, Any], key: str, where: str) -> list[Any]:
    value = section.get(key)
    if value is None:
        return []
    if not isinstance(value, list):
        raise TypeError(f"'{where}.{key}' must be a list")
    return value


def _build_age_check(raw: dict[str, Any]) -> AgeCheckConfig:
    section = _section(raw, "age_check")
    return AgeCheckConfig(
        minimum_age=int(section.get("minimum_age", DEFAULT_MINIMUM_AGE)),
        inputs=[str(i) for i in _list(section, "inputs", "age_check")],
    )


def _build_json_parse(raw: dict[str, Any]) -> JsonParseConfig:
    section = _section(raw, "json_parse")
    return JsonParseConfig(inputs=[str(i) for i in _list(section, "inputs", "json_parse")])


def _build_combine(raw: dict[str, Any]) -> CombineConfig:
    groups = _list(_section(raw, "combine"), "groups", "combine")
    for group in groups:
        if not isinstance(group, list):
            raise TypeError(f"every 'combine.groups' entry must be a list, got {group!r}")
    return CombineConfig(groups=[list(g) for g in groups])


def load_scenarios(path: Path) -> Result[ScenarioConfig, str]:
    """Load a scenario YAML file into ScenarioConfig. Structure checks only."""
    if not path.exists():
        return Err(f"Scenario file not found: {path}")

    try:
        text = path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as exc:
        return Err(f"Cannot read scenario file {path}: {exc}")

    try:
        raw: Any = yaml.safe_load(text)
    except yaml.YAMLError as exc:
        return Err(f"YAML parse error in {path}: {exc}")

    if raw is None:
        raw = {}
    if not isinstance(raw, dict):
        return Err(f"Scenario structure error in {path}: top level must be a mapping")

    try:
        config = ScenarioConfig(
            age_check=_build_age_check(raw),
            json_parse=_build_json_parse(raw),
            combine=_build_combine(raw),
        )
    except (TypeError, ValueError) as exc:
        return Err(f"Scenario structure error in {path}: {exc}")

    return Ok(config)
