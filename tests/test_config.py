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

from pathlib import Path

from resultkit import is_err, is_ok
from resultkit.config import (
    AgeCheckConfig,
    CombineConfig,
    JsonParseConfig,
    ScenarioConfig,
    default_scenarios,
    load_scenarios,
)

WALKTHROUGH = Path(__file__).resolve().parent.parent / "scenarios" / "walkthrough.yaml"


def _write(tmp_path: Path, text: str) -> Path:
    path = tmp_path / "scenarios.yaml"
    path.write_text(text, encoding="utf-8")
    return path


def test_load_walkthrough_matches_defaults() -> None:
    result = load_scenarios(WALKTHROUGH)
    assert is_ok(result)
    assert result.value == default_scenarios()


def test_missing_file(tmp_path: Path) -> None:
    result = load_scenarios(tmp_path / "nope.yaml")
    assert is_err(result)
    assert "not found" in result.error


def test_yaml_syntax_error(tmp_path: Path) -> None:
    result = load_scenarios(_write(tmp_path, "age_check: [\n"))
    assert is_err(result)
    assert result.error.startswith("YAML parse error")


def test_empty_file_gives_empty_sections(tmp_path: Path) -> None:
    result = load_scenarios(_write(tmp_path, ""))
    assert is_ok(result)
    assert result.value == ScenarioConfig()
    assert result.value.age_check.minimum_age == 18


def test_partial_file(tmp_path: Path) -> None:
    text = "age_check:\n  minimum_age: 21\n  inputs: [30, '19']\n"
    result = load_scenarios(_write(tmp_path, text))
    assert is_ok(result)
    assert result.value.age_check == AgeCheckConfig(minimum_age=21, inputs=["30", "19"])
    assert result.value.json_parse == JsonParseConfig()
    assert result.value.combine == CombineConfig()


def test_structure_errors(tmp_path: Path) -> None:
    cases = (
        "- just\n- a list\n",
        "[]\n",
        "0\n",
        "false\n",
        "age_check: 5\n",
        "age_check:\n  minimum_age: old\n",
        "age_check:\n  inputs: '21'\n",
        "json_parse:\n  inputs: 'invalid json'\n",
        "combine:\n  groups: [1, 2]\n",
        "combine:\n  groups: ['abc']\n",
        "combine:\n  groups: 'abc'\n",
    )
    for text in cases:
        result = load_scenarios(_write(tmp_path, text))
        assert is_err(result), text
        assert "structure error" in result.error


def test_empty_sections_are_allowed(tmp_path: Path) -> None:
    result = load_scenarios(_write(tmp_path, "age_check:\njson_parse:\ncombine:\n"))
    assert is_ok(result)
    assert result.value == ScenarioConfig()


def test_directory_path_is_err(tmp_path: Path) -> None:
    result = load_scenarios(tmp_path)
    assert is_err(result)
    assert result.error.startswith("Cannot read scenario file")


def test_non_utf8_file_is_err(tmp_path: Path) -> None:
    path = tmp_path / "binary.yaml"
    path.write_bytes(b"\xff\xfe\x00bad")
    result = load_scenarios(path)
    assert is_err(result)
    assert result.error.startswith("Cannot read scenario file")
