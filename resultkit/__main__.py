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

"""Command-line entry point for the scenario walkthrough.

Usage: python -m resultkit [--scenarios=scenarios/walkthrough.yaml]
"""

from __future__ import annotations

import argparse
import sys
from pathlib import Path

from resultkit.combinators import and_then
from resultkit.config import default_scenarios, load_scenarios
from resultkit.demo import run_scenarios
from resultkit.logger import get_logger
from resultkit.result import Ok

log = get_logger(__name__)


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(
        prog="resultkit-demo",
        description="Run Result combinator scenarios: age check, JSON parse, combine",
    )
    parser.add_argument(
        "--scenarios",
        type=Path,
        default=None,
        help="Path to scenario YAML (default: built-in walkthrough)",
    )
    args = parser.parse_args(argv)

    if args.scenarios is None:
        cfg_result = Ok(default_scenarios())
    else:
        log.info("Scenarios: %s", args.scenarios.resolve())
        cfg_result = load_scenarios(args.scenarios.resolve())

    result = and_then(cfg_result, run_scenarios)
    if not result.ok:
        log.error(result.error)
        return 1

    return 0


if __name__ == "__main__":
    sys.exit(main())
