# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""prodcheck CLI."""

from __future__ import annotations

import argparse
import json
import sys
from typing import Any

from ..config import HarnessConfigError, HarnessSettings, load_settings
from ..exit_codes import exit_code_for
from ..log import LOG_LEVEL_CHOICES, setup_logging
from ..runtime import ProdCheck
from ..scan.report import banner, print_report, progress_line


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Smoke-test a running production build: probe its endpoints and media tools, exit 0 only if all pass",
    )
    parser.add_argument("--host", help="Host of the service under test (default: localhost)")
    parser.add_argument("--port", type=int, help="Port of the service under test (default: $PORT or 3123)")
    parser.add_argument(
        "--delay",
        type=float,
        help="Seconds to wait before the first probe (default: 1.0, 0 disables)",
    )
    parser.add_argument(
        "--timeout",
        type=float,
        help="Per-request timeout in seconds (default: wait indefinitely)",
    )
    parser.add_argument(
        "--json",
        action="store_true",
        help="Output JSON instead of the human-friendly report",
    )
    parser.add_argument("--no-color", action="store_true", help="Disable ANSI colours")
    parser.add_argument(
        "--log-level",
        choices=LOG_LEVEL_CHOICES,
        type=str.upper,
        help="Logging level for diagnostics on stderr",
    )
    return parser


def apply_overrides(settings: HarnessSettings, args: argparse.Namespace) -> HarnessSettings:
    if args.host:
        settings.host = args.host
    if args.port is not None:
        settings.port = args.port
    if args.delay is not None:
        settings.startup_delay = args.delay
    if args.timeout is not None:
        settings.timeout = args.timeout if args.timeout > 0 else None
    if args.no_color or args.json:
        settings.color = False
    return settings.validate()


def _print_json(data: dict[str, Any] | Any) -> None:
    payload = data.to_dict() if hasattr(data, "to_dict") else data
    json.dump(payload, sys.stdout, indent=2, sort_keys=True)
    sys.stdout.write("\n")


def main(argv: list[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    setup_logging(args.log_level)

    try:
        settings = apply_overrides(load_settings(), args)
    except HarnessConfigError as exc:
        parser.error(str(exc))

    fmt = settings.format_table()

    with ProdCheck(settings) as harness:
        if args.json:
            report = harness.run()
        else:
            print(banner("Production Build Tests", fmt))
            print()
            report = harness.run(on_start=lambda spec: print(progress_line(spec), flush=True))

    if args.json:
        _print_json(report)
    else:
        print_report(report, fmt)

    return exit_code_for(report)


if __name__ == "__main__":
    raise SystemExit(main())
