#!/usr/bin/env python3
"""
tastools - inspect the TAS tool catalogue.

Lists every tool in execution order, or prints one tool's syntax.
"""

import argparse
import logging
from pathlib import Path
from dotenv import load_dotenv

load_dotenv()

from tastools.config import ScriptConfig
from tastools.logging_config import setup_logging
from tastools.services.tool_registry import TOOL_REGISTRY


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(
        description="tastools - TAS script tool catalogue"
    )
    parser.add_argument(
        "--list",
        action="store_true",
        help="List every tool in execution order",
    )
    parser.add_argument(
        "--describe",
        metavar="TOOL",
        help="Print the syntax description of one tool",
    )
    parser.add_argument(
        "--log-dir",
        type=Path,
        default=Path("logs"),
        help="Directory for the debug log (default: ./logs)",
    )
    parser.add_argument(
        "--debug",
        action="store_true",
        help="Enable debug logging on the console",
    )

    args = parser.parse_args(argv)

    console_level = logging.DEBUG if args.debug else logging.WARNING
    setup_logging(args.log_dir, console_level=console_level)
    config = ScriptConfig.from_env(load_env_file=False)

    if args.describe:
        schema = TOOL_REGISTRY.lookup(args.describe)
        if schema is None:
            print(f"Unknown tool: {args.describe}")
            print(f"Known tools: {', '.join(TOOL_REGISTRY.names())}")
            return 1
        print(schema.description)
        return 0

    if args.list:
        print(f"{'#':>3}  {'tool':<10} {'order':<10} {'off':<5} {'active':<7} duration")
        print("-" * 50)
        for schema in TOOL_REGISTRY:
            order = "fixed" if schema.fixed_order else "any"
            off = "yes" if schema.has_off else "no"
            active = "yes" if schema.registers_active_state else "no"
            duration = f"slot {schema.duration_index}" if schema.has_duration else "-"
            print(f"{schema.priority_index:>3}  {schema.name:<10} {order:<10} {off:<5} {active:<7} {duration}")
        print("-" * 50)
        print(f"check: max replays {config.check_max_replays}, "
              f"posepsilon {config.default_pos_epsilon}, angepsilon {config.default_ang_epsilon}")
        return 0

    parser.print_help()
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
