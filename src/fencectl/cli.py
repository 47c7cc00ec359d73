import argparse
import json
import os
import sys
from pathlib import Path
from typing import Any

from netfence.config import CONFIG_ENV, load_config
from netfence.errors import ConfigurationError
from netfence.isolation import get_network_isolation_args
from netfence.log import setup_logging
from netfence.policy import parse_allowlist


def _print_json(payload: Any) -> None:
    sys.stdout.write(json.dumps(payload, ensure_ascii=True))
    sys.stdout.write("\n")


def isolation_args() -> int:
    try:
        args = get_network_isolation_args()
    except ConfigurationError as exc:
        _print_json(
            {"status": "error", "variable": exc.variable, "errors": exc.errors}
        )
        return 1
    _print_json({"status": "ok", "args": args})
    return 0


def validate(value: str) -> int:
    result = parse_allowlist(value)
    _print_json(
        {
            "status": "ok" if result.is_valid else "error",
            "patterns": result.patterns,
            "errors": result.errors,
        }
    )
    return 0 if result.is_valid else 1


def main(argv=None) -> None:
    parser = argparse.ArgumentParser(prog="fencectl")
    parser.add_argument(
        "--config",
        default=os.getenv(CONFIG_ENV),
        help=f"Path to a YAML settings file (default: ${CONFIG_ENV})",
    )
    subparsers = parser.add_subparsers(dest="command", required=True)

    subparsers.add_parser(
        "args", help="Print the browser isolation arguments for the environment"
    )
    validate_parser = subparsers.add_parser(
        "validate", help="Validate a comma-separated host allowlist"
    )
    validate_parser.add_argument("value", help="Allowlist to check")

    args = parser.parse_args(argv)

    settings = load_config(args.config)
    setup_logging(
        settings.log_level,
        Path(settings.log_file) if settings.log_file else None,
    )

    if args.command == "args":
        raise SystemExit(isolation_args())
    if args.command == "validate":
        raise SystemExit(validate(args.value))


if __name__ == "__main__":
    main()
