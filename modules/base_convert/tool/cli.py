from __future__ import annotations

import argparse
import sys
from typing import Any, Dict, List

from modules.base_convert.core.base import convert
from modules.base_convert.core.errors import BaseConvertError
from modules.base_convert.core.settings import ConvertSettings, get_settings
from universe.logger import get_logger

logger = get_logger("base_convert.cli")


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="base-convert",
        description="Convert numeric literals (0x1F, 0b101, 3:21, 1_000, ...) between bases.",
    )
    parser.add_argument("literals", nargs="+", help="Literals to convert.")
    parser.add_argument("--to", dest="target_base", type=int, help="Target base (2-36).")
    parser.add_argument("--from", dest="source_base", type=int, help="Source base; inferred when omitted.")
    parser.add_argument("--strict", action="store_true", default=None, help="Reject padding characters.")
    parser.add_argument("--max-base", type=int, help="Highest base inference may pick.")
    parser.add_argument("--padding", help="Characters ignored inside literals.")
    parser.add_argument("--no-clamp-ten", dest="clamp_ten", action="store_false", default=None)
    parser.add_argument("--no-clamp-hex", dest="clamp_hex", action="store_false", default=None)
    return parser


def _settings_from(args: argparse.Namespace) -> ConvertSettings:
    changes: Dict[str, Any] = {}
    for name in ("strict", "max_base", "padding", "clamp_ten", "clamp_hex"):
        value = getattr(args, name)
        if value is not None:
            changes[name] = value
    settings = get_settings()
    return settings.override(**changes) if changes else settings


def main(argv: List[str] | None = None) -> int:
    args = _build_parser().parse_args(argv)
    settings = _settings_from(args)

    status = 0
    for literal in args.literals:
        try:
            result = convert(
                literal,
                args.target_base,
                source_base=args.source_base,
                settings=settings,
            )
        except BaseConvertError as exc:
            logger.debug("base_convert.cli_failed", literal=literal, kind=exc.kind)
            print(f"{exc.kind}: {exc}", file=sys.stderr)
            status = 1
            continue
        print(result or "0")
    return status


if __name__ == "__main__":
    raise SystemExit(main())
