"""
Command line entry point: write canonical scenarios and check trace files.

    conformance-traces list
    conformance-traces write OUT_DIR [--format yaml] [--profile compatibility] [NAME ...]
    conformance-traces check FILE [FILE ...] [--profile compatibility]
"""

import argparse
import logging
import os
import sys
import tempfile
from typing import List, Optional

from .scenarios import SCENARIOS
from .traces import (
    PROFILES,
    TraceError,
    TraceMismatchError,
    format_differences,
    get_profile,
    read_trace_from_file,
    round_trip,
    write_trace_to_file,
)
from .traces.parser import format_for_path


def _cmd_list(args: argparse.Namespace) -> int:
    for name in sorted(SCENARIOS):
        print(f"{name}: {len(SCENARIOS[name]())} steps")
    return 0


def _cmd_write(args: argparse.Namespace) -> int:
    profile = get_profile(args.profile)
    names = args.names or sorted(SCENARIOS)
    unknown = [n for n in names if n not in SCENARIOS]
    if unknown:
        print(f"Unknown scenarios: {', '.join(unknown)}", file=sys.stderr)
        return 2

    os.makedirs(args.out_dir, exist_ok=True)
    for name in names:
        path = os.path.join(args.out_dir, f"{name}.{args.format}")
        write_trace_to_file(path, SCENARIOS[name](), profile)
        print(f"Wrote {path}")
    return 0


def _cmd_check(args: argparse.Namespace) -> int:
    """Read each file, write it back out and read it again; report drift."""
    profile = get_profile(args.profile)
    failed = 0
    for path in args.files:
        try:
            trace = read_trace_from_file(path, profile)
            suffix = ".yaml" if format_for_path(path) == "yaml" else ".json"
            with tempfile.TemporaryDirectory() as tmp_dir:
                round_trip(trace, os.path.join(tmp_dir, "trace" + suffix), profile)
        except TraceMismatchError as e:
            failed += 1
            print(f"FAIL {path}\n{format_differences(e.differences)}")
        except TraceError as e:
            failed += 1
            print(f"FAIL {path}: {e}")
        else:
            print(f"OK   {path} ({len(trace)} steps)")
    return 1 if failed else 0


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="conformance-traces",
        description="Write and check provider/consumer conformance traces",
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging")
    sub = parser.add_subparsers(dest="command", required=True)

    list_parser = sub.add_parser("list", help="List the canonical scenarios")
    list_parser.set_defaults(func=_cmd_list)

    write_parser = sub.add_parser("write", help="Write canonical scenarios to a directory")
    write_parser.add_argument("out_dir")
    write_parser.add_argument("names", nargs="*", help="Scenarios to write (default: all)")
    write_parser.add_argument("--format", choices=["json", "yaml"], default="json")
    write_parser.add_argument("--profile", choices=sorted(PROFILES), default="current")
    write_parser.set_defaults(func=_cmd_write)

    check_parser = sub.add_parser("check", help="Check that trace files survive a round trip")
    check_parser.add_argument("files", nargs="+")
    check_parser.add_argument("--profile", choices=sorted(PROFILES), default="current")
    check_parser.set_defaults(func=_cmd_check)

    return parser


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    return args.func(args)


if __name__ == "__main__":
    sys.exit(main())
