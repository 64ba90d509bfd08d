# Copyright (c) 2026 Jeroen Visser. All rights reserved.
# Licensed under the MIT License — see LICENSE.
"""
Command-line interface for dumping a planetary system snapshot.

Plays the host application's part: loads a snapshot, fires the startup
hook and, in retrigger mode, a scene-change hook.

Usage:
    solar-system-dump dump -i snapshot.json                 # next to the package
    solar-system-dump dump -i snapshot.json -o out/ --retrigger
    solar-system-dump --version
"""
import argparse
import json
import logging
import sys
from pathlib import Path

from solar_system_dump.adapters.exporter import (
    DumpMode,
    DumpState,
    ExportConfig,
    SnapshotExporter,
)
from solar_system_dump.adapters.json_io import JsonSnapshotReader
from solar_system_dump.adapters.lifecycle import DumpLifecycle


def _get_version() -> str:
    """Get package version string."""
    from solar_system_dump.version import __version__
    return __version__


def _run_dump(args) -> int:
    """Load the snapshot and run the lifecycle hooks."""
    try:
        snapshot = JsonSnapshotReader().read_snapshot(args.input)
    except FileNotFoundError:
        print(f"Error: Snapshot file not found: {args.input}", file=sys.stderr)
        return 1
    except (json.JSONDecodeError, UnicodeDecodeError, KeyError, TypeError, ValueError) as e:
        print(f"Error: Invalid snapshot file: {e}", file=sys.stderr)
        return 1

    try:
        base = ExportConfig.from_env()
    except ValueError as e:
        print(f"Error: Invalid SOLAR_DUMP_MODE: {e}", file=sys.stderr)
        return 1
    config = ExportConfig(
        output_dir=Path(args.output) if args.output else base.output_dir,
        file_name=args.file_name or base.file_name,
        mode=DumpMode.RETRIGGER if args.retrigger else base.mode,
    )
    exporter = SnapshotExporter(
        config, generator=f"solar-system-dump {_get_version()}",
    )
    lifecycle = DumpLifecycle(exporter, lambda: snapshot)

    state = lifecycle.on_start()
    if config.mode is DumpMode.RETRIGGER:
        state = lifecycle.on_scene_change()

    if state is DumpState.FAILED:
        print(f"Error: could not write {config.output_path}", file=sys.stderr)
        return 1
    print(f"Wrote {config.output_path}")
    return 0


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(
        prog="solar-system-dump",
        description="Dump a planetary system snapshot to a JSON document",
    )
    parser.add_argument(
        '--version', action='version',
        version=f"solar-system-dump {_get_version()}",
    )
    subparsers = parser.add_subparsers(dest="command")

    dump_parser = subparsers.add_parser(
        "dump",
        help="Write the system document for a snapshot",
    )
    dump_parser.add_argument(
        '--input', '-i', required=True,
        help="Path to the snapshot JSON"
    )
    dump_parser.add_argument(
        '--output', '-o',
        help="Output directory (default: $SOLAR_DUMP_OUTPUT_DIR or the package directory)"
    )
    dump_parser.add_argument(
        '--file-name',
        help="Output file name (default: SolarSystemDump.json)"
    )
    dump_parser.add_argument(
        '--retrigger', action='store_true', default=False,
        help="Fire the scene-change hook too; an existing file is never replaced"
    )
    dump_parser.add_argument(
        '--verbose', '-v', action='store_true', default=False,
        help="Debug logging"
    )

    args = parser.parse_args(argv)

    if args.command == "dump":
        logging.basicConfig(
            level=logging.DEBUG if args.verbose else logging.INFO,
            format="%(name)s: %(message)s",
        )
        return _run_dump(args)

    parser.print_help()
    return 1


if __name__ == '__main__':
    sys.exit(main())
