"""Command-line interface for kbremap.

Examples::

    kbremap --list
    kbremap --name "Apple Internal Keyboard / Trackpad" --map capslock:delete
    kbremap --swap lcommand:loption --dump
    kbremap --name "USB Keyboard" --reset
"""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path
from typing import TextIO

from kbremap.domain.errors import KbRemapError
from kbremap.domain.models import Device
from kbremap.hidutil.base import DeviceDirectory, ProcessRunner

logger = logging.getLogger(__name__)


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    """Parse command-line arguments."""
    parser = argparse.ArgumentParser(
        prog="kbremap",
        description="Remap keys on macOS keyboards using hidutil",
    )
    parser.add_argument(
        "-c", "--config",
        type=Path,
        default=None,
        help="Path to YAML configuration file (default: ~/.config/kbremap/config.yaml)",
    )
    parser.add_argument(
        "-v", "--verbose",
        action="store_true",
        help="Enable debug logging",
    )
    parser.add_argument(
        "-l", "--list",
        action="store_true",
        help="List available devices and exit",
    )
    parser.add_argument(
        "-n", "--name", type=str, default=None, metavar="NAME",
        help="Only modify devices with exactly this name (default: all keyboards)",
    )
    parser.add_argument(
        "-m", "--map", action="append", default=[], metavar="SRC:DST",
        help="Map the source key to the destination key (repeatable)",
    )
    parser.add_argument(
        "-s", "--swap", action="append", default=[], metavar="A:B",
        help="Swap two keys (repeatable)",
    )
    parser.add_argument(
        "-r", "--reset",
        action="store_true",
        help="Remove all key mappings",
    )
    parser.add_argument(
        "-d", "--dump",
        action="store_true",
        help="Print the hidutil command instead of running it",
    )

    args = parser.parse_args(argv)
    if args.reset and (args.map or args.swap):
        parser.error("argument --reset: not allowed with --map or --swap")
    if not (args.list or args.reset or args.map or args.swap):
        parser.error("one of --list, --reset, --map or --swap is required")
    return args


def _print_devices(devices: list[Device], out: TextIO) -> None:
    print(f"{'VendorID':<10} {'ProductID':<10} Name", file=out)
    for device in devices:
        vendor_id = f"0x{device.vendor_id:x}"
        product_id = f"0x{device.product_id:x}"
        print(f"{vendor_id:<10} {product_id:<10} {device.name}", file=out)


def run(
    args: argparse.Namespace,
    directory: DeviceDirectory,
    runner: ProcessRunner,
    executable: str = "hidutil",
    default_name: str | None = None,
    out: TextIO | None = None,
) -> None:
    """Carry out the invocation described by ``args``.

    Raises:
        KbRemapError: On any failure. Mapping errors are raised before
            any device is touched.
    """
    from kbremap import remap

    out = out or sys.stdout

    if args.list:
        _print_devices(directory.list_devices(), out)
        return

    name = args.name if args.name is not None else default_name
    commands = remap.plan(
        maps=args.map,
        swaps=args.swap,
        reset=args.reset,
        name=name,
        directory=directory,
    )

    if args.dump:
        print(remap.dump(commands, executable), file=out)
    else:
        remap.apply(commands, runner)


def main(argv: list[str] | None = None) -> int:
    """Main entry point for the kbremap CLI. Returns the exit code."""
    args = parse_args(argv)

    import yaml

    from kbremap.config.settings import load_settings
    from kbremap.hidutil.devices import HidutilDeviceDirectory
    from kbremap.hidutil.runner import HidutilRunner
    from kbremap.utils.logging import setup_logging

    try:
        settings = load_settings(args.config)
    except (OSError, ValueError, yaml.YAMLError) as e:
        print(f"error: invalid configuration\n{e}", file=sys.stderr)
        return 1

    if args.verbose:
        settings.logging.level = "DEBUG"

    setup_logging(settings.logging)

    executable = settings.hidutil.executable
    try:
        run(
            args,
            directory=HidutilDeviceDirectory(executable),
            runner=HidutilRunner(executable),
            executable=executable,
            default_name=settings.device.name,
        )
    except KbRemapError as e:
        logger.debug("Invocation failed", exc_info=True)
        print(f"error: {e}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
