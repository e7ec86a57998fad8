"""Orchestrates a remapping invocation.

Turns parsed command-line values into one Command per target device,
then either renders them for ``--dump`` or applies them through a
ProcessRunner. Mapping errors are raised before any external tool runs.
"""

from __future__ import annotations

import logging
from collections.abc import Sequence

from kbremap.domain.models import Command, DeviceFilter, MappingSet
from kbremap.hidutil.base import DeviceDirectory, ProcessRunner
from kbremap.hidutil.encoder import DEFAULT_EXECUTABLE, encode, render
from kbremap.mapping.builder import build_mapping_set

logger = logging.getLogger(__name__)


def plan(
    maps: Sequence[str] = (),
    swaps: Sequence[str] = (),
    reset: bool = False,
    name: str | None = None,
    directory: DeviceDirectory | None = None,
) -> list[Command]:
    """Build the commands for an invocation.

    Args:
        maps: ``--map`` argument values.
        swaps: ``--swap`` argument values.
        reset: Clear all mappings instead of building a mapping set.
        name: Restrict to devices with exactly this name. ``None``
              targets every keyboard.
        directory: Device source, required when ``name`` is given.

    Returns:
        One command per distinct matched vendor/product pair, or a
        single unfiltered command when no name was given.

    Raises:
        InvalidKeyError, AmbiguousMappingError, ConflictingMappingError:
            If the mapping arguments are unusable.
        DeviceNotFoundError: If ``name`` matches no device.
        ExternalToolError: If the device list cannot be read.
    """
    if reset:
        mappings = MappingSet.empty()
    else:
        mappings = build_mapping_set(maps, swaps)

    if name is None:
        return [Command(device_filter=None, mappings=mappings)]

    if directory is None:
        raise ValueError("a device directory is required to look up devices by name")

    filters: list[DeviceFilter] = []
    for device in directory.find(name):
        device_filter = DeviceFilter.from_device(device)
        if device_filter not in filters:
            filters.append(device_filter)
    return [Command(device_filter=f, mappings=mappings) for f in filters]


def dump(commands: Sequence[Command], executable: str = DEFAULT_EXECUTABLE) -> str:
    """Render the hidutil commands without running them."""
    return "\n\n".join(render(encode(command), executable) for command in commands)


def apply(commands: Sequence[Command], runner: ProcessRunner) -> None:
    """Apply each command in turn, stopping at the first failure."""
    for command in commands:
        request = encode(command)
        if command.device_filter is None:
            logger.info("Applying %d mapping(s) to all keyboards", len(command.mappings))
        else:
            logger.info(
                "Applying %d mapping(s) to VendorID=0x%x ProductID=0x%x",
                len(command.mappings),
                command.device_filter.vendor_id,
                command.device_filter.product_id,
            )
        runner.apply(request)
