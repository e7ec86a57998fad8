"""Discover attached HID devices from ``hidutil list`` output.

``hidutil list`` prints a ``Services:`` table followed by a ``Devices:``
table. Only the latter is read. Columns are aligned under their header
words, and a product name containing a newline continues on the next
line, so each row is cut out of the remaining text by the header
offsets rather than split line by line::

    Devices:
    VendorID ProductID Product             Built-In
    0x5ac    0x8600    TouchBar
    UserDevice    1
"""

from __future__ import annotations

import logging
import re

from kbremap.domain.errors import ExternalToolError
from kbremap.domain.models import Device
from kbremap.hidutil.base import DeviceDirectory
from kbremap.hidutil.encoder import DEFAULT_EXECUTABLE
from kbremap.hidutil.runner import run_tool

logger = logging.getLogger(__name__)

DEVICES_HEADER = "Devices:\n"
NULL_VALUE = "(null)"


def parse_device_list(output: str) -> list[Device]:
    """Parse the ``Devices:`` table of ``hidutil list``.

    Rows without a product name are skipped. The result is
    de-duplicated and sorted.

    Raises:
        ValueError: If the output does not have the expected layout.
    """
    start = output.find(DEVICES_HEADER)
    if start < 0:
        raise ValueError("expected 'Devices:'")
    rest = output[start + len(DEVICES_HEADER):]

    header, sep, rest = rest.partition("\n")
    if not sep:
        raise ValueError("expected header")
    columns = [(m.group(), m.start()) for m in re.finditer(r"\S+", header)]
    if not columns:
        raise ValueError("expected header")

    devices: set[Device] = set()
    while rest:
        row: dict[str, str] = {}
        end = 0
        for i, (title, begin) in enumerate(columns):
            if i + 1 < len(columns):
                row[title] = rest[begin:columns[i + 1][1]].strip()
            else:
                newline = rest.find("\n", begin)
                end = len(rest) if newline < 0 else newline + 1
                row[title] = rest[begin:end].strip()
        rest = rest[end:]

        if not any(row.values()):
            continue
        device = _parse_row(row)
        if device is not None:
            devices.add(device)

    return sorted(devices, key=Device.sort_key)


def _parse_row(row: dict[str, str]) -> Device | None:
    try:
        product, vendor_id, product_id = row["Product"], row["VendorID"], row["ProductID"]
    except KeyError as e:
        raise ValueError(f"missing column {e}") from e
    if product == NULL_VALUE:
        return None
    return Device(
        vendor_id=_parse_hex(vendor_id),
        product_id=_parse_hex(product_id),
        name=product.replace("\n", " "),
    )


def _parse_hex(value: str) -> int:
    if not value.startswith("0x"):
        raise ValueError(f"{value!r} missing prefix `0x`")
    try:
        return int(value[2:], 16)
    except ValueError as e:
        raise ValueError(f"failed to parse {value!r} as hexadecimal") from e


class HidutilDeviceDirectory(DeviceDirectory):
    """Lists devices with ``hidutil list``."""

    def __init__(self, executable: str = DEFAULT_EXECUTABLE) -> None:
        self._executable = executable

    def list_devices(self) -> list[Device]:
        output = run_tool([self._executable, "list"])
        try:
            devices = parse_device_list(output)
        except ValueError as e:
            raise ExternalToolError(
                f"failed to parse `{self._executable} list` output: {e}",
                command=[self._executable, "list"],
                stdout=output,
            ) from e
        logger.debug("Found %d device(s)", len(devices))
        return devices
