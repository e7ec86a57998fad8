"""Encode commands into ``hidutil property`` requests.

A request has two arguments: an optional ``--matching`` clause that
scopes it to one vendor/product pair, and the ``--set`` payload holding
the ``UserKeyMapping`` array. Both the dump output and the executed
command are produced from the same EncodedRequest, so what ``--dump``
prints is exactly what gets applied.
"""

from __future__ import annotations

import json
import shlex

from pydantic import BaseModel, ConfigDict

from kbremap.domain.models import Command, DeviceFilter, MappingSet
from kbremap.keys.table import extended_usage

DEFAULT_EXECUTABLE = "hidutil"

SRC_FIELD = "HIDKeyboardModifierMappingSrc"
DST_FIELD = "HIDKeyboardModifierMappingDst"


class EncodedRequest(BaseModel):
    """The exact ``--matching`` and ``--set`` argument texts for hidutil."""

    model_config = ConfigDict(frozen=True)

    matching: str | None = None
    payload: str


def format_usage(usage: int) -> str:
    # hidutil reads hex literals inside its JSON-like payload
    return f"0x{extended_usage(usage):09X}"


def encode_matching(device_filter: DeviceFilter) -> str:
    return json.dumps(
        {"VendorID": device_filter.vendor_id, "ProductID": device_filter.product_id},
        separators=(",", ":"),
    )


def encode_mappings(mappings: MappingSet) -> str:
    entries = ",".join(
        f'{{"{SRC_FIELD}":{format_usage(pair.src)},"{DST_FIELD}":{format_usage(pair.dst)}}}'
        for pair in sorted(mappings.pairs, key=lambda p: p.src)
    )
    return f'{{"UserKeyMapping":[{entries}]}}'


def encode(command: Command) -> EncodedRequest:
    """Serialize a command into its hidutil request."""
    matching = None
    if command.device_filter is not None:
        matching = encode_matching(command.device_filter)
    return EncodedRequest(matching=matching, payload=encode_mappings(command.mappings))


def to_argv(request: EncodedRequest, executable: str = DEFAULT_EXECUTABLE) -> list[str]:
    """Build the argument vector that applies ``request``."""
    argv = [executable, "property"]
    if request.matching is not None:
        argv += ["--matching", request.matching]
    argv += ["--set", request.payload]
    return argv


def render(request: EncodedRequest, executable: str = DEFAULT_EXECUTABLE) -> str:
    """Render ``request`` as a shell command that can be pasted into a terminal."""
    lines = [f"{shlex.quote(executable)} property"]
    if request.matching is not None:
        lines.append(f"  --matching {shlex.quote(request.matching)}")
    lines.append(f"  --set {shlex.quote(request.payload)}")
    return " \\\n".join(lines)
