"""Core domain models for kbremap.

These models carry a remapping request from the command line to the
hidutil invocation: parsed key specs, mapping pairs and sets, attached
devices, and the per-device command that ties them together.
"""

from __future__ import annotations

import enum

from pydantic import BaseModel, ConfigDict, Field


# ---------------------------------------------------------------------------
# Keys
# ---------------------------------------------------------------------------


class KeyKind(str, enum.Enum):
    """How a key token was written by the user."""

    NAME = "name"
    CHARACTER = "character"
    NUMBER = "number"


class KeySpec(BaseModel):
    """The resolved form of a single user-supplied key token.

    Group names such as ``shift`` resolve to more than one usage (left
    and right variants); everything else resolves to exactly one.
    """

    model_config = ConfigDict(frozen=True)

    token: str = Field(description="The token as written by the user")
    kind: KeyKind = Field(description="Which resolution rule matched the token")
    usages: tuple[int, ...] = Field(min_length=1, description="Resolved USB HID usage IDs")

    @property
    def is_group(self) -> bool:
        return len(self.usages) > 1


# ---------------------------------------------------------------------------
# Mappings
# ---------------------------------------------------------------------------


class MappingPair(BaseModel):
    """A single source -> destination remap instruction."""

    model_config = ConfigDict(frozen=True)

    src: int = Field(ge=0, description="Source usage in vendor-extended form")
    dst: int = Field(ge=0, description="Destination usage in vendor-extended form")


class MappingSet(BaseModel):
    """A canonical collection of mapping pairs.

    Pairs are unique by source and kept sorted by source, so two sets
    built from the same pairs in a different order compare equal and
    encode identically.
    """

    model_config = ConfigDict(frozen=True)

    pairs: tuple[MappingPair, ...] = Field(default=())

    @classmethod
    def empty(cls) -> MappingSet:
        return cls(pairs=())

    @classmethod
    def from_pairs(cls, pairs: list[MappingPair]) -> MappingSet:
        return cls(pairs=tuple(sorted(pairs, key=lambda p: p.src)))

    def __len__(self) -> int:
        return len(self.pairs)


# ---------------------------------------------------------------------------
# Devices
# ---------------------------------------------------------------------------


class Device(BaseModel):
    """An attached HID device as reported by ``hidutil list``."""

    model_config = ConfigDict(frozen=True)

    vendor_id: int = Field(ge=0)
    product_id: int = Field(ge=0)
    name: str

    def sort_key(self) -> tuple[int, int, str]:
        return (self.vendor_id, self.product_id, self.name)


class DeviceFilter(BaseModel):
    """Vendor/product pair used to scope a request to specific hardware."""

    model_config = ConfigDict(frozen=True)

    vendor_id: int = Field(ge=0)
    product_id: int = Field(ge=0)

    @classmethod
    def from_device(cls, device: Device) -> DeviceFilter:
        return cls(vendor_id=device.vendor_id, product_id=device.product_id)


# ---------------------------------------------------------------------------
# Commands
# ---------------------------------------------------------------------------


class Command(BaseModel):
    """A fully resolved unit of work, ready for encoding.

    A missing device filter means the mapping applies to every
    connected keyboard.
    """

    model_config = ConfigDict(frozen=True)

    device_filter: DeviceFilter | None = Field(default=None)
    mappings: MappingSet = Field(default_factory=MappingSet.empty)
