"""Combine ``--map`` and ``--swap`` arguments into a canonical MappingSet.

Pairs are keyed by the vendor-extended source usage, so ``capslock``
and ``0x700000039`` name the same source. hidutil accepts one
destination per source, so contradictory pairs are rejected rather
than resolved by order.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable

from kbremap.domain.errors import (
    AmbiguousMappingError,
    ConflictingMappingError,
    InvalidKeyError,
)
from kbremap.domain.models import KeySpec, MappingPair, MappingSet
from kbremap.keys.parser import parse_key
from kbremap.keys.table import display_name, extended_usage

logger = logging.getLogger(__name__)


def split_argument(argument: str) -> tuple[KeySpec, KeySpec]:
    """Split ``SRC:DST`` on the first colon and parse both halves.

    Raises:
        InvalidKeyError: If there is no colon or either half is invalid.
    """
    src, sep, dst = argument.partition(":")
    if not sep:
        raise InvalidKeyError(argument, "expected SRC:DST")
    return parse_key(src), parse_key(dst)


class MappingSetBuilder:
    """Accumulates mapping pairs and checks them for conflicts.

    Usage::

        builder = MappingSetBuilder()
        builder.add_map("capslock:escape")
        builder.add_swap("lcommand:loption")
        mappings = builder.build()
    """

    def __init__(self) -> None:
        self._pairs: dict[int, MappingPair] = {}

    def add_map(self, argument: str) -> None:
        """Add a one-way ``SRC:DST`` mapping. Both sides must be single keys."""
        src, dst = split_argument(argument)
        for spec in (src, dst):
            if spec.is_group:
                raise AmbiguousMappingError(argument, spec.token)
        self.add_pair(src.usages[0], dst.usages[0])

    def add_swap(self, argument: str) -> None:
        """Add ``A:B`` as a reciprocal pair of mappings.

        Groups of equal size pair up positionally (left with left, right
        with right); otherwise every combination is added.
        """
        a, b = split_argument(argument)
        if len(a.usages) == len(b.usages):
            combinations = list(zip(a.usages, b.usages))
        else:
            combinations = [(x, y) for x in a.usages for y in b.usages]
        for x, y in combinations:
            self.add_pair(x, y)
            self.add_pair(y, x)

    def add_pair(self, src: int, dst: int) -> None:
        """Add a single pair.

        Raises:
            ConflictingMappingError: If ``src`` is already mapped elsewhere.
        """
        pair = MappingPair(src=extended_usage(src), dst=extended_usage(dst))
        existing = self._pairs.get(pair.src)
        if existing is not None and existing.dst != pair.dst:
            raise ConflictingMappingError(
                display_name(pair.src),
                display_name(existing.dst),
                display_name(pair.dst),
            )
        self._pairs[pair.src] = pair

    def build(self) -> MappingSet:
        mappings = MappingSet.from_pairs(list(self._pairs.values()))
        logger.debug(
            "Built mapping set: %s",
            ", ".join(f"{display_name(p.src)} -> {display_name(p.dst)}" for p in mappings.pairs)
            or "(empty)",
        )
        return mappings


def build_mapping_set(maps: Iterable[str] = (), swaps: Iterable[str] = ()) -> MappingSet:
    """Build a MappingSet from ``--map`` and ``--swap`` argument values."""
    builder = MappingSetBuilder()
    for argument in maps:
        builder.add_map(argument)
    for argument in swaps:
        builder.add_swap(argument)
    return builder.build()
