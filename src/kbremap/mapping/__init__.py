"""Mapping set construction from ``--map`` and ``--swap`` arguments."""

from kbremap.mapping.builder import MappingSetBuilder, build_mapping_set

__all__ = ["MappingSetBuilder", "build_mapping_set"]
