"""Domain models and errors for kbremap.

All models use Pydantic v2 and are immutable value objects created and
consumed within a single invocation.
"""

from kbremap.domain.errors import (
    AmbiguousMappingError,
    ConflictingMappingError,
    DeviceNotFoundError,
    ExternalToolError,
    InvalidKeyError,
    KbRemapError,
)
from kbremap.domain.models import (
    Command,
    Device,
    DeviceFilter,
    KeyKind,
    KeySpec,
    MappingPair,
    MappingSet,
)

__all__ = [
    "AmbiguousMappingError",
    "Command",
    "ConflictingMappingError",
    "Device",
    "DeviceFilter",
    "DeviceNotFoundError",
    "ExternalToolError",
    "InvalidKeyError",
    "KbRemapError",
    "KeyKind",
    "KeySpec",
    "MappingPair",
    "MappingSet",
]
