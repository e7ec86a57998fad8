"""hidutil integration for kbremap.

Encodes remapping commands into ``hidutil property`` requests and wraps
the two hidutil calls the tool needs behind pluggable interfaces.

Public API:
    DeviceDirectory -- Abstract source of attached devices
    ProcessRunner -- Abstract applier of encoded requests
    HidutilDeviceDirectory -- ``hidutil list`` implementation
    HidutilRunner -- ``hidutil property`` implementation
    EncodedRequest, encode, render, to_argv -- Request encoding
"""

from kbremap.hidutil.base import DeviceDirectory, ProcessRunner
from kbremap.hidutil.devices import HidutilDeviceDirectory
from kbremap.hidutil.encoder import EncodedRequest, encode, render, to_argv
from kbremap.hidutil.runner import HidutilRunner

__all__ = [
    "DeviceDirectory",
    "EncodedRequest",
    "HidutilDeviceDirectory",
    "HidutilRunner",
    "ProcessRunner",
    "encode",
    "render",
    "to_argv",
]
