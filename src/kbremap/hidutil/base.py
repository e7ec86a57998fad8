"""Abstract interfaces for the external collaborators.

The remapping core only needs two things from the host: a list of
attached devices, and a way to apply an encoded request. Both sit
behind these interfaces so the hidutil implementations can be swapped
for in-memory fakes in tests.
"""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod

from kbremap.domain.errors import DeviceNotFoundError
from kbremap.domain.models import Device
from kbremap.hidutil.encoder import EncodedRequest

logger = logging.getLogger(__name__)


class DeviceDirectory(ABC):
    """Source of attached HID devices."""

    @abstractmethod
    def list_devices(self) -> list[Device]:
        """Return the attached devices, de-duplicated and sorted.

        Raises:
            ExternalToolError: If the device inventory cannot be read.
        """
        ...

    def find(self, name: str) -> list[Device]:
        """Return the devices whose name is exactly ``name``.

        The match is case-sensitive and on the full string.

        Raises:
            DeviceNotFoundError: If no device matches.
        """
        matches = [device for device in self.list_devices() if device.name == name]
        if not matches:
            raise DeviceNotFoundError(name)
        logger.debug("Device name %r matched %d device(s)", name, len(matches))
        return matches


class ProcessRunner(ABC):
    """Applies encoded requests to the host."""

    @abstractmethod
    def apply(self, request: EncodedRequest) -> None:
        """Apply ``request``, blocking until the tool exits.

        Raises:
            ExternalToolError: If the tool cannot run or exits non-zero.
        """
        ...
