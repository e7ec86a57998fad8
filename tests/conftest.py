"""Shared test fixtures for the kbremap test suite.

Provides in-memory stand-ins for the hidutil collaborators and sample
``hidutil list`` output.
"""

from __future__ import annotations

from collections.abc import Callable

import pytest

from kbremap.domain.models import Device
from kbremap.hidutil.base import DeviceDirectory, ProcessRunner
from kbremap.hidutil.encoder import EncodedRequest


# ---------------------------------------------------------------------------
# Fakes
# ---------------------------------------------------------------------------


class FakeDeviceDirectory(DeviceDirectory):
    """A DeviceDirectory backed by a fixed list."""

    def __init__(self, devices: list[Device]) -> None:
        self.devices = devices
        self.calls = 0

    def list_devices(self) -> list[Device]:
        self.calls += 1
        return list(self.devices)


class RecordingRunner(ProcessRunner):
    """A ProcessRunner that records requests instead of running hidutil."""

    def __init__(self) -> None:
        self.requests: list[EncodedRequest] = []

    def apply(self, request: EncodedRequest) -> None:
        self.requests.append(request)


# ---------------------------------------------------------------------------
# Device Fixtures
# ---------------------------------------------------------------------------


@pytest.fixture
def internal_keyboard() -> Device:
    """The built-in keyboard of a MacBook."""
    return Device(vendor_id=1452, product_id=834, name="Apple Internal Keyboard / Trackpad")


@pytest.fixture
def usb_keyboard() -> Device:
    return Device(vendor_id=0x046D, product_id=0xC31C, name="USB Keyboard")


@pytest.fixture
def make_directory() -> Callable[[list[Device]], FakeDeviceDirectory]:
    """Factory for a DeviceDirectory serving the given devices."""
    return FakeDeviceDirectory


@pytest.fixture
def directory(internal_keyboard: Device, usb_keyboard: Device) -> FakeDeviceDirectory:
    return FakeDeviceDirectory([internal_keyboard, usb_keyboard])


@pytest.fixture
def runner() -> RecordingRunner:
    return RecordingRunner()


# ---------------------------------------------------------------------------
# hidutil Output Fixtures
# ---------------------------------------------------------------------------


@pytest.fixture
def hidutil_list_output() -> str:
    """``hidutil list`` output with a services table, a null product and a wrapped name."""
    return (
        "Services:\n"
        "VendorID ProductID LocationID UsagePage Usage RegistryID  Transport Class\n"
        "0x5ac    0x342     0x0        1         6     0x100000a3c SPI       AppleUserHIDEventService\n"
        "\n"
        "Devices:\n"
        "VendorID ProductID Product                            Built-In\n"
        "0x0      0x0       (null)                             (null)\n"
        "0x5ac    0x342     Apple Internal Keyboard / Trackpad 1\n"
        "0x5ac    0x342     Apple Internal Keyboard / Trackpad 1\n"
        "0x5ac    0x8600    TouchBar\n"
        "UserDevice                1\n"
        "0x46d    0xc31c    USB Keyboard                       0\n"
    )
