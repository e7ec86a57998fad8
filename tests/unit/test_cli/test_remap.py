"""Tests for planning, dumping and applying remapping commands."""

from __future__ import annotations

import pytest

from kbremap import remap
from kbremap.domain.errors import ConflictingMappingError, DeviceNotFoundError, InvalidKeyError
from kbremap.domain.models import Device, DeviceFilter, MappingSet
from kbremap.hidutil.base import DeviceDirectory, ProcessRunner
from kbremap.hidutil.encoder import encode, render


class TestPlan:
    def test_without_name_targets_all_keyboards(self, directory: DeviceDirectory) -> None:
        commands = remap.plan(maps=["capslock:escape"], directory=directory)
        assert len(commands) == 1
        assert commands[0].device_filter is None
        assert directory.calls == 0

    def test_name_resolves_filter(self, directory: DeviceDirectory) -> None:
        commands = remap.plan(
            maps=["capslock:delete"], name="Apple Internal Keyboard / Trackpad", directory=directory
        )
        assert [c.device_filter for c in commands] == [DeviceFilter(vendor_id=1452, product_id=834)]

    def test_one_command_per_distinct_device(self, make_directory) -> None:
        directory = make_directory(
            [
                Device(vendor_id=1, product_id=2, name="Keyboard"),
                Device(vendor_id=1, product_id=2, name="Keyboard"),
                Device(vendor_id=3, product_id=4, name="Keyboard"),
            ]
        )
        commands = remap.plan(maps=["a:b"], name="Keyboard", directory=directory)
        assert [c.device_filter for c in commands] == [
            DeviceFilter(vendor_id=1, product_id=2),
            DeviceFilter(vendor_id=3, product_id=4),
        ]
        assert commands[0].mappings == commands[1].mappings

    def test_reset_is_empty(self, directory: DeviceDirectory) -> None:
        commands = remap.plan(reset=True, name="USB Keyboard", directory=directory)
        assert commands[0].mappings == MappingSet.empty()
        assert commands[0].device_filter == DeviceFilter(vendor_id=0x046D, product_id=0xC31C)

    def test_reset_uses_same_filter_as_map(self, directory: DeviceDirectory) -> None:
        name = "Apple Internal Keyboard / Trackpad"
        mapped = encode(remap.plan(maps=["capslock:delete"], name=name, directory=directory)[0])
        reset = encode(remap.plan(reset=True, name=name, directory=directory)[0])
        assert reset.matching == mapped.matching
        assert reset.payload == '{"UserKeyMapping":[]}'

    def test_unknown_device(self, directory: DeviceDirectory) -> None:
        with pytest.raises(DeviceNotFoundError):
            remap.plan(maps=["a:b"], name="Nope", directory=directory)

    def test_mapping_errors_come_before_device_lookup(self, directory: DeviceDirectory) -> None:
        with pytest.raises(InvalidKeyError):
            remap.plan(maps=["zz:a"], name="USB Keyboard", directory=directory)
        with pytest.raises(ConflictingMappingError):
            remap.plan(maps=["a:b", "a:c"], name="USB Keyboard", directory=directory)
        assert directory.calls == 0

    def test_name_requires_directory(self) -> None:
        with pytest.raises(ValueError, match="device directory"):
            remap.plan(maps=["a:b"], name="USB Keyboard")


class TestDump:
    def test_dump_single(self, directory: DeviceDirectory) -> None:
        commands = remap.plan(
            maps=["capslock:delete"], name="Apple Internal Keyboard / Trackpad", directory=directory
        )
        text = remap.dump(commands)
        assert text.startswith("hidutil property \\\n")
        assert '"VendorID":1452' in text
        assert '"ProductID":834' in text
        assert "0x700000039" in text
        assert "0x70000002A" in text

    def test_dump_multiple_separated_by_blank_line(self, make_directory) -> None:
        directory = make_directory(
            [
                Device(vendor_id=1, product_id=2, name="Keyboard"),
                Device(vendor_id=3, product_id=4, name="Keyboard"),
            ]
        )
        commands = remap.plan(maps=["a:b"], name="Keyboard", directory=directory)
        parts = remap.dump(commands, "hidutil").split("\n\n")
        assert parts == [render(encode(c)) for c in commands]


class TestApply:
    def test_apply_sends_encoded_requests(self, directory: DeviceDirectory, runner: ProcessRunner) -> None:
        commands = remap.plan(swaps=["a:b"], name="USB Keyboard", directory=directory)
        remap.apply(commands, runner)
        assert runner.requests == [encode(commands[0])]

    def test_apply_and_dump_share_payload(self, directory: DeviceDirectory, runner: ProcessRunner) -> None:
        commands = remap.plan(
            maps=["capslock:delete"], name="Apple Internal Keyboard / Trackpad", directory=directory
        )
        remap.apply(commands, runner)
        assert remap.dump(commands) == render(runner.requests[0])
