"""Tests for encoding commands into hidutil requests."""

from __future__ import annotations

import shlex

from kbremap.domain.models import Command, DeviceFilter, MappingSet
from kbremap.hidutil.encoder import (
    EncodedRequest,
    encode,
    encode_mappings,
    encode_matching,
    format_usage,
    render,
    to_argv,
)
from kbremap.mapping.builder import build_mapping_set

APPLE_INTERNAL = DeviceFilter(vendor_id=1452, product_id=834)


class TestFormatUsage:
    def test_keyboard_usage(self) -> None:
        assert format_usage(0x39) == "0x700000039"
        assert format_usage(0x2A) == "0x70000002A"

    def test_already_extended(self) -> None:
        assert format_usage(0x700000039) == "0x700000039"

    def test_vendor_page(self) -> None:
        assert format_usage(0xFF00000003) == "0xFF00000003"


class TestEncodeMatching:
    def test_decimal_ids(self) -> None:
        assert encode_matching(APPLE_INTERNAL) == '{"VendorID":1452,"ProductID":834}'


class TestEncodeMappings:
    def test_single_mapping(self) -> None:
        payload = encode_mappings(build_mapping_set(maps=["capslock:delete"]))
        assert payload == (
            '{"UserKeyMapping":['
            '{"HIDKeyboardModifierMappingSrc":0x700000039,"HIDKeyboardModifierMappingDst":0x70000002A}'
            "]}"
        )

    def test_empty(self) -> None:
        assert encode_mappings(MappingSet.empty()) == '{"UserKeyMapping":[]}'

    def test_entries_sorted_by_source(self) -> None:
        payload = encode_mappings(build_mapping_set(maps=["capslock:a", "return:b"]))
        assert payload.index("0x700000028") < payload.index("0x700000039")


class TestEncode:
    def test_without_filter(self) -> None:
        request = encode(Command(mappings=build_mapping_set(maps=["a:b"])))
        assert request.matching is None
        assert "0x700000004" in request.payload

    def test_with_filter(self) -> None:
        request = encode(
            Command(device_filter=APPLE_INTERNAL, mappings=build_mapping_set(maps=["capslock:delete"]))
        )
        assert request.matching == '{"VendorID":1452,"ProductID":834}'
        assert '"HIDKeyboardModifierMappingSrc":0x700000039' in request.payload
        assert '"HIDKeyboardModifierMappingDst":0x70000002A' in request.payload

    def test_reset_keeps_filter(self) -> None:
        mapped = encode(Command(device_filter=APPLE_INTERNAL, mappings=build_mapping_set(maps=["a:b"])))
        reset = encode(Command(device_filter=APPLE_INTERNAL, mappings=MappingSet.empty()))
        assert reset.matching == mapped.matching
        assert reset.payload == '{"UserKeyMapping":[]}'

    def test_order_independent(self) -> None:
        first = encode(Command(mappings=build_mapping_set(maps=["a:b", "c:d"], swaps=["x:y"])))
        second = encode(Command(mappings=build_mapping_set(maps=["c:d", "a:b"], swaps=["y:x"])))
        assert first == second


class TestArgvAndRender:
    def test_argv_with_matching(self) -> None:
        request = EncodedRequest(matching='{"VendorID":1,"ProductID":2}', payload='{"UserKeyMapping":[]}')
        assert to_argv(request) == [
            "hidutil",
            "property",
            "--matching",
            '{"VendorID":1,"ProductID":2}',
            "--set",
            '{"UserKeyMapping":[]}',
        ]

    def test_argv_without_matching(self) -> None:
        request = EncodedRequest(payload='{"UserKeyMapping":[]}')
        assert to_argv(request, "/usr/bin/hidutil") == [
            "/usr/bin/hidutil",
            "property",
            "--set",
            '{"UserKeyMapping":[]}',
        ]

    def test_render(self) -> None:
        request = EncodedRequest(matching='{"VendorID":1,"ProductID":2}', payload='{"UserKeyMapping":[]}')
        assert render(request) == (
            "hidutil property \\\n"
            "  --matching '{\"VendorID\":1,\"ProductID\":2}' \\\n"
            "  --set '{\"UserKeyMapping\":[]}'"
        )

    def test_render_and_argv_carry_identical_payloads(self) -> None:
        request = encode(
            Command(device_filter=APPLE_INTERNAL, mappings=build_mapping_set(swaps=["capslock:escape"]))
        )
        rendered = render(request).replace(" \\\n", " ")
        assert shlex.split(rendered) == to_argv(request)
