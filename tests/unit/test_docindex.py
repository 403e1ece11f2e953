"""
Copyright Amazon.com, Inc. or its affiliates. All Rights Reserved.
SPDX-License-Identifier: Apache-2.0
"""

import pytest

import iot1click_devices
from iot1click_devices import docindex
from iot1click_devices.docindex import (
    DocIndexError,
    build_sidebar_items,
    parse_sidebar_items,
    render_sidebar_items,
    summary_of,
)

EXPECTED_SIDEBAR = (
    'initSidebarItems({"enum":['
    '["ClaimDevicesByClaimCodeError","Errors returned by ClaimDevicesByClaimCode"],'
    '["DescribeDeviceError","Errors returned by DescribeDevice"],'
    '["FinalizeDeviceClaimError","Errors returned by FinalizeDeviceClaim"],'
    '["GetDeviceMethodsError","Errors returned by GetDeviceMethods"],'
    '["InitiateDeviceClaimError","Errors returned by InitiateDeviceClaim"],'
    '["InvokeDeviceMethodError","Errors returned by InvokeDeviceMethod"],'
    '["ListDeviceEventsError","Errors returned by ListDeviceEvents"],'
    '["ListDevicesError","Errors returned by ListDevices"],'
    '["UnclaimDeviceError","Errors returned by UnclaimDevice"],'
    '["UpdateDeviceStateError","Errors returned by UpdateDeviceState"]],'
    '"struct":['
    '["Attributes",""],'
    '["ClaimDevicesByClaimCodeRequest",""],'
    '["ClaimDevicesByClaimCodeResponse",""],'
    '["DescribeDeviceRequest",""],'
    '["DescribeDeviceResponse",""],'
    '["Device",""],'
    '["DeviceClaimResponse",""],'
    '["DeviceDescription",""],'
    '["DeviceEvent",""],'
    '["DeviceEventsResponse",""],'
    '["DeviceMethod",""],'
    '["Empty",""],'
    '["FinalizeDeviceClaimRequest",""],'
    '["FinalizeDeviceClaimResponse",""],'
    '["GetDeviceMethodsRequest",""],'
    '["GetDeviceMethodsResponse",""],'
    '["InitiateDeviceClaimRequest",""],'
    '["InitiateDeviceClaimResponse",""],'
    '["InvokeDeviceMethodRequest",""],'
    '["InvokeDeviceMethodResponse",""],'
    '["Iot1ClickDevicesClient","A client for the AWS IoT 1-Click Devices Service API."],'
    '["ListDeviceEventsRequest",""],'
    '["ListDeviceEventsResponse",""],'
    '["ListDevicesRequest",""],'
    '["ListDevicesResponse",""],'
    '["UnclaimDeviceRequest",""],'
    '["UnclaimDeviceResponse",""],'
    '["UpdateDeviceStateRequest",""],'
    '["UpdateDeviceStateResponse",""]],'
    '"trait":['
    '["Iot1ClickDevices","Trait representing the capabilities of the AWS IoT '
    "1-Click Devices Service API. AWS IoT 1-Click Devices Service clients "
    'implement this trait."]]});'
)


class TestBuild:
    def test_package_index(self):
        items = build_sidebar_items(iot1click_devices)
        assert render_sidebar_items(items) == EXPECTED_SIDEBAR

    def test_non_api_symbols_are_not_indexed(self):
        items = build_sidebar_items(iot1click_devices)
        names = {name for entries in items.values() for name, _ in entries}
        for name in (
            "ClientConfig",
            "ResourceNotFoundException",
            "AWSCredentialIdentity",
            "WebIdentityProvider",
            "SigV4Signer",
        ):
            assert name not in names

    def test_classify(self):
        assert docindex.classify(iot1click_devices.DescribeDeviceError) == docindex.ENUM
        assert docindex.classify(iot1click_devices.Iot1ClickDevices) == docindex.TRAIT
        assert docindex.classify(iot1click_devices.Device) == docindex.STRUCT
        assert docindex.classify(iot1click_devices.Iot1ClickDevicesClient) is None
        assert (
            docindex.classify(
                iot1click_devices.Iot1ClickDevicesClient,
                (iot1click_devices.Iot1ClickDevices,),
            )
            == docindex.STRUCT
        )
        assert docindex.classify(docindex.classify) is None


class TestParse:
    def test_parse_rendered_index(self):
        items = parse_sidebar_items(EXPECTED_SIDEBAR)
        assert list(items) == ["enum", "struct", "trait"]
        assert len(items["enum"]) == 10
        assert len(items["struct"]) == 29
        assert render_sidebar_items(items) == EXPECTED_SIDEBAR

    def test_surrounding_whitespace(self):
        items = parse_sidebar_items('\n  initSidebarItems({"trait":[["T","t"]]})  \n')
        assert items == {"trait": [("T", "t")]}

    def test_round_trip_keeps_unknown_kinds(self):
        items = parse_sidebar_items(
            'initSidebarItems({"fn":[["f","does f"]],"trait":[["T","t"]]});'
        )
        rendered = render_sidebar_items(items)
        assert rendered.startswith('initSidebarItems({"trait":[["T","t"]],"fn":')
        assert parse_sidebar_items(rendered) == items

    @pytest.mark.parametrize(
        "text",
        [
            "",
            "sidebar({})",
            "initSidebarItems({not json});",
            "initSidebarItems([]);",
            'initSidebarItems({"enum":{}});',
            'initSidebarItems({"enum":[["A"]]});',
            'initSidebarItems({"enum":[["A",1]]});',
        ],
    )
    def test_malformed(self, text):
        with pytest.raises(DocIndexError):
            parse_sidebar_items(text)

    def test_summary_of(self):
        items = parse_sidebar_items(EXPECTED_SIDEBAR)
        assert summary_of(items, "ListDevicesError") == "Errors returned by ListDevices"
        assert summary_of(items, "Device") == ""
        with pytest.raises(KeyError):
            summary_of(items, "TagResourceError")
