"""
Copyright Amazon.com, Inc. or its affiliates. All Rights Reserved.
SPDX-License-Identifier: Apache-2.0

Request, response and data structures of the AWS IoT 1-Click Devices Service.

Members are declared with snake_case names; on the wire they use the
lowerCamelCase JSON names of the service model. The ``location`` metadata of a
member selects whether it is bound to the URI path, the query string or the
JSON body.
"""

from __future__ import annotations

import datetime
import types
from dataclasses import dataclass, field, fields
from functools import cache
from typing import Any, Union, get_args, get_origin, get_type_hints

from .exceptions import ParseError, ValidationError

BODY = "body"
URI_LABEL = "uri"
QUERY = "querystring"

MAX_RESULTS_RANGE = (1, 250)


def member(
    *, location: str = BODY, required: bool = False, bounds=None, default=None
) -> Any:
    metadata = {"location": location, "required": required, "bounds": bounds}
    if required:
        return field(metadata=metadata)
    return field(default=default, metadata=metadata)


def wire_name(name: str) -> str:
    head, *rest = name.split("_")
    return head + "".join(part.capitalize() for part in rest)


def format_timestamp(value: datetime.datetime) -> str:
    if value.tzinfo is not None:
        value = value.astimezone(datetime.timezone.utc)
    if value.microsecond:
        return value.strftime("%Y-%m-%dT%H:%M:%S.%fZ")
    return value.strftime("%Y-%m-%dT%H:%M:%SZ")


def parse_timestamp(value: Any) -> datetime.datetime:
    if isinstance(value, (int, float)):
        return datetime.datetime.fromtimestamp(value, datetime.timezone.utc)
    return datetime.datetime.fromisoformat(value)


class Shape:
    """Base class of every modeled structure."""

    def to_wire(self) -> dict[str, Any]:
        """Serialize all members that are set, keyed by wire name."""
        return {
            wire_name(f.name): serialize_value(value)
            for f in fields(self)
            if (value := getattr(self, f.name)) is not None
        }

    @classmethod
    def from_wire(cls, data: dict[str, Any] | None):
        """Build an instance from decoded JSON, ignoring unknown keys."""
        if data is None:
            data = {}
        if not isinstance(data, dict):
            raise ParseError(f"{cls.__name__} expects a JSON object, got {data!r}")
        hints = _type_hints(cls)
        kwargs = {}
        for f in fields(cls):
            key = wire_name(f.name)
            if key in data and data[key] is not None:
                kwargs[f.name] = _deserialize(hints[f.name], data[key])
        return cls(**kwargs)

    def members_at(self, location: str) -> dict[str, Any]:
        return {
            wire_name(f.name): value
            for f in fields(self)
            if f.metadata.get("location", BODY) == location
            and (value := getattr(self, f.name)) is not None
        }

    def validate(self) -> None:
        for f in fields(self):
            value = getattr(self, f.name)
            if f.metadata.get("required") and value is None:
                raise ValidationError(f"{type(self).__name__}.{f.name} is required")
            if f.metadata.get("location") == URI_LABEL and (
                not isinstance(value, str) or not value
            ):
                raise ValidationError(
                    f"{type(self).__name__}.{f.name} must be a non-empty string"
                )
            bounds = f.metadata.get("bounds")
            if bounds is not None and value is not None:
                low, high = bounds
                if not low <= value <= high:
                    raise ValidationError(
                        f"{type(self).__name__}.{f.name} must be between "
                        f"{low} and {high}, got {value}"
                    )


@cache
def _type_hints(cls: type) -> dict[str, Any]:
    return get_type_hints(cls)


def serialize_value(value: Any) -> Any:
    if isinstance(value, Shape):
        return value.to_wire()
    if isinstance(value, list):
        return [serialize_value(item) for item in value]
    if isinstance(value, dict):
        return {key: serialize_value(item) for key, item in value.items()}
    if isinstance(value, datetime.datetime):
        return format_timestamp(value)
    return value


def _deserialize(hint: Any, value: Any) -> Any:
    origin = get_origin(hint)
    if origin in (Union, types.UnionType):
        hint = next(arg for arg in get_args(hint) if arg is not type(None))
        origin = get_origin(hint)
    if origin is list:
        (item_hint,) = get_args(hint)
        return [_deserialize(item_hint, item) for item in value]
    if origin is dict:
        _, item_hint = get_args(hint)
        return {key: _deserialize(item_hint, item) for key, item in value.items()}
    if isinstance(hint, type) and issubclass(hint, Shape):
        return hint.from_wire(value)
    if hint is datetime.datetime:
        return parse_timestamp(value)
    if hint is float and isinstance(value, int):
        return float(value)
    return value


@dataclass(kw_only=True)
class Attributes(Shape):
    pass


@dataclass(kw_only=True)
class Device(Shape):
    attributes: Attributes | None = member()
    device_id: str | None = member()
    type: str | None = member()


@dataclass(kw_only=True)
class DeviceDescription(Shape):
    arn: str | None = member()
    attributes: dict[str, str] | None = member()
    device_id: str | None = member()
    enabled: bool | None = member()
    remaining_life: float | None = member()
    type: str | None = member()
    tags: dict[str, str] | None = member()


@dataclass(kw_only=True)
class DeviceEvent(Shape):
    device: Device | None = member()
    std_event: str | None = member()


@dataclass(kw_only=True)
class DeviceMethod(Shape):
    device_type: str | None = member()
    method_name: str | None = member()


@dataclass(kw_only=True)
class DeviceClaimResponse(Shape):
    state: str | None = member()


@dataclass(kw_only=True)
class DeviceEventsResponse(Shape):
    events: list[DeviceEvent] | None = member()
    next_token: str | None = member()


@dataclass(kw_only=True)
class Empty(Shape):
    pass


@dataclass(kw_only=True)
class ClaimDevicesByClaimCodeRequest(Shape):
    claim_code: str = member(location=URI_LABEL, required=True)


@dataclass(kw_only=True)
class ClaimDevicesByClaimCodeResponse(Shape):
    claim_code: str | None = member()
    total: int | None = member()


@dataclass(kw_only=True)
class DescribeDeviceRequest(Shape):
    device_id: str = member(location=URI_LABEL, required=True)


@dataclass(kw_only=True)
class DescribeDeviceResponse(Shape):
    device_description: DeviceDescription | None = member()


@dataclass(kw_only=True)
class FinalizeDeviceClaimRequest(Shape):
    device_id: str = member(location=URI_LABEL, required=True)
    tags: dict[str, str] | None = member()


@dataclass(kw_only=True)
class FinalizeDeviceClaimResponse(Shape):
    state: str | None = member()


@dataclass(kw_only=True)
class GetDeviceMethodsRequest(Shape):
    device_id: str = member(location=URI_LABEL, required=True)


@dataclass(kw_only=True)
class GetDeviceMethodsResponse(Shape):
    device_methods: list[DeviceMethod] | None = member()


@dataclass(kw_only=True)
class InitiateDeviceClaimRequest(Shape):
    device_id: str = member(location=URI_LABEL, required=True)


@dataclass(kw_only=True)
class InitiateDeviceClaimResponse(Shape):
    state: str | None = member()


@dataclass(kw_only=True)
class InvokeDeviceMethodRequest(Shape):
    device_id: str = member(location=URI_LABEL, required=True)
    device_method: DeviceMethod | None = member()
    device_method_parameters: str | None = member()


@dataclass(kw_only=True)
class InvokeDeviceMethodResponse(Shape):
    device_method_response: str | None = member()


@dataclass(kw_only=True)
class ListDeviceEventsRequest(Shape):
    device_id: str = member(location=URI_LABEL, required=True)
    from_time_stamp: datetime.datetime = member(location=QUERY, required=True)
    to_time_stamp: datetime.datetime = member(location=QUERY, required=True)
    max_results: int | None = member(location=QUERY, bounds=MAX_RESULTS_RANGE)
    next_token: str | None = member(location=QUERY)


@dataclass(kw_only=True)
class ListDeviceEventsResponse(Shape):
    events: list[DeviceEvent] | None = member()
    next_token: str | None = member()


@dataclass(kw_only=True)
class ListDevicesRequest(Shape):
    device_type: str | None = member(location=QUERY)
    max_results: int | None = member(location=QUERY, bounds=MAX_RESULTS_RANGE)
    next_token: str | None = member(location=QUERY)


@dataclass(kw_only=True)
class ListDevicesResponse(Shape):
    devices: list[DeviceDescription] | None = member()
    next_token: str | None = member()


@dataclass(kw_only=True)
class UnclaimDeviceRequest(Shape):
    device_id: str = member(location=URI_LABEL, required=True)


@dataclass(kw_only=True)
class UnclaimDeviceResponse(Shape):
    state: str | None = member()


@dataclass(kw_only=True)
class UpdateDeviceStateRequest(Shape):
    device_id: str = member(location=URI_LABEL, required=True)
    enabled: bool | None = member()


@dataclass(kw_only=True)
class UpdateDeviceStateResponse(Shape):
    pass
