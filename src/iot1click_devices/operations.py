"""
Copyright Amazon.com, Inc. or its affiliates. All Rights Reserved.
SPDX-License-Identifier: Apache-2.0
"""

import json
import logging
from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any
from urllib.parse import quote, urlencode

from . import exceptions, shapes
from ._http import URI, AWSRequest, Field, Fields
from .exceptions import OperationError, ParseError, ServiceError, UnknownServiceError
from .shapes import QUERY, URI_LABEL, Shape

LOG = logging.getLogger(__name__)

CONTENT_TYPE = "application/json"


@dataclass(frozen=True)
class OperationModel:
    """HTTP binding of one service operation."""

    name: str
    http_method: str
    request_uri: str
    input_shape: type[Shape]
    output_shape: type[Shape]
    error_family: type[OperationError]
    has_body: bool = False

    def serialize(self, request: Shape, endpoint: URI) -> AWSRequest:
        if not isinstance(request, self.input_shape):
            raise TypeError(
                f"{self.name} expects {self.input_shape.__name__}, "
                f"got {type(request).__name__}"
            )
        labels = {
            key: quote(value, safe="")
            for key, value in request.members_at(URI_LABEL).items()
        }
        path = (endpoint.path or "").rstrip("/") + self.request_uri.format(**labels)
        query = urlencode(
            [
                (key, _query_value(value))
                for key, value in request.members_at(QUERY).items()
            ],
            quote_via=quote,
            safe="",
        )
        fields = Fields()
        body = b""
        if self.has_body:
            payload = {
                key: shapes.serialize_value(value)
                for key, value in request.members_at(shapes.BODY).items()
            }
            body = json.dumps(payload, separators=(",", ":")).encode("utf-8")
            fields.set_field(Field(name="Content-Type", values=[CONTENT_TYPE]))
        return AWSRequest(
            destination=URI(
                scheme=endpoint.scheme,
                host=endpoint.host,
                port=endpoint.port,
                path=path,
                query=query or None,
            ),
            method=self.http_method,
            fields=fields,
            body=body,
        )

    def parse_response(self, body: bytes) -> Shape:
        if not body.strip():
            return self.output_shape.from_wire({})
        try:
            data = json.loads(body)
        except ValueError as e:
            raise ParseError(f"{self.name} returned a malformed body: {e}") from e
        if not isinstance(data, dict):
            raise ParseError(f"{self.name} returned a non-object body: {body[:200]!r}")
        try:
            return self.output_shape.from_wire(data)
        except (TypeError, ValueError, AttributeError) as e:
            raise ParseError(f"{self.name} returned an unexpected body: {e}") from e

    def parse_error(
        self, status_code: int, headers: Mapping[str, str], body: bytes
    ) -> ServiceError:
        """Map an error response to the exception the operation raises."""
        headers = {key.lower(): value for key, value in headers.items()}
        try:
            data = json.loads(body) if body.strip() else {}
        except ValueError:
            data = None
        if not isinstance(data, dict):
            data = None

        error_type = None
        if header := headers.get("x-amzn-errortype"):
            error_type = header.split(":", 1)[0]
        elif data is not None:
            raw = data.get("__type") or data.get("code") or data.get("Code")
            if raw:
                error_type = str(raw).rsplit("#", 1)[-1]

        message = ""
        if data is not None:
            message = data.get("message") or data.get("Message") or ""

        error_cls = exceptions.SERVICE_ERRORS.get(error_type or "")
        if data is None or error_cls not in self.error_family.errors:
            error_cls = UnknownServiceError
            message = message or body.decode("utf-8", errors="replace")
        LOG.debug("%s failed with %s (%s)", self.name, error_type, status_code)
        raised = exceptions.operation_error(self.error_family, error_cls)
        return raised(
            message, code=error_type, status_code=status_code, body=body
        )


def _query_value(value: Any) -> str:
    if isinstance(value, bool):
        return "true" if value else "false"
    return str(shapes.serialize_value(value))


CLAIM_DEVICES_BY_CLAIM_CODE = OperationModel(
    name="ClaimDevicesByClaimCode",
    http_method="PUT",
    request_uri="/claims/{claimCode}",
    input_shape=shapes.ClaimDevicesByClaimCodeRequest,
    output_shape=shapes.ClaimDevicesByClaimCodeResponse,
    error_family=exceptions.ClaimDevicesByClaimCodeError,
)
DESCRIBE_DEVICE = OperationModel(
    name="DescribeDevice",
    http_method="GET",
    request_uri="/devices/{deviceId}",
    input_shape=shapes.DescribeDeviceRequest,
    output_shape=shapes.DescribeDeviceResponse,
    error_family=exceptions.DescribeDeviceError,
)
FINALIZE_DEVICE_CLAIM = OperationModel(
    name="FinalizeDeviceClaim",
    http_method="PUT",
    request_uri="/devices/{deviceId}/finalize-claim",
    input_shape=shapes.FinalizeDeviceClaimRequest,
    output_shape=shapes.FinalizeDeviceClaimResponse,
    error_family=exceptions.FinalizeDeviceClaimError,
    has_body=True,
)
GET_DEVICE_METHODS = OperationModel(
    name="GetDeviceMethods",
    http_method="GET",
    request_uri="/devices/{deviceId}/methods",
    input_shape=shapes.GetDeviceMethodsRequest,
    output_shape=shapes.GetDeviceMethodsResponse,
    error_family=exceptions.GetDeviceMethodsError,
)
INITIATE_DEVICE_CLAIM = OperationModel(
    name="InitiateDeviceClaim",
    http_method="PUT",
    request_uri="/devices/{deviceId}/initiate-claim",
    input_shape=shapes.InitiateDeviceClaimRequest,
    output_shape=shapes.InitiateDeviceClaimResponse,
    error_family=exceptions.InitiateDeviceClaimError,
)
INVOKE_DEVICE_METHOD = OperationModel(
    name="InvokeDeviceMethod",
    http_method="POST",
    request_uri="/devices/{deviceId}/methods",
    input_shape=shapes.InvokeDeviceMethodRequest,
    output_shape=shapes.InvokeDeviceMethodResponse,
    error_family=exceptions.InvokeDeviceMethodError,
    has_body=True,
)
LIST_DEVICE_EVENTS = OperationModel(
    name="ListDeviceEvents",
    http_method="GET",
    request_uri="/devices/{deviceId}/events",
    input_shape=shapes.ListDeviceEventsRequest,
    output_shape=shapes.ListDeviceEventsResponse,
    error_family=exceptions.ListDeviceEventsError,
)
LIST_DEVICES = OperationModel(
    name="ListDevices",
    http_method="GET",
    request_uri="/devices",
    input_shape=shapes.ListDevicesRequest,
    output_shape=shapes.ListDevicesResponse,
    error_family=exceptions.ListDevicesError,
)
UNCLAIM_DEVICE = OperationModel(
    name="UnclaimDevice",
    http_method="PUT",
    request_uri="/devices/{deviceId}/unclaim",
    input_shape=shapes.UnclaimDeviceRequest,
    output_shape=shapes.UnclaimDeviceResponse,
    error_family=exceptions.UnclaimDeviceError,
)
UPDATE_DEVICE_STATE = OperationModel(
    name="UpdateDeviceState",
    http_method="PUT",
    request_uri="/devices/{deviceId}/state",
    input_shape=shapes.UpdateDeviceStateRequest,
    output_shape=shapes.UpdateDeviceStateResponse,
    error_family=exceptions.UpdateDeviceStateError,
    has_body=True,
)

OPERATIONS: dict[str, OperationModel] = {
    op.name: op
    for op in (
        CLAIM_DEVICES_BY_CLAIM_CODE,
        DESCRIBE_DEVICE,
        FINALIZE_DEVICE_CLAIM,
        GET_DEVICE_METHODS,
        INITIATE_DEVICE_CLAIM,
        INVOKE_DEVICE_METHOD,
        LIST_DEVICE_EVENTS,
        LIST_DEVICES,
        UNCLAIM_DEVICE,
        UPDATE_DEVICE_STATE,
    )
}
