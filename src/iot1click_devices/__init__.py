"""
Copyright Amazon.com, Inc. or its affiliates. All Rights Reserved.
SPDX-License-Identifier: Apache-2.0

Client for the AWS IoT 1-Click Devices Service: claim, describe, invoke and
manage 1-Click devices over the service's REST-JSON API, with SigV4 request
signing and pluggable credential providers.
"""

from __future__ import annotations

from ._http import URI, AWSRequest, Field, Fields
from ._identity import AWSCredentialIdentity
from ._version import __version__
from .client import Iot1ClickDevices, Iot1ClickDevicesClient
from .config import ClientConfig
from .credentials import (
    ChainCredentialsProvider,
    DefaultCredentialsProvider,
    EnvironmentCredentialsProvider,
    StaticCredentialsProvider,
    Variable,
    WebIdentityProvider,
)
from .exceptions import (
    ClaimDevicesByClaimCodeError,
    CredentialsError,
    DescribeDeviceError,
    FinalizeDeviceClaimError,
    ForbiddenException,
    GetDeviceMethodsError,
    HttpDispatchError,
    InitiateDeviceClaimError,
    InternalFailureException,
    InvalidRequestException,
    InvokeDeviceMethodError,
    Iot1ClickDevicesError,
    ListDeviceEventsError,
    ListDevicesError,
    ParseError,
    PreconditionFailedException,
    RangeNotSatisfiableException,
    ResourceConflictException,
    ResourceNotFoundException,
    ServiceError,
    UnclaimDeviceError,
    UnknownServiceError,
    UpdateDeviceStateError,
    ValidationError,
)
from .shapes import (
    Attributes,
    ClaimDevicesByClaimCodeRequest,
    ClaimDevicesByClaimCodeResponse,
    DescribeDeviceRequest,
    DescribeDeviceResponse,
    Device,
    DeviceClaimResponse,
    DeviceDescription,
    DeviceEvent,
    DeviceEventsResponse,
    DeviceMethod,
    Empty,
    FinalizeDeviceClaimRequest,
    FinalizeDeviceClaimResponse,
    GetDeviceMethodsRequest,
    GetDeviceMethodsResponse,
    InitiateDeviceClaimRequest,
    InitiateDeviceClaimResponse,
    InvokeDeviceMethodRequest,
    InvokeDeviceMethodResponse,
    ListDeviceEventsRequest,
    ListDeviceEventsResponse,
    ListDevicesRequest,
    ListDevicesResponse,
    UnclaimDeviceRequest,
    UnclaimDeviceResponse,
    UpdateDeviceStateRequest,
    UpdateDeviceStateResponse,
)
from .signers import SigV4Signer, SigV4SigningProperties

__license__ = "Apache-2.0"
__version__ = __version__

__all__ = (
    "AWSCredentialIdentity",
    "AWSRequest",
    "Attributes",
    "ChainCredentialsProvider",
    "ClaimDevicesByClaimCodeError",
    "ClaimDevicesByClaimCodeRequest",
    "ClaimDevicesByClaimCodeResponse",
    "ClientConfig",
    "CredentialsError",
    "DefaultCredentialsProvider",
    "DescribeDeviceError",
    "DescribeDeviceRequest",
    "DescribeDeviceResponse",
    "Device",
    "DeviceClaimResponse",
    "DeviceDescription",
    "DeviceEvent",
    "DeviceEventsResponse",
    "DeviceMethod",
    "Empty",
    "EnvironmentCredentialsProvider",
    "Field",
    "Fields",
    "FinalizeDeviceClaimError",
    "FinalizeDeviceClaimRequest",
    "FinalizeDeviceClaimResponse",
    "ForbiddenException",
    "GetDeviceMethodsError",
    "GetDeviceMethodsRequest",
    "GetDeviceMethodsResponse",
    "HttpDispatchError",
    "InitiateDeviceClaimError",
    "InitiateDeviceClaimRequest",
    "InitiateDeviceClaimResponse",
    "InternalFailureException",
    "InvalidRequestException",
    "InvokeDeviceMethodError",
    "InvokeDeviceMethodRequest",
    "InvokeDeviceMethodResponse",
    "Iot1ClickDevices",
    "Iot1ClickDevicesClient",
    "Iot1ClickDevicesError",
    "ListDeviceEventsError",
    "ListDeviceEventsRequest",
    "ListDeviceEventsResponse",
    "ListDevicesError",
    "ListDevicesRequest",
    "ListDevicesResponse",
    "ParseError",
    "PreconditionFailedException",
    "RangeNotSatisfiableException",
    "ResourceConflictException",
    "ResourceNotFoundException",
    "ServiceError",
    "SigV4Signer",
    "SigV4SigningProperties",
    "StaticCredentialsProvider",
    "URI",
    "UnclaimDeviceError",
    "UnclaimDeviceRequest",
    "UnclaimDeviceResponse",
    "UnknownServiceError",
    "UpdateDeviceStateError",
    "UpdateDeviceStateRequest",
    "UpdateDeviceStateResponse",
    "ValidationError",
    "Variable",
    "WebIdentityProvider",
)
