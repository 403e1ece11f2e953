"""
Copyright Amazon.com, Inc. or its affiliates. All Rights Reserved.
SPDX-License-Identifier: Apache-2.0
"""

import dataclasses
import logging
from collections.abc import Iterator
from typing import Protocol, runtime_checkable

import requests

from . import operations
from ._http import AWSRequest, Field
from .config import SIGNING_NAME, ClientConfig
from .credentials import DefaultCredentialsProvider
from .exceptions import HttpDispatchError
from .interfaces.identity import CredentialsProvider
from .operations import OperationModel
from .shapes import (
    ClaimDevicesByClaimCodeRequest,
    ClaimDevicesByClaimCodeResponse,
    DescribeDeviceRequest,
    DescribeDeviceResponse,
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
    Shape,
    UnclaimDeviceRequest,
    UnclaimDeviceResponse,
    UpdateDeviceStateRequest,
    UpdateDeviceStateResponse,
)
from .signers import SigV4Signer, SigV4SigningProperties

LOG = logging.getLogger(__name__)


@runtime_checkable
class Iot1ClickDevices(Protocol):
    """Trait representing the capabilities of the AWS IoT 1-Click Devices Service API.
    AWS IoT 1-Click Devices Service clients implement this trait.
    """

    def claim_devices_by_claim_code(
        self, request: ClaimDevicesByClaimCodeRequest
    ) -> ClaimDevicesByClaimCodeResponse:
        """Adds device(s) to your account (i.e., claim one or more devices) if
        and only if you received a claim code with the device(s)."""
        ...

    def describe_device(self, request: DescribeDeviceRequest) -> DescribeDeviceResponse:
        """Given a device ID, returns a DescribeDeviceResponse object describing
        the details of the device."""
        ...

    def finalize_device_claim(
        self, request: FinalizeDeviceClaimRequest
    ) -> FinalizeDeviceClaimResponse:
        """Given a device ID, finalizes the claim request for the associated
        device."""
        ...

    def get_device_methods(
        self, request: GetDeviceMethodsRequest
    ) -> GetDeviceMethodsResponse:
        """Given a device ID, returns the invokable methods associated with the
        device."""
        ...

    def initiate_device_claim(
        self, request: InitiateDeviceClaimRequest
    ) -> InitiateDeviceClaimResponse:
        """Given a device ID, initiates a claim request for the associated
        device."""
        ...

    def invoke_device_method(
        self, request: InvokeDeviceMethodRequest
    ) -> InvokeDeviceMethodResponse:
        """Given a device ID, issues a request to invoke a named device method
        (with possible parameters)."""
        ...

    def list_device_events(
        self, request: ListDeviceEventsRequest
    ) -> ListDeviceEventsResponse:
        """Using a device ID, returns a DeviceEventsResponse object containing
        an array of events for the device."""
        ...

    def list_devices(
        self, request: ListDevicesRequest | None = None
    ) -> ListDevicesResponse:
        """Lists the 1-Click compatible devices associated with your AWS
        account."""
        ...

    def unclaim_device(self, request: UnclaimDeviceRequest) -> UnclaimDeviceResponse:
        """Disassociates a device from your AWS account using its device ID."""
        ...

    def update_device_state(
        self, request: UpdateDeviceStateRequest
    ) -> UpdateDeviceStateResponse:
        """Using a Boolean value (true or false), this operation enables or
        disables the device given a device ID."""
        ...


class Iot1ClickDevicesClient(Iot1ClickDevices):
    """A client for the AWS IoT 1-Click Devices Service API.

    Requests are signed with SigV4 using the identity returned by
    ``credentials_provider`` and sent over a :class:`requests.Session`.
    Failed calls raise the operation's error family, e.g.
    :class:`DescribeDeviceError`.
    """

    def __init__(
        self,
        config: ClientConfig | None = None,
        credentials_provider: CredentialsProvider | None = None,
        session: requests.Session | None = None,
    ):
        self.config = config or ClientConfig.from_env()
        self._owns_credentials_provider = credentials_provider is None
        self._credentials_provider = credentials_provider or DefaultCredentialsProvider(
            self.config
        )
        self._signer = SigV4Signer()
        self._owns_session = session is None
        self._session = session or requests.Session()

    def __enter__(self) -> "Iot1ClickDevicesClient":
        return self

    def __exit__(self, *exc_info) -> None:
        self.close()

    def close(self) -> None:
        if self._owns_session:
            self._session.close()
        if self._owns_credentials_provider:
            self._credentials_provider.close()

    def claim_devices_by_claim_code(
        self, request: ClaimDevicesByClaimCodeRequest
    ) -> ClaimDevicesByClaimCodeResponse:
        return self._invoke(operations.CLAIM_DEVICES_BY_CLAIM_CODE, request)

    def describe_device(self, request: DescribeDeviceRequest) -> DescribeDeviceResponse:
        return self._invoke(operations.DESCRIBE_DEVICE, request)

    def finalize_device_claim(
        self, request: FinalizeDeviceClaimRequest
    ) -> FinalizeDeviceClaimResponse:
        return self._invoke(operations.FINALIZE_DEVICE_CLAIM, request)

    def get_device_methods(
        self, request: GetDeviceMethodsRequest
    ) -> GetDeviceMethodsResponse:
        return self._invoke(operations.GET_DEVICE_METHODS, request)

    def initiate_device_claim(
        self, request: InitiateDeviceClaimRequest
    ) -> InitiateDeviceClaimResponse:
        return self._invoke(operations.INITIATE_DEVICE_CLAIM, request)

    def invoke_device_method(
        self, request: InvokeDeviceMethodRequest
    ) -> InvokeDeviceMethodResponse:
        return self._invoke(operations.INVOKE_DEVICE_METHOD, request)

    def list_device_events(
        self, request: ListDeviceEventsRequest
    ) -> ListDeviceEventsResponse:
        return self._invoke(operations.LIST_DEVICE_EVENTS, request)

    def list_devices(
        self, request: ListDevicesRequest | None = None
    ) -> ListDevicesResponse:
        return self._invoke(operations.LIST_DEVICES, request or ListDevicesRequest())

    def unclaim_device(self, request: UnclaimDeviceRequest) -> UnclaimDeviceResponse:
        return self._invoke(operations.UNCLAIM_DEVICE, request)

    def update_device_state(
        self, request: UpdateDeviceStateRequest
    ) -> UpdateDeviceStateResponse:
        return self._invoke(operations.UPDATE_DEVICE_STATE, request)

    def paginate_list_devices(
        self, request: ListDevicesRequest | None = None
    ) -> Iterator[ListDevicesResponse]:
        """Yield every page of ``ListDevices``, following ``next_token``."""
        request = request or ListDevicesRequest()
        while True:
            page = self.list_devices(request)
            yield page
            if not page.next_token:
                return
            request = dataclasses.replace(request, next_token=page.next_token)

    def paginate_list_device_events(
        self, request: ListDeviceEventsRequest
    ) -> Iterator[ListDeviceEventsResponse]:
        """Yield every page of ``ListDeviceEvents``, following ``next_token``."""
        while True:
            page = self.list_device_events(request)
            yield page
            if not page.next_token:
                return
            request = dataclasses.replace(request, next_token=page.next_token)

    def _invoke(self, operation: OperationModel, request: Shape) -> Shape:
        request.validate()
        aws_request = operation.serialize(request, self.config.endpoint)
        aws_request.fields.set_field(
            Field(name="User-Agent", values=[self.config.user_agent])
        )
        signed = self._signer.sign(
            signing_properties=SigV4SigningProperties(
                region=self.config.region, service=SIGNING_NAME
            ),
            request=aws_request,
            identity=self._credentials_provider.get_identity(),
        )
        response = self._send(operation, signed)
        if not 200 <= response.status_code < 300:
            raise operation.parse_error(
                response.status_code, response.headers, response.content
            )
        return operation.parse_response(response.content)

    def _send(self, operation: OperationModel, request: AWSRequest) -> requests.Response:
        url = request.destination.build()
        LOG.debug("Sending %s request: %s %s", operation.name, request.method, url)
        try:
            response = self._session.request(
                method=request.method,
                url=url,
                headers={field.name: field.as_string() for field in request.fields},
                data=request.body or None,
                timeout=(self.config.connect_timeout, self.config.read_timeout),
            )
        except requests.exceptions.RequestException as e:
            raise HttpDispatchError(f"{operation.name} request failed: {e}") from e
        LOG.debug("%s responded with status %s", operation.name, response.status_code)
        return response
