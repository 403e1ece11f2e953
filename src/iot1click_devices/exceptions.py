"""
Copyright Amazon.com, Inc. or its affiliates. All Rights Reserved.
SPDX-License-Identifier: Apache-2.0
"""

from functools import cache


class BaseAWSSDKException(Exception):
    """Top-level exception to capture SDK-related errors."""

    ...


class MissingExpectedParameterException(BaseAWSSDKException, ValueError):
    """Some APIs require specific signing properties to be present."""

    ...


class Iot1ClickDevicesError(BaseAWSSDKException):
    """Base class for every error raised by the IoT 1-Click Devices client."""

    ...


class ValidationError(Iot1ClickDevicesError, ValueError):
    """A request failed client-side validation and was not sent."""

    ...


class CredentialsError(Iot1ClickDevicesError):
    """No usable credentials could be resolved."""

    ...


class HttpDispatchError(Iot1ClickDevicesError):
    """The request could not be delivered to the service."""

    ...


class ParseError(Iot1ClickDevicesError):
    """A successful response carried a body that could not be decoded."""

    ...


class ServiceError(Iot1ClickDevicesError):
    """An error response returned by the service."""

    error_code: str = ""
    default_status_code: int | None = None

    def __init__(
        self,
        message: str = "",
        *,
        code: str | None = None,
        status_code: int | None = None,
        body: bytes = b"",
    ):
        super().__init__(message)
        self.message = message
        self.code = code or self.error_code
        self.status_code = (
            status_code if status_code is not None else self.default_status_code
        )
        self.body = body

    def __str__(self) -> str:
        return f"{self.code} ({self.status_code}): {self.message}"


class ForbiddenException(ServiceError):
    error_code = "ForbiddenException"
    default_status_code = 403


class InternalFailureException(ServiceError):
    error_code = "InternalFailureException"
    default_status_code = 500


class InvalidRequestException(ServiceError):
    error_code = "InvalidRequestException"
    default_status_code = 400


class PreconditionFailedException(ServiceError):
    error_code = "PreconditionFailedException"
    default_status_code = 412


class RangeNotSatisfiableException(ServiceError):
    error_code = "RangeNotSatisfiableException"
    default_status_code = 416


class ResourceConflictException(ServiceError):
    error_code = "ResourceConflictException"
    default_status_code = 409


class ResourceNotFoundException(ServiceError):
    error_code = "ResourceNotFoundException"
    default_status_code = 404


class UnknownServiceError(ServiceError):
    """An error response whose type is not modeled for the operation."""

    error_code = "Unknown"


SERVICE_ERRORS: dict[str, type[ServiceError]] = {
    cls.error_code: cls
    for cls in (
        ForbiddenException,
        InternalFailureException,
        InvalidRequestException,
        PreconditionFailedException,
        RangeNotSatisfiableException,
        ResourceConflictException,
        ResourceNotFoundException,
    )
}


class OperationError(Iot1ClickDevicesError):
    """Base class of the per-operation error families."""

    operation: str = ""
    errors: tuple[type[ServiceError], ...] = ()


class ClaimDevicesByClaimCodeError(OperationError):
    """Errors returned by ClaimDevicesByClaimCode"""

    operation = "ClaimDevicesByClaimCode"
    errors = (ForbiddenException, InternalFailureException, InvalidRequestException)


class DescribeDeviceError(OperationError):
    """Errors returned by DescribeDevice"""

    operation = "DescribeDevice"
    errors = (
        InternalFailureException,
        InvalidRequestException,
        ResourceNotFoundException,
    )


class FinalizeDeviceClaimError(OperationError):
    """Errors returned by FinalizeDeviceClaim"""

    operation = "FinalizeDeviceClaim"
    errors = (
        InternalFailureException,
        InvalidRequestException,
        PreconditionFailedException,
        ResourceConflictException,
        ResourceNotFoundException,
    )


class GetDeviceMethodsError(OperationError):
    """Errors returned by GetDeviceMethods"""

    operation = "GetDeviceMethods"
    errors = (
        InternalFailureException,
        InvalidRequestException,
        ResourceNotFoundException,
    )


class InitiateDeviceClaimError(OperationError):
    """Errors returned by InitiateDeviceClaim"""

    operation = "InitiateDeviceClaim"
    errors = (
        InternalFailureException,
        InvalidRequestException,
        ResourceConflictException,
        ResourceNotFoundException,
    )


class InvokeDeviceMethodError(OperationError):
    """Errors returned by InvokeDeviceMethod"""

    operation = "InvokeDeviceMethod"
    errors = (
        InternalFailureException,
        InvalidRequestException,
        PreconditionFailedException,
        RangeNotSatisfiableException,
        ResourceConflictException,
        ResourceNotFoundException,
    )


class ListDeviceEventsError(OperationError):
    """Errors returned by ListDeviceEvents"""

    operation = "ListDeviceEvents"
    errors = (
        InternalFailureException,
        InvalidRequestException,
        RangeNotSatisfiableException,
        ResourceNotFoundException,
    )


class ListDevicesError(OperationError):
    """Errors returned by ListDevices"""

    operation = "ListDevices"
    errors = (
        InternalFailureException,
        InvalidRequestException,
        RangeNotSatisfiableException,
    )


class UnclaimDeviceError(OperationError):
    """Errors returned by UnclaimDevice"""

    operation = "UnclaimDevice"
    errors = (
        InternalFailureException,
        InvalidRequestException,
        ResourceNotFoundException,
    )


class UpdateDeviceStateError(OperationError):
    """Errors returned by UpdateDeviceState"""

    operation = "UpdateDeviceState"
    errors = (
        InternalFailureException,
        InvalidRequestException,
        ResourceNotFoundException,
    )


@cache
def operation_error(
    family: type[OperationError], error: type[ServiceError]
) -> type[ServiceError]:
    """Return the exception class raised when ``family``'s operation fails
    with ``error``.

    The result subclasses both, so callers can catch either the operation's
    family (``DescribeDeviceError``) or the service error
    (``ResourceNotFoundException``).
    """
    if error is not UnknownServiceError and error not in family.errors:
        raise ValueError(f"{error.__name__} is not modeled for {family.operation}")
    return type(
        error.__name__,
        (error, family),
        {"__module__": error.__module__, "__qualname__": error.__qualname__},
    )
