"""
Copyright Amazon.com, Inc. or its affiliates. All Rights Reserved.
SPDX-License-Identifier: Apache-2.0
"""

from datetime import datetime
from typing import TYPE_CHECKING, Protocol

if TYPE_CHECKING:
    from .._identity import AWSCredentialIdentity


class Identity(Protocol):
    """An entity available to the client representing who the user is."""

    # The expiration time of the identity. If time zone is provided,
    # it is updated to UTC. The value must always be in UTC.
    expiration: datetime | None

    @property
    def is_expired(self) -> bool:
        """Whether the identity is expired."""
        ...


class CredentialsProvider(Protocol):
    """Resolves the AWS credentials used to sign requests."""

    def get_identity(self) -> "AWSCredentialIdentity": ...
