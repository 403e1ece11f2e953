"""
Copyright Amazon.com, Inc. or its affiliates. All Rights Reserved.
SPDX-License-Identifier: Apache-2.0
"""

import sys
from dataclasses import dataclass, field
from datetime import datetime, timedelta

from .interfaces.identity import Identity

if sys.version_info < (3, 12):
    from datetime import timezone

    UTC = timezone.utc
else:
    from datetime import UTC


@dataclass(kw_only=True)
class AWSCredentialIdentity(Identity):
    access_key_id: str
    secret_access_key: str = field(repr=False)
    session_token: str | None = field(default=None, repr=False)
    expiration: datetime | None = None

    def __post_init__(self) -> None:
        if self.expiration is not None:
            if self.expiration.tzinfo is None:
                self.expiration = self.expiration.replace(tzinfo=UTC)
            else:
                self.expiration = self.expiration.astimezone(UTC)

    @property
    def is_expired(self) -> bool:
        """Whether the identity is expired."""
        return self.expires_within(0)

    def expires_within(self, seconds: float) -> bool:
        """Whether the identity expires in the next ``seconds`` seconds."""
        if self.expiration is None:
            return False
        return self.expiration < datetime.now(UTC) + timedelta(seconds=seconds)
