"""
Copyright Amazon.com, Inc. or its affiliates. All Rights Reserved.
SPDX-License-Identifier: Apache-2.0
"""

import os
import re
from collections.abc import Mapping
from dataclasses import dataclass, field

from ._http import URI
from ._version import __version__
from .exceptions import ValidationError

DEFAULT_REGION = "us-east-1"
SIGNING_NAME = "iot1click"
ENDPOINT_PREFIX = "devices.iot1click"

ENV_REGION = ("AWS_REGION", "AWS_DEFAULT_REGION")
ENV_ENDPOINT_URL = ("AWS_ENDPOINT_URL_IOT_1CLICK_DEVICES_SERVICE", "AWS_ENDPOINT_URL")

_REGION_RE = re.compile(r"^[a-z0-9-]+$")


def _default_user_agent() -> str:
    return f"iot1click-devices-python/{__version__}"


def _first_env(names: tuple[str, ...], environ: Mapping[str, str]) -> str | None:
    for name in names:
        value = environ.get(name)
        if value:
            return value
    return None


@dataclass(kw_only=True)
class ClientConfig:
    """Settings used by :class:`Iot1ClickDevicesClient` to reach the service."""

    region: str = DEFAULT_REGION
    endpoint_url: str | None = None
    connect_timeout: float = 10.0
    read_timeout: float = 60.0
    user_agent: str = field(default_factory=_default_user_agent)

    def __post_init__(self) -> None:
        if not _REGION_RE.match(self.region):
            raise ValidationError(f"Invalid region name: {self.region!r}")
        if self.endpoint_url is not None:
            try:
                URI.from_url(self.endpoint_url)
            except ValueError as e:
                raise ValidationError(str(e)) from e

    @classmethod
    def from_env(
        cls, environ: Mapping[str, str] | None = None, **overrides
    ) -> "ClientConfig":
        """Build a config from the standard AWS environment variables.

        Explicit keyword arguments take precedence over the environment.
        """
        environ = os.environ if environ is None else environ
        values = {}
        if region := _first_env(ENV_REGION, environ):
            values["region"] = region
        if endpoint_url := _first_env(ENV_ENDPOINT_URL, environ):
            values["endpoint_url"] = endpoint_url
        values.update(overrides)
        return cls(**values)

    @property
    def endpoint(self) -> URI:
        if self.endpoint_url:
            return URI.from_url(self.endpoint_url)
        suffix = "amazonaws.com.cn" if self.region.startswith("cn-") else "amazonaws.com"
        return URI(scheme="https", host=f"{ENDPOINT_PREFIX}.{self.region}.{suffix}")

    @property
    def sts_endpoint(self) -> URI:
        suffix = "amazonaws.com.cn" if self.region.startswith("cn-") else "amazonaws.com"
        return URI(scheme="https", host=f"sts.{self.region}.{suffix}")
