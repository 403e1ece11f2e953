"""
Copyright Amazon.com, Inc. or its affiliates. All Rights Reserved.
SPDX-License-Identifier: Apache-2.0
"""

import pytest
from pytest_httpserver import HTTPServer

from iot1click_devices import (
    AWSCredentialIdentity,
    ClientConfig,
    Iot1ClickDevicesClient,
    StaticCredentialsProvider,
)


@pytest.fixture(scope="module")
def aws_identity() -> AWSCredentialIdentity:
    return AWSCredentialIdentity(
        access_key_id="AKID123456",
        secret_access_key="EXAMPLE1234SECRET",
        session_token="X123456SESSION",
    )


@pytest.fixture
def client(httpserver: HTTPServer, aws_identity: AWSCredentialIdentity):
    config = ClientConfig(region="us-west-2", endpoint_url=httpserver.url_for("/"))
    with Iot1ClickDevicesClient(
        config=config,
        credentials_provider=StaticCredentialsProvider(aws_identity),
    ) as client:
        yield client
