"""
Copyright Amazon.com, Inc. or its affiliates. All Rights Reserved.
SPDX-License-Identifier: Apache-2.0
"""

import pytest

from iot1click_devices import ClientConfig, ValidationError


class TestClientConfig:
    def test_default_endpoint(self):
        endpoint = ClientConfig(region="eu-west-1").endpoint
        assert endpoint.build() == "https://devices.iot1click.eu-west-1.amazonaws.com"

    def test_china_endpoint(self):
        endpoint = ClientConfig(region="cn-north-1").endpoint
        assert endpoint.host == "devices.iot1click.cn-north-1.amazonaws.com.cn"

    def test_sts_endpoint(self):
        assert ClientConfig(region="us-west-2").sts_endpoint.host == (
            "sts.us-west-2.amazonaws.com"
        )

    def test_endpoint_override(self):
        endpoint = ClientConfig(endpoint_url="http://localhost:4566").endpoint
        assert endpoint.scheme == "http"
        assert endpoint.port == 4566

    def test_from_env(self):
        config = ClientConfig.from_env(
            {"AWS_DEFAULT_REGION": "ap-northeast-1", "AWS_ENDPOINT_URL": "http://local:1"}
        )
        assert config.region == "ap-northeast-1"
        assert config.endpoint_url == "http://local:1"

    def test_from_env_precedence(self):
        config = ClientConfig.from_env(
            {
                "AWS_REGION": "us-west-2",
                "AWS_DEFAULT_REGION": "us-east-2",
                "AWS_ENDPOINT_URL": "http://generic:1",
                "AWS_ENDPOINT_URL_IOT_1CLICK_DEVICES_SERVICE": "http://service:2",
            },
            read_timeout=5.0,
        )
        assert config.region == "us-west-2"
        assert config.endpoint_url == "http://service:2"
        assert config.read_timeout == 5.0

    def test_from_empty_env(self):
        config = ClientConfig.from_env({})
        assert config.region == "us-east-1"
        assert config.endpoint_url is None

    @pytest.mark.parametrize("region", ["", "US-EAST-1", "us east"])
    def test_invalid_region(self, region):
        with pytest.raises(ValidationError):
            ClientConfig(region=region)

    def test_invalid_endpoint(self):
        with pytest.raises(ValidationError):
            ClientConfig(endpoint_url="localhost")
