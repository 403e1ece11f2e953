"""
Copyright Amazon.com, Inc. or its affiliates. All Rights Reserved.
SPDX-License-Identifier: Apache-2.0

Credential providers used to resolve an :class:`AWSCredentialIdentity`.
"""

import logging
import os
import threading
from collections.abc import Callable, Iterable
from datetime import datetime
from typing import Generic, TypeVar
from xml.parsers.expat import ExpatError

import requests
import xmltodict

from ._http import URI
from ._identity import AWSCredentialIdentity
from .config import ClientConfig
from .exceptions import CredentialsError

LOG = logging.getLogger(__name__)

AWS_ACCESS_KEY_ID = "AWS_ACCESS_KEY_ID"
AWS_SECRET_ACCESS_KEY = "AWS_SECRET_ACCESS_KEY"
AWS_SESSION_TOKEN = "AWS_SESSION_TOKEN"

AWS_WEB_IDENTITY_TOKEN_FILE = "AWS_WEB_IDENTITY_TOKEN_FILE"
AWS_ROLE_ARN = "AWS_ROLE_ARN"
AWS_ROLE_SESSION_NAME = "AWS_ROLE_SESSION_NAME"

DEFAULT_SESSION_NAME = "WebIdentitySession"
STS_API_VERSION = "2011-06-15"

# Cached identities are refreshed this many seconds before they expire.
REFRESH_WINDOW = 60

T = TypeVar("T")


class Variable(Generic[T]):
    """A lazily resolved value: fixed, read from the environment, read from a
    file, or computed by a callable on every resolution."""

    def __init__(self, resolver: Callable[[], T]):
        self._resolver = resolver

    def resolve(self) -> T:
        return self._resolver()

    @classmethod
    def with_value(cls, value: T) -> "Variable[T]":
        return cls(lambda: value)

    @classmethod
    def dynamic(cls, resolver: Callable[[], T]) -> "Variable[T]":
        return cls(resolver)

    @classmethod
    def from_env_var(cls, name: str, default: str | None = None) -> "Variable[str]":
        def _resolve() -> str:
            value = os.environ.get(name)
            if value:
                return value
            if default is not None:
                return default
            raise CredentialsError(f"Environment variable {name} is not set")

        return cls(_resolve)

    @classmethod
    def from_text_file(cls, path: str | os.PathLike) -> "Variable[str]":
        """Read the file on every resolution, dropping trailing line breaks."""

        def _resolve() -> str:
            try:
                with open(path, encoding="utf-8") as f:
                    return f.read().rstrip("\r\n")
            except OSError as e:
                raise CredentialsError(f"Unable to read {path}: {e}") from e

        return cls(_resolve)

    @classmethod
    def wrap(cls, value: "T | Variable[T]") -> "Variable[T]":
        if isinstance(value, Variable):
            return value
        return cls.with_value(value)


class CachingCredentialsProvider:
    """Caches the loaded identity until it is about to expire."""

    def __init__(self):
        self._identity: AWSCredentialIdentity | None = None
        self._lock = threading.Lock()

    def get_identity(self) -> AWSCredentialIdentity:
        with self._lock:
            if self._identity is None or self._identity.expires_within(REFRESH_WINDOW):
                self._identity = self._load()
            return self._identity

    def _load(self) -> AWSCredentialIdentity:
        raise NotImplementedError()


class StaticCredentialsProvider:
    def __init__(self, identity: AWSCredentialIdentity):
        self._identity = identity

    def get_identity(self) -> AWSCredentialIdentity:
        if self._identity.is_expired:
            raise CredentialsError(
                f"Static credentials expired at {self._identity.expiration}"
            )
        return self._identity


class EnvironmentCredentialsProvider(CachingCredentialsProvider):
    """Reads ``AWS_ACCESS_KEY_ID``, ``AWS_SECRET_ACCESS_KEY`` and the optional
    ``AWS_SESSION_TOKEN``."""

    def _load(self) -> AWSCredentialIdentity:
        access_key = os.environ.get(AWS_ACCESS_KEY_ID)
        secret_key = os.environ.get(AWS_SECRET_ACCESS_KEY)
        if not access_key or not secret_key:
            raise CredentialsError(
                f"{AWS_ACCESS_KEY_ID} and {AWS_SECRET_ACCESS_KEY} must both be set"
            )
        LOG.debug("Loaded credentials from the environment")
        return AWSCredentialIdentity(
            access_key_id=access_key,
            secret_access_key=secret_key,
            session_token=os.environ.get(AWS_SESSION_TOKEN) or None,
        )


class WebIdentityProvider(CachingCredentialsProvider):
    """Exchanges an OpenID Connect token for temporary credentials through
    STS ``AssumeRoleWithWebIdentity``.

    See https://docs.aws.amazon.com/STS/latest/APIReference/API_AssumeRoleWithWebIdentity.html
    """

    def __init__(
        self,
        web_identity_token: "str | Variable[str]",
        role_arn: "str | Variable[str]",
        role_session_name: "str | Variable[str] | None" = None,
        *,
        config: ClientConfig | None = None,
        sts_endpoint_url: str | None = None,
        session: requests.Session | None = None,
    ):
        super().__init__()
        self.web_identity_token = Variable.wrap(web_identity_token)
        self.role_arn = Variable.wrap(role_arn)
        if role_session_name is None:
            role_session_name = DEFAULT_SESSION_NAME
        self.role_session_name = Variable.wrap(role_session_name)
        self._config = config or ClientConfig.from_env()
        self._sts_endpoint = (
            URI.from_url(sts_endpoint_url)
            if sts_endpoint_url
            else self._config.sts_endpoint
        )
        self._owns_session = session is None
        self._session = session or requests.Session()

    def close(self) -> None:
        if self._owns_session:
            self._session.close()

    @classmethod
    def from_k8s_env(cls, **kwargs) -> "WebIdentityProvider":
        """Configure the provider from the variables EKS injects for IAM roles
        for service accounts:

        - ``AWS_WEB_IDENTITY_TOKEN_FILE`` path to the web identity token file.
        - ``AWS_ROLE_ARN`` ARN of the role to assume.
        - ``AWS_ROLE_SESSION_NAME`` (optional) name of the assume-role session.
        """
        return cls._from_k8s_env(
            Variable.from_env_var(AWS_WEB_IDENTITY_TOKEN_FILE),
            Variable.from_env_var(AWS_ROLE_ARN),
            Variable.from_env_var(AWS_ROLE_SESSION_NAME, default=DEFAULT_SESSION_NAME),
            **kwargs,
        )

    @classmethod
    def _from_k8s_env(
        cls,
        token_file: Variable[str],
        role: Variable[str],
        session_name: Variable[str] | None = None,
        **kwargs,
    ) -> "WebIdentityProvider":
        token = Variable.dynamic(
            lambda: Variable.from_text_file(token_file.resolve()).resolve()
        )
        return cls(token, role, session_name, **kwargs)

    def load_token(self) -> str:
        return self.web_identity_token.resolve()

    def _load(self) -> AWSCredentialIdentity:
        token = self.load_token()
        role_arn = self.role_arn.resolve()
        session_name = self.role_session_name.resolve()
        LOG.debug("Assuming role %s with web identity as %s", role_arn, session_name)
        try:
            response = self._session.post(
                self._sts_endpoint.build(),
                data={
                    "Action": "AssumeRoleWithWebIdentity",
                    "Version": STS_API_VERSION,
                    "RoleArn": role_arn,
                    "RoleSessionName": session_name,
                    "WebIdentityToken": token,
                },
                timeout=(self._config.connect_timeout, self._config.read_timeout),
            )
        except requests.exceptions.RequestException as e:
            raise CredentialsError(f"Unable to reach STS: {e}") from e
        return _parse_assume_role_response(response.status_code, response.content)


class ChainCredentialsProvider:
    """Returns the identity of the first provider that resolves one."""

    def __init__(self, providers: Iterable):
        self._providers = list(providers)

    def get_identity(self) -> AWSCredentialIdentity:
        failures = []
        for provider in self._providers:
            try:
                return provider.get_identity()
            except CredentialsError as e:
                failures.append(f"{type(provider).__name__}: {e}")
        raise CredentialsError(
            "No credentials could be resolved: " + "; ".join(failures)
        )

    def close(self) -> None:
        for provider in self._providers:
            close = getattr(provider, "close", None)
            if close is not None:
                close()


class DefaultCredentialsProvider(ChainCredentialsProvider):
    """Environment variables, then web identity from the EKS environment."""

    def __init__(self, config: ClientConfig | None = None):
        super().__init__(
            [
                EnvironmentCredentialsProvider(),
                WebIdentityProvider.from_k8s_env(config=config),
            ]
        )


def _parse_assume_role_response(status_code: int, body: bytes) -> AWSCredentialIdentity:
    try:
        document = xmltodict.parse(body)
    except ExpatError as e:
        raise CredentialsError(f"Malformed STS response ({status_code}): {e}") from e

    if status_code >= 300 or "ErrorResponse" in document:
        error = (document.get("ErrorResponse") or {}).get("Error") or {}
        raise CredentialsError(
            f"AssumeRoleWithWebIdentity failed ({status_code}): "
            f"{error.get('Code', 'Unknown')}: {error.get('Message', '')}"
        )

    result = (document.get("AssumeRoleWithWebIdentityResponse") or {}).get(
        "AssumeRoleWithWebIdentityResult"
    ) or {}
    credentials = result.get("Credentials")
    if not credentials:
        raise CredentialsError(
            f"No credentials found in AssumeRoleWithWebIdentityResponse: {result}"
        )
    expiration = credentials.get("Expiration")
    try:
        return AWSCredentialIdentity(
            access_key_id=credentials["AccessKeyId"],
            secret_access_key=credentials["SecretAccessKey"],
            session_token=credentials.get("SessionToken"),
            expiration=datetime.fromisoformat(expiration) if expiration else None,
        )
    except (KeyError, ValueError) as e:
        raise CredentialsError(f"Incomplete STS credentials: {e}") from e
