"""
Copyright Amazon.com, Inc. or its affiliates. All Rights Reserved.
SPDX-License-Identifier: Apache-2.0
"""

from collections.abc import Iterable, Iterator
from dataclasses import dataclass, field
from urllib.parse import urlsplit


@dataclass
class Field:
    """A single HTTP header with one or more values."""

    name: str
    values: list[str] = field(default_factory=list)

    def as_string(self, delimiter: str = ", ") -> str:
        return delimiter.join(self.values)


class Fields:
    """Case-insensitive collection of :class:`Field` keyed by name."""

    def __init__(self, initial: Iterable[Field] | None = None):
        self._entries: dict[str, Field] = {}
        for item in initial or ():
            self.set_field(item)

    def set_field(self, field: Field) -> None:
        self._entries[field.name.lower()] = field

    def __getitem__(self, name: str) -> Field:
        return self._entries[name.lower()]

    def __contains__(self, name: object) -> bool:
        return isinstance(name, str) and name.lower() in self._entries

    def __iter__(self) -> Iterator[Field]:
        return iter(self._entries.values())

    def __repr__(self) -> str:
        return f"Fields({list(self._entries.values())!r})"


@dataclass(kw_only=True)
class URI:
    scheme: str = "https"
    host: str
    port: int | None = None
    path: str | None = None
    query: str | None = None
    fragment: str | None = None

    @property
    def netloc(self) -> str:
        if self.port is None:
            return self.host
        return f"{self.host}:{self.port}"

    def build(self) -> str:
        url = f"{self.scheme}://{self.netloc}{self.path or ''}"
        if self.query:
            url = f"{url}?{self.query}"
        if self.fragment:
            url = f"{url}#{self.fragment}"
        return url

    @classmethod
    def from_url(cls, url: str) -> "URI":
        parts = urlsplit(url)
        if not parts.scheme or not parts.hostname:
            raise ValueError(f"Not an absolute URL: {url!r}")
        return cls(
            scheme=parts.scheme,
            host=parts.hostname,
            port=parts.port,
            path=parts.path or None,
            query=parts.query or None,
            fragment=parts.fragment or None,
        )


@dataclass(kw_only=True)
class AWSRequest:
    destination: URI
    method: str
    fields: Fields = field(default_factory=Fields)
    body: bytes = b""
