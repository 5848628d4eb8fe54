# Copyright 2025 Accelerated Cloud Storage Corporation. All Rights Reserved.
from dataclasses import dataclass, field
from enum import Enum
from io import BytesIO
from types import MappingProxyType
from typing import Mapping, Union
from urllib.parse import quote, urlencode

class RequestPayer(str, Enum):
    """Party billed for a request."""
    REQUESTER = "requester"

    @classmethod
    def exists(cls, value: Union["RequestPayer", str]) -> bool:
        """Return True if ``value`` is a member or a member's string value."""
        if isinstance(value, cls):
            return True
        if not isinstance(value, str):
            return False
        return value in cls._value2member_map_

@dataclass(frozen=True)
class Request:
    """Wire-level description of an outbound HTTP request."""
    method: str
    uri: str
    query: Mapping[str, str] = field(default_factory=dict)
    headers: Mapping[str, str] = field(default_factory=dict)
    body: BytesIO = field(default_factory=BytesIO, compare=False, repr=False)

    def __post_init__(self):
        object.__setattr__(self, "query", MappingProxyType(dict(self.query)))
        object.__setattr__(self, "headers", MappingProxyType(dict(self.headers)))

    def __hash__(self):
        return hash((
            self.method,
            self.uri,
            tuple(sorted(self.query.items())),
            tuple(sorted(self.headers.items())),
        ))

    @property
    def url(self) -> str:
        """The uri with the query string appended."""
        if not self.query:
            return self.uri
        return f"{self.uri}?{urlencode(self.query, quote_via=quote, safe='')}"
