# Copyright 2025 Accelerated Cloud Storage Corporation. All Rights Reserved.
from .exceptions import ConfigurationError, InvalidInputError, ObjstoreError
from .head_object import HeadObjectRequest
from .input import Input
from .session import Session
from .types import Request, RequestPayer

__all__ = [
    "ConfigurationError",
    "HeadObjectRequest",
    "Input",
    "InvalidInputError",
    "ObjstoreError",
    "Request",
    "RequestPayer",
    "Session",
]
