# Copyright 2025 Accelerated Cloud Storage Corporation. All Rights Reserved.
"""Request builders for the objstore object-storage API."""
from .client import (
    ConfigurationError,
    HeadObjectRequest,
    InvalidInputError,
    ObjstoreError,
    Request,
    RequestPayer,
    Session,
)

__all__ = [
    "ConfigurationError",
    "HeadObjectRequest",
    "InvalidInputError",
    "ObjstoreError",
    "Request",
    "RequestPayer",
    "Session",
]
