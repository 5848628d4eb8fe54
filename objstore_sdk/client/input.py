# Copyright 2025 Accelerated Cloud Storage Corporation. All Rights Reserved.
"""
Base class for operation inputs.

Every operation input is built from a mapping of named parameters. The
``@region`` key is shared by all operations and selects the region the
request is sent to; it never appears on the wire.
"""
from abc import ABC, abstractmethod
from typing import Any, Mapping, Optional

from .types import Request

class Input(ABC):
    """
    Common behaviour of operation inputs.

    Attributes:
        region (str, optional): Region override for this request.
    """

    def __init__(self, input: Optional[Mapping[str, Any]] = None):
        input = input or {}
        self._region = input.get('@region')

    @classmethod
    def create(cls, input=None):
        """
        Return ``input`` if it already is an instance, otherwise build one.

        Args:
            input (Union[Input, Mapping[str, Any]], optional): Instance or parameter mapping.

        Returns:
            Input: An instance of the calling class.
        """
        return input if isinstance(input, cls) else cls(input)

    def get_region(self) -> Optional[str]:
        return self._region

    def set_region(self, value: Optional[str]):
        self._region = value
        return self

    @abstractmethod
    def request(self) -> Request:
        """Build the HTTP request for this input."""
