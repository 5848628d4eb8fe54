# Copyright 2025 Accelerated Cloud Storage Corporation. All Rights Reserved.
class ObjstoreError(Exception):
    """Base exception for objstore SDK errors."""
    def __init__(self, message: str, code: str = "ERR_UNKNOWN"):
        self.code = code
        self.message = message
        super().__init__(f"{code}: {message}")

class InvalidInputError(ObjstoreError):
    """Operation input is missing a required field or holds an invalid value."""
    def __init__(self, message: str):
        super().__init__(message, code="ERR_INVALID_INPUT")

class ConfigurationError(ObjstoreError):
    """Configuration or session error."""
    def __init__(self, message: str):
        super().__init__(message, code="ERR_CONFIG")
