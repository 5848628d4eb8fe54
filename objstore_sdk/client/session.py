# Copyright 2025 Accelerated Cloud Storage Corporation. All Rights Reserved.
"""
Session Module.

This module holds the settings shared by requests built in one session.
Values not passed explicitly are read from the environment.

Environment variables:
    OBJSTORE_REGION: Default region. Defaults to us-east-1.
    OBJSTORE_PROFILE: Credential profile name. Defaults to default.
"""
import os
from typing import Optional

from .exceptions import ConfigurationError
from .input import Input
from .utils import logger

DEFAULT_REGION = "us-east-1"
DEFAULT_PROFILE = "default"

class Session:
    """
    Session settings for the objstore SDK.

    Attributes:
        region (str): Region used when an input does not name one.
        profile (str): Name of the credential profile.
    """

    def __init__(self, region: Optional[str] = None, profile: Optional[str] = None):
        """
        Initialize the session.

        Args:
            region (str, optional): Region. Falls back to OBJSTORE_REGION, then us-east-1.
            profile (str, optional): Profile. Falls back to OBJSTORE_PROFILE, then default.

        Raises:
            ConfigurationError: If the resolved region is empty.
        """
        if region is None:
            region = os.environ.get("OBJSTORE_REGION", DEFAULT_REGION)
        if profile is None:
            profile = os.environ.get("OBJSTORE_PROFILE", DEFAULT_PROFILE)
        if not region or not region.strip():
            raise ConfigurationError("Region must not be empty")
        self.region = region.strip()
        self.profile = profile
        logger.debug(f"Session created for region {self.region} with profile {self.profile}")

    def resolve_region(self, input: Input) -> str:
        """
        Pick the region a request is sent to.

        Args:
            input (Input): The operation input.

        Returns:
            str: The input's region if set, otherwise the session region.
        """
        return input.get_region() or self.region
