# Copyright 2025 Accelerated Cloud Storage Corporation. All Rights Reserved.
"""
Logging utilities for the objstore SDK.

This module provides the SDK logger, an opt-in logging configuration helper
and request tracing for building operation requests.
"""

import logging
import os

LOG_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - [%(funcName)s] - %(message)s'

logger = logging.getLogger('objstore_sdk')

def tracing_enabled():
    """
    Check whether request tracing was requested.

    Tracing is controlled by the OBJSTORE_TRACE_REQUESTS environment variable
    and is read on every call so it can be toggled at runtime.

    Returns:
        bool: True if tracing is enabled
    """
    return os.environ.get('OBJSTORE_TRACE_REQUESTS', '').lower() in ('true', '1', 'yes')

def configure_logging(level=logging.INFO):
    """
    Configure root logging with the SDK log format.

    Args:
        level (int, optional): Log level for the SDK logger. Defaults to logging.INFO.
    """
    logging.basicConfig(level=level, format=LOG_FORMAT)
    logger.setLevel(level)

def trace_request(operation, uri, **details):
    """
    Trace a built request for debugging purposes.

    Args:
        operation (str): The operation the request was built for
        uri (str): The request uri
        **details: Additional details to log
    """
    if tracing_enabled():
        detail_str = ', '.join(f"{k}={v}" for k, v in details.items())
        logger.debug(f"TRACE: {operation} {uri} {detail_str}")
