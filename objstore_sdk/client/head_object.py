# Copyright 2025 Accelerated Cloud Storage Corporation. All Rights Reserved.
"""
HeadObject Module.

This module maps the parameters of the HeadObject operation onto the HTTP
request that retrieves an object's metadata without its body.

Classes:
    HeadObjectRequest: Input and request builder for HeadObject.
"""
from datetime import datetime
from io import BytesIO
from typing import Any, Mapping, Optional, Union
from urllib.parse import quote

from .exceptions import InvalidInputError
from .input import Input
from .timestamps import format_rfc822, parse_timestamp
from .types import Request, RequestPayer
from .utils import logger, trace_request

# (input key, attribute)
_FIELDS = (
    ('Bucket', '_bucket'),
    ('IfMatch', '_if_match'),
    ('IfModifiedSince', '_if_modified_since'),
    ('IfNoneMatch', '_if_none_match'),
    ('IfUnmodifiedSince', '_if_unmodified_since'),
    ('Key', '_key'),
    ('Range', '_range'),
    ('VersionId', '_version_id'),
    ('SSECustomerAlgorithm', '_sse_customer_algorithm'),
    ('SSECustomerKey', '_sse_customer_key'),
    ('SSECustomerKeyMD5', '_sse_customer_key_md5'),
    ('RequestPayer', '_request_payer'),
    ('PartNumber', '_part_number'),
    ('ExpectedBucketOwner', '_expected_bucket_owner'),
)

_TIMESTAMP_FIELDS = ('IfModifiedSince', 'IfUnmodifiedSince')

# (attribute, header, input key), emitted in this order
_HEADERS = (
    ('_if_match', 'If-Match', 'IfMatch'),
    ('_if_modified_since', 'If-Modified-Since', 'IfModifiedSince'),
    ('_if_none_match', 'If-None-Match', 'IfNoneMatch'),
    ('_if_unmodified_since', 'If-Unmodified-Since', 'IfUnmodifiedSince'),
    ('_range', 'Range', 'Range'),
    ('_sse_customer_algorithm', 'x-amz-server-side-encryption-customer-algorithm', 'SSECustomerAlgorithm'),
    ('_sse_customer_key', 'x-amz-server-side-encryption-customer-key', 'SSECustomerKey'),
    ('_sse_customer_key_md5', 'x-amz-server-side-encryption-customer-key-MD5', 'SSECustomerKeyMD5'),
    ('_request_payer', 'x-amz-request-payer', 'RequestPayer'),
    ('_expected_bucket_owner', 'x-amz-expected-bucket-owner', 'ExpectedBucketOwner'),
)

# (attribute, query parameter)
_QUERY = (
    ('_version_id', 'versionId'),
    ('_part_number', 'partNumber'),
)

class HeadObjectRequest(Input):
    """
    Input for the HeadObject operation.

    All fields are optional at construction. ``Bucket`` and ``Key`` must be set
    before :meth:`request` is called.

    Example:
        >>> req = HeadObjectRequest({'Bucket': 'b', 'Key': 'a/b/c.txt'})
        >>> req.request().uri
        '/b/a/b/c.txt'
    """

    def __init__(self, input: Optional[Mapping[str, Any]] = None):
        """
        Initialize the input from a parameter mapping.

        Args:
            input (Mapping[str, Any], optional): Named parameters. Unknown keys are ignored.

        Raises:
            InvalidInputError: If a timestamp parameter cannot be parsed.
        """
        input = input or {}
        for name, attr in _FIELDS:
            value = input.get(name)
            if value is not None and name in _TIMESTAMP_FIELDS:
                value = parse_timestamp(value)
            setattr(self, attr, value)
        super().__init__(input)

    def request(self) -> Request:
        """
        Build the HTTP request for this input.

        Returns:
            Request: A HEAD request with an empty body.

        Raises:
            InvalidInputError: If Bucket or Key is missing, or RequestPayer is not valid.
        """
        cls_name = type(self).__name__

        headers = {'content-type': 'application/xml'}
        for attr, header, name in _HEADERS:
            value = getattr(self, attr)
            if value is None:
                continue
            if isinstance(value, datetime):
                value = format_rfc822(value)
            elif name == 'RequestPayer':
                if not RequestPayer.exists(value):
                    logger.warning(f"Rejected RequestPayer value {value!r} for {cls_name}")
                    raise InvalidInputError(
                        f'Invalid parameter "RequestPayer" for "{cls_name}". '
                        f'The value "{value}" is not a valid "RequestPayer".'
                    )
                value = RequestPayer(value).value
            headers[header] = value

        query = {}
        for attr, param in _QUERY:
            value = getattr(self, attr)
            if value is not None:
                query[param] = str(value)

        for name, value in (('Bucket', self._bucket), ('Key', self._key)):
            if value is None:
                logger.warning(f"Missing {name} for {cls_name}")
                raise InvalidInputError(
                    f'Missing parameter "{name}" for "{cls_name}". The value cannot be None.'
                )
        uri = '/' + quote(self._bucket, safe='') + '/' + quote(self._key, safe='/')

        trace_request('HeadObject', uri, method='HEAD', query=query, headers=sorted(headers))
        return Request('HEAD', uri, query, headers, BytesIO(b''))

    def get_bucket(self) -> Optional[str]:
        return self._bucket

    def get_expected_bucket_owner(self) -> Optional[str]:
        return self._expected_bucket_owner

    def get_if_match(self) -> Optional[str]:
        return self._if_match

    def get_if_modified_since(self) -> Optional[datetime]:
        return self._if_modified_since

    def get_if_none_match(self) -> Optional[str]:
        return self._if_none_match

    def get_if_unmodified_since(self) -> Optional[datetime]:
        return self._if_unmodified_since

    def get_key(self) -> Optional[str]:
        return self._key

    def get_part_number(self) -> Optional[int]:
        return self._part_number

    def get_range(self) -> Optional[str]:
        return self._range

    def get_request_payer(self) -> Optional[Union[RequestPayer, str]]:
        return self._request_payer

    def get_sse_customer_algorithm(self) -> Optional[str]:
        return self._sse_customer_algorithm

    def get_sse_customer_key(self) -> Optional[str]:
        return self._sse_customer_key

    def get_sse_customer_key_md5(self) -> Optional[str]:
        return self._sse_customer_key_md5

    def get_version_id(self) -> Optional[str]:
        return self._version_id

    def set_bucket(self, value: Optional[str]) -> 'HeadObjectRequest':
        self._bucket = value
        return self

    def set_expected_bucket_owner(self, value: Optional[str]) -> 'HeadObjectRequest':
        self._expected_bucket_owner = value
        return self

    def set_if_match(self, value: Optional[str]) -> 'HeadObjectRequest':
        self._if_match = value
        return self

    def set_if_modified_since(self, value: Optional[datetime]) -> 'HeadObjectRequest':
        self._if_modified_since = value
        return self

    def set_if_none_match(self, value: Optional[str]) -> 'HeadObjectRequest':
        self._if_none_match = value
        return self

    def set_if_unmodified_since(self, value: Optional[datetime]) -> 'HeadObjectRequest':
        self._if_unmodified_since = value
        return self

    def set_key(self, value: Optional[str]) -> 'HeadObjectRequest':
        self._key = value
        return self

    def set_part_number(self, value: Optional[int]) -> 'HeadObjectRequest':
        self._part_number = value
        return self

    def set_range(self, value: Optional[str]) -> 'HeadObjectRequest':
        # Ignored by the service for HEAD, still sent when set
        self._range = value
        return self

    def set_request_payer(self, value: Optional[Union[RequestPayer, str]]) -> 'HeadObjectRequest':
        self._request_payer = value
        return self

    def set_sse_customer_algorithm(self, value: Optional[str]) -> 'HeadObjectRequest':
        self._sse_customer_algorithm = value
        return self

    def set_sse_customer_key(self, value: Optional[str]) -> 'HeadObjectRequest':
        self._sse_customer_key = value
        return self

    def set_sse_customer_key_md5(self, value: Optional[str]) -> 'HeadObjectRequest':
        self._sse_customer_key_md5 = value
        return self

    def set_version_id(self, value: Optional[str]) -> 'HeadObjectRequest':
        self._version_id = value
        return self
