# Copyright 2025 Accelerated Cloud Storage Corporation. All Rights Reserved.
from objstore_sdk import HeadObjectRequest, InvalidInputError, RequestPayer, Session
from objstore_sdk.client.utils import configure_logging
from datetime import datetime, timezone
import logging

def main():
    configure_logging(logging.DEBUG)
    session = Session(region="us-east-1")

    # Build a conditional, versioned metadata request
    input = (
        HeadObjectRequest({"Bucket": "my-test-bucket", "@region": "eu-west-1"})
        .set_key("reports/2024/summary.csv")
        .set_version_id("3HL4kqtJlcpXroDTDmJ+rmSpXd3dIbrHY")
        .set_if_modified_since(datetime(2024, 1, 1, tzinfo=timezone.utc))
        .set_request_payer(RequestPayer.REQUESTER)
    )
    request = input.request()
    print(f"Region: {session.resolve_region(input)}")
    print(f"{request.method} {request.url}")
    for name, value in request.headers.items():
        print(f"  {name}: {value}")

    # Missing key is reported when the request is built
    try:
        HeadObjectRequest({"Bucket": "my-test-bucket"}).request()
    except InvalidInputError as e:
        print(f"Failed to build request: {e}")

if __name__ == "__main__":
    main()
