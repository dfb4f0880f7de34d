"""
R2 Client Builder
=================
Collects connection parameters and produces an Operator.

Example:
    operator = (
        Builder()
        .set_bucket_name("my-bucket")
        .set_access_key_id(access_key_id)
        .set_secret_access_key(secret_access_key)
        .set_endpoint("https://<account_id>.r2.cloudflarestorage.com")
        .create_client()
    )
"""

from typing import List, Optional
from urllib.parse import urlparse

import aioboto3

from cf_r2_sdk.core.config import Settings, mask_secret
from cf_r2_sdk.core.exceptions import InvalidFieldError, MissingFieldError
from cf_r2_sdk.core.logging_config import get_logger
from cf_r2_sdk.storage.operator import Operator, default_client_config


logger = get_logger(__name__)


DEFAULT_REGION = "auto"
REQUIRED_FIELDS = ("bucket_name", "access_key_id", "secret_access_key", "endpoint")


class Builder:
    """
    Builder for Operator

    Setters return the builder so calls can be chained. Nothing touches
    the network until an Operator method is awaited.
    """

    def __init__(self):
        self.bucket_name: str = ""
        self.access_key_id: str = ""
        self.secret_access_key: str = ""
        self.endpoint: str = ""
        self.region: str = DEFAULT_REGION

    @classmethod
    def from_settings(cls, settings: Settings) -> "Builder":
        """Pre-populate a builder from environment settings"""
        return (
            cls()
            .set_bucket_name(settings.BUCKET_NAME or "")
            .set_access_key_id(settings.ACCESS_KEY_ID or "")
            .set_secret_access_key(settings.SECRET_ACCESS_KEY or "")
            .set_endpoint(settings.ENDPOINT_URL or "")
            .set_region(settings.REGION or DEFAULT_REGION)
        )

    def set_bucket_name(self, bucket_name: str) -> "Builder":
        self.bucket_name = bucket_name
        return self

    def set_access_key_id(self, access_key_id: str) -> "Builder":
        self.access_key_id = access_key_id
        return self

    def set_secret_access_key(self, secret_access_key: str) -> "Builder":
        self.secret_access_key = secret_access_key
        return self

    def set_endpoint(self, endpoint: str) -> "Builder":
        self.endpoint = endpoint
        return self

    def set_region(self, region: str) -> "Builder":
        self.region = region
        return self

    def missing_fields(self) -> List[str]:
        """
        Required fields that are still empty

        Returns:
            List[str]: Field names in declaration order
        """
        return [
            name for name in REQUIRED_FIELDS
            if not (getattr(self, name) or "").strip()
        ]

    def create_client_result(self) -> Operator:
        """
        Validate the configuration and create an Operator

        Returns:
            Operator: Operator bound to the configured bucket

        Raises:
            MissingFieldError: If a required field is empty
            InvalidFieldError: If the endpoint is not an http(s) URL
        """
        missing = self.missing_fields()
        if missing:
            logger.error(f"Cannot create R2 client, missing: {', '.join(missing)}")
            raise MissingFieldError(missing[0], missing)

        endpoint = urlparse(self.endpoint.strip())
        if endpoint.scheme not in ("http", "https") or not endpoint.hostname:
            logger.error(f"Cannot create R2 client, invalid endpoint: {self.endpoint}")
            raise InvalidFieldError("endpoint", "expected an http(s) URL with a host")

        region = self.region or DEFAULT_REGION
        session = aioboto3.Session(
            aws_access_key_id=self.access_key_id,
            aws_secret_access_key=self.secret_access_key,
            region_name=region,
        )

        logger.bind(bucket=self.bucket_name, endpoint=self.endpoint, region=region).debug(
            f"R2 client created for bucket: {self.bucket_name}"
        )

        return Operator(
            bucket_name=self.bucket_name,
            session=session,
            endpoint=self.endpoint,
            region=region,
            config=default_client_config(),
        )

    def create_client(self) -> Operator:
        """
        Create an Operator

        Same as create_client_result(): an incomplete configuration raises
        MissingFieldError (InvalidFieldError for a bad endpoint), it never
        aborts.
        """
        return self.create_client_result()

    def __repr__(self) -> str:
        return (
            f"Builder(bucket_name={self.bucket_name!r}, "
            f"access_key_id={mask_secret(self.access_key_id)!r}, "
            f"secret_access_key={mask_secret(self.secret_access_key)!r}, "
            f"endpoint={self.endpoint!r}, region={self.region!r})"
        )
