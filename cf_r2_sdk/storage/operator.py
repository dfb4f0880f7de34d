"""
Cloudflare R2 Operator
======================
Upload, download, delete and list objects in one R2 bucket.

Each call opens a client from the operator's aioboto3 session, issues a
single request and surfaces the outcome as-is. There is no retry layer.
"""

import asyncio
from typing import Any, Dict, List, Optional

import aioboto3
from botocore.config import Config
from botocore.exceptions import BotoCoreError, ClientError

from cf_r2_sdk.core.exceptions import OperationError
from cf_r2_sdk.core.logging_config import get_logger
from cf_r2_sdk.models.object import ObjectInfo


logger = get_logger(__name__)


DEFAULT_CACHE_CONTROL = "no-cache"
LIST_OBJECTS_MAX_KEYS = 10
BINARY_TYPES = (bytes, bytearray, memoryview)

# botocore raises ValueError for a malformed endpoint when the client opens
WRAPPED_ERRORS = (ClientError, BotoCoreError, ValueError)


def default_client_config() -> Config:
    """
    botocore config for R2

    R2 rejects the CRC checksum headers newer SDKs send by default, so
    checksums are only computed when an operation requires them.
    """
    return Config(
        signature_version="s3v4",
        request_checksum_calculation="when_required",
        response_checksum_validation="when_required",
    )


def _read_file(file_path: str) -> bytes:
    with open(file_path, "rb") as f:
        return f.read()


class Operator:
    """
    R2 Operator

    Bound to one bucket and one credential set. Holds no per-call state,
    so a single instance can be shared between concurrent tasks.
    """

    def __init__(
        self,
        bucket_name: str,
        session: aioboto3.Session,
        endpoint: str,
        region: str = "auto",
        config: Optional[Config] = None,
    ):
        self._bucket_name = bucket_name
        self._session = session
        self._endpoint = endpoint
        self._region = region
        self._config = config or default_client_config()

    @property
    def bucket_name(self) -> str:
        return self._bucket_name

    @property
    def endpoint(self) -> str:
        return self._endpoint

    @property
    def region(self) -> str:
        return self._region

    def __repr__(self) -> str:
        return (
            f"Operator(bucket_name={self._bucket_name!r}, "
            f"endpoint={self._endpoint!r}, region={self._region!r})"
        )

    def _client(self):
        """Open an S3 client for a single call (async context manager)"""
        return self._session.client(
            "s3",
            endpoint_url=self._endpoint,
            region_name=self._region,
            config=self._config,
        )

    def _log(self, key: Optional[str] = None, **context):
        return logger.bind(bucket=self._bucket_name, key=key, **context)

    def _failure(self, operation: str, key: Optional[str], err: Exception) -> OperationError:
        error_code = None
        if isinstance(err, ClientError):
            error_code = err.response.get("Error", {}).get("Code")

        self._log(key, error_code=error_code).error(f"R2 {operation} failed: {err}")
        return OperationError(operation, str(err), key=key, error_code=error_code)

    @staticmethod
    def _check_key(operation: str, key: str) -> None:
        if not isinstance(key, str) or not key:
            raise OperationError(operation, "object key must be a non-empty string", key=key)

    @staticmethod
    def _check_data(operation: str, key: str, data) -> None:
        if not isinstance(data, BINARY_TYPES):
            raise OperationError(
                operation,
                f"data must be bytes, bytearray or memoryview, not {type(data).__name__}",
                key=key,
            )

    # ========================================================================
    # UPLOAD
    # ========================================================================

    async def upload_binary(
        self,
        key: str,
        mime_type: str,
        data: bytes,
        cache_control: Optional[str] = None,
    ) -> None:
        """
        Store raw bytes under a key

        Args:
            key: Object key
            mime_type: Content-Type stored with the object
            data: Object content
            cache_control: Cache-Control directive ("no-cache" when omitted)

        Raises:
            OperationError: If data is not binary, the store rejects the
                request or is unreachable
        """
        self._check_key("upload_binary", key)
        self._check_data("upload_binary", key, data)
        await self._put_object("upload_binary", key, mime_type, bytes(data), cache_control)

    async def upload_file(
        self,
        key: str,
        mime_type: str,
        file_path: str,
        cache_control: Optional[str] = None,
    ) -> None:
        """
        Read a local file into memory and store it under a key

        The file is read completely before anything is sent, so a read
        failure never leaves a partial object behind.

        Raises:
            OperationError: If the file cannot be read or the upload fails
        """
        self._check_key("upload_file", key)

        try:
            data = await asyncio.to_thread(_read_file, file_path)
        except OSError as e:
            self._log(key).error(f"Cannot read {file_path}: {e}")
            raise OperationError("upload_file", str(e), key=key) from e

        await self._put_object("upload_file", key, mime_type, data, cache_control)

    async def _put_object(
        self,
        operation: str,
        key: str,
        mime_type: str,
        data: bytes,
        cache_control: Optional[str],
    ) -> None:
        try:
            async with self._client() as s3_client:
                await s3_client.put_object(
                    Bucket=self._bucket_name,
                    Key=key,
                    Body=data,
                    ContentType=mime_type,
                    CacheControl=cache_control or DEFAULT_CACHE_CONTROL,
                )
        except WRAPPED_ERRORS as e:
            raise self._failure(operation, key, e) from e

        self._log(key).debug(f"Uploaded {key} ({len(data)} bytes)")

    # ========================================================================
    # DOWNLOAD / STAT
    # ========================================================================

    async def download(self, key: str) -> bytes:
        """
        Retrieve the full content of an object

        Raises:
            OperationError: If the key does not exist or the transport fails
        """
        self._check_key("download", key)

        try:
            async with self._client() as s3_client:
                response = await s3_client.get_object(Bucket=self._bucket_name, Key=key)

                async with response["Body"] as stream:
                    content = await stream.read()
        except WRAPPED_ERRORS as e:
            raise self._failure("download", key, e) from e

        self._log(key).debug(f"Downloaded {key} ({len(content)} bytes)")
        return content

    async def stat(self, key: str) -> ObjectInfo:
        """Fetch object metadata without downloading the content"""
        self._check_key("stat", key)

        try:
            async with self._client() as s3_client:
                response = await s3_client.head_object(Bucket=self._bucket_name, Key=key)
        except WRAPPED_ERRORS as e:
            raise self._failure("stat", key, e) from e

        return ObjectInfo.from_head_response(key, response)

    # ========================================================================
    # DELETE / LIST
    # ========================================================================

    async def delete(self, key: str) -> None:
        """
        Remove an object

        Deleting a key that does not exist succeeds, as it does on R2.
        """
        self._check_key("delete", key)

        try:
            async with self._client() as s3_client:
                await s3_client.delete_object(Bucket=self._bucket_name, Key=key)
        except WRAPPED_ERRORS as e:
            raise self._failure("delete", key, e) from e

        self._log(key).debug(f"Deleted {key}")

    async def list_objects(self) -> List[str]:
        """
        List object keys in the bucket

        Only the first page is requested, so at most LIST_OBJECTS_MAX_KEYS
        keys come back, in the order the store returns them. No
        continuation token is followed.
        """
        try:
            async with self._client() as s3_client:
                response: Dict[str, Any] = await s3_client.list_objects_v2(
                    Bucket=self._bucket_name,
                    MaxKeys=LIST_OBJECTS_MAX_KEYS,
                )
        except WRAPPED_ERRORS as e:
            raise self._failure("list_objects", None, e) from e

        keys = [obj["Key"] for obj in response.get("Contents", [])]
        return keys[:LIST_OBJECTS_MAX_KEYS]
