"""
Shared fixtures

FakeSession stands in for aioboto3.Session: client() returns an async
context manager whose methods keep objects in memory and raise real
botocore errors, so the Operator runs unchanged against it.
"""
import pytest
from botocore.exceptions import ClientError

from cf_r2_sdk.storage.operator import Operator


TEST_BUCKET = "test-bucket"
TEST_ENDPOINT = "https://account.r2.cloudflarestorage.com"


def client_error(code: str, message: str, operation: str) -> ClientError:
    return ClientError({"Error": {"Code": code, "Message": message}}, operation)


class FakeBody:
    def __init__(self, data: bytes):
        self._data = data

    async def __aenter__(self):
        return self

    async def __aexit__(self, *exc_info):
        return False

    async def read(self) -> bytes:
        return self._data


class FakeS3Client:
    def __init__(self, session: "FakeSession"):
        self.session = session

    async def __aenter__(self):
        return self

    async def __aexit__(self, *exc_info):
        return False

    def _record(self, name: str, **params):
        self.session.calls.append((name, params))
        if self.session.fail_with is not None:
            raise self.session.fail_with

    async def put_object(self, Bucket, Key, Body, ContentType, CacheControl):
        self._record("put_object", Bucket=Bucket, Key=Key)
        self.session.objects[Key] = {
            "Body": bytes(Body),
            "ContentType": ContentType,
            "CacheControl": CacheControl,
        }
        return {"ETag": '"etag"'}

    async def get_object(self, Bucket, Key):
        self._record("get_object", Bucket=Bucket, Key=Key)
        if Key not in self.session.objects:
            raise client_error("NoSuchKey", "The specified key does not exist.", "GetObject")
        return {"Body": FakeBody(self.session.objects[Key]["Body"])}

    async def head_object(self, Bucket, Key):
        self._record("head_object", Bucket=Bucket, Key=Key)
        if Key not in self.session.objects:
            raise client_error("404", "Not Found", "HeadObject")
        obj = self.session.objects[Key]
        return {
            "ContentType": obj["ContentType"],
            "ContentLength": len(obj["Body"]),
            "CacheControl": obj["CacheControl"],
            "ETag": '"etag"',
        }

    async def delete_object(self, Bucket, Key):
        self._record("delete_object", Bucket=Bucket, Key=Key)
        self.session.objects.pop(Key, None)
        return {}

    async def list_objects_v2(self, Bucket, MaxKeys):
        self._record("list_objects_v2", Bucket=Bucket, MaxKeys=MaxKeys)
        keys = sorted(self.session.objects)
        return {
            "Contents": [{"Key": key} for key in keys[:MaxKeys]],
            "KeyCount": min(len(keys), MaxKeys),
            "IsTruncated": len(keys) > MaxKeys,
        }


class FakeSession:
    def __init__(self, fail_with: Exception = None):
        self.objects = {}
        self.calls = []
        self.client_kwargs = []
        self.fail_with = fail_with

    def client(self, service_name, **kwargs):
        assert service_name == "s3"
        self.client_kwargs.append(kwargs)
        return FakeS3Client(self)


@pytest.fixture
def fake_session():
    return FakeSession()


@pytest.fixture
def operator(fake_session):
    return Operator(TEST_BUCKET, session=fake_session, endpoint=TEST_ENDPOINT)
