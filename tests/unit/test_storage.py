import io
import re

import pytest
from botocore.exceptions import ClientError
from fastapi import HTTPException, UploadFile
from starlette.datastructures import Headers

from humansport.services.storage_service import StorageService


class RecordingClient:
    def __init__(self, error=None):
        self.calls = []
        self.error = error

    def upload_fileobj(self, fileobj, bucket, key, ExtraArgs=None):
        if self.error is not None:
            raise self.error
        self.calls.append((fileobj.read(), bucket, key, ExtraArgs))


def _upload(filename="me.jpg", content=b"jpeg-bytes"):
    return UploadFile(
        file=io.BytesIO(content),
        filename=filename,
        headers=Headers({"content-type": "image/jpeg"}),
    )


def test_build_key_is_prefixed_and_sanitized():
    service = StorageService(RecordingClient(), bucket="human-sport", region="us-east-1")

    key = service.build_key("my photo?.jpg")

    assert re.fullmatch(r"profiles/\d+-my_photo_\.jpg", key)


def test_upload_returns_public_url():
    client = RecordingClient()
    service = StorageService(client, bucket="human-sport", region="us-east-1")

    url = service.upload_profile_photo(_upload())

    [(content, bucket, key, extra)] = client.calls
    assert content == b"jpeg-bytes"
    assert bucket == "human-sport"
    assert extra == {"ACL": "public-read", "ContentType": "image/jpeg"}
    assert url == f"https://human-sport.s3.us-east-1.amazonaws.com/{key}"


def test_custom_public_url():
    service = StorageService(
        RecordingClient(), bucket="human-sport", public_url="https://cdn.humansport.com/"
    )

    url = service.upload_profile_photo(_upload())

    assert url.startswith("https://cdn.humansport.com/profiles/")


def test_upload_failure_becomes_server_error():
    error = ClientError({"Error": {"Code": "AccessDenied", "Message": "denied"}}, "PutObject")
    service = StorageService(RecordingClient(error=error), bucket="human-sport")

    with pytest.raises(HTTPException) as excinfo:
        service.upload_profile_photo(_upload())

    assert excinfo.value.status_code == 500
    assert excinfo.value.detail["message"] == "Photo upload failed"
