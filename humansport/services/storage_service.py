"""Profile photo uploads to S3."""

from __future__ import annotations

import logging
import re
import time
from functools import lru_cache
from typing import Any, Optional

import boto3
from botocore.exceptions import BotoCoreError, ClientError
from fastapi import HTTPException, UploadFile, status

from humansport.core.config import settings

logger = logging.getLogger(__name__)

PROFILE_PREFIX = "profiles"


def _sanitize_filename(filename: str) -> str:
    sanitized = re.sub(r'[\\/:*?"<>|]', "_", filename)
    return re.sub(r"[^\w\-.]", "_", sanitized) or "photo"


class StorageService:
    """Store uploaded files in a public-read bucket and return their URL."""

    def __init__(
        self,
        client: Any,
        bucket: str = settings.S3_BUCKET,
        public_url: Optional[str] = None,
        region: str = settings.AWS_REGION,
    ):
        self.client = client
        self.bucket = bucket
        self.public_url = (
            public_url or settings.S3_PUBLIC_URL or f"https://{bucket}.s3.{region}.amazonaws.com"
        ).rstrip("/")

    def build_key(self, filename: str) -> str:
        return f"{PROFILE_PREFIX}/{int(time.time() * 1000)}-{_sanitize_filename(filename)}"

    def upload_profile_photo(self, upload: UploadFile) -> str:
        key = self.build_key(upload.filename or "photo")
        extra_args = {"ACL": "public-read"}
        if upload.content_type:
            extra_args["ContentType"] = upload.content_type

        try:
            self.client.upload_fileobj(upload.file, self.bucket, key, ExtraArgs=extra_args)
        except (BotoCoreError, ClientError) as exc:
            logger.error("Photo upload to s3://%s/%s failed: %s", self.bucket, key, exc)
            raise HTTPException(
                status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
                detail={"message": "Photo upload failed", "errors": [str(exc)]},
            ) from exc

        logger.info("Uploaded profile photo to s3://%s/%s", self.bucket, key)
        return f"{self.public_url}/{key}"


@lru_cache()
def get_storage_service() -> StorageService:
    client = boto3.client(
        "s3",
        region_name=settings.AWS_REGION,
        aws_access_key_id=settings.AWS_ACCESS_KEY_ID or None,
        aws_secret_access_key=settings.AWS_SECRET_ACCESS_KEY or None,
    )
    return StorageService(client)


__all__ = ["StorageService", "get_storage_service"]
