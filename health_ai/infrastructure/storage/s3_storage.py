import logging
from typing import Optional

import boto3
from botocore.exceptions import ClientError

from ...config import settings
from ...application.ports.object_storage import ObjectStorage, StoredObject

logger = logging.getLogger(__name__)


class S3ObjectStorage(ObjectStorage):
    """S3-compatible bucket (AWS S3, Cloudflare R2, MinIO)."""

    def __init__(self, client=None, bucket_name: Optional[str] = None) -> None:
        self.bucket_name = bucket_name or settings.S3_BUCKET_NAME
        self.client = client or boto3.client(
            "s3",
            endpoint_url=settings.S3_ENDPOINT_URL,
            aws_access_key_id=settings.AWS_ACCESS_KEY_ID or None,
            aws_secret_access_key=settings.AWS_SECRET_ACCESS_KEY or None,
            region_name=settings.AWS_REGION,
        )
        logger.info(f"S3ObjectStorage initialized (bucket: {self.bucket_name})")

    def put(self, key: str, data: bytes, content_type: str) -> str:
        self.client.put_object(
            Bucket=self.bucket_name,
            Key=key,
            Body=data,
            ContentType=content_type,
        )
        return key

    def get(self, key: str) -> Optional[StoredObject]:
        try:
            response = self.client.get_object(Bucket=self.bucket_name, Key=key)
        except ClientError as e:
            if e.response.get("Error", {}).get("Code") in ("NoSuchKey", "404"):
                return None
            raise
        return StoredObject(
            key=key,
            data=response["Body"].read(),
            content_type=response.get("ContentType") or "application/octet-stream",
            etag=response.get("ETag", ""),
        )
