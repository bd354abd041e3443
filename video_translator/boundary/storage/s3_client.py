"""
S3 client for the video bucket.

Uploads, downloads and deletes job artifacts and builds their public URLs.
Object keys are derived from the job id only, so every step can find the
artifacts of earlier steps without extra bookkeeping.

Dependencies: boto3
System role: Object storage adapter for videos, extracted audio and speech
"""

from pathlib import PurePosixPath
from uuid import UUID

import boto3
from botocore.exceptions import BotoCoreError, ClientError

from video_translator.configs.storage import StorageSettings
from video_translator.core.exceptions import StorageError

DEFAULT_VIDEO_EXTENSION = "mp4"


def video_key(job_id: UUID | str, file_name: str) -> str:
    """Key of an uploaded video: videos/{job_id}.{ext}."""
    extension = PurePosixPath(file_name).suffix.lstrip(".").lower() or DEFAULT_VIDEO_EXTENSION
    return f"videos/{job_id}.{extension}"


def audio_key(job_id: UUID | str) -> str:
    return f"audio/{job_id}.wav"


def generated_audio_key(job_id: UUID | str) -> str:
    return f"generated/{job_id}.mp3"


class ObjectStorageClient:
    """Blocking S3 client; async callers wrap calls in asyncio.to_thread."""

    def __init__(
        self,
        bucket: str,
        region: str = "us-east-1",
        endpoint_url: str | None = None,
        public_base_url: str | None = None,
        s3_client=None,
    ) -> None:
        """
        Initialize S3 client for the video bucket.

        Args:
            bucket: Bucket name
            region: AWS region for the bucket
            endpoint_url: Custom endpoint for S3-compatible providers
            public_base_url: Base URL serving public objects
            s3_client: Pre-built boto3 client (tests)
        """
        self._bucket = bucket
        self._region = region
        self._endpoint_url = endpoint_url
        self._public_base_url = public_base_url.rstrip("/") if public_base_url else None
        self._s3_client = s3_client or boto3.client(
            "s3", region_name=region, endpoint_url=endpoint_url
        )

    @classmethod
    def from_settings(cls, settings: StorageSettings) -> "ObjectStorageClient":
        return cls(
            bucket=settings.bucket,
            region=settings.region,
            endpoint_url=settings.endpoint_url,
            public_base_url=settings.public_base_url,
        )

    @property
    def bucket(self) -> str:
        return self._bucket

    def upload_bytes(self, key: str, data: bytes, content_type: str) -> str:
        """
        Store `data` under `key`, replacing any existing object.

        Returns:
            str: The object key

        Raises:
            StorageError: When the upload fails
        """
        try:
            self._s3_client.put_object(
                Bucket=self._bucket,
                Key=key,
                Body=data,
                ContentType=content_type,
            )
            return key
        except (ClientError, BotoCoreError) as e:
            raise StorageError(f"Failed to upload to storage: {e}", "upload", key) from e

    def upload_file(self, key: str, local_path: str, content_type: str) -> str:
        try:
            self._s3_client.upload_file(
                Filename=local_path,
                Bucket=self._bucket,
                Key=key,
                ExtraArgs={"ContentType": content_type},
            )
            return key
        except (ClientError, BotoCoreError) as e:
            raise StorageError(f"Failed to upload to storage: {e}", "upload", key) from e

    def download_file(self, key: str, local_path: str) -> str:
        """
        Download `key` to `local_path`.

        Raises:
            StorageError: When the object is missing or the download fails
        """
        try:
            self._s3_client.download_file(
                Bucket=self._bucket,
                Key=key,
                Filename=local_path,
            )
            return local_path
        except ClientError as e:
            error_code = e.response.get("Error", {}).get("Code", "Unknown")
            if error_code in ("404", "NoSuchKey"):
                raise StorageError(f"File not found in storage: {key}", "download", key) from e
            raise StorageError(f"Failed to download from storage: {e}", "download", key) from e
        except BotoCoreError as e:
            raise StorageError(f"Failed to download from storage: {e}", "download", key) from e

    def delete_objects(self, keys: list[str]) -> None:
        """Delete several objects; missing keys are ignored by S3."""
        if not keys:
            return
        try:
            self._s3_client.delete_objects(
                Bucket=self._bucket,
                Delete={"Objects": [{"Key": key} for key in keys], "Quiet": True},
            )
        except (ClientError, BotoCoreError) as e:
            raise StorageError(f"Failed to delete from storage: {e}", "delete") from e

    def file_exists(self, key: str) -> bool:
        try:
            self._s3_client.head_object(Bucket=self._bucket, Key=key)
            return True
        except ClientError as e:
            if e.response.get("Error", {}).get("Code") in ("404", "NoSuchKey"):
                return False
            raise StorageError(f"Failed to inspect storage object: {e}", "head", key) from e

    def get_public_url(self, key: str) -> str:
        """
        Public URL of `key`.

        Uses public_base_url when configured, otherwise the endpoint's
        path-style URL or the virtual-hosted AWS URL.
        """
        if self._public_base_url:
            return f"{self._public_base_url}/{key}"
        if self._endpoint_url:
            return f"{self._endpoint_url.rstrip('/')}/{self._bucket}/{key}"
        return f"https://{self._bucket}.s3.{self._region}.amazonaws.com/{key}"
