"""Cloudinary adapter.

Credentials live on the client instance and are passed with every call, so
the process-wide ``cloudinary.config()`` is never mutated.
"""
import io
import logging
from dataclasses import dataclass

import cloudinary.api
import cloudinary.uploader
import cloudinary.utils
from starlette.concurrency import run_in_threadpool

logger = logging.getLogger(__name__)


class UploadError(Exception):
    """A single file could not be stored on the media host."""

    def __init__(self, filename: str, cause: Exception):
        self.filename = filename
        self.cause = cause
        super().__init__(str(cause) or cause.__class__.__name__)


@dataclass
class RemoteAsset:
    url: str
    public_id: str
    width: int
    height: int
    thumbnail: str


class MediaClient:
    def __init__(
        self,
        cloud_name: str,
        api_key: str,
        api_secret: str,
        folder: str = "photos",
        timeout: int = 60,
        thumbnail_size: int = 300,
    ):
        self.cloud_name = cloud_name
        self.api_key = api_key
        self.api_secret = api_secret
        self.folder = folder
        self.timeout = timeout
        self.thumbnail_size = thumbnail_size

    def _credentials(self) -> dict:
        return {
            "cloud_name": self.cloud_name,
            "api_key": self.api_key,
            "api_secret": self.api_secret,
        }

    def thumbnail_url(self, public_id: str) -> str:
        url, _ = cloudinary.utils.cloudinary_url(
            public_id,
            width=self.thumbnail_size,
            height=self.thumbnail_size,
            crop="fill",
            secure=True,
            cloud_name=self.cloud_name,
        )
        return url

    def _upload(self, content: bytes) -> dict:
        return cloudinary.uploader.upload(
            io.BytesIO(content),
            folder=self.folder,
            resource_type="auto",
            quality="auto",
            timeout=self.timeout,
            **self._credentials(),
        )

    async def upload(self, content: bytes, filename: str) -> RemoteAsset:
        try:
            result = await run_in_threadpool(self._upload, content)
        except Exception as e:
            raise UploadError(filename, e) from e

        public_id = result["public_id"]
        logger.info(f"Uploaded {filename} to Cloudinary as {public_id}")
        return RemoteAsset(
            url=result["secure_url"],
            public_id=public_id,
            width=result.get("width", 0),
            height=result.get("height", 0),
            thumbnail=self.thumbnail_url(public_id),
        )

    async def ping(self) -> dict:
        return await run_in_threadpool(lambda: dict(cloudinary.api.ping(**self._credentials())))

    async def destroy(self, public_id: str) -> dict:
        return await run_in_threadpool(
            lambda: cloudinary.uploader.destroy(public_id, **self._credentials())
        )
