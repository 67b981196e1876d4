"""Files API - binary uploads to storage buckets."""

from __future__ import annotations

from typing import Any, TYPE_CHECKING

from . import endpoints

if TYPE_CHECKING:
    from .transport import TransportClient


class FilesAPI:
    def __init__(self, transport: "TransportClient"):
        self._transport = transport

    async def upload(
        self,
        bucket_name: str,
        content: bytes,
        filename: str,
        mimetype: str,
        private: bool = False,
    ) -> Any:
        """Upload a file to a bucket as multipart/form-data.

        Args:
            bucket_name: Target bucket
            content: File bytes
            filename: Original file name
            mimetype: MIME type, e.g. ``image/jpeg``
            private: Store the file as private (public by default)

        Returns:
            API response with the download URL and metadata
        """
        return await self._transport.post(
            endpoints.file_upload(bucket_name),
            data={
                "filename": filename,
                "mimetype": mimetype,
                "private": "true" if private else "false",
            },
            files={"file": (filename, content, mimetype)},
        )
