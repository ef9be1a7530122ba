"""S3 object storage backend implementing IObjectStore."""

from __future__ import annotations

import mimetypes

import boto3
from botocore.exceptions import BotoCoreError, ClientError

from wardrobe.core.exceptions import ObjectStoreError
from wardrobe.models.objects import StoredObject


class S3ObjectStore:
    """Production IObjectStore backed by S3."""

    def __init__(self, bucket: str, region: str = "us-east-1",
                 endpoint_url: str | None = None, public_base_url: str | None = None,
                 url_expiry: int = 3600) -> None:
        self._bucket = bucket
        self._region = region
        self._endpoint_url = endpoint_url
        self._public_base_url = public_base_url.rstrip("/") if public_base_url else None
        self._url_expiry = url_expiry
        kwargs: dict = {"region_name": region}
        if endpoint_url:
            kwargs["endpoint_url"] = endpoint_url
        self._client = boto3.client("s3", **kwargs)

    def url_for(self, pathname: str) -> str:
        """Retrievable URL for a stored object: public if configured, else presigned."""
        if self._public_base_url:
            return f"{self._public_base_url}/{pathname}"
        return self._client.generate_presigned_url(
            "get_object",
            Params={"Bucket": self._bucket, "Key": pathname},
            ExpiresIn=self._url_expiry,
        )

    def put(self, pathname: str, data: bytes, content_type: str = "application/octet-stream") -> str:
        try:
            self._client.put_object(
                Bucket=self._bucket, Key=pathname, Body=data, ContentType=content_type,
            )
            return self.url_for(pathname)
        except (BotoCoreError, ClientError) as exc:
            raise ObjectStoreError(f"S3 put failed for {pathname!r}: {exc}") from exc

    def list(self) -> list[StoredObject]:
        try:
            objects: list[StoredObject] = []
            paginator = self._client.get_paginator("list_objects_v2")
            for page in paginator.paginate(Bucket=self._bucket):
                for obj in page.get("Contents", []):
                    objects.append(StoredObject(
                        pathname=obj["Key"],
                        url=self.url_for(obj["Key"]),
                        size=obj.get("Size", 0),
                        content_type=mimetypes.guess_type(obj["Key"])[0] or "",
                    ))
            return objects
        except (BotoCoreError, ClientError) as exc:
            raise ObjectStoreError(f"S3 list failed for bucket={self._bucket!r}: {exc}") from exc

    def delete(self, pathname: str) -> None:
        try:
            self._client.delete_object(Bucket=self._bucket, Key=pathname)
        except (BotoCoreError, ClientError) as exc:
            raise ObjectStoreError(f"S3 delete failed for {pathname!r}: {exc}") from exc
