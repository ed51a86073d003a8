"""Image hosting collaborator.

The catalog only needs a stable public id and URL per uploaded asset, and a
way to delete it again. Deleting an id that is already gone counts as
success, so repeated deletes (e.g. a form abandoned twice) are harmless.
"""
from __future__ import annotations

import os
import uuid
from typing import Dict, Protocol
from urllib.parse import unquote


class ImageHost(Protocol):
    def upload(self, filename: str, content: bytes) -> Dict[str, str]:
        ...

    def delete(self, public_id: str) -> bool:
        ...


class InMemoryImageHost:
    def __init__(self, base_url: str | None = None, folder: str = "locations"):
        self.base_url = (base_url or os.getenv("IMAGE_BASE_URL", "https://images.local")).rstrip("/")
        self.folder = folder.strip("/")
        self._assets: Dict[str, bytes] = {}

    def __contains__(self, public_id: str) -> bool:
        return unquote(public_id) in self._assets

    def upload(self, filename: str, content: bytes) -> Dict[str, str]:
        if not content:
            raise ValueError("empty upload")
        ext = os.path.splitext(filename or "")[1].lower()
        public_id = f"{self.folder}/{uuid.uuid4().hex}" if self.folder else uuid.uuid4().hex
        self._assets[public_id] = content
        return {"public_id": public_id, "url": f"{self.base_url}/{public_id}{ext}"}

    def delete(self, public_id: str) -> bool:
        # ids arrive URL-encoded from path params ("locations%2Fabc")
        self._assets.pop(unquote(public_id), None)
        return True


def build_image_host_from_env() -> InMemoryImageHost:
    return InMemoryImageHost(
        base_url=os.getenv("IMAGE_BASE_URL"),
        folder=os.getenv("IMAGE_FOLDER", "locations"),
    )


__all__ = ["ImageHost", "InMemoryImageHost", "build_image_host_from_env"]
