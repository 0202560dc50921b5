"""Photo lookup in local asset storage, inlined as data URIs."""

import asyncio
import base64
import logging
from pathlib import Path

logger = logging.getLogger(__name__)

PHOTO_EXTENSIONS = (".jpg", ".jpeg", ".png", ".webp")

MIME_TYPES = {
    ".jpg": "image/jpeg",
    ".jpeg": "image/jpeg",
    ".png": "image/png",
    ".webp": "image/webp",
}


def is_safe_asset_id(asset_id: str) -> bool:
    """Asset ids name a file directly under the storage root, nothing more."""
    return bool(asset_id) and "/" not in asset_id and "\\" not in asset_id and ".." not in asset_id


def to_data_uri(data: bytes, mime_type: str) -> str:
    return f"data:{mime_type};base64,{base64.b64encode(data).decode('ascii')}"


class AssetResolver:
    """Resolve ``<storage_root>/<asset_id>.<ext>`` to a base64 data URI."""

    def __init__(self, storage_root: Path) -> None:
        self.storage_root = Path(storage_root)

    def find(self, asset_id: str) -> Path | None:
        """First existing file for the id, probing extensions in order."""
        for ext in PHOTO_EXTENSIONS:
            candidate = self.storage_root / f"{asset_id}{ext}"
            if candidate.is_file():
                return candidate
        return None

    def _load(self, asset_id: str) -> str | None:
        path = self.find(asset_id)
        if path is None:
            logger.warning("Photo asset not found: %s", asset_id)
            return None
        try:
            data = path.read_bytes()
        except OSError as e:
            logger.error("Failed to read photo asset %s: %s", path, e)
            return None
        return to_data_uri(data, MIME_TYPES[path.suffix])

    async def resolve(self, asset_id: str) -> str | None:
        """Data URI for the asset, or None when it is missing or unreadable."""
        if not is_safe_asset_id(asset_id):
            logger.warning("Rejected photo asset id: %r", asset_id)
            return None
        return await asyncio.to_thread(self._load, asset_id)
