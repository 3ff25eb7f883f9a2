"""
Media URL resolution for stored uploads.

Uploads are stored as bare file names; the public URL is the configured
media base URL, the upload path of the media kind, and the file name.
"""
from typing import Optional

from src.core.config import config

PHOTO_UPLOAD_PATH = "images/uploads/product_photo/"
THUMB_PHOTO_UPLOAD_PATH = "images/uploads/product_photo_thumb/"
BRAND_THUMB_IMAGE_UPLOAD_PATH = "images/uploads/brand_thumb/"


class MediaUrlResolver:
    """Builds public URLs for stored media files."""

    def __init__(self, base_url: Optional[str] = None):
        self.base_url = (base_url if base_url is not None else config.media_base_url).rstrip("/")

    def resolve(self, upload_path: str, filename: Optional[str]) -> Optional[str]:
        """
        Public URL of `filename` under `upload_path`.

        Returns None for a missing file name. Absolute URLs (already on a
        CDN) are returned unchanged.
        """
        if not filename:
            return None
        if filename.startswith(("http://", "https://")):
            return filename
        return f"{self.base_url}/{upload_path.strip('/')}/{filename.lstrip('/')}"

    def photo(self, filename: Optional[str]) -> Optional[str]:
        return self.resolve(PHOTO_UPLOAD_PATH, filename)

    def photo_thumbnail(self, filename: Optional[str]) -> Optional[str]:
        return self.resolve(THUMB_PHOTO_UPLOAD_PATH, filename)

    def brand_logo(self, filename: Optional[str]) -> Optional[str]:
        return self.resolve(BRAND_THUMB_IMAGE_UPLOAD_PATH, filename)
