"""Media models: stored photos and linked videos"""

from typing import Optional

from pydantic import BaseModel, Field


class ProductPhoto(BaseModel):
    """A stored photo; `photo` is the file name under the upload path."""
    id: Optional[int] = None
    photo: Optional[str] = None
    alt_text: Optional[str] = None
    width: Optional[int] = Field(None, ge=0)
    height: Optional[int] = Field(None, ge=0)
    position: Optional[int] = None


class ProductVideo(BaseModel):
    id: Optional[int] = None
    type: Optional[str] = None  # youtube, vimeo, upload
    url: Optional[str] = None
    thumbnail: Optional[str] = None
    title: Optional[str] = None
