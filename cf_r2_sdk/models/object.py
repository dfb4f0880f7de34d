"""
Object Models
=============
Pydantic models describing stored objects.
"""

from datetime import datetime
from typing import Optional, Dict, Any

from pydantic import BaseModel, Field


class ObjectInfo(BaseModel):
    """Metadata of a stored object, as returned by a HEAD request"""
    key: str = Field(..., description="Object key within the bucket")
    content_type: Optional[str] = Field(default=None, description="MIME type")
    content_length: int = Field(default=0, description="Object size in bytes")
    cache_control: Optional[str] = Field(default=None, description="Cache-Control directive")
    etag: Optional[str] = Field(default=None, description="Entity tag")
    last_modified: Optional[datetime] = Field(default=None)

    model_config = {"frozen": True}

    @classmethod
    def from_head_response(cls, key: str, response: Dict[str, Any]) -> "ObjectInfo":
        """Build from a botocore head_object response"""
        etag = response.get("ETag")
        return cls(
            key=key,
            content_type=response.get("ContentType"),
            content_length=response.get("ContentLength", 0),
            cache_control=response.get("CacheControl"),
            etag=etag.strip('"') if etag else None,
            last_modified=response.get("LastModified"),
        )
