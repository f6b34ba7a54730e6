# Standard library imports
from dataclasses import dataclass, replace
from typing import Optional


@dataclass(frozen=True)
class Camera:
    """
    Pure domain model for Camera entity - no external dependencies.

    A camera is derived from a raw device cloud record on every discovery
    pass and is never stored on its own.
    """
    id: str
    name: str
    device_id: str
    is_online: bool
    supports_ptz: bool
    category: str
    last_seen_iso: str
    stream_url: Optional[str] = None

    def __post_init__(self) -> None:
        """Business validations"""
        if not self.id:
            raise ValueError("Camera ID is required")
        if not self.name or len(self.name.strip()) < 1:
            raise ValueError("Camera name is required")

    def with_stream(self, stream_url: Optional[str]) -> "Camera":
        """Return a copy of this camera carrying the given stream URL."""
        return replace(self, stream_url=stream_url)
