"""v1 contract schemas for the provisioning session resource."""

__version__ = "1.0.0"

from .schemas import SESSION_MEDIA_TYPE, SessionContract

__all__ = [
    "__version__",
    "SESSION_MEDIA_TYPE",
    "SessionContract",
]
