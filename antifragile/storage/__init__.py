# antifragile/storage/__init__.py
# Wire forms for classifications: rank or lowercase token, nothing else.

from antifragile.storage.record_serializer import (
    VerifiedSerializer,
    serialize_triad,
    serialize_verified,
)
from antifragile.storage.record_loader import (
    VerifiedLoader,
    load_triad,
    load_verified,
)

__all__ = [
    "serialize_triad",
    "serialize_verified",
    "VerifiedSerializer",
    "load_triad",
    "load_verified",
    "VerifiedLoader",
]
