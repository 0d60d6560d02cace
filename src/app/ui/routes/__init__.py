"""Reusable UI route modules."""

from __future__ import annotations

from .export import router as export_router
from .offline import router as offline_router

__all__ = [
    "export_router",
    "offline_router",
]
