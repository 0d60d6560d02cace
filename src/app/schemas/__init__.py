"""Request/response models shared by the API and UI routes."""

from .permit import (
    CheckRequest,
    CheckResponse,
    DimensionsOut,
    JurisdictionSummary,
    LegalMaxOut,
    OverAxesOut,
    PermitRow,
    VerdictOut,
)

__all__ = [
    "CheckRequest",
    "CheckResponse",
    "DimensionsOut",
    "JurisdictionSummary",
    "LegalMaxOut",
    "OverAxesOut",
    "PermitRow",
    "VerdictOut",
]
