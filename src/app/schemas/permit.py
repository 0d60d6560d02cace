"""Typed request/response models for permit checks."""

from __future__ import annotations

from typing import Any, Literal

from pydantic import BaseModel, ConfigDict, Field, field_validator

from src.app.data.regulation import DimensionInput, normalise_road_type
from src.app.regulation import PermitCheck
from src.app.utils.units import finite_or_zero, sanitize_measure, to_inches

_LENGTH_PARTS = (
    "width_ft",
    "width_in",
    "height_ft",
    "height_in",
    "length_ft",
    "length_in",
)


class CheckRequest(BaseModel):
    """Dimensions as entered on the form: feet + inches per axis."""

    model_config = ConfigDict(extra="ignore")

    width_ft: float = Field(default=0.0, description="Overall width, whole feet")
    width_in: float = Field(default=0.0, description="Overall width, extra inches")
    height_ft: float = Field(default=0.0, description="Overall height, whole feet")
    height_in: float = Field(default=0.0, description="Overall height, extra inches")
    length_ft: float = Field(default=0.0, description="Overall length, whole feet")
    length_in: float = Field(default=0.0, description="Overall length, extra inches")
    gross_lbs: float = Field(default=0.0, description="Gross vehicle weight in pounds")
    road_type: Literal["two", "multi"] = Field(default="two", description="Road category")
    states: list[str] = Field(default_factory=list, description="Selected jurisdiction codes")

    # Invalid numbers are treated as zero rather than rejected.
    @field_validator(*_LENGTH_PARTS, mode="before")
    @classmethod
    def _lenient_length(cls, value: Any) -> float:
        return finite_or_zero(value)

    @field_validator("gross_lbs", mode="before")
    @classmethod
    def _lenient_weight(cls, value: Any) -> float:
        return sanitize_measure(value)

    @field_validator("road_type", mode="before")
    @classmethod
    def _lenient_road(cls, value: Any) -> str:
        return normalise_road_type(value)

    @field_validator("states", mode="before")
    @classmethod
    def _split_states(cls, value: Any) -> list[str]:
        if value is None:
            return []
        if isinstance(value, str):
            value = value.split(",")
        elif not isinstance(value, (list, tuple, set)):
            value = [value]
        return [str(item).strip().upper() for item in value if str(item).strip()]

    @classmethod
    def from_form(cls, form: Any) -> "CheckRequest":
        """Build a request from a Starlette ``FormData`` (multi-valued ``states``)."""

        payload: dict[str, Any] = {key: form.get(key) for key in (*_LENGTH_PARTS, "gross_lbs", "road_type")}
        payload = {key: value for key, value in payload.items() if value is not None}
        payload["states"] = form.getlist("states")
        return cls.model_validate(payload)

    def to_dimensions(self) -> DimensionInput:
        return DimensionInput(
            width_in=to_inches(self.width_ft, self.width_in),
            height_in=to_inches(self.height_ft, self.height_in),
            length_in=to_inches(self.length_ft, self.length_in),
            gross_lbs=self.gross_lbs,
            road_type=self.road_type,
        )


class LegalMaxOut(BaseModel):
    width_in: float
    height_in: float
    length_in: float
    gross_lbs: float


class OverAxesOut(BaseModel):
    width: bool
    height: bool
    length: bool
    weight: bool


class VerdictOut(BaseModel):
    """Per-jurisdiction verdict; only ``status`` is present for ``noData``."""

    model_config = ConfigDict(extra="ignore")

    status: Literal["ok", "noData"]
    permit: bool | None = None
    over: OverAxesOut | None = None
    escort: str | None = None
    high_pole: str | None = None
    travel: str | None = None
    legal_max: LegalMaxOut | None = None
    sources: list[str] | None = None


class PermitRow(BaseModel):
    state: str
    verdict: VerdictOut

    @classmethod
    def from_check(cls, check: PermitCheck) -> "PermitRow":
        return cls.model_validate(check.as_dict())


class DimensionsOut(BaseModel):
    width_in: float
    height_in: float
    length_in: float
    gross_lbs: float
    road_type: Literal["two", "multi"]


class CheckResponse(BaseModel):
    """Dimensions as evaluated plus one row per selected jurisdiction."""

    dimensions: DimensionsOut
    results: list[PermitRow]


class JurisdictionSummary(BaseModel):
    code: str
    status: Literal["ok", "noData"]


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
