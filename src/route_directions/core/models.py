"""Pydantic return and configuration models for turn classification."""

from typing import Literal

from pydantic import BaseModel, ConfigDict, Field, model_validator


class TurnThresholds(BaseModel):
    """Bucket boundaries, in degrees of absolute heading change.

    |delta| < straight                 -> continue straight
    straight <= |delta| < slight       -> slight turn
    slight <= |delta| < sharp          -> turn
    |delta| >= sharp                   -> sharp turn
    """
    model_config = ConfigDict(frozen=True)

    straight: float = Field(default=1.0, gt=0)
    slight: float = Field(default=45.0, gt=0)
    sharp: float = Field(default=120.0, gt=0, le=180)

    @model_validator(mode="after")
    def thresholds_must_increase(self) -> "TurnThresholds":
        if not self.straight < self.slight < self.sharp:
            raise ValueError(
                f"Thresholds must increase: straight ({self.straight}) < "
                f"slight ({self.slight}) < sharp ({self.sharp})"
            )
        return self


DEFAULT_THRESHOLDS = TurnThresholds()


class TurnDescriptor(BaseModel):
    """Return type for classify_turn."""
    model_config = ConfigDict(frozen=True)

    delta: float = Field(gt=-180, le=180)
    direction: Literal["straight", "left", "right"]
    severity: Literal["straight", "slight", "normal", "sharp"]

    @property
    def phrase(self) -> str:
        if self.direction == "straight":
            return "Continue straight"
        if self.severity == "normal":
            return f"Turn {self.direction}"
        return f"Turn {self.severity} {self.direction}"
