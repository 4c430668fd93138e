"""Price update and replay result schemas."""

from pydantic import BaseModel, ConfigDict, Field

from .config import ReplayConfig


class PriceUpdate(BaseModel):
    """Snapshot of one committed epoch."""

    epoch: int = Field(..., ge=1, description="1-based epoch number")
    observed_rate: float = Field(..., description="Average gas per second observed")
    target_rate: float = Field(..., description="Target returned for this epoch")
    previous_price: float = Field(..., description="Price before the commit")
    next_price: float = Field(..., description="Price after the commit")
    adjustment_factor: float = Field(
        ..., description="next_price / previous_price (1.0 if previous is 0)"
    )
    at_floor: bool = Field(..., description="Whether next_price equals the floor")

    model_config = ConfigDict(frozen=True)


class ReplayMetrics(BaseModel):
    """Aggregate metrics for a full replay."""

    epochs: int = Field(..., description="Number of epochs replayed")
    final_price: float = Field(..., description="Price after the last epoch")
    max_step_change: float = Field(
        ..., description="Largest absolute fractional move in one epoch"
    )
    floor_hit_rate: float = Field(
        ..., description="Fraction of epochs that ended at the floor (0-1)"
    )

    model_config = ConfigDict(frozen=True)


class ReplayRun(BaseModel):
    """Encapsulation of a full replay."""

    config: ReplayConfig
    updates: list[PriceUpdate] = Field(default_factory=list)
    metrics: ReplayMetrics = Field(..., description="Aggregate metrics")

    model_config = ConfigDict(frozen=True)
