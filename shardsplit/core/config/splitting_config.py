"""Split balancing configuration for shardsplit.

The factors below are empirical tuning knobs rather than derived thresholds.
They are exposed so that callers (and tests) can explore convergence under
different value distributions.
"""

from pydantic import Field, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict
from typing_extensions import Self


class SplittingConfig(BaseSettings):
    """Configuration for split generation and balancing.

    Environment Variables:
        SHARDSPLIT_SPLITTING_BALANCE_PASSES=3
        SHARDSPLIT_SPLITTING_MERGE_TOLERANCE=1.18
        SHARDSPLIT_SPLITTING_RESPLIT_FACTOR=1.8
    """

    model_config = SettingsConfigDict(
        env_prefix="SHARDSPLIT_SPLITTING_",
        case_sensitive=False,
        validate_default=True,
        extra="ignore",
    )

    balance_passes: int = Field(
        default=3,
        ge=0,
        le=20,
        description="Number of merge/re-split passes over the split list",
    )

    merge_tolerance: float = Field(
        default=1.18,
        ge=1.0,
        description="Threshold multiplier over docs-per-split; adjacent splits merge while at or below it",
    )

    resplit_factor: float = Field(
        default=1.8,
        gt=1.0,
        description="Splits larger than docs-per-split times this factor are re-split",
    )

    outlier_factor: float = Field(
        default=1.40,
        gt=1.0,
        description="Splits larger than the average times this factor are reported",
    )

    missing_warning_factor: float = Field(
        default=2.0,
        gt=0.0,
        description="Missing-value bucket larger than docs-per-split times this factor is reported",
    )

    always_count_missing: bool = Field(
        default=False,
        description=(
            "Always issue the missing-value count query, even when the stats "
            "response already reports a missing count"
        ),
    )

    @model_validator(mode="after")
    def validate_bands(self) -> Self:
        """Re-split band must sit above the merge band to avoid oscillation."""
        if self.resplit_factor <= self.merge_tolerance:
            raise ValueError(
                f"resplit_factor ({self.resplit_factor}) must be greater than "
                f"merge_tolerance ({self.merge_tolerance})"
            )
        return self

    def __repr__(self) -> str:
        return (
            f"SplittingConfig("
            f"balance_passes={self.balance_passes}, "
            f"merge_tolerance={self.merge_tolerance}, "
            f"resplit_factor={self.resplit_factor})"
        )
