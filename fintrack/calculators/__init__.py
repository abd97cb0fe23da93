"""Financial calculators package."""

from fintrack.calculators.interest import (
    CompoundingFrequency,
    compound_interest,
    interest_comparison,
    simple_interest,
)
from fintrack.calculators.projections import (
    DEFAULT_PENSION_RATE,
    SNAPSHOT_YEARS,
    ProjectionScenario,
    contribution_projection,
    contribution_value,
    effective_pension_rate,
    pension_projection,
    pension_snapshots,
    projection_starting_value,
    round_half_up,
)

__all__ = [
    # Interest
    "CompoundingFrequency",
    "compound_interest",
    "interest_comparison",
    "simple_interest",
    # Projections
    "DEFAULT_PENSION_RATE",
    "SNAPSHOT_YEARS",
    "ProjectionScenario",
    "contribution_projection",
    "contribution_value",
    "effective_pension_rate",
    "pension_projection",
    "pension_snapshots",
    "projection_starting_value",
    "round_half_up",
]
