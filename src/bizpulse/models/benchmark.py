"""
Sector benchmark model — market reference values for one sector.
"""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field


class SectorBenchmark(BaseModel):
    """Reference metrics for a sector (Brazilian SMB market)."""

    model_config = ConfigDict(frozen=True)

    sector: str = Field(description="Display name of the sector")
    average_margin: float = Field(description="Average net margin, percent")
    average_ticket: float = Field(description="Average ticket, BRL")
    average_conversion_rate: float = Field(description="Average conversion rate, percent")
    reference_nps: float
    average_turnover: float = Field(description="Average 12-month turnover, percent")
    average_sales_cycle_days: float
    average_delinquency: float = Field(default=5.0, description="Average delinquency, percent")
