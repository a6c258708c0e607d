"""
Tactical playbook models — problems and the tactics that address them.
"""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field

from bizpulse.models.analysis import Area


class Tactic(BaseModel):
    """One step-by-step tactic with its tools, metrics and cost."""

    model_config = ConfigDict(frozen=True)

    title: str
    description: str
    steps: tuple[str, ...] = Field(min_length=1)
    tools: tuple[str, ...] = ()
    metrics: tuple[str, ...] = ()
    timeframe: str
    investment: str = Field(description="Rough cost band, e.g. 'Low (in-house training)'")


class TacticGroup(BaseModel):
    """A detectable problem and its tactics, listed in priority order."""

    model_config = ConfigDict(frozen=True)

    key: str = Field(description="Identifier of the detection rule")
    area: Area
    problem: str
    tactics: tuple[Tactic, ...] = Field(min_length=1)
