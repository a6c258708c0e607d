"""
Analysis result models — scores, diagnoses, recommendations, action plan.
"""

from __future__ import annotations

from enum import Enum
from typing import Annotated, Any, Literal, Union

from pydantic import BaseModel, ConfigDict, Field

from bizpulse.models.benchmark import SectorBenchmark


class Dimension(str, Enum):
    """Assessed business areas."""

    FINANCIAL = "financial"
    COMMERCIAL = "commercial"
    OPERATIONAL = "operational"
    PEOPLE = "people"
    TECHNOLOGY = "technology"


class Area(str, Enum):
    """Recommendation area tag: the five dimensions plus strategy and marketing."""

    FINANCIAL = "financial"
    COMMERCIAL = "commercial"
    MARKETING = "marketing"
    OPERATIONAL = "operational"
    PEOPLE = "people"
    TECHNOLOGY = "technology"
    STRATEGY = "strategy"


class Priority(str, Enum):
    """Recommendation priority. Declaration order is the sort order."""

    HIGH = "high"
    MEDIUM = "medium"
    LOW = "low"


class DiagnosisStatus(str, Enum):
    """Maturity status of one dimension, derived from its score."""

    EXCELLENT = "excellent"  # >= 80
    ADEQUATE = "adequate"  # >= 60
    ATTENTION = "attention"  # >= 40
    CRITICAL = "critical"  # < 40


WEIGHTS: dict[Dimension, float] = {
    Dimension.FINANCIAL: 0.25,
    Dimension.COMMERCIAL: 0.25,
    Dimension.OPERATIONAL: 0.20,
    Dimension.PEOPLE: 0.15,
    Dimension.TECHNOLOGY: 0.15,
}


class DimensionScores(BaseModel):
    """Sub-scores per dimension plus the weighted overall score."""

    model_config = ConfigDict(frozen=True)

    financial: int = Field(ge=0, le=100)
    commercial: int = Field(ge=0, le=100)
    operational: int = Field(ge=0, le=100)
    people: int = Field(ge=0, le=100)
    technology: int = Field(ge=0, le=100)
    overall: int = Field(ge=0, le=100)

    def by_dimension(self) -> dict[Dimension, int]:
        return {dimension: getattr(self, dimension.value) for dimension in Dimension}

    def ranked(self) -> list[tuple[Dimension, int]]:
        """Dimensions by ascending score; the lowest score is the most urgent."""
        return sorted(self.by_dimension().items(), key=lambda item: item[1])


class DimensionDiagnosis(BaseModel):
    """Status and textual diagnosis of one dimension."""

    model_config = ConfigDict(frozen=True)

    area: str
    status: DiagnosisStatus
    strengths: list[str] = Field(default_factory=list)
    concerns: list[str] = Field(default_factory=list)
    opportunities: list[str] = Field(default_factory=list)


class Recommendation(BaseModel):
    """A prioritized, actionable suggestion tied to a detected weakness."""

    model_config = ConfigDict(frozen=True)

    id: int
    area: Area
    priority: Priority
    title: str
    description: str
    expected_impact: str
    timeframe: str
    resources: str
    steps: list[str] | None = None
    tools: list[str] | None = None
    metrics: list[str] | None = None


# ---------------------------------------------------------------------------
# Action plan: two week shapes, discriminated by ``kind``.
# ---------------------------------------------------------------------------


class WeekAction(BaseModel):
    model_config = ConfigDict(frozen=True)

    action: str
    owner: str
    deliverable: str
    area: str | None = None
    resources: str | None = None
    metrics: str | None = None


class DetailedWeekAction(BaseModel):
    model_config = ConfigDict(frozen=True)

    action: str
    owner: str
    deliverable: str
    resources: str
    metrics: str


class ActionPlanWeek(BaseModel):
    """Minimal week shape: week number and its actions."""

    model_config = ConfigDict(frozen=True)

    kind: Literal["basic"] = "basic"
    week: int = Field(ge=1, le=12)
    actions: list[WeekAction]


class DetailedActionPlanWeek(BaseModel):
    """Rich week shape with a phase label and an objective."""

    model_config = ConfigDict(frozen=True)

    kind: Literal["detailed"] = "detailed"
    week: int = Field(ge=1, le=12)
    phase: str
    objective: str
    actions: list[DetailedWeekAction]


PlanWeek = Annotated[Union[ActionPlanWeek, DetailedActionPlanWeek], Field(discriminator="kind")]


class AnalysisResult(BaseModel):
    """Full output of one analysis run.

    Treated as an immutable value by renderers, exporters and persistence.
    """

    model_config = ConfigDict(frozen=True)

    company: str
    sector: str
    city: str
    scores: DimensionScores
    financial_diagnosis: DimensionDiagnosis
    commercial_diagnosis: DimensionDiagnosis
    operational_diagnosis: DimensionDiagnosis
    people_diagnosis: DimensionDiagnosis
    technology_diagnosis: DimensionDiagnosis
    recommendations: list[Recommendation] = Field(default_factory=list, max_length=8)
    action_plan: list[PlanWeek] = Field(default_factory=list)
    benchmark: SectorBenchmark
    tactics: list[Recommendation] = Field(
        default_factory=list,
        max_length=15,
        description="Playbook tactics; filled only when the tactical analysis is requested",
    )

    @property
    def diagnoses(self) -> dict[Dimension, DimensionDiagnosis]:
        return {
            Dimension.FINANCIAL: self.financial_diagnosis,
            Dimension.COMMERCIAL: self.commercial_diagnosis,
            Dimension.OPERATIONAL: self.operational_diagnosis,
            Dimension.PEOPLE: self.people_diagnosis,
            Dimension.TECHNOLOGY: self.technology_diagnosis,
        }

    @property
    def high_priority_recommendations(self) -> list[Recommendation]:
        return [r for r in self.recommendations if r.priority == Priority.HIGH]

    def to_markdown(self) -> str:
        """Export the result as Markdown."""
        from bizpulse.exporters.markdown import render_markdown

        return render_markdown(self)

    def to_json(self) -> str:
        """Export the result as JSON."""
        return self.model_dump_json(indent=2)

    def to_dict(self) -> dict[str, Any]:
        """Export the result as a dictionary."""
        return self.model_dump(mode="json")
