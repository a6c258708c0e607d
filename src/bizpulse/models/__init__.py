"""Data models — survey input, benchmarks and analysis output."""
from bizpulse.models.analysis import (
    ActionPlanWeek,
    AnalysisResult,
    Area,
    DetailedActionPlanWeek,
    DiagnosisStatus,
    Dimension,
    DimensionDiagnosis,
    DimensionScores,
    Priority,
    Recommendation,
)
from bizpulse.models.benchmark import SectorBenchmark
from bizpulse.models.company import CompanyRecord
from bizpulse.models.tactic import Tactic, TacticGroup

__all__ = [
    "ActionPlanWeek",
    "AnalysisResult",
    "Area",
    "CompanyRecord",
    "DetailedActionPlanWeek",
    "DiagnosisStatus",
    "Dimension",
    "DimensionDiagnosis",
    "DimensionScores",
    "Priority",
    "Recommendation",
    "SectorBenchmark",
    "Tactic",
    "TacticGroup",
]
