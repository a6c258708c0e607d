"""
Analysis engine — the single entry point of the assessment core.

``analyze_company`` resolves the sector benchmark, scores the five
dimensions, diagnoses each one, builds recommendations and the 90-day plan,
and assembles an immutable ``AnalysisResult``. Pure and synchronous: safe to
call concurrently from any number of workers.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping
from typing import Any

from bizpulse.action_plan import generate_action_plan, generate_detailed_action_plan
from bizpulse.benchmarks import resolve_benchmark
from bizpulse.diagnosis import (
    diagnose_commercial,
    diagnose_financial,
    diagnose_operational,
    diagnose_people,
    diagnose_technology,
)
from bizpulse.models.analysis import AnalysisResult, PlanWeek, Recommendation
from bizpulse.models.company import CompanyRecord
from bizpulse.recommendations import generate_recommendations
from bizpulse.scoring import calculate_scores
from bizpulse.tactics import generate_tactical_recommendations

logger = logging.getLogger("bizpulse.engine")

NOT_PROVIDED = "Not provided"


def analyze_company(
    company: CompanyRecord | Mapping[str, Any],
    *,
    tactics: bool = False,
) -> AnalysisResult:
    """Run the full assessment for one company snapshot.

    Args:
        company: A ``CompanyRecord``, or a mapping of survey answers (snake_case
            names or the original survey keys) validated into one.
        tactics: Also run the tactical playbook. The result then carries the
            detected tactics and a detailed 12-week plan built around them.

    Returns:
        AnalysisResult with scores, diagnoses, recommendations, action plan
        and the benchmark used.
    """
    if not isinstance(company, CompanyRecord):
        company = CompanyRecord.model_validate(company)

    benchmark = resolve_benchmark(company.sector)
    scores = calculate_scores(company, benchmark)

    financial = diagnose_financial(company, benchmark, scores.financial)
    commercial = diagnose_commercial(company, benchmark, scores.commercial)
    operational = diagnose_operational(company, scores.operational)
    people = diagnose_people(company, benchmark, scores.people)
    technology = diagnose_technology(company, scores.technology)

    recommendations = generate_recommendations(company, benchmark, scores)
    playbook_tactics: list[Recommendation] = []
    action_plan: list[PlanWeek]
    if tactics:
        playbook_tactics = generate_tactical_recommendations(company, benchmark)
        action_plan = list(generate_detailed_action_plan(playbook_tactics))
    else:
        action_plan = list(generate_action_plan(recommendations))

    logger.info(
        "Analysis complete for %s: overall %d/100, %d recommendations, %d tactics (benchmark: %s)",
        company.company or "<unnamed>",
        scores.overall,
        len(recommendations),
        len(playbook_tactics),
        benchmark.sector,
    )

    return AnalysisResult(
        company=company.company,
        sector=company.sector or NOT_PROVIDED,
        city=company.city or NOT_PROVIDED,
        scores=scores,
        financial_diagnosis=financial,
        commercial_diagnosis=commercial,
        operational_diagnosis=operational,
        people_diagnosis=people,
        technology_diagnosis=technology,
        recommendations=recommendations,
        action_plan=action_plan,
        benchmark=benchmark,
        tactics=playbook_tactics,
    )
