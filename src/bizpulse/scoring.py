"""
Maturity Score Calculators — one 0-100 score per business dimension.

Each calculator starts from a base value and applies independent additive
adjustments (benchmark ratios, fixed bands, self-assessment ratings and
presence of qualitative answers). The bands are the product's scoring
policy; results are clamped to [0, 100] and rounded half up to an integer.

No I/O and no state: pure functions of (company, benchmark).
"""

from __future__ import annotations

import logging

from bizpulse.formatting import answered_yes, contains_any, filled, round_half_up
from bizpulse.models.analysis import WEIGHTS, Dimension, DimensionScores
from bizpulse.models.benchmark import SectorBenchmark
from bizpulse.models.company import CompanyRecord

logger = logging.getLogger("bizpulse.scoring")

BASE_SCORE = 50
TECHNOLOGY_BASE_SCORE = 40


def _clamp(score: float) -> int:
    return round_half_up(max(0, min(100, score)))


def calculate_financial_score(company: CompanyRecord, benchmark: SectorBenchmark) -> int:
    score: float = BASE_SCORE

    # Net margin vs sector
    if company.net_margin_percent > 0 and benchmark.average_margin > 0:
        margin_ratio = company.net_margin_percent / benchmark.average_margin
        score += min(20, margin_ratio * 15)

    # Delinquency, lower is better; 0 means not reported
    delinquency = company.delinquency_percent
    if delinquency > 0:
        if delinquency <= 2:
            score += 15
        elif delinquency <= 5:
            score += 10
        elif delinquency <= 10:
            score += 5
        else:
            score -= 10

    # LTV/CAC
    if company.ltv > 0 and company.customer_acquisition_cost > 0:
        ltv_cac = company.ltv / company.customer_acquisition_cost
        if ltv_cac >= 3:
            score += 15
        elif ltv_cac >= 2:
            score += 10
        elif ltv_cac >= 1:
            score += 5

    if company.rating_finance >= 8:
        score += 10
    elif company.rating_finance >= 6:
        score += 5

    return _clamp(score)


def calculate_commercial_score(company: CompanyRecord, benchmark: SectorBenchmark) -> int:
    score: float = BASE_SCORE

    if company.conversion_rate > 0 and benchmark.average_conversion_rate > 0:
        conversion_ratio = company.conversion_rate / benchmark.average_conversion_rate
        score += min(15, conversion_ratio * 10)

    if company.nps >= 70:
        score += 20
    elif company.nps >= 50:
        score += 15
    elif company.nps >= 30:
        score += 10
    elif company.nps > 0:
        score += 5

    if company.win_rate >= 40:
        score += 15
    elif company.win_rate >= 25:
        score += 10
    elif company.win_rate >= 15:
        score += 5

    if answered_yes(company.sales_funnel):
        score += 10
    if company.crm_tool and company.crm_tool != "Não utilizo":
        score += 5

    return _clamp(score)


def calculate_operational_score(company: CompanyRecord) -> int:
    score: float = BASE_SCORE

    if answered_yes(company.has_goals_plan):
        score += 15

    if contains_any(company.management_maturity, "alto", "avançad"):
        score += 20
    elif contains_any(company.management_maturity, "médio", "intermediár"):
        score += 10

    if filled(company.strategic_kpis, 10):
        score += 10

    if company.rating_operations >= 8:
        score += 15
    elif company.rating_operations >= 6:
        score += 10
    elif company.rating_operations >= 4:
        score += 5

    return _clamp(score)


def calculate_people_score(company: CompanyRecord, benchmark: SectorBenchmark) -> int:
    score: float = BASE_SCORE

    turnover = company.turnover_12_months
    if turnover > 0:
        if turnover < benchmark.average_turnover * 0.5:
            score += 20
        elif turnover < benchmark.average_turnover:
            score += 10
        elif turnover > benchmark.average_turnover * 1.5:
            score -= 10

    if answered_yes(company.has_org_chart):
        score += 10
    if answered_yes(company.profiles_mapped):
        score += 10
    if filled(company.management_rituals, 10):
        score += 10

    if company.rating_people >= 8:
        score += 15
    elif company.rating_people >= 6:
        score += 10

    return _clamp(score)


def calculate_technology_score(company: CompanyRecord) -> int:
    score: float = TECHNOLOGY_BASE_SCORE

    if filled(company.current_stack, 10):
        score += 15
    if answered_yes(company.kpi_dashboards):
        score += 15
    if contains_any(company.ai_usage, "sim", "utiliz"):
        score += 15
    # Centralized data beats scattered spreadsheets
    if contains_any(company.data_location, "erp", "central"):
        score += 10

    if company.rating_technology >= 8:
        score += 15
    elif company.rating_technology >= 6:
        score += 10

    return _clamp(score)


def calculate_overall_score(
    financial: int,
    commercial: int,
    operational: int,
    people: int,
    technology: int,
) -> int:
    """Weighted average of the five finalized sub-scores."""
    return round_half_up(
        financial * WEIGHTS[Dimension.FINANCIAL]
        + commercial * WEIGHTS[Dimension.COMMERCIAL]
        + operational * WEIGHTS[Dimension.OPERATIONAL]
        + people * WEIGHTS[Dimension.PEOPLE]
        + technology * WEIGHTS[Dimension.TECHNOLOGY]
    )


def calculate_scores(company: CompanyRecord, benchmark: SectorBenchmark) -> DimensionScores:
    """Compute all five sub-scores, then the overall score."""
    financial = calculate_financial_score(company, benchmark)
    commercial = calculate_commercial_score(company, benchmark)
    operational = calculate_operational_score(company)
    people = calculate_people_score(company, benchmark)
    technology = calculate_technology_score(company)
    overall = calculate_overall_score(financial, commercial, operational, people, technology)

    logger.debug(
        "Scores fin=%d com=%d op=%d peo=%d tech=%d overall=%d",
        financial, commercial, operational, people, technology, overall,
    )
    return DimensionScores(
        financial=financial,
        commercial=commercial,
        operational=operational,
        people=people,
        technology=technology,
        overall=overall,
    )
