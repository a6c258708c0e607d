"""
Recommendation Generator — maps detected weaknesses to prioritized actions.

Every dimension scoring below ``ATTENTION_THRESHOLD`` has its own trigger
checks; each triggered check emits one hand-authored recommendation. A
revenue-gap check runs regardless of scores. Candidates are stably sorted
by priority and capped at ``MAX_RECOMMENDATIONS``.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Any

from bizpulse.formatting import answered_yes, contains_any, fmt_brl, fmt_number, round_half_up
from bizpulse.models.analysis import Area, DimensionScores, Priority, Recommendation
from bizpulse.models.benchmark import SectorBenchmark
from bizpulse.models.company import CompanyRecord

logger = logging.getLogger("bizpulse.recommendations")

ATTENTION_THRESHOLD = 70
MAX_RECOMMENDATIONS = 8

_PRIORITY_ORDER = {Priority.HIGH: 0, Priority.MEDIUM: 1, Priority.LOW: 2}


@dataclass
class _Candidates:
    """Collects recommendations and hands out sequential ids."""

    items: list[Recommendation] = field(default_factory=list)

    def add(self, **fields: Any) -> None:
        self.items.append(Recommendation(id=len(self.items) + 1, **fields))


def _financial(company: CompanyRecord, benchmark: SectorBenchmark, out: _Candidates) -> None:
    margin = company.net_margin_percent
    if margin < benchmark.average_margin:
        out.add(
            area=Area.FINANCIAL,
            priority=Priority.HIGH,
            title="Profit Margin Optimization",
            description=(
                f"Your current margin of {fmt_number(margin)}% is below the sector average "
                f"({fmt_number(benchmark.average_margin)}%). Run an ABC cost analysis, review pricing "
                "and identify low-profitability products/services."
            ),
            expected_impact=(
                f"{round_half_up((benchmark.average_margin - margin) * 0.5)}% increase in net margin"
            ),
            timeframe="60 days",
            resources="Cost spreadsheet, pricing analysis, supplier meetings",
        )

    if company.delinquency_percent > 5:
        out.add(
            area=Area.FINANCIAL,
            priority=Priority.HIGH,
            title="Delinquency Reduction",
            description=(
                f"Delinquency of {fmt_number(company.delinquency_percent)}% hits cash flow directly. "
                "Put a credit policy and an automated collection schedule in place, and offer "
                "incentives for early payment."
            ),
            expected_impact="50% reduction in delinquency within 90 days",
            timeframe="30 days to implement",
            resources="Collection system, credit analysis, negotiation scripts",
        )


def _commercial(company: CompanyRecord, out: _Candidates) -> None:
    if not answered_yes(company.sales_funnel):
        out.add(
            area=Area.COMMERCIAL,
            priority=Priority.HIGH,
            title="Sales Funnel Structuring",
            description=(
                "Define the funnel stages (prospecting, qualification, proposal, negotiation, "
                "closing) with clear exit criteria and conversion metrics per stage."
            ),
            expected_impact="20-30% increase in conversion rate",
            timeframe="15 days",
            resources="CRM, sales playbook, team training",
        )

    if 0 < company.nps < 50:
        out.add(
            area=Area.COMMERCIAL,
            priority=Priority.HIGH,
            title="Customer Experience Improvement Program",
            description=(
                f"NPS of {fmt_number(company.nps)} shows room for improvement. Map the customer "
                "journey, find friction points and ship quick fixes at the critical touchpoints."
            ),
            expected_impact="15-20 point increase in NPS",
            timeframe="45 days",
            resources="Qualitative research, journey map, action plan per touchpoint",
        )


def _operational(company: CompanyRecord, out: _Candidates) -> None:
    if not answered_yes(company.has_goals_plan):
        out.add(
            area=Area.OPERATIONAL,
            priority=Priority.HIGH,
            title="Strategic Planning Implementation",
            description=(
                "Develop a strategic plan with vision, mission, SMART objectives and their "
                "breakdown into departmental goals. Include an annual budget and quarterly reviews."
            ),
            expected_impact="Organizational alignment and focus on results",
            timeframe="30 days",
            resources="Strategy workshop, planning template, facilitator",
        )


def _people(company: CompanyRecord, benchmark: SectorBenchmark, out: _Candidates) -> None:
    if company.turnover_12_months > benchmark.average_turnover:
        out.add(
            area=Area.PEOPLE,
            priority=Priority.MEDIUM,
            title="Talent Retention Program",
            description=(
                f"Turnover of {fmt_number(company.turnover_12_months)}% is above the market. Run a "
                "climate survey, launch a development program and review the compensation policy."
            ),
            expected_impact="30% reduction in turnover",
            timeframe="60 days",
            resources="Climate survey, career plan, recognition program",
        )

    if not answered_yes(company.has_org_chart):
        out.add(
            area=Area.PEOPLE,
            priority=Priority.MEDIUM,
            title="Organizational Structure Definition",
            description=(
                "Formalize an org chart with roles, responsibilities and authority levels. "
                "Document job descriptions and a competency matrix."
            ),
            expected_impact="Clear responsibilities and better communication",
            timeframe="21 days",
            resources="Org chart template, job descriptions, RACI matrix",
        )


def _technology(company: CompanyRecord, out: _Candidates) -> None:
    if not answered_yes(company.kpi_dashboards):
        out.add(
            area=Area.TECHNOLOGY,
            priority=Priority.MEDIUM,
            title="Business Intelligence Implementation",
            description=(
                "Create executive dashboards with the main KPIs of each area. Automate data "
                "collection and set up a weekly analysis routine."
            ),
            expected_impact="50% faster data-driven decisions",
            timeframe="45 days",
            resources="BI tool, KPI definitions, data integration",
        )

    if not contains_any(company.ai_usage, "sim", "utiliz"):
        out.add(
            area=Area.TECHNOLOGY,
            priority=Priority.LOW,
            title="Artificial Intelligence Adoption",
            description=(
                "Identify repetitive processes that AI can automate. Start with support chatbots, "
                "predictive sales analysis or report automation."
            ),
            expected_impact="20% reduction in operational tasks",
            timeframe="90 days",
            resources="Process mapping, AI tools, training",
        )


def _revenue_gap(company: CompanyRecord, out: _Candidates) -> None:
    if company.annual_revenue_target <= 0 or company.revenue_6_months <= 0:
        return
    annualized = company.revenue_6_months * 2
    gap = company.annual_revenue_target - annualized
    if gap > 0:
        out.add(
            area=Area.STRATEGY,
            priority=Priority.HIGH,
            title="Revenue Acceleration Plan",
            description=(
                f"Gap of R$ {fmt_brl(gap)} to reach the annual target. Prioritize: 1) Raise the "
                "average ticket, 2) Grow the customer base, 3) Reduce churn."
            ),
            expected_impact="Close the revenue gap",
            timeframe="90 days",
            resources="Opportunity analysis, upsell campaigns, referral program",
        )


def sort_and_cap(candidates: list[Recommendation], limit: int = MAX_RECOMMENDATIONS) -> list[Recommendation]:
    """Stable sort by priority (high, medium, low), then keep the first ``limit``."""
    ordered = sorted(candidates, key=lambda r: _PRIORITY_ORDER[r.priority])
    return ordered[:limit]


def generate_recommendations(
    company: CompanyRecord,
    benchmark: SectorBenchmark,
    scores: DimensionScores,
) -> list[Recommendation]:
    """Build the ranked, capped recommendation list.

    Dimensions are gated independently on their own score; the ascending
    ranking from ``scores.ranked()`` is a presentation aid and does not
    change which recommendations are selected.
    """
    out = _Candidates()

    if scores.financial < ATTENTION_THRESHOLD:
        _financial(company, benchmark, out)
    if scores.commercial < ATTENTION_THRESHOLD:
        _commercial(company, out)
    if scores.operational < ATTENTION_THRESHOLD:
        _operational(company, out)
    if scores.people < ATTENTION_THRESHOLD:
        _people(company, benchmark, out)
    if scores.technology < ATTENTION_THRESHOLD:
        _technology(company, out)

    _revenue_gap(company, out)

    result = sort_and_cap(out.items)
    logger.debug("%d recommendation candidates, %d kept", len(out.items), len(result))
    return result
