"""
Tactical Playbook — step-by-step tactics for detected business problems.

The playbook ships as ``data/tactics.json``: problem groups, each with a
list of tactics in priority order. A group applies when its detection rule
(keyed by the group's ``key``) holds for the company and its sector
benchmark. Every tactic of an applicable group becomes a recommendation
carrying its steps, tools and success metrics.

Unlike ``generate_recommendations`` there is no per-dimension score gate:
detection depends on the raw answers alone.
"""

from __future__ import annotations

import json
import logging
from collections.abc import Callable
from pathlib import Path

from bizpulse.formatting import answer_is
from bizpulse.models.analysis import Area, Priority, Recommendation
from bizpulse.models.benchmark import SectorBenchmark
from bizpulse.models.company import CompanyRecord
from bizpulse.models.tactic import TacticGroup
from bizpulse.recommendations import sort_and_cap

logger = logging.getLogger("bizpulse.tactics")

MAX_TACTICS = 15
LEAD_VOLUME_FLOOR = 100

Rule = Callable[[CompanyRecord, SectorBenchmark], bool]


def _high_acquisition_cost(company: CompanyRecord, benchmark: SectorBenchmark) -> bool:
    cac = company.customer_acquisition_cost
    ltv = company.ltv
    return cac > 0 and ltv > 0 and cac > ltv / 3


def _tight_cash_flow(company: CompanyRecord, benchmark: SectorBenchmark) -> bool:
    return answer_is(company.debt_level, "alto") or company.monthly_financial_cost > 10


_RULES: dict[str, Rule] = {
    "low_conversion": lambda c, b: c.conversion_rate < b.average_conversion_rate * 0.8,
    "long_sales_cycle": lambda c, b: c.sales_cycle_days > b.average_sales_cycle_days * 1.3,
    "low_ticket": lambda c, b: c.average_ticket < b.average_ticket * 0.7,
    "high_acquisition_cost": _high_acquisition_cost,
    "few_leads": lambda c, b: c.leads_per_month < LEAD_VOLUME_FLOOR,
    "low_margin": lambda c, b: c.net_margin_percent < b.average_margin * 0.7,
    "high_delinquency": lambda c, b: c.delinquency_percent > b.average_delinquency * 1.5,
    "tight_cash_flow": _tight_cash_flow,
    "high_turnover": lambda c, b: c.turnover_12_months > b.average_turnover * 1.3,
    "low_productivity": lambda c, b: c.rating_operations < 6,
    "missing_dashboards": lambda c, b: answer_is(c.kpi_dashboards, "não", "parcial"),
    "no_ai": lambda c, b: answer_is(c.ai_usage, "não"),
    "crm_underused": lambda c, b: answer_is(c.crm_tool, "não") or answer_is(c.sales_funnel, "não"),
}

_PLAYBOOK: tuple[TacticGroup, ...] | None = None


def _load_playbook() -> tuple[TacticGroup, ...]:
    """Lazy-load the playbook JSON, preserving group order."""
    global _PLAYBOOK
    if _PLAYBOOK is None:
        data_path = Path(__file__).parent / "data" / "tactics.json"
        with open(data_path, encoding="utf-8") as f:
            raw = json.load(f)
        groups = tuple(TacticGroup.model_validate(group) for group in raw["groups"])
        unknown = [group.key for group in groups if group.key not in _RULES]
        if unknown:
            raise ValueError(f"Playbook at {data_path} has groups without a rule: {', '.join(unknown)}")
        logger.debug("Loaded %d tactic groups", len(groups))
        _PLAYBOOK = groups
    return _PLAYBOOK


def playbook() -> tuple[TacticGroup, ...]:
    """Return every problem group in evaluation order."""
    return _load_playbook()


def detect_problems(company: CompanyRecord, benchmark: SectorBenchmark) -> list[TacticGroup]:
    """Problem groups whose detection rule holds, in playbook order."""
    return [group for group in _load_playbook() if _RULES[group.key](company, benchmark)]


def tactic_priority(area: Area, index: int) -> Priority:
    """First tactic of a group is high, second medium, the rest low.

    Technology tactics never drop below medium.
    """
    if index == 0:
        return Priority.HIGH
    if index == 1 or area == Area.TECHNOLOGY:
        return Priority.MEDIUM
    return Priority.LOW


def generate_tactical_recommendations(
    company: CompanyRecord,
    benchmark: SectorBenchmark,
) -> list[Recommendation]:
    """Expand every detected problem into its tactics, then sort and cap at ``MAX_TACTICS``."""
    candidates: list[Recommendation] = []
    problems = detect_problems(company, benchmark)

    for group in problems:
        for index, tactic in enumerate(group.tactics):
            candidates.append(
                Recommendation(
                    id=len(candidates) + 1,
                    area=group.area,
                    priority=tactic_priority(group.area, index),
                    title=tactic.title,
                    description=tactic.description,
                    expected_impact=f"Improvement on {group.problem.lower()}",
                    timeframe=tactic.timeframe,
                    resources=tactic.investment,
                    steps=list(tactic.steps),
                    tools=list(tactic.tools),
                    metrics=list(tactic.metrics),
                )
            )

    selected = sort_and_cap(candidates, limit=MAX_TACTICS)
    logger.debug(
        "%d problems detected, %d tactics kept of %d",
        len(problems), len(selected), len(candidates),
    )
    return selected
