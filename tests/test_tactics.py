"""Tests for the tactical playbook."""

from typing import Any

import pytest

from bizpulse.benchmarks import get_benchmark
from bizpulse.models.analysis import Area, Priority
from bizpulse.models.company import CompanyRecord
from bizpulse.tactics import (
    MAX_TACTICS,
    detect_problems,
    generate_tactical_recommendations,
    playbook,
    tactic_priority,
)

TECH = get_benchmark("Tecnologia")  # conversion 4, ticket 2000, cycle 21, turnover 30, delinquency 3
DEFAULT = get_benchmark("default")


def _company(**fields: Any) -> CompanyRecord:
    return CompanyRecord(company="Acme Ltda", **fields)


def _healthy(**overrides: Any) -> CompanyRecord:
    fields: dict[str, Any] = {
        "conversion_rate": 4,
        "average_ticket": 2000,
        "leads_per_month": 150,
        "net_margin_percent": 20,
        "rating_operations": 8,
        "kpi_dashboards": "Sim",
        "ai_usage": "Sim",
        "crm_tool": "Pipedrive",
        "sales_funnel": "Sim",
    }
    fields.update(overrides)
    return _company(**fields)


def _struggling() -> CompanyRecord:
    """Triggers every problem group against the Tecnologia benchmark."""
    return _company(
        conversion_rate=1,
        sales_cycle_days=60,
        average_ticket=100,
        customer_acquisition_cost=500,
        ltv=900,
        leads_per_month=20,
        net_margin_percent=2,
        delinquency_percent=10,
        debt_level="Alto",
        turnover_12_months=50,
        rating_operations=3,
        kpi_dashboards="Parcial",
        ai_usage="Não",
        crm_tool="Não",
        sales_funnel="Não",
    )


class TestPlaybook:
    def test_groups_in_evaluation_order(self) -> None:
        keys = [group.key for group in playbook()]
        assert keys == [
            "low_conversion",
            "long_sales_cycle",
            "low_ticket",
            "high_acquisition_cost",
            "few_leads",
            "low_margin",
            "high_delinquency",
            "tight_cash_flow",
            "high_turnover",
            "low_productivity",
            "missing_dashboards",
            "no_ai",
            "crm_underused",
        ]

    def test_every_tactic_is_actionable(self) -> None:
        for group in playbook():
            for tactic in group.tactics:
                assert tactic.steps
                assert tactic.tools
                assert tactic.metrics
                assert tactic.timeframe
                assert tactic.investment

    def test_marketing_groups_tagged(self) -> None:
        areas = {group.key: group.area for group in playbook()}
        assert areas["few_leads"] == Area.MARKETING
        assert areas["crm_underused"] == Area.TECHNOLOGY


class TestDetectProblems:
    def test_healthy_company_has_none(self) -> None:
        assert detect_problems(_healthy(), TECH) == []
        assert generate_tactical_recommendations(_healthy(), TECH) == []

    def test_blank_survey(self) -> None:
        keys = [group.key for group in detect_problems(CompanyRecord(), DEFAULT)]
        assert keys == ["low_conversion", "low_ticket", "few_leads", "low_margin", "low_productivity"]

    def test_everything_detected(self) -> None:
        assert len(detect_problems(_struggling(), TECH)) == len(playbook())

    def test_conversion_threshold_is_80_percent_of_sector(self) -> None:
        # 0.8 * 4 = 3.2
        assert "low_conversion" not in [g.key for g in detect_problems(_healthy(conversion_rate=3.3), TECH)]
        assert "low_conversion" in [g.key for g in detect_problems(_healthy(conversion_rate=3.1), TECH)]

    def test_acquisition_cost_needs_both_values(self) -> None:
        only_cac = _healthy(customer_acquisition_cost=500)
        assert detect_problems(only_cac, TECH) == []
        # 300 is exactly LTV/3
        at_limit = _healthy(customer_acquisition_cost=300, ltv=900)
        assert detect_problems(at_limit, TECH) == []

    def test_delinquency_uses_sector_reference(self) -> None:
        company = _healthy(delinquency_percent=10)
        # Tecnologia: 1.5 * 3 = 4.5; Educação: 1.5 * 8 = 12
        assert [g.key for g in detect_problems(company, TECH)] == ["high_delinquency"]
        education = get_benchmark("Educação")
        keys = [g.key for g in detect_problems(company, education)]
        assert "high_delinquency" not in keys

    @pytest.mark.parametrize(
        ("fields", "detected"),
        [
            ({"debt_level": "Alto"}, True),
            ({"debt_level": " alto "}, True),
            ({"debt_level": "Médio"}, False),
            ({"monthly_financial_cost": 12}, True),
            ({"monthly_financial_cost": 10}, False),
        ],
    )
    def test_tight_cash_flow(self, fields: dict[str, Any], detected: bool) -> None:
        keys = [g.key for g in detect_problems(_healthy(**fields), TECH)]
        assert ("tight_cash_flow" in keys) is detected

    @pytest.mark.parametrize(
        ("fields", "key"),
        [
            ({"kpi_dashboards": "Não"}, "missing_dashboards"),
            ({"kpi_dashboards": "parcial"}, "missing_dashboards"),
            ({"ai_usage": "Não"}, "no_ai"),
            ({"crm_tool": "Não"}, "crm_underused"),
            ({"sales_funnel": "Não"}, "crm_underused"),
        ],
    )
    def test_whole_answer_triggers(self, fields: dict[str, Any], key: str) -> None:
        assert [g.key for g in detect_problems(_healthy(**fields), TECH)] == [key]

    def test_partial_answers_do_not_trigger(self) -> None:
        company = _healthy(crm_tool="Não utilizo", ai_usage="Não ainda, mas queremos")
        assert detect_problems(company, TECH) == []


class TestTacticPriority:
    @pytest.mark.parametrize(
        ("area", "index", "priority"),
        [
            (Area.COMMERCIAL, 0, Priority.HIGH),
            (Area.COMMERCIAL, 1, Priority.MEDIUM),
            (Area.COMMERCIAL, 2, Priority.LOW),
            (Area.MARKETING, 2, Priority.LOW),
            (Area.TECHNOLOGY, 0, Priority.HIGH),
            (Area.TECHNOLOGY, 1, Priority.MEDIUM),
            (Area.TECHNOLOGY, 2, Priority.MEDIUM),
        ],
    )
    def test_priority_by_position(self, area: Area, index: int, priority: Priority) -> None:
        assert tactic_priority(area, index) == priority


class TestGenerateTacticalRecommendations:
    def test_blank_survey_sorted_by_priority(self) -> None:
        tactics = generate_tactical_recommendations(CompanyRecord(), DEFAULT)

        assert len(tactics) == 13
        assert [t.title for t in tactics if t.priority == Priority.HIGH] == [
            "Adopt the SPIN Selling Methodology",
            "Bundling and Upsell Strategy",
            "High-Value Lead Magnet",
            "ABC Cost Analysis",
            "Introduce OKRs",
        ]
        assert [t.title for t in tactics[-3:]] == [
            "Proposal Review and Standardization",
            "Structured LinkedIn Outbound",
            "Cut Loss-Making Products and Services",
        ]
        assert all(t.priority == Priority.LOW for t in tactics[-3:])

    def test_tactic_fields(self) -> None:
        spin = generate_tactical_recommendations(CompanyRecord(), DEFAULT)[0]

        assert spin.id == 1
        assert spin.area == Area.COMMERCIAL
        assert spin.expected_impact == "Improvement on low conversion rate"
        assert spin.timeframe == "30 days for the initial rollout"
        assert spin.resources == "Low (in-house training)"
        assert spin.steps is not None and len(spin.steps) == 6
        assert spin.steps[0] == "Map the customers' 10 most common objections"
        assert spin.tools == ["Gong.io or Chorus for call recording", "Objection tracking spreadsheet", "Sales playbook"]
        assert spin.metrics is not None and spin.metrics[0] == "Conversion rate per funnel stage"

    def test_capped_at_fifteen(self) -> None:
        tactics = generate_tactical_recommendations(_struggling(), TECH)

        assert len(tactics) == MAX_TACTICS == 15
        # One high per group (13), then the first two medium tactics
        assert [t.priority for t in tactics[:13]] == [Priority.HIGH] * 13
        assert [t.title for t in tactics[13:]] == ["Strict BANT Qualification", "Multithreading Strategy"]

    def test_ids_follow_generation_order(self) -> None:
        tactics = generate_tactical_recommendations(_struggling(), TECH)
        high_ids = [t.id for t in tactics if t.priority == Priority.HIGH]
        assert high_ids == sorted(high_ids)
        assert len({t.id for t in tactics}) == len(tactics)
