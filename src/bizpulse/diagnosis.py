"""
Dimension Diagnosis Generators.

Each generator walks the same answers its score calculator reads (plus a
few qualitative fields) and sorts findings into strengths, concerns and
opportunities. The status comes from the score alone, never from the
buckets.
"""

from __future__ import annotations

from bizpulse.formatting import answered_yes, contains_any, filled, fmt_number, truncate
from bizpulse.models.analysis import DiagnosisStatus, DimensionDiagnosis
from bizpulse.models.benchmark import SectorBenchmark
from bizpulse.models.company import CompanyRecord


def status_from_score(score: int) -> DiagnosisStatus:
    if score >= 80:
        return DiagnosisStatus.EXCELLENT
    if score >= 60:
        return DiagnosisStatus.ADEQUATE
    if score >= 40:
        return DiagnosisStatus.ATTENTION
    return DiagnosisStatus.CRITICAL


def diagnose_financial(company: CompanyRecord, benchmark: SectorBenchmark, score: int) -> DimensionDiagnosis:
    strengths: list[str] = []
    concerns: list[str] = []
    opportunities: list[str] = []

    margin = company.net_margin_percent
    if margin >= benchmark.average_margin:
        strengths.append(
            f"Net margin of {fmt_number(margin)}% is above the sector average "
            f"({fmt_number(benchmark.average_margin)}%)"
        )
    elif margin > 0:
        concerns.append(
            f"Net margin of {fmt_number(margin)}% is below the sector average "
            f"({fmt_number(benchmark.average_margin)}%)"
        )
        opportunities.append("Review cost structure and pricing to improve margin")

    delinquency = company.delinquency_percent
    if delinquency <= 3:
        strengths.append(f"Delinquency under control at {fmt_number(delinquency)}%")
    elif delinquency > 5:
        concerns.append(f"Delinquency of {fmt_number(delinquency)}% requires immediate attention")
        opportunities.append("Adopt a stricter credit policy and proactive collections")

    if company.ltv > 0 and company.customer_acquisition_cost > 0:
        ratio = company.ltv / company.customer_acquisition_cost
        if ratio >= 3:
            strengths.append(f"Excellent LTV/CAC ratio of {ratio:.1f}x")
        elif ratio < 2:
            concerns.append(f"LTV/CAC ratio of {ratio:.1f}x calls for optimization")
            opportunities.append("Increase customer retention or reduce acquisition cost")

    if contains_any(company.debt_level, "alto", "crítico"):
        concerns.append("High indebtedness is holding back growth")
        opportunities.append("Renegotiate debt and build a deleveraging plan")

    return DimensionDiagnosis(
        area="Finance & Profitability",
        status=status_from_score(score),
        strengths=strengths,
        concerns=concerns,
        opportunities=opportunities,
    )


def diagnose_commercial(company: CompanyRecord, benchmark: SectorBenchmark, score: int) -> DimensionDiagnosis:
    strengths: list[str] = []
    concerns: list[str] = []
    opportunities: list[str] = []

    nps = company.nps
    if nps >= 70:
        strengths.append(f"NPS of {fmt_number(nps)} shows high satisfaction and referral potential")
    elif nps >= 50:
        strengths.append(f"NPS of {fmt_number(nps)} is in the quality zone")
    elif 0 < nps < 30:
        concerns.append(f"NPS of {fmt_number(nps)} points to customer experience problems")
        opportunities.append("Map the customer journey and find friction points")

    conversion = company.conversion_rate
    if conversion >= benchmark.average_conversion_rate:
        strengths.append(f"Conversion rate of {fmt_number(conversion)}% is above the market")
    elif conversion > 0:
        concerns.append(f"Conversion rate of {fmt_number(conversion)}% can be optimized")
        opportunities.append("Review the sales process and lead qualification")

    if not answered_yes(company.sales_funnel):
        concerns.append("Sales funnel is not clearly defined")
        opportunities.append("Structure the sales funnel with clear stages and metrics")

    if not company.crm_tool or contains_any(company.crm_tool, "não"):
        concerns.append("No CRM makes relationship management harder")
        opportunities.append("Adopt a CRM to centralize customer information")

    if company.acquisition_channels and len(company.acquisition_channels.split(",")) >= 3:
        strengths.append("Healthy diversification of acquisition channels")
    else:
        opportunities.append("Diversify acquisition channels to reduce dependency")

    return DimensionDiagnosis(
        area="Sales & Marketing",
        status=status_from_score(score),
        strengths=strengths,
        concerns=concerns,
        opportunities=opportunities,
    )


def diagnose_operational(company: CompanyRecord, score: int) -> DimensionDiagnosis:
    strengths: list[str] = []
    concerns: list[str] = []
    opportunities: list[str] = []

    if answered_yes(company.has_goals_plan):
        strengths.append("Has a structured goals plan and budget")
    else:
        concerns.append("Lack of a goals plan undermines direction")
        opportunities.append("Develop strategic planning with SMART goals")

    if filled(company.strategic_kpis, 20):
        strengths.append("Strategic KPIs defined and tracked")
    else:
        concerns.append("Strategic KPIs are not clearly defined")
        opportunities.append("Define KPIs per area aligned with strategic objectives")

    if filled(company.long_term_vision, 20):
        strengths.append("Medium/long-term vision defined")
    else:
        opportunities.append("Build a 3-5 year strategic vision with clear milestones")

    if company.rating_strategy >= 7:
        strengths.append("Good internal perception of strategy and goals")

    return DimensionDiagnosis(
        area="Strategy & Operations",
        status=status_from_score(score),
        strengths=strengths,
        concerns=concerns,
        opportunities=opportunities,
    )


def diagnose_people(company: CompanyRecord, benchmark: SectorBenchmark, score: int) -> DimensionDiagnosis:
    strengths: list[str] = []
    concerns: list[str] = []
    opportunities: list[str] = []

    turnover = company.turnover_12_months
    if turnover > 0:
        if turnover < benchmark.average_turnover:
            strengths.append(f"Turnover of {fmt_number(turnover)}% is below the sector average")
        elif turnover > benchmark.average_turnover * 1.3:
            concerns.append(f"Turnover of {fmt_number(turnover)}% is high for the sector")
            opportunities.append("Run a climate survey and put a retention plan in place")

    if answered_yes(company.has_org_chart):
        strengths.append("Organizational structure defined with an org chart")
    else:
        concerns.append("No formal org chart")
        opportunities.append("Define an org chart with clear roles and responsibilities")

    if answered_yes(company.profiles_mapped):
        strengths.append("Team behavioral profiles are mapped")
    else:
        opportunities.append("Map behavioral profiles for better allocation")

    if filled(company.management_rituals, 10):
        strengths.append("Management rituals established")
    else:
        concerns.append("Management rituals are not formalized")
        opportunities.append("Introduce alignment meetings and structured feedback")

    if filled(company.management_gaps, 10):
        concerns.append(f"Gaps identified: {truncate(company.management_gaps, 100)}")

    return DimensionDiagnosis(
        area="People & Leadership",
        status=status_from_score(score),
        strengths=strengths,
        concerns=concerns,
        opportunities=opportunities,
    )


def diagnose_technology(company: CompanyRecord, score: int) -> DimensionDiagnosis:
    strengths: list[str] = []
    concerns: list[str] = []
    opportunities: list[str] = []

    if filled(company.current_stack, 20):
        strengths.append("Technology stack defined and in use")
    else:
        concerns.append("Technology stack is limited or undocumented")
        opportunities.append("Map needs and define a stack fit for the business")

    if answered_yes(company.kpi_dashboards):
        strengths.append("KPI dashboards in place")
    else:
        concerns.append("No dashboards to track KPIs")
        opportunities.append("Build dashboards for data-driven decisions")

    if contains_any(company.ai_usage, "sim", "utiliz"):
        strengths.append("Already uses artificial intelligence in its processes")
    else:
        opportunities.append("Explore AI for automation and insights")

    if contains_any(company.data_location, "planilha", "excel"):
        concerns.append("Data scattered across spreadsheets makes analysis harder")
        opportunities.append("Centralize data in an integrated system")

    if filled(company.desired_integrations, 10):
        opportunities.append(f"Prioritize integrations: {truncate(company.desired_integrations, 80)}")

    return DimensionDiagnosis(
        area="Technology & Data",
        status=status_from_score(score),
        strengths=strengths,
        concerns=concerns,
        opportunities=opportunities,
    )
