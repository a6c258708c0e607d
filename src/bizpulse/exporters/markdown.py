"""
Markdown report exporter.

Generates a Markdown maturity report from an AnalysisResult,
suitable for GitHub, Notion, or any Markdown viewer.
"""

from __future__ import annotations

from bizpulse.action_plan import normalize_action_plan
from bizpulse.formatting import fmt_brl, fmt_number
from bizpulse.models.analysis import AnalysisResult, DiagnosisStatus, Dimension, Priority, Recommendation

_STATUS_EMOJI = {
    DiagnosisStatus.EXCELLENT: "🟢",
    DiagnosisStatus.ADEQUATE: "🔵",
    DiagnosisStatus.ATTENTION: "🟡",
    DiagnosisStatus.CRITICAL: "🔴",
}

_PRIORITY_EMOJI = {
    Priority.HIGH: "🔴",
    Priority.MEDIUM: "🟡",
    Priority.LOW: "🟢",
}


def render_markdown(result: AnalysisResult) -> str:
    """Render an AnalysisResult as Markdown."""
    lines: list[str] = []

    # Header
    lines.append(f"# 📈 BizPulse Maturity Report — {result.company or 'Unnamed company'}")
    lines.append("")
    lines.append(f"*Sector: {result.sector} | City: {result.city} | Benchmark: {result.benchmark.sector}*")
    lines.append("")

    # Scores
    scores = result.scores
    diagnoses = result.diagnoses
    lines.append("## 📊 Maturity Scores")
    lines.append("")
    lines.append("| Dimension | Score | Status |")
    lines.append("|-----------|-------|--------|")
    lines.append(f"| **Overall** | **{scores.overall}/100** | |")
    for dimension, score in scores.by_dimension().items():
        status = diagnoses[dimension].status
        lines.append(
            f"| {dimension.value.title()} | {score}/100 | {_STATUS_EMOJI[status]} {status.value} |"
        )
    lines.append("")

    focus = [dimension.value.title() for dimension, _ in scores.ranked()[:2]]
    lines.append(f"**Focus areas:** {', '.join(focus)}")
    lines.append("")

    # Diagnoses
    lines.append("## 🔍 Diagnosis")
    lines.append("")
    for dimension in Dimension:
        diagnosis = diagnoses[dimension]
        lines.append(f"### {_STATUS_EMOJI[diagnosis.status]} {diagnosis.area}")
        lines.append("")
        for label, items in (
            ("Strengths", diagnosis.strengths),
            ("Concerns", diagnosis.concerns),
            ("Opportunities", diagnosis.opportunities),
        ):
            if not items:
                continue
            lines.append(f"**{label}:**")
            for item in items:
                lines.append(f"- {item}")
            lines.append("")

    # Recommendations
    if result.recommendations:
        lines.append("## 💡 Priority Recommendations")
        lines.append("")
        for rec in result.recommendations:
            _render_recommendation(lines, rec)

    # Tactical playbook
    if result.tactics:
        lines.append("## 🧭 Tactical Playbook")
        lines.append("")
        for rec in result.tactics:
            _render_recommendation(lines, rec)

    # Action plan, grouped by phase
    if result.action_plan:
        lines.append("## 🗓️ 90-Day Action Plan")
        lines.append("")
        current_phase = None
        for week in normalize_action_plan(result.action_plan):
            if week.phase != current_phase:
                current_phase = week.phase
                lines.append(f"### {current_phase}")
                lines.append("")
            lines.append(f"**Week {week.week}** — {week.objective}")
            lines.append("")
            if not week.actions:
                lines.append("*No actions scheduled*")
                lines.append("")
                continue
            lines.append("| Action | Owner | Deliverable |")
            lines.append("|--------|-------|-------------|")
            for action in week.actions:
                lines.append(f"| {action.action} | {action.owner} | {action.deliverable} |")
            lines.append("")

    # Benchmark
    bench = result.benchmark
    lines.append(f"## 📏 Sector Benchmark — {bench.sector}")
    lines.append("")
    lines.append("| Metric | Reference |")
    lines.append("|--------|-----------|")
    lines.append(f"| Net margin | {fmt_number(bench.average_margin)}% |")
    lines.append(f"| Average ticket | R$ {fmt_brl(bench.average_ticket)} |")
    lines.append(f"| Conversion rate | {fmt_number(bench.average_conversion_rate)}% |")
    lines.append(f"| NPS | {fmt_number(bench.reference_nps)} |")
    lines.append(f"| Turnover (12 months) | {fmt_number(bench.average_turnover)}% |")
    lines.append(f"| Sales cycle | {fmt_number(bench.average_sales_cycle_days)} days |")
    lines.append(f"| Delinquency | {fmt_number(bench.average_delinquency)}% |")
    lines.append("")

    # Footer
    lines.append("---")
    lines.append("*Report generated by BizPulse — business maturity assessment*")

    return "\n".join(lines)


def _render_recommendation(lines: list[str], rec: Recommendation) -> None:
    emoji = _PRIORITY_EMOJI[rec.priority]
    lines.append(f"### {emoji} {rec.id}. {rec.title}")
    lines.append("")
    lines.append(
        f"**Area:** {rec.area.value} | **Priority:** {rec.priority.value} | "
        f"**Timeframe:** {rec.timeframe}"
    )
    lines.append("")
    lines.append(rec.description)
    lines.append("")
    lines.append(f"**Expected impact:** {rec.expected_impact}")
    lines.append("")
    lines.append(f"**Resources:** {rec.resources}")
    lines.append("")
    if rec.steps:
        lines.append("**Steps:**")
        for i, step in enumerate(rec.steps, 1):
            lines.append(f"{i}. {step}")
        lines.append("")
    if rec.tools:
        lines.append(f"**Tools:** {', '.join(rec.tools)}")
        lines.append("")
    if rec.metrics:
        lines.append(f"**Success metrics:** {', '.join(rec.metrics)}")
        lines.append("")
    lines.append("---")
    lines.append("")
