"""Tests for the Markdown exporter."""

from bizpulse.engine import analyze_company
from bizpulse.exporters.markdown import render_markdown
from bizpulse.models.company import CompanyRecord


def _company() -> CompanyRecord:
    return CompanyRecord(
        company="Loja Bela Vista",
        sector="Comércio varejista",
        city="Salvador",
        net_margin_percent=4,
        delinquency_percent=7,
        nps=35,
        turnover_12_months=40,
        annual_revenue_target=1_500_000,
        revenue_6_months=500_000,
    )


class TestMarkdownExporter:
    def test_basic_render(self) -> None:
        md = render_markdown(analyze_company(CompanyRecord(company="Test Corp")))
        assert "Test Corp" in md
        assert "BizPulse" in md
        assert "Sector: Not provided" in md

    def test_scores_and_status(self) -> None:
        result = analyze_company(_company())
        md = render_markdown(result)

        assert f"| **Overall** | **{result.scores.overall}/100** | |" in md
        assert "| Technology | 40/100 | 🟡 attention |" in md
        assert "**Focus areas:** Technology" in md

    def test_render_with_recommendations(self) -> None:
        md = render_markdown(analyze_company(_company()))

        assert "## 💡 Priority Recommendations" in md
        assert "Delinquency Reduction" in md
        assert "Gap of R$ 500.000 to reach the annual target" in md
        assert "**Expected impact:**" in md

    def test_action_plan_grouped_by_phase(self) -> None:
        md = render_markdown(analyze_company(_company()))

        assert "## 🗓️ 90-Day Action Plan" in md
        assert md.index("### Diagnosis") < md.index("### Quick Wins") < md.index("### Closing")
        assert "**Week 12** — Week 12" in md

    def test_benchmark_section(self) -> None:
        md = render_markdown(analyze_company(_company()))

        assert "## 📏 Sector Benchmark — Comércio" in md
        assert "| Average ticket | R$ 250 |" in md
        assert "| Sales cycle | 7 days |" in md

    def test_result_to_markdown(self) -> None:
        result = analyze_company(_company())
        assert result.to_markdown() == render_markdown(result)

    def test_benchmark_delinquency_row(self) -> None:
        md = render_markdown(analyze_company(_company()))
        assert "| Delinquency | 4% |" in md


class TestTacticalPlaybookExport:
    def test_playbook_absent_by_default(self) -> None:
        assert "Tactical Playbook" not in render_markdown(analyze_company(_company()))

    def test_playbook_section(self) -> None:
        md = render_markdown(analyze_company(_company(), tactics=True))

        assert "## 🧭 Tactical Playbook" in md
        assert "Adopt the SPIN Selling Methodology" in md
        assert "1. Map the customers' 10 most common objections" in md
        assert "**Tools:** Gong.io or Chorus for call recording" in md
        assert md.index("## 💡 Priority Recommendations") < md.index("## 🧭 Tactical Playbook")
        assert md.index("## 🧭 Tactical Playbook") < md.index("## 🗓️ 90-Day Action Plan")

    def test_detailed_plan_phases(self) -> None:
        md = render_markdown(analyze_company(_company(), tactics=True))

        assert md.index("### Diagnosis") < md.index("### Planning") < md.index("### Quick Wins")
        assert "**Week 3** — Deliver improvements with immediate impact" in md
        assert "**Week 12** — Final review and planning of the next quarter" in md

    def test_empty_tactic_week(self) -> None:
        healthy = CompanyRecord(
            company="Tech Sólida",
            sector="Tecnologia",
            conversion_rate=4,
            average_ticket=2000,
            leads_per_month=150,
            net_margin_percent=20,
            rating_operations=8,
        )
        md = render_markdown(analyze_company(healthy, tactics=True))

        assert "Tactical Playbook" not in md
        assert "*No actions scheduled*" in md
