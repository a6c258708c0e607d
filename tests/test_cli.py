"""Tests for the bizpulse CLI."""

import json
from pathlib import Path
from unittest.mock import AsyncMock, patch

import pytest
import yaml
from typer.testing import CliRunner

from bizpulse import __version__
from bizpulse.advisor import AdvisorResponse
from bizpulse.cli import app

runner = CliRunner()


@pytest.fixture()
def company_file(tmp_path: Path) -> Path:
    path = tmp_path / "company.yaml"
    path.write_text(
        yaml.dump(
            {
                "empresa": "Oficina Rápida",
                "setor": "Serviços",
                "cidade": "Belo Horizonte",
                "lucroLiquido6MesesPercent": "11,2",
                "nps": 48,
                "turnover12Meses": 37.5,
            },
            allow_unicode=True,
        ),
        encoding="utf-8",
    )
    return path


@pytest.mark.integration
class TestCLICommands:
    def test_version(self) -> None:
        result = runner.invoke(app, ["--version"])
        assert result.exit_code == 0
        assert __version__ in result.stdout

    def test_analyze(self, company_file: Path) -> None:
        result = runner.invoke(app, ["analyze", str(company_file)])
        assert result.exit_code == 0
        assert "Maturity Scores" in result.stdout
        assert "Talent Retention Program" in result.stdout

    def test_analyze_saves_json(self, company_file: Path, tmp_path: Path) -> None:
        output = tmp_path / "report.json"
        result = runner.invoke(app, ["analyze", str(company_file), "--output", str(output)])

        assert result.exit_code == 0
        data = json.loads(output.read_text(encoding="utf-8"))
        assert data["company"] == "Oficina Rápida"
        assert data["benchmark"]["sector"] == "Serviços"

    def test_analyze_saves_markdown(self, company_file: Path, tmp_path: Path) -> None:
        output = tmp_path / "report.md"
        result = runner.invoke(app, ["analyze", str(company_file), "-o", str(output)])

        assert result.exit_code == 0
        assert output.read_text(encoding="utf-8").startswith("# 📈 BizPulse Maturity Report")

    def test_analyze_with_tactics(self, company_file: Path, tmp_path: Path) -> None:
        output = tmp_path / "report.json"
        result = runner.invoke(app, ["analyze", str(company_file), "--tactics", "-o", str(output)])

        assert result.exit_code == 0
        assert "Tactical Playbook" in result.stdout
        assert "[HIGH]" in result.stdout
        data = json.loads(output.read_text(encoding="utf-8"))
        assert data["tactics"]
        assert len(data["action_plan"]) == 12

    def test_analyze_without_tactics_flag(self, company_file: Path) -> None:
        result = runner.invoke(app, ["analyze", str(company_file)])
        assert "Tactical Playbook" not in result.stdout

    def test_analyze_missing_file(self, tmp_path: Path) -> None:
        result = runner.invoke(app, ["analyze", str(tmp_path / "nope.yaml")])
        assert result.exit_code == 1

    def test_analyze_rejects_non_mapping(self, tmp_path: Path) -> None:
        path = tmp_path / "list.yaml"
        path.write_text("- a\n- b\n")
        result = runner.invoke(app, ["analyze", str(path)])
        assert result.exit_code == 1

    def test_analyze_rejects_invalid_data(self, tmp_path: Path) -> None:
        path = tmp_path / "bad.json"
        path.write_text(json.dumps({"notaPessoasLideranca": "8,5"}))
        result = runner.invoke(app, ["analyze", str(path)])
        assert result.exit_code == 1

    def test_benchmarks(self) -> None:
        result = runner.invoke(app, ["benchmarks"])
        assert result.exit_code == 0
        assert "Sector Benchmarks" in result.stdout
        assert "Tecnologia" in result.stdout

    def test_advise_without_key(self, company_file: Path, monkeypatch: pytest.MonkeyPatch) -> None:
        for var in ("BIZPULSE_API_KEY", "OPENAI_API_KEY", "ANTHROPIC_API_KEY"):
            monkeypatch.delenv(var, raising=False)
        result = runner.invoke(app, ["advise", str(company_file)])
        assert result.exit_code == 1
        assert "No API key" in result.stdout
        for var in ("BIZPULSE_API_KEY", "OPENAI_API_KEY", "ANTHROPIC_API_KEY"):
            assert var in result.stdout

    @patch("bizpulse.advisor.AIAdvisor.narrate", new_callable=AsyncMock)
    def test_advise_accepts_anthropic_key(
        self,
        mock_narrate: AsyncMock,
        company_file: Path,
        monkeypatch: pytest.MonkeyPatch,
    ) -> None:
        for var in ("BIZPULSE_API_KEY", "OPENAI_API_KEY"):
            monkeypatch.delenv(var, raising=False)
        monkeypatch.setenv("ANTHROPIC_API_KEY", "sk-ant")
        mock_narrate.return_value = AdvisorResponse(success=True, recommendation="# Plan")

        result = runner.invoke(app, ["advise", str(company_file)])
        assert result.exit_code == 0
        mock_narrate.assert_awaited_once()

    @patch("bizpulse.advisor.AIAdvisor.narrate", new_callable=AsyncMock)
    def test_advise_writes_narrative(
        self,
        mock_narrate: AsyncMock,
        company_file: Path,
        tmp_path: Path,
        monkeypatch: pytest.MonkeyPatch,
    ) -> None:
        monkeypatch.setenv("BIZPULSE_API_KEY", "test-key")
        mock_narrate.return_value = AdvisorResponse(success=True, recommendation="# Plan\nRaise prices.")
        output = tmp_path / "narrative.md"

        result = runner.invoke(app, ["advise", str(company_file), "--output", str(output)])

        assert result.exit_code == 0
        assert output.read_text(encoding="utf-8") == "# Plan\nRaise prices."

    @patch("bizpulse.advisor.AIAdvisor.narrate", new_callable=AsyncMock)
    def test_advise_failure_exits(
        self,
        mock_narrate: AsyncMock,
        company_file: Path,
        monkeypatch: pytest.MonkeyPatch,
    ) -> None:
        monkeypatch.setenv("BIZPULSE_API_KEY", "test-key")
        mock_narrate.return_value = AdvisorResponse(success=False, recommendation="Try again", error="timeout")

        result = runner.invoke(app, ["advise", str(company_file)])
        assert result.exit_code == 1
