"""
Company record model — one snapshot of the business assessment survey.

Field names are snake_case; each field also accepts the survey column key
(e.g. ``lucroLiquido6MesesPercent``) so form and spreadsheet payloads can be
validated as-is.
"""

from __future__ import annotations

import math
import re
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator

_NUMERIC_FIELDS = (
    "partner_count",
    "employee_count",
    "annual_revenue_target",
    "target_margin",
    "conversion_rate",
    "average_ticket",
    "nps",
    "revenue_6_months",
    "net_margin_percent",
    "customer_acquisition_cost",
    "ltv",
    "delinquency_percent",
    "monthly_financial_cost",
    "funnel_conversion_rate",
    "sales_cycle_days",
    "leads_per_month",
    "average_roas",
    "win_rate",
    "leadership_layers",
    "turnover_12_months",
    "absenteeism",
    "rating_strategy",
    "rating_finance",
    "rating_commercial",
    "rating_operations",
    "rating_people",
    "rating_technology",
)

_EMPTY_MARKERS = ("", "-", "N/A")

# Leading decimal number; trailing text such as units is ignored
_LEADING_NUMBER = re.compile(r"[+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?")


def parse_numeric_value(value: Any) -> float:
    """Parse a survey number, accepting Brazilian formatting.

    ``"R$ 1.234,56"`` -> 1234.56, ``"12,5%"`` -> 12.5, ``"12 clientes"`` -> 12.
    Blank answers, ``"-"``, ``"N/A"``, text without a leading number and
    non-finite values are 0.
    """
    if value is None:
        return 0.0
    if isinstance(value, (int, float)):
        number = float(value)
        return number if math.isfinite(number) else 0.0
    text = str(value).strip()
    if text in _EMPTY_MARKERS:
        return 0.0
    cleaned = re.sub(r"[R$\s]", "", text)
    if "," in cleaned:
        cleaned = cleaned.replace(".", "").replace(",", ".", 1)
    cleaned = cleaned.replace("%", "")
    match = _LEADING_NUMBER.match(cleaned)
    if match is None:
        return 0.0
    number = float(match.group())
    return number if math.isfinite(number) else 0.0


class CompanyRecord(BaseModel):
    """Complete survey answer set for one company.

    Immutable input to the analysis engine. Numbers default to 0 and text
    to an empty string, so partially filled surveys are still analyzable.
    """

    model_config = ConfigDict(frozen=True, populate_by_name=True, allow_inf_nan=False)

    # Identity
    first_name: str = Field(default="", alias="nome")
    last_name: str = Field(default="", alias="sobrenome")
    phone: str = Field(default="", alias="telefone")
    email: str = Field(default="", alias="email")
    company: str = Field(default="", alias="empresa", description="Company name")
    birth_date: str = Field(default="", alias="dataNascimento")
    program_name: str = Field(default="", alias="nomePrisma")
    city: str = Field(default="", alias="cidade")
    tax_id: str = Field(default="", alias="cnpj")
    founded_on: str = Field(default="", alias="dataAbertura")
    sector: str = Field(default="", alias="setor")
    sector_other: str = Field(default="", alias="setorOutro")
    segment: str = Field(default="", alias="segmento")
    instagram: str = Field(default="", alias="instagram")
    website: str = Field(default="", alias="site")

    # Structure
    partner_count: int = Field(default=0, alias="numSocios")
    employee_count: int = Field(default=0, alias="numColaboradores")
    has_goals_plan: str = Field(default="", alias="possuiPlanoMetas")
    management_maturity: str = Field(default="", alias="maturidadeGerencial")
    four_day_expectation: str = Field(default="", alias="expectativa4Dias")
    long_term_vision: str = Field(default="", alias="visao3a5Anos", description="3-5 year vision")

    # Goals
    annual_revenue_target: float = Field(default=0.0, alias="metaFaturamentoAnual")
    target_margin: float = Field(default=0.0, alias="margemLucroAlvo")
    top_objectives: str = Field(default="", alias="topObjetivosAno")
    strategic_kpis: str = Field(default="", alias="kpisEstrategicos")
    okr_initiatives: str = Field(default="", alias="iniciativasOKRs")

    # Constraints and strategy
    main_constraints: str = Field(default="", alias="maioresRestricoes")
    risk_appetite: str = Field(default="", alias="apetiteRisco")
    competitive_advantage: str = Field(default="", alias="vantagemCompetitiva")
    priority_customer: str = Field(default="", alias="clientePrioritario")
    operating_region: str = Field(default="", alias="regiaoAtuacao")

    # Commercial
    acquisition_channels: str = Field(default="", alias="canaisAquisicao", description="Comma-separated")
    conversion_rate: float = Field(default=0.0, alias="taxaConversaoGeral", description="Percent")
    average_ticket: float = Field(default=0.0, alias="ticketMedio")
    nps: float = Field(default=0.0, alias="nps", description="Net Promoter Score, -100..100")
    main_objections: str = Field(default="", alias="principaisObjecoes")
    main_competition: str = Field(default="", alias="concorrenciaPredominante")
    perceived_differentiators: str = Field(default="", alias="diferenciaisPercebidos")

    # Financial
    revenue_6_months: float = Field(default=0.0, alias="faturamento6Meses")
    net_margin_percent: float = Field(default=0.0, alias="lucroLiquido6MesesPercent")
    customer_acquisition_cost: float = Field(default=0.0, alias="custoAquisicaoCliente")
    ltv: float = Field(default=0.0, alias="ltv", description="Customer lifetime value")
    delinquency_percent: float = Field(default=0.0, alias="inadimplenciaPercent")
    debt_level: str = Field(default="", alias="endividamento")
    monthly_financial_cost: float = Field(default=0.0, alias="custoFinanceiroMensal")
    financial_software: str = Field(default="", alias="softwaresFinanceiros")

    # CRM and sales
    crm_tool: str = Field(default="", alias="crmUtilizado")
    sales_funnel: str = Field(default="", alias="funilDefinido")
    funnel_conversion_rate: float = Field(default=0.0, alias="taxaConversaoFunil")
    sales_cycle_days: float = Field(default=0.0, alias="cicloMedioVendas")
    leads_per_month: float = Field(default=0.0, alias="leadsMes")
    paid_channels: str = Field(default="", alias="canaisPagosAtivos")
    average_roas: float = Field(default=0.0, alias="roasMedio")
    top_content: str = Field(default="", alias="conteudosPerformam")
    sales_team: str = Field(default="", alias="timeComercial")
    commission_model: str = Field(default="", alias="modeloComissionamento")
    win_rate: float = Field(default=0.0, alias="winRate", description="Percent")
    loss_reasons: str = Field(default="", alias="motivosPerda")

    # People
    has_org_chart: str = Field(default="", alias="existeOrganograma")
    leadership_layers: int = Field(default=0, alias="camadasLideranca")
    profiles_mapped: str = Field(default="", alias="perfisMapeados")
    turnover_12_months: float = Field(default=0.0, alias="turnover12Meses", description="Percent")
    absenteeism: float = Field(default=0.0, alias="absenteismo", description="Percent")
    management_rituals: str = Field(default="", alias="rituaisGestao")
    goals_model: str = Field(default="", alias="modeloMetas")
    leadership_strengths: str = Field(default="", alias="fortalezasLideranca")
    management_gaps: str = Field(default="", alias="gapsGestao")
    people_gap_areas: str = Field(default="", alias="areasCarenciaPessoas")

    # Technology
    current_stack: str = Field(default="", alias="stackAtual")
    data_location: str = Field(default="", alias="ondeDadosVivem")
    kpi_dashboards: str = Field(default="", alias="dashboardsKPIs")
    ai_usage: str = Field(default="", alias="usoIAHoje")
    desired_integrations: str = Field(default="", alias="integracoesDesejadas")

    # Self-assessment (1-10)
    rating_strategy: int = Field(default=0, alias="notaEstrategiaMetas")
    rating_finance: int = Field(default=0, alias="notaFinancasLucratividade")
    rating_commercial: int = Field(default=0, alias="notaComercialMarketing")
    rating_operations: int = Field(default=0, alias="notaOperacoesQualidade")
    rating_people: int = Field(default=0, alias="notaPessoasLideranca")
    rating_technology: int = Field(default=0, alias="notaTecnologiaDados")

    @field_validator(*_NUMERIC_FIELDS, mode="before")
    @classmethod
    def _coerce_number(cls, value: Any) -> Any:
        if value is None or isinstance(value, str):
            return parse_numeric_value(value)
        return value

    @field_validator("*", mode="before")
    @classmethod
    def _none_to_empty(cls, value: Any) -> Any:
        return "" if value is None else value

