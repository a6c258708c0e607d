"""
AI Advisor — optional generative narrative on top of a finished analysis.

Takes the company record and its ``AnalysisResult`` and asks an LLM (via
litellm, any provider) for a consultant-style report. Purely additive: the
deterministic engine never calls it and nothing here changes the result.
"""

from __future__ import annotations

import json
import logging
from typing import TYPE_CHECKING

import litellm
from pydantic import BaseModel

from bizpulse.models.analysis import AnalysisResult
from bizpulse.models.company import CompanyRecord

if TYPE_CHECKING:
    from bizpulse.config import BizPulseConfig, LLMConfig

logger = logging.getLogger("bizpulse.advisor")

FALLBACK_MESSAGE = "Could not generate the AI recommendations right now. Please try again."

_REPORT_SECTIONS = """\
### 1. EXECUTIVE DIAGNOSIS (3-4 paragraphs)
Overall assessment of the company, its most critical strengths and weaknesses.

### 2. TOP 5 PRIORITY ACTIONS (next 30 days)
For each action:
- What to do (specific)
- Why it is urgent
- Expected result
- Estimated investment (if applicable)

### 3. SALES AND MARKETING STRATEGY
- Specific tactics to increase sales
- Acquisition channels recommended for the sector
- Campaign and content suggestions
- Metrics to track

### 4. FINANCIAL MANAGEMENT
- Margin and profitability analysis
- Cost reduction recommendations
- Pricing strategies
- Financial indicators to monitor

### 5. PEOPLE AND PROCESS MANAGEMENT
- Recommended organizational structure
- Priority processes to document
- Culture and engagement
- HR indicators

### 6. TECHNOLOGY AND INNOVATION
- Tools recommended for the company's size and sector
- Priority automations
- Use of AI in the business
- Technology roadmap

### 7. 90-DAY ACTION PLAN
Month-by-month schedule with specific deliverables."""


class AdvisorResponse(BaseModel):
    """Outcome of one AI advisor call."""

    success: bool
    recommendation: str
    model: str | None = None
    error: str | None = None


class AIAdvisor:
    """Senior-consultant persona that narrates an analysis with an LLM."""

    name: str = "ai_advisor"

    def __init__(self, config: BizPulseConfig) -> None:
        self.config = config
        self.llm_config: LLMConfig = config.llm

    @property
    def system_prompt(self) -> str:
        return f"""You are an experienced CEO and senior business consultant, expert in:
- Corporate finance and financial management
- Digital and traditional marketing
- CRM and customer relationship management
- Sales and commercial strategy
- Artificial Intelligence applied to business
- People management and organizational culture
- Processes and operations

Your role is to analyze a company's data and give HIGHLY PERSONALIZED, PRACTICAL
and ACTIONABLE recommendations.

RULES:
1. Be specific - no generic advice. Use the company's actual data.
2. Prioritize by impact - start with what yields the most result in the least time.
3. Include numbers and metrics whenever possible.
4. Suggest specific tools and methodologies.
5. Consider the company's size and sector.
6. Answer in {self.config.language}.
7. Use markdown formatting to organize the answer."""

    def _build_prompt(self, company: CompanyRecord, result: AnalysisResult) -> str:
        scores = result.scores
        survey = json.dumps(company.model_dump(exclude_defaults=True), indent=2, ensure_ascii=False)
        return f"""Analyze this company's data and write a complete CEO report with:

## Company Data
- **Name**: {result.company}
- **Sector**: {result.sector}
- **City**: {result.city}

## Maturity Scores (0-100)
- **Overall Score**: {scores.overall}/100
- **Financial**: {scores.financial}/100
- **Commercial**: {scores.commercial}/100
- **Operational**: {scores.operational}/100
- **People**: {scores.people}/100
- **Technology**: {scores.technology}/100

## Detailed Data
{survey}

Provide:

{_REPORT_SECTIONS}"""

    async def narrate(self, company: CompanyRecord, result: AnalysisResult) -> AdvisorResponse:
        """Generate the narrative report. Provider failures yield ``success=False``."""
        messages = [
            {"role": "system", "content": self.system_prompt},
            {"role": "user", "content": self._build_prompt(company, result)},
        ]
        try:
            response = await litellm.acompletion(
                model=self.llm_config.model,
                messages=messages,
                temperature=self.llm_config.temperature,
                max_tokens=self.llm_config.max_tokens,
                api_key=self.llm_config.api_key,
                api_base=self.llm_config.api_base,
                timeout=self.llm_config.timeout,
            )
        except Exception as exc:  # noqa: BLE001
            logger.error("Failed to generate AI recommendations: %s", exc)
            return AdvisorResponse(success=False, recommendation=FALLBACK_MESSAGE, error=str(exc))

        content = response.choices[0].message.content or ""
        logger.debug("[%s] LLM response: %s...", self.name, content[:200])
        model = getattr(response, "model", None)
        return AdvisorResponse(
            success=True,
            recommendation=content,
            model=model if isinstance(model, str) else self.llm_config.model,
        )
