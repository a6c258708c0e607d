"""
BizPulse — business maturity assessment for small and medium companies.

Score. Diagnose. Recommend.
Turns a company's survey answers into dimension scores, a diagnosis,
prioritized recommendations and a 90-day action plan.
"""

__version__ = "0.3.0"
__all__ = ["AnalysisResult", "CompanyRecord", "analyze_company"]

from bizpulse.engine import analyze_company  # noqa: E402
from bizpulse.models.analysis import AnalysisResult  # noqa: E402
from bizpulse.models.company import CompanyRecord  # noqa: E402
