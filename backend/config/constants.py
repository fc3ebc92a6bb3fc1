from dataclasses import dataclass
from typing import Optional

@dataclass(frozen=True)
class PerplexityConfig:
    ENDPOINT: str = "https://api.perplexity.ai/chat/completions"
    DEFAULT_MODEL: str = "sonar"
    DEFAULT_SYSTEM_MESSAGE: str = (
        "Fact check the following claim and provide citations to support your analysis."
    )
    # None disables the client timeout entirely.
    REQUEST_TIMEOUT: Optional[float] = None

@dataclass(frozen=True)
class ReportConfig:
    NEXT_CLAIM: str = "next_claim"
    GENERATE_REPORT: str = "generate_report"
    NEXT_CLAIM_DIRECTIVE: str = "Continue with next claim"

PERPLEXITY_CONFIG = PerplexityConfig()
REPORT_CONFIG = ReportConfig()
