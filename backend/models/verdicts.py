from enum import Enum
from typing import Literal, List, Optional, Dict, Any
from pydantic import BaseModel, Field

from config.constants import REPORT_CONFIG

NextAction = Literal["next_claim", "generate_report"]

class Verdict(str, Enum):
    TRUE = "true"
    FALSE = "false"
    PARTIALLY_TRUE = "partially true"

class FactCheckResult(BaseModel):
    """
    Outcome of checking one claim.

    report_instructions is only set when next_action is "generate_report".
    to_text() renders the plain-text form handed to the report-writing step.
    """
    claim: str
    claim_number: int
    total_claims: int
    verdict: Verdict
    analysis: str
    citations: List[str] = Field(default_factory=list)
    next_action: NextAction
    report_instructions: Optional[str] = None

    @property
    def is_last_claim(self) -> bool:
        return self.next_action == REPORT_CONFIG.GENERATE_REPORT

    def citations_text(self) -> str:
        if not self.citations:
            return ""
        return "\n\nCitations:\n" + "\n".join(
            f"[{i + 1}] {c}" for i, c in enumerate(self.citations)
        )

    def to_text(self) -> str:
        if self.is_last_claim:
            directive = f"\n{self.report_instructions or ''}"
        else:
            directive = REPORT_CONFIG.NEXT_CLAIM_DIRECTIVE
        return (
            f"Claim: {self.claim}\n"
            f"Status: {self.verdict.value}\n"
            f"Analysis: {self.analysis}{self.citations_text()}\n"
            f"\n"
            f"Next Action: {directive}"
        )

    def to_payload(self) -> Dict[str, Any]:
        payload = self.model_dump(mode="json", exclude_none=True)
        payload["formatted"] = self.to_text()
        return payload
