from typing import List

from config.constants import REPORT_CONFIG
from models.verdicts import FactCheckResult, NextAction, Verdict
from prompts import REPORT_INSTRUCTIONS


def determine_next_action(claim_number: int, total_claims: int) -> NextAction:
    if claim_number < total_claims:
        return REPORT_CONFIG.NEXT_CLAIM
    return REPORT_CONFIG.GENERATE_REPORT


def build_result(
    claim: str,
    claim_number: int,
    total_claims: int,
    verdict: Verdict,
    analysis: str,
    citations: List[str],
) -> FactCheckResult:
    next_action = determine_next_action(claim_number, total_claims)
    return FactCheckResult(
        claim=claim,
        claim_number=claim_number,
        total_claims=total_claims,
        verdict=verdict,
        analysis=analysis,
        citations=list(citations),
        next_action=next_action,
        report_instructions=(
            REPORT_INSTRUCTIONS if next_action == REPORT_CONFIG.GENERATE_REPORT else None
        ),
    )


def format_result(result: FactCheckResult) -> str:
    return result.to_text()
