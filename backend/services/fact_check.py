from typing import Any, Mapping

from config import logger
from exceptions import FactCheckException
from models.verdicts import FactCheckResult
from utils.validation import InputValidator
from .classifier import determine_truth_status
from .formatter import build_result
from .perplexity import query_perplexity
from .prompt import build_fact_check_prompt


async def fact_check_claim(
    params: Mapping[str, Any],
    user_settings: Mapping[str, Any],
) -> FactCheckResult:
    """
    Fact-check one claim with Perplexity and tell the caller what to do next.
    Args:
        params: claim, claim_number and total_claims
        user_settings: api_key plus optional model and system_message
    Returns:
        FactCheckResult with verdict, analysis, citations and next_action
    """
    claim_params, config = InputValidator.validate(params, user_settings)
    claim = claim_params["claim"]
    claim_number = claim_params["claim_number"]
    total_claims = claim_params["total_claims"]

    logger.info(
        "Fact-checking claim %s/%s: '%s...'", claim_number, total_claims, claim[:50]
    )

    prompt = build_fact_check_prompt(claim)

    try:
        response = await query_perplexity(
            prompt, config.model, config.system_message, config.api_key
        )
        verdict = determine_truth_status(response["content"])
        result = build_result(
            claim=claim,
            claim_number=claim_number,
            total_claims=total_claims,
            verdict=verdict,
            analysis=response["content"],
            citations=response["citations"],
        )
    except FactCheckException:
        raise
    except Exception as e:
        logger.exception("Unexpected error during fact-check.")
        raise FactCheckException(f"Fact-checking failed: {str(e)}") from e

    logger.info(
        "Claim %s/%s verdict: %s, next action: %s",
        claim_number, total_claims, result.verdict.value, result.next_action
    )
    return result
