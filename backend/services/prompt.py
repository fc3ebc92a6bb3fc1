from prompts import FACT_CHECK_PROMPT


def build_fact_check_prompt(claim: str) -> str:
    return FACT_CHECK_PROMPT.format(claim=claim)
