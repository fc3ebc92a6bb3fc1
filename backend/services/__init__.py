from .perplexity import query_perplexity
from .prompt import build_fact_check_prompt
from .classifier import determine_truth_status
from .formatter import build_result, determine_next_action, format_result
from .fact_check import fact_check_claim

__all__ = [
    "query_perplexity",
    "build_fact_check_prompt",
    "determine_truth_status",
    "build_result",
    "determine_next_action",
    "format_result",
    "fact_check_claim",
]
