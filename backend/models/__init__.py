from .api_responses import (
    PerplexityMessage,
    PerplexityResponse,
)
from .claims import (
    ClaimParams,
    UserSettings,
    FactCheckConfig,
    FactCheckRequest,
)
from .verdicts import (
    Verdict,
    NextAction,
    FactCheckResult,
)

__all__ = [
    "PerplexityMessage",
    "PerplexityResponse",

    "ClaimParams",
    "UserSettings",
    "FactCheckConfig",
    "FactCheckRequest",

    "Verdict",
    "NextAction",
    "FactCheckResult",
]
