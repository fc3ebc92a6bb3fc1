from dataclasses import dataclass
from typing import Any, TypedDict, Optional
from pydantic import BaseModel, Field

from config.constants import PERPLEXITY_CONFIG

class ClaimParams(TypedDict):
    """A single claim and its position in the caller's batch."""
    claim: str
    claim_number: int
    total_claims: int

class UserSettings(TypedDict, total=False):
    """Caller-supplied Perplexity settings; only api_key is required."""
    api_key: str
    model: Optional[str]
    system_message: Optional[str]

@dataclass(frozen=True)
class FactCheckConfig:
    """Resolved per-call settings with defaults applied."""
    api_key: str
    model: str = PERPLEXITY_CONFIG.DEFAULT_MODEL
    system_message: str = PERPLEXITY_CONFIG.DEFAULT_SYSTEM_MESSAGE

class FactCheckRequest(BaseModel):
    """Request body for /fact-check endpoint."""
    claim: str
    # Left untyped so InputValidator rejects strings and booleans.
    claim_number: Any
    total_claims: Any
    api_key: Optional[str] = Field(default=None, repr=False)
    model: Optional[str] = None
    system_message: Optional[str] = None

    model_config = {
        "protected_namespaces": (),
        "json_schema_extra": {
            "example": {
                "claim": "The Great Wall of China is visible from space with the naked eye.",
                "claim_number": 1,
                "total_claims": 3,
            }
        },
    }
