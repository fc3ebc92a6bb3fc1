from typing import TypedDict, List, Dict, Any

class PerplexityMessage(TypedDict):
    role: str
    content: str

class PerplexityResponse(TypedDict):
    """Parsed reply from the Perplexity chat-completions endpoint."""
    content: str
    citations: List[str]
    raw: Dict[str, Any]
