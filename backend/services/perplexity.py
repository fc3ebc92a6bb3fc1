from typing import Dict, Any, List
import httpx

from config.constants import PERPLEXITY_CONFIG
from exceptions import NetworkException, PerplexityAPIException
from models.api_responses import PerplexityMessage, PerplexityResponse

from config import logger


def build_messages(system_message: str, prompt: str) -> List[PerplexityMessage]:
    return [
        {"role": "system", "content": system_message},
        {"role": "user", "content": prompt},
    ]


def _extract_error_message(response: httpx.Response) -> str:
    """Pull the most specific error message out of a failed response."""
    reason = response.reason_phrase or f"HTTP {response.status_code}"
    try:
        data = response.json()
    except ValueError:
        return reason

    if isinstance(data, dict):
        if data.get("message"):
            return str(data["message"])
        error = data.get("error")
        if isinstance(error, dict) and error.get("message"):
            return str(error["message"])
        if isinstance(error, str) and error:
            return error
    return reason


def _parse_completion(data: Any) -> PerplexityResponse:
    choices = data.get("choices") if isinstance(data, dict) else None
    if not isinstance(choices, list) or not choices:
        logger.error("Perplexity response has no choices: %s", data)
        raise PerplexityAPIException("Unexpected response format")

    try:
        content = " ".join(c["message"]["content"] for c in choices)
    except (KeyError, TypeError) as e:
        logger.error("Error parsing Perplexity response structure: %s. Response: %s", e, data)
        raise PerplexityAPIException("Unexpected response format") from e

    citations = data.get("citations")
    if not isinstance(citations, list):
        if citations:
            logger.warning("Ignoring non-list citations in Perplexity response: %r", citations)
        citations = []
    return {
        "content": content,
        "citations": [str(c) for c in citations],
        "raw": data,
    }


async def query_perplexity(
    prompt: str,
    model: str,
    system_message: str,
    api_key: str,
) -> PerplexityResponse:
    """
    Send a single chat-completion request to Perplexity.
    Args:
        prompt: User message content
        model: Perplexity model name
        system_message: System message content
        api_key: Bearer token for the request
    Returns:
        Joined message content of all choices and the citation list
    """
    url = PERPLEXITY_CONFIG.ENDPOINT
    headers = {
        "content-type": "application/json",
        "accept": "application/json",
        "authorization": f"Bearer {api_key}",
    }
    body: Dict[str, Any] = {
        "model": model,
        "messages": build_messages(system_message, prompt),
    }

    logger.info("Querying Perplexity model %s at %s", model, url)
    try:
        async with httpx.AsyncClient(timeout=PERPLEXITY_CONFIG.REQUEST_TIMEOUT) as client:
            response = await client.post(url, headers=headers, json=body)
    except httpx.RequestError as e:
        logger.error("Perplexity request error for URL %s: %s", url, str(e))
        raise NetworkException(str(e)) from e

    if not response.is_success:
        message = _extract_error_message(response)
        logger.error("Perplexity HTTP error %s: %s", response.status_code, message)
        raise PerplexityAPIException(message, status_code=response.status_code)

    try:
        data = response.json()
    except ValueError as e:
        logger.error("Perplexity returned a non-JSON body: %s", response.text)
        raise PerplexityAPIException("Unexpected response format", status_code=response.status_code) from e

    return _parse_completion(data)
