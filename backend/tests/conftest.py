import pytest
import os
import sys
from pathlib import Path
from fastapi.testclient import TestClient
from unittest.mock import AsyncMock, MagicMock

sys.path.insert(0, str(Path(__file__).parent.parent))

@pytest.fixture(scope="session", autouse=True)
def setup_test_env():
    """Set up test environment variables before any imports."""
    env_vars = {
        "PERPLEXITY_API_KEY": "test_perplexity_key",
        "PERPLEXITY_MODEL": "sonar",
    }
    for key, value in env_vars.items():
        os.environ[key] = value
    yield
    # Cleanup
    for key in env_vars.keys():
        os.environ.pop(key, None)


@pytest.fixture(autouse=True)
def clear_settings_cache():
    from config import get_settings
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture
def test_client():
    """Create a TestClient for FastAPI app."""
    import main
    return TestClient(main.app)


@pytest.fixture
def user_settings():
    return {"api_key": "pplx-test-key"}


@pytest.fixture
def claim_params():
    return {
        "claim": "The Eiffel Tower is in Paris.",
        "claim_number": 1,
        "total_claims": 3,
    }


@pytest.fixture
def mock_httpx_client():
    """Mock httpx.AsyncClient usable as an async context manager."""
    mock_client = MagicMock()
    mock_client.__aenter__ = AsyncMock(return_value=mock_client)
    mock_client.__aexit__ = AsyncMock(return_value=False)
    return mock_client


@pytest.fixture
def sample_perplexity_response():
    """Sample Perplexity chat-completions response."""
    return {
        "id": "cmpl-123",
        "model": "sonar",
        "choices": [
            {
                "index": 0,
                "message": {
                    "role": "assistant",
                    "content": "Verdict: True. The Eiffel Tower is located in Paris, France."
                }
            }
        ],
        "citations": [
            "https://en.wikipedia.org/wiki/Eiffel_Tower",
            "https://www.toureiffel.paris/en"
        ]
    }
