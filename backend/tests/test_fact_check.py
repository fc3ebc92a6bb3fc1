import pytest
from unittest.mock import AsyncMock, patch

from exceptions import (
    FactCheckException,
    MissingCredentialException,
    NetworkException,
    ValidationException,
)
from models.verdicts import Verdict
from prompts import REPORT_INSTRUCTIONS
from services.fact_check import fact_check_claim


def perplexity_reply(content, citations=None):
    return {"content": content, "citations": citations or [], "raw": {}}


@pytest.mark.asyncio
class TestFactCheckClaim:
    """Tests for fact_check_claim function."""

    async def test_intermediate_claim(self, claim_params, user_settings):
        reply = perplexity_reply(
            "Verdict: True. The Eiffel Tower stands in Paris.",
            ["https://en.wikipedia.org/wiki/Eiffel_Tower"],
        )
        with patch("services.fact_check.query_perplexity", AsyncMock(return_value=reply)) as mock_query:
            result = await fact_check_claim(claim_params, user_settings)

        assert result.verdict == Verdict.TRUE
        assert result.next_action == "next_claim"
        assert result.report_instructions is None
        assert result.citations == ["https://en.wikipedia.org/wiki/Eiffel_Tower"]
        text = result.to_text()
        assert "Citations:\n[1] https://en.wikipedia.org/wiki/Eiffel_Tower" in text
        assert text.endswith("Next Action: Continue with next claim")

        prompt, model, system_message, api_key = mock_query.call_args.args
        assert '"The Eiffel Tower is in Paris."' in prompt
        assert model == "sonar"
        assert system_message.startswith("Fact check the following claim")
        assert api_key == "pplx-test-key"

    async def test_last_claim_generates_report(self, user_settings):
        params = {"claim": "Bananas are berries.", "claim_number": 3, "total_claims": 3}
        reply = perplexity_reply(
            "The claim is partially true because some facts are correct "
            "but others are not entirely accurate."
        )
        with patch("services.fact_check.query_perplexity", AsyncMock(return_value=reply)):
            result = await fact_check_claim(params, user_settings)

        assert result.verdict == Verdict.PARTIALLY_TRUE
        assert result.next_action == "generate_report"
        assert result.report_instructions == REPORT_INSTRUCTIONS
        assert REPORT_INSTRUCTIONS in result.to_text()
        assert "Citations" not in result.to_text()

    async def test_custom_model_and_system_message(self, claim_params):
        settings = {"api_key": "k", "model": "sonar-pro", "system_message": "Be terse."}
        reply = perplexity_reply("This is incorrect and false.")
        with patch("services.fact_check.query_perplexity", AsyncMock(return_value=reply)) as mock_query:
            result = await fact_check_claim(claim_params, settings)

        assert result.verdict == Verdict.FALSE
        _, model, system_message, _ = mock_query.call_args.args
        assert model == "sonar-pro"
        assert system_message == "Be terse."

    async def test_validation_fails_before_request(self, user_settings):
        params = {"claim": "x", "claim_number": 4, "total_claims": 3}
        with patch("services.fact_check.query_perplexity", AsyncMock()) as mock_query:
            with pytest.raises(ValidationException):
                await fact_check_claim(params, user_settings)
        mock_query.assert_not_called()

    async def test_missing_api_key(self, claim_params):
        with patch("services.fact_check.query_perplexity", AsyncMock()) as mock_query:
            with pytest.raises(MissingCredentialException):
                await fact_check_claim(claim_params, {})
        mock_query.assert_not_called()

    async def test_network_error_propagates(self, claim_params, user_settings):
        with patch(
            "services.fact_check.query_perplexity",
            AsyncMock(side_effect=NetworkException("connection refused")),
        ):
            with pytest.raises(NetworkException):
                await fact_check_claim(claim_params, user_settings)

    async def test_unexpected_error_wrapped(self, claim_params, user_settings):
        with patch(
            "services.fact_check.query_perplexity",
            AsyncMock(side_effect=RuntimeError("boom")),
        ):
            with pytest.raises(FactCheckException) as exc_info:
                await fact_check_claim(claim_params, user_settings)

        assert exc_info.value.message == "Fact-checking failed: boom"
        assert isinstance(exc_info.value.__cause__, RuntimeError)
