from typing import Any, Mapping, Tuple

from config.constants import PERPLEXITY_CONFIG
from exceptions import ValidationException, MissingCredentialException
from models.claims import ClaimParams, FactCheckConfig


class InputValidator:

    @staticmethod
    def validate_claim(claim: Any) -> str:
        if not isinstance(claim, str) or not claim.strip():
            raise ValidationException("claim", "Invalid claim provided")
        return claim

    @staticmethod
    def validate_positive_int(field: str, value: Any) -> int:
        # bool is an int subclass; 3.0 counts as an integer.
        if isinstance(value, bool):
            raise ValidationException(field, f"{field} must be a positive integer")
        if isinstance(value, float) and value.is_integer():
            value = int(value)
        if not isinstance(value, int) or value < 1:
            raise ValidationException(field, f"{field} must be a positive integer")
        return value

    @staticmethod
    def validate_claim_params(params: Mapping[str, Any]) -> ClaimParams:
        claim = InputValidator.validate_claim(params.get("claim"))
        claim_number = InputValidator.validate_positive_int(
            "claim_number", params.get("claim_number")
        )
        total_claims = InputValidator.validate_positive_int(
            "total_claims", params.get("total_claims")
        )

        if claim_number > total_claims:
            raise ValidationException(
                "claim_number", "claim_number cannot be greater than total_claims"
            )

        return {
            "claim": claim,
            "claim_number": claim_number,
            "total_claims": total_claims,
        }

    @staticmethod
    def validate_user_settings(settings: Mapping[str, Any]) -> FactCheckConfig:
        api_key = settings.get("api_key")
        if not api_key:
            raise MissingCredentialException()

        return FactCheckConfig(
            api_key=api_key,
            model=settings.get("model") or PERPLEXITY_CONFIG.DEFAULT_MODEL,
            system_message=settings.get("system_message") or PERPLEXITY_CONFIG.DEFAULT_SYSTEM_MESSAGE,
        )

    @staticmethod
    def validate(
        params: Mapping[str, Any], settings: Mapping[str, Any]
    ) -> Tuple[ClaimParams, FactCheckConfig]:
        return (
            InputValidator.validate_claim_params(params),
            InputValidator.validate_user_settings(settings),
        )
