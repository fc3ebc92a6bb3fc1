from typing import Optional, Dict, Any

class FactCheckException(Exception):
    def __init__(self, message: str, details: Optional[Dict[str, Any]] = None):
        self.message = message
        self.details = details or {}
        super().__init__(self.message)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "error": self.__class__.__name__,
            "message": self.message,
            "details": self.details
        }

class ValidationException(FactCheckException):
    def __init__(self, field: str, reason: str):
        super().__init__(
            reason,
            {"field": field, "reason": reason}
        )

class MissingCredentialException(ValidationException):
    def __init__(self, field: str = "api_key"):
        super().__init__(
            field,
            "Please set the Perplexity API Key in the plugin settings."
        )

class APIException(FactCheckException):
    pass

class NetworkException(APIException):
    def __init__(self, reason: str):
        super().__init__(
            "Network error while connecting to Perplexity API. Please check your internet connection.",
            {"reason": reason}
        )

class PerplexityAPIException(APIException):
    def __init__(self, reason: str, status_code: Optional[int] = None):
        self.status_code = status_code
        super().__init__(
            f"API Error: {reason}",
            {"reason": reason, "status_code": status_code}
        )
