from contextlib import asynccontextmanager
from typing import Dict, Any

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from config import logger, get_settings, check_api_keys_on_startup
from exceptions import (
    FactCheckException,
    ValidationException,
    MissingCredentialException,
    NetworkException,
    PerplexityAPIException,
)
from middleware.context import RequestContextMiddleware, get_request_id
from models.claims import FactCheckRequest, UserSettings
from services import fact_check_claim


@asynccontextmanager
async def lifespan(app: FastAPI):
    logger.info("Startup: checking for Perplexity API key...")
    check_api_keys_on_startup()
    yield


app = FastAPI(lifespan=lifespan)

app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)
app.add_middleware(RequestContextMiddleware)

EXCEPTION_STATUS_CODES = [
    (MissingCredentialException, 401),
    (ValidationException, 400),
    (NetworkException, 503),
    (PerplexityAPIException, 502),
]


@app.exception_handler(FactCheckException)
async def fact_check_exception_handler(request: Request, exc: FactCheckException):
    status_code = 500
    for exc_type, code in EXCEPTION_STATUS_CODES:
        if isinstance(exc, exc_type):
            status_code = code
            break
    logger.warning(
        "Request %s failed with %s: %s", get_request_id(), exc.__class__.__name__, exc.message
    )
    return JSONResponse(status_code=status_code, content=exc.to_dict())


@app.get("/")
async def health_check():
    return {"status": "ok", "message": "Fact-Check API is running."}


def resolve_user_settings(req: FactCheckRequest) -> UserSettings:
    """Fill settings the request left out from the server-side configuration."""
    settings = get_settings()
    return {
        "api_key": req.api_key or settings.PERPLEXITY_API_KEY,
        "model": req.model or settings.PERPLEXITY_MODEL,
        "system_message": req.system_message or settings.PERPLEXITY_SYSTEM_MESSAGE,
    }


@app.post("/fact-check")
async def fact_check(req: FactCheckRequest) -> Dict[str, Any]:
    params = {
        "claim": req.claim,
        "claim_number": req.claim_number,
        "total_claims": req.total_claims,
    }
    result = await fact_check_claim(params, resolve_user_settings(req))
    return result.to_payload()
