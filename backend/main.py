import logging

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from slowapi import _rate_limit_exceeded_handler
from slowapi.errors import RateLimitExceeded

from api.router import limiter, router
from config import settings
from services.exceptions import ConfigError, MatcherError, SchemaError, TransportError, ValidationError

logger = logging.getLogger(__name__)

app = FastAPI(
    title="Resume Matcher API",
    description="Explainable resume-to-requirements matching with Gemini enrichment",
    version="1.0.0",
    debug=settings.debug,
)

app.state.limiter = limiter
app.add_exception_handler(RateLimitExceeded, _rate_limit_exceeded_handler)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


def _status_for(exc: MatcherError) -> int:
    if isinstance(exc, ValidationError):
        return 400
    if isinstance(exc, ConfigError):
        return 503
    if isinstance(exc, TransportError):
        return 504 if exc.timed_out else 502
    if isinstance(exc, SchemaError):
        return 502
    return 500


@app.exception_handler(MatcherError)
async def matcher_error_handler(request: Request, exc: MatcherError):
    status_code = _status_for(exc)
    level = logging.WARNING if status_code < 500 else logging.ERROR
    logger.log(level, "%s on %s: %s", exc.error_code, request.url.path, exc.message)
    return JSONResponse(status_code=status_code, content=exc.to_dict())


app.include_router(router)
