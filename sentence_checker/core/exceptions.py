# sentence_checker/core/exceptions.py
from fastapi import Request, status
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException
from typing import Any, Dict, Optional
import logging

logger = logging.getLogger(__name__)

class SentenceCheckException(Exception):
    """Base exception for sentence checking errors"""
    def __init__(self, message: str, details: Optional[Dict[str, Any]] = None):
        self.message = message
        self.details = details or {}
        super().__init__(self.message)

class NoSentencesException(SentenceCheckException):
    """Request body has no usable `sentences` mapping"""
    def __init__(self, details: Optional[Dict[str, Any]] = None):
        super().__init__("No sentences provided", details)

class RuleConfigException(SentenceCheckException):
    """Rule table could not be loaded or validated"""
    pass

# Exception handlers
async def no_sentences_exception_handler(request: Request, exc: NoSentencesException) -> JSONResponse:
    request_id = getattr(request.state, "request_id", "unknown")
    logger.warning(f"[{request_id}] {exc.message}: {exc.details}")
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content={"error": exc.message},
    )

async def http_exception_handler(request: Request, exc: StarletteHTTPException) -> JSONResponse:
    if exc.status_code == status.HTTP_405_METHOD_NOT_ALLOWED:
        logger.warning(f"Rejected {request.method} {request.url.path}")
        message = "Method not allowed"
    else:
        message = exc.detail
    return JSONResponse(
        status_code=exc.status_code,
        content={"error": message},
        headers=getattr(exc, "headers", None),
    )
