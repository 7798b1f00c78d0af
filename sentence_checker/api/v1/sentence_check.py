import time
import logging
from collections.abc import AsyncIterator
from typing import Any

from fastapi import APIRouter, Depends, Request
from pydantic import ValidationError

from sentence_checker.core.config import settings
from sentence_checker.core.dependencies import get_sentence_grader
from sentence_checker.core.exceptions import NoSentencesException
from sentence_checker.models.request import SentenceCheckRequest
from sentence_checker.models.response import BatchResult
from sentence_checker.services.sentence_grader import SentenceGrader

logger = logging.getLogger(__name__)


async def route_timer(request: Request) -> AsyncIterator[None]:
    start = time.perf_counter()
    method = request.method
    path = request.url.path
    request_id = f"req_{int(time.time() * 1000)}"

    request.state.request_id = request_id

    logger.info(f"[{request_id}] → {method} {path}")
    try:
        yield
    finally:
        dur_ms = (time.perf_counter() - start) * 1000.0
        slow_tag = " SLOW" if dur_ms > settings.SLOW_REQUEST_MS else ""
        logger.info(f"[{request_id}] ← {method} {path} {dur_ms:.1f}ms{slow_tag}")


async def _read_json(request: Request) -> Any:
    try:
        return await request.json()
    except ValueError:
        # empty body, invalid JSON or bad encoding
        return None


router = APIRouter(dependencies=[Depends(route_timer)])


@router.post(
    "/check-sentences",
    response_model=BatchResult,
    response_model_exclude_none=True,
    summary="Grade sentence submissions against the exercise rules",
)
async def check_sentences(
    request: Request,
    grader: SentenceGrader = Depends(get_sentence_grader),
) -> BatchResult:
    body = await _read_json(request)
    try:
        req = SentenceCheckRequest.model_validate(body)
    except ValidationError as e:
        raise NoSentencesException(details={"errors": len(e.errors())}) from e

    result = grader.grade(req.sentences)
    logger.info(
        f"[{request.state.request_id}] graded {len(result.scores)} exercises, "
        f"percent={result.percent}"
    )
    return result
