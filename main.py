import time
import logging
from contextlib import asynccontextmanager
from dotenv import load_dotenv
load_dotenv()  # ★ 라우터/모듈 임포트 전에!

from fastapi import Depends, FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from sentence_checker.api.v1.sentence_check import router as check_router
from sentence_checker.core.config import APP_VERSION, settings
from sentence_checker.core.dependencies import get_rule_table
from sentence_checker.core.rules import RuleTable
from sentence_checker.core.exceptions import (
    NoSentencesException,
    http_exception_handler,
    no_sentences_exception_handler,
)
from sentence_checker.models.response import HealthResponse

# Setup logging
logging.basicConfig(
    level=settings.LOG_LEVEL,
    format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
)
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """애플리케이션 수명주기 관리"""
    startup_time = time.time()
    logger.info("Starting sentence checker...")

    # fail fast on a broken rule file instead of on the first request
    rules = get_rule_table()
    logger.info(f"Serving {len(rules)} exercises: {', '.join(rules)}")

    startup_duration = (time.time() - startup_time) * 1000
    logger.info(f"Application startup completed in {startup_duration:.1f}ms")

    yield

    logger.info("Shutting down sentence checker")


def create_app() -> FastAPI:
    app = FastAPI(
        title="Sentence Checker API",
        version=APP_VERSION,
        description="Rule-based scoring and feedback for short sentence-writing exercises",
        lifespan=lifespan,
    )

    app.add_exception_handler(NoSentencesException, no_sentences_exception_handler)
    app.add_exception_handler(StarletteHTTPException, http_exception_handler)

    @app.exception_handler(Exception)
    async def global_exception_handler(request: Request, exc: Exception) -> JSONResponse:
        request_id = getattr(request.state, "request_id", f"global_{int(time.time() * 1000)}")
        logger.error(f"[{request_id}] Unhandled exception on {request.method} {request.url.path}: {exc}", exc_info=True)
        return JSONResponse(
            status_code=500,
            content={
                "error": "Internal server error",
                "type": type(exc).__name__,
                "request_id": request_id,
            },
        )

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    # Routers
    app.include_router(check_router, prefix="/api", tags=["sentences"])

    @app.get("/health", response_model=HealthResponse)
    async def health(rules: RuleTable = Depends(get_rule_table)):
        return HealthResponse(
            status="healthy",
            version=APP_VERSION,
            exercises=list(rules),
        )

    return app


app = create_app()


if __name__ == "__main__":
    import uvicorn

    uvicorn.run("main:app", host="0.0.0.0", port=8000, reload=True)
