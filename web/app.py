"""
FastAPI 애플리케이션

라우터 등록, 에러 응답 변환, 앱 생명주기 관리.
"""

import logging
from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from adapters.interfaces import IChainClient, ILedgerBackend
from core.config.loader import Settings, get_settings
from core.constants import Defaults
from core.errors import LedgerError
from core.logging import setup_logging
from web.container import build_container
from web.routes import admin, auth, dashboard, health, status, transactions

logger = logging.getLogger(__name__)


# =========================================================================
# 에러 응답
# =========================================================================


async def ledger_error_handler(request: Request, exc: LedgerError) -> JSONResponse:
    """도메인 에러 → {"success": false, "error": code, "message": ...}"""
    if exc.status_code >= 500:
        logger.warning(
            f"요청 실패: {exc.code}",
            extra={"path": request.url.path, "error": exc.message},
        )
    return JSONResponse(status_code=exc.status_code, content=exc.to_dict())


async def validation_error_handler(
    request: Request,
    exc: RequestValidationError,
) -> JSONResponse:
    """요청 스키마 오류 → 400 validation_error"""
    messages = []
    for error in exc.errors():
        location = ".".join(str(part) for part in error.get("loc", ()) if part != "body")
        messages.append(f"{location}: {error.get('msg', 'invalid')}" if location else error.get("msg", "invalid"))

    return JSONResponse(
        status_code=400,
        content={
            "success": False,
            "error": "validation_error",
            "message": "; ".join(messages) or "Invalid request",
        },
    )


async def unhandled_error_handler(request: Request, exc: Exception) -> JSONResponse:
    """예상하지 못한 예외 → 500 (프로세스는 계속 동작)"""
    logger.exception("처리되지 않은 예외", extra={"path": request.url.path})
    return JSONResponse(
        status_code=500,
        content={
            "success": False,
            "error": "internal_error",
            "message": "Internal server error",
        },
    )


# =========================================================================
# 앱 생성
# =========================================================================


def create_app(
    settings: Settings | None = None,
    primary: ILedgerBackend | None = None,
    fallback: ILedgerBackend | None = None,
    chain_client: IChainClient | None = None,
    configure_logging: bool = True,
) -> FastAPI:
    """FastAPI 앱 생성

    Args:
        settings: 애플리케이션 설정 (None이면 secrets.yaml 로드, 시작 시점)
        primary: 기본 저장소 (테스트 주입용)
        fallback: fallback 저장소 (테스트 주입용)
        chain_client: 체인 클라이언트 (테스트 주입용)
        configure_logging: 시작 시 로깅 설정 여부
    """

    @asynccontextmanager
    async def lifespan(app: FastAPI) -> AsyncIterator[None]:
        """앱 생명주기 관리"""
        app_settings = settings or get_settings()

        if configure_logging:
            setup_logging("web", log_dir=app_settings.log_dir)

        container = await build_container(
            app_settings,
            primary=primary,
            fallback=fallback,
            chain_client=chain_client,
        )
        app.state.container = container
        logger.info("Web 시작", extra={"environment": app_settings.mode.value})

        try:
            yield
        finally:
            await container.close()
            logger.info("Web 종료")

    app = FastAPI(
        title="Finance Ledger API",
        description="지갑 배정 및 거래 원장 API",
        version=Defaults.APP_VERSION,
        docs_url="/docs",
        redoc_url="/redoc",
        lifespan=lifespan,
    )

    # CORS 설정 (개발용)
    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    app.add_exception_handler(LedgerError, ledger_error_handler)
    app.add_exception_handler(RequestValidationError, validation_error_handler)
    app.add_exception_handler(Exception, unhandled_error_handler)

    # =====================================================================
    # API 라우터 등록
    # =====================================================================

    app.include_router(health.router)
    app.include_router(status.router)
    app.include_router(auth.router)
    app.include_router(transactions.router)
    app.include_router(dashboard.router)
    app.include_router(admin.router)

    return app


app = create_app()
