# backend/app/main.py
import logging
from contextlib import asynccontextmanager
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from prometheus_fastapi_instrumentator import Instrumentator

from backend.core.config import settings
from backend.core.logging_config import setup_logging
from backend.core.exceptions import GuestbookError
from backend.app.exception_handlers import guestbook_exception_handler, general_exception_handler
from backend.app.routers import guestbook
from backend.create_tables import init_db

setup_logging(settings.LOG_LEVEL)
logger = logging.getLogger(__name__)

@asynccontextmanager
async def lifespan(app: FastAPI):
    if settings.STORAGE_BACKEND == "database":
        # 로컬 DB 모드: 테이블이 없으면 생성
        await init_db()
    elif not settings.SUPABASE_URL or not settings.SUPABASE_KEY:
        logger.warning("⚠️ SUPABASE_URL / SUPABASE_KEY not set - every guestbook request will fail upstream")

    logger.info(f"[lifespan] Guestbook API ready (storage={settings.STORAGE_BACKEND}, prefix={settings.API_PREFIX})")
    yield

app = FastAPI(
    title="Guestbook API",
    description="Sign, edit and delete guestbook entries",
    version="0.1.0",
    lifespan=lifespan,
)

# Prometheus Metrics (Expose /metrics)
Instrumentator().instrument(app).expose(app)

# CORS: 모든 출처 허용 (인증 없음, credentials 미사용)
app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_methods=["*"],
    allow_headers=["*"],
)

app.add_exception_handler(GuestbookError, guestbook_exception_handler)
app.add_exception_handler(Exception, general_exception_handler)

@app.get("/")
def read_root():
    return {
        "status": "active",
        "env": "development" if settings.DEBUG else "production",
        "storage": settings.STORAGE_BACKEND,
    }

app.include_router(guestbook.router, prefix=settings.API_PREFIX)
