# backend/core/database.py
import logging
from sqlalchemy.ext.asyncio import create_async_engine, AsyncSession, async_sessionmaker
from sqlalchemy.orm import declarative_base
from backend.core.config import settings

logger = logging.getLogger(__name__)

# 1. 비동기 엔진 생성
# STORAGE_BACKEND=database 일 때만 실제로 연결이 열립니다. (lazy connect)
engine = create_async_engine(
    settings.ASYNC_DATABASE_URL,
    echo=False,
    pool_pre_ping=True # 연결 끊김 자동 감지
)

# 2. 비동기 세션 공장
# expire_on_commit=False: 커밋 후에도 객체 속성에 접근할 수 있도록 설정
AsyncSessionLocal = async_sessionmaker(
    bind=engine,
    class_=AsyncSession,
    autocommit=False,
    autoflush=False,
    expire_on_commit=False
)

# 3. 모델들이 상속받을 기본 클래스
Base = declarative_base()
