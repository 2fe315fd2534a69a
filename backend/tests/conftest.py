import sys
from pathlib import Path

# Ensure project root is on sys.path so `import backend` works
ROOT = str(Path(__file__).resolve().parents[2])
if ROOT not in sys.path:
    sys.path.insert(0, ROOT)

from datetime import datetime
import pytest
import pytest_asyncio
from unittest.mock import AsyncMock, patch
from sqlalchemy.ext.asyncio import create_async_engine, AsyncSession, async_sessionmaker
from sqlalchemy.pool import StaticPool
from httpx import AsyncClient, ASGITransport

from backend.app.main import app
from backend.models import Base
from backend.repository.guestbook import DatabaseGuestbookRepository, get_guestbook_repo


# 1. 테스트용 DB: SQLite 메모리 (연결 하나를 공유해야 테이블이 유지됨)
SQLALCHEMY_DATABASE_URL = "sqlite+aiosqlite:///:memory:"

engine = create_async_engine(
    SQLALCHEMY_DATABASE_URL,
    connect_args={"check_same_thread": False},
    poolclass=StaticPool
)

TestingSessionLocal = async_sessionmaker(
    bind=engine,
    class_=AsyncSession,
    autocommit=False,
    autoflush=False,
    expire_on_commit=False
)

def parse_ts(value: str) -> datetime:
    """API 응답의 created_at 문자열을 datetime 으로 (Z 접미사 포함)"""
    return datetime.fromisoformat(value.replace("Z", "+00:00"))

# 2. DB Fixture
@pytest_asyncio.fixture(scope="function")
async def db_tables():
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    yield
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.drop_all)

@pytest.fixture(scope="function")
def guestbook_repo(db_tables):
    return DatabaseGuestbookRepository(session_factory=TestingSessionLocal)

# 3. Client Fixture (AsyncClient)
@pytest_asyncio.fixture(scope="function")
async def client(guestbook_repo):
    """
    httpx.AsyncClient 로 API 테스트. 데이터 레이어는 SQLite 구현으로 교체합니다.
    """
    app.dependency_overrides[get_guestbook_repo] = lambda: guestbook_repo

    async with AsyncClient(transport=ASGITransport(app=app), base_url="http://test") as c:
        yield c

    app.dependency_overrides.clear()

# 4. 외부 알림 Mocking (ntfy)
@pytest.fixture(autouse=True)
def mock_ntfy():
    with patch("backend.app.exception_handlers.send_ntfy_notification", new_callable=AsyncMock) as mock_send:
        yield mock_send
