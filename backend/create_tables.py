# create_tables.py
import asyncio
import logging

from backend.core.database import engine
from backend.models import Base

logger = logging.getLogger(__name__)

async def init_db():
    # 마이그레이션 없음: 테이블이 없으면 만들기만 합니다.
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    logger.info("✅ Guestbook table is ready")

if __name__ == "__main__":
    logging.basicConfig(level=logging.INFO)
    asyncio.run(init_db())
