import logging
from typing import Any, Dict, List

from backend.repository.guestbook import GuestbookRepository
from backend.schemas.guestbook import GuestbookCreate, GuestbookUpdate

logger = logging.getLogger(__name__)

# 데이터 레이어로 그대로 전달하는 얇은 계층.
# 에러는 잡지 않고 호출자에게 전파합니다. (재시도/폴백 없음)

async def list_entries(repo: GuestbookRepository) -> List[Dict[str, Any]]:
    return await repo.list_entries()

async def create_entry(repo: GuestbookRepository, entry_in: GuestbookCreate) -> List[Dict[str, Any]]:
    created = await repo.create(entry_in.model_dump())
    logger.info(f"📝 Guestbook entry created: {[row.get('id') for row in created]}")
    return created

async def update_entry(repo: GuestbookRepository, entry_id: str, entry_in: GuestbookUpdate) -> List[Dict[str, Any]]:
    # 보낸 필드만 반영 (생략 또는 null 은 기존 값 유지)
    changes = entry_in.model_dump(exclude_unset=True, exclude_none=True)
    updated = await repo.update(entry_id, changes)
    if not updated:
        logger.info(f"Guestbook update matched no entry: {entry_id}")
    return updated

async def delete_entry(repo: GuestbookRepository, entry_id: str) -> List[Dict[str, Any]]:
    deleted = await repo.delete(entry_id)
    if not deleted:
        logger.info(f"Guestbook delete matched no entry: {entry_id}")
    return deleted
