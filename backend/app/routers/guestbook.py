from fastapi import APIRouter, Depends
from typing import List

from backend.repository.guestbook import GuestbookRepository, get_guestbook_repo
from backend.schemas.guestbook import GuestbookCreate, GuestbookUpdate, GuestbookEntryResponse
from backend.services import guestbook_service

router = APIRouter(prefix="/guestbook", tags=["guestbook"])

@router.get("", response_model=List[GuestbookEntryResponse])
async def get_all_entries(repo: GuestbookRepository = Depends(get_guestbook_repo)):
    """
    [방명록 목록]
    전체 항목을 created_at 내림차순(최신순)으로 반환합니다. 페이지네이션 없음.
    """
    return await guestbook_service.list_entries(repo)

@router.post("", response_model=List[GuestbookEntryResponse])
async def create_entry(
    entry_in: GuestbookCreate,
    repo: GuestbookRepository = Depends(get_guestbook_repo)
):
    """
    [방명록 작성]
    생성된 항목(id, created_at 포함)을 담은 배열을 반환합니다.
    """
    return await guestbook_service.create_entry(repo, entry_in)

@router.put("/{entry_id}", response_model=List[GuestbookEntryResponse])
async def update_entry(
    entry_id: str,
    entry_in: GuestbookUpdate,
    repo: GuestbookRepository = Depends(get_guestbook_repo)
):
    """
    [방명록 수정]
    보낸 필드(name, message)만 수정합니다.
    - 없는 id면 빈 배열
    """
    return await guestbook_service.update_entry(repo, entry_id, entry_in)

@router.delete("/{entry_id}", response_model=List[GuestbookEntryResponse])
async def delete_entry(
    entry_id: str,
    repo: GuestbookRepository = Depends(get_guestbook_repo)
):
    """
    [방명록 삭제]
    삭제된 항목의 스냅샷을 담은 배열을 반환합니다.
    - 없는 id면 빈 배열
    """
    return await guestbook_service.delete_entry(repo, entry_id)
