import logging
import uuid
from datetime import timezone
from abc import ABC, abstractmethod
from contextlib import asynccontextmanager
from typing import Any, Dict, List, Optional

import httpx
from sqlalchemy import select
from sqlalchemy.exc import SQLAlchemyError

from backend.core.config import settings
from backend.core.database import AsyncSessionLocal
from backend.core.exceptions import UpstreamError
from backend.models.guestbook import GuestbookEntry

logger = logging.getLogger(__name__)

Row = Dict[str, Any]


class GuestbookRepository(ABC):
    """
    방명록 테이블에 대한 CRUD 계약.
    모든 메서드는 데이터 레이어 호출을 정확히 한 번 수행하고, 원본 행 목록을 돌려줍니다.
    실패 시 UpstreamError 하나로 통일합니다.
    """

    @abstractmethod
    async def list_entries(self) -> List[Row]:
        """created_at 내림차순 전체 목록"""

    @abstractmethod
    async def create(self, data: Row) -> List[Row]:
        ...

    @abstractmethod
    async def update(self, entry_id: str, data: Row) -> List[Row]:
        """일치하는 행이 없으면 빈 리스트"""

    @abstractmethod
    async def delete(self, entry_id: str) -> List[Row]:
        """삭제된 행의 스냅샷, 없으면 빈 리스트"""


class SupabaseGuestbookRepository(GuestbookRepository):
    """Supabase(PostgREST) REST API를 통한 구현. 요청마다 새 클라이언트를 엽니다."""

    def __init__(self, base_url: str, api_key: str, transport: Optional[httpx.AsyncBaseTransport] = None):
        self.base_url = base_url
        self.api_key = api_key
        self.transport = transport

    def _headers(self) -> Dict[str, str]:
        return {
            "apikey": self.api_key,
            "Authorization": f"Bearer {self.api_key}",
            "Prefer": "return=representation",
        }

    async def _request(self, method: str, params: Optional[Dict[str, str]] = None, json: Any = None) -> List[Row]:
        logger.debug(f"Supabase {method} {self.base_url} params={params}")
        try:
            async with httpx.AsyncClient(transport=self.transport) as client:
                response = await client.request(
                    method, self.base_url, params=params, json=json, headers=self._headers()
                )
                response.raise_for_status()
                if not response.content:
                    return []
                return response.json()
        except httpx.HTTPStatusError as e:
            status_code = e.response.status_code
            try:
                payload = e.response.json()
            except ValueError:
                payload = e.response.text
            logger.error(f"❌ Supabase {method} failed ({status_code}): {payload}")
            raise UpstreamError(f"Supabase {method} failed with status {status_code}", status_code=status_code, payload=payload) from e
        except (httpx.HTTPError, httpx.InvalidURL) as e:
            logger.error(f"❌ Supabase {method} unreachable: {e}")
            raise UpstreamError(f"Supabase {method} failed: {e}") from e
        except ValueError as e:
            logger.error(f"❌ Supabase {method} returned invalid JSON: {e}")
            raise UpstreamError(f"Supabase {method} returned invalid JSON") from e

    async def list_entries(self) -> List[Row]:
        return await self._request("GET", params={"select": "*", "order": "created_at.desc"})

    async def create(self, data: Row) -> List[Row]:
        return await self._request("POST", json=[data])

    async def update(self, entry_id: str, data: Row) -> List[Row]:
        return await self._request("PATCH", params={"id": f"eq.{entry_id}"}, json=data)

    async def delete(self, entry_id: str) -> List[Row]:
        return await self._request("DELETE", params={"id": f"eq.{entry_id}"})


def _to_row(entry: GuestbookEntry) -> Row:
    created_at = entry.created_at
    if created_at.tzinfo is None:
        # sqlite는 tz 정보를 저장하지 않음 (항상 UTC로 기록)
        created_at = created_at.replace(tzinfo=timezone.utc)
    return {
        "id": entry.id,
        "name": entry.name,
        "message": entry.message,
        "created_at": created_at,
    }

def _parse_id(entry_id: str) -> Optional[uuid.UUID]:
    try:
        return uuid.UUID(str(entry_id))
    except ValueError:
        return None


class DatabaseGuestbookRepository(GuestbookRepository):
    """SQLAlchemy 비동기 세션을 통한 구현 (로컬 개발, 테스트용)"""

    def __init__(self, session_factory=AsyncSessionLocal):
        self.session_factory = session_factory

    @asynccontextmanager
    async def _session(self, operation: str):
        try:
            async with self.session_factory() as db:
                yield db
        except SQLAlchemyError as e:
            logger.error(f"❌ Database {operation} failed: {e}")
            raise UpstreamError(f"Database {operation} failed: {e}") from e

    async def list_entries(self) -> List[Row]:
        async with self._session("list") as db:
            result = await db.execute(
                select(GuestbookEntry).order_by(GuestbookEntry.created_at.desc())
            )
            return [_to_row(e) for e in result.scalars().all()]

    async def create(self, data: Row) -> List[Row]:
        async with self._session("create") as db:
            db_obj = GuestbookEntry(name=data["name"], message=data["message"])
            db.add(db_obj)
            await db.commit()
            await db.refresh(db_obj)
            return [_to_row(db_obj)]

    async def update(self, entry_id: str, data: Row) -> List[Row]:
        pk = _parse_id(entry_id)
        async with self._session("update") as db:
            obj = await db.get(GuestbookEntry, pk) if pk is not None else None
            if obj is None:
                return []
            for field, value in data.items():
                setattr(obj, field, value)
            await db.commit()
            await db.refresh(obj)
            return [_to_row(obj)]

    async def delete(self, entry_id: str) -> List[Row]:
        pk = _parse_id(entry_id)
        async with self._session("delete") as db:
            obj = await db.get(GuestbookEntry, pk) if pk is not None else None
            if obj is None:
                return []
            snapshot = _to_row(obj)
            await db.delete(obj)
            await db.commit()
            return [snapshot]


def get_guestbook_repo() -> GuestbookRepository:
    """FastAPI 의존성. STORAGE_BACKEND 설정에 따라 구현을 고릅니다."""
    if settings.STORAGE_BACKEND == "database":
        return DatabaseGuestbookRepository()
    return SupabaseGuestbookRepository(settings.SUPABASE_REST_URL, settings.SUPABASE_KEY)
