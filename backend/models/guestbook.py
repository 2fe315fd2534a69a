import uuid
from datetime import datetime, timezone
from sqlalchemy import Column, DateTime, Text, Uuid
from backend.core.database import Base

def _utcnow() -> datetime:
    return datetime.now(timezone.utc)

class GuestbookEntry(Base):
    __tablename__ = "guestbook"

    id = Column(Uuid(as_uuid=True), primary_key=True, default=uuid.uuid4)
    name = Column(Text, nullable=False)
    message = Column(Text, nullable=False)

    # 정렬 키. server_default(now())는 sqlite에서 초 단위라 순서가 뒤섞이므로
    # 애플리케이션에서 마이크로초까지 채웁니다.
    created_at = Column(DateTime(timezone=True), default=_utcnow, nullable=False, index=True)
