from typing import Optional, Union
from pydantic import BaseModel, ConfigDict, Field
from datetime import datetime
from uuid import UUID

class GuestbookCreate(BaseModel):
    # 서버 측 내용 검증 없음 (빈 문자열 허용, 데이터 레이어에 위임)
    name: str = Field(..., description="작성자 이름")
    message: str = Field(..., description="방명록 내용")

class GuestbookUpdate(BaseModel):
    """부분 수정: 보낸 필드만 반영됩니다."""
    name: Optional[str] = None
    message: Optional[str] = None

class GuestbookEntryResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    # 데이터 레이어가 부여하는 불투명 식별자 (uuid 또는 bigint)
    id: Union[UUID, int, str]
    name: str
    message: str
    created_at: datetime
