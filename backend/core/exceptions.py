from typing import Any, Optional


class GuestbookError(Exception):
    """Base exception for the guestbook application."""
    def __init__(self, message: str = "An unexpected error occurred"):
        self.message = message
        super().__init__(self.message)

# --- Upstream Errors (502) ---
class UpstreamError(GuestbookError):
    """
    데이터 레이어 호출 실패.
    not-found / validation / 연결 오류를 구분하지 않는 단일 에러 종류입니다.
    """
    def __init__(self, message: str = "Data layer request failed", status_code: Optional[int] = None, payload: Any = None):
        self.status_code = status_code
        self.payload = payload
        super().__init__(message)
