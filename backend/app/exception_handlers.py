from fastapi import Request, status
from fastapi.responses import JSONResponse
from backend.core import exceptions
from backend.core.notify import send_ntfy_notification
import logging

logger = logging.getLogger(__name__)

async def guestbook_exception_handler(request: Request, exc: exceptions.GuestbookError):
    status_code = status.HTTP_400_BAD_REQUEST

    if isinstance(exc, exceptions.UpstreamError):
        # 데이터 레이어 실패는 그대로 실패로 노출 (에러 본문 정규화 없음)
        status_code = status.HTTP_502_BAD_GATEWAY
        logger.error(f"Upstream failure on {request.method} {request.url.path}: {exc.message}")

    return JSONResponse(
        status_code=status_code,
        content={"detail": exc.message},
    )

async def general_exception_handler(request: Request, exc: Exception):
    # 예상치 못한 모든 에러 처리
    error_msg = f"Unhandled Exception: {str(exc)}\nPath: {request.url.path}"
    logger.error(f"❌ {error_msg}", exc_info=True)

    await send_ntfy_notification(
        message=error_msg,
        title="🔥 500 Internal Server Error",
        priority="max"
    )

    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content={"detail": "Internal Server Error"},
    )
