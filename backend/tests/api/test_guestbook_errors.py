import pytest
from unittest.mock import AsyncMock
from httpx import AsyncClient, ASGITransport

from backend.app.main import app
from backend.core.exceptions import UpstreamError
from backend.repository.guestbook import GuestbookRepository, get_guestbook_repo


class FailingRepository(GuestbookRepository):
    """모든 호출이 데이터 레이어 실패로 끝나는 저장소"""

    def __init__(self, exc: Exception):
        self.exc = exc
        self.calls = 0

    async def _fail(self, *args, **kwargs):
        self.calls += 1
        raise self.exc

    list_entries = _fail
    create = _fail
    update = _fail
    delete = _fail


@pytest.fixture
def use_repo():
    def _use(repo: GuestbookRepository):
        app.dependency_overrides[get_guestbook_repo] = lambda: repo
        return repo
    yield _use
    app.dependency_overrides.clear()


@pytest.mark.asyncio
@pytest.mark.parametrize("method, path, body", [
    ("GET", "/api/guestbook", None),
    ("POST", "/api/guestbook", {"name": "a", "message": "b"}),
    ("PUT", "/api/guestbook/1", {"message": "b"}),
    ("DELETE", "/api/guestbook/1", None),
])
async def test_upstream_error_surfaces_as_502(use_repo, mock_ntfy, method, path, body):
    repo = use_repo(FailingRepository(UpstreamError("Supabase GET failed with status 503", status_code=503)))

    async with AsyncClient(transport=ASGITransport(app=app), base_url="http://test") as client:
        response = await client.request(method, path, json=body)

    assert response.status_code == 502
    assert response.json()["detail"] == "Supabase GET failed with status 503"
    # 재시도 없음: 데이터 레이어 호출은 정확히 한 번
    assert repo.calls == 1
    mock_ntfy.assert_not_called()


@pytest.mark.asyncio
async def test_unexpected_error_returns_500_and_notifies(use_repo, mock_ntfy):
    use_repo(FailingRepository(RuntimeError("boom")))

    # 처리되지 않은 예외는 ServerErrorMiddleware 가 다시 던지므로 raise_app_exceptions=False
    transport = ASGITransport(app=app, raise_app_exceptions=False)
    async with AsyncClient(transport=transport, base_url="http://test") as client:
        response = await client.get("/api/guestbook")

    assert response.status_code == 500
    assert response.json()["detail"] == "Internal Server Error"
    mock_ntfy.assert_awaited_once()
    assert "boom" in mock_ntfy.call_args.kwargs["message"]
    assert mock_ntfy.call_args.kwargs["priority"] == "max"


@pytest.mark.asyncio
async def test_service_does_not_swallow_upstream_errors():
    from backend.services import guestbook_service
    from backend.schemas.guestbook import GuestbookCreate

    repo = AsyncMock(spec=GuestbookRepository)
    repo.create.side_effect = UpstreamError("down")

    with pytest.raises(UpstreamError):
        await guestbook_service.create_entry(repo, GuestbookCreate(name="a", message="b"))
    repo.create.assert_awaited_once_with({"name": "a", "message": "b"})
