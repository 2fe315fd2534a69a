import logging
from typing import Any, Dict, List, Optional

import requests

logger = logging.getLogger(__name__)


class GuestbookClientError(Exception):
    """네트워크/응답 파싱 실패를 하나로 묶은 예외"""


class GuestbookClient:
    """백엔드 /api/guestbook 에 대한 얇은 HTTP 클라이언트"""

    def __init__(self, base_url: str, session: Optional[requests.Session] = None):
        self.base_url = base_url.rstrip("/")
        self.session = session or requests.Session()

    def _send(self, method: str, url: str, action: str, payload: Optional[Dict[str, Any]] = None) -> List[Dict[str, Any]]:
        try:
            res = self.session.request(method, url, json=payload)
        except requests.RequestException as e:
            raise GuestbookClientError(f"Failed to {action}: {e}") from e

        if not res.ok:
            raise GuestbookClientError(f"Failed to {action}: {res.status_code}")

        try:
            return res.json() or []
        except ValueError as e:
            raise GuestbookClientError(f"Failed to {action}: invalid response") from e

    def list_entries(self) -> List[Dict[str, Any]]:
        return self._send("GET", self.base_url, "fetch entries")

    def create_entry(self, name: str, message: str) -> List[Dict[str, Any]]:
        return self._send("POST", self.base_url, "create entry", {"name": name, "message": message})

    def update_entry(self, entry_id: str, name: str, message: str) -> List[Dict[str, Any]]:
        return self._send("PUT", f"{self.base_url}/{entry_id}", "update entry", {"name": name, "message": message})

    def delete_entry(self, entry_id: str) -> List[Dict[str, Any]]:
        return self._send("DELETE", f"{self.base_url}/{entry_id}", "delete entry")
