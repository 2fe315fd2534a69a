"""
View state for the guestbook page.

Holds the entry list, the create/edit form and the interaction flags
(``loading`` and ``editing_id``). Every mutation is followed by a full
``fetch_entries()``; nothing is merged or updated optimistically.
Streamlit keeps one instance per browser session in ``st.session_state``.
"""

import logging
from typing import Any, Dict, List, Optional

from frontend.client import GuestbookClient, GuestbookClientError

logger = logging.getLogger(__name__)

EMPTY_FORM_ERROR = "Please fill in both name and message"


class GuestbookViewState:
    def __init__(self, client: GuestbookClient):
        self.client = client
        self.entries: List[Dict[str, Any]] = []
        self.form_name = ""
        self.form_message = ""
        self.editing_id: Optional[str] = None
        self.pending_delete_id: Optional[str] = None
        self.loading = False
        self.error = ""
        # 폼 내용을 코드에서 바꿀 때마다 증가 (위젯 key 갱신용)
        self.form_version = 0

    def _reset_form(self) -> None:
        self.editing_id = None
        self.form_name = ""
        self.form_message = ""
        self.form_version += 1

    @property
    def is_editing(self) -> bool:
        return self.editing_id is not None

    def fetch_entries(self) -> None:
        try:
            self.loading = True
            self.error = ""
            self.entries = self.client.list_entries()
        except GuestbookClientError as e:
            self.error = f"Error loading entries: {e}"
            logger.error(f"Fetch error: {e}")
        finally:
            self.loading = False

    def submit(self, name: Optional[str] = None, message: Optional[str] = None) -> None:
        """Create or update depending on ``editing_id``, then refresh the list."""
        if self.loading:
            return
        if name is not None:
            self.form_name = name
        if message is not None:
            self.form_message = message

        # 클라이언트 측 검증: 비어 있으면 요청을 보내지 않음
        if not self.form_name.strip() or not self.form_message.strip():
            self.error = EMPTY_FORM_ERROR
            return

        action = "update" if self.is_editing else "create"
        try:
            self.loading = True
            self.error = ""
            if self.is_editing:
                self.client.update_entry(self.editing_id, self.form_name, self.form_message)
            else:
                self.client.create_entry(self.form_name, self.form_message)
        except GuestbookClientError as e:
            self.error = f"Error: {e}"
            logger.error(f"Submit ({action}) error: {e}")
            self.loading = False
            return

        self._reset_form()
        self.fetch_entries()

    def start_edit(self, entry: Dict[str, Any]) -> None:
        if self.loading:
            return
        self.editing_id = str(entry["id"])
        self.form_name = entry.get("name", "")
        self.form_message = entry.get("message", "")
        self.form_version += 1
        self.error = ""

    def cancel_edit(self) -> None:
        self._reset_form()
        self.error = ""

    # 삭제는 확인 단계를 거쳐야 함: request_delete -> confirm_delete
    def request_delete(self, entry_id: Any) -> None:
        if self.loading:
            return
        self.pending_delete_id = str(entry_id)

    def cancel_delete(self) -> None:
        self.pending_delete_id = None

    def confirm_delete(self) -> None:
        if self.loading or self.pending_delete_id is None:
            return
        entry_id = self.pending_delete_id
        self.pending_delete_id = None
        try:
            self.loading = True
            self.error = ""
            self.client.delete_entry(entry_id)
        except GuestbookClientError as e:
            self.error = f"Error: {e}"
            logger.error(f"Delete error: {e}")
            self.loading = False
            return

        self.fetch_entries()
