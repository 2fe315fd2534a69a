import sys
from pathlib import Path

# Ensure project root is on sys.path so `import frontend` works
ROOT = str(Path(__file__).resolve().parents[2])
if ROOT not in sys.path:
    sys.path.insert(0, ROOT)

import pytest
from unittest.mock import MagicMock

from frontend.client import GuestbookClient
from frontend.state import GuestbookViewState

ALICE = {"id": "1", "name": "Alice", "message": "Hi", "created_at": "2026-10-19T09:00:00+00:00"}
BOB = {"id": "2", "name": "Bob", "message": "Yo", "created_at": "2026-10-19T10:00:00+00:00"}

@pytest.fixture
def fake_client():
    client = MagicMock(spec=GuestbookClient)
    client.list_entries.return_value = [BOB, ALICE]
    return client

@pytest.fixture
def view_state(fake_client):
    return GuestbookViewState(fake_client)
