# backend/models/__init__.py
from .guestbook import GuestbookEntry
from backend.core.database import Base


# create_all이 인식하도록 expose
__all__ = [
    "Base",
    "GuestbookEntry",
]
