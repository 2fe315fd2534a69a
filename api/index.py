# Serverless entrypoint (Vercel): the Python runtime serves the module-level ASGI `app`.

from backend.app.main import app  # noqa: F401
