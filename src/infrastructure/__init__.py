from .cookie_jar import CookieJar
from .http_client import AsyncHTTPClient, HttpResponse
from .session_context import SessionContext
from .session_store import JsonFileSessionStore, MemorySessionStore, SessionStore

__all__ = [
    "AsyncHTTPClient",
    "CookieJar",
    "HttpResponse",
    "JsonFileSessionStore",
    "MemorySessionStore",
    "SessionContext",
    "SessionStore",
]
