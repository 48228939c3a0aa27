import hashlib
import os
import time
import uuid
from typing import Mapping

from itsdangerous import BadData, URLSafeSerializer
from passlib.context import CryptContext
from pydantic import ValidationError

from core.config import settings
from core.errors import DeserializationError
from schemas.session_schema import SessionCookie

# argon2id with a fresh random salt per hash
pwd_context = CryptContext(schemes=["argon2"], deprecated="auto")

_COOKIE_SALT = "session-cookie"


def hash_password(password: str) -> str:
    return pwd_context.hash(password)


def verify_password(password: str, password_hash: str) -> bool:
    """Constant-time check of ``password`` against a stored hash.

    A hash passlib cannot identify counts as a non-match.
    """
    try:
        return pwd_context.verify(password, password_hash)
    except (ValueError, TypeError):
        return False


def new_session_token() -> str:
    """UUID version 7: 48-bit unix milliseconds followed by random bits."""
    millis = time.time_ns() // 1_000_000
    rand = int.from_bytes(os.urandom(10), "big")
    value = (millis & 0xFFFF_FFFF_FFFF) << 80
    value |= 0x7 << 76
    value |= ((rand >> 62) & 0xFFF) << 64
    value |= 0b10 << 62
    value |= rand & 0x3FFF_FFFF_FFFF_FFFF
    return str(uuid.UUID(int=value))


def request_fingerprint(headers: Mapping[str, str], names: list[str] | None = None) -> str:
    names = names if names is not None else settings.SESSION_FINGERPRINT_HEADERS
    values = [headers.get(name) for name in names]
    if not any(values):
        return ""
    digest = hashlib.sha256()
    for name, value in zip(names, values):
        digest.update(f"{name.lower()}:{value or ''}\n".encode("utf-8"))
    return digest.hexdigest()


def _serializer(secret_key: str | None = None) -> URLSafeSerializer:
    return URLSafeSerializer(secret_key or settings.SECRET_KEY, salt=_COOKIE_SALT)


def dump_session_cookie(session_id: str, account_id: int, secret_key: str | None = None) -> str:
    payload = SessionCookie(session_id=session_id, account_id=account_id)
    return _serializer(secret_key).dumps(payload.model_dump())


def load_session_cookie(value: str, secret_key: str | None = None) -> SessionCookie:
    try:
        data = _serializer(secret_key).loads(value)
        return SessionCookie.model_validate(data)
    except (BadData, ValidationError) as exc:
        raise DeserializationError("Malformed session cookie") from exc
