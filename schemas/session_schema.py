from pydantic import BaseModel


class SessionCookie(BaseModel):
    """Payload signed into the session cookie."""
    session_id: str
    account_id: int
