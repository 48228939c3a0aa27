from pydantic import BaseModel


class CredentialsRequest(BaseModel):
    """Body of /api/register and /api/login."""
    username: str
    password: str


class RegisterResponse(BaseModel):
    rows: int
