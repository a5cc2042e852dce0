from pydantic import BaseModel, Field, field_validator

# bcrypt only hashes the first 72 bytes of a password
MAX_PASSWORD_BYTES = 72

class Credentials(BaseModel):
    """Body of both login and signup requests"""
    username: str = Field(..., min_length=1)
    password: str = Field(..., min_length=1)

    @field_validator("password")
    @classmethod
    def check_password_length(cls, v: str) -> str:
        if len(v.encode("utf-8")) > MAX_PASSWORD_BYTES:
            raise ValueError(f"Password cannot be longer than {MAX_PASSWORD_BYTES} bytes.")
        return v

class UserRecord(BaseModel):
    """A stored account: the username and its bcrypt hash, never the password"""
    username: str
    password_hash: str

class TokenPair(BaseModel):
    """Tokens issued after a successful login or signup"""
    access_token: str
    refresh_token: str
    access_max_age: int
    refresh_max_age: int
