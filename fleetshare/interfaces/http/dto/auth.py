from __future__ import annotations

from pydantic import BaseModel, Field, field_validator


class CredentialsDTO(BaseModel):
    username: str = Field(min_length=1, max_length=128)
    password: str = Field(min_length=1, max_length=256)

    @field_validator("username")
    @classmethod
    def validate_username(cls, value: str) -> str:
        value = value.strip()
        if not value:
            raise ValueError("Username cannot be blank")
        return value


class RegisterRequestDTO(CredentialsDTO):
    pass


class LoginRequestDTO(CredentialsDTO):
    pass


class MessageDTO(BaseModel):
    message: str


class TokenDTO(BaseModel):
    token: str
