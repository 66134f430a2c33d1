from __future__ import annotations

from pydantic import AliasChoices, BaseModel, ConfigDict, Field, StrictStr


class _CredentialsDTO(BaseModel):
    # Clients send the identifier as "identifier", "email" or "username".
    identifier: StrictStr | None = Field(
        None,
        max_length=1024,
        validation_alias=AliasChoices("identifier", "email", "username"),
    )
    password: StrictStr | None = Field(None, max_length=1024)

    model_config = ConfigDict(extra="ignore")


class RegisterRequestDTO(_CredentialsDTO):
    pass


class LoginRequestDTO(_CredentialsDTO):
    pass


class RegisterSuccessDTO(BaseModel):
    message: str = "User created"
    id: int


class LoginSuccessDTO(BaseModel):
    message: str = "Authenticated"
    redirect: str | None = None


class SessionDTO(BaseModel):
    id: int
    identifier: str


class MessageDTO(BaseModel):
    message: str
