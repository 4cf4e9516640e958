from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field, field_validator
from pydantic.alias_generators import to_camel

from quora.domain.users.entities import NewUser, User


class _CamelCaseModel(BaseModel):
    # Accepts both firstName and first_name.
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class SignupRequestDTO(_CamelCaseModel):
    first_name: str = Field(default="", max_length=30)
    last_name: str = Field(default="", max_length=30)
    user_name: str = Field(min_length=1, max_length=30)
    email_address: str = Field(min_length=3, max_length=50)
    # No strength rules: any string, including "", is a valid password.
    password: str = Field(max_length=255)
    country: str | None = Field(default=None, max_length=30)
    about_me: str | None = Field(default=None, max_length=50)
    dob: str | None = Field(default=None, max_length=30)
    contact_number: str | None = Field(default=None, max_length=30)

    @field_validator("user_name", "email_address")
    @classmethod
    def _strip(cls, value: str) -> str:
        value = value.strip()
        if not value:
            raise ValueError("must not be blank")
        return value

    @field_validator("email_address")
    @classmethod
    def _looks_like_email(cls, value: str) -> str:
        if "@" not in value:
            raise ValueError("must be an email address")
        return value

    def to_candidate(self) -> NewUser:
        return NewUser(
            username=self.user_name,
            email=self.email_address,
            password=self.password,
            first_name=self.first_name,
            last_name=self.last_name,
            country=self.country,
            about_me=self.about_me,
            dob=self.dob,
            contact_number=self.contact_number,
        )


class SignupResponseDTO(BaseModel):
    id: str
    status: str = "USER SUCCESSFULLY REGISTERED"


class SigninResponseDTO(BaseModel):
    id: str
    message: str = "SIGNED IN SUCCESSFULLY"


class SignoutResponseDTO(BaseModel):
    id: str
    message: str = "SIGNED OUT SUCCESSFULLY"


class UserDetailsDTO(BaseModel):
    user_name: str
    first_name: str
    last_name: str
    email_address: str
    country: str | None
    about_me: str | None
    dob: str | None
    contact_number: str | None

    @classmethod
    def from_user(cls, user: User) -> UserDetailsDTO:
        return cls(
            user_name=user.username,
            first_name=user.first_name,
            last_name=user.last_name,
            email_address=user.email,
            country=user.country,
            about_me=user.about_me,
            dob=user.dob,
            contact_number=user.contact_number,
        )


class UserDeleteResponseDTO(BaseModel):
    id: str
    status: str = "USER SUCCESSFULLY DELETED"
