from pydantic import BaseModel, EmailStr, Field
from pydantic.alias_generators import to_camel


class UserCreate(BaseModel):
    name: str = Field(min_length=1)
    email: EmailStr
    password: str = Field(min_length=6)


class UserLogin(BaseModel):
    email: EmailStr
    password: str


class TokenResponse(BaseModel):
    access_token: str
    token_type: str = "bearer"

    class Config:
        alias_generator = to_camel
        populate_by_name = True


class UserResponse(BaseModel):
    id: str
    name: str
    email: str
    is_admin: bool

    class Config:
        from_attributes = True
        alias_generator = to_camel
        populate_by_name = True
