from pydantic import BaseModel, EmailStr, ConfigDict, Field, field_validator
from datetime import datetime
from app.core.security import MAX_PASSWORD_BYTES, password_too_long

class UserCreate(BaseModel):
    email: EmailStr
    password: str = Field(min_length=4)
    name: str = Field(min_length=1)

    @field_validator("password")
    @classmethod
    def password_fits_bcrypt(cls, value: str) -> str:
        if password_too_long(value):
            raise ValueError(f"Password must be at most {MAX_PASSWORD_BYTES} bytes")
        return value

class UserResponse(BaseModel):
    id: int
    email: str
    name: str
    created_at: datetime

    model_config = ConfigDict(from_attributes=True)

class LoginRequest(BaseModel):
    email: EmailStr
    password: str = Field(min_length=1)

class LoginResponse(BaseModel):
    user: UserResponse

class CurrentUser(BaseModel):
    id: int
    name: str
    email: str

    model_config = ConfigDict(from_attributes=True)

class MessageResponse(BaseModel):
    message: str
