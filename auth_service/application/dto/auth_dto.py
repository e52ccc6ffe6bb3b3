from pydantic import BaseModel, Field


class CreateUserRequest(BaseModel):
    """
    DTO for user registration request.
    Fields are plain strings; domain value objects do the validation.
    """
    email: str
    password: str
    first_name: str
    last_name: str
    phone: str
    national_id: str
    location: str = ""


class CreateUserResponse(BaseModel):
    """DTO for a successful registration"""
    token: str
    message: str


class UserLoginRequest(BaseModel):
    """
    DTO for user login request.
    Email is a plain string so any address registration accepted can log in.
    """
    email: str
    password: str = Field(min_length=1, max_length=256)


class TokenResponse(BaseModel):
    """DTO for authentication token response"""
    access_token: str
    token_type: str = "bearer"
