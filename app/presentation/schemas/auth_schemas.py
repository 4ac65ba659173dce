"""User schemas for request/response validation"""

from datetime import datetime
from typing import Optional

from pydantic import BaseModel, Field

from app.domain.entities.user import UserProjection
from app.domain.value_objects.forms import LoginForm, RegistrationForm


class UserRegisterRequest(BaseModel):
    """Schema for user registration request

    Fields are optional here; missing values are reported by the field
    validators as required-field errors.
    """

    username: Optional[str] = Field(default=None, description="Username (3-20 characters)")
    email: Optional[str] = Field(default=None, description="Email address")
    password: Optional[str] = Field(default=None, description="Password (8+ characters)")
    confirm_password: Optional[str] = Field(
        default=None, alias="confirmPassword", description="Password confirmation"
    )
    full_name: Optional[str] = Field(default=None, alias="fullName", description="Full name")

    class Config:
        populate_by_name = True
        json_schema_extra = {
            "example": {
                "username": "alice123",
                "email": "alice@example.com",
                "password": "Abcdefg1",
                "confirmPassword": "Abcdefg1",
                "fullName": "Alice Anderson",
            }
        }

    def to_form(self) -> RegistrationForm:
        """Convert to the domain form"""
        return RegistrationForm(
            username=self.username,
            email=self.email,
            password=self.password,
            confirm_password=self.confirm_password,
            full_name=self.full_name,
        )


class UserLoginRequest(BaseModel):
    """Schema for user login request"""

    identifier: Optional[str] = Field(default=None, description="Username or email")
    password: Optional[str] = Field(default=None, description="Password")

    class Config:
        json_schema_extra = {"example": {"identifier": "alice123", "password": "Abcdefg1"}}

    def to_form(self) -> LoginForm:
        """Convert to the domain form"""
        return LoginForm(identifier=self.identifier, password=self.password)


class UserResponse(BaseModel):
    """Schema for user data in responses"""

    id: int
    username: str
    email: str
    full_name: str = Field(..., alias="fullName")

    class Config:
        populate_by_name = True

    @classmethod
    def from_projection(cls, user: UserProjection) -> "UserResponse":
        return cls(id=user.id, username=user.username, email=user.email, full_name=user.full_name)


class UserListItem(UserResponse):
    """Schema for a user entry in the listing"""

    created_at: Optional[datetime] = Field(default=None, alias="createdAt")

    @classmethod
    def from_projection(cls, user: UserProjection) -> "UserListItem":
        return cls(
            id=user.id,
            username=user.username,
            email=user.email,
            full_name=user.full_name,
            created_at=user.created_at,
        )


class RegisterResponse(BaseModel):
    """Schema for registration response"""

    success: bool = True
    message: str = "User registered successfully"
    user: UserResponse


class LoginResponse(BaseModel):
    """Schema for login response"""

    success: bool = True
    message: str = "Login successful"
    user: UserResponse

    class Config:
        json_schema_extra = {
            "example": {
                "success": True,
                "message": "Login successful",
                "user": {
                    "id": 1,
                    "username": "alice123",
                    "email": "alice@example.com",
                    "fullName": "Alice Anderson",
                },
            }
        }


class UsersListResponse(BaseModel):
    """Schema for user listing response"""

    success: bool = True
    users: list[UserListItem]
    count: int
