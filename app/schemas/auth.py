from pydantic import BaseModel, Field


class LoginRequest(BaseModel):
    email: str = Field(examples=["admin@photoplatform.com"])
    password: str = Field(examples=["admin123"])


class AdminResponse(BaseModel):
    id: str
    email: str
    name: str

    model_config = {"from_attributes": True}


class AuthResponse(BaseModel):
    admin: AdminResponse
    accessToken: str
