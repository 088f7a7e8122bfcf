from pydantic import BaseModel, EmailStr, Field, SecretStr


class RegisterRequest(BaseModel):
    email: EmailStr
    password: SecretStr = Field(max_length=72)  # bcrypt only uses the first 72 bytes

    model_config = {
        'json_schema_extra': {
            'example': {'email': 'traveller@example.com', 'password': 'P@ssw0rd'},
        }
    }


class RegisterResponse(BaseModel):
    message: str = 'Registered'
    user_id: int


class LoginRequest(BaseModel):
    email: str = Field(min_length=1)
    password: SecretStr = Field(min_length=1)


class LoginResponse(BaseModel):
    token: str
    expires_in: int
    user_id: int
