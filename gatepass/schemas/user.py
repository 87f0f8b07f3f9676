# gatepass/schemas/user.py
from pydantic import BaseModel


class User(BaseModel):
    id: str
    username: str
    password: str      # plaintext-equality credential
    role: str          # student | moderator | gatekeeper
    name: str


class UserProfile(BaseModel):
    id: str
    username: str
    role: str
    name: str


class LoginRequest(BaseModel):
    username: str
    password: str
