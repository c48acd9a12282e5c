from pydantic import BaseModel, ConfigDict
from typing import Optional, Iterable
import random
import string
import time


class UserBase(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    name: str
    phone: str
    email: str


class User(UserBase):
    """Public view of a user; never carries the password."""
    id: str


class UserRecord(User):
    """User as stored in the data file (plain-text password, demo only)."""
    password: str

    def public(self) -> User:
        return User(**self.model_dump(exclude={"password"}))


class RegisterInput(BaseModel):
    # Defaults let blank or missing fields reach the soft validation in user_crud
    name: Optional[str] = ""
    phone: Optional[str] = ""
    email: Optional[str] = ""
    password: Optional[str] = ""


class LoginInput(BaseModel):
    email: Optional[str] = ""
    password: Optional[str] = ""


class AuthResult(BaseModel):
    success: bool
    message: str
    user: Optional[User] = None


def generate_entity_id(prefix: str, existing_ids: Iterable[str] = ()) -> str:
    """Build an id like ``user-1718000000000AB3`` that is not in existing_ids."""
    taken = set(existing_ids)
    while True:
        millis = int(time.time() * 1000)
        random_part = ''.join(random.choices(string.ascii_uppercase + string.digits, k=3))
        entity_id = f"{prefix}-{millis}{random_part}"
        if entity_id not in taken:
            return entity_id


def generate_user_id(existing_ids: Iterable[str] = ()) -> str:
    return generate_entity_id("user", existing_ids)
