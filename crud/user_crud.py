from typing import Optional
from schemas.user import RegisterInput, LoginInput, AuthResult, UserRecord, generate_user_id
from config.database import Database
from crud.latency import query_delay
import logging

logger = logging.getLogger(__name__)

MIN_PHONE_LENGTH = 10
MIN_PASSWORD_LENGTH = 6


def _registration_error(data: RegisterInput, db_users) -> Optional[str]:
    # Order matters: callers rely on the first failing rule's message
    if any(user.email == data.email for user in db_users):
        return "Email already registered. Please login instead."
    if not data.name or not data.phone or not data.email or not data.password:
        return "All fields are required"
    if len(data.phone) < MIN_PHONE_LENGTH:
        return f"Phone number must be at least {MIN_PHONE_LENGTH} digits"
    if "@" not in data.email:
        return "Invalid email address"
    if len(data.password) < MIN_PASSWORD_LENGTH:
        return f"Password must be at least {MIN_PASSWORD_LENGTH} characters"
    return None


async def register_user(data: RegisterInput) -> AuthResult:
    """Register a new user. Rejections come back as ``success=False``, never raised."""
    logger.info(f"Mutation: register email={data.email}")
    await query_delay()

    db = Database()
    document = db.read()

    error = _registration_error(data, document.users)
    if error:
        logger.info(f"Registration failed for {data.email}: {error}")
        return AuthResult(success=False, message=error)

    user = UserRecord(
        id=generate_user_id(u.id for u in document.users),
        name=data.name,
        phone=data.phone,
        email=data.email,
        password=data.password
    )
    document.users.append(user)
    db.write(document)

    logger.info(f"User registered: {user.email} ({user.id})")
    return AuthResult(
        success=True,
        message="Registration successful! Please login to continue.",
        user=user.public()
    )


async def login_user(data: LoginInput) -> AuthResult:
    logger.info(f"Mutation: login email={data.email}")
    await query_delay()

    db = Database()
    user = next(
        (u for u in db.read().users if u.email == data.email and u.password == data.password),
        None
    )
    if not user:
        # Same message whichever field was wrong
        logger.info(f"Login failed for {data.email}: invalid credentials")
        return AuthResult(success=False, message="Invalid email or password")

    logger.info(f"Login successful: {user.email}")
    return AuthResult(success=True, message="Login successful!", user=user.public())

