"""Accounts: registration, login and profile/admin management."""
import logging

import bcrypt
from sqlalchemy import func, select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from app.config import Config
from app.errors import ErrorType
from app.exceptions import AppException
from app.models import User, Role, Status
from app.schemas.user import RegisterRequest, ProfileUpdate, UserAdminUpdate
from app.services import image_service

logger = logging.getLogger(__name__)

INVALID_CREDENTIALS = "Invalid credentials"
EMAIL_CONFLICT = "Email already exists"

_dummy_hash: bytes | None = None


def hash_password(password: str) -> str:
    salt = bcrypt.gensalt(rounds=Config.BCRYPT_ROUNDS)
    return bcrypt.hashpw(password.encode("utf-8"), salt).decode("utf-8")


def verify_password(password: str, stored: str) -> bool:
    try:
        return bcrypt.checkpw(password.encode("utf-8"), stored.encode("utf-8"))
    except ValueError:
        return False


def _burn_password_check(password: str):
    """Spend one bcrypt check so unknown emails answer as slowly as wrong passwords."""
    global _dummy_hash
    if _dummy_hash is None:
        _dummy_hash = bcrypt.hashpw(b"not-a-real-password", bcrypt.gensalt(rounds=Config.BCRYPT_ROUNDS))
    verify_password(password, _dummy_hash.decode("utf-8"))


def is_admin(user: User | None) -> bool:
    return user is not None and user.role_id == Role.ADMIN


def is_active(user: User) -> bool:
    return user.status_id != Status.DEACTIVATED


def normalize_email(email: str) -> str:
    return email.strip().lower()


async def get_user(session: AsyncSession, user_id: int) -> User:
    user = await session.get(User, user_id)
    if user is None:
        raise AppException(ErrorType.NOT_FOUND, "User not found")
    return user


async def get_by_email(session: AsyncSession, email: str) -> User | None:
    return await session.scalar(
        select(User).where(func.lower(User.email) == normalize_email(email))
    )


async def list_users(session: AsyncSession) -> list[User]:
    return list((await session.scalars(select(User).order_by(User.id))).all())


async def _ensure_email_available(session: AsyncSession, email: str, exclude_id: int | None = None):
    existing = await get_by_email(session, email)
    if existing is not None and existing.id != exclude_id:
        raise AppException(ErrorType.CONFLICT, EMAIL_CONFLICT)


async def _commit(session: AsyncSession):
    try:
        await session.commit()
    except IntegrityError:
        await session.rollback()
        raise AppException(ErrorType.CONFLICT, EMAIL_CONFLICT)


async def register(
    session: AsyncSession,
    data: RegisterRequest,
    role: Role = Role.CUSTOMER
) -> User:
    """Create an active account. Self-registration always yields a customer."""
    email = normalize_email(data.email)
    await _ensure_email_available(session, email)

    user = User(
        name=data.name,
        email=email,
        password=hash_password(data.password),
        status_id=Status.ACTIVE.value,
        role_id=role.value,
        profile_image=data.profile_image or Config.DEFAULT_USER_IMAGE,
    )
    session.add(user)
    await _commit(session)
    await session.refresh(user)

    logger.info(f"Registered user {user.id} role={role.name}")
    return user


async def authenticate(session: AsyncSession, email: str, password: str) -> User:
    """Check credentials.

    Unknown email and wrong password fail identically (401) so the response
    does not reveal whether the account exists. A deactivated account is only
    reported (403) once the password has been verified.
    """
    user = await get_by_email(session, email)
    if user is None:
        _burn_password_check(password)
        logger.warning("Login failed")
        raise AppException(ErrorType.UNAUTHORIZED, INVALID_CREDENTIALS)

    if not verify_password(password, user.password):
        logger.warning(f"Login failed for user {user.id}")
        raise AppException(ErrorType.UNAUTHORIZED, INVALID_CREDENTIALS)

    if not is_active(user):
        raise AppException(ErrorType.FORBIDDEN, "User is deactivated")

    logger.info(f"User {user.id} logged in")
    return user


async def _apply_changes(session: AsyncSession, user: User, changes: dict) -> User:
    if "password" in changes:
        changes["password"] = hash_password(changes["password"])
    if "email" in changes:
        changes["email"] = normalize_email(changes["email"])
        await _ensure_email_available(session, changes["email"], exclude_id=user.id)
    for key in ("status_id", "role_id"):
        if key in changes:
            changes[key] = int(changes[key])

    replaced_image = None
    if "profile_image" in changes and changes["profile_image"] != user.profile_image:
        replaced_image = user.profile_image

    for field, value in changes.items():
        setattr(user, field, value)

    await _commit(session)
    await session.refresh(user)

    if replaced_image:
        image_service.remove_image(replaced_image)

    logger.info(f"Updated user {user.id}: {sorted(k for k in changes if k != 'password')}")
    return user


async def update_profile(session: AsyncSession, user: User, data: ProfileUpdate) -> User:
    return await _apply_changes(session, user, data.model_dump(exclude_none=True))


async def admin_update_user(session: AsyncSession, user_id: int, data: UserAdminUpdate) -> User:
    user = await get_user(session, user_id)
    return await _apply_changes(session, user, data.model_dump(exclude_none=True))


async def delete_user(session: AsyncSession, user_id: int):
    user = await get_user(session, user_id)
    profile_image = user.profile_image

    await session.delete(user)
    await session.commit()

    image_service.remove_image(profile_image)
    logger.info(f"Deleted user {user_id}")
