"""Authentication gate shared by the routers.

The caller identifies itself with a `user-id` header; credentials and
sessions are not verified here.
"""
from fastapi import Depends, Header
from sqlalchemy.ext.asyncio import AsyncSession

from app.db.database import get_session
from app.errors import ErrorType
from app.exceptions import AppException
from app.models import User
from app.services import user_service


async def get_current_user(
    caller_id: str | None = Header(None, alias="user-id"),
    session: AsyncSession = Depends(get_session)
) -> User:
    if not caller_id:
        raise AppException(ErrorType.UNAUTHORIZED, "Unauthorized")
    try:
        uid = int(caller_id)
    except ValueError:
        raise AppException(ErrorType.UNAUTHORIZED, "Unauthorized")

    user = await session.get(User, uid)
    if user is None or not user_service.is_active(user):
        raise AppException(ErrorType.UNAUTHORIZED, "Unauthorized")
    return user


async def require_admin(user: User = Depends(get_current_user)) -> User:
    if not user_service.is_admin(user):
        raise AppException(ErrorType.FORBIDDEN, "Forbidden: Admin access required")
    return user
