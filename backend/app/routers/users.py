from fastapi import APIRouter, Depends, File, UploadFile
from sqlalchemy.ext.asyncio import AsyncSession

from app.db.database import get_session
from app.dependencies import get_current_user, require_admin
from app.models import User
from app.schemas.product import ImageUploadResponse
from app.schemas.user import (
    RegisterRequest, LoginRequest, ProfileUpdate, UserAdminUpdate,
    UserRead, AuthResponse, MessageResponse,
)
from app.services import user_service, image_service

router = APIRouter(prefix="/api", tags=["users"])


@router.post("/register", response_model=AuthResponse, status_code=201)
async def register(payload: RegisterRequest, session: AsyncSession = Depends(get_session)):
    user = await user_service.register(session, payload)
    return AuthResponse(message="User registered successfully", user=UserRead.model_validate(user))


@router.post("/login", response_model=AuthResponse)
async def login(payload: LoginRequest, session: AsyncSession = Depends(get_session)):
    user = await user_service.authenticate(session, payload.email, payload.password)
    return AuthResponse(message="Login successful", user=UserRead.model_validate(user))


@router.post("/logout", response_model=MessageResponse)
async def logout():
    """Stateless: the client drops its stored identity."""
    return MessageResponse(message="Logged out")


@router.post("/upload-profile-image", response_model=ImageUploadResponse)
async def upload_profile_image(
    profile_image: UploadFile = File(..., alias="profileImage"),
    _user: User = Depends(get_current_user)
):
    return ImageUploadResponse(image_path=await image_service.save_image(profile_image))


@router.get("/users/me", response_model=UserRead)
async def read_me(user: User = Depends(get_current_user)):
    return user


@router.put("/users/me", response_model=UserRead)
async def update_me(
    payload: ProfileUpdate,
    user: User = Depends(get_current_user),
    session: AsyncSession = Depends(get_session)
):
    return await user_service.update_profile(session, user, payload)


@router.get("/users", response_model=list[UserRead], dependencies=[Depends(require_admin)])
async def list_users(session: AsyncSession = Depends(get_session)):
    return await user_service.list_users(session)


@router.put("/users/{target_id}", response_model=UserRead, dependencies=[Depends(require_admin)])
async def update_user(
    target_id: int,
    payload: UserAdminUpdate,
    session: AsyncSession = Depends(get_session)
):
    return await user_service.admin_update_user(session, target_id, payload)


@router.delete("/users/{target_id}", response_model=MessageResponse, dependencies=[Depends(require_admin)])
async def delete_user(target_id: int, session: AsyncSession = Depends(get_session)):
    await user_service.delete_user(session, target_id)
    return MessageResponse(message="User deleted successfully")
