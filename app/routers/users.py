from fastapi import APIRouter
from pydantic import BaseModel

from app.dependencies import UserDep
from app.schemas.user import User, UserPreferences, UserUpdate

router = APIRouter(tags=["users"])


class AvatarRequest(BaseModel):
    avatar_url: str


class LoginRequest(BaseModel):
    email: str
    password: str


@router.get("/users/me", response_model=User)
async def current_user(service: UserDep) -> User:
    return await service.get_current_user()


@router.get("/users/{user_id}", response_model=User)
async def get_user(user_id: int, service: UserDep) -> User:
    return await service.get_by_id(user_id)


@router.patch("/users/{user_id}", response_model=User)
async def update_user(user_id: int, payload: UserUpdate, service: UserDep) -> User:
    return await service.update_profile(user_id, payload)


@router.patch("/users/{user_id}/preferences", response_model=User)
async def update_preferences(
    user_id: int, payload: UserPreferences, service: UserDep
) -> User:
    return await service.update_preferences(user_id, payload)


@router.put("/users/{user_id}/avatar", response_model=User)
async def upload_avatar(user_id: int, payload: AvatarRequest, service: UserDep) -> User:
    return await service.upload_avatar(user_id, payload.avatar_url)


@router.post("/auth/login", response_model=User)
async def login(payload: LoginRequest, service: UserDep) -> User:
    return await service.authenticate(payload.email, payload.password)


@router.post("/auth/register", response_model=User)
async def register(payload: dict, service: UserDep) -> User:
    return await service.register(payload)
