from typing import List

from fastapi import APIRouter, Depends, Response, status

from ..dependencies import get_user_service
from ..schemas import UserCreate, UserResponse, UserUpdate
from ..services import UserService

router = APIRouter()


@router.get("/users", response_model=List[UserResponse])
async def list_users(service: UserService = Depends(get_user_service)):
    return await service.list_users()


@router.get("/users/{user_id}", response_model=UserResponse)
async def get_user(user_id: str, service: UserService = Depends(get_user_service)):
    return await service.get_user(user_id)


@router.post("/users", response_model=UserResponse, status_code=status.HTTP_201_CREATED)
async def create_user(user: UserCreate, service: UserService = Depends(get_user_service)):
    return await service.create_user(user)


@router.put("/users/{user_id}", response_model=UserResponse)
async def update_user(
    user_id: str,
    user_update: UserUpdate,
    service: UserService = Depends(get_user_service),
):
    """Update a user. Blank ``name`` or ``email`` values are ignored."""
    return await service.update_user(user_id, user_update)


@router.delete("/users/{user_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_user(user_id: str, service: UserService = Depends(get_user_service)):
    """Delete a user. Tasks assigned to the user are left as they are."""
    await service.delete_user(user_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
