"""
User API Routes
Account CRUD (protected). Responses never carry the password hash.
"""

from typing import List, Optional

from fastapi import APIRouter, Depends, HTTPException
from pydantic import BaseModel

from storefront.dependencies import get_user_service
from storefront.schemas import ApiResponse, UserResponse, envelope
from storefront.services.user_service import UserService

router = APIRouter()


class UserCreateRequest(BaseModel):
    name: Optional[str] = None
    last_name: Optional[str] = None
    phone: Optional[str] = None
    email: Optional[str] = None
    password: Optional[str] = None


class UserUpdateRequest(UserCreateRequest):
    pass


def _not_found():
    return HTTPException(status_code=404, detail="User not found")


@router.get("/users", response_model=ApiResponse[List[UserResponse]])
def list_users(service: UserService = Depends(get_user_service)):
    return envelope([UserResponse.model_validate(u) for u in service.list_users()])


@router.get("/users/email/{email}", response_model=ApiResponse[UserResponse])
def get_user_by_email(email: str, service: UserService = Depends(get_user_service)):
    user = service.find_by_email(email)
    if not user:
        raise _not_found()
    return envelope(UserResponse.model_validate(user))


@router.get("/users/{user_id}", response_model=ApiResponse[UserResponse])
def get_user(user_id: int, service: UserService = Depends(get_user_service)):
    user = service.get_user_by_id(user_id)
    if not user:
        raise _not_found()
    return envelope(UserResponse.model_validate(user))


@router.post("/users", response_model=ApiResponse[UserResponse], status_code=201)
def create_user(request: UserCreateRequest, service: UserService = Depends(get_user_service)):
    user = service.create_user(request.model_dump(exclude_unset=True))
    return envelope(UserResponse.model_validate(user), "User created successfully")


@router.put("/users/{user_id}", response_model=ApiResponse[UserResponse])
def update_user(user_id: int, request: UserUpdateRequest, service: UserService = Depends(get_user_service)):
    user = service.update_user(user_id, request.model_dump(exclude_unset=True))
    if not user:
        raise _not_found()
    return envelope(UserResponse.model_validate(user), "User updated successfully")


@router.delete("/users/{user_id}/hard", response_model=ApiResponse[UserResponse])
def hard_delete_user(user_id: int, service: UserService = Depends(get_user_service)):
    user = service.hard_delete_user(user_id)
    if not user:
        raise _not_found()
    return envelope(UserResponse.model_validate(user), "User permanently deleted")


@router.delete("/users/{user_id}", response_model=ApiResponse[UserResponse])
def delete_user(user_id: int, service: UserService = Depends(get_user_service)):
    user = service.delete_user(user_id)
    if not user:
        raise _not_found()
    return envelope(UserResponse.model_validate(user), "User deleted successfully (soft delete)")
