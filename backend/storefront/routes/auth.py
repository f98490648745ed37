"""
Auth API Routes
Register, login, logout and session check. The access token travels in an
httpOnly "token" cookie and is also returned in the body.
"""

from typing import Optional

from fastapi import APIRouter, Cookie, Depends, HTTPException, Response
from pydantic import BaseModel

from storefront.config import COOKIE_SECURE, TOKEN_COOKIE_NAME
from storefront.dependencies import get_auth_service
from storefront.schemas import UserResponse
from storefront.security import token_lifetime
from storefront.services.auth_service import AuthService
from storefront.services.errors import AuthenticationError

router = APIRouter()


class RegisterRequest(BaseModel):
    name: Optional[str] = None
    last_name: Optional[str] = None
    phone: Optional[str] = None
    email: Optional[str] = None
    password: Optional[str] = None


class LoginRequest(BaseModel):
    email: Optional[str] = None
    password: Optional[str] = None


def _set_token_cookie(response: Response, token: str) -> None:
    response.set_cookie(
        key=TOKEN_COOKIE_NAME,
        value=token,
        httponly=True,
        secure=COOKIE_SECURE,
        samesite="lax",
        max_age=int(token_lifetime().total_seconds()),
        path="/",
    )


@router.post("/auth/register", status_code=201)
def register(request: RegisterRequest, service: AuthService = Depends(get_auth_service)):
    result = service.register(request.name, request.last_name, request.phone, request.email, request.password)
    token = result.pop("token")
    return {"success": True, "message": "User registered successfully", "user": result, "token": token}


@router.post("/auth/login")
def login(request: LoginRequest, response: Response, service: AuthService = Depends(get_auth_service)):
    user, token = service.login(request.email, request.password)
    _set_token_cookie(response, token)
    # Strip the stored hash before it leaves the process
    profile = UserResponse.model_validate(user).model_dump(mode="json")
    return {"success": True, "message": "Login successful", "user": profile, "token": token}


@router.post("/auth/logout")
def logout(response: Response):
    response.delete_cookie(key=TOKEN_COOKIE_NAME, path="/", httponly=True, samesite="lax", secure=COOKIE_SECURE)
    return {"success": True, "message": "Logged out successfully"}


@router.get("/auth/check")
def check_auth(token: Optional[str] = Cookie(default=None), service: AuthService = Depends(get_auth_service)):
    if not token:
        raise HTTPException(status_code=401, detail="Not authenticated")
    try:
        claims = service.verify_token(token)
    except AuthenticationError:
        raise HTTPException(status_code=401, detail="Invalid or expired token")
    return {"success": True, "user": claims}
