"""
Auth Service

Registration, login and token verification. Shares the user gateway with
UserService but owns the credential checks.
"""

import logging
from typing import Any, Dict, Optional, Tuple

from storefront.models.user import User
from storefront.repositories.users import UserRepository
from storefront.security import create_access_token, decode_access_token, hash_password, verify_password
from storefront.services.errors import AuthenticationError, ConflictError, StoreError, service_operation
from storefront.services.validation import check_email, check_password, require_fields

logger = logging.getLogger(__name__)


def _issue_token(user: User) -> str:
    return create_access_token({"id": user.id_user, "email": user.email})


class AuthService:
    def __init__(self, repository: UserRepository):
        self.repository = repository

    @service_operation("Error registering user")
    def register(
        self,
        name: Optional[str],
        last_name: Optional[str],
        phone: Optional[str],
        email: Optional[str],
        password: Optional[str],
    ) -> Dict[str, Any]:
        """
        Create an account and issue a token for it.

        Returns the public profile plus the token; the password hash is never
        part of the result.
        """
        fields = {"name": name, "last_name": last_name, "email": email, "password": password}
        require_fields(fields, fields.keys(), "Name, last name, email, and password are required fields")
        check_email(email)
        check_password(password)

        if self.repository.find_by_email(email):
            raise ConflictError("Email is already registered")

        created = self.repository.create(
            {
                "name": name,
                "last_name": last_name,
                "phone": phone,
                "email": email,
                "password": hash_password(password),
            }
        )
        if not created or not created.id_user:
            raise StoreError("Unexpected response while creating the user")

        logger.info(f"Registered user {created.id_user}")
        return {
            "id": created.id_user,
            "name": created.name,
            "last_name": created.last_name,
            "phone": created.phone,
            "email": created.email,
            "token": _issue_token(created),
        }

    @service_operation("Error logging in")
    def login(self, email: Optional[str], password: Optional[str]) -> Tuple[User, str]:
        """
        Check credentials and issue a token.

        Returns the stored user row as-is (hash included); callers exposing it
        over the wire must strip the password.
        """
        user = self.repository.find_by_email(email) if email else None
        if not user:
            logger.warning("Login attempt for unknown email")
            raise AuthenticationError("User not found")

        if not verify_password(password or "", user.password):
            logger.warning(f"Failed login for user {user.id_user}")
            raise AuthenticationError("Incorrect password")

        return user, _issue_token(user)

    def verify_token(self, token: Optional[str]) -> Dict[str, Any]:
        """Decode a token into its claims or raise AuthenticationError."""
        return decode_access_token(token)
