"""
User Service

Validation and orchestration for customer accounts. Email is unique among
live users; passwords are bcrypt-hashed before they reach the gateway.
"""

import logging
from typing import Any, Dict, List, Optional

from storefront.models.user import User
from storefront.repositories.users import UserRepository
from storefront.security import hash_password
from storefront.services.errors import ConflictError, StoreError, service_operation
from storefront.services.validation import check_email, check_password, require_fields, require_id

logger = logging.getLogger(__name__)


class UserService:
    def __init__(self, repository: UserRepository):
        self.repository = repository

    @service_operation("Error fetching users")
    def list_users(self) -> List[User]:
        return self.repository.find_all()

    @service_operation("Error fetching user")
    def get_user_by_id(self, user_id: Any) -> Optional[User]:
        require_id(user_id, "User ID is required")
        return self.repository.find_by_id(user_id) or None

    @service_operation("Error fetching user by email")
    def find_by_email(self, email: str) -> Optional[User]:
        return self.repository.find_by_email(email) or None

    @service_operation("Error creating user")
    def create_user(self, fields: Dict[str, Any]) -> User:
        require_fields(
            fields,
            ("name", "last_name", "email", "password"),
            "Name, last name, email, and password are required fields",
        )
        email = check_email(fields["email"])
        if self.repository.find_by_email(email):
            raise ConflictError("Email already exists")
        password = check_password(fields["password"])

        user = self.repository.create(
            {
                "name": fields["name"],
                "last_name": fields["last_name"],
                "phone": fields.get("phone"),
                "email": email,
                "password": hash_password(password),
            }
        )
        logger.info(f"Created user {user.id_user}")
        return user

    @service_operation("Error updating user")
    def update_user(self, user_id: Any, fields: Dict[str, Any]) -> Optional[User]:
        require_id(user_id, "User ID is required for update")

        existing = self.repository.find_by_id(user_id)
        if not existing:
            return None

        update_data: Dict[str, Any] = {}
        if "email" in fields:
            email = fields["email"]
            if email != existing.email:
                check_email(email)
                if self.repository.find_by_email(email):
                    raise ConflictError("Email already exists")
            update_data["email"] = email
        if "password" in fields:
            update_data["password"] = hash_password(check_password(fields["password"]))
        for name, label in (("name", "Name"), ("last_name", "Last name")):
            if name in fields:
                require_fields(fields, (name,), f"{label} cannot be empty")
                update_data[name] = fields[name]
        if "phone" in fields:
            update_data["phone"] = fields["phone"]

        if not update_data:
            return existing

        if not self.repository.update(user_id, update_data):
            raise StoreError("Failed to update user")
        return self.repository.find_by_id(user_id)

    @service_operation("Error deleting user")
    def delete_user(self, user_id: Any) -> Optional[User]:
        require_id(user_id, "User ID is required for delete")

        existing = self.repository.find_by_id(user_id)
        if not existing:
            return None

        if not self.repository.soft_delete(user_id):
            raise StoreError("Failed to delete user")
        logger.info(f"Soft-deleted user {user_id}")
        return existing

    @service_operation("Error permanently deleting user")
    def hard_delete_user(self, user_id: Any) -> Optional[User]:
        require_id(user_id, "User ID is required for hard delete")

        existing = self.repository.find_by_id(user_id)
        if not existing:
            return None

        if not self.repository.hard_delete(user_id):
            raise StoreError("Failed to permanently delete user")
        return existing
