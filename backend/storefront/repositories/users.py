from typing import Optional

from storefront.models.user import User
from storefront.repositories.base import SoftDeleteRepository


class UserRepository(SoftDeleteRepository[User]):
    """Persistence gateway for the user table."""

    model = User
    pk_name = "id_user"

    def find_by_email(self, email: str) -> Optional[User]:
        # Exact, case-sensitive match among live rows
        return self.session.exec(self._live().where(User.email == email)).first()
