"""Profile management service."""

from typing import Optional
from uuid import UUID

from django.db import transaction
from django.contrib.auth import get_user_model

from .exceptions import PasswordConfirmationError

User = get_user_model()


@transaction.atomic
def update_profile(
    *,
    user_id: UUID,
    full_name: Optional[str] = None,
    current_password: Optional[str] = None,
    new_password: Optional[str] = None,
) -> User:
    """
    Update the full name and/or password.

    Raises:
        PasswordConfirmationError: If a new password is set without the correct current one
    """
    user = (
        User.objects
        .select_for_update()
        .get(id=user_id)
    )
    update_fields = ['updated_at']

    if full_name is not None:
        user.full_name = full_name
        update_fields.append('full_name')

    if new_password:
        if not current_password or not user.check_password(current_password):
            raise PasswordConfirmationError("Current password is incorrect")
        user.set_password(new_password)
        update_fields.append('password')

    user.save(update_fields=update_fields)
    return user
