"""Email/password sign-in for staff accounts."""

from django.db import transaction
from django.contrib.auth import get_user_model
from django.utils import timezone

from .exceptions import InvalidCredentialsError, InactiveAccountError, UnverifiedAccountError

User = get_user_model()

BAD_CREDENTIALS = "Invalid email or password"


@transaction.atomic
def authenticate_user(*, email: str, password: str) -> User:
    """
    Check credentials and stamp last_login.

    Unknown emails and wrong passwords produce the same message. Accounts
    must be active and have completed OTP verification.

    Raises:
        InvalidCredentialsError, InactiveAccountError, UnverifiedAccountError
    """
    user = User.objects.select_for_update().filter(email=email.strip().lower()).first()
    if user is None or not user.check_password(password):
        raise InvalidCredentialsError(BAD_CREDENTIALS)

    if not user.is_active:
        raise InactiveAccountError("Account is deactivated")
    if not user.is_verified:
        raise UnverifiedAccountError("Please verify your email before logging in")

    User.objects.filter(pk=user.pk).update(last_login=timezone.now())
    user.refresh_from_db(fields=['last_login'])
    return user
