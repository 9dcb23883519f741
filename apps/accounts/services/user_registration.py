"""User registration service."""

from django.db import transaction
from django.contrib.auth import get_user_model

from .exceptions import UserRegistrationError
from .notifications import send_otp_email
from .otp import PURPOSE_REGISTER, issue_otp, track_request

User = get_user_model()


@transaction.atomic
def register_user(
    *,
    email: str,
    password: str,
    full_name: str = ""
) -> User:
    """
    Register an unverified user and email them a verification code.

    Args:
        email: User's email address
        password: User's password (will be hashed)
        full_name: Optional full name

    Returns:
        Created User instance

    Raises:
        UserRegistrationError: If the email is already registered
        OTPRateLimitError: If codes were requested too often for this email
    """
    email = email.strip().lower()
    if User.objects.filter(email=email).exists():
        raise UserRegistrationError("User already exists")

    track_request(email)

    user = User.objects.create_user(email=email, password=password, full_name=full_name)

    otp = issue_otp(email, PURPOSE_REGISTER)
    send_otp_email(email=email, full_name=full_name, otp=otp, purpose=PURPOSE_REGISTER)

    return user
