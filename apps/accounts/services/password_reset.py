"""Password reset service."""

from django.db import transaction
from django.contrib.auth import get_user_model

from .exceptions import UserNotFoundError, ResetNotVerifiedError
from .notifications import send_otp_email
from .otp import PURPOSE_RESET, issue_otp, track_request

User = get_user_model()


@transaction.atomic
def request_password_reset(*, email: str) -> None:
    """
    Email a password reset code.

    Raises:
        UserNotFoundError: If user does not exist
        OTPRateLimitError: If codes were requested too often for this email
    """
    try:
        user = User.objects.get(email=email.strip().lower(), is_active=True)
    except User.DoesNotExist:
        raise UserNotFoundError("User not found")

    track_request(user.email)

    otp = issue_otp(user.email, PURPOSE_RESET)
    send_otp_email(email=user.email, full_name=user.get_display_name(), otp=otp, purpose=PURPOSE_RESET)


@transaction.atomic
def reset_password(*, email: str, new_password: str) -> User:
    """
    Set a new password after the reset code was verified.

    Raises:
        UserNotFoundError: If user does not exist
        ResetNotVerifiedError: If no reset code was verified
    """
    try:
        user = (
            User.objects
            .select_for_update()
            .get(email=email.strip().lower(), is_active=True)
        )
    except User.DoesNotExist:
        raise UserNotFoundError("User not found")

    if not user.is_reset_otp_verified:
        raise ResetNotVerifiedError("OTP not verified for password reset")

    user.set_password(new_password)
    user.is_reset_otp_verified = False
    user.save(update_fields=['password', 'is_reset_otp_verified', 'updated_at'])

    return user
