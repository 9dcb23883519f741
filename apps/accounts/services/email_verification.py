"""OTP verification and resend service."""

from django.db import transaction
from django.contrib.auth import get_user_model

from .exceptions import UserNotFoundError
from .notifications import send_otp_email
from .otp import PURPOSE_REGISTER, PURPOSE_RESET, issue_otp, track_request, verify_otp

User = get_user_model()


def _get_user(email):
    try:
        return User.objects.select_for_update().get(email=email.strip().lower())
    except User.DoesNotExist:
        raise UserNotFoundError("User not found")


@transaction.atomic
def verify_user_otp(*, email: str, otp: str, purpose: str = PURPOSE_REGISTER) -> User:
    """
    Verify a code for either flow.

    A registration code marks the email verified; a reset code allows one
    password reset.

    Raises:
        UserNotFoundError: If no user has this email
        InvalidOTPError: If the code is missing, expired or wrong
    """
    user = _get_user(email)
    verify_otp(user.email, otp, purpose)

    if purpose == PURPOSE_RESET:
        user.is_reset_otp_verified = True
        user.save(update_fields=['is_reset_otp_verified', 'updated_at'])
    else:
        user.is_verified = True
        user.save(update_fields=['is_verified', 'updated_at'])

    return user


@transaction.atomic
def resend_otp(*, email: str, purpose: str = PURPOSE_REGISTER) -> None:
    """
    Issue a new code for either flow.

    Raises:
        UserNotFoundError: If no user has this email
        OTPRateLimitError: If codes were requested too often for this email
    """
    user = _get_user(email)
    track_request(user.email)

    otp = issue_otp(user.email, purpose)
    send_otp_email(email=user.email, full_name=user.get_display_name(), otp=otp, purpose=purpose)
