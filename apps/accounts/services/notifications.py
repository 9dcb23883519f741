"""OTP email delivery."""

import logging

from django.conf import settings
from django.core.mail import send_mail

from .otp import PURPOSE_RESET

logger = logging.getLogger(__name__)

_SUBJECTS = {
    PURPOSE_RESET: 'Your password reset code',
}
_DEFAULT_SUBJECT = 'Verify your email'


def send_otp_email(*, email: str, full_name: str, otp: str, purpose: str) -> None:
    """Email a one-time passcode. Delivery errors propagate to the caller."""
    minutes = max(1, getattr(settings, 'OTP_TTL_SECONDS', 120) // 60)
    body = (
        f"Hello {full_name or 'User'},\n\n"
        f"Your one-time code is {otp}. It expires in {minutes} minute(s).\n\n"
        "If you did not request this code you can ignore this email."
    )
    send_mail(
        subject=_SUBJECTS.get(purpose, _DEFAULT_SUBJECT),
        message=body,
        from_email=settings.DEFAULT_FROM_EMAIL,
        recipient_list=[email],
    )
    logger.info("Sent %s OTP to %s", purpose, email)
