"""
One-time passcodes kept in the Django cache.

Codes are 4 digits, live for ``OTP_TTL_SECONDS`` and are deleted once used.
Requests per email are rate limited: a cooldown between consecutive requests
and a lockout after ``OTP_MAX_REQUESTS`` requests inside the lockout window.
"""

import logging
import math
import secrets

from django.conf import settings
from django.core.cache import cache
from django.utils import timezone

from .exceptions import InvalidOTPError, OTPRateLimitError

logger = logging.getLogger(__name__)

PURPOSE_REGISTER = 'register'
PURPOSE_RESET = 'forgot'
PURPOSES = (PURPOSE_REGISTER, PURPOSE_RESET)


def _ttl():
    return getattr(settings, 'OTP_TTL_SECONDS', 120)


def _max_requests():
    return getattr(settings, 'OTP_MAX_REQUESTS', 2)


def _cooldown():
    return getattr(settings, 'OTP_REQUEST_COOLDOWN_SECONDS', 120)


def _lockout():
    return getattr(settings, 'OTP_LOCKOUT_SECONDS', 900)


def _otp_key(email, purpose):
    return f"otp:{purpose}:{email.lower()}"


def _requests_key(email):
    return f"otp-requests:{email.lower()}"


def _minutes(seconds):
    return max(1, math.ceil(seconds / 60))


def generate_otp() -> str:
    """Random 4-digit code."""
    return str(1000 + secrets.randbelow(9000))


def set_otp(email: str, otp: str, purpose: str = PURPOSE_REGISTER) -> None:
    cache.set(_otp_key(email, purpose), otp, timeout=_ttl())


def issue_otp(email: str, purpose: str = PURPOSE_REGISTER) -> str:
    """Generate and store a fresh code for ``email``, replacing any earlier one."""
    otp = generate_otp()
    set_otp(email, otp, purpose)
    return otp


def verify_otp(email: str, otp, purpose: str = PURPOSE_REGISTER) -> None:
    """
    Check a submitted code. A correct code is consumed.

    Raises:
        InvalidOTPError: If no code is stored (never issued or expired) or it differs
    """
    key = _otp_key(email, purpose)
    stored = cache.get(key)
    if stored is None:
        raise InvalidOTPError("OTP not found or expired")
    if str(stored) != str(otp):
        raise InvalidOTPError("Invalid OTP")
    cache.delete(key)


def track_request(email: str) -> None:
    """
    Record an OTP request for ``email`` or refuse it.

    Raises:
        OTPRateLimitError: With a human-readable reason when refused
    """
    key = _requests_key(email)
    now = timezone.now().timestamp()
    lockout = _lockout()

    state = cache.get(key) or {'attempts': [], 'lockout_until': None}

    if state['lockout_until'] and now > state['lockout_until']:
        state = {'attempts': [], 'lockout_until': None}

    if state['lockout_until']:
        raise OTPRateLimitError(
            f"Too many OTP requests. Try again in {_minutes(state['lockout_until'] - now)} minute(s)."
        )

    attempts = [t for t in state['attempts'] if now - t < lockout]

    if attempts and now - attempts[-1] < _cooldown():
        wait = _cooldown() - (now - attempts[-1])
        raise OTPRateLimitError(f"Please wait {_minutes(wait)} minute(s) before requesting another OTP.")

    if len(attempts) >= _max_requests():
        cache.set(key, {'attempts': attempts, 'lockout_until': now + lockout}, timeout=lockout)
        logger.warning("OTP requests locked for %s", email)
        raise OTPRateLimitError(f"Too many OTP requests. Try again in {_minutes(lockout)} minute(s).")

    attempts.append(now)
    cache.set(key, {'attempts': attempts, 'lockout_until': None}, timeout=lockout)
