import pytest
from apps.accounts.models import User


@pytest.fixture
def user_unverified(db):
    """Create and return a user who has not confirmed their email."""
    return User.objects.create_user(
        email='unverified@example.com',
        password='TestPass123!',
        full_name='Unverified User',
    )


@pytest.fixture
def user_inactive(db):
    """Create and return an inactive user."""
    return User.objects.create_user(
        email='inactive@example.com',
        password='TestPass123!',
        full_name='Inactive User',
        is_active=False,
        is_verified=True,
    )


@pytest.fixture
def user_reset_verified(db):
    """Create a user whose password reset code was already verified."""
    return User.objects.create_user(
        email='resetuser@example.com',
        password='OldPass123!',
        full_name='Reset User',
        is_verified=True,
        is_reset_otp_verified=True,
    )


@pytest.fixture
def otp_settings(settings):
    settings.OTP_TTL_SECONDS = 120
    settings.OTP_MAX_REQUESTS = 2
    settings.OTP_REQUEST_COOLDOWN_SECONDS = 120
    settings.OTP_LOCKOUT_SECONDS = 900
    return settings
