"""Services for accounts business logic."""

from .exceptions import (
    AccountsServiceError,
    UserRegistrationError,
    InvalidCredentialsError,
    InactiveAccountError,
    UnverifiedAccountError,
    UserNotFoundError,
    InvalidOTPError,
    OTPRateLimitError,
    ResetNotVerifiedError,
    PasswordConfirmationError,
)
from .otp import PURPOSE_REGISTER, PURPOSE_RESET, PURPOSES, generate_otp, issue_otp, verify_otp, track_request
from .user_registration import register_user
from .user_authentication import authenticate_user
from .password_reset import request_password_reset, reset_password
from .email_verification import verify_user_otp, resend_otp
from .account_management import update_profile

__all__ = [
    # Exceptions
    'AccountsServiceError',
    'UserRegistrationError',
    'InvalidCredentialsError',
    'InactiveAccountError',
    'UnverifiedAccountError',
    'UserNotFoundError',
    'InvalidOTPError',
    'OTPRateLimitError',
    'ResetNotVerifiedError',
    'PasswordConfirmationError',
    # OTP
    'PURPOSE_REGISTER',
    'PURPOSE_RESET',
    'PURPOSES',
    'generate_otp',
    'issue_otp',
    'verify_otp',
    'track_request',
    # Services
    'register_user',
    'authenticate_user',
    'request_password_reset',
    'reset_password',
    'verify_user_otp',
    'resend_otp',
    'update_profile',
]
