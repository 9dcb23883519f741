"""Domain-specific exceptions for accounts services."""


class AccountsServiceError(Exception):
    """Base exception for accounts services."""
    pass


class UserRegistrationError(AccountsServiceError):
    """Raised when user registration fails."""
    pass


class InvalidCredentialsError(AccountsServiceError):
    """Raised when authentication credentials are invalid."""
    pass


class InactiveAccountError(AccountsServiceError):
    """Raised when account is deactivated."""
    pass


class UnverifiedAccountError(AccountsServiceError):
    """Raised when logging in before the email is verified."""
    pass


class UserNotFoundError(AccountsServiceError):
    """Raised when user does not exist."""
    pass


class InvalidOTPError(AccountsServiceError):
    """Raised when an OTP is missing, expired or wrong."""
    pass


class OTPRateLimitError(AccountsServiceError):
    """Raised when OTPs are requested too often for one email."""
    pass


class ResetNotVerifiedError(AccountsServiceError):
    """Raised when resetting a password without a verified reset OTP."""
    pass


class PasswordConfirmationError(AccountsServiceError):
    """Raised when password confirmation fails."""
    pass
