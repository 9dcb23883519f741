from rest_framework import status, serializers
from rest_framework.decorators import api_view, permission_classes
from rest_framework.permissions import AllowAny, IsAuthenticated
from rest_framework.response import Response
from rest_framework_simplejwt.tokens import RefreshToken
from drf_spectacular.utils import extend_schema
from .serializers import (
    UserRegistrationSerializer,
    UserLoginSerializer,
    UserSerializer,
    OTPVerifySerializer,
    OTPResendSerializer,
    PasswordResetRequestSerializer,
    PasswordResetConfirmSerializer,
    ProfileUpdateSerializer,
)
from .services import (
    register_user,
    authenticate_user,
    verify_user_otp,
    resend_otp,
    request_password_reset,
    reset_password,
    update_profile,
    PURPOSE_RESET,
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


# Response serializers for API documentation
class TokensResponseSerializer(serializers.Serializer):
    refresh = serializers.CharField()
    access = serializers.CharField()


class AuthResponseSerializer(serializers.Serializer):
    message = serializers.CharField()
    user = UserSerializer()
    tokens = TokensResponseSerializer()


class MessageResponseSerializer(serializers.Serializer):
    message = serializers.CharField()


class ErrorResponseSerializer(serializers.Serializer):
    error = serializers.CharField()


def _tokens_for(user):
    refresh = RefreshToken.for_user(user)
    return {
        'refresh': str(refresh),
        'access': str(refresh.access_token),
    }


def _error(e, code):
    return Response({'error': str(e)}, status=code)


@extend_schema(
    request=UserRegistrationSerializer,
    responses={
        201: MessageResponseSerializer,
        400: ErrorResponseSerializer,
        429: ErrorResponseSerializer,
    },
    description="Register a new user account. A 4-digit code is emailed for verification.",
    tags=['auth'],
)
@api_view(['POST'])
@permission_classes([AllowAny])
def register(request):
    """Register a new user account."""
    serializer = UserRegistrationSerializer(data=request.data)
    serializer.is_valid(raise_exception=True)

    data = serializer.validated_data.copy()
    data.pop('password_confirm', None)

    try:
        user = register_user(**data)
    except UserRegistrationError as e:
        return _error(e, status.HTTP_400_BAD_REQUEST)
    except OTPRateLimitError as e:
        return _error(e, status.HTTP_429_TOO_MANY_REQUESTS)

    return Response({
        'message': 'Registration successful. Please verify your email.',
        'user': UserSerializer(user).data,
    }, status=status.HTTP_201_CREATED)


@extend_schema(
    request=OTPVerifySerializer,
    responses={
        200: MessageResponseSerializer,
        400: ErrorResponseSerializer,
        404: ErrorResponseSerializer,
    },
    description="Verify a registration or password-reset code.",
    tags=['auth'],
)
@api_view(['POST'])
@permission_classes([AllowAny])
def verify_otp(request):
    """Verify OTP for registration or password reset."""
    serializer = OTPVerifySerializer(data=request.data)
    serializer.is_valid(raise_exception=True)
    purpose = serializer.validated_data['purpose']

    try:
        verify_user_otp(**serializer.validated_data)
    except UserNotFoundError as e:
        return _error(e, status.HTTP_404_NOT_FOUND)
    except InvalidOTPError as e:
        return _error(e, status.HTTP_400_BAD_REQUEST)

    if purpose == PURPOSE_RESET:
        return Response({'message': 'OTP verified. You can now reset your password.'})
    return Response({'message': 'Email verified successfully'})


@extend_schema(
    request=OTPResendSerializer,
    responses={
        200: MessageResponseSerializer,
        404: ErrorResponseSerializer,
        429: ErrorResponseSerializer,
    },
    description="Send a fresh code. Requests are rate limited per email.",
    tags=['auth'],
)
@api_view(['POST'])
@permission_classes([AllowAny])
def resend(request):
    """Resend OTP."""
    serializer = OTPResendSerializer(data=request.data)
    serializer.is_valid(raise_exception=True)

    try:
        resend_otp(**serializer.validated_data)
    except UserNotFoundError as e:
        return _error(e, status.HTTP_404_NOT_FOUND)
    except OTPRateLimitError as e:
        return _error(e, status.HTTP_429_TOO_MANY_REQUESTS)

    return Response({'message': 'OTP resent successfully'})


@extend_schema(
    request=UserLoginSerializer,
    responses={
        200: AuthResponseSerializer,
        400: ErrorResponseSerializer,
        401: ErrorResponseSerializer,
        403: ErrorResponseSerializer,
    },
    description="Authenticate with email and password to receive JWT tokens.",
    tags=['auth'],
)
@api_view(['POST'])
@permission_classes([AllowAny])
def login(request):
    """Login with email and password."""
    serializer = UserLoginSerializer(data=request.data)

    if not serializer.is_valid():
        return Response(serializer.errors, status=status.HTTP_400_BAD_REQUEST)

    try:
        user = authenticate_user(**serializer.validated_data)
    except InvalidCredentialsError as e:
        return _error(e, status.HTTP_401_UNAUTHORIZED)
    except (InactiveAccountError, UnverifiedAccountError) as e:
        return _error(e, status.HTTP_403_FORBIDDEN)

    return Response({
        'message': 'Login successful',
        'user': UserSerializer(user).data,
        'tokens': _tokens_for(user),
    })


@extend_schema(
    request=PasswordResetRequestSerializer,
    responses={
        200: MessageResponseSerializer,
        404: ErrorResponseSerializer,
        429: ErrorResponseSerializer,
    },
    description="Email a password reset code.",
    tags=['auth'],
)
@api_view(['POST'])
@permission_classes([AllowAny])
def forgot_password(request):
    """Request a password reset code."""
    serializer = PasswordResetRequestSerializer(data=request.data)
    serializer.is_valid(raise_exception=True)

    try:
        request_password_reset(email=serializer.validated_data['email'])
    except UserNotFoundError as e:
        return _error(e, status.HTTP_404_NOT_FOUND)
    except OTPRateLimitError as e:
        return _error(e, status.HTTP_429_TOO_MANY_REQUESTS)

    return Response({'message': 'OTP sent to your email'})


@extend_schema(
    request=PasswordResetConfirmSerializer,
    responses={
        200: MessageResponseSerializer,
        400: ErrorResponseSerializer,
        403: ErrorResponseSerializer,
        404: ErrorResponseSerializer,
    },
    description="Set a new password once the reset code has been verified.",
    tags=['auth'],
)
@api_view(['POST'])
@permission_classes([AllowAny])
def confirm_password_reset(request):
    """Reset password after OTP verification."""
    serializer = PasswordResetConfirmSerializer(data=request.data)

    if not serializer.is_valid():
        return Response(serializer.errors, status=status.HTTP_400_BAD_REQUEST)

    try:
        reset_password(
            email=serializer.validated_data['email'],
            new_password=serializer.validated_data['new_password'],
        )
    except UserNotFoundError as e:
        return _error(e, status.HTTP_404_NOT_FOUND)
    except ResetNotVerifiedError as e:
        return _error(e, status.HTTP_403_FORBIDDEN)

    return Response({'message': 'Password reset successful'})


@extend_schema(
    methods=['GET'],
    responses={200: UserSerializer},
    description="Get the current authenticated user's profile.",
    tags=['auth'],
)
@extend_schema(
    methods=['PATCH'],
    request=ProfileUpdateSerializer,
    responses={
        200: UserSerializer,
        400: ErrorResponseSerializer,
    },
    description="Update full name and/or password. Changing the password requires the current one.",
    tags=['auth'],
)
@api_view(['GET', 'PATCH'])
@permission_classes([IsAuthenticated])
def profile(request):
    """Get or update the current user's profile."""
    if request.method == 'GET':
        return Response(UserSerializer(request.user).data)

    serializer = ProfileUpdateSerializer(data=request.data)
    serializer.is_valid(raise_exception=True)

    try:
        user = update_profile(user_id=request.user.id, **serializer.validated_data)
    except PasswordConfirmationError as e:
        return _error(e, status.HTTP_400_BAD_REQUEST)

    return Response(UserSerializer(user).data)
