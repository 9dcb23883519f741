import pytest
from unittest import mock
from django.urls import reverse
from rest_framework import status
from apps.accounts.models import User


@pytest.fixture
def fixed_otp():
    with mock.patch('apps.accounts.services.otp.generate_otp', return_value='4321'):
        yield '4321'


# =============================================================================
# Registration Tests
# =============================================================================

@pytest.mark.django_db
class TestRegistration:
    """Tests for POST /api/auth/register/"""

    def test_register_success(self, api_client, mailoutbox, fixed_otp):
        """Register creates an unverified user and emails a code."""
        url = reverse('accounts:register')
        data = {
            'email': 'NewUser@Example.com',
            'password': 'SecurePass123!',
            'password_confirm': 'SecurePass123!',
            'full_name': 'New User',
        }
        response = api_client.post(url, data)

        assert response.status_code == status.HTTP_201_CREATED
        assert 'tokens' not in response.data
        user = User.objects.get(email='newuser@example.com')
        assert user.is_verified is False
        assert len(mailoutbox) == 1
        assert fixed_otp in mailoutbox[0].body
        assert mailoutbox[0].to == ['newuser@example.com']

    def test_register_duplicate_email(self, api_client, user):
        url = reverse('accounts:register')
        data = {
            'email': user.email,
            'password': 'SecurePass123!',
            'password_confirm': 'SecurePass123!',
        }
        response = api_client.post(url, data)

        assert response.status_code == status.HTTP_400_BAD_REQUEST
        assert response.data['error'] == 'User already exists'

    def test_register_password_mismatch(self, api_client):
        url = reverse('accounts:register')
        data = {
            'email': 'mismatch@example.com',
            'password': 'SecurePass123!',
            'password_confirm': 'DifferentPass123!',
        }
        response = api_client.post(url, data)

        assert response.status_code == status.HTTP_400_BAD_REQUEST
        assert 'password_confirm' in response.data

    def test_register_weak_password(self, api_client):
        url = reverse('accounts:register')
        data = {
            'email': 'weak@example.com',
            'password': '123',
            'password_confirm': '123',
        }
        response = api_client.post(url, data)

        assert response.status_code == status.HTTP_400_BAD_REQUEST
        assert not User.objects.filter(email='weak@example.com').exists()


# =============================================================================
# OTP Verification Tests
# =============================================================================

@pytest.mark.django_db
class TestVerifyOTP:
    """Tests for POST /api/auth/verify-otp/ and /api/auth/resend-otp/"""

    def test_full_registration_flow(self, api_client, fixed_otp):
        """Register, verify, then log in."""
        api_client.post(reverse('accounts:register'), {
            'email': 'flow@example.com',
            'password': 'SecurePass123!',
            'password_confirm': 'SecurePass123!',
        })

        login_data = {'email': 'flow@example.com', 'password': 'SecurePass123!'}
        response = api_client.post(reverse('accounts:login'), login_data)
        assert response.status_code == status.HTTP_403_FORBIDDEN

        response = api_client.post(reverse('accounts:verify-otp'), {
            'email': 'flow@example.com',
            'otp': fixed_otp,
        })
        assert response.status_code == status.HTTP_200_OK

        response = api_client.post(reverse('accounts:login'), login_data)
        assert response.status_code == status.HTTP_200_OK
        assert 'access' in response.data['tokens']

    def test_wrong_code(self, api_client, user_unverified, fixed_otp):
        api_client.post(reverse('accounts:resend-otp'), {'email': user_unverified.email})

        response = api_client.post(reverse('accounts:verify-otp'), {
            'email': user_unverified.email,
            'otp': '0000',
        })

        assert response.status_code == status.HTTP_400_BAD_REQUEST
        assert response.data['error'] == 'Invalid OTP'

    def test_code_never_issued(self, api_client, user_unverified):
        response = api_client.post(reverse('accounts:verify-otp'), {
            'email': user_unverified.email,
            'otp': '1234',
        })

        assert response.status_code == status.HTTP_400_BAD_REQUEST
        assert response.data['error'] == 'OTP not found or expired'

    def test_unknown_email(self, api_client, db):
        response = api_client.post(reverse('accounts:verify-otp'), {
            'email': 'ghost@example.com',
            'otp': '1234',
        })

        assert response.status_code == status.HTTP_404_NOT_FOUND

    def test_malformed_code(self, api_client, user_unverified):
        response = api_client.post(reverse('accounts:verify-otp'), {
            'email': user_unverified.email,
            'otp': '12ab',
        })

        assert response.status_code == status.HTTP_400_BAD_REQUEST
        assert 'otp' in response.data

    def test_resend_rate_limited(self, api_client, user_unverified, otp_settings):
        url = reverse('accounts:resend-otp')

        first = api_client.post(url, {'email': user_unverified.email})
        second = api_client.post(url, {'email': user_unverified.email})

        assert first.status_code == status.HTTP_200_OK
        assert second.status_code == status.HTTP_429_TOO_MANY_REQUESTS


# =============================================================================
# Login Tests
# =============================================================================

@pytest.mark.django_db
class TestLogin:
    """Tests for POST /api/auth/login/"""

    def test_login_success(self, api_client, user):
        url = reverse('accounts:login')
        response = api_client.post(url, {'email': user.email, 'password': 'TestPass123!'})

        assert response.status_code == status.HTTP_200_OK
        assert 'access' in response.data['tokens']
        assert 'refresh' in response.data['tokens']
        assert response.data['user']['email'] == user.email

    def test_login_email_case_insensitive(self, api_client, user):
        url = reverse('accounts:login')
        response = api_client.post(url, {'email': 'TestUser@Example.com', 'password': 'TestPass123!'})

        assert response.status_code == status.HTTP_200_OK

    def test_login_wrong_password(self, api_client, user):
        url = reverse('accounts:login')
        response = api_client.post(url, {'email': user.email, 'password': 'WrongPassword123!'})

        assert response.status_code == status.HTTP_401_UNAUTHORIZED
        assert 'error' in response.data

    def test_login_nonexistent_user(self, api_client, db):
        url = reverse('accounts:login')
        response = api_client.post(url, {'email': 'nobody@example.com', 'password': 'SomePass123!'})

        assert response.status_code == status.HTTP_401_UNAUTHORIZED

    def test_login_inactive_user(self, api_client, user_inactive):
        url = reverse('accounts:login')
        response = api_client.post(url, {'email': user_inactive.email, 'password': 'TestPass123!'})

        assert response.status_code == status.HTTP_403_FORBIDDEN

    def test_login_unverified_user(self, api_client, user_unverified):
        url = reverse('accounts:login')
        response = api_client.post(url, {'email': user_unverified.email, 'password': 'TestPass123!'})

        assert response.status_code == status.HTTP_403_FORBIDDEN

    def test_login_updates_last_login(self, api_client, user):
        assert user.last_login is None
        api_client.post(reverse('accounts:login'), {'email': user.email, 'password': 'TestPass123!'})

        user.refresh_from_db()
        assert user.last_login is not None


# =============================================================================
# Password Reset Tests
# =============================================================================

@pytest.mark.django_db
class TestPasswordReset:
    """Tests for forgot-password, verify-otp (purpose=forgot) and reset-password."""

    def test_full_reset_flow(self, api_client, user, fixed_otp):
        response = api_client.post(reverse('accounts:forgot-password'), {'email': user.email})
        assert response.status_code == status.HTTP_200_OK

        response = api_client.post(reverse('accounts:verify-otp'), {
            'email': user.email,
            'otp': fixed_otp,
            'purpose': 'forgot',
        })
        assert response.status_code == status.HTTP_200_OK

        response = api_client.post(reverse('accounts:reset-password'), {
            'email': user.email,
            'new_password': 'BrandNewPass456!',
            'new_password_confirm': 'BrandNewPass456!',
        })
        assert response.status_code == status.HTTP_200_OK

        user.refresh_from_db()
        assert user.check_password('BrandNewPass456!')
        assert user.is_reset_otp_verified is False

    def test_forgot_unknown_email(self, api_client, db):
        response = api_client.post(reverse('accounts:forgot-password'), {'email': 'ghost@example.com'})

        assert response.status_code == status.HTTP_404_NOT_FOUND

    def test_reset_without_verified_code(self, api_client, user):
        response = api_client.post(reverse('accounts:reset-password'), {
            'email': user.email,
            'new_password': 'BrandNewPass456!',
            'new_password_confirm': 'BrandNewPass456!',
        })

        assert response.status_code == status.HTTP_403_FORBIDDEN
        user.refresh_from_db()
        assert user.check_password('TestPass123!')

    def test_reset_password_mismatch(self, api_client, user_reset_verified):
        response = api_client.post(reverse('accounts:reset-password'), {
            'email': user_reset_verified.email,
            'new_password': 'BrandNewPass456!',
            'new_password_confirm': 'Different456!',
        })

        assert response.status_code == status.HTTP_400_BAD_REQUEST
        assert 'new_password_confirm' in response.data

    def test_reset_code_is_single_use(self, api_client, user_reset_verified):
        data = {
            'email': user_reset_verified.email,
            'new_password': 'BrandNewPass456!',
            'new_password_confirm': 'BrandNewPass456!',
        }
        first = api_client.post(reverse('accounts:reset-password'), data)
        second = api_client.post(reverse('accounts:reset-password'), data)

        assert first.status_code == status.HTTP_200_OK
        assert second.status_code == status.HTTP_403_FORBIDDEN


# =============================================================================
# Profile Tests
# =============================================================================

@pytest.mark.django_db
class TestProfile:
    """Tests for GET/PATCH /api/auth/profile/"""

    def test_get_profile(self, authenticated_client, user):
        response = authenticated_client.get(reverse('accounts:profile'))

        assert response.status_code == status.HTTP_200_OK
        assert response.data['email'] == user.email
        assert response.data['full_name'] == 'Test User'
        assert 'password' not in response.data

    def test_profile_unauthenticated(self, api_client):
        response = api_client.get(reverse('accounts:profile'))

        assert response.status_code == status.HTTP_401_UNAUTHORIZED

    def test_update_full_name(self, authenticated_client, user):
        response = authenticated_client.patch(reverse('accounts:profile'), {'full_name': 'Renamed'})

        assert response.status_code == status.HTTP_200_OK
        assert response.data['full_name'] == 'Renamed'
        user.refresh_from_db()
        assert user.full_name == 'Renamed'

    def test_change_password(self, authenticated_client, user):
        response = authenticated_client.patch(reverse('accounts:profile'), {
            'current_password': 'TestPass123!',
            'new_password': 'AnotherPass789!',
        })

        assert response.status_code == status.HTTP_200_OK
        user.refresh_from_db()
        assert user.check_password('AnotherPass789!')

    def test_change_password_wrong_current(self, authenticated_client, user):
        response = authenticated_client.patch(reverse('accounts:profile'), {
            'current_password': 'NotMyPass123!',
            'new_password': 'AnotherPass789!',
        })

        assert response.status_code == status.HTTP_400_BAD_REQUEST
        user.refresh_from_db()
        assert user.check_password('TestPass123!')

    def test_cannot_update_email(self, authenticated_client, user):
        authenticated_client.patch(reverse('accounts:profile'), {'email': 'other@example.com'})

        user.refresh_from_db()
        assert user.email == 'testuser@example.com'
