from django.urls import path
from . import views

app_name = 'accounts'

urlpatterns = [
    # Registration and verification
    path('register/', views.register, name='register'),
    path('verify-otp/', views.verify_otp, name='verify-otp'),
    path('resend-otp/', views.resend, name='resend-otp'),

    # Authentication
    path('login/', views.login, name='login'),

    # Password reset
    path('forgot-password/', views.forgot_password, name='forgot-password'),
    path('reset-password/', views.confirm_password_reset, name='reset-password'),

    # User profile
    path('profile/', views.profile, name='profile'),
]
