import pytest
from django.test import override_settings
from django.urls import reverse
from rest_framework import status


@pytest.mark.django_db
class TestLogin:
    """Tests for POST /api/login"""

    @override_settings(APP_SHARED_PASSWORD='team-secret')
    def test_login_success(self, api_client):
        response = api_client.post(reverse('accounts:login'), {'password': 'team-secret'}, format='json')

        assert response.status_code == status.HTTP_200_OK
        assert response.data == {'authenticated': True, 'message': 'Login successful.'}

    @override_settings(APP_SHARED_PASSWORD='team-secret')
    def test_login_wrong_password(self, api_client):
        response = api_client.post(reverse('accounts:login'), {'password': 'guess'}, format='json')

        assert response.status_code == status.HTTP_401_UNAUTHORIZED
        assert response.data == {'error': 'Invalid password.'}

    @override_settings(APP_SHARED_PASSWORD='team-secret')
    def test_login_missing_password(self, api_client):
        response = api_client.post(reverse('accounts:login'), {}, format='json')

        assert response.status_code == status.HTTP_401_UNAUTHORIZED

    @override_settings(APP_SHARED_PASSWORD='')
    def test_login_not_configured(self, api_client):
        response = api_client.post(reverse('accounts:login'), {'password': 'anything'}, format='json')

        assert response.status_code == status.HTTP_500_INTERNAL_SERVER_ERROR
        assert response.data == {'error': 'Login system configuration error.'}
