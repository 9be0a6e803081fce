import pytest
from django.conf import settings
from rest_framework.test import APIClient

from apps.core import backend
from apps.core.tests.fakes import FakeSupabase


@pytest.fixture(autouse=True)
def supabase_backend(monkeypatch):
    """Route every Supabase client to a fresh in-memory backend."""
    fake = FakeSupabase(url=settings.SUPABASE_URL)
    monkeypatch.setattr(backend, 'create_client', fake.create_client)
    backend.reset_clients()
    yield fake
    backend.reset_clients()


@pytest.fixture
def api_client():
    """Return an unauthenticated API client."""
    return APIClient()


@pytest.fixture
def user(supabase_backend):
    """Register a test user and return it with a valid access token."""
    return supabase_backend.add_user('testuser@example.com', 'testpass123')


@pytest.fixture
def other_user(supabase_backend):
    return supabase_backend.add_user('otheruser@example.com', 'otherpass123')


@pytest.fixture
def authenticated_client(api_client, user):
    """Return an API client sending the test user's bearer token."""
    api_client.credentials(HTTP_AUTHORIZATION=f'Bearer {user.access_token}')
    return api_client
