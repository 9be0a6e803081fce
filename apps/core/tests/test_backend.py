import pytest
from supabase import PostgrestAPIError, StorageException

from apps.core.backend import (
    BackendConfigurationError,
    get_auth_client,
    get_service_client,
    get_user_client,
    reset_clients,
    upstream_message,
    user_client,
)


class TestClientSelection:
    """Service-scoped vs user-scoped clients."""

    def test_service_client_uses_service_role_key(self, supabase_backend):
        client = get_service_client()

        assert client.key == 'test-service-role-key'
        assert client.token is None

    def test_service_client_is_cached(self, supabase_backend):
        assert get_service_client() is get_service_client()
        assert len(supabase_backend.clients) == 1

    def test_service_client_falls_back_to_public_key(self, supabase_backend, settings):
        settings.SUPABASE_SERVICE_ROLE_KEY = ''
        reset_clients()

        assert get_service_client().key == 'test-anon-key'

    def test_user_client_forwards_token(self, supabase_backend):
        client = get_user_client('user-token-123')

        assert client.key == 'test-anon-key'
        assert client.token == 'user-token-123'

    def test_user_clients_are_not_shared(self, supabase_backend):
        first = get_user_client('token-a')
        second = get_user_client('token-b')

        assert first is not second
        assert first.token == 'token-a'
        assert second.token == 'token-b'

    def test_user_client_context_closes_session(self, supabase_backend):
        with user_client('token-a') as client:
            assert client.token == 'token-a'
            assert not client.postgrest.session.closed

        assert client.postgrest.session.closed

    def test_user_client_context_closes_session_on_error(self, supabase_backend):
        with pytest.raises(RuntimeError):
            with user_client('token-a'):
                raise RuntimeError('boom')

        assert supabase_backend.clients[-1].postgrest.session.closed

    def test_auth_client_uses_public_key(self, supabase_backend):
        assert get_auth_client().key == 'test-anon-key'

    @pytest.mark.parametrize('setting', ['SUPABASE_URL', 'SUPABASE_KEY'])
    def test_missing_configuration(self, settings, setting):
        setattr(settings, setting, '')
        reset_clients()

        with pytest.raises(BackendConfigurationError):
            get_service_client()
        with pytest.raises(BackendConfigurationError):
            get_user_client('token')


class TestUpstreamMessage:

    def test_postgrest_error_message(self):
        error = PostgrestAPIError({
            'message': 'new row violates row-level security policy',
            'code': '42501',
            'hint': None,
            'details': None,
        })

        assert upstream_message(error) == 'new row violates row-level security policy'

    def test_storage_error_message(self):
        error = StorageException({'statusCode': 409, 'message': 'The resource already exists'})

        assert upstream_message(error) == 'The resource already exists'

    def test_plain_exception(self):
        assert upstream_message(RuntimeError('boom')) == 'boom'
        assert upstream_message(RuntimeError()) == 'RuntimeError'
