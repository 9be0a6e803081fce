import pytest
from django.urls import reverse
from rest_framework import status

from apps.references.services import (
    list_breweries,
    get_style_by_id,
    create_style,
    ReferencesServiceError,
    StyleNotFoundError,
)


# =============================================================================
# Brewery API Tests
# =============================================================================

class TestBreweryList:
    """Tests for GET /api/breweries/"""

    def test_list_sorted_by_name(self, api_client, breweries):
        response = api_client.get(reverse('references:brewery-list'))

        assert response.status_code == status.HTTP_200_OK
        assert [b['name'] for b in response.data] == [
            'Budejovicky Budvar',
            'Guinness',
            'Pivovar Zubr',
        ]

    def test_list_uses_service_client(self, api_client, supabase_backend, breweries):
        api_client.get(reverse('references:brewery-list'))

        assert supabase_backend.last_request.key == 'test-service-role-key'

    def test_list_backend_error(self, api_client, supabase_backend):
        supabase_backend.fail('breweries', 'select', 'permission denied for table breweries')
        response = api_client.get(reverse('references:brewery-list'))

        assert response.status_code == status.HTTP_500_INTERNAL_SERVER_ERROR
        assert response.data['error'] == 'permission denied for table breweries'


class TestBreweryRetrieve:
    """Tests for GET /api/breweries/{id}/"""

    def test_retrieve(self, api_client, breweries):
        brewery = breweries[2]
        response = api_client.get(reverse('references:brewery-detail', args=[brewery['id']]))

        assert response.status_code == status.HTTP_200_OK
        assert response.data['city'] == 'Dublin'

    def test_retrieve_missing(self, api_client):
        response = api_client.get(reverse('references:brewery-detail', args=[77]))

        assert response.status_code == status.HTTP_404_NOT_FOUND
        assert response.data['error'] == 'Brewery 77 not found'


class TestBreweryCreate:
    """Tests for POST /api/breweries/"""

    def test_create_authenticated(self, authenticated_client, supabase_backend, user):
        data = {'name': 'Matuska', 'country': 'Czechia'}
        response = authenticated_client.post(reverse('references:brewery-list'), data, format='json')

        assert response.status_code == status.HTTP_201_CREATED
        assert response.data['name'] == 'Matuska'
        assert supabase_backend.last_request.token == user.access_token
        assert 'city' not in supabase_backend.tables['breweries'][-1]

    def test_create_unauthenticated(self, api_client):
        response = api_client.post(reverse('references:brewery-list'), {'name': 'Matuska'}, format='json')

        assert response.status_code == status.HTTP_401_UNAUTHORIZED

    def test_create_missing_name(self, authenticated_client):
        response = authenticated_client.post(reverse('references:brewery-list'), {'country': 'Czechia'}, format='json')

        assert response.status_code == status.HTTP_400_BAD_REQUEST
        assert 'name' in response.data


# =============================================================================
# Style API Tests
# =============================================================================

class TestStyles:
    """Tests for /api/styles/"""

    def test_list_sorted_by_name(self, api_client, styles):
        response = api_client.get(reverse('references:style-list'))

        assert [s['name'] for s in response.data] == ['American IPA', 'Irish Stout']

    def test_retrieve(self, api_client, styles):
        response = api_client.get(reverse('references:style-detail', args=[styles[0]['id']]))

        assert response.status_code == status.HTTP_200_OK
        assert response.data['description'] == 'Dry, roasty'

    def test_create(self, authenticated_client, supabase_backend):
        response = authenticated_client.post(
            reverse('references:style-list'),
            {'name': 'Baltic Porter', 'description': 'Strong, dark lager'},
            format='json',
        )

        assert response.status_code == status.HTTP_201_CREATED
        assert supabase_backend.tables['styles'][-1]['name'] == 'Baltic Porter'

    def test_create_rejected_by_backend(self, authenticated_client, supabase_backend):
        supabase_backend.fail('styles', 'insert', 'duplicate key value violates unique constraint "styles_name_key"')
        response = authenticated_client.post(reverse('references:style-list'), {'name': 'Irish Stout'}, format='json')

        assert response.status_code == status.HTTP_500_INTERNAL_SERVER_ERROR
        assert 'duplicate key' in response.data['error']


# =============================================================================
# Service Tests
# =============================================================================

class TestReferenceServices:

    def test_list_breweries_empty(self):
        assert list_breweries() == []

    def test_get_style_missing(self):
        with pytest.raises(StyleNotFoundError, match='Style 3 not found'):
            get_style_by_id(style_id='3')

    def test_create_style_drops_none(self, supabase_backend, user):
        row = create_style(access_token=user.access_token, name='Gose', description=None)

        assert row['name'] == 'Gose'
        assert 'description' not in supabase_backend.tables['styles'][0]

    def test_create_style_backend_error(self, supabase_backend, user):
        supabase_backend.fail('styles', 'insert', 'new row violates row-level security policy')

        with pytest.raises(ReferencesServiceError):
            create_style(access_token=user.access_token, name='Gose')
