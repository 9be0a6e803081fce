from django.urls import reverse
from rest_framework import status


def test_health_check(client, supabase_backend):
    response = client.get(reverse('health-check'))

    assert response.status_code == status.HTTP_200_OK
    assert response.json() == {'status': 'ok'}
    assert supabase_backend.clients == []


def test_schema_is_served(client):
    response = client.get(reverse('api-schema'), {'format': 'json'})

    assert response.status_code == status.HTTP_200_OK
    paths = response.json()['paths']
    assert '/api/beers/stats/' in paths
    assert '/api/beers/photo/' in paths
    assert '/api/breweries/' in paths
