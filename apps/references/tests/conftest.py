import pytest


@pytest.fixture
def breweries(supabase_backend):
    """Create breweries out of alphabetical order."""
    return [
        supabase_backend.add_row('breweries', name='Pivovar Zubr', country='Czechia', city='Prerov'),
        supabase_backend.add_row('breweries', name='Budejovicky Budvar', country='Czechia', city='Ceske Budejovice'),
        supabase_backend.add_row('breweries', name='Guinness', country='Ireland', city='Dublin'),
    ]


@pytest.fixture
def styles(supabase_backend):
    """Create styles out of alphabetical order."""
    return [
        supabase_backend.add_row('styles', name='Irish Stout', description='Dry, roasty'),
        supabase_backend.add_row('styles', name='American IPA'),
    ]
