import pytest


@pytest.fixture
def brewery(supabase_backend):
    """Create and return a brewery row."""
    return supabase_backend.add_row('breweries', name='Pilsner Urquell', country='Czechia', city='Plzen')


@pytest.fixture
def style(supabase_backend):
    """Create and return a style row."""
    return supabase_backend.add_row('styles', name='Czech Pale Lager')


@pytest.fixture
def beer(supabase_backend, user, brewery, style):
    """Create and return a beer row."""
    return supabase_backend.add_row(
        'beers',
        name='Pilsner Urquell 12',
        brewery='Pilsner Urquell',
        style='Czech Pale Lager',
        abv=4.4,
        score=8.5,
        color='golden',
        notes='Crisp, bready, Saaz hops',
        photo_url=None,
        brewery_id=brewery['id'],
        style_id=style['id'],
        user_id=user.id,
        created_at='2025-01-10T18:30:00+00:00',
    )


@pytest.fixture
def beer_stout(supabase_backend, user):
    """Create and return a beer without references."""
    return supabase_backend.add_row(
        'beers',
        name='Guinness Draught',
        brewery='Guinness',
        style='Irish Stout',
        abv=4.2,
        score=6.0,
        user_id=user.id,
        created_at='2025-02-14T20:00:00+00:00',
    )
