from django.urls import path, include
from rest_framework.routers import SimpleRouter
from . import views

app_name = 'references'

router = SimpleRouter()
router.register(r'breweries', views.BreweryViewSet, basename='brewery')
router.register(r'styles', views.StyleViewSet, basename='style')

urlpatterns = [
    # GET    /api/breweries/          - List breweries (sorted by name)
    # POST   /api/breweries/          - Create brewery
    # GET    /api/breweries/{id}/     - Get brewery
    # GET    /api/styles/             - List styles (sorted by name)
    # POST   /api/styles/             - Create style
    # GET    /api/styles/{id}/        - Get style
    path('', include(router.urls)),
]
