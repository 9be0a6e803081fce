from django.urls import path, include
from rest_framework.routers import SimpleRouter
from . import views

app_name = 'beers'

router = SimpleRouter()
router.register(r'', views.BeerViewSet, basename='beer')

urlpatterns = [
    # GET    /api/beers/              - List beers
    # POST   /api/beers/              - Create beer
    # GET    /api/beers/{id}/         - Get beer details
    # PATCH  /api/beers/{id}/         - Partial update
    # DELETE /api/beers/{id}/         - Delete beer

    # Custom actions
    # POST   /api/beers/photo/        - Upload photo
    # GET    /api/beers/stats/        - Aggregate statistics
    path('', include(router.urls)),
]
