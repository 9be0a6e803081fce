from rest_framework import viewsets, status
from rest_framework.decorators import action
from rest_framework.parsers import MultiPartParser, FormParser
from rest_framework.permissions import IsAuthenticatedOrReadOnly
from rest_framework.response import Response
from drf_spectacular.utils import extend_schema, extend_schema_view
from .serializers import (
    BeerSerializer,
    BeerWriteSerializer,
    BeerListQuerySerializer,
    BeerDetailQuerySerializer,
    PhotoUploadSerializer,
    PhotoUploadResponseSerializer,
    BeerStatisticsSerializer,
    ErrorSerializer,
)
from .services import (
    create_beer,
    update_beer,
    delete_beer,
    get_all_beers,
    get_beer_by_id,
    upload_photo,
    get_beer_statistics,
    BeersServiceError,
    BeerNotFoundError,
    InvalidBeerDataError,
    InvalidPhotoError,
)


def _error(e, code):
    return Response({'error': str(e)}, status=code)


@extend_schema_view(
    list=extend_schema(
        parameters=[BeerListQuerySerializer],
        responses={200: BeerSerializer(many=True), 500: ErrorSerializer},
        description="List beers, newest first.",
    ),
    create=extend_schema(
        request=BeerWriteSerializer,
        responses={201: BeerSerializer, 400: ErrorSerializer, 500: ErrorSerializer},
        description="Add a beer as the authenticated user.",
    ),
    retrieve=extend_schema(
        parameters=[BeerDetailQuerySerializer],
        responses={200: BeerSerializer, 404: ErrorSerializer, 500: ErrorSerializer},
        description="Get a single beer.",
    ),
    partial_update=extend_schema(
        request=BeerWriteSerializer,
        responses={200: BeerSerializer, 400: ErrorSerializer, 404: ErrorSerializer, 500: ErrorSerializer},
        description="Update fields of a beer owned by the authenticated user.",
    ),
    destroy=extend_schema(
        responses={204: None, 404: ErrorSerializer, 500: ErrorSerializer},
        description="Delete a beer owned by the authenticated user.",
    ),
)
@extend_schema(tags=['beers'])
class BeerViewSet(viewsets.ViewSet):
    """
    ViewSet for beer entries.

    Reads use the service-scoped client. Writes forward the caller's
    bearer token so row-level security decides what they may touch.

    list: Get all beers (with filters)
    create: Create a new beer
    retrieve: Get a specific beer
    partial_update: Partially update a beer
    destroy: Delete a beer
    """

    permission_classes = [IsAuthenticatedOrReadOnly]

    def list(self, request):
        """
        List beers.

        Filters:
        - search: Search in beer name
        - brewery: Filter by brewery name
        - style: Filter by style name
        - min_score: Minimum score
        - expand: Embed brewery and style reference rows
        """
        query_serializer = BeerListQuerySerializer(data=request.query_params)
        query_serializer.is_valid(raise_exception=True)
        params = query_serializer.validated_data

        try:
            beers = get_all_beers(
                search=params.get('search'),
                brewery=params.get('brewery'),
                style=params.get('style'),
                min_score=params.get('min_score'),
                with_references=params['expand'],
            )
        except BeersServiceError as e:
            return _error(e, status.HTTP_500_INTERNAL_SERVER_ERROR)

        return Response(BeerSerializer(beers, many=True).data)

    def create(self, request):
        """Create a new beer."""
        serializer = BeerWriteSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)

        try:
            beer = create_beer(
                access_token=request.auth,
                **serializer.validated_data
            )
        except BeersServiceError as e:
            return _error(e, status.HTTP_500_INTERNAL_SERVER_ERROR)

        return Response(
            BeerSerializer(beer).data,
            status=status.HTTP_201_CREATED
        )

    def retrieve(self, request, pk=None):
        """Get beer by ID."""
        query_serializer = BeerDetailQuerySerializer(data=request.query_params)
        query_serializer.is_valid(raise_exception=True)

        try:
            beer = get_beer_by_id(
                beer_id=pk,
                with_references=query_serializer.validated_data['expand'],
            )
        except BeerNotFoundError as e:
            return _error(e, status.HTTP_404_NOT_FOUND)
        except BeersServiceError as e:
            return _error(e, status.HTTP_500_INTERNAL_SERVER_ERROR)

        return Response(BeerSerializer(beer).data)

    def partial_update(self, request, pk=None):
        """Update a beer."""
        serializer = BeerWriteSerializer(data=request.data, partial=True)
        serializer.is_valid(raise_exception=True)

        try:
            beer = update_beer(
                access_token=request.auth,
                beer_id=pk,
                data=serializer.validated_data,
            )
        except InvalidBeerDataError as e:
            return _error(e, status.HTTP_400_BAD_REQUEST)
        except BeerNotFoundError as e:
            return _error(e, status.HTTP_404_NOT_FOUND)
        except BeersServiceError as e:
            return _error(e, status.HTTP_500_INTERNAL_SERVER_ERROR)

        return Response(BeerSerializer(beer).data)

    def destroy(self, request, pk=None):
        """Delete a beer."""
        try:
            delete_beer(access_token=request.auth, beer_id=pk)
        except BeerNotFoundError as e:
            return _error(e, status.HTTP_404_NOT_FOUND)
        except BeersServiceError as e:
            return _error(e, status.HTTP_500_INTERNAL_SERVER_ERROR)

        return Response(status=status.HTTP_204_NO_CONTENT)

    @extend_schema(
        request={'multipart/form-data': PhotoUploadSerializer},
        responses={201: PhotoUploadResponseSerializer, 400: ErrorSerializer, 500: ErrorSerializer},
        description="Upload a beer photo and receive its public URL.",
    )
    @action(detail=False, methods=['post'], parser_classes=[MultiPartParser, FormParser])
    def photo(self, request):
        """Upload a photo to object storage."""
        serializer = PhotoUploadSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)

        try:
            url = upload_photo(file=serializer.validated_data['file'])
        except InvalidPhotoError as e:
            return _error(e, status.HTTP_400_BAD_REQUEST)
        except BeersServiceError as e:
            return _error(e, status.HTTP_500_INTERNAL_SERVER_ERROR)

        return Response({'url': url}, status=status.HTTP_201_CREATED)

    @extend_schema(
        responses={200: BeerStatisticsSerializer, 500: ErrorSerializer},
        description="Total beers, average score, beers added this month and favorite brewery.",
    )
    @action(detail=False, methods=['get'])
    def stats(self, request):
        """Get aggregate beer statistics."""
        try:
            data = get_beer_statistics()
        except BeersServiceError as e:
            return _error(e, status.HTTP_500_INTERNAL_SERVER_ERROR)

        return Response(data)
