from rest_framework import viewsets, status
from rest_framework.permissions import IsAuthenticatedOrReadOnly
from rest_framework.response import Response
from drf_spectacular.utils import extend_schema, extend_schema_view
from .serializers import BrewerySerializer, StyleSerializer, ErrorSerializer
from .services import (
    list_breweries,
    get_brewery_by_id,
    create_brewery,
    list_styles,
    get_style_by_id,
    create_style,
    ReferencesServiceError,
    BreweryNotFoundError,
    StyleNotFoundError,
)


class ReferenceViewSet(viewsets.ViewSet):
    """
    Read-mostly endpoints over a reference table.

    Subclasses bind the serializer and the service functions.
    """

    permission_classes = [IsAuthenticatedOrReadOnly]
    serializer_class = None
    not_found_error = ReferencesServiceError

    def fetch_all(self):
        raise NotImplementedError

    def fetch_one(self, pk):
        raise NotImplementedError

    def insert(self, access_token, data):
        raise NotImplementedError

    def list(self, request):
        try:
            rows = self.fetch_all()
        except ReferencesServiceError as e:
            return Response({'error': str(e)}, status=status.HTTP_500_INTERNAL_SERVER_ERROR)
        return Response(self.serializer_class(rows, many=True).data)

    def retrieve(self, request, pk=None):
        try:
            row = self.fetch_one(pk)
        except self.not_found_error as e:
            return Response({'error': str(e)}, status=status.HTTP_404_NOT_FOUND)
        except ReferencesServiceError as e:
            return Response({'error': str(e)}, status=status.HTTP_500_INTERNAL_SERVER_ERROR)
        return Response(self.serializer_class(row).data)

    def create(self, request):
        serializer = self.serializer_class(data=request.data)
        serializer.is_valid(raise_exception=True)

        try:
            row = self.insert(request.auth, serializer.validated_data)
        except ReferencesServiceError as e:
            return Response({'error': str(e)}, status=status.HTTP_500_INTERNAL_SERVER_ERROR)

        return Response(
            self.serializer_class(row).data,
            status=status.HTTP_201_CREATED
        )


@extend_schema_view(
    list=extend_schema(responses={200: BrewerySerializer(many=True)}, description="List breweries sorted by name."),
    retrieve=extend_schema(responses={200: BrewerySerializer, 404: ErrorSerializer}, description="Get a brewery."),
    create=extend_schema(
        request=BrewerySerializer,
        responses={201: BrewerySerializer, 400: ErrorSerializer, 500: ErrorSerializer},
        description="Add a brewery.",
    ),
)
@extend_schema(tags=['breweries'])
class BreweryViewSet(ReferenceViewSet):
    """ViewSet for breweries."""

    serializer_class = BrewerySerializer
    not_found_error = BreweryNotFoundError

    def fetch_all(self):
        return list_breweries()

    def fetch_one(self, pk):
        return get_brewery_by_id(brewery_id=pk)

    def insert(self, access_token, data):
        return create_brewery(access_token=access_token, **data)


@extend_schema_view(
    list=extend_schema(responses={200: StyleSerializer(many=True)}, description="List beer styles sorted by name."),
    retrieve=extend_schema(responses={200: StyleSerializer, 404: ErrorSerializer}, description="Get a beer style."),
    create=extend_schema(
        request=StyleSerializer,
        responses={201: StyleSerializer, 400: ErrorSerializer, 500: ErrorSerializer},
        description="Add a beer style.",
    ),
)
@extend_schema(tags=['styles'])
class StyleViewSet(ReferenceViewSet):
    """ViewSet for beer styles."""

    serializer_class = StyleSerializer
    not_found_error = StyleNotFoundError

    def fetch_all(self):
        return list_styles()

    def fetch_one(self, pk):
        return get_style_by_id(style_id=pk)

    def insert(self, access_token, data):
        return create_style(access_token=access_token, **data)
