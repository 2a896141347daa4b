"""Product API views.

Exposes the ``ProductService`` via HTTP using a DRF ViewSet.
Request bodies are validated into Pydantic DTOs before the service is
called; domain exceptions are caught and translated into HTTP status
codes.  The view never swallows generic exceptions.

    ProductNotFound        -> 404
    ProductAlreadyExists   -> 409
    ProductAlreadyUpdated  -> 405
    invalid body           -> 400
"""

from __future__ import annotations

from collections.abc import Mapping

from pydantic import ValidationError as PydanticValidationError
from rest_framework import status
from rest_framework.request import Request
from rest_framework.response import Response
from rest_framework.viewsets import ViewSet

from modules.products.dtos import CreateProductDTO, UpdateProductDTO
from modules.products.exceptions import (
    ProductAlreadyExists,
    ProductAlreadyUpdated,
    ProductNotFound,
)
from modules.products.repositories import get_product_repository
from modules.products.serializers import ProductSerializer
from modules.products.services import ProductService

NOT_FOUND = {"detail": "Product not found."}
CONFLICT = {"detail": "Product name already exists."}
ALREADY_UPDATED = {"detail": "Product has already been updated."}
INVALID_BODY = {"detail": "Request body must be a JSON object."}


class ProductViewSet(ViewSet):
    """ViewSet for Product CRUD operations.

    Uses ``ProductService`` with the configured product repository (DIP).
    All storage access goes through the service/repository layer.
    """

    lookup_value_regex = r"-?\d+"
    http_method_names = ["get", "post", "patch", "delete", "head", "options"]
    serializer_class = ProductSerializer

    def __init__(self, **kwargs) -> None:
        super().__init__(**kwargs)
        self._service = ProductService(repository=get_product_repository())

    # ------------------------------------------------------------------
    # List / Retrieve
    # ------------------------------------------------------------------

    def list(self, request: Request) -> Response:
        """GET /products"""
        products = self._service.list_products()
        return Response(ProductSerializer(products, many=True).data)

    def retrieve(self, request: Request, pk: str | None = None) -> Response:
        """GET /products/{pk}"""
        try:
            product = self._service.get_product(int(pk))
        except ProductNotFound:
            return Response(NOT_FOUND, status=status.HTTP_404_NOT_FOUND)
        return Response(ProductSerializer(product).data)

    # ------------------------------------------------------------------
    # Create / Update / Destroy
    # ------------------------------------------------------------------

    def create(self, request: Request) -> Response:
        """POST /products"""
        data = request.data
        if not isinstance(data, Mapping):
            return Response(INVALID_BODY, status=status.HTTP_400_BAD_REQUEST)

        try:
            dto = CreateProductDTO(
                name=data.get("name"),
                price=data.get("price"),
                description=data.get("description"),
            )
        except (PydanticValidationError, ValueError) as exc:
            return Response(
                {"detail": str(exc)},
                status=status.HTTP_400_BAD_REQUEST,
            )

        try:
            product = self._service.create_product(dto)
        except ProductAlreadyExists:
            return Response(CONFLICT, status=status.HTTP_409_CONFLICT)

        out = ProductSerializer(product)
        return Response(out.data, status=status.HTTP_201_CREATED)

    def partial_update(self, request: Request, pk: str | None = None) -> Response:
        """PATCH /products/{pk}"""
        data = request.data
        if not isinstance(data, Mapping):
            return Response(INVALID_BODY, status=status.HTTP_400_BAD_REQUEST)

        try:
            dto = UpdateProductDTO(
                name=data.get("name"),
                price=data.get("price"),
                description=data.get("description"),
            )
        except (PydanticValidationError, ValueError) as exc:
            return Response(
                {"detail": str(exc)},
                status=status.HTTP_400_BAD_REQUEST,
            )

        try:
            product = self._service.update_product(int(pk), dto)
        except ProductNotFound:
            return Response(NOT_FOUND, status=status.HTTP_404_NOT_FOUND)
        except ProductAlreadyUpdated:
            return Response(ALREADY_UPDATED, status=status.HTTP_405_METHOD_NOT_ALLOWED)
        except ProductAlreadyExists:
            return Response(CONFLICT, status=status.HTTP_409_CONFLICT)

        out = ProductSerializer(product)
        return Response(out.data)

    def destroy(self, request: Request, pk: str | None = None) -> Response:
        """DELETE /products/{pk}"""
        try:
            self._service.delete_product(int(pk))
        except ProductNotFound:
            return Response(NOT_FOUND, status=status.HTTP_404_NOT_FOUND)
        return Response(status=status.HTTP_200_OK)
