"""Product API views.

Exposes the ``ProductService`` (and the audit trail through
``AuditService``) via HTTP using a DRF ViewSet.  Domain exceptions are
caught and translated into HTTP status codes; the view never swallows
generic exceptions; store failures propagate to
``modules.core.exceptions.api_exception_handler``.
"""

from __future__ import annotations

from drf_spectacular.types import OpenApiTypes
from drf_spectacular.utils import OpenApiParameter, extend_schema
from pydantic import ValidationError as PydanticValidationError
from rest_framework import status
from rest_framework.decorators import action
from rest_framework.request import Request
from rest_framework.response import Response
from rest_framework.reverse import reverse
from rest_framework.viewsets import ViewSet

from modules.audit.repositories.django_repository import AuditLogDjangoRepository
from modules.audit.serializers import AuditLogSerializer
from modules.audit.services import AuditService
from modules.core.exceptions import validation_problem
from modules.products.dtos import ActorDTO, CreateProductDTO, UpdateProductDTO
from modules.products.exceptions import ProductNotFound
from modules.products.repositories.django_repository import ProductDjangoRepository
from modules.products.serializers import ProductSerializer
from modules.products.services import ProductService

CHANGED_BY_PARAMETER = OpenApiParameter(
    name="changedBy",
    type=OpenApiTypes.STR,
    location=OpenApiParameter.QUERY,
    required=False,
    description="Actor recorded in the audit trail for this change.",
)


class ProductViewSet(ViewSet):
    """ViewSet for Product CRUD operations and the audit trail.

    Uses ``ProductService`` with ``ProductDjangoRepository`` (DIP).
    Does **not** extend ``ModelViewSet``; all ORM access goes through
    the service/repository layer.
    """

    lookup_value_regex = r"[0-9]+"
    serializer_class = ProductSerializer

    def __init__(self, **kwargs) -> None:
        super().__init__(**kwargs)
        self._service = ProductService(repository=ProductDjangoRepository())
        self._audit_service = AuditService(repository=AuditLogDjangoRepository())

    # ------------------------------------------------------------------
    # List / Retrieve
    # ------------------------------------------------------------------

    @extend_schema(responses=ProductSerializer(many=True))
    def list(self, request: Request) -> Response:
        """GET /products"""
        products = self._service.list_products()
        return Response(ProductSerializer(products, many=True).data)

    @extend_schema(responses={200: ProductSerializer, 404: None})
    def retrieve(self, request: Request, pk: str | None = None) -> Response:
        """GET /products/{pk}"""
        try:
            product = self._service.get_product(int(pk))
        except ProductNotFound:
            return Response(status=status.HTTP_404_NOT_FOUND)
        return Response(ProductSerializer(product).data)

    # ------------------------------------------------------------------
    # Create / Update / Destroy
    # ------------------------------------------------------------------

    @extend_schema(
        request=CreateProductDTO,
        parameters=[CHANGED_BY_PARAMETER],
        responses={201: ProductSerializer},
    )
    def create(self, request: Request) -> Response:
        """POST /products"""
        try:
            actor = ActorDTO.from_query(request.query_params)
            dto = CreateProductDTO.model_validate(request.data)
        except PydanticValidationError as exc:
            return validation_problem(exc)

        product = self._service.create_product(dto, changed_by=actor.changed_by)

        location = reverse("product-detail", kwargs={"pk": product.id}, request=request)
        return Response(
            ProductSerializer(product).data,
            status=status.HTTP_201_CREATED,
            headers={"Location": location},
        )

    @extend_schema(
        request=UpdateProductDTO,
        parameters=[CHANGED_BY_PARAMETER],
        responses={204: None, 404: None},
    )
    def update(self, request: Request, pk: str | None = None) -> Response:
        """PUT /products/{pk}"""
        try:
            actor = ActorDTO.from_query(request.query_params)
            dto = UpdateProductDTO.model_validate(request.data)
        except PydanticValidationError as exc:
            return validation_problem(exc)

        try:
            self._service.update_product(int(pk), dto, changed_by=actor.changed_by)
        except ProductNotFound:
            return Response(status=status.HTTP_404_NOT_FOUND)
        return Response(status=status.HTTP_204_NO_CONTENT)

    @extend_schema(parameters=[CHANGED_BY_PARAMETER], responses={204: None, 404: None})
    def destroy(self, request: Request, pk: str | None = None) -> Response:
        """DELETE /products/{pk}"""
        try:
            actor = ActorDTO.from_query(request.query_params)
        except PydanticValidationError as exc:
            return validation_problem(exc)

        try:
            self._service.delete_product(int(pk), changed_by=actor.changed_by)
        except ProductNotFound:
            return Response(status=status.HTTP_404_NOT_FOUND)
        return Response(status=status.HTTP_204_NO_CONTENT)

    # ------------------------------------------------------------------
    # Audit trail
    # ------------------------------------------------------------------

    @extend_schema(responses=AuditLogSerializer(many=True))
    @action(detail=False, methods=["get"], url_path="audit")
    def audit(self, request: Request) -> Response:
        """GET /products/audit"""
        logs = self._audit_service.list_logs()
        return Response(AuditLogSerializer(logs, many=True).data)
