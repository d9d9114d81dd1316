from django.core.exceptions import ValidationError
from django.db.models import Q
from rest_framework import generics, status
from rest_framework.decorators import api_view, permission_classes

from products.api.serializers import ProductSerializer, ProductAvailabilitySerializer, ProductBrowseSerializer
from products.enums import ErrorMessages, ResponseMessages
from products.models import Product
from products.services import ProductService
from project.permissions import IsManufacturer, IsManufacturerOwnerOrReadOnly
from project.utils import (
    success_response, error_response, validation_error_response,
    business_error_response, StandardizedAPIView, StandardizedResponseMixin
)


@api_view(['GET'])
@permission_classes([])
def product_browse(request):
    """
    Public catalogue of available products, filtered by manufacturer, category or text
    """
    serializer = ProductBrowseSerializer(data=request.GET)
    if not serializer.is_valid():
        return validation_error_response(serializer.errors)

    data = serializer.validated_data
    products = ProductService.browse(
        manufacturer_id=data.get('manufacturer'),
        category=data.get('category'),
        query=data.get('q'),
    )
    return success_response(
        data=ProductSerializer(products, many=True).data,
        message=f"Found {len(products)} products"
    )


class MyProductsView(StandardizedAPIView):
    """The authenticated manufacturer's catalogue"""
    permission_classes = [IsManufacturer]

    def get(self, request, *args, **kwargs):
        products = ProductService.for_manufacturer(request.user)
        return self.success_response(
            data=ProductSerializer(products, many=True).data,
            message=f"Retrieved {len(products)} items"
        )

    def post(self, request, *args, **kwargs):
        serializer = ProductSerializer(data=request.data)
        if not serializer.is_valid():
            return self.validation_error_response(serializer.errors)

        try:
            product = ProductService.create_product(request.user, **serializer.validated_data)
        except ValidationError as e:
            return business_error_response(e)

        return self.success_response(
            data=ProductSerializer(product).data,
            message=ResponseMessages.CREATED,
            status_code=status.HTTP_201_CREATED
        )


class ProductDetailView(StandardizedResponseMixin, generics.RetrieveAPIView):
    """Anyone reads an available product; its manufacturer also edits and deletes it"""
    serializer_class = ProductSerializer
    permission_classes = [IsManufacturerOwnerOrReadOnly]

    def get_queryset(self):
        queryset = Product.objects.select_related('manufacturer')
        if self.request.user.is_authenticated:
            return queryset.filter(Q(is_available=True) | Q(manufacturer=self.request.user))
        return queryset.filter(is_available=True)

    def patch(self, request, *args, **kwargs):
        product = self.get_object()
        serializer = ProductSerializer(product, data=request.data, partial=True)
        if not serializer.is_valid():
            return validation_error_response(serializer.errors)

        try:
            product = ProductService.update_product(product, request.user, **serializer.validated_data)
        except ValidationError as e:
            return business_error_response(e)

        return success_response(data=ProductSerializer(product).data, message=ResponseMessages.UPDATED)

    def delete(self, request, *args, **kwargs):
        product = self.get_object()
        try:
            ProductService.delete_product(product, request.user)
        except ValidationError as e:
            return business_error_response(e)
        return success_response(message=ResponseMessages.DELETED)


class ProductAvailabilityView(StandardizedAPIView):
    """Manufacturer switches a product on or off the public catalogue"""
    permission_classes = [IsManufacturer]

    def post(self, request, product_id):
        serializer = ProductAvailabilitySerializer(data=request.data)
        if not serializer.is_valid():
            return self.validation_error_response(serializer.errors)

        try:
            product = Product.objects.get(id=product_id, manufacturer=request.user)
        except Product.DoesNotExist:
            return error_response(ErrorMessages.PRODUCT_NOT_FOUND, status.HTTP_404_NOT_FOUND)

        product = ProductService.set_availability(product, request.user, serializer.validated_data['is_available'])
        return self.success_response(
            data=ProductSerializer(product).data,
            message=ResponseMessages.AVAILABLE if product.is_available else ResponseMessages.UNAVAILABLE
        )
