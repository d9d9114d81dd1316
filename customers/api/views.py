from django.contrib.auth import get_user_model
from django.core.exceptions import ValidationError
from rest_framework import status

from customers.api.serializers import (
    CustomerProfileSerializer, CustomerInquirySerializer, CustomerInquiryCreateSerializer,
    CustomerInquiryRespondSerializer, CustomerInquiryStatusSerializer,
    ProductQuotationSerializer, ProductQuotationRequestSerializer,
    ProductQuotationRespondSerializer, ProductQuotationRejectSerializer,
    CustomerOrderSerializer, PlaceOrderSerializer, CustomerOrderUpdateSerializer,
    CustomerOrderStatusSerializer
)
from customers.enums import ErrorMessages, ResponseMessages
from customers.models import CustomerInquiry, ProductQuotation, CustomerOrder
from customers.services import (
    CustomerProfileService, CustomerInquiryService, ProductQuotationService,
    CustomerOrderService, CustomerAnalyticsService
)
from products.enums import ErrorMessages as ProductErrorMessages
from products.models import Product
from project.permissions import IsAdmin, IsCustomer, IsManufacturer, IsManufacturerOrCustomer
from project.utils import StandardizedAPIView, business_error_response

User = get_user_model()


class SharedListView(StandardizedAPIView):
    """
    GET lists the rows on either side of the exchange; POST is for customers only.
    """
    model = None
    serializer_class = None

    def get_permissions(self):
        if self.request.method == 'POST':
            return [IsCustomer()]
        return [IsManufacturerOrCustomer()]

    def get_queryset(self):
        user = self.request.user
        side = {'manufacturer': user} if user.is_manufacturer else {'customer': user}
        queryset = self.model.objects.filter(**side).select_related('customer', 'manufacturer')
        status_filter = self.request.query_params.get('status')
        if status_filter:
            queryset = queryset.filter(status=status_filter)
        return queryset

    def get(self, request, *args, **kwargs):
        rows = list(self.get_queryset())
        return self.success_response(
            data=self.serializer_class(rows, many=True).data,
            message=f"Retrieved {len(rows)} items"
        )


class CustomerProfileView(StandardizedAPIView):
    """Read or save the authenticated customer's profile"""
    permission_classes = [IsCustomer]

    def get(self, request, *args, **kwargs):
        try:
            profile = CustomerProfileService.get_for_user(request.user)
        except ValidationError as e:
            return business_error_response(e, status.HTTP_404_NOT_FOUND)
        return self.success_response(data=CustomerProfileSerializer(profile).data)

    def put(self, request, *args, **kwargs):
        serializer = CustomerProfileSerializer(data=request.data)
        if not serializer.is_valid():
            return self.validation_error_response(serializer.errors)

        profile = CustomerProfileService.save_profile(request.user, **serializer.validated_data)
        return self.success_response(
            data=CustomerProfileSerializer(profile).data,
            message=ResponseMessages.PROFILE_SAVED
        )


class CustomerInquiriesView(SharedListView):
    model = CustomerInquiry
    serializer_class = CustomerInquirySerializer

    def post(self, request, *args, **kwargs):
        serializer = CustomerInquiryCreateSerializer(data=request.data)
        if not serializer.is_valid():
            return self.validation_error_response(serializer.errors)

        data = serializer.validated_data
        manufacturer = User.objects.filter(id=data['manufacturer'], is_active=True).first()
        if manufacturer is None:
            return self.error_response("Manufacturer not found", status.HTTP_404_NOT_FOUND)

        try:
            inquiry = CustomerInquiryService.create_inquiry(request.user, manufacturer, data['subject'], data['message'])
        except ValidationError as e:
            return business_error_response(e)

        return self.success_response(
            data=CustomerInquirySerializer(inquiry).data,
            message=ResponseMessages.INQUIRY_SENT,
            status_code=status.HTTP_201_CREATED
        )


class CustomerInquiryStatisticsView(StandardizedAPIView):
    """Inquiry counts per status for the manufacturer"""
    permission_classes = [IsManufacturer]

    def get(self, request, *args, **kwargs):
        return self.success_response(data=CustomerInquiryService.statistics(request.user))


class CustomerInquiryRespondView(StandardizedAPIView):
    permission_classes = [IsManufacturer]

    def post(self, request, inquiry_id):
        serializer = CustomerInquiryRespondSerializer(data=request.data)
        if not serializer.is_valid():
            return self.validation_error_response(serializer.errors)

        try:
            inquiry = CustomerInquiry.objects.get(id=inquiry_id, manufacturer=request.user)
        except CustomerInquiry.DoesNotExist:
            return self.error_response(ErrorMessages.INQUIRY_NOT_FOUND, status.HTTP_404_NOT_FOUND)

        inquiry = CustomerInquiryService.respond(inquiry, request.user, serializer.validated_data['response'])
        return self.success_response(
            data=CustomerInquirySerializer(inquiry).data,
            message=ResponseMessages.INQUIRY_RESPONDED
        )


class CustomerInquiryStatusView(StandardizedAPIView):
    permission_classes = [IsManufacturer]

    def post(self, request, inquiry_id):
        serializer = CustomerInquiryStatusSerializer(data=request.data)
        if not serializer.is_valid():
            return self.validation_error_response(serializer.errors)

        try:
            inquiry = CustomerInquiry.objects.get(id=inquiry_id, manufacturer=request.user)
        except CustomerInquiry.DoesNotExist:
            return self.error_response(ErrorMessages.INQUIRY_NOT_FOUND, status.HTTP_404_NOT_FOUND)

        result = CustomerInquiryService.update_status(inquiry, request.user, serializer.validated_data['status'])
        return self.success_response(
            data={
                'inquiry': CustomerInquirySerializer(result['inquiry']).data,
                'old_status': result['old_status'],
                'new_status': result['new_status'],
            },
            message=ResponseMessages.INQUIRY_STATUS_UPDATED.format(status=result['new_status'])
        )


class ProductQuotationsView(SharedListView):
    model = ProductQuotation
    serializer_class = ProductQuotationSerializer

    def get_queryset(self):
        return super().get_queryset().select_related('product')

    def post(self, request, *args, **kwargs):
        serializer = ProductQuotationRequestSerializer(data=request.data)
        if not serializer.is_valid():
            return self.validation_error_response(serializer.errors)

        data = serializer.validated_data
        try:
            product = Product.objects.select_related('manufacturer').get(id=data['product'])
        except Product.DoesNotExist:
            return self.error_response(ProductErrorMessages.PRODUCT_NOT_FOUND, status.HTTP_404_NOT_FOUND)

        try:
            quotation = ProductQuotationService.request_quotation(
                request.user, product, data['quantity'], data['message']
            )
        except ValidationError as e:
            return business_error_response(e)

        return self.success_response(
            data=ProductQuotationSerializer(quotation).data,
            message=ResponseMessages.QUOTATION_REQUESTED,
            status_code=status.HTTP_201_CREATED
        )


class ProductQuotationRespondView(StandardizedAPIView):
    """Manufacturer sends an offer, which accepts the request"""
    permission_classes = [IsManufacturer]

    def post(self, request, quotation_id):
        serializer = ProductQuotationRespondSerializer(data=request.data)
        if not serializer.is_valid():
            return self.validation_error_response(serializer.errors)

        try:
            quotation = ProductQuotation.objects.get(id=quotation_id, manufacturer=request.user)
        except ProductQuotation.DoesNotExist:
            return self.error_response(ErrorMessages.QUOTATION_NOT_FOUND, status.HTTP_404_NOT_FOUND)

        try:
            quotation = ProductQuotationService.respond(quotation, request.user, **serializer.validated_data)
        except ValidationError as e:
            return business_error_response(e)

        return self.success_response(
            data=ProductQuotationSerializer(quotation).data,
            message=ResponseMessages.QUOTATION_ACCEPTED
        )


class ProductQuotationRejectView(StandardizedAPIView):
    permission_classes = [IsManufacturer]

    def post(self, request, quotation_id):
        serializer = ProductQuotationRejectSerializer(data=request.data)
        if not serializer.is_valid():
            return self.validation_error_response(serializer.errors)

        try:
            quotation = ProductQuotation.objects.get(id=quotation_id, manufacturer=request.user)
        except ProductQuotation.DoesNotExist:
            return self.error_response(ErrorMessages.QUOTATION_NOT_FOUND, status.HTTP_404_NOT_FOUND)

        try:
            quotation = ProductQuotationService.reject(
                quotation, request.user, serializer.validated_data['response_message']
            )
        except ValidationError as e:
            return business_error_response(e)

        return self.success_response(
            data=ProductQuotationSerializer(quotation).data,
            message=ResponseMessages.QUOTATION_REJECTED
        )


class CustomerOrdersView(SharedListView):
    model = CustomerOrder
    serializer_class = CustomerOrderSerializer

    def get_queryset(self):
        return super().get_queryset().select_related('product')

    def post(self, request, *args, **kwargs):
        serializer = PlaceOrderSerializer(data=request.data)
        if not serializer.is_valid():
            return self.validation_error_response(serializer.errors)

        data = serializer.validated_data
        try:
            quotation = ProductQuotation.objects.get(id=data['quotation'], customer=request.user)
        except ProductQuotation.DoesNotExist:
            return self.error_response(ErrorMessages.QUOTATION_NOT_FOUND, status.HTTP_404_NOT_FOUND)

        try:
            order = CustomerOrderService.place_order(
                request.user, quotation, data['delivery_address'], data['contact_number']
            )
        except ValidationError as e:
            return business_error_response(e)

        return self.success_response(
            data=CustomerOrderSerializer(order).data,
            message=ResponseMessages.ORDER_PLACED,
            status_code=status.HTTP_201_CREATED
        )


class CustomerOrderDetailView(StandardizedAPIView):
    """Customer edits a pending order"""
    permission_classes = [IsCustomer]

    def patch(self, request, order_id):
        serializer = CustomerOrderUpdateSerializer(data=request.data)
        if not serializer.is_valid():
            return self.validation_error_response(serializer.errors)

        try:
            order = CustomerOrder.objects.get(id=order_id, customer=request.user)
        except CustomerOrder.DoesNotExist:
            return self.error_response(ErrorMessages.ORDER_NOT_FOUND, status.HTTP_404_NOT_FOUND)

        try:
            order = CustomerOrderService.update_order(order, request.user, **serializer.validated_data)
        except ValidationError as e:
            return business_error_response(e)

        return self.success_response(data=CustomerOrderSerializer(order).data, message=ResponseMessages.ORDER_UPDATED)


class CustomerOrderCancelView(StandardizedAPIView):
    permission_classes = [IsCustomer]

    def post(self, request, order_id):
        try:
            order = CustomerOrder.objects.get(id=order_id, customer=request.user)
        except CustomerOrder.DoesNotExist:
            return self.error_response(ErrorMessages.ORDER_NOT_FOUND, status.HTTP_404_NOT_FOUND)

        try:
            order = CustomerOrderService.cancel_order(order, request.user)
        except ValidationError as e:
            return business_error_response(e)

        return self.success_response(data=CustomerOrderSerializer(order).data, message=ResponseMessages.ORDER_CANCELLED)


class CustomerOrderStatusView(StandardizedAPIView):
    """Manufacturer moves a customer order through processing, shipping and delivery"""
    permission_classes = [IsManufacturer]

    def post(self, request, order_id):
        serializer = CustomerOrderStatusSerializer(data=request.data)
        if not serializer.is_valid():
            return self.validation_error_response(serializer.errors)

        try:
            order = CustomerOrder.objects.get(id=order_id, manufacturer=request.user)
        except CustomerOrder.DoesNotExist:
            return self.error_response(ErrorMessages.ORDER_NOT_FOUND, status.HTTP_404_NOT_FOUND)

        data = serializer.validated_data
        try:
            result = CustomerOrderService.update_status(
                order, request.user, data['status'], data.get('tracking_number')
            )
        except ValidationError as e:
            return business_error_response(e)

        return self.success_response(
            data={
                'order': CustomerOrderSerializer(result['order']).data,
                'old_status': result['old_status'],
                'new_status': result['new_status'],
            },
            message=ResponseMessages.ORDER_STATUS_UPDATED.format(status=result['new_status'])
        )


class CustomerAnalyticsView(StandardizedAPIView):
    """Customer totals by state, category and month of joining"""
    permission_classes = [IsAdmin]

    def get(self, request, *args, **kwargs):
        return self.success_response(data=CustomerAnalyticsService.analytics())
