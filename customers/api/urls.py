from django.urls import path
from customers.api import views

urlpatterns = [
    # Customer profile
    path('me/', views.CustomerProfileView.as_view(), name='customer-profile'),

    # Inquiries (customers send, manufacturers answer)
    path('inquiries/', views.CustomerInquiriesView.as_view(), name='customer-inquiries'),
    path('inquiries/statistics/', views.CustomerInquiryStatisticsView.as_view(), name='customer-inquiry-statistics'),
    path('inquiries/<int:inquiry_id>/respond/', views.CustomerInquiryRespondView.as_view(), name='respond-customer-inquiry'),
    path('inquiries/<int:inquiry_id>/status/', views.CustomerInquiryStatusView.as_view(), name='customer-inquiry-status'),

    # Product quotations
    path('quotations/', views.ProductQuotationsView.as_view(), name='product-quotations'),
    path('quotations/<int:quotation_id>/respond/', views.ProductQuotationRespondView.as_view(), name='respond-product-quotation'),
    path('quotations/<int:quotation_id>/reject/', views.ProductQuotationRejectView.as_view(), name='reject-product-quotation'),

    # Orders
    path('orders/', views.CustomerOrdersView.as_view(), name='customer-orders'),
    path('orders/<int:order_id>/', views.CustomerOrderDetailView.as_view(), name='customer-order-detail'),
    path('orders/<int:order_id>/cancel/', views.CustomerOrderCancelView.as_view(), name='cancel-customer-order'),
    path('orders/<int:order_id>/status/', views.CustomerOrderStatusView.as_view(), name='customer-order-status'),

    # Admin
    path('analytics/', views.CustomerAnalyticsView.as_view(), name='customer-analytics'),
]
