from django.urls import path
from orders.api import views

urlpatterns = [
    # Provider APIs
    path('provider/', views.ProviderOrdersView.as_view(), name='provider-orders'),
    path('<int:order_id>/confirm/', views.ConfirmOrderView.as_view(), name='confirm-order'),

    # Both parties
    path('<int:order_id>/update-status/', views.UpdateOrderStatusView.as_view(), name='update-order-status'),
    path('<int:order_id>/payment-status/', views.UpdatePaymentStatusView.as_view(), name='update-payment-status'),
    path('<int:order_id>/status-history/', views.OrderStatusHistoryView.as_view(), name='order-status-history'),
]
