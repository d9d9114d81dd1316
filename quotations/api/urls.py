from django.urls import path
from quotations.api import views

urlpatterns = [
    # Provider APIs
    path('provider/', views.ProviderQuotationsView.as_view(), name='provider-quotations'),
    path('<int:quotation_id>/respond/', views.QuotationRespondView.as_view(), name='respond-quotation'),

    # Manufacturer APIs
    path('<int:quotation_id>/status/', views.QuotationStatusView.as_view(), name='quotation-status'),
]
