from django.urls import path
from inquiries.api import views

urlpatterns = [
    # Provider APIs
    path('provider/', views.ProviderInquiriesView.as_view(), name='provider-inquiries'),
    path('provider/history/', views.ProviderResponseHistoryView.as_view(), name='provider-inquiry-history'),
    path('<int:inquiry_id>/respond/', views.InquiryResponseView.as_view(), name='respond-inquiry'),
    path('<int:inquiry_id>/edit-response/', views.InquiryResponseView.as_view(edit=True), name='edit-inquiry-response'),

    # Both parties
    path('<int:inquiry_id>/history/', views.InquiryHistoryView.as_view(), name='inquiry-history'),
]
