from django.urls import path
from providers.api import views

urlpatterns = [
    # Public APIs
    path('', views.provider_search, name='provider-search'),
    path('<int:pk>/', views.ProviderDetailView.as_view(), name='provider-detail'),

    # Provider APIs
    path('register/', views.ProviderRegisterView.as_view(), name='provider-register'),
    path('me/', views.MyProviderProfileView.as_view(), name='provider-me'),

    # Manufacturer APIs
    path('manufacturers/register/', views.ManufacturerRegisterView.as_view(), name='manufacturer-register'),
    path('manufacturers/me/', views.MyManufacturerProfileView.as_view(), name='manufacturer-me'),
]
