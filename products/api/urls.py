from django.urls import path
from products.api import views

urlpatterns = [
    # Public APIs
    path('', views.product_browse, name='product-browse'),
    path('<int:pk>/', views.ProductDetailView.as_view(), name='product-detail'),

    # Manufacturer APIs
    path('mine/', views.MyProductsView.as_view(), name='my-products'),
    path('<int:product_id>/availability/', views.ProductAvailabilityView.as_view(), name='product-availability'),
]
