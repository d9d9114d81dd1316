from django.contrib import admin
from django.urls import path, include

urlpatterns = [
    path('admin/', admin.site.urls),
    path('api/auth/', include('authentication.api.urls')),
    path('api/providers/', include('providers.api.urls')),
    path('api/dashboard/', include('dashboard.api.urls')),
    path('api/inquiries/', include('inquiries.api.urls')),
    path('api/quotations/', include('quotations.api.urls')),
    path('api/orders/', include('orders.api.urls')),
    path('api/ratings/', include('ratings.api.urls')),
    path('api/products/', include('products.api.urls')),
    path('api/customers/', include('customers.api.urls')),
]
