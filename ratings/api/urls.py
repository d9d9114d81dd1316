from django.urls import path
from ratings.api import views

urlpatterns = [
    path('provider/', views.ProviderRatingsView.as_view(), name='provider-ratings'),
]
