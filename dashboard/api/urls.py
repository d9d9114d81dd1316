from django.urls import path
from dashboard.api import views

urlpatterns = [
    path('requests/', views.RequestsView.as_view(), name='dashboard-requests'),
    path('submit/<str:interaction_type>/', views.SubmitRequestView.as_view(), name='dashboard-submit'),
    path('providers/<int:provider_id>/clear/', views.ClearProviderView.as_view(), name='dashboard-clear-provider'),
    path('<str:list_type>/bulk-delete/', views.BulkDeleteView.as_view(), name='dashboard-bulk-delete'),
    path('<str:list_type>/<int:record_id>/', views.RecordDeleteView.as_view(), name='dashboard-delete-record'),
]
