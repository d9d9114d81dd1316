from rest_framework import generics

from project.permissions import IsProvider
from project.utils import StandardizedResponseMixin
from providers.models import Provider
from ratings.api.serializers import RatingSerializer
from ratings.models import Rating
from ratings.services import RatingService


class ProviderRatingsView(StandardizedResponseMixin, generics.ListAPIView):
    """Ratings received by the authenticated provider"""
    serializer_class = RatingSerializer
    permission_classes = [IsProvider]

    def get_queryset(self):
        provider = Provider.objects.filter(user=self.request.user).first()
        if provider is None:
            return Rating.objects.none()
        return RatingService.for_provider(provider)
