from django.urls import path, include
from rest_framework.routers import DefaultRouter
from .api import ReservationViewSet

app_name = "reservations_api"

router = DefaultRouter()
router.register(r"reservations", ReservationViewSet, basename="reservation")

urlpatterns = [path("", include(router.urls))]
