# apps/reservations/context_processors.py
from django.conf import settings


def clinic(request):
    """
    Exposes the clinic display name to every template.
    Usage: <h1>{{ clinic_name }}</h1>
    """
    return {"clinic_name": getattr(settings, "CLINIC_NAME", "")}
