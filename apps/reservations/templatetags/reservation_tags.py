# apps/reservations/templatetags/reservation_tags.py
from django import template

from ..labels import category_label as _category_label
from ..labels import status_color as _status_color
from ..labels import status_label as _status_label

register = template.Library()


@register.filter
def category_label(code):
    """Usage: {{ r.category|category_label }}"""
    return _category_label(code)


@register.filter
def status_label(code):
    """Usage: {{ r.status|status_label }}"""
    return _status_label(code)


@register.filter
def status_color(code):
    """Badge classes for a status; neutral grey for unknown codes."""
    return _status_color(code)


@register.filter
def hhmm(value):
    """Render a time (or 'HH:MM:SS' string) as HH:MM."""
    if not value:
        return ""
    if hasattr(value, "strftime"):
        return value.strftime("%H:%M")
    return str(value)[:5]
