# apps/reservations/labels.py
"""
Display tables for reservation codes.

The store keeps category/status as plain text, so rows written by other
tools can carry codes missing here. Lookups fall back to the raw code
(or a neutral badge colour) instead of failing.
"""

CATEGORY_LABELS = {
    "checkup": "定期検診",
    "treatment": "治療",
    "consultation": "相談",
    "emergency": "急患",
    "other": "その他",
}

STATUS_LABELS = {
    "confirmed": "予約確定",
    "checked_in": "来院済",
    "in_progress": "診察中",
    "completed": "完了",
    "cancelled": "キャンセル",
    "no_show": "無断キャンセル",
}

STATUS_COLORS = {
    "confirmed": "bg-blue-100 text-blue-800",
    "checked_in": "bg-green-100 text-green-800",
    "in_progress": "bg-yellow-100 text-yellow-800",
    "completed": "bg-gray-100 text-gray-800",
    "cancelled": "bg-red-100 text-red-800",
    "no_show": "bg-red-100 text-red-800",
}

DEFAULT_STATUS_COLOR = "bg-gray-100"


def category_label(code) -> str:
    return CATEGORY_LABELS.get(code) or (code or "")


def status_label(code) -> str:
    return STATUS_LABELS.get(code) or (code or "")


def status_color(code) -> str:
    return STATUS_COLORS.get(code, DEFAULT_STATUS_COLOR)
