from django import forms

from apps.patients.models import Patient
from .models import Reservation

INPUT_CSS = "w-full border rounded-lg px-3 py-2"


class ReservationForm(forms.Form):
    """Patient + reservation fields for the reception booking form."""

    # ---- Patient ----
    name_last = forms.CharField(
        label="姓", max_length=100,
        widget=forms.TextInput(attrs={"placeholder": "山田", "class": INPUT_CSS}),
    )
    name_first = forms.CharField(
        label="名", max_length=100,
        widget=forms.TextInput(attrs={"placeholder": "太郎", "class": INPUT_CSS}),
    )
    name_last_kana = forms.CharField(
        label="セイ", max_length=100, required=False,
        widget=forms.TextInput(attrs={"placeholder": "ヤマダ", "class": INPUT_CSS}),
    )
    name_first_kana = forms.CharField(
        label="メイ", max_length=100, required=False,
        widget=forms.TextInput(attrs={"placeholder": "タロウ", "class": INPUT_CSS}),
    )
    birth_date = forms.DateField(
        label="生年月日", required=False,
        widget=forms.DateInput(attrs={"type": "date", "class": INPUT_CSS}, format="%Y-%m-%d"),
    )
    gender = forms.ChoiceField(
        label="性別", choices=Patient.GENDER_CHOICES, initial="male", required=False,
        widget=forms.Select(attrs={"class": INPUT_CSS}),
    )
    phone = forms.CharField(
        label="電話番号", max_length=50, strip=False,
        help_text="※ 既存の患者様は電話番号で自動的に照合されます",
        widget=forms.TextInput(attrs={"type": "tel", "placeholder": "090-1234-5678", "class": INPUT_CSS}),
    )

    # ---- Reservation ----
    reservation_date = forms.DateField(
        label="予約日",
        widget=forms.DateInput(attrs={"type": "date", "class": INPUT_CSS}, format="%Y-%m-%d"),
    )
    start_time = forms.TimeField(
        label="時間",
        widget=forms.TimeInput(attrs={"type": "time", "class": INPUT_CSS}, format="%H:%M"),
    )
    category = forms.ChoiceField(
        label="種別", choices=Reservation.CATEGORY_CHOICES, initial="checkup", required=False,
        widget=forms.Select(attrs={"class": INPUT_CSS}),
    )
    note = forms.CharField(
        label="備考", required=False,
        widget=forms.Textarea(attrs={
            "rows": 3, "placeholder": "特記事項があれば入力してください", "class": INPUT_CSS,
        }),
    )

    patient_field_names = ("name_last", "name_first", "name_last_kana", "name_first_kana", "birth_date", "gender")
    reservation_field_names = ("reservation_date", "start_time", "category", "note")

    def patient_fields(self):
        return [self[name] for name in self.patient_field_names]

    def reservation_fields(self):
        return [self[name] for name in self.reservation_field_names]
