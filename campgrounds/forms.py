from django import forms
from .models import Campground, Review, RATING_MIN, RATING_MAX


class NestedPrefixMixin:
    """
    Name fields `prefix[field]` instead of Django's `prefix-field`, so a form
    reads and renders the nested `{campground: {...}}` payload shape browsers
    submit as `campground[title]=...`.
    """

    def add_prefix(self, field_name):
        return f"{self.prefix}[{field_name}]" if self.prefix else field_name


# Short predicates; validation.FieldError puts the quoted field path in front,
# e.g. '"campground.title" is required'.
EMPTY_MESSAGE = "is not allowed to be empty"
TEXT_MESSAGES = {
    "required": "is required",
    "max_length": "length must be less than or equal to %(limit_value)d characters long",
}
NUMBER_MESSAGES = {
    "required": "is required",
    "invalid": "must be a number",
    "min_value": "must be greater than or equal to %(limit_value)s",
    "max_value": "must be less than or equal to %(limit_value)s",
    "max_digits": "must have no more than %(max)s digits",
    "max_decimal_places": "must have no more than %(max)s decimal places",
    "max_whole_digits": "must have no more than %(max)s digits before the decimal point",
}


class CampgroundForm(NestedPrefixMixin, forms.ModelForm):
    prefix = "campground"

    class Meta:
        model = Campground
        fields = ["title", "location", "price", "description"]
        widgets = {
            "title": forms.TextInput(attrs={
                "placeholder": "e.g. Pine Lake",
                "class": "form-control"
            }),
            "location": forms.TextInput(attrs={
                "placeholder": "e.g. Boulder, CO",
                "class": "form-control"
            }),
            "price": forms.NumberInput(attrs={
                "min": 0, "step": "0.01",
                "placeholder": "0.00",
                "class": "form-control"
            }),
            "description": forms.Textarea(attrs={
                "rows": 4,
                "class": "form-control"
            }),
        }
        error_messages = {
            "title": TEXT_MESSAGES,
            "location": TEXT_MESSAGES,
            "description": TEXT_MESSAGES,
            "price": NUMBER_MESSAGES,
        }

    def _clean_text(self, name):
        value = (self.cleaned_data.get(name) or "").strip()
        if not value:
            raise forms.ValidationError(EMPTY_MESSAGE, code="empty")
        return value

    def clean_title(self):
        return self._clean_text("title")

    def clean_location(self):
        return self._clean_text("location")

    def clean_description(self):
        return self._clean_text("description")


class ReviewForm(NestedPrefixMixin, forms.ModelForm):
    prefix = "review"

    rating = forms.IntegerField(
        min_value=RATING_MIN,
        max_value=RATING_MAX,
        error_messages=NUMBER_MESSAGES,
        widget=forms.NumberInput(attrs={
            "min": RATING_MIN, "max": RATING_MAX,
            "class": "form-control"
        }),
    )

    class Meta:
        model = Review
        fields = ["rating", "body"]
        widgets = {
            "body": forms.Textarea(attrs={
                "rows": 3,
                "placeholder": "How was your stay?",
                "class": "form-control"
            }),
        }
        error_messages = {
            "body": TEXT_MESSAGES,
        }

    def clean_body(self):
        body = (self.cleaned_data.get("body") or "").strip()
        if not body:
            raise forms.ValidationError(EMPTY_MESSAGE, code="empty")
        return body
