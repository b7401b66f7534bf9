import django_filters
from django import forms
from django.conf import settings

from medrep.reports.helpers import ReportFilters
from medrep.utils.exceptions import ValidationError
from medrep.visits.models import Visit


class IntegerFilter(django_filters.NumberFilter):
    field_class = forms.IntegerField


class ReportFilterSet(django_filters.FilterSet):
    """Parses report query parameters. Filtering itself happens in the report engine."""

    representative = IntegerFilter(label="Representative")
    doctor = IntegerFilter(label="Doctor")
    medicine = IntegerFilter(label="Medicine")
    start_date = django_filters.DateFilter(label="From Date")
    end_date = django_filters.DateFilter(label="To Date")
    search = django_filters.CharFilter(label="Search")
    page = IntegerFilter(label="Page", min_value=1)
    page_size = django_filters.TypedChoiceFilter(
        label="Rows per page",
        choices=[(size, size) for size in settings.REPORT_PAGE_SIZE_OPTIONS],
        coerce=int,
    )
    generation = django_filters.CharFilter(label="Generation")

    class Meta:
        model = None
        fields = [
            "representative",
            "doctor",
            "medicine",
            "start_date",
            "end_date",
            "search",
            "page",
            "page_size",
            "generation",
        ]
        unknown_field_behavior = django_filters.UnknownFieldBehavior.IGNORE

    def __init__(self, data=None, *args, **kwargs):
        # Doesn't matter which model it is here
        kwargs.setdefault("queryset", Visit.objects.none())
        super().__init__(data, *args, **kwargs)

    @property
    def cleaned_values(self):
        if not self.form.is_valid():
            raise ValidationError(_format_errors(self.form.errors), errors=self.form.errors.get_json_data())
        return self.form.cleaned_data

    def get_report_filters(self) -> ReportFilters:
        values = self.cleaned_values
        return ReportFilters(
            representative_id=values.get("representative"),
            doctor_id=values.get("doctor"),
            medicine_id=values.get("medicine"),
            start_date=values.get("start_date"),
            end_date=values.get("end_date"),
            search=values.get("search") or None,
        )

    def get_page(self):
        return self.cleaned_values.get("page") or 1

    def get_page_size(self):
        return self.cleaned_values.get("page_size") or settings.REPORT_PAGE_SIZE_OPTIONS[0]

    def get_generation(self):
        return self.cleaned_values.get("generation") or None


def _format_errors(errors):
    return "; ".join(f"{field}: {' '.join(messages)}" for field, messages in errors.items())
