import datetime

import pytest

from medrep.reports.filters import ReportFilterSet
from medrep.reports.helpers import ReportFilters
from medrep.utils.exceptions import ValidationError


def test_parses_report_parameters():
    filterset = ReportFilterSet(
        {
            "representative": "4",
            "doctor": "7",
            "medicine": "9",
            "start_date": "2024-01-01",
            "end_date": "2024-01-31",
            "page": "2",
            "page_size": "30",
            "generation": "17",
            "unrelated": "ignored",
        }
    )
    assert filterset.get_report_filters() == ReportFilters(
        representative_id=4,
        doctor_id=7,
        medicine_id=9,
        start_date=datetime.date(2024, 1, 1),
        end_date=datetime.date(2024, 1, 31),
    )
    assert filterset.get_page() == 2
    assert filterset.get_page_size() == 30
    assert filterset.get_generation() == "17"


def test_defaults():
    filterset = ReportFilterSet({})
    assert filterset.get_report_filters() == ReportFilters()
    assert filterset.get_page() == 1
    assert filterset.get_page_size() == 10
    assert filterset.get_generation() is None


@pytest.mark.parametrize(
    "params",
    [
        {"page_size": "25"},
        {"page": "0"},
        {"page": "two"},
        {"start_date": "yesterday"},
        {"doctor": "dr-smith"},
    ],
)
def test_invalid_parameters(params):
    with pytest.raises(ValidationError):
        ReportFilterSet(params).get_report_filters()
