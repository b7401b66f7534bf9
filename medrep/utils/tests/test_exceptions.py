import pytest

from medrep.utils.exceptions import (
    ConflictError,
    MedRepError,
    NotFoundError,
    StoreUnavailableError,
    ValidationError,
    get_status_code,
)


@pytest.mark.parametrize(
    "exc, status_code",
    [
        (ValidationError("bad page"), 400),
        (NotFoundError("gone"), 404),
        (ConflictError("moved on"), 409),
        (StoreUnavailableError("down"), 503),
        (MedRepError("other"), 500),
    ],
)
def test_get_status_code(exc, status_code):
    assert get_status_code(exc) == status_code


def test_error_keeps_context():
    exc = NotFoundError("No record 3 in visits.", collection="visits", pk=3)
    assert str(exc) == "No record 3 in visits."
    assert exc.context == {"collection": "visits", "pk": 3}
