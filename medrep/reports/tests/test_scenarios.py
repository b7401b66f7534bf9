import datetime

import pytest

from medrep.approvals.queue import PendingDoctor, PendingVisit, list_pending
from medrep.approvals.transitions import ApprovalKind, approve
from medrep.catalog.tests.factories import MedicineFactory
from medrep.reports.helpers import get_report
from medrep.reports.leaderboard import LeaderboardWindow, get_leaderboard
from medrep.users.models import UserRole
from medrep.visits.helpers import NewDoctor, OrderItem, submit_visit
from medrep.visits.models import VisitStatus

TODAY = datetime.date(2024, 3, 12)


@pytest.mark.django_db
def test_visit_from_submission_to_leaderboard(representative, administrator):
    amoxicillin = MedicineFactory(name="Amoxicillin")
    paracetamol = MedicineFactory(name="Paracetamol")

    visit = submit_visit(
        representative,
        TODAY,
        [OrderItem(amoxicillin.pk, 10), OrderItem(paracetamol.pk, 5)],
        new_doctor=NewDoctor(name="Dr. Mehta", specialization="Cardiology", hospital="General Hospital"),
    )

    pending = list_pending()
    assert [type(item) for item in pending] == [PendingVisit, PendingDoctor]
    assert pending[0].id == visit.pk
    assert pending[0].name == "Riya Rep"
    assert pending[0].doctor_name == "Dr. Mehta"

    approve(ApprovalKind.VISIT, visit.pk)

    assert [type(item) for item in list_pending()] == [PendingDoctor]

    report = get_report(UserRole.ADMIN, administrator.pk)
    [row] = report.rows
    assert row.id == visit.pk
    assert row.status == VisitStatus.approved
    assert row.counterparty_name == "Dr. Mehta"
    assert row.medicine_summary == "2 medicines"
    assert row.total_quantity == 15

    [performance] = get_leaderboard(LeaderboardWindow.DAILY, today=TODAY)
    assert performance.representative_id == representative.pk
    assert performance.visit_count == 1
    assert performance.ordered_quantity == 15
