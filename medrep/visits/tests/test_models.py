import pytest
from django.db import IntegrityError, transaction

from medrep.visits.models import OrderLine
from medrep.visits.tests.factories import OrderLineFactory, VisitFactory


@pytest.mark.django_db
def test_order_quantity_constraint():
    visit = VisitFactory()
    line = OrderLineFactory(visit=visit, quantity=4)
    with pytest.raises(IntegrityError), transaction.atomic():
        OrderLine.objects.filter(pk=line.pk).update(quantity=0)


@pytest.mark.django_db
def test_order_lines_cascade_with_visit():
    line = OrderLineFactory()
    line.visit.delete()
    assert not OrderLine.objects.filter(pk=line.pk).exists()
