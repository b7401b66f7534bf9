from django.db import models
from django.utils.translation import gettext

from medrep.catalog.models import Doctor, Facility, Medicine
from medrep.users.models import User


class VisitStatus(models.TextChoices):
    pending = "pending", gettext("Pending")
    approved = "approved", gettext("Approved")
    rejected = "rejected", gettext("Rejected")


class BaseVisit(models.Model):
    submitted_by = models.ForeignKey(User, on_delete=models.CASCADE)
    date = models.DateField()
    notes = models.TextField(null=True, blank=True)
    # only the approval workflow moves a visit out of pending
    status = models.CharField(max_length=50, choices=VisitStatus.choices, default=VisitStatus.pending)
    date_created = models.DateTimeField(auto_now_add=True)

    class Meta:
        abstract = True

    @property
    def total_quantity(self):
        return sum(line.quantity for line in self.order_lines.all())


class Visit(BaseVisit):
    doctor = models.ForeignKey(Doctor, on_delete=models.PROTECT, related_name="visits")

    class Meta:
        ordering = ["-date", "-id"]

    def __str__(self):
        return f"{self.doctor} on {self.date}"


class FacilityVisit(BaseVisit):
    facility = models.ForeignKey(Facility, on_delete=models.PROTECT, related_name="visits")

    class Meta:
        ordering = ["-date", "-id"]

    def __str__(self):
        return f"{self.facility} on {self.date}"


class BaseOrderLine(models.Model):
    medicine = models.ForeignKey(Medicine, on_delete=models.PROTECT)
    quantity = models.PositiveIntegerField()

    class Meta:
        abstract = True


class OrderLine(BaseOrderLine):
    visit = models.ForeignKey(Visit, on_delete=models.CASCADE, related_name="order_lines")

    class Meta:
        ordering = ["id"]
        constraints = [
            models.CheckConstraint(condition=models.Q(quantity__gt=0), name="order_line_quantity_positive"),
        ]


class FacilityOrderLine(BaseOrderLine):
    facility_visit = models.ForeignKey(FacilityVisit, on_delete=models.CASCADE, related_name="order_lines")

    class Meta:
        ordering = ["id"]
        constraints = [
            models.CheckConstraint(condition=models.Q(quantity__gt=0), name="facility_order_line_quantity_positive"),
        ]
