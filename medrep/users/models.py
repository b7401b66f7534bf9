from django.contrib.auth.models import AbstractUser
from django.db import models
from django.utils.translation import gettext_lazy as _

from medrep.users.managers import UserManager


class UserRole(models.TextChoices):
    ADMIN = "admin", _("Admin")
    REPRESENTATIVE = "representative", _("Medical Representative")


class UserStatus(models.TextChoices):
    PENDING = "pending", _("Pending")
    ACTIVE = "active", _("Active")
    INACTIVE = "inactive", _("Inactive")
    REJECTED = "rejected", _("Rejected")


class User(AbstractUser):
    """
    Default custom user model for MedRep Connect.

    Accounts are identified by email. ``role`` decides which dashboards and
    reports a user gets, ``status`` tracks the approval lifecycle of
    self-registered representatives.
    """

    # First and last name do not cover name patterns around the globe
    name = models.CharField(_("Name of User"), blank=True, max_length=255)
    first_name = None  # type: ignore
    last_name = None  # type: ignore
    username = None  # type: ignore
    email = models.EmailField(_("email address"), unique=True)
    role = models.CharField(max_length=32, choices=UserRole.choices, default=UserRole.REPRESENTATIVE)
    status = models.CharField(max_length=32, choices=UserStatus.choices, default=UserStatus.PENDING)
    region = models.CharField(max_length=255, null=True, blank=True)

    USERNAME_FIELD = "email"
    REQUIRED_FIELDS = []

    objects = UserManager()

    class Meta:
        ordering = ["id"]

    def __str__(self):
        return self.name or self.email

    @property
    def is_admin(self):
        return self.role == UserRole.ADMIN

    @property
    def is_representative(self):
        return self.role == UserRole.REPRESENTATIVE

    @property
    def can_sign_in(self):
        return self.status not in (UserStatus.PENDING, UserStatus.REJECTED)

    @property
    def can_submit_visits(self):
        return self.is_representative and self.status == UserStatus.ACTIVE
