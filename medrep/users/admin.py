from django.contrib import admin, messages
from django.contrib.auth import admin as auth_admin
from django.contrib.auth import forms as admin_forms
from django.forms import EmailField
from django.utils.translation import gettext_lazy as _

from medrep.approvals.transitions import ApprovalKind, approve, reject
from medrep.users.models import User, UserStatus
from medrep.utils.exceptions import MedRepError


class UserAdminChangeForm(admin_forms.UserChangeForm):
    class Meta(admin_forms.UserChangeForm.Meta):
        model = User
        fields = "__all__"
        field_classes = {"email": EmailField}


class UserAdminCreationForm(admin_forms.UserCreationForm):
    class Meta(admin_forms.UserCreationForm.Meta):
        model = User
        fields = ("email",)
        field_classes = {"email": EmailField}


class AwaitingApprovalFilter(admin.SimpleListFilter):
    title = _("Awaiting approval")
    parameter_name = "awaiting_approval"

    def lookups(self, request, model_admin):
        return (("yes", _("Pending representatives")),)

    def queryset(self, request, queryset):
        if self.value() == "yes":
            return queryset.filter(status=UserStatus.PENDING)
        return queryset


@admin.register(User)
class UserAdmin(auth_admin.UserAdmin):
    form = UserAdminChangeForm
    add_form = UserAdminCreationForm
    fieldsets = (
        (None, {"fields": ("email", "password")}),
        (_("Profile"), {"fields": ("name", "region")}),
        (_("Medical representative access"), {"fields": ("role", "status")}),
        (_("Django admin"), {"fields": ("is_staff", "is_superuser", "groups")}),
    )
    add_fieldsets = ((None, {"classes": ("wide",), "fields": ("email", "name", "role", "password1", "password2")}),)
    list_display = ["email", "name", "role", "status", "region"]
    list_filter = ["role", "status", AwaitingApprovalFilter]
    search_fields = ["email", "name", "region"]
    ordering = ["id"]
    actions = ["approve_accounts", "reject_accounts"]

    def save_model(self, request, obj, form, change):
        if not change:
            # accounts created here skip the approval queue
            obj.status = UserStatus.ACTIVE
        super().save_model(request, obj, form, change)

    @admin.action(description="Approve selected representatives")
    def approve_accounts(self, request, queryset):
        self._decide(request, queryset, approve, "approved")

    @admin.action(description="Reject selected representatives")
    def reject_accounts(self, request, queryset):
        self._decide(request, queryset, reject, "rejected")

    def _decide(self, request, queryset, decision, verb):
        done = 0
        for user in queryset:
            try:
                decision(ApprovalKind.USER_ACCOUNT, user.pk)
            except MedRepError as e:
                self.message_user(request, f"{user.email}: {e}", messages.WARNING)
            else:
                done += 1
        self.message_user(request, f"{done} account(s) {verb}.")
