from django.urls import path

from medrep.approvals.api.views import (
    ApprovalDetailView,
    ApproveView,
    PendingApprovalListView,
    RejectView,
    ToggleRepresentativeActiveView,
)
from medrep.catalog.api.views import DoctorCreateView
from medrep.reports.api.views import (
    DashboardView,
    FacilityVisitReportExportView,
    FacilityVisitReportView,
    FilterOptionsView,
    LeaderboardView,
    MyDashboardView,
    VisitReportExportView,
    VisitReportView,
)
from medrep.users.api.views import AccountCreateView, RegistrationView
from medrep.visits.api.views import FacilityVisitCreateView, VisitCreateView

app_name = "api"
urlpatterns = [
    path("approvals/", PendingApprovalListView.as_view(), name="pending_approvals"),
    path("approvals/<str:kind>/<int:pk>/", ApprovalDetailView.as_view(), name="approval_detail"),
    path("approvals/<str:kind>/<int:pk>/approve/", ApproveView.as_view(), name="approve"),
    path("approvals/<str:kind>/<int:pk>/reject/", RejectView.as_view(), name="reject"),
    path("users/", AccountCreateView.as_view(), name="account_create"),
    path("users/register/", RegistrationView.as_view(), name="register"),
    path("users/<int:pk>/toggle-active/", ToggleRepresentativeActiveView.as_view(), name="toggle_active"),
    path("reports/visits/", VisitReportView.as_view(), name="visit_report"),
    path("reports/visits/export/", VisitReportExportView.as_view(), name="visit_report_export"),
    path("reports/facility-visits/", FacilityVisitReportView.as_view(), name="facility_visit_report"),
    path(
        "reports/facility-visits/export/",
        FacilityVisitReportExportView.as_view(),
        name="facility_visit_report_export",
    ),
    path("reports/leaderboard/", LeaderboardView.as_view(), name="leaderboard"),
    path("reports/dashboard/", DashboardView.as_view(), name="dashboard"),
    path("reports/my-dashboard/", MyDashboardView.as_view(), name="my_dashboard"),
    path("reports/filter-options/", FilterOptionsView.as_view(), name="filter_options"),
    path("visits/", VisitCreateView.as_view(), name="visit_create"),
    path("facility-visits/", FacilityVisitCreateView.as_view(), name="facility_visit_create"),
    path("doctors/", DoctorCreateView.as_view(), name="doctor_create"),
]
