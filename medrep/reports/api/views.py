from django.utils.timezone import localdate
from django_tables2.export import TableExport
from rest_framework.permissions import IsAuthenticated
from rest_framework.response import Response
from rest_framework.views import APIView

from medrep.reports.api.serializers import ReportPageSerializer, RepresentativePerformanceSerializer
from medrep.reports.filters import ReportFilterSet
from medrep.reports.helpers import (
    ReportVariant,
    get_dashboard_stats,
    get_filter_options,
    get_report,
    get_report_rows,
    get_representative_summary,
)
from medrep.reports.leaderboard import LeaderboardWindow, get_leaderboard
from medrep.reports.tables import FacilityVisitReportTable, VisitReportTable
from medrep.users.permissions import IsAdministrator, IsRepresentative
from medrep.utils.exceptions import ValidationError


class VisitReportView(APIView):
    permission_classes = [IsAuthenticated]
    variant = ReportVariant.VISITS

    def get(self, request, *args, **kwargs):
        filterset = ReportFilterSet(request.query_params)
        report = get_report(
            request.user.role,
            request.user.pk,
            filterset.get_report_filters(),
            page=filterset.get_page(),
            page_size=filterset.get_page_size(),
            variant=self.variant,
        )
        data = ReportPageSerializer(report).data
        # lets the client drop responses to requests it has since replaced
        data["generation"] = filterset.get_generation()
        return Response(data)


class FacilityVisitReportView(VisitReportView):
    variant = ReportVariant.FACILITY_VISITS


class VisitReportExportView(APIView):
    permission_classes = [IsAuthenticated]
    variant = ReportVariant.VISITS
    table_classes = {
        ReportVariant.VISITS: VisitReportTable,
        ReportVariant.FACILITY_VISITS: FacilityVisitReportTable,
    }

    def get(self, request, *args, **kwargs):
        filterset = ReportFilterSet(request.query_params)
        rows = get_report_rows(
            request.user.role, request.user.pk, filterset.get_report_filters(), variant=self.variant
        )
        table = self.table_classes[self.variant](rows)
        exporter = TableExport("csv", table)
        return exporter.response(f"{self.variant}_report_{localdate():%Y-%m-%d}.csv")


class FacilityVisitReportExportView(VisitReportExportView):
    variant = ReportVariant.FACILITY_VISITS


class LeaderboardView(APIView):
    permission_classes = [IsAuthenticated]

    def get(self, request, *args, **kwargs):
        window = request.query_params.get("window", LeaderboardWindow.ALL)
        include_facility_visits = request.query_params.get("include_facility_visits") in ("1", "true")
        leaderboard = get_leaderboard(window, include_facility_visits=include_facility_visits)
        return Response(RepresentativePerformanceSerializer(leaderboard, many=True).data)


class DashboardView(APIView):
    permission_classes = [IsAdministrator]

    def get(self, request, *args, **kwargs):
        return Response(get_dashboard_stats())


class MyDashboardView(APIView):
    permission_classes = [IsRepresentative]

    def get(self, request, *args, **kwargs):
        return Response(get_representative_summary(request.user.pk))


class FilterOptionsView(APIView):
    permission_classes = [IsAdministrator]

    def get(self, request, *args, **kwargs):
        representative_id = request.query_params.get("representative") or None
        if representative_id is not None:
            try:
                representative_id = int(representative_id)
            except ValueError:
                raise ValidationError("representative must be an id.", representative=representative_id)
        return Response(get_filter_options(representative_id))
