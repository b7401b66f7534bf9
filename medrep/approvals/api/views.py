import dataclasses

from rest_framework.response import Response
from rest_framework.views import APIView

from medrep.approvals.api.serializers import PendingApprovalSerializer, ToggleActiveResultSerializer
from medrep.approvals.queue import list_pending, view_detail
from medrep.approvals.transitions import approve, reject, toggle_representative_active
from medrep.users.permissions import IsAdministrator


class PendingApprovalListView(APIView):
    permission_classes = [IsAdministrator]

    def get(self, request, *args, **kwargs):
        items = [dataclasses.asdict(item) for item in list_pending()]
        return Response(PendingApprovalSerializer(items, many=True).data)


class ApprovalDetailView(APIView):
    permission_classes = [IsAdministrator]

    def get(self, request, kind, pk, *args, **kwargs):
        return Response(view_detail(kind, pk))


class ApproveView(APIView):
    permission_classes = [IsAdministrator]

    def post(self, request, kind, pk, *args, **kwargs):
        approve(kind, pk)
        return Response({"kind": kind, "id": pk, "result": "approved"})


class RejectView(APIView):
    permission_classes = [IsAdministrator]

    def post(self, request, kind, pk, *args, **kwargs):
        reject(kind, pk)
        return Response({"kind": kind, "id": pk, "result": "rejected"})


class ToggleRepresentativeActiveView(APIView):
    permission_classes = [IsAdministrator]

    def post(self, request, pk, *args, **kwargs):
        new_status = toggle_representative_active(pk)
        return Response(ToggleActiveResultSerializer({"id": pk, "status": new_status}).data)
