from rest_framework import serializers


class MedicineQuantitySerializer(serializers.Serializer):
    medicine_id = serializers.IntegerField()
    medicine_name = serializers.CharField()
    quantity = serializers.IntegerField()


class ReportRowSerializer(serializers.Serializer):
    id = serializers.IntegerField()
    date = serializers.DateField()
    status = serializers.CharField()
    notes = serializers.CharField(allow_null=True)
    representative_id = serializers.IntegerField()
    representative_name = serializers.CharField()
    counterparty_id = serializers.IntegerField()
    counterparty_name = serializers.CharField()
    medicines = MedicineQuantitySerializer(many=True)
    total_quantity = serializers.IntegerField()
    medicine_summary = serializers.CharField()


class ReportPageSerializer(serializers.Serializer):
    rows = ReportRowSerializer(many=True)
    total_rows = serializers.IntegerField()
    total_pages = serializers.IntegerField()
    page = serializers.IntegerField()
    page_size = serializers.IntegerField()


class RepresentativePerformanceSerializer(serializers.Serializer):
    representative_id = serializers.IntegerField()
    name = serializers.CharField()
    visit_count = serializers.IntegerField()
    ordered_quantity = serializers.IntegerField()
