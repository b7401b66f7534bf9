from django_tables2 import columns, tables


class VisitReportTable(tables.Table):
    date = columns.DateColumn(verbose_name="Date", format="Y-m-d")
    representative_name = columns.Column(verbose_name="Representative")
    counterparty_name = columns.Column(verbose_name="Doctor")
    status = columns.Column(verbose_name="Status")
    medicines = columns.Column(verbose_name="Medicines", empty_values=())
    total_quantity = columns.Column(verbose_name="Total Quantity")
    notes = columns.Column(verbose_name="Notes", default="")

    class Meta:
        empty_text = "No visits match these filters."
        orderable = False

    def render_medicines(self, record):
        return record.medicine_summary

    def value_medicines(self, record):
        # exports carry every line, not the summary
        return ", ".join(f"{m.medicine_name} ({m.quantity})" for m in record.medicines)

    def render_status(self, value):
        return value.title()


class FacilityVisitReportTable(VisitReportTable):
    counterparty_name = columns.Column(verbose_name="Facility")
