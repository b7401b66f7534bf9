from django.contrib import admin

from medrep.visits.models import FacilityOrderLine, FacilityVisit, OrderLine, Visit


class OrderLineInline(admin.TabularInline):
    model = OrderLine
    extra = 0


class FacilityOrderLineInline(admin.TabularInline):
    model = FacilityOrderLine
    extra = 0


@admin.register(Visit)
class VisitAdmin(admin.ModelAdmin):
    list_display = ["id", "submitted_by", "doctor", "date", "status"]
    list_filter = ["status"]
    search_fields = ["doctor__name", "submitted_by__name", "submitted_by__email"]
    inlines = [OrderLineInline]


@admin.register(FacilityVisit)
class FacilityVisitAdmin(admin.ModelAdmin):
    list_display = ["id", "submitted_by", "facility", "date", "status"]
    list_filter = ["status"]
    search_fields = ["facility__name", "submitted_by__name", "submitted_by__email"]
    inlines = [FacilityOrderLineInline]
