from django.contrib import admin

from medrep.catalog.models import Doctor, Facility, Medicine


@admin.register(Doctor)
class DoctorAdmin(admin.ModelAdmin):
    list_display = ["name", "specialization", "hospital", "is_verified", "added_by"]
    list_filter = ["is_verified", "specialization"]
    search_fields = ["name", "hospital"]


@admin.register(Facility)
class FacilityAdmin(admin.ModelAdmin):
    list_display = ["name", "area"]
    search_fields = ["name", "area"]


@admin.register(Medicine)
class MedicineAdmin(admin.ModelAdmin):
    list_display = ["name", "category", "type"]
    list_filter = ["category", "type"]
    search_fields = ["name"]
