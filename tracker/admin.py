from django.contrib import admin

from .models import AppSetting, Client, Invoice, Project, Timesheet

# ---------------------------------------------------------------
# Admin lists every row, soft-deleted ones included (all_objects)
# ---------------------------------------------------------------


class TrackedAdmin(admin.ModelAdmin):
    readonly_fields = ("created_at", "updated_at")

    def get_queryset(self, request):
        qs = self.model.all_objects.get_queryset()
        ordering = self.get_ordering(request)
        if ordering:
            qs = qs.order_by(*ordering)
        return qs

    @admin.display(boolean=True, description="Deleted")
    def deleted(self, obj):
        return obj.is_deleted


class ClientAdmin(TrackedAdmin):
    list_display = ("name", "email", "hourly_rate", "updated_at", "deleted")
    search_fields = ("name", "email")


class ProjectAdmin(TrackedAdmin):
    list_display = ("name", "client", "status", "hourly_rate", "deadline", "deleted")
    list_filter = ("status", "flat_fee_invoice")
    search_fields = ("name", "client__name")


class TimesheetAdmin(TrackedAdmin):
    list_display = ("work_date", "project", "hours_worked", "hourly_rate", "deleted")
    list_filter = ("work_date",)
    search_fields = ("description", "project__name")


class InvoiceAdmin(TrackedAdmin):
    list_display = ("id", "project", "invoice_date", "amount_due", "date_paid", "deleted")
    list_filter = ("invoice_date", "date_paid")
    search_fields = ("project__name", "project__client__name")


class AppSettingAdmin(admin.ModelAdmin):
    list_display = ("key", "value", "data_type", "updated_at")
    list_filter = ("data_type",)
    search_fields = ("key", "description")


admin.site.register(Client, ClientAdmin)
admin.site.register(Project, ProjectAdmin)
admin.site.register(Timesheet, TimesheetAdmin)
admin.site.register(Invoice, InvoiceAdmin)
admin.site.register(AppSetting, AppSettingAdmin)
