from django.contrib import admin

from fleet.models import Lorry, Driver, Assistant, Container, TransportUnit


@admin.register(Lorry)
class LorryAdmin(admin.ModelAdmin):
    list_display = ('number_plate', 'model')
    search_fields = ('number_plate', 'model')


@admin.register(Driver)
class DriverAdmin(admin.ModelAdmin):
    list_display = ('name', 'license_number', 'phone')
    search_fields = ('name', 'license_number')


@admin.register(Assistant)
class AssistantAdmin(admin.ModelAdmin):
    list_display = ('name', 'phone')
    search_fields = ('name',)


@admin.register(Container)
class ContainerAdmin(admin.ModelAdmin):
    list_display = ('container_number',)
    search_fields = ('container_number',)


@admin.register(TransportUnit)
class TransportUnitAdmin(admin.ModelAdmin):
    list_display = ('unit_number', 'lorry', 'driver', 'assistant', 'container')
    list_filter = ('lorry', 'driver')
    search_fields = ('unit_number', 'lorry__number_plate', 'driver__name')
    raw_id_fields = ('lorry', 'driver', 'assistant', 'container')
    fieldsets = (
        ('Unit', {
            'fields': ('unit_number',)
        }),
        ('Crew', {
            'fields': ('driver', 'assistant')
        }),
        ('Equipment', {
            'fields': ('lorry', 'container')
        }),
    )
