from django.contrib import admin

from jobs.models import Job, Load, Product, LoadProduct


class LoadInline(admin.TabularInline):
    model = Load
    extra = 0
    fields = ('load_number', 'description', 'weight_kg', 'pickup_date', 'status', 'transport_unit')
    # Status and unit change only through the job and assignment services.
    readonly_fields = ('load_number', 'status', 'transport_unit')


class LoadProductInline(admin.TabularInline):
    model = LoadProduct
    extra = 0


@admin.register(Job)
class JobAdmin(admin.ModelAdmin):
    list_display = ('id', 'customer', 'start_location', 'destination', 'job_date', 'status')
    list_filter = ('status', 'job_date')
    search_fields = ('start_location', 'destination', 'customer__name')
    readonly_fields = ('status', 'version', 'created_at', 'updated_at')
    inlines = [LoadInline]


@admin.register(Load)
class LoadAdmin(admin.ModelAdmin):
    list_display = ('load_number', 'job', 'status', 'transport_unit', 'weight_kg', 'pickup_date', 'delivery_date')
    list_filter = ('status',)
    search_fields = ('load_number', 'description')
    readonly_fields = ('status', 'transport_unit', 'version', 'created_at', 'updated_at')
    inlines = [LoadProductInline]


@admin.register(Product)
class ProductAdmin(admin.ModelAdmin):
    list_display = ('name', 'customer', 'category', 'weight_kg', 'is_valid')
    list_filter = ('is_valid', 'category')
    search_fields = ('name', 'description', 'customer__name')


@admin.register(LoadProduct)
class LoadProductAdmin(admin.ModelAdmin):
    list_display = ('load', 'product', 'quantity')
    raw_id_fields = ('load', 'product')
