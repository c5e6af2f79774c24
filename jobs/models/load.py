import datetime
import uuid
from decimal import Decimal

from django.core.exceptions import ValidationError
from django.core.validators import MinValueValidator, MaxValueValidator
from django.db import models

from eshift_core.concurrency import VersionedModel
from eshift_core.deletion import on_delete_for
from fleet.models import TransportUnit
from jobs.models.job import Job


def generate_load_number():
    return uuid.uuid4().hex[:8].upper()


class Load(VersionedModel):
    """
    One physical shipment within a job.

    pending <-> assigned is driven only by changing the transport unit
    reference (see ``apply_transport_unit``). picked_up, delivered and
    cancelled are set explicitly; delivered and cancelled are terminal.
    """
    PENDING = 'pending'
    ASSIGNED = 'assigned'
    PICKED_UP = 'picked_up'
    DELIVERED = 'delivered'
    CANCELLED = 'cancelled'

    STATUS_CHOICES = [
        (PENDING, 'Pending'),
        (ASSIGNED, 'Assigned'),
        (PICKED_UP, 'Picked Up'),
        (DELIVERED, 'Delivered'),
        (CANCELLED, 'Cancelled'),
    ]
    TERMINAL_STATUSES = (DELIVERED, CANCELLED)

    job = models.ForeignKey(Job, on_delete=on_delete_for('jobs.Load', 'job'), related_name='loads')
    transport_unit = models.ForeignKey(
        TransportUnit,
        on_delete=on_delete_for('jobs.Load', 'transport_unit'),
        related_name='loads',
        null=True,
        blank=True,
    )
    load_number = models.CharField(max_length=50, default=generate_load_number, db_index=True)
    description = models.CharField(max_length=250, blank=True)
    weight_kg = models.DecimalField(
        max_digits=7,
        decimal_places=2,
        validators=[MinValueValidator(Decimal('0.01')), MaxValueValidator(Decimal('10000.00'))],
        help_text="Total load weight in kilograms",
    )
    pickup_date = models.DateField(default=datetime.date.today)
    delivery_date = models.DateField(null=True, blank=True)
    status = models.CharField(max_length=20, choices=STATUS_CHOICES, default=PENDING)

    created_at = models.DateTimeField(auto_now_add=True)

    class Meta:
        ordering = ['-pickup_date', '-id']
        indexes = [
            models.Index(fields=['status'], name='jobs_load_status_idx'),
        ]

    def __str__(self):
        return f"{self.load_number} ({self.status})"

    @property
    def is_terminal(self):
        return self.status in self.TERMINAL_STATUSES

    def apply_transport_unit(self, transport_unit_id):
        """
        Point the load at a transport unit (or at none) and derive its status.

        A delivered or cancelled load keeps its status; only the reference
        changes. Nothing is saved here.

        Returns:
            The names of the fields to persist together.
        """
        self.transport_unit_id = transport_unit_id
        if not self.is_terminal:
            self.status = self.ASSIGNED if transport_unit_id is not None else self.PENDING
        return ['transport_unit', 'status']

    def mark_picked_up(self, expected_version=None):
        if self.status != self.ASSIGNED:
            raise ValidationError("Can only pick up a load that is assigned.")
        self.status = self.PICKED_UP
        self.save_versioned(['status'], expected_version)

    def mark_delivered(self, delivery_date=None, expected_version=None):
        if self.status != self.PICKED_UP:
            raise ValidationError("Can only mark delivered after pick up.")
        self.status = self.DELIVERED
        self.delivery_date = delivery_date or datetime.date.today()
        self.save_versioned(['status', 'delivery_date'], expected_version)

    def mark_cancelled(self, expected_version=None):
        if self.is_terminal:
            raise ValidationError(f"Load is already '{self.get_status_display()}'.")
        self.status = self.CANCELLED
        self.save_versioned(['status'], expected_version)
