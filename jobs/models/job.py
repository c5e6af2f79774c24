import datetime

from django.core.exceptions import ValidationError
from django.db import models

from customers.models import Customer
from eshift_core.concurrency import VersionedModel
from eshift_core.deletion import on_delete_for


class Job(VersionedModel):
    """
    A customer's relocation request, made of one or more loads.

    Lifecycle: in_progress -> completed | cancelled. Both targets are terminal.
    """
    IN_PROGRESS = 'in_progress'
    COMPLETED = 'completed'
    CANCELLED = 'cancelled'

    STATUS_CHOICES = [
        (IN_PROGRESS, 'In Progress'),
        (COMPLETED, 'Completed'),
        (CANCELLED, 'Cancelled'),
    ]
    TERMINAL_STATUSES = (COMPLETED, CANCELLED)

    customer = models.ForeignKey(
        Customer, on_delete=on_delete_for('jobs.Job', 'customer'), related_name='jobs'
    )
    start_location = models.CharField(max_length=100)
    destination = models.CharField(max_length=100)
    job_date = models.DateField(default=datetime.date.today)
    status = models.CharField(max_length=20, choices=STATUS_CHOICES, default=IN_PROGRESS)

    created_at = models.DateTimeField(auto_now_add=True)

    class Meta:
        ordering = ['-job_date', '-id']
        indexes = [
            models.Index(fields=['status'], name='jobs_job_status_idx'),
            models.Index(fields=['customer', 'status'], name='jobs_job_cust_status_idx'),
        ]

    def __str__(self):
        return f"Job #{self.pk} {self.start_location} -> {self.destination} ({self.status})"

    @property
    def is_in_progress(self):
        return self.status == self.IN_PROGRESS

    @property
    def is_terminal(self):
        return self.status in self.TERMINAL_STATUSES

    def loads_blocking_completion(self):
        """Loads that keep this job from being completed: every load must be 'assigned'."""
        from jobs.models.load import Load
        return self.loads.exclude(status=Load.ASSIGNED)

    def _require_in_progress(self, verb):
        if self.is_terminal:
            raise ValidationError(
                f"Job cannot be {verb} as it is already '{self.get_status_display()}'."
            )

    def mark_completed(self, expected_version=None):
        self._require_in_progress('completed')
        blocking = list(self.loads_blocking_completion().values_list('load_number', flat=True))
        if blocking:
            raise ValidationError({
                'status': [
                    "Cannot change job status to 'Completed' unless all associated loads are in "
                    f"'Assigned' status. Not assigned: {', '.join(blocking)}."
                ]
            })
        self.status = self.COMPLETED
        self.save_versioned(['status'], expected_version)

    def mark_cancelled(self, expected_version=None):
        self._require_in_progress('cancelled')
        self.status = self.CANCELLED
        self.save_versioned(['status'], expected_version)
