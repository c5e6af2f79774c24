"""
Job lifecycle operations invoked by the API layer.

Each takes the caller's identity explicitly. Model methods enforce the state
machine; these functions add the role and ownership checks around them.
"""
import logging

from django.db import transaction
from rest_framework.exceptions import NotFound, ValidationError

from customers.identity import ADMIN
from eshift_core.concurrency import versioned_update
from eshift_core.exceptions import PreconditionFailed
from jobs.models import Job

logger = logging.getLogger(__name__)

EDITABLE_FIELDS = ('start_location', 'destination', 'job_date')


def get_job(job_id):
    try:
        return Job.objects.get(pk=job_id)
    except Job.DoesNotExist:
        raise NotFound(f"Job {job_id} not found.")


def get_owned_job(caller, job_id):
    """A job of the calling customer. Other customers' jobs are reported as missing."""
    customer_id = caller.require_customer()
    try:
        return Job.objects.get(pk=job_id, customer_id=customer_id)
    except Job.DoesNotExist:
        raise NotFound(f"Job {job_id} not found.")


def change_job_status(caller, job_id, new_status, version=None):
    """
    Administrator status change.

    Moving to the current status changes nothing. Completion requires every
    load of the job to be assigned. Completed and cancelled jobs cannot move.
    """
    caller.require_role(ADMIN)
    if new_status not in dict(Job.STATUS_CHOICES):
        raise ValidationError({'status': [f"'{new_status}' is not a valid job status."]})

    with transaction.atomic():
        job = get_job(job_id)
        if job.status == new_status:
            logger.debug(f"Job {job.pk} already {new_status}, nothing to change")
            return job

        if new_status == Job.COMPLETED:
            job.mark_completed(expected_version=version)
        elif new_status == Job.CANCELLED:
            job.mark_cancelled(expected_version=version)
        else:
            raise ValidationError({
                'status': [f"Job cannot be reopened as it is already '{job.get_status_display()}'."]
            })

    logger.info(f"Job {job.pk} moved to {job.status} by user {caller.user_id}")
    return job


def cancel_job(caller, job_id):
    """Customer cancellation of one of their own in-progress jobs."""
    job = get_owned_job(caller, job_id)
    if not job.is_in_progress:
        raise PreconditionFailed(
            f"Job cannot be cancelled as it is already '{job.get_status_display()}'."
        )
    job.mark_cancelled()
    logger.info(f"Job {job.pk} cancelled by customer {caller.customer_id}")
    return job


def edit_job_details(caller, job_id, changes, version=None):
    """
    Customer edit of locations and date on an in-progress job.

    ``version`` is the version the customer last saw; omitting it edits the
    current row.
    """
    job = get_owned_job(caller, job_id)
    if not job.is_in_progress:
        raise PreconditionFailed(
            f"Job cannot be edited as it is already '{job.get_status_display()}'."
        )

    unknown = set(changes) - set(EDITABLE_FIELDS)
    if unknown:
        raise ValidationError({field: ['This field cannot be edited.'] for field in sorted(unknown)})
    if not changes:
        return job

    expected = job.version if version is None else version
    # The status is part of the condition so a job finished concurrently is not edited.
    queryset = Job.objects.filter(status=Job.IN_PROGRESS)
    try:
        versioned_update(queryset, job.pk, expected, **changes)
    except NotFound:
        job = Job.objects.filter(pk=job.pk).first()
        if job is None:
            raise
        raise PreconditionFailed(
            f"Job cannot be edited as it is already '{job.get_status_display()}'."
        )

    job.refresh_from_db()
    logger.info(f"Job {job.pk} details edited by customer {caller.customer_id}: {sorted(changes)}")
    return job
