from django.db.models import Count, Q

from jobs.models import Job


def job_status_counts():
    """Dashboard figures: all jobs and jobs per status."""
    return Job.objects.aggregate(
        total=Count('id'),
        in_progress=Count('id', filter=Q(status=Job.IN_PROGRESS)),
        completed=Count('id', filter=Q(status=Job.COMPLETED)),
        cancelled=Count('id', filter=Q(status=Job.CANCELLED)),
    )
