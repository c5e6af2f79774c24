"""
Optimistic concurrency for rows edited through the core services.

Writers never blind-overwrite: every versioned write is a single conditional
UPDATE on ``(pk, version)``. Zero rows touched means the row is gone or was
changed since it was read.
"""
import functools
import logging

from django.db import models
from django.db.models import F
from django.utils import timezone
from rest_framework.exceptions import NotFound

from eshift_core.exceptions import Conflict

logger = logging.getLogger(__name__)


class StaleVersion(Conflict):
    default_detail = 'The record has been modified by another user. Reload it and try again.'
    default_code = 'stale_version'


def versioned_update(queryset, pk, expected_version, **changes):
    """
    Apply ``changes`` to row ``pk`` only if it still has ``expected_version``.

    Returns:
        The new version number.

    Raises:
        NotFound: the row no longer exists.
        StaleVersion: the row exists but its version moved on.
    """
    model = queryset.model
    if any(f.name == 'updated_at' for f in model._meta.concrete_fields):
        changes.setdefault('updated_at', timezone.now())

    updated = queryset.filter(pk=pk, version=expected_version).update(
        version=F('version') + 1, **changes
    )
    if updated:
        return expected_version + 1

    if not queryset.filter(pk=pk).exists():
        raise NotFound(f"{model._meta.verbose_name.capitalize()} {pk} not found.")
    logger.info(f"Stale write rejected for {model._meta.label} {pk} at version {expected_version}")
    raise StaleVersion()


def retry_once_on_conflict(func):
    """
    Re-run ``func`` once if it loses an optimistic-concurrency race.

    Only for read-modify-write of a single independent row where re-reading
    the row gives the second attempt fresh data.
    """
    @functools.wraps(func)
    def wrapper(*args, **kwargs):
        try:
            return func(*args, **kwargs)
        except StaleVersion:
            logger.info(f"{func.__name__} lost a concurrent update, retrying once")
            return func(*args, **kwargs)
    return wrapper


class VersionedModel(models.Model):
    """Abstract base adding a write counter and a modification timestamp."""

    version = models.PositiveIntegerField(default=1, editable=False)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        abstract = True

    def save_versioned(self, update_fields, expected_version=None):
        """
        Persist ``update_fields`` with a conditional UPDATE.

        ``expected_version`` defaults to the version this instance was read at.
        On success the instance carries the new version.
        """
        if expected_version is None:
            expected_version = self.version
        changes = {}
        for name in update_fields:
            field = self._meta.get_field(name)
            changes[field.attname] = getattr(self, field.attname)
        now = timezone.now()
        self.version = versioned_update(
            type(self)._default_manager.all(), self.pk, expected_version, updated_at=now, **changes
        )
        self.updated_at = now
        return self.version
