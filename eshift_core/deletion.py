"""
Referential-integrity policy for deletes.

``DELETION_POLICY`` is the single table of what happens to dependents when a
principal row is deleted. Model foreign keys take their ``on_delete`` from it
through :func:`on_delete_for`, and every API delete goes through
:func:`delete_instance`, which reports a blocked delete as a Conflict naming
the blocking rows. Django collects the whole cascade before deleting anything,
so a blocked delete removes nothing.
"""
import logging

from django.db import models, transaction
from django.db.models import ProtectedError, RestrictedError

from eshift_core.exceptions import Conflict, describe_objects

logger = logging.getLogger(__name__)

CASCADE = 'cascade'
BLOCK = 'block'
SET_NULL = 'set_null'

# principal, dependent, foreign key on dependent, rule
DELETION_POLICY = (
    ('customers.Customer', 'jobs.Job', 'customer', CASCADE),
    ('customers.Customer', 'jobs.Product', 'customer', BLOCK),
    ('jobs.Job', 'jobs.Load', 'job', CASCADE),
    ('jobs.Load', 'jobs.LoadProduct', 'load', CASCADE),
    ('jobs.Product', 'jobs.LoadProduct', 'product', BLOCK),
    ('fleet.TransportUnit', 'jobs.Load', 'transport_unit', BLOCK),
    ('fleet.Lorry', 'fleet.TransportUnit', 'lorry', BLOCK),
    ('fleet.Driver', 'fleet.TransportUnit', 'driver', BLOCK),
    ('fleet.Assistant', 'fleet.TransportUnit', 'assistant', SET_NULL),
    ('fleet.Container', 'fleet.TransportUnit', 'container', CASCADE),
)

ON_DELETE = {
    CASCADE: models.CASCADE,
    BLOCK: models.PROTECT,
    SET_NULL: models.SET_NULL,
}


def rule_for(dependent, field_name):
    for _principal, dep, fk, rule in DELETION_POLICY:
        if dep == dependent and fk == field_name:
            return rule
    raise LookupError(f"No deletion rule for {dependent}.{field_name}")


def on_delete_for(dependent, field_name):
    """The Django ``on_delete`` handler the policy assigns to ``dependent.field_name``."""
    return ON_DELETE[rule_for(dependent, field_name)]


def delete_instance(instance):
    """
    Delete ``instance`` and its cascade as one unit.

    Returns:
        Django's per-model deleted row counts.

    Raises:
        Conflict: a blocking rule applies; nothing was deleted.
    """
    label = instance._meta.label
    pk = instance.pk
    try:
        with transaction.atomic():
            _total, per_model = instance.delete()
    except ProtectedError as e:
        blocking = describe_objects(e.protected_objects)
    except RestrictedError as e:
        blocking = describe_objects(e.restricted_objects)
    else:
        logger.info(f"Deleted {label} {pk}: {per_model}")
        return per_model

    logger.warning(f"Delete of {label} {pk} blocked by {len(blocking)} dependent record(s)")
    raise Conflict(
        f"{instance._meta.verbose_name.capitalize()} {pk} cannot be deleted while other records reference it.",
        blocking=blocking,
    )
