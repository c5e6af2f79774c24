"""
Binding transport units to loads.

Changing a load's transport unit is the only thing that moves it between
pending and assigned. The reference and the derived status are written in one
conditional UPDATE, so no reader sees one without the other.
"""
import logging

from django.db import IntegrityError, transaction
from rest_framework.exceptions import NotFound

from customers.identity import ADMIN
from eshift_core.concurrency import retry_once_on_conflict
from eshift_core.exceptions import Conflict
from fleet.models import TransportUnit
from jobs.models import Load

logger = logging.getLogger(__name__)


def _get_load(load_id):
    try:
        return Load.objects.get(pk=load_id)
    except Load.DoesNotExist:
        raise NotFound(f"Load {load_id} not found.")


@retry_once_on_conflict
def assign_transport_unit(caller, load_id, transport_unit_id):
    """
    Point a load at a transport unit, or at none when ``transport_unit_id`` is None.

    Delivered and cancelled loads keep their status; only the reference moves.
    Repeating an assignment that is already in place changes nothing.

    Returns:
        The load as stored after the call.
    """
    caller.require_role(ADMIN)
    try:
        with transaction.atomic():
            load = _get_load(load_id)
            if transport_unit_id is not None and not TransportUnit.objects.filter(pk=transport_unit_id).exists():
                raise NotFound(f"Transport unit {transport_unit_id} not found.")

            before = (load.transport_unit_id, load.status)
            update_fields = load.apply_transport_unit(transport_unit_id)
            if (load.transport_unit_id, load.status) == before:
                logger.debug(f"Load {load.load_number} already on unit {transport_unit_id}, nothing to change")
                return load

            load.save_versioned(update_fields)
    except IntegrityError:
        # The unit was deleted between the existence check and commit.
        logger.warning(f"Transport unit {transport_unit_id} vanished while assigning load {load_id}")
        raise Conflict(f"Transport unit {transport_unit_id} was removed. Reload and try again.")

    change = 'unassigned' if transport_unit_id is None else f'assigned to unit {transport_unit_id}'
    logger.info(
        f"Load {load.load_number} {change} "
        f"by user {caller.user_id}; status {before[1]} -> {load.status}"
    )
    return load


def unassign_transport_unit(caller, load_id):
    return assign_transport_unit(caller, load_id, None)


def transport_unit_choices():
    """``[{"id": ..., "label": ...}]`` for picking a unit, ordered by unit number."""
    units = TransportUnit.objects.select_related('lorry', 'driver').order_by('unit_number')
    return [{'id': unit.pk, 'label': unit.label} for unit in units]
