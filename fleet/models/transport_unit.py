from django.db import models

from eshift_core.deletion import on_delete_for
from fleet.models.core import Assistant, Container, Driver, Lorry


class TransportUnit(models.Model):
    """
    One lorry, one driver, an optional assistant and one container, assignable
    to loads as a bundle.

    Loads reference a unit without being owned by it: a unit cannot be deleted
    while any load still points at it.
    """
    unit_number = models.CharField(max_length=50)
    lorry = models.ForeignKey(
        Lorry, on_delete=on_delete_for('fleet.TransportUnit', 'lorry'), related_name='transport_units'
    )
    driver = models.ForeignKey(
        Driver, on_delete=on_delete_for('fleet.TransportUnit', 'driver'), related_name='transport_units'
    )
    assistant = models.ForeignKey(
        Assistant,
        on_delete=on_delete_for('fleet.TransportUnit', 'assistant'),
        related_name='transport_units',
        null=True,
        blank=True,
    )
    container = models.ForeignKey(
        Container, on_delete=on_delete_for('fleet.TransportUnit', 'container'), related_name='transport_units'
    )

    def __str__(self):
        return self.unit_number

    @property
    def label(self):
        """Dropdown text used when picking a unit for a load."""
        return f"Unit: {self.unit_number} | Lorry: {self.lorry.number_plate}, Driver: {self.driver.name}"

    class Meta:
        ordering = ['unit_number']
