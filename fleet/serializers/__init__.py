from .resources import (
    LorrySerializer,
    DriverSerializer,
    AssistantSerializer,
    ContainerSerializer,
)
from .transport_unit import TransportUnitSerializer, TransportUnitDetailSerializer
