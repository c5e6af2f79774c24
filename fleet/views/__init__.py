from .resources import LorryViewSet, DriverViewSet, AssistantViewSet, ContainerViewSet
from .transport_unit import TransportUnitViewSet
