from .assignment import AssignmentSerializer, AssignTransportUnitSerializer, TransportUnitChoiceSerializer
