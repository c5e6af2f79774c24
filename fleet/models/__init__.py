# models/__init__.py
from .core import Lorry, Driver, Assistant, Container
from .transport_unit import TransportUnit
