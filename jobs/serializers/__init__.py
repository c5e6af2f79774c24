from .load import LoadProductSerializer, LoadSerializer, LoadDetailSerializer, LoadDeliverySerializer
from .job import (
    JobSerializer,
    JobDetailSerializer,
    JobStatusSerializer,
    JobEditSerializer,
    JobStatsSerializer,
)
from .product import ProductSerializer, MyProductSerializer
from .job_request import ProductInputSerializer, LoadInputSerializer, JobRequestSerializer
