from .jobs import JobViewSet, MyJobViewSet
from .loads import LoadViewSet
from .products import ProductViewSet, MyProductViewSet
