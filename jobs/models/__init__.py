# models/__init__.py
from .job import Job
from .load import Load, generate_load_number
from .product import Product, LoadProduct
