from django.conf import settings
from rest_framework.pagination import PageNumberPagination


class JobPagination(PageNumberPagination):
    page_size = settings.JOB_PAGE_SIZE
    page_size_query_param = 'page_size'
    max_page_size = 100
