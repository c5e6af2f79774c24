from django.core.exceptions import ValidationError as DjangoValidationError
from django.test import TestCase
from rest_framework import status
from rest_framework.exceptions import NotFound

from eshift_core.deletion import delete_instance
from eshift_core.exceptions import (
    Conflict,
    PreconditionFailed,
    RetryableError,
    Unauthorized,
    exception_handler,
)
from eshift_core.tests.fixtures import make_customer, make_product


class ExceptionHandlerTest(TestCase):
    """Every failure is rendered as {"error": {"code", "message", "details"?}}."""

    def handle(self, exc):
        return exception_handler(exc, {'view': None})

    def test_model_validation_error_with_fields(self):
        response = self.handle(DjangoValidationError({'status': ['Not allowed.']}))
        self.assertEqual(response.status_code, status.HTTP_400_BAD_REQUEST)
        self.assertEqual(response.data['error']['code'], 'VALIDATION_ERROR')
        self.assertEqual(response.data['error']['details'], {'status': ['Not allowed.']})

    def test_model_validation_error_without_fields(self):
        response = self.handle(DjangoValidationError("Job cannot be cancelled."))
        self.assertEqual(response.status_code, status.HTTP_400_BAD_REQUEST)
        self.assertEqual(
            response.data['error']['details'], {'non_field_errors': ['Job cannot be cancelled.']}
        )

    def test_precondition_failed(self):
        response = self.handle(PreconditionFailed("Job cannot be edited."))
        self.assertEqual(response.status_code, status.HTTP_412_PRECONDITION_FAILED)
        self.assertEqual(response.data['error'], {'code': 'PRECONDITION_FAILED', 'message': 'Job cannot be edited.'})

    def test_unauthorized_and_not_found(self):
        self.assertEqual(self.handle(Unauthorized()).status_code, status.HTTP_403_FORBIDDEN)
        self.assertEqual(self.handle(Unauthorized()).data['error']['code'], 'UNAUTHORIZED')
        self.assertEqual(self.handle(NotFound()).status_code, status.HTTP_404_NOT_FOUND)

    def test_retryable(self):
        response = self.handle(RetryableError())
        self.assertEqual(response.status_code, status.HTTP_503_SERVICE_UNAVAILABLE)
        self.assertEqual(response.data['error']['code'], 'RETRYABLE')

    def test_conflict_lists_blocking_records(self):
        customer = make_customer()
        product = make_product(customer)
        with self.assertRaises(Conflict) as ctx:
            delete_instance(customer)

        response = self.handle(ctx.exception)
        self.assertEqual(response.status_code, status.HTTP_409_CONFLICT)
        self.assertEqual(response.data['error']['code'], 'CONFLICT')
        self.assertEqual(
            response.data['error']['details']['blocking'],
            [{'model': 'jobs.Product', 'id': product.pk}],
        )

    def test_unexpected_error_hides_internals(self):
        with self.assertLogs('eshift_core.exceptions', level='ERROR'):
            response = self.handle(RuntimeError("connection string user:secret@db"))
        self.assertEqual(response.status_code, status.HTTP_500_INTERNAL_SERVER_ERROR)
        self.assertEqual(response.data['error']['code'], 'UNEXPECTED')
        self.assertNotIn('secret', response.data['error']['message'])
