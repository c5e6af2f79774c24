from django.contrib.auth import get_user_model
from django.test import RequestFactory, TestCase

from customers.identity import (
    ADMIN,
    ANONYMOUS,
    CUSTOMER,
    Caller,
    caller_for_user,
    caller_from_request,
)
from eshift_core.exceptions import Unauthorized
from eshift_core.tests.fixtures import make_admin, make_customer


class CallerTest(TestCase):

    def test_role_checks(self):
        caller = Caller(user_id='5', roles=frozenset({CUSTOMER}), customer_id=3)
        self.assertTrue(caller.is_customer)
        self.assertFalse(caller.is_admin)
        self.assertEqual(caller.require_customer(), 3)
        with self.assertRaises(Unauthorized):
            caller.require_role(ADMIN)

    def test_customer_role_without_profile_is_refused(self):
        caller = Caller(user_id='5', roles=frozenset({CUSTOMER}))
        with self.assertRaises(Unauthorized):
            caller.require_customer()

    def test_resolves_roles_and_customer_from_user(self):
        customer = make_customer()
        caller = caller_for_user(customer.user)
        self.assertEqual(caller.roles, frozenset({CUSTOMER}))
        self.assertEqual(caller.customer_id, customer.pk)
        self.assertEqual(caller.user_id, str(customer.user_id))

    def test_admin_group_and_superuser_carry_admin(self):
        self.assertTrue(caller_for_user(make_admin()).is_admin)
        superuser = get_user_model().objects.create_superuser('root', 'root@eshift.test', 'pw-123456')
        caller = caller_for_user(superuser)
        self.assertTrue(caller.is_admin)
        self.assertIsNone(caller.customer_id)

    def test_anonymous_request(self):
        request = RequestFactory().get('/')
        self.assertEqual(caller_from_request(request), ANONYMOUS)

    def test_caller_is_resolved_once_per_request(self):
        request = RequestFactory().get('/')
        request.user = make_admin()
        first = caller_from_request(request)
        request.user = None
        self.assertIs(caller_from_request(request), first)
