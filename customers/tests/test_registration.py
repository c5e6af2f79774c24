from django.contrib.auth import get_user_model
from django.test import TestCase
from rest_framework import status
from rest_framework.exceptions import ValidationError
from rest_framework.test import APIClient

from customers.identity import CUSTOMER
from customers.models import Customer
from customers.services.registration import provision_customer, register_customer


class RegisterCustomerTest(TestCase):

    def register(self, email='kamal@example.com'):
        return register_customer(
            email=email, password='s3cret-pass', name='Kamal Perera',
            phone='0771234567', address='5 Temple Road, Kandy',
        )

    def test_creates_user_group_membership_and_one_profile(self):
        customer = self.register()
        user = customer.user
        self.assertEqual(user.username, 'kamal@example.com')
        self.assertTrue(user.check_password('s3cret-pass'))
        self.assertTrue(user.groups.filter(name=CUSTOMER).exists())
        self.assertEqual(Customer.objects.filter(user=user).count(), 1)

    def test_duplicate_email_is_rejected(self):
        self.register()
        with self.assertRaises(ValidationError):
            self.register(email='KAMAL@example.com')
        self.assertEqual(get_user_model().objects.count(), 1)

    def test_profile_is_provisioned_only_once(self):
        customer = self.register()
        with self.assertRaises(ValidationError):
            provision_customer(customer.user, name='x', email='x@example.com', phone='1', address='y')


class RegisterAPITest(TestCase):

    def setUp(self):
        self.client = APIClient()

    def test_register_endpoint(self):
        """POST /api/customers/register/ should create the account and profile."""
        payload = {
            'email': 'nimali@example.com',
            'password': 'long-enough-1',
            'name': 'Nimali Silva',
            'phone': '+94 71 555 0000',
            'address': '9 Lake Drive, Colombo',
        }
        response = self.client.post('/api/customers/register/', payload, format='json')
        self.assertEqual(response.status_code, status.HTTP_201_CREATED)
        self.assertEqual(response.data['email'], 'nimali@example.com')
        self.assertNotIn('password', response.data)

    def test_register_validation_error_shape(self):
        response = self.client.post('/api/customers/register/', {'email': 'bad'}, format='json')
        self.assertEqual(response.status_code, status.HTTP_400_BAD_REQUEST)
        self.assertEqual(response.data['error']['code'], 'VALIDATION_ERROR')
        self.assertIn('password', response.data['error']['details'])
