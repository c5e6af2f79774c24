from django.contrib.auth import get_user_model
from django.test import TestCase

from eshift_core.tests.fixtures import make_customer, make_job, make_load, make_transport_unit
from jobs.models import Job, Load


class JobAdminTest(TestCase):
    """The Django admin must not move job or load status around the services."""

    def setUp(self):
        superuser = get_user_model().objects.create_superuser('root', 'root@eshift.test', 'pw-123456')
        self.client.force_login(superuser)
        self.job = make_job(make_customer())
        self.load = make_load(self.job)

    def test_job_change_form_ignores_status(self):
        data = {
            'customer': self.job.customer_id,
            'start_location': 'Colombo',
            'destination': 'Matara',
            'job_date': '2026-11-02',
            'status': Job.COMPLETED,
            'loads-TOTAL_FORMS': '1',
            'loads-INITIAL_FORMS': '1',
            'loads-MIN_NUM_FORMS': '0',
            'loads-MAX_NUM_FORMS': '1000',
            'loads-0-id': self.load.pk,
            'loads-0-job': self.job.pk,
            'loads-0-description': 'Living room furniture',
            'loads-0-weight_kg': '350.00',
            'loads-0-pickup_date': '2026-11-02',
            'loads-0-status': Load.ASSIGNED,
        }
        response = self.client.post(f'/admin/jobs/job/{self.job.pk}/change/', data)
        self.assertEqual(response.status_code, 302)

        self.job.refresh_from_db()
        self.load.refresh_from_db()
        self.assertEqual(self.job.destination, 'Matara')
        self.assertEqual(self.job.status, Job.IN_PROGRESS)
        self.assertEqual(self.load.status, Load.PENDING)

    def test_load_change_form_ignores_status_and_unit(self):
        unit = make_transport_unit()
        data = {
            'job': self.job.pk,
            'load_number': self.load.load_number,
            'description': 'Boxes',
            'weight_kg': '120.00',
            'pickup_date': '2026-11-02',
            'delivery_date': '',
            'status': Load.ASSIGNED,
            'transport_unit': unit.pk,
            'load_products-TOTAL_FORMS': '0',
            'load_products-INITIAL_FORMS': '0',
            'load_products-MIN_NUM_FORMS': '0',
            'load_products-MAX_NUM_FORMS': '1000',
        }
        response = self.client.post(f'/admin/jobs/load/{self.load.pk}/change/', data)
        self.assertEqual(response.status_code, 302)

        self.load.refresh_from_db()
        self.assertEqual(self.load.description, 'Boxes')
        self.assertEqual(self.load.status, Load.PENDING)
        self.assertIsNone(self.load.transport_unit_id)

    def test_status_and_version_are_not_form_fields(self):
        response = self.client.get(f'/admin/jobs/load/{self.load.pk}/change/')
        form = response.context['adminform'].form
        for name in ('status', 'transport_unit', 'version'):
            self.assertNotIn(name, form.fields)
