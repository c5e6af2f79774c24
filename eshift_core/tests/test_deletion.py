from django.apps import apps
from django.db import models
from django.test import TestCase

from eshift_core.deletion import (
    BLOCK,
    CASCADE,
    DELETION_POLICY,
    SET_NULL,
    delete_instance,
    rule_for,
)
from eshift_core.exceptions import Conflict
from eshift_core.tests.fixtures import (
    link,
    make_customer,
    make_job,
    make_load,
    make_product,
    make_transport_unit,
)
from customers.models import Customer
from fleet.models import Assistant, Container, Driver, Lorry, TransportUnit
from jobs.models import Job, Load, LoadProduct, Product


class DeletionPolicyTableTest(TestCase):

    def test_models_declare_the_policy_rules(self):
        expected = {CASCADE: models.CASCADE, BLOCK: models.PROTECT, SET_NULL: models.SET_NULL}
        for principal, dependent, fk, rule in DELETION_POLICY:
            field = apps.get_model(dependent)._meta.get_field(fk)
            self.assertIs(field.remote_field.on_delete, expected[rule], f"{dependent}.{fk}")
            self.assertEqual(field.related_model._meta.label, principal)

    def test_every_relation_between_core_models_is_covered(self):
        covered = {(dep, fk) for _p, dep, fk, _r in DELETION_POLICY}
        for label in ('jobs.Job', 'jobs.Load', 'jobs.Product', 'jobs.LoadProduct', 'fleet.TransportUnit'):
            for field in apps.get_model(label)._meta.get_fields():
                if field.many_to_one and field.concrete:
                    self.assertIn((label, field.name), covered)

    def test_lookup_helpers(self):
        self.assertEqual(rule_for('jobs.Load', 'transport_unit'), BLOCK)
        with self.assertRaises(LookupError):
            rule_for('jobs.Load', 'nope')


class CustomerDeletionTest(TestCase):

    def setUp(self):
        self.customer = make_customer()
        self.job = make_job(self.customer)
        self.load = make_load(self.job)

    def test_customer_without_products_cascades_to_jobs_and_loads(self):
        delete_instance(self.customer)
        self.assertFalse(Customer.objects.exists())
        self.assertFalse(Job.objects.exists())
        self.assertFalse(Load.objects.exists())

    def test_customer_with_products_is_blocked_and_nothing_is_removed(self):
        product = make_product(self.customer)
        link(self.load, product, quantity=2)

        with self.assertRaises(Conflict) as ctx:
            delete_instance(self.customer)

        self.assertIn({'model': 'jobs.Product', 'id': product.pk}, ctx.exception.blocking)
        self.assertEqual(Customer.objects.count(), 1)
        self.assertEqual(Job.objects.count(), 1)
        self.assertEqual(Load.objects.count(), 1)
        self.assertEqual(LoadProduct.objects.count(), 1)


class JobAndLoadDeletionTest(TestCase):

    def setUp(self):
        customer = make_customer()
        self.product = make_product(customer)
        self.job = make_job(customer)
        self.load = make_load(self.job)
        link(self.load, self.product, quantity=3)

    def test_job_delete_cascades_to_loads_and_links_but_keeps_products(self):
        counts = delete_instance(self.job)
        self.assertEqual(counts['jobs.Load'], 1)
        self.assertEqual(counts['jobs.LoadProduct'], 1)
        self.assertFalse(Load.objects.exists())
        self.assertTrue(Product.objects.filter(pk=self.product.pk).exists())

    def test_product_delete_is_blocked_while_linked(self):
        with self.assertRaises(Conflict):
            delete_instance(self.product)
        self.assertTrue(Product.objects.filter(pk=self.product.pk).exists())

        delete_instance(self.load)
        delete_instance(self.product)
        self.assertFalse(Product.objects.exists())


class FleetDeletionTest(TestCase):

    def setUp(self):
        self.unit = make_transport_unit('TU-07')

    def test_assistant_delete_nulls_the_reference(self):
        delete_instance(self.unit.assistant)
        self.unit.refresh_from_db()
        self.assertIsNone(self.unit.assistant_id)
        self.assertFalse(Assistant.objects.exists())

    def test_lorry_and_driver_are_blocked_while_referenced(self):
        for resource in (self.unit.lorry, self.unit.driver):
            with self.assertRaises(Conflict) as ctx:
                delete_instance(resource)
            self.assertEqual(ctx.exception.blocking, [{'model': 'fleet.TransportUnit', 'id': self.unit.pk}])
        self.assertTrue(Lorry.objects.exists())
        self.assertTrue(Driver.objects.exists())

    def test_transport_unit_is_blocked_while_loads_reference_it(self):
        load = make_load(make_job(make_customer()), status=Load.ASSIGNED, transport_unit=self.unit)
        with self.assertRaises(Conflict) as ctx:
            delete_instance(self.unit)
        self.assertEqual(ctx.exception.blocking, [{'model': 'jobs.Load', 'id': load.pk}])

        load.apply_transport_unit(None)
        load.save_versioned(['transport_unit', 'status'])
        delete_instance(self.unit)
        self.assertFalse(TransportUnit.objects.exists())
        # The lorry, driver and assistant outlive the unit.
        self.assertTrue(Lorry.objects.exists())

    def test_container_delete_cascades_to_unused_units(self):
        delete_instance(self.unit.container)
        self.assertFalse(TransportUnit.objects.exists())

    def test_container_delete_is_blocked_when_its_unit_carries_loads(self):
        make_load(make_job(make_customer()), status=Load.ASSIGNED, transport_unit=self.unit)
        with self.assertRaises(Conflict):
            delete_instance(self.unit.container)
        self.assertTrue(Container.objects.exists())
        self.assertTrue(TransportUnit.objects.exists())
