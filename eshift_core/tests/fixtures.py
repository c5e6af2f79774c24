"""
Object builders shared by the test suites of every app.
"""
import datetime
from decimal import Decimal

from django.contrib.auth import get_user_model
from django.contrib.auth.models import Group

from customers.identity import ADMIN, CUSTOMER, Caller
from customers.models import Customer
from fleet.models import Lorry, Driver, Assistant, Container, TransportUnit
from jobs.models import Job, Load, Product, LoadProduct

User = get_user_model()


def make_admin(username='admin@eshift.test'):
    user = User.objects.create_user(username=username, email=username, password='admin-pass-123')
    group, _ = Group.objects.get_or_create(name=ADMIN)
    user.groups.add(group)
    return user


def make_customer(email='jane@example.com', name='Jane Doe'):
    user = User.objects.create_user(username=email, email=email, password='customer-pass-123')
    group, _ = Group.objects.get_or_create(name=CUSTOMER)
    user.groups.add(group)
    return Customer.objects.create(
        user=user, name=name, email=email, phone='+94 77 123 4567', address='12 Galle Road, Colombo'
    )


def admin_caller(user_id='1'):
    return Caller(user_id=user_id, roles=frozenset({ADMIN}))


def customer_caller(customer):
    return Caller(
        user_id=str(customer.user_id), roles=frozenset({CUSTOMER}), customer_id=customer.pk
    )


def make_transport_unit(unit_number='TU-01', with_assistant=True):
    lorry = Lorry.objects.create(number_plate=f'WP-{unit_number}', model='Isuzu NPR')
    driver = Driver.objects.create(name=f'Driver {unit_number}', license_number=f'B{unit_number}')
    assistant = Assistant.objects.create(name=f'Helper {unit_number}') if with_assistant else None
    container = Container.objects.create(container_number=f'C-{unit_number}')
    return TransportUnit.objects.create(
        unit_number=unit_number, lorry=lorry, driver=driver, assistant=assistant, container=container
    )


def make_job(customer, status=Job.IN_PROGRESS, **kwargs):
    defaults = {
        'start_location': 'Colombo',
        'destination': 'Kandy',
        'job_date': datetime.date(2026, 11, 2),
    }
    defaults.update(kwargs)
    return Job.objects.create(customer=customer, status=status, **defaults)


def make_load(job, status=Load.PENDING, transport_unit=None, **kwargs):
    defaults = {
        'description': 'Living room furniture',
        'weight_kg': Decimal('350.00'),
        'pickup_date': datetime.date(2026, 11, 2),
    }
    defaults.update(kwargs)
    return Load.objects.create(job=job, status=status, transport_unit=transport_unit, **defaults)


def make_product(customer, name='Sofa', **kwargs):
    defaults = {'category': 'Furniture', 'weight_kg': Decimal('45.50')}
    defaults.update(kwargs)
    return Product.objects.create(customer=customer, name=name, **defaults)


def link(load, product, quantity=1):
    return LoadProduct.objects.create(load=load, product=product, quantity=quantity)
