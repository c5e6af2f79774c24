"""
Job request transaction: one Job, its Loads, their Products and LoadProduct
links, created together or not at all.
"""
import logging

from django.db import DatabaseError, transaction

from customers.identity import CUSTOMER
from eshift_core.exceptions import RetryableError, Unauthorized
from jobs.models import Job, Load, Product, LoadProduct
from jobs.serializers.job_request import JobRequestSerializer

logger = logging.getLogger(__name__)


def submit_job_request(caller, data):
    """
    Validate and materialize a job request for the calling customer.

    Args:
        caller: the submitting identity.
        data: raw request payload, see ``JobRequestSerializer``.

    Returns:
        The created Job.

    Raises:
        ValidationError: the payload is invalid; nothing is written.
        Unauthorized: the payload names a customer other than the caller.
        RetryableError: the store failed mid-way; everything was rolled back.
    """
    caller.require_role(CUSTOMER)
    serializer = JobRequestSerializer(data=data)
    serializer.is_valid(raise_exception=True)
    payload = serializer.validated_data

    if caller.customer_id is None or caller.customer_id != payload['customer_id']:
        logger.warning(
            f"User {caller.user_id} submitted a job request for customer {payload['customer_id']}"
        )
        raise Unauthorized("You can only request jobs for your own customer account.")

    try:
        with transaction.atomic():
            job = _create_job(payload)
    except DatabaseError:
        logger.exception(f"Job request for customer {caller.customer_id} failed and was rolled back")
        raise RetryableError(
            "An error occurred while saving your job request. Please try again. "
            "If the issue persists, contact support."
        )

    logger.info(
        f"Job {job.pk} requested by customer {caller.customer_id} "
        f"with {len(payload['loads'])} load(s)"
    )
    return job


def _create_job(payload):
    customer_id = payload['customer_id']
    job = Job.objects.create(
        customer_id=customer_id,
        start_location=payload['start_location'],
        destination=payload['destination'],
        job_date=payload['job_date'],
        status=Job.IN_PROGRESS,
    )
    for load_input in payload['loads']:
        load = Load.objects.create(
            job=job,
            description=load_input['description'],
            weight_kg=load_input['weight_kg'],
            pickup_date=load_input['pickup_date'],
            status=Load.PENDING,
        )
        for product_input in load_input['products']:
            product = Product.objects.create(
                customer_id=customer_id,
                name=product_input['name'],
                category=product_input['category'],
                description=product_input['description'],
                weight_kg=product_input['weight_kg'],
            )
            LoadProduct.objects.create(load=load, product=product, quantity=product_input['quantity'])
    return job
