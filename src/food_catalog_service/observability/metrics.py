"""Custom metrics for the food catalog service."""

from opentelemetry import metrics

from food_catalog_service.observability.config import SERVICE_NAME

meter = metrics.get_meter(SERVICE_NAME)

food_mutation_counter = meter.create_counter(
    name="food_mutations_total",
    description="Total number of applied food mutations by operation",
    unit="1",
)

catalog_error_counter = meter.create_counter(
    name="catalog_errors_total",
    description="Total number of rejected catalog requests by error type",
    unit="1",
)

query_result_histogram = meter.create_histogram(
    name="catalog_query_results",
    description="Number of records returned by catalog list queries",
    unit="1",
)


def record_food_mutation(operation: str) -> None:
    """Record an applied food mutation.

    Args:
        operation: The mutation performed ("create", "update", "delete")
    """
    food_mutation_counter.add(1, {"operation": operation})


def record_catalog_error(error_type: str) -> None:
    """Record a rejected catalog request.

    Args:
        error_type: Class name of the raised catalog error
    """
    catalog_error_counter.add(1, {"error_type": error_type})


def record_query_results(collection: str, result_count: int) -> None:
    """Record the size of a list query result.

    Args:
        collection: The collection that was queried ("foods", "restaurants")
        result_count: Number of records returned
    """
    query_result_histogram.record(result_count, {"collection": collection})
