"""
GCE Ops - Resource Client

Thin wrapper around the Compute Engine API client that answers one
question for the poller: what is the current status of this operation?

Each scope kind has its own operations collection:
    zone    → zoneOperations().get(project, zone, operation)
    region  → regionOperations().get(project, region, operation)
    global  → globalOperations().get(project, operation)
"""

from gce_ops.operations.handle import OperationSnapshot
from gce_ops.operations.scope import GlobalScope, RegionScope, Scope, ZoneScope
from gce_ops.utils.logger import get_logger, log_api_call, log_api_response


def build_status_request(compute, scope: Scope, operation_id: str):
    """
    Build the operations.get request matching the operation's scope.

    There is no fallback between scopes: asking for a zonal operation
    with a global scope fails on the API side with 404.

    Args:
        compute: Compute Engine API client (googleapiclient discovery resource)
        scope: ZoneScope, RegionScope or GlobalScope
        operation_id: Operation name

    Returns:
        googleapiclient HttpRequest (call .execute() to run it)
    """
    if isinstance(scope, ZoneScope):
        return compute.zoneOperations().get(
            project=scope.project,
            zone=scope.zone,
            operation=operation_id
        )
    if isinstance(scope, RegionScope):
        return compute.regionOperations().get(
            project=scope.project,
            region=scope.region,
            operation=operation_id
        )
    if isinstance(scope, GlobalScope):
        return compute.globalOperations().get(
            project=scope.project,
            operation=operation_id
        )
    raise TypeError(f"Unknown operation scope: {scope!r}")


class ComputeResourceClient:
    """
    Reads operation status from the Compute Engine API.

    Usage:
        compute = AuthManager().get_compute()
        client = ComputeResourceClient(compute)
        snapshot = client.query_status(ZoneScope(project, 'us-central1-a'), 'operation-123')
    """

    def __init__(self, compute, logger=None):
        """
        Args:
            compute: Compute Engine API client
            logger: Optional logger for debug output
        """
        self.compute = compute
        self.logger = logger or get_logger()

    def query_status(self, scope: Scope, operation_id: str) -> OperationSnapshot:
        """
        Fetch the operation's current state. One API round trip.

        Raises:
            googleapiclient.errors.HttpError: if the API call fails
        """
        log_api_call(self.logger, f'{scope.kind}Operations.get',
                     scope=scope, operation=operation_id)
        response = build_status_request(self.compute, scope, operation_id).execute()
        log_api_response(self.logger, response)
        return OperationSnapshot.from_response(response)
