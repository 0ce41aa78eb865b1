"""GCE Ops - Compute Engine commands that wait for their operations.

Commands start long-running Compute Engine operations (delete disks,
resize disks, snapshot, start/stop instances, ...) and only finish once
every operation they started is done:
- Operations are waited on one at a time, in the order they were started
- Warnings are shown as soon as Compute Engine reports them
- A failed operation never stops the others from being waited on
- One failure is reported as is; several are reported together

Example usage:
    >>> from gce_ops.operations import OperationRegistry, OperationPoller, CompletionCoordinator
    >>> registry = OperationRegistry()
    >>> registry.add_zone_operation('my-project', 'us-central1-a', operation)
    >>> CompletionCoordinator(OperationPoller(client)).complete(registry)
"""

__version__ = "1.0.0"
