"""
GCE Ops - Operations Module

Tracks long-running Compute Engine operations and waits for them to finish.

Usage:
    from gce_ops.operations import (
        OperationRegistry,
        OperationPoller,
        CompletionCoordinator,
        CancellationToken
    )

    registry = OperationRegistry()
    registry.add_zone_operation(project, zone, operation,
                                on_success=lambda: print("created"))

    poller = OperationPoller(client)
    CompletionCoordinator(poller, CancellationToken()).complete(registry)
"""

from gce_ops.operations.scope import (
    Scope,
    ZoneScope,
    RegionScope,
    GlobalScope,
    scope_from_operation,
)
from gce_ops.operations.handle import DONE, HandleState, OperationHandle, OperationSnapshot
from gce_ops.operations.cancellation import CancellationToken, install_interrupt_handler
from gce_ops.operations.poller import OperationPoller, PollOutcome
from gce_ops.operations.registry import OperationRegistry
from gce_ops.operations.coordinator import CompletionCoordinator, raise_failures

__all__ = [
    # Scopes
    'Scope',
    'ZoneScope',
    'RegionScope',
    'GlobalScope',
    'scope_from_operation',

    # Handles
    'DONE',
    'HandleState',
    'OperationHandle',
    'OperationSnapshot',

    # Waiting
    'CancellationToken',
    'install_interrupt_handler',
    'OperationPoller',
    'PollOutcome',
    'OperationRegistry',
    'CompletionCoordinator',
    'raise_failures',
]
