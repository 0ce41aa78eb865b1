"""
GCE Ops - Operation Registry

Collects the operations a command starts so they can all be waited on
when the command finishes. One registry per command invocation.

Operations are kept per scope kind (zone, region, global) because each
kind is polled through a different endpoint.
"""

from typing import Callable, Dict, List, Optional, Union

from gce_ops.core.exceptions import RegistryDrainedError
from gce_ops.operations.handle import OperationHandle, OperationSnapshot
from gce_ops.operations.scope import (
    GlobalScope,
    RegionScope,
    Scope,
    ZoneScope,
    scope_from_operation,
)

# Drain order
SCOPE_KINDS = ('zone', 'region', 'global')


class OperationRegistry:
    """
    Ordered record of the operations started by one command invocation.

    Example:
        registry = OperationRegistry()

        operation = compute.disks().delete(project=p, zone=z, disk='d1').execute()
        registry.add_zone_operation(p, z, operation)

        operation = compute.images().delete(project=p, image='i1').execute()
        registry.add_global_operation(p, operation, on_success=lambda: print("gone"))

        for handle in registry.drain():
            ...
    """

    def __init__(self):
        """Initialize empty registry."""
        self._partitions: Dict[str, List[OperationHandle]] = {kind: [] for kind in SCOPE_KINDS}
        self._drained = False

    def register(self, scope: Scope, operation: Union[dict, OperationSnapshot],
                 on_success: Optional[Callable[[], None]] = None) -> OperationHandle:
        """
        Record an operation returned by a mutating API call.

        Args:
            scope: Scope the operation was issued in
            operation: Operation resource (dict) or an OperationSnapshot
            on_success: Optional callback run once the operation is DONE

        Returns:
            The new OperationHandle

        Raises:
            RegistryDrainedError: if the registry was already drained
        """
        if self._drained:
            raise RegistryDrainedError("register operation")

        if not isinstance(operation, OperationSnapshot):
            operation = OperationSnapshot.from_response(operation)

        handle = OperationHandle(scope, operation, on_success)
        self._partitions[scope.kind].append(handle)
        return handle

    def add_zone_operation(self, project: str, zone: str, operation,
                           on_success: Optional[Callable[[], None]] = None) -> OperationHandle:
        """Record a zonal operation."""
        return self.register(ZoneScope(project, zone), operation, on_success)

    def add_region_operation(self, project: str, region: str, operation,
                             on_success: Optional[Callable[[], None]] = None) -> OperationHandle:
        """Record a regional operation."""
        return self.register(RegionScope(project, region), operation, on_success)

    def add_global_operation(self, project: str, operation,
                             on_success: Optional[Callable[[], None]] = None) -> OperationHandle:
        """Record a global operation."""
        return self.register(GlobalScope(project), operation, on_success)

    def add_operation(self, project: str, operation: dict,
                      on_success: Optional[Callable[[], None]] = None) -> OperationHandle:
        """
        Record an operation in the scope its own 'zone' / 'region' URL names.

        Operations with neither are global.
        """
        return self.register(scope_from_operation(project, operation), operation, on_success)

    def drain(self) -> List[OperationHandle]:
        """
        Hand over every recorded operation, zonal first, then regional, then global.

        Can only be called once; the registry accepts nothing afterwards.

        Raises:
            RegistryDrainedError: if called a second time
        """
        if self._drained:
            raise RegistryDrainedError("drain registry")
        self._drained = True

        handles = []
        for kind in SCOPE_KINDS:
            handles.extend(self._partitions[kind])
        return handles

    @property
    def drained(self) -> bool:
        return self._drained

    def __len__(self):
        return sum(len(handles) for handles in self._partitions.values())
