"""
GCE Ops - Operation Handle

An OperationHandle tracks one in-flight Compute Engine operation:
where it runs (its scope), the latest status we saw for it, and what to
do once it succeeds.

Lifecycle: PENDING -> SUCCEEDED or PENDING -> FAILED. Nothing else.
A handle is waited on once and then thrown away; it is never retried.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Callable, Dict, List, Optional

from gce_ops.core.exceptions import HandleStateError, first_error_message
from gce_ops.operations.scope import Scope, resource_name

# Terminal operation status reported by the Compute API
DONE = 'DONE'


@dataclass
class OperationSnapshot:
    """
    Status of an operation as reported by one API response.

    Attributes:
        name: Provider-assigned operation id
        status: PENDING, RUNNING or DONE
        error: Structured error payload, set once the operation failed
        warnings: Advisory messages attached to the operation
        operation_type: e.g. 'insert', 'delete', 'createSnapshot'
        target_link: URL of the resource being changed
        http_error_status_code: Set by the API only for failed operations
    """
    name: str
    status: str
    error: Optional[Dict[str, Any]] = None
    warnings: List[str] = field(default_factory=list)
    operation_type: Optional[str] = None
    target_link: Optional[str] = None
    http_error_status_code: Optional[int] = None

    @classmethod
    def from_response(cls, response: Dict[str, Any]) -> 'OperationSnapshot':
        """Build a snapshot from a compute#operation resource."""
        warnings = [w.get('message', '') for w in response.get('warnings') or []]
        return cls(
            name=response['name'],
            status=response.get('status', 'PENDING'),
            error=response.get('error') or None,
            warnings=warnings,
            operation_type=response.get('operationType'),
            target_link=response.get('targetLink'),
            http_error_status_code=response.get('httpErrorStatusCode'),
        )

    @property
    def is_done(self) -> bool:
        return self.status == DONE

    @property
    def error_message(self) -> str:
        """First provider error message, or 'Unknown error'."""
        return first_error_message(self.error)

    def describe(self) -> str:
        """
        Short description for log lines.

        Example:
            'operation-123 (delete disk-1)'
        """
        if self.operation_type and self.target_link:
            return f"{self.name} ({self.operation_type} {resource_name(self.target_link)})"
        return self.name


class HandleState(Enum):
    PENDING = 'pending'
    SUCCEEDED = 'succeeded'
    FAILED = 'failed'


class OperationHandle:
    """
    One outstanding operation plus its post-success callback.

    Example:
        operation = compute.disks().delete(project=p, zone=z, disk=d).execute()
        handle = OperationHandle(ZoneScope(p, z), OperationSnapshot.from_response(operation))
    """

    def __init__(self, scope: Scope, snapshot: OperationSnapshot,
                 on_success: Optional[Callable[[], None]] = None):
        """
        Args:
            scope: Where the operation runs
            snapshot: Operation state returned by the mutating call
            on_success: Called with no arguments once the operation is DONE
                        without error. None for fire-and-forget deletes.
        """
        self.scope = scope
        self.snapshot = snapshot
        self.on_success = on_success
        self.state = HandleState.PENDING

    @property
    def operation_id(self) -> str:
        return self.snapshot.name

    @property
    def is_pending(self) -> bool:
        return self.state is HandleState.PENDING

    def mark(self, state: HandleState):
        """
        Move the handle to a terminal state.

        Raises:
            HandleStateError: if the handle already left PENDING
        """
        if not self.is_pending or state is HandleState.PENDING:
            raise HandleStateError(self.operation_id, self.state, state)
        self.state = state

    def __repr__(self):
        return (f"OperationHandle({self.scope}, {self.operation_id!r}, "
                f"state={self.state.value})")
