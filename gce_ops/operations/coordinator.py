"""
GCE Ops - Completion Coordinator

Waits for every operation a command started, at the end of the command.

Operations are waited on one at a time, in registration order.
A failed operation never stops the others from being waited on; all
failures are reported together once everything has been processed.
"""

from typing import List

from gce_ops.core.exceptions import AggregateOperationError
from gce_ops.operations.poller import PollOutcome
from gce_ops.operations.registry import OperationRegistry
from gce_ops.utils.logger import get_logger
from gce_ops.utils.progress import create_progress_tracker


class CompletionCoordinator:
    """
    Resolves every handle in a registry and reports one outcome.

    Example:
        coordinator = CompletionCoordinator(poller, token, logger)

        # 5 disks deleted, 1 failed:
        coordinator.complete(registry)
        # → waits on all 5
        # → raises the single OperationFailedError

        # 2 or more failed:
        # → raises AggregateOperationError listing each failure
    """

    def __init__(self, poller, token=None, logger=None, show_progress: bool = False):
        """
        Initialize coordinator.

        Args:
            poller: OperationPoller used to wait on each handle
            token: Optional CancellationToken
            logger: Optional logger
            show_progress: Show a progress bar while waiting
        """
        self.poller = poller
        self.token = token
        self.logger = logger or get_logger()
        self.show_progress = show_progress

    def _cancelled(self) -> bool:
        return self.token is not None and self.token.is_cancellation_requested()

    def complete(self, registry: OperationRegistry):
        """
        Wait for all registered operations and run their success callbacks.

        Args:
            registry: Registry of the finishing command (drained here)

        Raises:
            Exception: the single failure, if exactly one operation failed
            AggregateOperationError: if two or more operations failed
        """
        handles = registry.drain()
        failures: List[Exception] = []
        succeeded = 0

        if not handles:
            self.logger.debug("No operations to wait for")
            return

        self.logger.debug(f"Waiting for {len(handles)} operations")

        tracker = create_progress_tracker(
            total_steps=len(handles),
            desc="Waiting for operations",
            enabled=self.show_progress
        )

        with tracker:
            for index, handle in enumerate(handles):
                if self._cancelled():
                    self._log_unresolved(handles[index:])
                    break

                tracker.update_step(handle.operation_id)

                try:
                    outcome = self.poller.wait(handle, self.token)
                    if outcome is PollOutcome.CANCELLED:
                        self._log_unresolved(handles[index:])
                        break

                    if handle.on_success is not None:
                        handle.on_success()
                    succeeded += 1

                except Exception as e:
                    self.logger.debug(f"Operation {handle.operation_id} failed: {e}")
                    failures.append(e)

                tracker.advance()

        self.logger.debug(f"Operations: {succeeded}/{len(handles)} succeeded"
                          + (f", {len(failures)} failed" if failures else ""))

        raise_failures(failures)

    def _log_unresolved(self, handles):
        self.logger.debug(f"Cancelled; {len(handles)} operations left unresolved:")
        for handle in handles:
            self.logger.debug(f"  - {handle.snapshot.describe()} ({handle.scope})")


def raise_failures(failures: List[Exception]):
    """
    Report collected failures.

    0 failures: nothing. 1 failure: that error as it is.
    2 or more: AggregateOperationError with all of them, in order.
    """
    if len(failures) > 1:
        raise AggregateOperationError(failures)
    if failures:
        raise failures[0]
