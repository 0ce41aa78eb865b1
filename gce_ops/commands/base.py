"""
GCE Ops - Base Command

This module provides the base class for all commands.

A command runs in two phases:
1. process(): make the mutating API calls and register the operations
   they return (this never waits)
2. end_processing(): wait for every registered operation, emit the
   results of the successful ones and report failures together

One command instance = one invocation. The instance owns its registry,
so two invocations never share operations.
"""

from abc import ABC, abstractmethod
from typing import Callable

from gce_ops.core.client import ComputeResourceClient
from gce_ops.core.config import ToolConfig
from gce_ops.operations import (
    CancellationToken,
    CompletionCoordinator,
    OperationPoller,
    OperationRegistry,
)
from gce_ops.utils.logger import get_logger, log_api_call, log_api_response
from gce_ops.utils.output import ResultEmitter


class ComputeCommand(ABC):
    """
    Base class for all commands.

    Every command must:
    1. Inherit from this class
    2. Set `group`, `verb` and `help`
    3. Implement process() (start operations, register them)
    4. Optionally extend add_arguments()

    Example:
        command = DeleteDisksCommand(compute, project, config)
        command.run(args)
        # → disks.delete for each name
        # → waits for every delete operation
        # → raises OperationFailedError / AggregateOperationError on failure
    """

    group: str = ''
    verb: str = ''
    help: str = ''

    def __init__(self, compute, project: str, config: ToolConfig = None,
                 token: CancellationToken = None, emit=None, poller=None, logger=None):
        """
        Initialize command.

        Args:
            compute: Compute Engine API client
            project: GCP project ID
            config: Tool configuration
            token: Cancellation token of this invocation
            emit: Called with each resulting resource (default: ResultEmitter)
            poller: Optional OperationPoller (default: polls through `compute`)
            logger: Optional logger
        """
        self.compute = compute
        self.project = project
        self.config = config or ToolConfig()
        self.token = token or CancellationToken()
        self.logger = logger or get_logger()
        self.emit = emit or ResultEmitter(self.config.output_format)

        self.registry = OperationRegistry()
        self.poller = poller or OperationPoller(
            ComputeResourceClient(compute, self.logger),
            interval=self.config.poll_interval,
            logger=self.logger
        )
        self.coordinator = CompletionCoordinator(
            self.poller,
            self.token,
            self.logger,
            show_progress=self.config.show_progress
        )

    @property
    def name(self) -> str:
        """Human-readable name, e.g. 'disks delete'."""
        return f"{self.group} {self.verb}"

    @classmethod
    def add_arguments(cls, parser):
        """Add command-specific arguments. Resource names by default."""
        parser.add_argument(
            'names',
            metavar='NAME',
            nargs='+',
            help=f'Names of the {cls.group} to operate on.'
        )

    @abstractmethod
    def process(self, args):
        """
        Start the command's operations.

        Must register every operation it starts with self.registry
        and must not wait for them.
        """
        pass

    def end_processing(self):
        """Wait for every registered operation (see CompletionCoordinator)."""
        self.coordinator.complete(self.registry)

    def run(self, args):
        """
        Run the whole command.

        An error raised by process() (e.g. HttpError from a mutating call)
        stops the command before anything is waited on.
        """
        self.logger.debug(f"Running {self.name}")
        self.process(args)
        self.logger.debug(f"{self.name}: {len(self.registry)} operations started")
        self.end_processing()

    def _execute(self, request, method_name: str, **params):
        """Execute an API request with debug logging."""
        log_api_call(self.logger, method_name, **params)
        response = request.execute()
        log_api_response(self.logger, response)
        return response

    def _emit_fetched(self, fetch_request) -> Callable[[], None]:
        """
        Build an on_success callback that fetches a resource and emits it.

        Args:
            fetch_request: Zero-argument function returning the 'get' request
        """
        def _callback():
            self.emit(fetch_request().execute())
        return _callback
