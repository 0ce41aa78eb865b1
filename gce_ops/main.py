"""
GCE Ops - Main Entry Point

Runs one command invocation: logging, authentication, cancellation,
then the command itself.

Usage:
    from gce_ops.main import run_command
    from gce_ops.commands import DeleteDisksCommand

    exit_code = run_command(DeleteDisksCommand, args, config)
"""

from googleapiclient.errors import HttpError

from gce_ops.core.auth import AuthManager
from gce_ops.core.config import ToolConfig, resolve_project
from gce_ops.core.exceptions import ComputeOpsError
from gce_ops.operations import CancellationToken, install_interrupt_handler
from gce_ops.utils.logger import setup_logging

EXIT_OK = 0
EXIT_FAILED = 1
EXIT_CANCELLED = 130  # Standard exit code for SIGINT


def run_command(command_class, args, config: ToolConfig = None,
                compute=None, auth: AuthManager = None, emit=None) -> int:
    """
    Run a command and wait for all the operations it starts.

    Args:
        command_class: ComputeCommand subclass to run
        args: Parsed command-line arguments
        config: Optional ToolConfig
        compute: Compute API client (default: built from ADC credentials)
        auth: Optional AuthManager
        emit: Optional result emitter

    Returns:
        0 if everything succeeded, 1 if anything failed,
        130 if the user cancelled while operations were pending

    Example:
        >>> run_command(DeleteDisksCommand, args, ToolConfig(zone='us-central1-a'))
        0
    """
    config = config or ToolConfig()
    debug = config.log_level == 'DEBUG'

    logger = setup_logging(
        level=config.log_level,
        log_file=config.log_file,
        debug=debug
    )

    token = CancellationToken()
    restore_handler = install_interrupt_handler(token, logger)

    try:
        if compute is None:
            auth = auth or AuthManager(logger)
            compute = auth.get_compute()

        project = resolve_project(config, auth)
        logger.debug(f"Using project: {project}")

        command = command_class(
            compute,
            project,
            config,
            token=token,
            emit=emit,
            logger=logger
        )
        command.run(args)

    except ComputeOpsError as e:
        logger.error(str(e))
        return EXIT_FAILED

    except HttpError as e:
        logger.error(f"API request failed: {e}")
        if debug:
            logger.exception("Full traceback:")
        return EXIT_FAILED

    except Exception as e:
        # e.g. a transport error while polling, or a failing result callback
        logger.error(f"{type(e).__name__}: {e}")
        if debug:
            logger.exception("Full traceback:")
        return EXIT_FAILED

    finally:
        restore_handler()

    if token.is_cancellation_requested():
        logger.warning("Cancelled. Operations that were still running were not "
                       "waited on and may still complete.")
        return EXIT_CANCELLED

    return EXIT_OK
