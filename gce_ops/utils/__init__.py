"""Utils package."""

from gce_ops.utils.logger import setup_logging, get_logger
from gce_ops.utils.progress import ProgressTracker, SimpleProgressTracker, create_progress_tracker
from gce_ops.utils.output import OutputFormatter, ResultEmitter

__all__ = [
    'setup_logging',
    'get_logger',
    'ProgressTracker',
    'SimpleProgressTracker',
    'create_progress_tracker',
    'OutputFormatter',
    'ResultEmitter',
]
