"""
GCE Ops - Progress Tracking

Progress bar shown while a command waits for its operations.
Drawn on stderr with tqdm so results on stdout are not mixed in.
"""

import sys

from tqdm import tqdm


class ProgressTracker:
    """
    Track progress of a multi-step wait with a tqdm bar.

    Example:
        with ProgressTracker(total_steps=3, desc="Waiting for operations") as tracker:
            for handle in handles:
                tracker.update_step(handle.operation_id)
                # ... wait ...
                tracker.advance()
    """

    def __init__(self, total_steps: int, desc: str = "Operation"):
        """
        Args:
            total_steps: Total number of steps
            desc: Description shown in front of the bar
        """
        self.total_steps = total_steps
        self.current_step = 0
        self.desc = desc
        self.bar = None

    def start(self):
        """Start the progress bar."""
        self.current_step = 0
        self.bar = tqdm(
            total=self.total_steps,
            desc=self.desc,
            bar_format='{desc}: {percentage:3.0f}%|{bar}| {n_fmt}/{total_fmt} [{elapsed}]',
            ncols=80,
            file=sys.stderr,
            leave=False
        )

    def update_step(self, step_name: str):
        """Show the name of the current step."""
        if self.bar:
            self.bar.set_description(f"{self.desc} - {step_name}")

    def advance(self, steps: int = 1):
        """Advance the progress by one or more steps."""
        self.current_step += steps
        if self.bar:
            self.bar.update(steps)

    def finish(self):
        """Close the progress bar."""
        if self.bar:
            self.bar.close()
            self.bar = None

    def __enter__(self):
        self.start()
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        self.finish()
        return False


class SimpleProgressTracker:
    """
    Progress tracker that shows nothing.

    Used when progress display is turned off (the default).
    """

    def __init__(self, total_steps: int = 0, desc: str = "Operation"):
        pass

    def start(self):
        pass

    def update_step(self, step_name: str):
        pass

    def advance(self, steps: int = 1):
        pass

    def finish(self):
        pass

    def __enter__(self):
        self.start()
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        self.finish()
        return False


def create_progress_tracker(total_steps: int, desc: str = "Operation",
                            enabled: bool = True):
    """
    Factory function to create the appropriate progress tracker.

    Args:
        total_steps: Total number of steps
        desc: Description of operation
        enabled: Whether to show progress at all

    Returns:
        ProgressTracker or SimpleProgressTracker instance
    """
    if not enabled:
        return SimpleProgressTracker(total_steps, desc)
    return ProgressTracker(total_steps, desc)
