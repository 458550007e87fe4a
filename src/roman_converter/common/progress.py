"""Console progress reporting for long conversions.

Batch files and documents can hold thousands of entries, so the console tool
shows a single self-updating line while it works through them.
"""


class ProgressPrinter:
    """Single-line progress counter for console output.

    Updates in place with carriage returns. Pass enabled=False to silence it,
    e.g. when output is redirected or in tests.

    Example:
        >>> progress = ProgressPrinter("Converting numerals", 3)
        >>> for i in range(3):
        ...     progress.update(i + 1)
        >>> progress.done()
        Converting numerals...Done!
    """

    def __init__(self, task_name: str, total: int, enabled: bool = True):
        self.task_name = task_name
        self.total = total
        self.enabled = enabled

    def update(self, current: int) -> None:
        """Show "Task...current/total" on the current line.

        Args:
            current: Number of items handled so far (1-based)
        """
        if self.enabled:
            print(f"{self.task_name}...{current}/{self.total}", end='\r', flush=True)

    def done(self) -> None:
        if self.enabled:
            print(f"{self.task_name}...Done!    ")  # spaces overwrite the counter
