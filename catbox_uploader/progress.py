#!/usr/bin/env python3
"""
Upload progress tracking.

ProgressTracker counts the bytes of the request body as they go out, samples
throughput once per interval on a background thread and keeps a single
status line updated in place.
"""

import sys
import shutil
import threading
from typing import Optional, TextIO

from tqdm import tqdm

from .utils import get_visual_width
from .logging_utils import get_logger

logger = get_logger(__name__)

SAMPLE_INTERVAL = 1.0  # seconds
BITS_PER_MEGABIT = 1048576


class ProgressTracker:
    """Progress state and status line for a single upload."""

    MIN_BAR_SLOT = 6
    BAR_PADDING = 4  # " [" + "]" + one spare column

    def __init__(
        self,
        file_name: str,
        target_label: str,
        stream: Optional[TextIO] = None,
        interval: float = SAMPLE_INTERVAL,
        columns: Optional[int] = None,
    ):
        """
        Initialize the tracker.

        Args:
            file_name: Name shown in the status line
            target_label: Service shown in the status line, e.g. 'Catbox'
            stream: Output stream (default: stdout)
            interval: Seconds between throughput samples
            columns: Fixed terminal width; detected on every render if None
        """
        self.file_name = file_name
        self.target_label = target_label
        self.stream = stream if stream is not None else sys.stdout
        self.interval = interval
        self.columns = columns

        self.total_length = 0
        self.total_sent = 0
        self.window_sent = 0
        self.throughput = 0.0

        self._lock = threading.Lock()
        self._stop_event = threading.Event()
        self._sampler: Optional[threading.Thread] = None
        self._print_status = tqdm.status_printer(self.stream)
        self._line_open = False

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc, tb):
        self.stop()
        return False

    def start(self, total_length: int) -> None:
        """
        Reset the counters and start the throughput sampler.

        Args:
            total_length: Total encoded size of the request body in bytes
        """
        with self._lock:
            self.total_length = total_length
            self.total_sent = 0
            self.window_sent = 0
            self.throughput = 0.0
            self._render()

        self._stop_event.clear()
        self._sampler = threading.Thread(
            target=self._run, name="throughput-sampler", daemon=True
        )
        self._sampler.start()
        logger.debug(f"Progress tracking started, {total_length} bytes to send")

    def on_bytes(self, n: int) -> None:
        """Record n bytes sent on the wire."""
        with self._lock:
            self.total_sent += n
            self.window_sent += n
            self._render()

    def sample(self) -> float:
        """
        Convert the bytes sent since the last sample into Mbps and reset the window.

        Returns:
            The new throughput in megabits per second
        """
        with self._lock:
            self.throughput = self.window_sent * 8 / BITS_PER_MEGABIT / self.interval
            self.window_sent = 0
            return self.throughput

    def refresh(self) -> None:
        with self._lock:
            self._render()

    def stop(self) -> None:
        """Stop the sampler and end the status line. Safe to call twice."""
        self._stop_event.set()
        if self._sampler is not None:
            self._sampler.join()
            self._sampler = None

        with self._lock:
            if self._line_open:
                self.stream.write("\n")
                self.stream.flush()
                self._line_open = False

    def finish(self, message: str) -> None:
        """Print the final result line."""
        self.stop()
        print(message, file=self.stream)

    @property
    def percentage(self) -> float:
        if self.total_length <= 0:
            return 100.0
        return self.total_sent / self.total_length * 100

    def status_text(self) -> str:
        return (
            f'Uploading "{self.file_name}" to {self.target_label}... '
            f"{self.percentage:.2f}% ({self.throughput:.2f} Mbps)"
        )

    def bar_width(self, text_width: int) -> int:
        """
        Width of the bar for a status text of the given visual width.

        Never smaller than MIN_BAR_SLOT - BAR_PADDING.
        """
        columns = self.columns or shutil.get_terminal_size().columns
        return max(self.MIN_BAR_SLOT, columns - text_width) - self.BAR_PADDING

    def filled_width(self, bar_width: int) -> int:
        if self.total_length <= 0:
            return bar_width
        return min(bar_width, bar_width * self.total_sent // self.total_length)

    def render_line(self) -> str:
        text = self.status_text()
        width = self.bar_width(get_visual_width(text))
        filled = self.filled_width(width)
        return f"{text} [{'#' * filled}{' ' * (width - filled)}]"

    def _render(self) -> None:
        # Caller holds self._lock
        self._print_status(self.render_line())
        self._line_open = True

    def _run(self) -> None:
        while not self._stop_event.wait(self.interval):
            self.sample()
            self.refresh()
