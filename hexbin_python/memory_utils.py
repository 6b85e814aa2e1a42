"""
Process memory reporting for the command-line tools.
"""

from typing import Optional

import psutil

BYTES_PER_MB = 1024 * 1024


def rss_mb(process: Optional[psutil.Process] = None) -> float:
    """Resident set size of a process (the current one by default) in MB"""
    process = process or psutil.Process()
    return process.memory_info().rss / BYTES_PER_MB


def format_mb(mb: float) -> str:
    """'512.0 MB' below a gigabyte, '2.0 GB' from there on; the sign is kept"""
    if abs(mb) >= 1024:
        return f"{mb / 1024:.1f} GB"
    return f"{mb:.1f} MB"


def report_memory(stage: str, baseline: Optional[float] = None) -> float:
    """Print the current RSS, with the change since baseline if given, and return it"""
    current = rss_mb()
    line = f"Memory at {stage}: {format_mb(current)}"
    if baseline is not None:
        delta = current - baseline
        line += f" ({'+' if delta > 0 else ''}{format_mb(delta)})"
    print(line)
    return current
