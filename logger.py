# logger.py

import time

# perf_counter() value recorded when the current generation run started.
_run_start = None

def start_clock():
    """Marks the start of a generation run for the logger's elapsed-time prefix."""
    global _run_start
    _run_start = time.perf_counter()

def reset_clock():
    global _run_start
    _run_start = None

def elapsed_seconds():
    """Seconds since start_clock(), or None if no run has started."""
    if _run_start is None:
        return None
    return time.perf_counter() - _run_start

def log(message):
    """Prints a message with the elapsed run time if available."""
    elapsed = elapsed_seconds()
    if elapsed is not None:
        print(f"[+{elapsed:.3f}s] {message}")
    else:
        # For messages logged before the run starts.
        print(f"[Startup] {message}")
