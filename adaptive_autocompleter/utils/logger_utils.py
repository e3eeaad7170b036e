# logger_utils.py -  for logging messages and performance metrics, timestamps etc

import time
import os
from datetime import datetime

# Directory where log files go unless a path is given
LOG_DIR = "logs"

# Path to the default log file, can be overriden
DEFAULT_LOG_PATH = os.path.join(LOG_DIR, "autocompleter.log")


def _append(path, line):
    folder = os.path.dirname(path)
    if folder:
        os.makedirs(folder, exist_ok=True)
    with open(path, "a", encoding="utf-8") as f:
        f.write(line + "\n")


class Log:
    """Lightweight logger for writing messages and tracking metrics."""
    COLORS = {
        "DEBUG": "\033[90m",   # gray
        "INFO": "\033[94m",    # blue
        "WARNING": "\033[93m", # yellow
        "ERROR": "\033[91m",   # red
        "RESET": "\033[0m",
    }

    def __init__(self, path: str = None, use_color: bool = True, echo: bool = True):
        self.path = path or DEFAULT_LOG_PATH
        self.use_color = use_color
        self.echo = echo

    def write(self, level: str, msg: str):
        """
        Append a log message to the log file with a timestamp.
        Each entry is written as: [YYYY-MM-DD HH:MM:SS] LEVEL   | message
        """
        ts = datetime.now().strftime("%Y-%m-%d %H:%M:%S")
        line = f"[{ts}] {level:<7} | {msg}"
        _append(self.path, line)

        if not self.echo:
            return
        # print to console (color enabled etc)
        if self.use_color and level in self.COLORS:
            print(f"{self.COLORS[level]}{line}{self.COLORS['RESET']}")
        else:
            print(line)

    # Public logging methods
    def debug(self, msg: str):
        self.write("DEBUG", msg)

    def info(self, msg: str):
        self.write("INFO", msg)

    def warning(self, msg: str):
        self.write("WARNING", msg)

    def error(self, msg: str):
        self.write("ERROR", msg)

    @staticmethod
    def metric(tag, value, unit="", path=None):
        """
        Record a metric (like timing, counts, or performance stats).
        Prints to the console and also logs it to `path` (default log file).
        Example: [12:45:02] search latency: 0.123ms
        """
        ts = datetime.now().strftime("%H:%M:%S")
        line = f"[{ts}] {tag}: {value}{unit}"
        print(line)
        _append(path or DEFAULT_LOG_PATH, line)

    @staticmethod
    def time_block(label, path=None):
        """
        Helper for measuring execution time of a code block.
        To use:
            with Log.time_block("bench", path="logs/bench.log"):
                do_some_work()
        It automatically logs how long the block took.
        """
        return _Timer(label, path)


class _Timer:
    """Context manager used internally to measure time for a code block."""
    def __init__(self, label, path=None):
        self.label = label
        self.path = path
        self.start = time.perf_counter()
        self.elapsed = 0.0

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc, tb):
        """When exiting the 'with' block, calculate how long it took and record it as a metric. """
        self.elapsed = round(time.perf_counter() - self.start, 3)
        Log.metric(f"{self.label} done", self.elapsed, "s", path=self.path)
