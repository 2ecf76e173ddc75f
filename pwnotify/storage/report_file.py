"""Comma-delimited report file."""

from pathlib import Path

REPORT_HEADER = "Username,Days To Expiration,Result"


class ReportFile:
    """Line-oriented report file written as the run progresses."""

    def __init__(self, path: Path):
        """
        Initialize report file.

        Args:
            path: Location of the report; parent directories are created
        """
        self.path = path
        self.path.parent.mkdir(parents=True, exist_ok=True)

    def reset(self, header: str = REPORT_HEADER) -> None:
        """Discard any previous report and write the header line."""
        with open(self.path, "w", encoding="utf-8", newline="") as f:
            f.write(header + "\n")

    def append(self, line: str) -> None:
        """
        Append one line to the report.

        The file is reopened for every line so progress survives a crash.
        """
        with open(self.path, "a", encoding="utf-8", newline="") as f:
            f.write(line + "\n")
