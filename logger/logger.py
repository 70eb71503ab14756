import json
import os
from datetime import datetime, timezone

class JSONLogger:
    def __init__(self, output_directory="logs/", log_file_prefix="tm_run_"):
        self.output_directory = output_directory
        self.log_file_prefix = log_file_prefix
        os.makedirs(self.output_directory, exist_ok=True)
        self.today = datetime.now(timezone.utc).strftime("%Y-%m-%d")
        self.current_log = self._get_log_filename()

    def _get_log_filename(self):
        filename = f"{self.log_file_prefix}{self.today}.jsonl"  # JSON lines format
        return os.path.join(self.output_directory, filename)

    def _log_to_file(self, filename, entries):
        path = os.path.join(self.output_directory, filename)
        with open(path, "a", encoding="utf-8") as f:
            for entry in entries:
                f.write(json.dumps(entry) + "\n")

    def log(self, entry: dict):
        """Log a single entry to the main run log."""
        with open(self.current_log, "a", encoding="utf-8") as f:
            f.write(json.dumps(entry) + "\n")

    def rotate(self):
        """Start a new main log file if the UTC date changed."""
        self.today = datetime.now(timezone.utc).strftime("%Y-%m-%d")
        self.current_log = self._get_log_filename()

    def log_accepted(self, entries: list):
        self._log_to_file(f"accepted_{self.today}.jsonl", entries)

    def log_rejected(self, entries: list):
        self._log_to_file(f"rejected_{self.today}.jsonl", entries)

    def log_unfinished(self, entries: list):
        """Runs stopped by the step cap before halting."""
        self._log_to_file(f"unfinished_{self.today}.jsonl", entries)

    def log_run(self, entry: dict):
        """Log a run result to the main log and to the file for its outcome."""
        self.log(entry)
        if entry.get("outcome") == "accept":
            self.log_accepted([entry])
        elif entry.get("outcome") == "reject":
            self.log_rejected([entry])
        else:
            self.log_unfinished([entry])
