import sys
from typing import Dict, Optional, TextIO

# Markers the handlers pass as a single part, translated before printing
MESSAGES: Dict[str, str] = {
    "failed": "Operation failed",
    "invalid": "Invalid input",
}


class ConsoleUI:
    """User-facing message sink for the file manager shell"""
    def __init__(self, stream: Optional[TextIO] = None):
        self.stream = stream or sys.stdout

    def report(self, *parts):
        """Print a message built from ``parts``

        A lone ``"failed"`` or ``"invalid"`` marker is translated through
        ``MESSAGES``; anything else is stringified and joined as-is.
        """
        if len(parts) == 1 and parts[0] in MESSAGES:
            text = MESSAGES[parts[0]]
        else:
            text = "".join(str(part) for part in parts)
        print(text, file=self.stream, flush=True)

    def show_greeting(self, username: str):
        self.report(f"Welcome to the File Manager, {username}!")

    def show_farewell(self, username: str):
        self.report(f"Thank you for using File Manager, {username}, goodbye!")

    def show_current_dir(self, current_dir: str):
        self.report(f"You are currently in {current_dir}")
