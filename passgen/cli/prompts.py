"""
Interactive prompts for the check command
Input is read without echo and never printed back
"""

import sys
from getpass import getpass


class CheckPrompts:
    """Handles the interactive password prompt"""

    def __init__(self, reader=getpass, max_attempts: int = 3):
        self._reader = reader
        self.max_attempts = max_attempts

    def prompt_password(self):
        """
        Ask until a non-blank password is entered
        Returns None after max_attempts blank answers
        """
        for _ in range(self.max_attempts):
            value = self._reader("[PASSGEN] Password to check: ")
            if value.strip():
                return value
            print("         Please enter a password.", file=sys.stderr)
        return None
