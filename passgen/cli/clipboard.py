"""
Clipboard access for generated values
"""

import sys

import pyperclip


def copy_to_clipboard(value: str) -> bool:
    """
    Copy value to the system clipboard
    Returns False when no clipboard mechanism is available
    """
    try:
        pyperclip.copy(value)
    except pyperclip.PyperclipException as e:
        print(f"[PASSGEN] Warning: Could not copy to clipboard: {type(e).__name__}", file=sys.stderr)
        return False
    print("[PASSGEN] Copied to clipboard.", file=sys.stderr)
    return True
