"""
Request size limits used by REST handlers and the CLI.
"""

# Password generation.
MIN_PASSWORD_LENGTH = 1
MAX_PASSWORD_LENGTH = 256

# Passphrase generation.
MIN_WORD_COUNT = 1
MAX_WORD_COUNT = 64
MAX_SEPARATOR_CHARS = 16
MAX_LANGUAGES = 8

# Strength check input.
MAX_CHECK_PASSWORD_CHARS = 1024
