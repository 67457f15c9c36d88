"""PASSGEN - secure password and passphrase generator"""

__version__ = "1.0.0"
