# PASSGEN Business Logic Services
from passgen.services.generator import InvalidArgument, SamplingMode, generate_password, generate_passphrase
from passgen.services.strength import StrengthBand, classify_entropy
from passgen.services.wordlists import WordListRegistry

__all__ = [
    "InvalidArgument", "SamplingMode", "generate_password", "generate_passphrase",
    "StrengthBand", "classify_entropy",
    "WordListRegistry",
]
