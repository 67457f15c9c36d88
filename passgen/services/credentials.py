"""
Credential service - combines sampling, entropy and evaluation
Everything it needs arrives through an explicit GeneratorContext
"""

from dataclasses import dataclass
from typing import Iterable, Optional

from passgen.charsets import build_charset
from passgen.config import Settings
from passgen.logging_config import (
    log_passphrase_generated,
    log_password_generated,
    log_strength_checked,
)
from passgen.services.generator import (
    InvalidArgument,
    SamplingMode,
    generate_passphrase,
    generate_password,
)
from passgen.services.strength import (
    ASSUMED_ALPHABET_SIZE,
    Evaluation,
    StrengthBand,
    StrengthEvaluator,
    ZxcvbnEvaluator,
    classify_entropy,
    estimate_entropy,
    passphrase_entropy,
    password_entropy,
)
from passgen.services.telemetry import increment_counter
from passgen.services.wordlists import DEFAULT_WORDLIST_DIR, WordListRegistry


@dataclass
class GeneratorContext:
    """Loaded word lists and generation policy"""
    wordlists: WordListRegistry
    evaluator: StrengthEvaluator
    mode: SamplingMode = SamplingMode.UNBIASED
    check_alphabet_size: int = ASSUMED_ALPHABET_SIZE


@dataclass(frozen=True)
class GenerationResult:
    value: str
    entropy_bits: float
    band: StrengthBand
    pool_size: int
    evaluation: Optional[Evaluation] = None


@dataclass(frozen=True)
class CheckResult:
    entropy_bits: float
    band: StrengthBand
    evaluation: Evaluation


def build_generator_context(active_settings: Settings) -> GeneratorContext:
    """Load word lists and wire the evaluator from settings"""
    directory = active_settings.wordlist_dir or DEFAULT_WORDLIST_DIR
    return GeneratorContext(
        wordlists=WordListRegistry.load(active_settings.wordlist_names, directory),
        evaluator=ZxcvbnEvaluator(max_chars=active_settings.EVALUATOR_MAX_CHARS),
        mode=SamplingMode(active_settings.SAMPLING_MODE),
        check_alphabet_size=active_settings.CHECK_ALPHABET_SIZE,
    )


def create_password(
    ctx: GeneratorContext,
    length: int,
    lowercase: bool = True,
    uppercase: bool = True,
    digits: bool = True,
    symbols: bool = True,
) -> GenerationResult:
    """Generate a password from the selected character categories"""
    charset = build_charset(lowercase, uppercase, digits, symbols)
    if not charset:
        raise InvalidArgument("Please select at least one character type")

    value = generate_password(charset, length, ctx.mode)
    entropy = password_entropy(len(value), len(charset))
    log_password_generated(length, len(charset))
    increment_counter("passwords_generated")

    return GenerationResult(
        value=value,
        entropy_bits=entropy,
        band=classify_entropy(entropy),
        pool_size=len(charset),
        evaluation=ctx.evaluator.evaluate(value),
    )


def create_passphrase(
    ctx: GeneratorContext,
    languages: Iterable[str],
    word_count: int,
    separator: str,
) -> GenerationResult:
    """Generate a passphrase from the combined word lists"""
    words = ctx.wordlists.combine(languages)
    value = generate_passphrase(words, word_count, separator, ctx.mode)
    entropy = passphrase_entropy(word_count, len(words))
    log_passphrase_generated(word_count, len(words))
    increment_counter("passphrases_generated")

    return GenerationResult(
        value=value,
        entropy_bits=entropy,
        band=classify_entropy(entropy),
        pool_size=len(words),
        evaluation=ctx.evaluator.evaluate(value),
    )


def check_password(ctx: GeneratorContext, password: str) -> CheckResult:
    """Estimate and evaluate a user-supplied password"""
    if not password or not password.strip():
        raise InvalidArgument("Please enter a password.")

    entropy = estimate_entropy(password, ctx.check_alphabet_size)
    log_strength_checked(len(password))
    increment_counter("passwords_checked")

    return CheckResult(
        entropy_bits=entropy,
        band=classify_entropy(entropy),
        evaluation=ctx.evaluator.evaluate(password),
    )
