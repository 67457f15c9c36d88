"""
Entropy estimation, strength bands and the external evaluator adapter
"""

import math
from dataclasses import dataclass
from enum import Enum
from typing import Optional, Protocol

from zxcvbn import zxcvbn

# Printable ASCII without space; assumed for user-supplied passwords
ASSUMED_ALPHABET_SIZE = 94


class StrengthBand(str, Enum):
    """Ordered strength bands"""
    VERY_WEAK = "very_weak"
    WEAK = "weak"
    MODERATE = "moderate"
    STRONG = "strong"
    VERY_STRONG = "very_strong"
    MAXIMAL = "maximal"

    @property
    def label(self) -> str:
        return BAND_LABELS[self]


BAND_LABELS = {
    StrengthBand.VERY_WEAK: "Very Weak",
    StrengthBand.WEAK: "Weak",
    StrengthBand.MODERATE: "Moderate",
    StrengthBand.STRONG: "Strong",
    StrengthBand.VERY_STRONG: "Very Strong",
    StrengthBand.MAXIMAL: "Maximal",
}

# Upper bounds (exclusive) in bits; anything above the last is MAXIMAL
BAND_THRESHOLDS = (
    (28.0, StrengthBand.VERY_WEAK),
    (36.0, StrengthBand.WEAK),
    (60.0, StrengthBand.MODERATE),
    (80.0, StrengthBand.STRONG),
    (100.0, StrengthBand.VERY_STRONG),
)


def classify_entropy(bits: float) -> StrengthBand:
    """Map an entropy value to its band"""
    for threshold, band in BAND_THRESHOLDS:
        if bits < threshold:
            return band
    return StrengthBand.MAXIMAL


def password_entropy(length: int, charset_size: int) -> float:
    """length * log2(charset_size)"""
    if length <= 0 or charset_size <= 0:
        return 0.0
    return length * math.log2(charset_size)


def passphrase_entropy(word_count: int, list_size: int) -> float:
    """word_count * log2(list_size)"""
    return password_entropy(word_count, list_size)


def estimate_entropy(password: str, alphabet_size: int = ASSUMED_ALPHABET_SIZE) -> float:
    """
    Rough entropy of a user-supplied password
    Assumes a fixed alphabet rather than inspecting which classes are used
    """
    return password_entropy(len(password), alphabet_size)


@dataclass(frozen=True)
class CrackTimes:
    """Display strings for three attacker speeds"""
    online_throttled: str
    offline_slow_hash: str
    offline_fast_hash: str


@dataclass(frozen=True)
class Evaluation:
    """Result of an external strength evaluation"""
    score: int
    guesses_log10: float
    crack_times: CrackTimes
    warning: Optional[str] = None


class StrengthEvaluator(Protocol):
    def evaluate(self, password: str) -> Evaluation:
        ...


class ZxcvbnEvaluator:
    """Adapter over zxcvbn; its scoring internals are not ours"""

    def __init__(self, max_chars: int = 72):
        self.max_chars = max_chars

    def evaluate(self, password: str) -> Evaluation:
        result = zxcvbn(password[:self.max_chars])
        display = result["crack_times_display"]
        warning = result["feedback"].get("warning") or None
        return Evaluation(
            score=int(result["score"]),
            guesses_log10=float(result["guesses_log10"]),
            crack_times=CrackTimes(
                online_throttled=str(display["online_throttling_100_per_hour"]),
                offline_slow_hash=str(display["offline_slow_hashing_1e4_per_second"]),
                offline_fast_hash=str(display["offline_fast_hashing_1e10_per_second"]),
            ),
            warning=warning,
        )


def build_analysis_report(evaluation: Evaluation, password: Optional[str] = None) -> str:
    """Render a plain-text analysis report"""
    lines = []
    if password is not None:
        lines.append(f"Password: {password}")
    lines.append(f"Strength Score: {evaluation.score}/4")
    lines.append(f"Guesses (log10): {evaluation.guesses_log10:.1f}")
    lines.append("")
    lines.append("[ Crack Time Estimates ]")
    lines.append(f"Online (100 guesses/hour): {evaluation.crack_times.online_throttled}")
    lines.append(f"Offline (slow hash): {evaluation.crack_times.offline_slow_hash}")
    lines.append(f"Offline (fast hash): {evaluation.crack_times.offline_fast_hash}")

    if evaluation.warning:
        lines.append("")
        lines.append(f"Warning: {evaluation.warning}")

    return "\n".join(lines)
