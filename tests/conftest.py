"""
Pytest fixtures for PASSGEN tests
"""

import os
import pytest
from typing import AsyncGenerator

# Set test environment before imports
os.environ.setdefault("RATE_LIMIT_BURST", "1000")
os.environ.setdefault("RATE_LIMIT_PER_MINUTE", "6000")
os.environ.setdefault("SAMPLING_MODE", "unbiased")

from httpx import AsyncClient, ASGITransport
from passgen.main import app
from passgen.dependencies.context import get_generator_context
from passgen.middleware.rate_limit import rate_limiter
from passgen.services.credentials import GeneratorContext
from passgen.services.strength import CrackTimes, Evaluation
from passgen.services.telemetry import reset_counters
from passgen.services.wordlists import LoadResult, WordListRegistry

ENGLISH_WORDS = ("alpha", "bravo", "charlie", "delta", "echo", "foxtrot", "golf", "hotel")
GERMAN_WORDS = ("apfel", "baum", "haus")


class StubEvaluator:
    """Stands in for zxcvbn and records what it was asked to evaluate"""

    def __init__(self, warning=None):
        self.warning = warning
        self.seen = []

    def evaluate(self, password):
        self.seen.append(password)
        return Evaluation(
            score=3,
            guesses_log10=12.5,
            crack_times=CrackTimes(
                online_throttled="centuries",
                offline_slow_hash="3 years",
                offline_fast_hash="less than a second",
            ),
            warning=self.warning,
        )


@pytest.fixture
def registry() -> WordListRegistry:
    """Two working lists and one that failed to load."""
    return WordListRegistry([
        LoadResult(name="english", words=ENGLISH_WORDS, source="test:english"),
        LoadResult(name="german", words=GERMAN_WORDS, source="test:german"),
        LoadResult(name="klingon", error="klingon.txt contains no words"),
    ])


@pytest.fixture
def evaluator() -> StubEvaluator:
    return StubEvaluator()


@pytest.fixture
def ctx(registry, evaluator) -> GeneratorContext:
    return GeneratorContext(wordlists=registry, evaluator=evaluator)


@pytest.fixture(autouse=True)
def clean_state():
    reset_counters()
    rate_limiter.reset()
    yield
    app.dependency_overrides.clear()


@pytest.fixture
async def client(ctx) -> AsyncGenerator[AsyncClient, None]:
    """Async HTTP client for testing endpoints."""
    app.dependency_overrides[get_generator_context] = lambda: ctx
    async with AsyncClient(
        transport=ASGITransport(app=app),
        base_url="http://test"
    ) as ac:
        yield ac
