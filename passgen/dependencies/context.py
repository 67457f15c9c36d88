"""
Generator context dependency for API routes
The context is built once per process from settings
"""

from functools import lru_cache

from passgen.config import get_settings
from passgen.services.credentials import GeneratorContext, build_generator_context


@lru_cache()
def _cached_context() -> GeneratorContext:
    return build_generator_context(get_settings())


def get_generator_context() -> GeneratorContext:
    """
    Shared GeneratorContext
    Tests replace it through app.dependency_overrides
    """
    return _cached_context()


def reset_generator_context() -> None:
    """Drop the cached context so the next request reloads word lists"""
    _cached_context.cache_clear()
