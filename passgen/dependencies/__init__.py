# PASSGEN Dependencies
from passgen.dependencies.context import get_generator_context, reset_generator_context

__all__ = ["get_generator_context", "reset_generator_context"]
