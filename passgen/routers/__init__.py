# PASSGEN API Routers
from passgen.routers import health, generate, strength

__all__ = ["health", "generate", "strength"]
