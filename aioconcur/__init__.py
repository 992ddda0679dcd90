"""Concurrency helpers for asyncio: join, try_join, race, race_ok and merge."""

__version__ = "0.1.0"

__all__ = ["errors", "join", "merge", "race", "race_ok", "try_join", "utils"]