"""
Domain layer - Business entities, models, schemas, and ordered sequences.
"""

from domain import models, schemas, sequences

__all__ = ["models", "schemas", "sequences"]
