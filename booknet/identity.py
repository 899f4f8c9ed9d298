# booknet/identity.py
from dataclasses import dataclass


@dataclass(frozen=True)
class ActingUser:
    """Identity of the user performing an operation, supplied by the caller."""
    id: int
