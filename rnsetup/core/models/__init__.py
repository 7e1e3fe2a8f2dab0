"""
Domain models — Pydantic types and enums for the installer.

    from rnsetup.core.models import Command, Receipt, Platform
"""

from rnsetup.core.models.action import Command, Receipt
from rnsetup.core.models.platform import Platform

__all__ = [
    "Command",
    "Platform",
    "Receipt",
]
