"""
Application package initializer.

The service is split into a handful of small layers: ``core`` holds
configuration, logging and the dataset loader, ``schemas`` the
Pydantic models for stored and projected units, ``services`` the
lookup logic and ``api`` the HTTP routers.  Handlers never touch the
dataset file directly; they go through ``UnitService``.
"""

from .main import app  # noqa: F401
