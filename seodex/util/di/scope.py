"""Custom Dishka scopes for seodex."""

from dishka import BaseScope, new_scope


class Scope(BaseScope):  # type: ignore[misc]  # BaseScope is designed to be subclassed
    """seodex dependency injection scopes.

    Hierarchy: APP -> UOW

    - APP: Application lifetime (singletons)
    - UOW: Unit of Work (one CLI command or one admin request)
    """

    APP = new_scope("APP")
    UOW = new_scope("UOW")
