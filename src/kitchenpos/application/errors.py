from __future__ import annotations


class InvalidArgumentError(Exception):
    """Input is malformed or inconsistent with the referenced entities."""


class NotFoundError(Exception):
    """A referenced identifier does not resolve."""


class IllegalStateError(Exception):
    """The entity's current status or flags forbid the operation."""
