# Copyright (c) 2025 dashchain contributors. MIT LICENSE.
"""Error types raised by dashchain."""


class DashError(Exception):
    """Base class for dashchain errors."""


class ChainStateError(DashError, ValueError):
    """A chain method was called while the chain value is None."""

    def __init__(self, message=None):
        super().__init__(
            message or 'chain value is None; did you forget to initialize it?')


class MethodNotFoundError(DashError, AttributeError):
    """The name is not a method of the chain."""

    def __init__(self, name):
        super().__init__(f'chain has no method: {name}')
        # Set after init: AttributeError.__init__ resets .name.
        self.name = name
