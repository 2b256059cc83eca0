"""
Custom exceptions for the reactor simulator.
"""


class ReactorSimError(Exception):
    """Base exception for all reactor simulator errors."""
    pass


class UnknownActionError(ReactorSimError):
    """Action type not recognized by the command dispatcher."""

    def __init__(self, action_type: str):
        super().__init__(f"Unknown action: {action_type}")
        self.action_type = action_type


class ConfigError(ReactorSimError):
    """Configuration file missing, unreadable or invalid."""
    pass
