"""SecureBank CLI: an in-memory interactive banking simulator."""

__version__ = "0.1.0"
