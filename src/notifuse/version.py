"""Version information for the Notifuse Python client."""

__version__ = "2.0.0"

USER_AGENT = f"notifuse-python/{__version__}"

__all__ = ["__version__", "USER_AGENT"]
