"""eventstatus - lifecycle status of a group's last event."""

__version__ = "0.1.0"
