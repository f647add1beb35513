"""Runtime services shared by actions, hosts and adapters."""

from . import telemetry

__all__ = ["telemetry"]
