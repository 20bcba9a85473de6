"""Cooperative drawing tasks and their two-phase shutdown."""

from termcanvas.tasks.coordinator import ShutdownCoordinator, TaskHandle

__all__ = ["ShutdownCoordinator", "TaskHandle"]
