# Application layer: controller dispatching commands for the host UI

from hone.application.controller import HoneController

__all__ = ["HoneController"]
