from .controller import ConsoleController, ControllerState

__all__ = ["ConsoleController", "ControllerState"]
