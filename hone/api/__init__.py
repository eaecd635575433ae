from hone.api.commands import COMMAND_NAMES, CommandResult, Commands

__all__ = ["COMMAND_NAMES", "CommandResult", "Commands"]
