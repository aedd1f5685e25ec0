"""
Command handlers for the turn engine.

Each handler implements the CommandHandler protocol with a single
handle() method that returns an ActionOutcome and never mutates state.

Example:
    >>> handler = build_default_handlers()[command.command_type]
    >>> outcome = handler.handle(command, state, map_layout, rules)
"""

from amazing_adventure.engine.handlers.meta import QuitHandler, UnknownCommandHandler
from amazing_adventure.engine.handlers.movement import MovementHandler
from amazing_adventure.engine.handlers.take import TakeHandler
from amazing_adventure.engine.handlers.use import UseHandler
from amazing_adventure.models.command import CommandType


def build_default_handlers() -> dict:
    """Map every CommandType to a fresh handler instance."""
    return {
        CommandType.QUIT: QuitHandler(),
        CommandType.GO: MovementHandler(),
        CommandType.TAKE_OR_DROP: TakeHandler(),
        CommandType.USE: UseHandler(),
        CommandType.UNKNOWN: UnknownCommandHandler(),
    }


__all__ = [
    "MovementHandler",
    "TakeHandler",
    "UseHandler",
    "QuitHandler",
    "UnknownCommandHandler",
    "build_default_handlers",
]
