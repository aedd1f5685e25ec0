"""
Command models for the turn engine.

A raw input line is split by the CommandParser into a ParsedCommand,
whose command word selects one CommandType for dispatch.

Example:
    >>> command = ParsedCommand(command="go", argument="north")
    >>> command.command_type == CommandType.GO
    True
"""

from __future__ import annotations

from enum import Enum

from pydantic import BaseModel, ConfigDict


class CommandType(str, Enum):
    """Categories of player commands.

    take and drop share TAKE_OR_DROP: both replace the held item with
    whatever lies on the ground.
    """

    QUIT = "quit"
    GO = "go"
    TAKE_OR_DROP = "take_or_drop"
    USE = "use"
    UNKNOWN = "unknown"


# Case-sensitive command literals accepted on the input line
COMMAND_WORDS: dict[str, CommandType] = {
    "quit": CommandType.QUIT,
    "exit": CommandType.QUIT,
    "go": CommandType.GO,
    "take": CommandType.TAKE_OR_DROP,
    "drop": CommandType.TAKE_OR_DROP,
    "use": CommandType.USE,
}


class ParsedCommand(BaseModel):
    """One turn's input split into a command word and an argument.

    Attributes:
        command: First run of non-whitespace characters
        argument: Every later non-whitespace character, concatenated
    """

    model_config = ConfigDict(frozen=True)

    command: str = ""
    argument: str = ""

    @property
    def command_type(self) -> CommandType:
        """Resolve the command word to its CommandType."""
        return COMMAND_WORDS.get(self.command, CommandType.UNKNOWN)
