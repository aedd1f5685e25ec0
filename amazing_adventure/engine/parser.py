"""
Input parser for the turn engine.

Splits a raw input line into a command word and an argument. Unlike
str.split(), whitespace inside the argument is dropped, so
"go  north east" yields ("go", "northeast").
"""

from __future__ import annotations

from amazing_adventure.models.command import ParsedCommand

# Characters below this code point count as whitespace
WHITESPACE_CUTOFF = 33


class CommandParser:
    """Parse one line of player input into a ParsedCommand.

    Rules:
        - Whitespace before the command word is skipped
        - The command word ends at the first whitespace after it
        - Every later non-whitespace character joins the argument
        - No case normalization, no length limit

    Example:
        >>> parser = CommandParser()
        >>> parser.parse("  go   north")
        ParsedCommand(command='go', argument='north')
    """

    def parse(self, raw_input: str) -> ParsedCommand:
        """Parse player input into a command/argument pair.

        Args:
            raw_input: The raw player input line

        Returns:
            ParsedCommand; either part may be empty
        """
        command: list[str] = []
        argument: list[str] = []
        encountered_space = False

        for char in raw_input:
            if ord(char) < WHITESPACE_CUTOFF:
                # Only whitespace after the command word separates it
                if command:
                    encountered_space = True
            elif encountered_space:
                argument.append(char)
            else:
                command.append(char)

        return ParsedCommand(command="".join(command), argument="".join(argument))
