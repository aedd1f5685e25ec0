"""Amazing Adventure - a turn-based squirrel survival text adventure"""

__version__ = "0.1.0"
