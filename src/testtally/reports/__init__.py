from .base import Reporter
from .console import ConsoleReporter, make_console

__all__ = ["ConsoleReporter", "Reporter", "make_console"]
