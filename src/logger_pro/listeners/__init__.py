from .json import JsonSink
from .rich import RichConsoleChannel

__all__ = ["JsonSink", "RichConsoleChannel"]
