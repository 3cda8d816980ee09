"""Runtime helpers: integer and float math, wide integers, formatting, memory, heap and clock."""

__version__ = "0.1.0"

__all__ = [
    "clock",
    "floatmath",
    "hardware",
    "heap",
    "intmath",
    "memory",
    "primitives",
    "rand",
    "strings",
    "widemath",
]