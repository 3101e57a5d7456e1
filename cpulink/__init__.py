"""CPU module client linking to memory and kernel over a framed TCP protocol."""

__version__ = "0.1.0"
__all__ = ["cli", "clients", "config", "connections", "logger", "packets"]