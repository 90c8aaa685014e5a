"""Messaging between processes over SIGUSR1 and SIGUSR2, one bit per signal, with small helpers."""

__version__ = "0.1.0"

__all__ = [
    "bytesops",
    "chars",
    "client",
    "linkedlist",
    "numconv",
    "printf",
    "protocol",
    "server",
    "textops",
]