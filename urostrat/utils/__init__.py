"""
Utilities Package - Logging and Exception Handling
"""
from .logging import get_logger, setup_logging
from .exceptions import (
    UroStratError,
    InvalidArgumentError,
    EmptyInputError,
)

__all__ = [
    "get_logger",
    "setup_logging",
    "UroStratError",
    "InvalidArgumentError",
    "EmptyInputError",
]
