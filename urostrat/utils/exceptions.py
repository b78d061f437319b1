"""
Custom Exception Hierarchy

Error types raised by the risk stratification core and surfaced by the API
with structured error information.
"""
from typing import Optional, Dict, Any


class UroStratError(Exception):
    """Base exception for all risk stratification errors."""
    
    def __init__(
        self,
        message: str,
        code: str = "UNKNOWN_ERROR",
        details: Optional[Dict[str, Any]] = None
    ):
        super().__init__(message)
        self.message = message
        self.code = code
        self.details = details or {}
    
    def to_dict(self) -> Dict[str, Any]:
        """Convert exception to dictionary for API responses."""
        return {
            "error": self.code,
            "message": self.message,
            "details": self.details
        }


class InvalidArgumentError(UroStratError):
    """
    Malformed input to a core operation: missing or unparseable anchor date,
    unknown risk category, or a form value outside its enumerated set.
    """
    
    def __init__(
        self,
        message: str,
        argument: str = "unknown",
        details: Optional[Dict[str, Any]] = None
    ):
        super().__init__(
            message=message,
            code="INVALID_ARGUMENT",
            details={"argument": argument, **(details or {})}
        )
        self.argument = argument


class EmptyInputError(UroStratError):
    """An export was requested for an empty surveillance schedule."""
    
    def __init__(
        self,
        message: str,
        export_type: str = "unknown",
        details: Optional[Dict[str, Any]] = None
    ):
        super().__init__(
            message=message,
            code="EMPTY_INPUT",
            details={"export_type": export_type, **(details or {})}
        )
        self.export_type = export_type
