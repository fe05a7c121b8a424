"""Pool clients"""

from .executor import CallExecutor, CallResult, ErrorKind

__all__ = ["CallExecutor", "CallResult", "ErrorKind"]
