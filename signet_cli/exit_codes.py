"""Process exit codes shared by every CLI command."""

EXIT_SUCCESS = 0
EXIT_RUNTIME_ERROR = 1
EXIT_VERIFICATION_FAILED = 2

__all__ = ["EXIT_SUCCESS", "EXIT_RUNTIME_ERROR", "EXIT_VERIFICATION_FAILED"]
