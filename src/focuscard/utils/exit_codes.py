"""
Exit codes for FocusCard commands.

Semantic exit codes so scripts wrapping the CLI can tell failures apart.
"""

# Success
SUCCESS = 0

# General error (unspecified)
ERROR_GENERAL = 1

# Invalid arguments or validation error
ERROR_INVALID_ARGS = 2

# Configuration file missing, unreadable or invalid
ERROR_CONFIG = 3

# Run interrupted by the user (Ctrl+C)
ERROR_INTERRUPTED = 130


def get_exit_code_name(code: int) -> str:
    """Get the name of an exit code for display purposes."""
    code_names = {
        SUCCESS: "SUCCESS",
        ERROR_GENERAL: "ERROR_GENERAL",
        ERROR_INVALID_ARGS: "ERROR_INVALID_ARGS",
        ERROR_CONFIG: "ERROR_CONFIG",
        ERROR_INTERRUPTED: "ERROR_INTERRUPTED",
    }
    return code_names.get(code, f"UNKNOWN({code})")
