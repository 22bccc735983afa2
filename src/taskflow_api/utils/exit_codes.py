"""
Exit codes for the TaskFlow CLI.

Semantic exit codes so scripts can tell a rejected request from an
unreachable server.
"""

# Success
SUCCESS = 0

# General error (unspecified)
ERROR_GENERAL = 1

# Invalid arguments or validation error
ERROR_INVALID_ARGS = 2

# Network error (server unreachable, timeout, 5xx after retries)
ERROR_NETWORK = 4

# Resource not found
ERROR_NOT_FOUND = 5


def get_exit_code_name(code: int) -> str:
    """Get the name of an exit code for display purposes."""
    code_names = {
        SUCCESS: "SUCCESS",
        ERROR_GENERAL: "ERROR_GENERAL",
        ERROR_INVALID_ARGS: "ERROR_INVALID_ARGS",
        ERROR_NETWORK: "ERROR_NETWORK",
        ERROR_NOT_FOUND: "ERROR_NOT_FOUND",
    }
    return code_names.get(code, f"UNKNOWN({code})")


def get_exit_code_description(code: int) -> str:
    """Get a human-readable description of an exit code."""
    descriptions = {
        SUCCESS: "Command executed successfully",
        ERROR_GENERAL: "A general error occurred",
        ERROR_INVALID_ARGS: "Invalid arguments or validation error",
        ERROR_NETWORK: "Network or server error - is the server running?",
        ERROR_NOT_FOUND: "Resource not found",
    }
    return descriptions.get(code, "Unknown error")


def exit_code_for_status(status_code: int) -> int:
    """Map an HTTP status from the API to a CLI exit code."""
    if status_code == 400:
        return ERROR_INVALID_ARGS
    if status_code == 404:
        return ERROR_NOT_FOUND
    if status_code >= 500:
        return ERROR_NETWORK
    return ERROR_GENERAL
