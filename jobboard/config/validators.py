"""Non-fatal configuration checks."""

import warnings
from typing import Any, Dict, List


def check_for_warnings(config_dict: Dict[str, Any], environment: str = "local") -> List[str]:
    """
    Check configuration for potential issues and return warnings.

    Args:
        config_dict: Raw configuration dictionary
        environment: Deployment environment label

    Returns:
        List of warning messages
    """
    warning_messages = []

    server = config_dict.get("server", {})
    if isinstance(server, dict):
        if server.get("debug") is True and environment == "production":
            warning_messages.append(
                "server.debug is enabled in production; the interactive debugger exposes code execution"
            )

        port = server.get("port")
        if isinstance(port, int) and 0 < port < 1024:
            warning_messages.append(
                f"server.port {port} is privileged and may require elevated permissions"
            )

    return warning_messages


def emit_warnings(warning_messages: List[str]) -> None:
    """Emit warning messages using Python's warnings module."""
    for message in warning_messages:
        warnings.warn(message, UserWarning, stacklevel=2)
