"""
Platform package.
"""

from .command_comp import COMMAND_TIMEOUT_SECONDS, decode_output, run_json_command

__all__ = [
    "COMMAND_TIMEOUT_SECONDS",
    "decode_output",
    "run_json_command",
]
