"""Report output helpers."""

from .reporter import format_abi, print_report, save_abi

__all__ = ["format_abi", "print_report", "save_abi"]
