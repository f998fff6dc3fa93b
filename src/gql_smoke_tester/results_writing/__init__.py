"""Results writing exports."""

from .operation_listing import format_operation_listing, write_operation_listing

__all__ = ["format_operation_listing", "write_operation_listing"]
