"""Shared utilities for TaxMap Spain."""

# Configuration
from utils.config import AppConfig

# HTTP utilities
from utils.http import SessionManager, decode_json, get_json, is_success_status

# Formatting utilities
from utils.formatting import format_share, format_tooltip, cycle_colors

__all__ = [
    "AppConfig",
    "SessionManager",
    "decode_json",
    "get_json",
    "is_success_status",
    "format_share",
    "format_tooltip",
    "cycle_colors",
]
