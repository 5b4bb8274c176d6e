"""Core menu logic.

Modules:
- decoding: tolerant decoding of the upstream payload
- weeks: week classification, weekday labels, display lines
- menu_state: presentation state and the refresh cycle
"""
__all__ = ["decoding", "weeks", "menu_state"]
