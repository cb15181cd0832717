from .lines import LINE_PATTERN, split_lines

__all__ = [
    "LINE_PATTERN",
    "split_lines",
]
