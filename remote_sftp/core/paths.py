"""
Remote path helpers
"""
import re
from typing import List

_SEPARATORS = re.compile(r"[/\\]+")


def split_remote_path(path: str) -> List[str]:
    """
    Split a remote path into directory segments.
    
    Both "/" and "\\" are separators, mixed freely. Leading, trailing
    and repeated separators never produce empty segments, so "//"
    yields an empty list.
    
    Args:
        path: Remote path
    
    Returns:
        Non-empty segments in order
    """
    return [segment for segment in _SEPARATORS.split(path) if segment]
