"""
Settings loading
"""
from .loader import ConfigLoader, env_alias

__all__ = ["ConfigLoader", "env_alias"]
