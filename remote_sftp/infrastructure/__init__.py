"""
Infrastructure layer
"""
from .paramiko_session import (
    ParamikoSession,
    ParamikoSessionFactory,
    ParamikoSftpChannel,
    load_private_key,
)

__all__ = [
    "ParamikoSession",
    "ParamikoSessionFactory",
    "ParamikoSftpChannel",
    "load_private_key",
]
