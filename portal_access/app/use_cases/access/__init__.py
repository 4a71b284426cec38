"""
Access Gate Use Cases
"""

from .dtos import BoardAccessResponse
from .resolve_access_use_case import ResolveAccessUseCase

__all__ = ["ResolveAccessUseCase", "BoardAccessResponse"]
