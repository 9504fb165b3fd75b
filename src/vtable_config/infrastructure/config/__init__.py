"""Infrastructure configuration module."""

from .application_config import Config
from .document_config import get_config, get_duplicate_policy

__all__ = ["Config", "get_config", "get_duplicate_policy"]
