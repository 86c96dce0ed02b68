"""Output schemas for API commands.

Importing this package registers every domain's schemas.
"""

from . import config, link
from ._registry import get_output_schema

__all__ = ["config", "get_output_schema", "link"]
