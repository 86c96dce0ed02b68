"""Config API domain."""

from .._output_schemas.config import ConfigSetOutput, ConfigShowOutput, ConfigVersionOutput

__all__ = ["ConfigSetOutput", "ConfigShowOutput", "ConfigVersionOutput"]
