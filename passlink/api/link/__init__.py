"""Link API domain."""

from .._output_schemas.link import LinkFormatOutput, LinkShowOutput

__all__ = [
    "LinkFormatOutput",
    "LinkShowOutput",
]
