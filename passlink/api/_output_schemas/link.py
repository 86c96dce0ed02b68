"""Output schemas for link commands."""

from pydantic import Field

from ._base import BaseOutputSchema
from ._registry import register_output_schema


class LinkFormatOutput(BaseOutputSchema):
    """Output schema for link format command.

    Output structure:
    - errors / warnings: list[str]
    - reference: str - reference that was formatted, empty string if none was available
    - translation: str - translation code used
    - line: str - the composed line, empty string on failure
    """

    reference: str = Field(..., description="Reference that was formatted, empty string if none was available")
    translation: str = Field(..., description="Translation code used")
    line: str = Field(..., description="Composed line of passage links, empty string on failure")


class LinkShowOutput(BaseOutputSchema):
    """Output schema for link show command."""

    reference: str = Field(..., description="Reference the links were built from")
    translation: str = Field(..., description="Translation code used")
    label: str = Field(..., description="Human-readable label")
    links: dict[str, str] = Field(..., description="URL per link target (short_link, app_bridge, catalog)")


register_output_schema("link", "format", LinkFormatOutput)
register_output_schema("link", "show", LinkShowOutput)
