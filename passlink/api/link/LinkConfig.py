"""Link composition configuration."""

from pydantic import BaseModel, ConfigDict, Field, field_validator

from ._constants import DEFAULT_TRANSLATION


class LinkConfig(BaseModel):
    """Which link targets to emit and how to join them."""

    model_config = ConfigDict(extra="forbid", validate_assignment=True)

    translation: str = Field(DEFAULT_TRANSLATION, description="Default translation code, e.g. ESV, NIV, NKJV")
    include_short_link: bool = Field(True, description="Render the label as a ref.ly link")
    include_app_bridge: bool = Field(True, description='Append an "Open in Logos" bridge link')
    include_catalog: bool = Field(True, description="Append a Biblia.com link")
    separator: str = Field(" • ", description="String placed between links")
    use_clipboard_fallback: bool = Field(True, description="Read the clipboard when no reference is given")

    @field_validator("translation")
    @classmethod
    def _default_translation(cls, value: str) -> str:
        return value.strip() or DEFAULT_TRANSLATION
