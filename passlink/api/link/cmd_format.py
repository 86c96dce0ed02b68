"""Link format API command.

CLI: passlink link format [reference] [--translation T] [--no-catalog ...]
"""

from collections.abc import Iterator
from typing import Any

from pydantic import ValidationError

from ...utils.get_logger import get_logger
from ..config.PasslinkConfig import PasslinkConfig
from ..StageResult import StageResult
from . import LinkFormatOutput
from ._constants import NO_REFERENCE_NOTICE
from ._resolve_reference import _resolve_reference
from .format_reference_links import format_reference_links
from .LinkConfig import LinkConfig

logger = get_logger("link.cmd_format")


def cmd_format(
    reference: str | None = None,
    translation: str | None = None,
    separator: str | None = None,
    short_link: bool | None = None,
    app_bridge: bool | None = None,
    catalog: bool | None = None,
) -> StageResult:
    """Compose the line of passage links for a reference.

    Arguments left as None take their value from the ``link`` config section.
    Without a reference the clipboard is used when the config allows it.
    """
    overrides: dict[str, Any] = {
        "translation": translation,
        "separator": separator,
        "include_short_link": short_link,
        "include_app_bridge": app_bridge,
        "include_catalog": catalog,
    }
    overrides = {k: v for k, v in overrides.items() if v is not None}

    def _fail(result_obj: StageResult, message: str, error: str, ref: str = "", code: str = "") -> None:
        result_obj.result = message
        result_obj.output = LinkFormatOutput(
            errors=[error],
            warnings=[],
            reference=ref,
            translation=code,
            line="",
        ).model_dump(mode="python")
        result_obj.success = False

    def do_work(result_obj: StageResult) -> Iterator[tuple[float, str]]:
        yield (0.2, "Loading configuration...")
        try:
            config = PasslinkConfig.load()
            link_config = LinkConfig(**{**config.link.model_dump(), **overrides})
        except (ValueError, ValidationError) as e:
            yield (1.0, "Complete")
            _fail(result_obj, "Failed to load configuration", str(e))
            return

        yield (0.5, "Reading reference...")
        ref = _resolve_reference(reference, link_config.use_clipboard_fallback)
        if ref is None:
            yield (1.0, "Complete")
            _fail(result_obj, "No reference available", NO_REFERENCE_NOTICE, code=link_config.translation)
            return

        yield (0.8, f"Formatting {ref}...")
        line = format_reference_links(ref, link_config.translation, link_config)
        logger.info("Formatted %r (%s)", ref, link_config.translation)

        yield (1.0, "Complete")
        result_obj.result = "Passage links created"
        result_obj.output = LinkFormatOutput(
            errors=[],
            warnings=[],
            reference=ref,
            translation=link_config.translation,
            line=line,
        ).model_dump(mode="python")
        result_obj.success = True

    announce = f"Formatting links for {reference.strip()}..." if reference and reference.strip() else "Formatting links..."
    return StageResult(announce=announce, progress_callback=do_work)
