"""Link show API command.

CLI: passlink link show <reference> [--translation T]
"""

from collections.abc import Iterator

from ..config.PasslinkConfig import PasslinkConfig
from ..StageResult import StageResult
from . import LinkShowOutput
from .build_links import build_links


def cmd_show(reference: str, translation: str | None = None) -> StageResult:
    """Show the label and every target URL for a reference.

    Args:
        reference: Passage reference, e.g. "John 3:16-18".
        translation: Translation code; defaults to the configured translation.
    """

    def do_work(result_obj: StageResult) -> Iterator[tuple[float, str]]:
        code = translation.strip() if translation else ""
        warnings: list[str] = []
        if not code:
            yield (0.2, "Loading configuration...")
            try:
                code = PasslinkConfig.load().link.translation
            except ValueError as e:
                # Links still build with the default translation
                warnings.append(str(e))
                code = PasslinkConfig().link.translation

        yield (0.6, "Building links...")
        links = build_links(reference, code)
        label = links.pop("label")

        yield (1.0, "Complete")
        result_obj.result = f"Built {len(links)} links for {label}"
        result_obj.output = LinkShowOutput(
            errors=[],
            warnings=warnings,
            reference=reference,
            translation=code,
            label=label,
            links=links,
        ).model_dump(mode="python")
        result_obj.success = True

    return StageResult(
        announce=f"Showing links for {reference}...",
        progress_callback=do_work,
    )
