"""Static page rendering for the radio and player variants.

Where: src/radiopress/features/site/usecases/renderer.py
What: Fill packaged ``string.Template`` pages and inline their CSS and JavaScript.
Why: Produce self-contained HTML that needs nothing beyond the catalog files.
"""

from __future__ import annotations

import html
import json
from dataclasses import dataclass
from functools import cache
from importlib import resources
from string import Template
from typing import Any, Final

from radiopress import __version__
from radiopress.config.settings import (
    DATE_NAME,
    FILECOUNT_NAME,
    FILEDATA_NAME,
    FILENAME_PLACEHOLDER,
    PLAYER_PAGE_NAME,
    RADIO_PAGE_NAME,
    SiteSettings,
)
from radiopress.features.playback.domain.state import AUTOPLAY_PROMPT
from radiopress.features.playback.domain.variant import SiteVariant
from radiopress.features.playback.usecases.session import ERROR_SKIP_DELAY

_TEMPLATE_PACKAGE: Final[str] = "radiopress.features.site.templates"
_PAGE_TEMPLATES: Final[dict[SiteVariant, str]] = {
    SiteVariant.RADIO: "radio.html",
    SiteVariant.PLAYER: "player.html",
}
_PEER_LABELS: Final[dict[SiteVariant, str]] = {
    SiteVariant.RADIO: "Open Full Music Player →",
    SiteVariant.PLAYER: "← Back to Radio",
}


@dataclass(frozen=True, slots=True)
class PageOptions:
    """Per-page values embedded into the rendered HTML."""

    title: str
    storage_namespace: str
    audio_url_template: str
    peer_page: str

    @classmethod
    def for_variant(
        cls,
        variant: SiteVariant,
        settings: SiteSettings,
        *,
        audio_url_template: str | None = None,
    ) -> "PageOptions":
        if variant is SiteVariant.RADIO:
            return cls(
                title=settings.radio_title,
                storage_namespace=settings.radio_namespace,
                audio_url_template=audio_url_template or settings.audio_url_template,
                peer_page=PLAYER_PAGE_NAME,
            )
        return cls(
            title=settings.player_title,
            storage_namespace=settings.player_namespace,
            audio_url_template=audio_url_template or settings.audio_url_template,
            peer_page=RADIO_PAGE_NAME,
        )


def page_name(variant: SiteVariant) -> str:
    return RADIO_PAGE_NAME if variant is SiteVariant.RADIO else PLAYER_PAGE_NAME


@cache
def _read_template(name: str) -> str:
    return resources.files(_TEMPLATE_PACKAGE).joinpath(name).read_text(encoding="utf-8")


def _script_safe_json(payload: dict[str, Any]) -> str:
    # "</" would close the surrounding <script> element.
    return json.dumps(payload, ensure_ascii=False, indent=2).replace("</", "<\\/")


class SiteRenderer:
    """Render one HTML page per :class:`SiteVariant`."""

    def client_config(self, variant: SiteVariant, options: PageOptions) -> dict[str, Any]:
        """Build the ``window.RADIOPRESS_CONFIG`` object for ``variant``."""

        return {
            "variant": variant.value,
            "storageNamespace": options.storage_namespace,
            "audioUrlTemplate": options.audio_url_template,
            "endOfQueue": variant.end_of_queue.value,
            "defaultShuffle": variant.default_shuffle,
            "artistFilter": variant.uses_artist_filter,
            "keyboardShortcuts": variant is SiteVariant.PLAYER,
            "countUrl": f"./{FILECOUNT_NAME}",
            "dataUrl": f"./{FILEDATA_NAME}",
            "dateUrl": f"./{DATE_NAME}",
            "siteTitle": options.title,
            "peerPage": options.peer_page,
            "errorSkipDelayMs": int(ERROR_SKIP_DELAY * 1000),
            "autoplayPrompt": AUTOPLAY_PROMPT,
        }

    def render(self, variant: SiteVariant, options: PageOptions) -> str:
        """Return the complete HTML document for ``variant``.

        Raises:
            ValueError: ``options.audio_url_template`` lacks ``{filename}``.
        """
        if FILENAME_PLACEHOLDER not in options.audio_url_template:
            raise ValueError(f"audio URL template must contain {FILENAME_PLACEHOLDER}")

        page = Template(_read_template(_PAGE_TEMPLATES[variant]))
        return page.substitute(
            version=__version__,
            title=html.escape(options.title),
            style=_read_template("player.css"),
            script=_read_template("player.js"),
            config_json=_script_safe_json(self.client_config(variant, options)),
            peer_page=html.escape(options.peer_page, quote=True),
            peer_label=html.escape(_PEER_LABELS[variant]),
        )


__all__ = ["PageOptions", "SiteRenderer", "page_name"]
