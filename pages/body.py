"""Pull the inner markup of ``<body>`` out of editor-exported HTML."""

from __future__ import annotations

try:
    from bs4 import BeautifulSoup  # type: ignore[import-not-found]
except ImportError as exc:
    raise SystemExit(
        "Missing dependency 'beautifulsoup4'. Install with pip install"
        " beautifulsoup4 lxml"
    ) from exc


def extract_body(html: str | bytes) -> str:
    """Return the serialized children of the first ``<body>`` in ``html``.

    Markdown editors export complete documents; only the body content is
    embedded in the base template. lxml recovers from loose markup and wraps
    bare fragments in ``<html><body>``, so those come back unchanged. Raw
    bytes are decoded by BeautifulSoup's encoding detection. A
    document without any body yields an empty string.
    """

    soup = BeautifulSoup(html, "lxml")
    body = soup.find("body")
    if body is None:
        return ""
    return body.decode_contents()
