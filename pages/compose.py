"""Literal placeholder substitution for the base template."""

from __future__ import annotations

HEADER_TOKEN = "{{ header }}"
FOOTER_TOKEN = "{{ footer }}"
BODY_TOKEN = "{{ body }}"


def compose(base: str, header: str, footer: str, body: str) -> str:
    """Fill the header, footer and body placeholders of ``base``."""

    generated = base.replace(HEADER_TOKEN, header)
    generated = generated.replace(FOOTER_TOKEN, footer)
    return generated.replace(BODY_TOKEN, body)
