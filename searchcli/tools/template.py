"""URL template rendering for provider URLs.

A provider URL carries one placeholder for the search word::

    https://google.com/search?q={{ word | urlencode }}

Supported forms: ``{{word}}``, ``{{ word }}``, ``{{ word | urlencode }}`` and
``{{ word | urlencode_strict }}``. The word is always percent-encoded;
``urlencode_strict`` also escapes ``/``.
"""

from __future__ import annotations

import re
import urllib.parse

from searchcli.errors import TemplateError

PLACEHOLDER = "word"

_PLACEHOLDER_RE = re.compile(r"\{\{\s*(?P<var>[A-Za-z_]\w*)\s*(?:\|\s*(?P<filter>[A-Za-z_]\w*)\s*)?\}\}")

# Stands in for a matched placeholder while checking delimiters
_MARK = "\x00"

# filter name -> characters left unescaped
_FILTERS: dict[str, str] = {
    "urlencode": "/",
    "urlencode_strict": "",
}


def render_url(template: str, word: str) -> str:
    """Substitute ``word`` into ``template``, percent-encoding it.

    Raises TemplateError on unbalanced delimiters, unknown variables or
    unknown filters.
    """
    leftover = _PLACEHOLDER_RE.sub(_MARK, template)
    if "{{" in leftover or "}}" in leftover or "{" + _MARK in leftover or _MARK + "}" in leftover:
        raise TemplateError(template, "unbalanced '{{' / '}}' delimiters")

    def _substitute(match: re.Match[str]) -> str:
        var = match.group("var")
        if var != PLACEHOLDER:
            raise TemplateError(template, f"unknown variable '{var}'")
        filter_name = match.group("filter") or "urlencode"
        if filter_name not in _FILTERS:
            raise TemplateError(template, f"unknown filter '{filter_name}'")
        return urllib.parse.quote(word, safe=_FILTERS[filter_name])

    return _PLACEHOLDER_RE.sub(_substitute, template)
