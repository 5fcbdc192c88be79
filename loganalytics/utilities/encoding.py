"""URI component encoding for resolved queries."""

from urllib.parse import quote, unquote

# Characters encodeURIComponent leaves alone besides letters, digits and "-_.~"
_URI_COMPONENT_SAFE = "!'()*"


def encode_uri_component(text: str) -> str:
    """Percent-encode text for use as a URI query component.

    Space becomes %20 (never '+'), and reserved characters such as ',', '=',
    '>' and '|' are escaped. Non-ASCII text is encoded as UTF-8.
    """
    return quote(text, safe=_URI_COMPONENT_SAFE)


def decode_uri_component(text: str) -> str:
    """Inverse of encode_uri_component."""
    return unquote(text)
