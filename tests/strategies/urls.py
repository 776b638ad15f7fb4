"""Hypothesis strategies for URL query testing.

Generates URLs whose query sections exercise the cursor's delimiter
handling: empty parameters, parameters without '=', stray '=' characters,
missing query sections and fragments containing reserved characters.

Event-Emitting Strategies (HypoFuzz-Optimized):
    - url_query_shape: Query section classification (none|empty|params)
    - url_fragment: Whether a fragment follows the query (true|false)
    - param_shape: Per-parameter layout (key_value|key_only|empty_value|empty)
"""

from __future__ import annotations

from hypothesis import event
from hypothesis import strategies as st

__all__ = [
    "PARAM_TEXT_CHARS",
    "param_keys",
    "param_texts",
    "param_values",
    "separators",
    "url_prefixes",
    "urls",
]

# Anything except delimiters and separators; "=" is added per parameter.
PARAM_TEXT_CHARS = st.characters(
    blacklist_categories=["Cs"],
    blacklist_characters=["?", "#", "=", "&", ";", ",", "|"],
)

param_keys = st.text(alphabet=PARAM_TEXT_CHARS, max_size=8)
param_values = st.none() | st.text(alphabet=PARAM_TEXT_CHARS, max_size=8)
separators = st.sampled_from(["&", ";", ",", "|"])

url_prefixes = st.sampled_from(
    ["", "http://site", "https://example.com/path/", "AA", "/relative/path"]
)


@st.composite
def param_texts(draw: st.DrawFn) -> str:
    """Generate the raw text of one parameter.

    Events emitted:
    - param_shape={key_value|key_only|empty_value|empty}
    """
    label = draw(st.sampled_from(["key_value", "key_only", "empty_value", "empty"]))
    event(f"param_shape={label}")
    match label:
        case "key_value":
            key = draw(param_keys)
            value = draw(st.text(alphabet=PARAM_TEXT_CHARS, max_size=8))
            # A second '=' belongs to the value
            extra = draw(st.sampled_from(["", "="]))
            return f"{key}={value}{extra}"
        case "key_only":
            return draw(st.text(alphabet=PARAM_TEXT_CHARS, min_size=1, max_size=8))
        case "empty_value":
            return draw(param_keys) + "="
        case _:
            return ""


@st.composite
def urls(draw: st.DrawFn, separator: str = "&") -> str:
    """Generate a URL with an optional query section and fragment.

    Events emitted:
    - url_query_shape={none|empty|params}
    - url_fragment={true|false}
    """
    prefix = draw(url_prefixes)
    shape = draw(st.sampled_from(["none", "empty", "params"]))
    event(f"url_query_shape={shape}")
    match shape:
        case "none":
            query = ""
        case "empty":
            query = "?"
        case _:
            params = draw(st.lists(param_texts(), min_size=1, max_size=6))
            query = "?" + separator.join(params)

    has_fragment = draw(st.booleans())
    event(f"url_fragment={str(has_fragment).lower()}")
    fragment = ""
    if has_fragment:
        # Reserved characters after '#' are not part of the query
        fragment = "#" + draw(st.sampled_from(["", "top", "a?b=c&d", "x#y"]))
    return prefix + query + fragment
