"""
=============================================================================
MEDIA TYPES (Content-Type values)
=============================================================================

The Content-Type header decides which serializer turns a request body into
bytes, and which one turns response bytes back into a value.

=============================================================================
ANATOMY OF A CONTENT-TYPE VALUE
=============================================================================

    Content-Type: application/json; charset=utf-8
                  ───────┬──────── ──────┬──────
                         │               │
                    media type       parameters

Serializers are registered under the bare media type, so lookups use
``strip_parameters()`` first:

    >>> strip_parameters("application/json; charset=utf-8")
    'application/json'
    >>> get_charset("text/plain; charset=ISO-8859-1")
    'ISO-8859-1'

=============================================================================
"""

from typing import Optional


class MediaType:
    """Media type strings used by the built-in serializers and shorthands."""

    # -------------------------------------------------------------------------
    # APPLICATION TYPES
    # -------------------------------------------------------------------------
    APPLICATION_JSON = "application/json"
    APPLICATION_XML = "application/xml"
    APPLICATION_X_WWW_FORM_URLENCODED = "application/x-www-form-urlencoded"
    APPLICATION_OCTET_STREAM = "application/octet-stream"
    APPLICATION_PROBLEM_JSON = "application/problem+json"
    APPLICATION_JAVASCRIPT = "application/javascript"
    APPLICATION_PDF = "application/pdf"
    APPLICATION_ZIP = "application/zip"

    # -------------------------------------------------------------------------
    # TEXT TYPES
    # -------------------------------------------------------------------------
    TEXT_PLAIN = "text/plain"
    TEXT_HTML = "text/html"
    TEXT_XML = "text/xml"
    TEXT_CSV = "text/csv"
    TEXT_CSS = "text/css"
    TEXT_MARKDOWN = "text/markdown"

    # -------------------------------------------------------------------------
    # MULTIPART TYPES
    # -------------------------------------------------------------------------
    MULTIPART_FORM_DATA = "multipart/form-data"
    MULTIPART_MIXED = "multipart/mixed"


DEFAULT_CHARSET = "utf-8"


def strip_parameters(content_type: str) -> str:
    """
    Remove everything from the first ``;`` onwards and trim whitespace.

    The media type itself is returned with its original case; registry
    lookups are exact-match.
    """
    return content_type.split(";", 1)[0].strip()


def get_charset(content_type: Optional[str], default: str = DEFAULT_CHARSET) -> str:
    """
    Get the ``charset`` parameter of a Content-Type value.

    Args:
        content_type: Full header value, may be None.
        default: Returned when no charset parameter is present.
    """
    if not content_type:
        return default

    for parameter in content_type.split(";")[1:]:
        name, _, value = parameter.partition("=")
        if name.strip().lower() == "charset" and value.strip():
            return value.strip().strip('"')

    return default
