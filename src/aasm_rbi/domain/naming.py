"""Model id to file path naming."""

import re

_ACRONYM_BOUNDARY = re.compile(r"([A-Z\d]+)([A-Z][a-z])")
_WORD_BOUNDARY = re.compile(r"([a-z\d])([A-Z])")


def underscore(model_id: str) -> str:
    """
    Convert a constant path to a relative file stem, Rails-style.

    Admin::BlogPost -> admin/blog_post, HTTPRequest -> http_request.
    """
    path = model_id.replace("::", "/")
    path = _ACRONYM_BOUNDARY.sub(r"\1_\2", path)
    path = _WORD_BOUNDARY.sub(r"\1_\2", path)
    return path.replace("-", "_").lower()
