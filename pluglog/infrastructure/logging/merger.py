"""
pluglog Metadata Merger

Combines a logger's default context with the metadata of one log call.
"""

from collections.abc import Mapping
from typing import Any, Dict


def merge_meta(default_meta: Mapping, meta: Any = None) -> Dict[Any, Any]:
    """
    Shallow union of the default context and call-site metadata.

    Only mapping-shaped metadata is merged, with its keys taking precedence.
    Sequences, scalars, callables and None leave the default context as is.

    Args:
        default_meta: Default context of the logger
        meta: Metadata passed to the log call

    Returns:
        A new dict; ``default_meta`` is never returned or modified
    """
    if isinstance(meta, Mapping):
        return {**default_meta, **meta}
    return dict(default_meta)
