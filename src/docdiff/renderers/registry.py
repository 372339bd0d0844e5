"""Lookup of diff renderers by view name"""

import inspect

from docdiff.renderers.html import HtmlRenderer
from docdiff.renderers.split import SplitRenderer
from docdiff.renderers.unified import UnifiedRenderer


RENDERERS = {
    "unified": UnifiedRenderer,
    "split": SplitRenderer,
    "html": HtmlRenderer,
}


def get_renderer(view: str, **options):
    """Instantiate the renderer registered under `view`.

    Options the renderer does not take (e.g. `width` for the unified view)
    and options passed as None are ignored. Raises ValueError for an unknown view.
    """
    try:
        cls = RENDERERS[view]
    except KeyError:
        raise ValueError(f"Unknown view '{view}'; expected one of: {', '.join(RENDERERS)}") from None
    accepted = inspect.signature(cls).parameters
    return cls(**{k: v for k, v in options.items() if k in accepted and v is not None})
