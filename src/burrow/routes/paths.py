"""Path normalisation — directory prefixes to URL patterns and fingerprints.

The walker accumulates a raw prefix such as ``/product/[id]/reviews``.
From it this module produces:

- the canonical path, ``/product/:id/reviews``, registered with the router;
- the fingerprint, ``get:/product/:param/reviews``, used only to detect
  routes that collide no matter how their parameters are named.

Static and dynamic segments never share a fingerprint: ``/product/:id`` and
``/product/featured`` are different routes.
"""

import re
from dataclasses import dataclass

from burrow._types import Fingerprint, RoutePath

# A directory named exactly [name]; anything else bracketed stays literal
_PARAM_DIR_RE = re.compile(r"^\[([^\[\]]+)\]$")

PARAM_PLACEHOLDER = ":param"


@dataclass(frozen=True, slots=True)
class RouteSegment:
    """One segment of a URL pattern.

    Static:  ``product``  (is_param=False)
    Param:   ``:id``      (is_param=True, param_name="id")
    """

    value: str

    @property
    def is_param(self) -> bool:
        return len(self.value) > 1 and self.value.startswith(":")

    @property
    def param_name(self) -> str | None:
        return self.value[1:] if self.is_param else None


def split_segments(raw: str) -> tuple[RouteSegment, ...]:
    """Split a raw directory prefix into URL segments.

    Backslashes count as separators and empty segments are dropped.  A
    ``[name]`` segment becomes ``:name``; malformed brackets (``[]``,
    ``[id``, ``a[b]``) are kept verbatim.

    Examples::

        "/product/[id]"  -> (RouteSegment("product"), RouteSegment(":id"))
        "/admin/[]"      -> (RouteSegment("admin"), RouteSegment("[]"))
    """
    segments: list[RouteSegment] = []
    for part in raw.replace("\\", "/").split("/"):
        if not part:
            continue
        match = _PARAM_DIR_RE.match(part)
        if match:
            segments.append(RouteSegment(":" + match.group(1)))
        else:
            segments.append(RouteSegment(part))
    return tuple(segments)


def join_segments(segments: tuple[RouteSegment, ...]) -> RoutePath:
    """Join segments into a path with one leading slash and no trailing slash."""
    if not segments:
        return "/"
    return "/" + "/".join(seg.value for seg in segments)


def canonical_path(raw: str, url_prefix: str = "") -> RoutePath:
    """Build the URL pattern a method file is registered under.

    *url_prefix* is prepended verbatim; brackets in it are not converted.

    >>> canonical_path("/product/[id]", "/api/")
    '/api/product/:id'
    >>> canonical_path("")
    '/'
    """
    prefix_segments = tuple(
        RouteSegment(part)
        for part in url_prefix.replace("\\", "/").split("/")
        if part
    )
    return join_segments((*prefix_segments, *split_segments(raw)))


def fingerprint_path(path: RoutePath) -> RoutePath:
    """Replace every dynamic segment of *path* with ``:param``."""
    segments = tuple(RouteSegment(part) for part in path.split("/") if part)
    return join_segments(
        tuple(
            RouteSegment(PARAM_PLACEHOLDER) if seg.is_param else seg
            for seg in segments
        )
    )


def fingerprint(method: str, path: RoutePath) -> Fingerprint:
    """Conflict key for a route: ``method:fingerprint_path``.

    >>> fingerprint("get", "/product/:slug")
    'get:/product/:param'
    """
    return f"{method}:{fingerprint_path(path)}"
