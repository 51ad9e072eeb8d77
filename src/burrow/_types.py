"""Shared type definitions for burrow."""

from collections.abc import Callable
from typing import Any

# Route URL pattern (e.g., "/product", "/product/:id")
type RoutePath = str

# Conflict key, e.g. "get:/product/:param"
type Fingerprint = str

# Sync or async callable bound to a route
type HandlerFunc = Callable[..., Any]
