"""Collect the route list a build consumes."""

from __future__ import annotations

import inspect
from typing import Any, Awaitable, Callable, List, Mapping, Sequence, Union

from pydantic import ValidationError

from ..errors import InvalidRouteListError
from ..schemas.routes import Route

RouteLike = Union[Route, Mapping[str, Any]]
RouteSource = Union[
    Sequence[RouteLike],
    Callable[[], Sequence[RouteLike]],
    Callable[[], Awaitable[Sequence[RouteLike]]],
]


async def collect_routes(source: RouteSource) -> List[Route]:
    """Invoke ``source`` once and validate what it produced.

    ``source`` may be the route list itself or a callable returning a list or an
    awaitable of one. Anything that is not a list raises
    :class:`InvalidRouteListError`.
    """

    value: Any = source() if callable(source) else source
    if inspect.isawaitable(value):
        value = await value
    if not isinstance(value, list):
        raise InvalidRouteListError(value)

    routes: List[Route] = []
    for item in value:
        if isinstance(item, Route):
            routes.append(item)
            continue
        try:
            routes.append(Route.model_validate(item))
        except ValidationError as exc:
            raise InvalidRouteListError(item, f"Invalid route entry {item!r}: {exc}") from exc
    return routes
