"""
Endpoint Catalog

Declarative description of Battle.net REST endpoints.
"""

import string
from dataclasses import dataclass, field
from typing import Any, Callable, Dict, Iterator, Mapping, Optional, Tuple
from urllib.parse import quote

from ....core.constants import APIType, Game, Namespace, base_path
from ....core.exceptions import ErrorType, HTTPError

Params = Dict[str, Any]


@dataclass(frozen=True)
class Endpoint:
    """
    One REST endpoint.

    Attributes:
        name: Key of the endpoint inside its game's catalog
        game: Game family, selects the base path
        path: Template below the base path, e.g. ``/realm/{realm}``
        api_type: Credential the call needs
        schema: Type the response is decoded as
        namespace: Default namespace header, ``None`` for community calls
        method: HTTP method
        query: Keyword parameter to query parameter names
        extract: Applied to the decoded response (wrapper payloads)
        prepare: Validates and normalises keyword parameters; raises
            ``HTTPError`` for invalid input
        defaults: Default keyword parameter values
        root: Overrides the base path derived from ``game`` and ``api_type``
    """

    name: str
    game: Game
    path: str
    api_type: APIType
    schema: Any = dict
    namespace: Optional[Namespace] = None
    method: str = "GET"
    query: Mapping[str, str] = field(default_factory=dict)
    extract: Optional[Callable[[Any], Any]] = None
    prepare: Optional[Callable[[Params], Params]] = None
    defaults: Mapping[str, Any] = field(default_factory=dict)
    root: Optional[str] = None

    @property
    def qualified_name(self) -> str:
        return f"{self.game.value}.{self.name}"

    @property
    def base_path(self) -> str:
        if self.root is not None:
            return self.root
        return base_path(self.game, self.api_type)

    @property
    def path_parameters(self) -> Tuple[str, ...]:
        return tuple(
            name for _, name, _, _ in string.Formatter().parse(self.path) if name
        )

    def resolve(self, params: Mapping[str, Any]) -> Tuple[str, Dict[str, Any]]:
        """
        Render the full path and the endpoint-specific query.

        Args:
            params: Keyword parameters of the call

        Returns:
            ``(base_path + path, query)``

        Raises:
            HTTPError: ``malformed_body`` from ``prepare``, or
                ``malformed_request`` for a missing path parameter or an
                unknown keyword
        """
        values: Params = dict(self.defaults)
        values.update(params)
        if self.prepare is not None:
            values = self.prepare(values)

        segments = {}
        for name in self.path_parameters:
            value = values.get(name)
            if value is None or value == "":
                raise HTTPError.of(
                    ErrorType.MALFORMED_REQUEST,
                    f"Missing value for '{name}' in {self.qualified_name}"
                )
            segments[name] = quote(_segment(value), safe="")

        unknown = set(values) - set(segments) - set(self.query)
        if unknown:
            raise HTTPError.of(
                ErrorType.MALFORMED_REQUEST,
                f"Unknown parameter(s) for {self.qualified_name}: {', '.join(sorted(unknown))}"
            )

        query = {
            query_name: values[name]
            for name, query_name in self.query.items()
            if values.get(name) is not None
        }
        return self.base_path + self.path.format(**segments), query


def _segment(value: Any) -> str:
    if hasattr(value, "value"):
        value = value.value
    return str(value)


class EndpointRegistry:
    """Endpoints of every game, addressable as ``"{game}.{name}"``."""

    def __init__(self):
        self._endpoints: Dict[str, Endpoint] = {}

    def register(self, *endpoints: Endpoint) -> None:
        for endpoint in endpoints:
            if endpoint.qualified_name in self._endpoints:
                raise ValueError(f"Duplicate endpoint: {endpoint.qualified_name}")
            self._endpoints[endpoint.qualified_name] = endpoint

    def get(self, name: str) -> Endpoint:
        try:
            return self._endpoints[name]
        except KeyError:
            raise KeyError(f"Unknown endpoint: {name}") from None

    def for_game(self, game: Game) -> Dict[str, Endpoint]:
        return {e.name: e for e in self._endpoints.values() if e.game == Game(game)}

    def __contains__(self, name: object) -> bool:
        return name in self._endpoints

    def __iter__(self) -> Iterator[Endpoint]:
        return iter(self._endpoints.values())

    def __len__(self) -> int:
        return len(self._endpoints)


def require_one_of(*names: str, message: Optional[str] = None) -> Callable[[Params], Params]:
    """``prepare`` hook rejecting calls where none of ``names`` is given."""
    def prepare(params: Params) -> Params:
        if all(params.get(name) in (None, "") for name in names):
            raise HTTPError.of(
                ErrorType.MALFORMED_BODY,
                message or f"Must pass a value for {' or '.join(names)}"
            )
        return params
    return prepare


def require_choice(name: str, choices: Tuple[str, ...]) -> Callable[[Params], Params]:
    """``prepare`` hook rejecting a value of ``name`` outside ``choices``."""
    def prepare(params: Params) -> Params:
        value = _segment(params.get(name, ""))
        if value not in choices:
            raise HTTPError.of(
                ErrorType.MALFORMED_BODY,
                f"Invalid {name} '{value}'. Valid entries are {', '.join(choices)}"
            )
        params[name] = value
        return params
    return prepare
