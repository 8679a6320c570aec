"""Algorithm registry for AES-CBC-HMAC-SHA2 constructions."""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from types import MappingProxyType

from .errors import UnknownAlgorithmError
from .types import AlgorithmParameters

DEFAULT_ALGORITHMS = (
    AlgorithmParameters("aes-128-cbc-hmac-sha-256", "aes-128-cbc", "sha256", 16, 16, 16),
    AlgorithmParameters("aes-192-cbc-hmac-sha-384", "aes-192-cbc", "sha384", 24, 24, 24),
    AlgorithmParameters("aes-256-cbc-hmac-sha-512", "aes-256-cbc", "sha512", 32, 32, 32),
    AlgorithmParameters("aes-256-cbc-hmac-sha-384", "aes-256-cbc", "sha384", 24, 32, 24),
)


class AlgorithmRegistry:
    """Read-only mapping from algorithm name to its parameters.

    Safe to share between threads; the table cannot change after construction.
    """

    def __init__(self, algorithms: Iterable[AlgorithmParameters]) -> None:
        table: dict[str, AlgorithmParameters] = {}
        for params in algorithms:
            if params.name in table:
                raise ValueError(f"Duplicate algorithm name: {params.name}")
            table[params.name] = params
        self._algorithms = MappingProxyType(table)

    def resolve(self, name: str) -> AlgorithmParameters:
        """Look up an algorithm by name.

        Args:
            name: The algorithm name, e.g. ``aes-128-cbc-hmac-sha-256``.

        Returns:
            The algorithm parameters.

        Raises:
            UnknownAlgorithmError: If the name is not registered.
        """
        try:
            return self._algorithms[name]
        except KeyError:
            raise UnknownAlgorithmError(f"Unknown cipher {name}") from None

    def list_names(self) -> frozenset[str]:
        return frozenset(self._algorithms)

    def __contains__(self, name: object) -> bool:
        return name in self._algorithms

    def __iter__(self) -> Iterator[AlgorithmParameters]:
        return iter(self._algorithms.values())

    def __len__(self) -> int:
        return len(self._algorithms)


DEFAULT_REGISTRY = AlgorithmRegistry(DEFAULT_ALGORITHMS)
