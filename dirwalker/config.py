"""Configuration system for DirWalker.

This module defines how users specify a walk: the traversal mode, which
directories and files to prune, and whether (and how) siblings are ordered.
"""

import re
from dataclasses import dataclass, field, fields, replace
from enum import Enum
from typing import Any, Callable, Iterable, List, Optional, Tuple, Union

from .errors import InvalidConfiguration


class TraversalMode(Enum):
    """Where newly discovered children go relative to pending siblings."""
    DEPTH_FIRST = "dfs"      # Children explored before already-pending siblings
    BREADTH_FIRST = "bfs"    # Already-pending siblings explored first


class OrderDirection(Enum):
    """Emission order of siblings when ordering is enabled."""
    ASCENDING = "asc"
    DESCENDING = "desc"


_MODE_ALIASES = {
    'dfs': TraversalMode.DEPTH_FIRST,
    'depth': TraversalMode.DEPTH_FIRST,
    'depth_first': TraversalMode.DEPTH_FIRST,
    'bfs': TraversalMode.BREADTH_FIRST,
    'breadth': TraversalMode.BREADTH_FIRST,
    'breadth_first': TraversalMode.BREADTH_FIRST,
}

_DIRECTION_ALIASES = {
    'asc': OrderDirection.ASCENDING,
    'ascending': OrderDirection.ASCENDING,
    'desc': OrderDirection.DESCENDING,
    'descending': OrderDirection.DESCENDING,
}

# Version-control metadata is skipped unless asked for
DEFAULT_DIRECTORY_PRUNE: Tuple[str, ...] = (r"^\.git$", r"\.github$")
DEFAULT_FILE_PRUNE: Tuple[str, ...] = ()


def parse_mode(mode: Union[TraversalMode, str]) -> TraversalMode:
    """Parse a traversal mode from string or enum.

    Args:
        mode: Mode as enum or one of the accepted aliases

    Returns:
        TraversalMode enum value

    Raises:
        InvalidConfiguration: If the mode is not recognized
    """
    if isinstance(mode, TraversalMode):
        return mode
    if isinstance(mode, str):
        parsed = _MODE_ALIASES.get(mode.strip().lower())
        if parsed is not None:
            return parsed
    raise InvalidConfiguration(
        f"Unknown traversal mode: {mode!r}. "
        f"Choose from: {', '.join(_MODE_ALIASES)}"
    )


def parse_direction(direction: Union[OrderDirection, str]) -> OrderDirection:
    """Parse an order direction from string or enum.

    Raises:
        InvalidConfiguration: If the direction is not recognized
    """
    if isinstance(direction, OrderDirection):
        return direction
    if isinstance(direction, str):
        parsed = _DIRECTION_ALIASES.get(direction.strip().lower())
        if parsed is not None:
            return parsed
    raise InvalidConfiguration(
        f"Unknown order direction: {direction!r}. "
        f"Choose from: {', '.join(_DIRECTION_ALIASES)}"
    )


class PruneRule:
    """Predicate over a base name built from regular expression strings.

    Patterns are combined with OR and matched with ``re.search``, so a
    pattern matches anywhere in the name unless it anchors itself.
    An empty rule matches nothing.
    """

    def __init__(self, patterns: Union[str, Iterable[str], None] = ()):
        if patterns is None:
            patterns = ()
        elif isinstance(patterns, (str, re.Pattern)):
            patterns = (patterns,)
        try:
            patterns = tuple(patterns)
        except TypeError as e:
            raise InvalidConfiguration(
                f"Prune patterns must be a string or iterable of strings, got {patterns!r}"
            ) from e
        # Compiled patterns contribute their source; flags are not carried over
        self.patterns: Tuple[str, ...] = tuple(
            p.pattern if isinstance(p, re.Pattern) else p for p in patterns)

        for pattern in self.patterns:
            if not isinstance(pattern, str):
                raise InvalidConfiguration(
                    f"Prune patterns must be strings, got {pattern!r}"
                )

        self._regex: Optional[re.Pattern] = None
        if self.patterns:
            combined = "|".join(f"(?:{p})" for p in self.patterns)
            try:
                self._regex = re.compile(combined)
            except re.error as e:
                raise InvalidConfiguration(
                    f"Invalid prune pattern in {list(self.patterns)!r}: {e}"
                ) from e

    def matches(self, name: str) -> bool:
        """Check whether a base name is pruned by this rule."""
        if self._regex is None:
            return False
        return self._regex.search(name) is not None

    __call__ = matches

    def __bool__(self) -> bool:
        return self._regex is not None

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, PruneRule):
            return NotImplemented
        return self.patterns == other.patterns

    def __hash__(self) -> int:
        return hash(self.patterns)

    def __repr__(self) -> str:
        return f"PruneRule({list(self.patterns)!r})"


def _as_rule(value: Any) -> PruneRule:
    if isinstance(value, PruneRule):
        return value
    return PruneRule(value)


@dataclass(frozen=True)
class WalkConfig:
    """Complete configuration for a directory walk.

    Instances are immutable; use ``replace``-style helpers or ``build``
    to derive new ones. String values for ``mode`` and ``order_direction``
    and plain pattern iterables for the prune rules are normalized on
    construction; anything that cannot be normalized is reported by
    ``validate()``.

    Direct construction does not validate: ``WalkConfig(mode="zigzag")``
    builds an object whose ``validate()`` is non-empty. ``build()`` (used
    by TreeIterator) is the checked entry point and raises
    InvalidConfiguration. Malformed prune rules raise in either case.
    """

    # Traversal algorithm
    mode: Union[TraversalMode, str] = TraversalMode.DEPTH_FIRST

    # Pruning
    directory_prune: Union[PruneRule, Iterable[str]] = field(
        default_factory=lambda: PruneRule(DEFAULT_DIRECTORY_PRUNE))
    file_prune: Union[PruneRule, Iterable[str]] = field(
        default_factory=lambda: PruneRule(DEFAULT_FILE_PRUNE))

    # Sibling ordering
    ordered: bool = False
    order_direction: Union[OrderDirection, str] = OrderDirection.ASCENDING
    order_key: Callable[[str], Any] = str.lower

    def __post_init__(self):
        # Frozen dataclass: normalize through object.__setattr__
        object.__setattr__(self, 'directory_prune', _as_rule(self.directory_prune))
        object.__setattr__(self, 'file_prune', _as_rule(self.file_prune))
        for name, parser in (('mode', parse_mode), ('order_direction', parse_direction)):
            try:
                object.__setattr__(self, name, parser(getattr(self, name)))
            except InvalidConfiguration:
                pass  # Left as-is for validate() to report

    def validate(self) -> List[str]:
        """Validate configuration for consistency.

        Returns:
            List of validation errors (empty if valid)
        """
        errors = []

        if not isinstance(self.mode, TraversalMode):
            errors.append(f"unknown traversal mode {self.mode!r}")

        if not isinstance(self.order_direction, OrderDirection):
            errors.append(f"unknown order direction {self.order_direction!r}")

        if not isinstance(self.ordered, bool):
            errors.append(f"ordered must be a bool, got {self.ordered!r}")

        if not callable(self.order_key):
            errors.append(f"order_key must be callable, got {self.order_key!r}")

        return errors

    @classmethod
    def option_names(cls) -> Tuple[str, ...]:
        """Names accepted as keyword options by ``build``."""
        return tuple(f.name for f in fields(cls))

    @classmethod
    def build(cls, base: Optional['WalkConfig'] = None, **options) -> 'WalkConfig':
        """Create a validated config, optionally overriding ``base``.

        Args:
            base: Existing config to start from (defaults when None)
            **options: Field overrides

        Returns:
            Validated WalkConfig

        Raises:
            InvalidConfiguration: If any option is unknown or invalid
        """
        unknown = sorted(set(options) - set(cls.option_names()))
        if unknown:
            raise InvalidConfiguration(
                f"Unknown walk option(s): {', '.join(unknown)}. "
                f"Choose from: {', '.join(cls.option_names())}"
            )

        config = replace(base, **options) if base is not None else cls(**options)

        errors = config.validate()
        if errors:
            raise InvalidConfiguration(
                f"Invalid configuration: {'; '.join(errors)}"
            )
        return config

    # Convenience constructors for common configurations

    @classmethod
    def sorted(cls,
               direction: Union[OrderDirection, str] = OrderDirection.ASCENDING,
               **options) -> 'WalkConfig':
        """Create config with sibling ordering enabled.

        Args:
            direction: Emission order of siblings
            **options: Other field overrides

        Returns:
            Validated WalkConfig with ``ordered=True``
        """
        return cls.build(ordered=True, order_direction=direction, **options)

    @classmethod
    def unpruned(cls, **options) -> 'WalkConfig':
        """Create config that prunes nothing unless told otherwise."""
        options.setdefault('directory_prune', ())
        options.setdefault('file_prune', ())
        return cls.build(**options)

    def describe(self) -> str:
        """Multi-line summary of the configuration, for debugging."""
        mode = getattr(self.mode, 'name', self.mode)
        direction = getattr(self.order_direction, 'name', self.order_direction)
        key = getattr(self.order_key, '__qualname__', repr(self.order_key))
        return "\n".join([
            f"\tmode            = {mode}",
            f"\tdirectory_prune = {self.directory_prune!r}",
            f"\tfile_prune      = {self.file_prune!r}",
            f"\tordered         = {self.ordered}",
            f"\torder_direction = {direction}",
            f"\torder_key       = {key}",
        ])
