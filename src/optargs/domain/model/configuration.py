"""Expansion configuration.

Produced per declaration from project defaults and directive options.
None = feature disabled, value = feature enabled with that setting.
"""

from __future__ import annotations

import dataclasses
import keyword
from collections.abc import Mapping
from dataclasses import dataclass

from optargs.domain.model.enums import DispatchStrategy, OrderingMode

DISPATCHER_SUFFIX = "_opt"
BUILDER_SUFFIX = "_builder"

# Default warning threshold for shuffled ordering (5 optional parameters ~ 326 branches)
DEFAULT_WARN_THRESHOLD = 5


@dataclass(frozen=True, slots=True)
class ExpansionConfig:
    """Configuration record for one declaration.

    Immutable configuration object with FAIL-FIRST validation.

    Attributes:
        ordering: SEQUENTIAL or SHUFFLED keyword ordering
        export: Dispatcher is listed in the emitted module's __all__
        rename: Dispatcher name. None = declaration name plus suffix.
        strategy: BRANCHES (match table) or BUILDER (named setters)
        warn_threshold: Optional count at which a size warning is logged.
            None = never warn.
        max_optional: Hard cap on optional parameters. None = no cap.
    """

    ordering: OrderingMode = OrderingMode.SEQUENTIAL
    export: bool = True
    rename: str | None = None
    strategy: DispatchStrategy = DispatchStrategy.BRANCHES
    warn_threshold: int | None = DEFAULT_WARN_THRESHOLD
    max_optional: int | None = None

    def __post_init__(self) -> None:
        """Validate invariants. FAIL-FIRST."""
        if not isinstance(self.ordering, OrderingMode):
            raise TypeError(f"ordering must be OrderingMode, got {type(self.ordering).__name__}")

        if not isinstance(self.strategy, DispatchStrategy):
            raise TypeError(
                f"strategy must be DispatchStrategy, got {type(self.strategy).__name__}"
            )

        if self.rename is not None:
            if not self.rename.isidentifier() or keyword.iskeyword(self.rename):
                raise ValueError(f"rename must be an identifier, got {self.rename!r}")

        if self.warn_threshold is not None and self.warn_threshold < 1:
            raise ValueError(f"warn_threshold must be >= 1, got {self.warn_threshold}")

        if self.max_optional is not None and self.max_optional < 0:
            raise ValueError(f"max_optional must be >= 0, got {self.max_optional}")

    @property
    def shuffled(self) -> bool:
        """Check if every keyword permutation is recognized."""
        return self.ordering is OrderingMode.SHUFFLED

    def dispatcher_name(self, declaration_name: str) -> str:
        """Name the generated dispatcher is bound to.

        Args:
            declaration_name: Name of the expansion target

        Returns:
            Configured rename, or declaration name plus strategy suffix
        """
        if self.rename is not None:
            return self.rename
        if self.strategy is DispatchStrategy.BUILDER:
            return f"{declaration_name}{BUILDER_SUFFIX}"
        return f"{declaration_name}{DISPATCHER_SUFFIX}"

    def with_options(
        self,
        options: Mapping[str, object],
        *,
        allow_rename: bool = True,
    ) -> ExpansionConfig:
        """Return a copy with user-facing options applied.

        Recognized options:
            shuffle: bool, SHUFFLED when true
            export: bool
            rename: str (only when allow_rename)
            builder: bool, BUILDER strategy when true
            warn_threshold: int or None
            max_optional: int or None

        Args:
            options: Option name → literal value
            allow_rename: Whether 'rename' is accepted (per-declaration only)

        Returns:
            New ExpansionConfig

        Raises:
            ValueError: Unknown option or invalid value
            TypeError: Value of wrong type
        """
        changes: dict[str, object] = {}

        for key, value in options.items():
            match key:
                case "shuffle":
                    _require_bool(key, value)
                    changes["ordering"] = (
                        OrderingMode.SHUFFLED if value else OrderingMode.SEQUENTIAL
                    )
                case "export":
                    _require_bool(key, value)
                    changes["export"] = value
                case "builder":
                    _require_bool(key, value)
                    changes["strategy"] = (
                        DispatchStrategy.BUILDER if value else DispatchStrategy.BRANCHES
                    )
                case "rename" if allow_rename:
                    if value is not None and not isinstance(value, str):
                        raise TypeError(f"'rename' must be a string, got {type(value).__name__}")
                    changes["rename"] = value
                case "warn_threshold" | "max_optional":
                    is_int = isinstance(value, int) and not isinstance(value, bool)
                    if value is not None and not is_int:
                        raise TypeError(f"'{key}' must be an integer, got {type(value).__name__}")
                    changes[key] = value
                case _:
                    raise ValueError(f"unknown option '{key}'")

        return dataclasses.replace(self, **changes)


def _require_bool(key: str, value: object) -> None:
    if not isinstance(value, bool):
        raise TypeError(f"'{key}' must be a boolean, got {type(value).__name__}")
