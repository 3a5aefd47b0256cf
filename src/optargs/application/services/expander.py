"""Expander service: one synchronous pass per declaration.

Validate → Enumerate → Synthesize× → Assemble.
No state is kept between declarations; each expand() call is independent.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from optargs.application.services.assembler import assemble
from optargs.application.services.combinations import count_combinations, iter_combinations
from optargs.application.services.synthesizer import synthesize_branch, synthesize_fallback
from optargs.application.services.validator import validate_suffix
from optargs.domain.exceptions.configuration import ConfigurationError
from optargs.domain.exceptions.structural import ExpansionLimitError
from optargs.domain.model.configuration import ExpansionConfig
from optargs.domain.model.enums import DispatchStrategy, OrderingMode
from optargs.domain.model.expansion import Expansion

if TYPE_CHECKING:
    from collections.abc import Iterable

    from optargs.domain.model.declaration import AnnotatedDeclaration, Declaration
    from optargs.domain.model.signature import Signature

logger = logging.getLogger(__name__)

# Sequential output grows as 2^n rather than ~e*n!, so it tolerates more parameters
SEQUENTIAL_THRESHOLD_FACTOR = 2


class Expander:
    """Turns declarations into expansions.

    Stateless between expand() calls.
    FAIL-FIRST: the first error aborts the declaration, nothing partial is returned.
    """

    def __init__(self, defaults: ExpansionConfig | None = None) -> None:
        """Initialize expander.

        Args:
            defaults: Configuration used when expand() receives none
        """
        self._defaults = defaults or ExpansionConfig()

    @property
    def defaults(self) -> ExpansionConfig:
        """Configuration applied when none is given."""
        return self._defaults

    def expand(
        self,
        declaration: Declaration,
        config: ExpansionConfig | None = None,
    ) -> Expansion:
        """Expand one declaration.

        Args:
            declaration: Declaration with its ordered parameter list
            config: Configuration, defaults if None

        Returns:
            Expansion with the declaration and its dispatcher

        Raises:
            StructuralError: Suffix invariant violated
            ExpansionLimitError: More optional parameters than max_optional
            ConfigurationError: Dispatcher name would shadow the declaration
        """
        config = config or self._defaults

        dispatcher_name = config.dispatcher_name(declaration.name)
        if dispatcher_name == declaration.name:
            raise ConfigurationError(
                None, "rename", f"dispatcher cannot reuse the declaration name '{declaration.name}'"
            )

        signature = validate_suffix(declaration)

        if config.strategy is DispatchStrategy.BUILDER:
            logger.debug("expanding %s as builder %s", declaration.name, dispatcher_name)
            return Expansion(declaration=declaration, config=config, signature=signature)

        self._check_size(declaration, signature, config)

        logger.debug(
            "expanding %s: %d required, %d optional, %s",
            declaration.name,
            signature.split,
            len(signature.optional),
            config.ordering.value,
        )

        branches = [
            synthesize_branch(signature, subset, declaration.name, declaration.kind)
            for subset in iter_combinations(signature.optional_names, config.ordering)
        ]
        fallback = synthesize_fallback(dispatcher_name)

        expansion = assemble(declaration, config, signature, branches, fallback)
        logger.debug(
            "assembled %s with %d branches", dispatcher_name, expansion.branch_count
        )
        return expansion

    def expand_all(self, items: Iterable[AnnotatedDeclaration]) -> tuple[Expansion, ...]:
        """Expand annotated declarations in order.

        Raises:
            OptArgsError: From the first declaration that fails
        """
        return tuple(self.expand(item.declaration, item.config) for item in items)

    def _check_size(
        self,
        declaration: Declaration,
        signature: Signature,
        config: ExpansionConfig,
    ) -> None:
        """Apply max_optional cap and log size warnings."""
        n = len(signature.optional)

        if config.max_optional is not None and n > config.max_optional:
            first_excess = signature.optional[config.max_optional].parameter
            raise ExpansionLimitError(
                declaration.name,
                first_excess.name,
                n,
                config.max_optional,
                first_excess.location or declaration.location,
            )

        if config.warn_threshold is None:
            return

        threshold = config.warn_threshold
        if config.ordering is OrderingMode.SEQUENTIAL:
            threshold *= SEQUENTIAL_THRESHOLD_FACTOR

        if n >= threshold:
            logger.warning(
                "%s: %d optional parameters with %s ordering generate %d branches; "
                "consider fewer optional parameters or builder=True",
                declaration.name,
                n,
                config.ordering.value,
                count_combinations(n, config.ordering),
            )
