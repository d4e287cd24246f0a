"""
fluid() replacement pass.

Finds every `fluid(...)` occurrence in a declaration value, resolves its
arguments through a ValueResolver strategy and substitutes the computed
clamp(). Occurrences are matched non-greedily up to the first closing
parenthesis and split on commas, so nested parentheses and commas inside
arguments are not supported.

Each occurrence fails on its own: a wrong argument count, an unresolved
argument or degenerate breakpoints leave that occurrence's original text in
place and record a FluidFailure, while the rest of the value is still
transformed.

Example:
    parser = FluidParser(resolver=ArgumentResolver(table))
    parser.transform("1rem fluid(1, 2)")
    # "1rem clamp(1.0000rem, 0.6383rem + 1.7021vw, 2.0000rem)"
"""

import re
from typing import Final, Protocol, Self, runtime_checkable
from fluidcss.lib.fluid import DegenerateBreakpointsError, fluid_interpolate
from fluidcss.lib.log import LOG, COMPLAIN
from fluidcss.models.dataModel import (
    ClampResult,
    FailureKind,
    FluidCall,
    FluidFailure,
    ResolveResult,
    TransformResult,
)

FLUID_CALL: Final[re.Pattern[str]] = re.compile(r"fluid\((.*?)\)")
FLUID_MARKER: Final[str] = "fluid("

MIN_ARGS: Final[int] = 2
MAX_ARGS: Final[int] = 4


@runtime_checkable
class ValueResolver(Protocol):
    """Protocol defining the resolver interface for fluid() arguments.

    Resolvers turn one raw argument into a rem value. They must not raise for
    bad input; failures are reported through the ResolveResult.
    """

    def resolve(self: Self, raw: str) -> ResolveResult:
        """Resolve a raw argument.

        Args:
            raw: Argument text as written inside fluid(), untrimmed

        Returns:
            ResolveResult containing:
                - value: rem value if successful
                - error: Error message if resolution failed
                - success: Whether resolution succeeded
        """
        ...


def fluid_has(value: str) -> bool:
    """Check whether a declaration value contains a fluid() call."""
    return FLUID_MARKER in value


class FluidParser:
    """Rewrites fluid() calls using a resolver strategy.

    Attributes:
        resolver: Strategy for resolving argument values
        min_breakpoint: Default start breakpoint in rem
        max_breakpoint: Default end breakpoint in rem
        precision: Decimal places in the emitted clamp()
    """

    def __init__(
        self: Self,
        resolver: ValueResolver,
        min_breakpoint: float = 21.25,
        max_breakpoint: float = 80.0,
        precision: int = 4,
    ) -> None:
        self.resolver: ValueResolver = resolver
        self.min_breakpoint: float = min_breakpoint
        self.max_breakpoint: float = max_breakpoint
        self.precision: int = precision

    def parse(self: Self, value: str) -> TransformResult:
        """Replace every resolvable fluid() call in a value.

        Args:
            value: Declaration value, e.g. "1rem fluid(--space-sm, 2)"

        Returns:
            TransformResult with the new text, the number of replacements and
            the occurrences that were left untouched
        """
        result: TransformResult = TransformResult(text=value)
        if not fluid_has(value):
            return result

        def substitute(match: re.Match[str]) -> str:
            call: FluidCall = FluidCall.from_inner(match.group(0), match.group(1))
            outcome: ClampResult | FluidFailure = self.call_evaluate(call)
            if isinstance(outcome, FluidFailure):
                COMPLAIN(f"Leaving {call.text} unchanged: {outcome.reason}")
                result.failures.append(outcome)
                return call.text
            result.replaced += 1
            return outcome.css

        result.text = FLUID_CALL.sub(substitute, value)
        LOG(
            f"Rewrote {result.replaced} fluid() call(s), "
            f"{len(result.failures)} left unchanged"
        )
        return result

    def transform(self: Self, value: str) -> str:
        """Return the value with every resolvable fluid() call replaced."""
        return self.parse(value).text

    def call_evaluate(self: Self, call: FluidCall) -> ClampResult | FluidFailure:
        """Compute the clamp() for one fluid() occurrence.

        Args:
            call: The parsed occurrence

        Returns:
            Either:
                - ClampResult: The interpolation result
                - FluidFailure: Why the occurrence must be left as is
        """
        count: int = len(call.args)
        if count < MIN_ARGS or count > MAX_ARGS:
            return FluidFailure(
                call=call.text,
                kind=FailureKind.ARITY_ERROR,
                reason=f"expected {MIN_ARGS}-{MAX_ARGS} parameters, got {count}",
            )

        values: list[float] = []
        for raw in call.args:
            resolved: ResolveResult = self.resolver.resolve(raw)
            if not resolved.success or resolved.value is None:
                return FluidFailure(
                    call=call.text,
                    kind=resolved.kind or FailureKind.MALFORMED_ARGUMENT,
                    reason=resolved.error or f'could not resolve "{raw.strip()}"',
                )
            values.append(resolved.value)

        # Defaults fill the missing positions, so a lone third argument
        # keeps the default maxBreakpoint
        defaults: list[float] = [self.min_breakpoint, self.max_breakpoint]
        min_size, max_size, min_breakpoint, max_breakpoint = (
            values + defaults[count - MIN_ARGS :]
        )

        try:
            return fluid_interpolate(
                min_size, max_size, min_breakpoint, max_breakpoint, self.precision
            )
        except DegenerateBreakpointsError as e:
            return FluidFailure(
                call=call.text,
                kind=FailureKind.CONFIGURATION_DEGENERATE,
                reason=str(e),
            )
        except OverflowError as e:
            return FluidFailure(
                call=call.text,
                kind=FailureKind.MALFORMED_ARGUMENT,
                reason=f"value out of range: {e}",
            )
