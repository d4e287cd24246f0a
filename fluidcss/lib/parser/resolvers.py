"""
Argument resolvers for fluid().

Implements specific resolution strategies for the argument forms accepted by
fluid():
- Token references: `--name` looked up in a TokenTable snapshot
- Lengths: `<number>rem`, `<number>px` (converted) and bare numbers (rem)

ArgumentResolver dispatches between the two. Every resolver returns a
ResolveResult and never raises for bad input.
"""

import math
import re
from typing import Final, Self
from fluidcss.lib.log import LOG
from fluidcss.lib.tokens import NUMBER
from fluidcss.models.dataModel import FailureKind, ResolveResult, TokenTable

TOKEN_PREFIX: Final[str] = "--"

REM_VALUE: Final[re.Pattern[str]] = re.compile(rf"^({NUMBER})rem$", re.IGNORECASE)
PX_VALUE: Final[re.Pattern[str]] = re.compile(rf"^({NUMBER})px$", re.IGNORECASE)
BARE_VALUE: Final[re.Pattern[str]] = re.compile(rf"^({NUMBER})$")


class TokenReferenceResolver:
    """Resolver for `--name` references against a token table."""

    def __init__(self: Self, table: TokenTable) -> None:
        self.table: TokenTable = table

    def resolve(self: Self, raw: str) -> ResolveResult:
        """Look up a token reference.

        Args:
            raw: Token name including the leading --

        Returns:
            ResolveResult with the token's rem value, or an unresolved-token
            failure listing the available tokens
        """
        name: str = raw.strip()
        value: float | None = self.table.get(name)
        if value is not None:
            return ResolveResult.ok(value)

        available: str = ", ".join(self.table.names()) or "none"
        msg: str = f'Token "{name}" not found in tokens file. Available tokens: {available}'
        LOG(msg)
        return ResolveResult.fail(FailureKind.UNRESOLVED_TOKEN, msg)


class LengthResolver:
    """Resolver for rem, px and unit-less numeric arguments."""

    def __init__(self: Self, base_px_size: float = 16) -> None:
        self.base_px_size: float = base_px_size

    def resolve(self: Self, raw: str) -> ResolveResult:
        text: str = raw.strip()

        number: float | None = None
        if match := REM_VALUE.match(text):
            number = float(match.group(1))
        elif match := PX_VALUE.match(text):
            number = float(match.group(1)) / self.base_px_size
        elif match := BARE_VALUE.match(text):
            number = float(match.group(1))

        if number is not None:
            if math.isfinite(number):
                return ResolveResult.ok(number)
            msg: str = f'Numeric value out of range: "{text}"'
            LOG(msg)
            return ResolveResult.fail(FailureKind.MALFORMED_ARGUMENT, msg)

        msg = (
            f'Invalid numeric value: "{text}". '
            "Expected a number, px value, rem value, or --token-name"
        )
        LOG(msg)
        return ResolveResult.fail(FailureKind.MALFORMED_ARGUMENT, msg)


class ArgumentResolver:
    """Resolver for any fluid() argument.

    Token references go to a TokenReferenceResolver, everything else to a
    LengthResolver.
    """

    def __init__(self: Self, table: TokenTable, base_px_size: float = 16) -> None:
        self.tokens: TokenReferenceResolver = TokenReferenceResolver(table)
        self.lengths: LengthResolver = LengthResolver(base_px_size)

    def resolve(self: Self, raw: str) -> ResolveResult:
        if raw.strip().startswith(TOKEN_PREFIX):
            return self.tokens.resolve(raw)
        return self.lengths.resolve(raw)


def value_resolve(
    raw: str, table: TokenTable, base_px_size: float = 16
) -> ResolveResult:
    """Resolve a single fluid() argument to rem.

    Args:
        raw: The argument as written, surrounding whitespace allowed
        table: Token table snapshot for `--name` references
        base_px_size: Divisor for px to rem conversion

    Returns:
        ResolveResult with the value in rem, or a failure
    """
    return ArgumentResolver(table, base_px_size).resolve(raw)
