"""
dataModel.py

This module defines the data models used throughout fluidcss. The models
leverage Pydantic for validation and type safety.

Features:
- Token table snapshot built from a design-token source
- Resolution results for individual fluid() arguments
- clamp() results and their CSS rendering
- Per-occurrence failure records and pass-level results

Usage:
Import these models to structure data flowing between the token builder,
resolvers, interpolator and stylesheet driver.
"""

from enum import Enum
from pydantic import BaseModel, ConfigDict, Field


class FailureKind(Enum):
    """
    Why a token or fluid() occurrence could not be used.
    """

    MISSING_TOKEN_SOURCE = "missing-token-source"
    UNRESOLVED_TOKEN = "unresolved-token"
    MALFORMED_ARGUMENT = "malformed-argument"
    ARITY_ERROR = "arity-error"
    CONFIGURATION_DEGENERATE = "configuration-degenerate"


class TokenTable(BaseModel):
    """Immutable mapping of token name to rem value.

    Attributes:
        tokens: Token name (including the leading --) to value in rem
        skipped: Names of declarations whose value was not numeric
        source: Where the tokens were read from, if a file
    """

    model_config = ConfigDict(frozen=True)

    tokens: dict[str, float] = Field(default_factory=dict)
    skipped: list[str] = Field(default_factory=list)
    source: str | None = None

    def get(self, name: str) -> float | None:
        return self.tokens.get(name)

    def names(self) -> list[str]:
        return list(self.tokens)

    def __contains__(self, name: object) -> bool:
        return name in self.tokens

    def __len__(self) -> int:
        return len(self.tokens)


class ResolveResult(BaseModel):
    """Result of resolving a single fluid() argument.

    A failed resolution carries no value, so it can never be mistaken for a
    legitimate zero.

    Attributes:
        value: Resolved value in rem if successful
        error: Error message if resolution failed
        success: Whether resolution succeeded
        kind: Failure classification when unsuccessful
    """

    value: float | None
    error: str | None
    success: bool
    kind: FailureKind | None = None

    @classmethod
    def ok(cls, value: float) -> "ResolveResult":
        return cls(value=value, error=None, success=True)

    @classmethod
    def fail(cls, kind: FailureKind, error: str) -> "ResolveResult":
        return cls(value=None, error=error, success=False, kind=kind)


class FluidCall(BaseModel):
    """A fluid() occurrence as found in a declaration value.

    Attributes:
        text: The full matched text, e.g. "fluid(1, 2)"
        args: Raw argument strings, untrimmed
    """

    text: str
    args: list[str]

    @classmethod
    def from_inner(cls, text: str, inner: str) -> "FluidCall":
        return cls(text=text, args=inner.split(","))


class ClampResult(BaseModel):
    """A computed clamp() expression.

    Attributes:
        minimum: Lower bound in rem
        intercept: Preferred value at a zero-width viewport, in rem
        slope: Change in rem per rem of viewport width
        maximum: Upper bound in rem
        precision: Decimal places used when rendering
    """

    minimum: float
    intercept: float
    slope: float
    maximum: float
    precision: int = 4

    def _fixed(self, value: float) -> str:
        # -0.0 renders as "0.0000", not "-0.0000"
        return f"{value + 0.0:.{self.precision}f}"

    @property
    def preferred(self) -> str:
        return f"{self._fixed(self.intercept)}rem + {self._fixed(self.slope * 100)}vw"

    @property
    def css(self) -> str:
        return (
            f"clamp({self._fixed(self.minimum)}rem, {self.preferred}, "
            f"{self._fixed(self.maximum)}rem)"
        )

    def __str__(self) -> str:
        return self.css


class FluidFailure(BaseModel):
    """A fluid() occurrence that was left untouched.

    Attributes:
        call: The original matched text
        kind: Failure classification
        reason: Human readable cause
    """

    call: str
    kind: FailureKind
    reason: str


class TransformResult(BaseModel):
    """Result of transforming one declaration value.

    Attributes:
        text: The value with every resolvable fluid() replaced
        replaced: Number of fluid() occurrences rewritten
        failures: Occurrences left as they were
    """

    text: str
    replaced: int = 0
    failures: list[FluidFailure] = Field(default_factory=list)

    @property
    def success(self) -> bool:
        return not self.failures


class StylesheetResult(BaseModel):
    """Result of transforming a whole stylesheet.

    Attributes:
        text: The rewritten stylesheet
        declarations: Declarations whose value contained fluid()
        replaced: Total fluid() occurrences rewritten
        failures: Total occurrences left untouched
    """

    text: str
    declarations: int = 0
    replaced: int = 0
    failures: list[FluidFailure] = Field(default_factory=list)
