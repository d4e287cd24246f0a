"""
Transform pass.

A FluidTransform owns one pass over one or more stylesheets. `prepare()`
re-reads the token source and builds a fresh, immutable token snapshot and a
parser bound to it. Nothing is cached between passes, so edits to the token
file are always picked up on the next `prepare()`.

Example:
    fluid = FluidTransform(settings_build({"tokensPath": "tokens.css"}))
    fluid.prepare()
    fluid.transform("fluid(--text-sm, --text-xl)")
"""

from pathlib import Path
from typing import Self
from fluidcss.config.settings import FluidSettings, appsettings
from fluidcss.lib.log import LOG, log_configure
from fluidcss.lib.parser import ArgumentResolver, FluidParser
from fluidcss.lib.stylesheet import stylesheet_transform
from fluidcss.lib.tokens import tokens_load
from fluidcss.models.dataModel import StylesheetResult, TokenTable, TransformResult


class FluidTransform:
    """One transform pass with its token snapshot.

    Attributes:
        settings: Configuration for this pass
        table: Token snapshot, None until prepared
        parser: Parser bound to the snapshot, None until prepared
    """

    def __init__(self: Self, settings: FluidSettings | None = None) -> None:
        self.settings: FluidSettings = settings or appsettings
        self.table: TokenTable | None = None
        self.parser: FluidParser | None = None
        log_configure(self.settings)

    def prepare(self: Self, tokens_path: str | Path | None = None) -> TokenTable:
        """Rebuild the token snapshot and parser.

        Args:
            tokens_path: Token file to read instead of settings.tokensPath

        Returns:
            The new token table
        """
        self.parser_build(tokens_path)
        return self.table

    def parser_build(self: Self, tokens_path: str | Path | None = None) -> FluidParser:
        """Read the token source and bind a new parser to its snapshot."""
        path: str | Path = tokens_path or self.settings.tokensPath
        LOG(f"Preparing fluid transform with tokens from {path}")
        table: TokenTable = tokens_load(path, self.settings.basePxSize)
        parser: FluidParser = FluidParser(
            resolver=ArgumentResolver(table, self.settings.basePxSize),
            min_breakpoint=self.settings.minBreakpoint,
            max_breakpoint=self.settings.maxBreakpoint,
            precision=self.settings.precision,
        )
        self.table = table
        self.parser = parser
        return parser

    def parser_get(self: Self) -> FluidParser:
        if self.parser is not None:
            return self.parser
        return self.parser_build()

    def parse(self: Self, value: str) -> TransformResult:
        return self.parser_get().parse(value)

    def transform(self: Self, value: str) -> str:
        """Transform one declaration value."""
        return self.parser_get().transform(value)

    def stylesheet(self: Self, css: str) -> StylesheetResult:
        """Transform every declaration of a stylesheet."""
        return stylesheet_transform(css, self.parser_get())
