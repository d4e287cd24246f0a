"""
Stylesheet driver.

Walks `property: value` declarations of a stylesheet with a pattern match
(no CSS AST) and hands each value containing fluid() to a FluidParser.
Values without fluid() are left byte for byte as they were, so running the
driver over its own output changes nothing.
"""

import re
from typing import Final
from fluidcss.lib.parser import FluidParser, fluid_has
from fluidcss.models.dataModel import StylesheetResult, TransformResult

# A value ends at ";", "}" or end of input; a "{" means we matched a
# selector such as a:hover
DECLARATION: Final[re.Pattern[str]] = re.compile(
    r"(?P<head>(?P<property>-{0,2}[A-Za-z_][\w-]*)\s*:\s*)(?P<value>[^;{}]+)(?=[;}]|\Z)"
)


def stylesheet_transform(css: str, parser: FluidParser) -> StylesheetResult:
    """Rewrite every fluid() call in a stylesheet.

    Args:
        css: Stylesheet text
        parser: Parser holding the token snapshot and breakpoint defaults

    Returns:
        StylesheetResult with the rewritten text and pass statistics
    """
    result: StylesheetResult = StylesheetResult(text=css)
    if not fluid_has(css):
        return result

    def declaration_rewrite(match: re.Match[str]) -> str:
        value: str = match.group("value")
        if not fluid_has(value):
            return match.group(0)
        outcome: TransformResult = parser.parse(value)
        result.declarations += 1
        result.replaced += outcome.replaced
        result.failures.extend(outcome.failures)
        return match.group("head") + outcome.text

    result.text = DECLARATION.sub(declaration_rewrite, css)
    return result
