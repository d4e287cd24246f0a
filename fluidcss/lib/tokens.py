"""
Design-token table builder.

Parses `--name: value;` declarations from a token source into an immutable
TokenTable of rem values. Parsing is declaration oriented: any surrounding
structure (`:root { ... }`, comments, other rules) is ignored.

Value handling:
- `1.25rem` and `1.25` are stored as 1.25
- `20px` is stored as 20 / basePxSize
- anything else (other units, colours, var() references) is skipped

Example:
    table = tokens_parse(":root { --text-sm: 14px; }", base_px_size=16)
    table.get("--text-sm")  # 0.875
"""

import math
import re
from pathlib import Path
from typing import Final
from fluidcss.lib.log import LOG, COMPLAIN
from fluidcss.models.dataModel import TokenTable

NUMBER: Final[str] = r"[-+]?(?:\d+(?:\.\d*)?|\.\d+)"

TOKEN_DECLARATION: Final[re.Pattern[str]] = re.compile(r"--([^:;{}]+):\s*([^;{}]+);")
TOKEN_VALUE: Final[re.Pattern[str]] = re.compile(
    rf"^({NUMBER})(rem|px)?(?![\w%.])", re.IGNORECASE
)


def token_valueParse(value: str, base_px_size: float = 16) -> float | None:
    """Convert a token value to rem, or None if it is not a finite length we handle."""
    match: re.Match[str] | None = TOKEN_VALUE.match(value.strip())
    if not match:
        return None
    number: float = float(match.group(1))
    if not math.isfinite(number):
        return None
    if (match.group(2) or "").lower() == "px":
        return number / base_px_size
    return number


def tokens_parse(
    source_text: str, base_px_size: float = 16, source: str | None = None
) -> TokenTable:
    """Build a token table from token source text.

    Args:
        source_text: Text containing `--name: value;` declarations
        base_px_size: Divisor for px to rem conversion
        source: Optional label (file path) recorded on the table

    Returns:
        TokenTable with one entry per numeric declaration; later
        declarations of the same name replace earlier ones
    """
    tokens: dict[str, float] = {}
    skipped: list[str] = []

    for match in TOKEN_DECLARATION.finditer(source_text):
        name: str = f"--{match.group(1).strip()}"
        raw: str = match.group(2).strip()
        value: float | None = token_valueParse(raw, base_px_size)
        if value is None:
            COMPLAIN(f'Skipping token "{name}" with non-numeric value: "{raw}"')
            skipped.append(name)
            continue
        tokens[name] = value

    label: str = source or "token source"
    LOG(f"Loaded {len(tokens)} tokens from {label} ({len(skipped)} skipped)")
    if not tokens:
        COMPLAIN(f"No valid tokens found in {label}. Check file format.")

    return TokenTable(tokens=tokens, skipped=skipped, source=source)


def tokens_load(path: str | Path, base_px_size: float = 16) -> TokenTable:
    """Read a token file and build its table.

    A missing or unreadable file yields an empty table so that the pass can
    continue; every token reference then fails on its own.

    Args:
        path: Token file location, relative to the working directory
        base_px_size: Divisor for px to rem conversion

    Returns:
        TokenTable, empty if the file could not be read
    """
    resolved: Path = Path(path).expanduser().resolve()

    if not resolved.is_file():
        COMPLAIN(
            f"Token file not found: {resolved}. "
            "Make sure the file exists or update the tokensPath option."
        )
        return TokenTable(source=str(resolved))

    try:
        text: str = resolved.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as e:
        COMPLAIN(f"Could not read token file {resolved}: {e}")
        return TokenTable(source=str(resolved))

    return tokens_parse(text, base_px_size, source=str(resolved))
