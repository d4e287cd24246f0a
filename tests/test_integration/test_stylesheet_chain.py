"""Integration tests: token file -> transform pass -> stylesheet."""

import pytest
from fluidcss.config.settings import FluidSettings
from fluidcss.lib.stylesheet import stylesheet_transform
from fluidcss.lib.transform import FluidTransform
from fluidcss.models.dataModel import FailureKind

TOKENS_CSS = """
:root {
  --text-sm: 0.875rem;
  --text-lg: 1.125rem;
  --text-xl: 1.25rem;
  --space-sm: 0.5rem;
  --space-lg: 1.5rem;
  --text-px-sm: 14px;
  --text-px-lg: 20px;
}
"""

STYLESHEET = """\
.title { font-size: fluid(--text-sm, --text-xl); color: blue; }
.box:hover {
  margin: fluid(0.5, 1) fluid(--space-sm, --space-lg);
  padding: 1rem fluid(0.5, 2) 0;
}
@media (min-width: 40rem) {
  .px { font-size: fluid(--text-px-sm, --text-px-lg) }
}
.broken { gap: fluid(--missing, 2); }
"""

EXPECTED = """\
.title { font-size: clamp(0.8750rem, 0.7394rem + 0.6383vw, 1.2500rem); color: blue; }
.box:hover {
  margin: clamp(0.5000rem, 0.3191rem + 0.8511vw, 1.0000rem) clamp(0.5000rem, 0.1383rem + 1.7021vw, 1.5000rem);
  padding: 1rem clamp(0.5000rem, -0.0426rem + 2.5532vw, 2.0000rem) 0;
}
@media (min-width: 40rem) {
  .px { font-size: clamp(0.8750rem, 0.7394rem + 0.6383vw, 1.2500rem) }
}
.broken { gap: fluid(--missing, 2); }
"""


@pytest.fixture
def tokens_file(tmp_path):
    path = tmp_path / "tokens.css"
    path.write_text(TOKENS_CSS, encoding="utf-8")
    return path


@pytest.fixture
def fluid(tokens_file):
    transform = FluidTransform(FluidSettings(tokensPath=str(tokens_file)))
    transform.prepare()
    return transform


def test_stylesheet_rewrite(fluid):
    result = fluid.stylesheet(STYLESHEET)
    assert result.text == EXPECTED
    assert result.declarations == 5
    assert result.replaced == 5
    assert [f.kind for f in result.failures] == [FailureKind.UNRESOLVED_TOKEN]


def test_second_pass_is_noop(fluid):
    once = fluid.stylesheet(STYLESHEET).text
    twice = fluid.stylesheet(once)
    assert twice.text == once
    assert twice.replaced == 0


def test_stylesheet_without_fluid_is_untouched(fluid):
    css = ".test { font-size: 1rem; color: blue; }"
    result = fluid.stylesheet(css)
    assert result.text == css
    assert result.declarations == 0


def test_custom_property_values_are_rewritten(fluid):
    result = fluid.stylesheet(":root { --step-0: fluid(1, 2); }")
    assert result.text == (
        ":root { --step-0: clamp(1.0000rem, 0.6383rem + 1.7021vw, 2.0000rem); }"
    )


def test_transform_prepares_implicitly(tokens_file):
    fluid = FluidTransform(FluidSettings(tokensPath=str(tokens_file)))
    assert fluid.transform("fluid(--text-sm, --text-xl)") == (
        "clamp(0.8750rem, 0.7394rem + 0.6383vw, 1.2500rem)"
    )
    assert fluid.table is not None


def test_prepare_picks_up_token_changes(fluid, tokens_file):
    tokens_file.write_text("--text-sm: 1rem; --text-xl: 2rem;", encoding="utf-8")
    assert fluid.transform("fluid(--text-sm, --text-xl)") != (
        "clamp(1.0000rem, 0.6383rem + 1.7021vw, 2.0000rem)"
    )
    fluid.prepare()
    assert fluid.transform("fluid(--text-sm, --text-xl)") == (
        "clamp(1.0000rem, 0.6383rem + 1.7021vw, 2.0000rem)"
    )


def test_missing_token_file_only_breaks_token_calls(tmp_path):
    fluid = FluidTransform(FluidSettings(tokensPath=str(tmp_path / "absent.css")))
    table = fluid.prepare()
    assert len(table) == 0
    result = fluid.parse("fluid(--text-sm, 2) fluid(1, 2)")
    assert result.text == (
        "fluid(--text-sm, 2) clamp(1.0000rem, 0.6383rem + 1.7021vw, 2.0000rem)"
    )


def test_settings_drive_the_pass(tokens_file):
    settings = FluidSettings(
        tokensPath=str(tokens_file), minBreakpoint=20, maxBreakpoint=80, basePxSize=10
    )
    fluid = FluidTransform(settings)
    assert fluid.transform("fluid(10px, 20px)") == (
        "clamp(1.0000rem, 0.6667rem + 1.6667vw, 2.0000rem)"
    )


def test_stylesheet_transform_with_parser(fluid):
    result = stylesheet_transform("a { b: fluid(1, 2) }", fluid.parser)
    assert result.text == "a { b: clamp(1.0000rem, 0.6383rem + 1.7021vw, 2.0000rem) }"


def test_trailing_declaration_without_terminator(fluid):
    result = fluid.stylesheet("width: fluid(1, 2)")
    assert result.text == "width: clamp(1.0000rem, 0.6383rem + 1.7021vw, 2.0000rem)"
    assert result.declarations == 1


def test_unterminated_failure_is_recorded(fluid):
    result = fluid.stylesheet(".a { gap: 1rem; } margin: fluid(--missing, 1)")
    assert result.text == ".a { gap: 1rem; } margin: fluid(--missing, 1)"
    assert [f.kind for f in result.failures] == [FailureKind.UNRESOLVED_TOKEN]


def test_huge_token_value_does_not_stop_the_pass(tmp_path):
    path = tmp_path / "tokens.css"
    path.write_text(f"--a: {'9' * 400}px; --b: 2rem;", encoding="utf-8")
    fluid = FluidTransform(FluidSettings(tokensPath=str(path)))
    result = fluid.stylesheet(".x { a: fluid(--a, 1); b: fluid(1, --b); }")
    assert result.replaced == 1
    assert [f.kind for f in result.failures] == [FailureKind.UNRESOLVED_TOKEN]
    assert "clamp(1.0000rem, 0.6383rem + 1.7021vw, 2.0000rem)" in result.text
