import pytest

from mathlayout import Atom, LayoutError, Options, Settings, render
from mathlayout import Style, fontMetrics, registers
from mathlayout.utils import toCss


def test_style_transitions():
    display = Style.styles[Style.D]
    assert display.sup() is Style.styles[Style.S]
    assert display.sub() is Style.styles[Style.Sc]
    assert display.fracNum() is Style.styles[Style.T]
    assert display.fracDen() is Style.styles[Style.Tc]
    assert Style.SCRIPT.sup() is Style.SCRIPTSCRIPT
    assert Style.SCRIPTSCRIPT.sup() is Style.SCRIPTSCRIPT


def test_cramp_is_idempotent():
    cramped = Style.TEXT.cramp()
    assert cramped.cramped
    assert cramped.cramp() is cramped
    assert cramped.size == Style.TEXT.size


def test_tight_styles():
    assert not Style.DISPLAY.isTight()
    assert not Style.TEXT.isTight()
    assert Style.SCRIPT.isTight()
    assert Style.SCRIPTSCRIPT.isTight()


def test_display_and_text_share_metrics():
    assert Style.DISPLAY.metrics.num1 == Style.TEXT.metrics.num1
    assert Style.TEXT.metrics["axisHeight"] == pytest.approx(0.25)


def test_root_options(textOptions, displayOptions):
    assert textOptions.mathstyle is Style.TEXT
    assert displayOptions.mathstyle is Style.DISPLAY
    assert displayOptions.isDisplayStyle
    assert displayOptions.extend(mathstyle="cramp").isDisplayStyle
    assert not textOptions.isDisplayStyle
    assert textOptions.scalingFactor == 1.0


def test_scaling_factor(textOptions):
    sup = textOptions.extend(mathstyle="superscript")
    assert sup.mathstyle is Style.SCRIPT
    assert sup.scalingFactor == pytest.approx(0.7)
    supsup = sup.extend(mathstyle="superscript")
    assert supsup.scalingFactor == pytest.approx(0.5 / 0.7)
    assert supsup.isTight


def test_size_change(textOptions):
    large = textOptions.extend(size=7)
    assert large.effectiveFontSize == pytest.approx(1.44)
    assert large.scalingFactor == pytest.approx(1.44)
    # The same size as the parent is no change
    assert large.extend(size=7).scalingFactor == 1.0


@pytest.mark.parametrize("size", [0, 11, -2])
def test_invalid_size(textOptions, size):
    with pytest.raises(LayoutError):
        textOptions.extend(size=size)
    with pytest.raises(LayoutError):
        Options(size=size)


def test_invalid_size_in_style():
    with pytest.raises(LayoutError):
        render([Atom("ord", value="x", style={"fontSize": 11})])


def test_min_font_scale():
    options = Options(settings=Settings(minFontScale=0.6))
    small = options.extend(mathstyle="scriptscriptstyle")
    assert small.effectiveFontSize == pytest.approx(0.6)


def test_named_styles(textOptions):
    assert textOptions.extend(mathstyle="displaystyle").mathstyle is Style.DISPLAY
    assert textOptions.extend(mathstyle="auto").mathstyle is Style.TEXT
    assert textOptions.extend(mathstyle="numerator").mathstyle is Style.SCRIPT
    assert textOptions.extend(mathstyle="denominator").mathstyle is Style.styles[Style.Sc]


def test_colors(textOptions):
    red = textOptions.extend(color="red")
    assert red.getColor() == "#d7170b"
    assert red.extend().getColor() == "#d7170b"
    assert red.extend(color="#123456").getColor() == "#123456"
    assert red.extend(isPhantom=True).getColor() == "transparent"


def test_color_map():
    options = Options(settings=Settings(colorMap={"red": "#f00"}))
    assert options.extend(color="red").getColor() == "#f00"


def test_registers(textOptions):
    assert textOptions.getRegisterAsEm("thinmuskip") == pytest.approx(1 / 6)
    # Only the natural size of glue counts
    assert textOptions.getRegisterAsEm("medmuskip") == pytest.approx(4 / 18)
    assert textOptions.getRegisterAsEm("thickmuskip") == pytest.approx(5 / 18)
    assert textOptions.getRegisterAsEm("jot") == pytest.approx(0.3)
    assert textOptions.getRegisterAsNumber("delimiterfactor") == 901
    assert textOptions.getRegisterAsEm("nonexistent") == 0
    assert textOptions.getRegisterAsNumber("nonexistent") is None


def test_register_overrides():
    options = Options(settings=Settings(registers={"thickmuskip": "9mu"}))
    assert options.getRegisterAsEm("thickmuskip") == pytest.approx(0.5)
    assert options.getRegisterAsEm("thinmuskip") == pytest.approx(1 / 6)


def test_registers_are_scoped(textOptions):
    child = textOptions.extend()
    child.setRegister("jot", "1em")
    assert child.getRegisterAsEm("jot") == pytest.approx(1)
    assert child.extend().getRegisterAsEm("jot") == pytest.approx(1)
    assert textOptions.getRegisterAsEm("jot") == pytest.approx(0.3)
    child.setRegister("jot", None)
    assert child.getRegisterAsEm("jot") == pytest.approx(0.3)


def test_parse_dimension():
    assert registers.parseDimension("3mu") == (3.0, "mu")
    assert registers.parseDimension("1.5 cm") == (1.5, "cm")
    assert registers.parseDimension("-.5em") == (-0.5, "em")
    assert registers.parseDimension(2) == (2.0, "pt")
    assert registers.parseDimension((1, "in")) == (1.0, "in")
    assert registers.convertDimensionToEm("1in") == pytest.approx(7.227)
    assert registers.convertDimensionToEm("18mu") == pytest.approx(1)


@pytest.mark.parametrize("value", ["abc", "2xx", (1, "yy")])
def test_invalid_dimension(value):
    with pytest.raises(LayoutError):
        registers.parseDimension(value)


def test_settings_defaults():
    settings = Settings()
    assert not settings.displayMode
    assert not settings.throwOnError
    assert settings.errorColor == "#cc0000"
    assert settings.letterShapeStyle == "tex"


def test_invalid_settings():
    with pytest.raises(LayoutError):
        Settings(letterShapeStyle="italic")
    with pytest.raises(LayoutError):
        Settings(minFontScale=-1)


def test_character_metrics():
    metrics = fontMetrics.getCharacterMetrics("x", "Math-Italic")
    assert metrics["height"] == pytest.approx(0.43056)
    assert not metrics["defaultMetrics"]

    # Unknown characters get a default box
    metrics = fontMetrics.getCharacterMetrics("☃", "Main-Regular")
    assert metrics["defaultMetrics"]
    assert metrics["height"] > 0


def test_register_font_metrics():
    assert not fontMetrics.hasCharacterMetrics("q", "Test-Regular")
    fontMetrics.registerFontMetrics("Test-Regular", {"q": [0.1, 0.5, 0, 0, 0.5]})
    assert fontMetrics.hasCharacterMetrics("q", "Test-Regular")
    metrics = fontMetrics.getCharacterMetrics("q", "Test-Regular")
    assert metrics["depth"] == pytest.approx(0.1)
    assert metrics["height"] == pytest.approx(0.5)


def test_to_css():
    assert toCss(0) == "0"
    assert toCss(0.7 * 100, "%") == "70%"
    assert toCss(0.123456, "em") == "0.12em"
    assert toCss(-0.5, "em") == "-0.5em"
    assert toCss("inherit") == "inherit"


def test_style_class_names():
    assert Style.DISPLAY.cls() == "displaystyle textstyle uncramped"
    assert Style.SCRIPT.cramp().cls() == "scriptstyle cramped"
