import pytest

from mathlayout import Atom, GenfracOptions, LayoutError, RuleOptions, Settings, render
from mathlayout.fontMetrics import AXIS_HEIGHT, Metrics

NORMAL = Metrics(0)
SCRIPT_SCALE = 0.7

# Math-Italic metrics of the letters used below
A_HEIGHT = 0.43056
B_HEIGHT = 0.69444
G_HEIGHT = 0.43056
G_DEPTH = 0.19444


def fraction(ords, above, below, **options):
    return Atom("genfrac", above=ords(above), below=ords(below), params=GenfracOptions(**options))


def test_rule_thickness(ords, findClass):
    root = render([fraction(ords, "a", "b")], Settings(displayMode=True))
    line = findClass(root, "ML__frac-line")
    assert line.height + line.depth == pytest.approx(NORMAL.defaultRuleThickness)


def test_display_fraction(ords, findClass):
    root = render([fraction(ords, "a", "b")], Settings(displayMode=True))
    frac = findClass(root, "mfrac")
    assert frac.type == "inner"
    # Neither shift needs clamping: the numerator sits at num1 and the
    # denominator at denom1
    assert frac.height == pytest.approx(NORMAL.num1 + A_HEIGHT)
    assert frac.depth == pytest.approx(NORMAL.denom1)


def test_numerator_clears_the_rule(ords, findClass):
    # A deep numerator in text style pushes the numerator up
    root = render([fraction(ords, "g", "b")])
    frac = findClass(root, "mfrac")
    theta = NORMAL.defaultRuleThickness
    numShift = AXIS_HEIGHT + theta / 2 + theta + G_DEPTH * SCRIPT_SCALE
    assert numShift > NORMAL.num2
    assert frac.height == pytest.approx(numShift + G_HEIGHT * SCRIPT_SCALE)
    assert frac.depth == pytest.approx(NORMAL.denom2)
    assert numShift - G_DEPTH * SCRIPT_SCALE - theta / 2 - AXIS_HEIGHT >= theta - 1e-9


def test_fraction_without_bar(ords, find, findClass):
    root = render([fraction(ords, "a", "b", hasBarLine=False)], Settings(displayMode=True))
    assert not find(root, lambda box: "ML__frac-line" in box.classes)
    frac = findClass(root, "mfrac")
    # The clearance is wide enough: the shifts are num1 and denom1
    assert frac.height == pytest.approx(NORMAL.num1 + A_HEIGHT)
    assert frac.depth == pytest.approx(NORMAL.denom1)


def test_fraction_without_bar_splits_the_clearance(ords, findClass):
    # A numerator 0.3em deep, over a "b"
    rule = Atom("rule", params=RuleOptions(width="1em", height="0.5em", shift="-0.3em"))
    frac = Atom("genfrac", above=[rule], below=ords("b"), params=GenfracOptions(hasBarLine=False))
    root = render([frac], Settings(displayMode=True))
    result = findClass(root, "mfrac")

    candidate = (NORMAL.num1 - 0.3) - (B_HEIGHT - NORMAL.denom1)
    clearance = 7 * NORMAL.defaultRuleThickness
    assert candidate < clearance
    delta = (clearance - candidate) / 2
    assert result.height == pytest.approx(NORMAL.num1 + delta + 0.2)
    assert result.depth == pytest.approx(NORMAL.denom1 + delta)



def test_null_delimiters_pad_the_fraction(ords, find):
    root = render([fraction(ords, "a", "b")])
    assert len(find(root, lambda box: "nulldelimiter" in box.classes)) == 2


def test_delimiters(ords, findClass, findValue):
    root = render([fraction(ords, "a", "b", leftDelim="(", rightDelim=")")], Settings(displayMode=True))
    frac = findClass(root, "mfrac")
    assert frac.children[0].value == "("
    assert findValue(root, ")") is frac.children[-1]


def test_continued_fraction_keeps_the_style(ords, find, findValue):
    root = render([fraction(ords, "a", "b", continuousFraction=True)], Settings(displayMode=True))
    # The numerator and denominator stay in display style: no size change
    assert not find(root, lambda box: "font-size" in box.style)
    assert not findValue(root, "a").isTight



def test_fraction_style_override(ords, find):
    root = render([fraction(ords, "a", "b", mathstyle="scriptstyle")], Settings(displayMode=True))
    assert find(root, lambda box: box.style.get("font-size") == "70%")


def test_fraction_scripts(ords, find, findClass):
    frac = fraction(ords, "a", "b")
    frac.setChildren(ords("2"), "superscript")
    root = render([frac])
    scripts = findClass(root, "msubsup")
    assert scripts.height > 0


def test_invalid_options():
    with pytest.raises(LayoutError):
        GenfracOptions(align="justify")
    with pytest.raises(LayoutError):
        GenfracOptions(mathstyle="hugestyle")
