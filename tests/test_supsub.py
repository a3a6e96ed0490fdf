import pytest

from mathlayout import Atom, GenfracOptions, OperatorOptions, Settings, render
from mathlayout.fontMetrics import X_HEIGHT, Metrics

NORMAL = Metrics(0)
SCRIPT_SCALE = 0.7
DIGIT_HEIGHT = 0.64444


def scriptsOf(root, findClass):
    return findClass(root, "msubsup")


def test_no_scripts_leaves_the_base_alone(sym, find):
    root = render([sym("ord", "x")])
    assert not find(root, lambda box: "msubsup" in box.classes)


def test_empty_script_branch_is_ignored(find):
    x = Atom("ord", value="x", superscript=[])
    root = render([x])
    assert not find(root, lambda box: "msubsup" in box.classes)


def test_superscript_only(ords, findClass):
    root = render([Atom("ord", value="x", superscript=ords("2"))])
    scripts = scriptsOf(root, findClass)
    # A character box ignores supDrop: the shift is the larger of the
    # minimum shift and the clearance below the superscript
    supShift = max(NORMAL.sup2, 0.25 * X_HEIGHT)
    assert scripts.height == pytest.approx(supShift + DIGIT_HEIGHT * SCRIPT_SCALE)
    assert scripts.depth == 0


def test_superscript_in_display_style(ords, findClass):
    root = render([Atom("ord", value="x", superscript=ords("2"))], Settings(displayMode=True))
    scripts = scriptsOf(root, findClass)
    assert scripts.height == pytest.approx(NORMAL.sup1 + DIGIT_HEIGHT * SCRIPT_SCALE)


def test_superscript_in_cramped_style(ords, findClass):
    # The denominator of a fraction is cramped
    x = Atom("ord", value="x", superscript=ords("2"))
    frac = Atom("genfrac", above=ords("1"), below=[x], params=GenfracOptions())
    root = render([frac], Settings(displayMode=True))
    scripts = scriptsOf(root, findClass)
    assert scripts.height == pytest.approx(NORMAL.sup3 + DIGIT_HEIGHT * SCRIPT_SCALE)


def test_subscript_only(ords, findClass):
    root = render([Atom("ord", value="x", subscript=ords("1"))])
    scripts = scriptsOf(root, findClass)
    subShift = max(NORMAL.sub1, DIGIT_HEIGHT * SCRIPT_SCALE - 0.8 * X_HEIGHT)
    assert scripts.depth == pytest.approx(subShift)
    assert scripts.height == pytest.approx(DIGIT_HEIGHT * SCRIPT_SCALE - subShift)


def test_both_scripts_keep_a_gap(ords, findClass):
    root = render([Atom("ord", value="x", superscript=ords("2"), subscript=ords("1"))])
    scripts = scriptsOf(root, findClass)
    subHeight = DIGIT_HEIGHT * SCRIPT_SCALE
    supShift = NORMAL.sup2
    subShift = scripts.depth
    assert subShift >= NORMAL.sub2
    # The gap between the bottom of the superscript and the top of the
    # subscript is at least four rule thicknesses
    gap = supShift - (subHeight - subShift)
    assert gap == pytest.approx(4 * NORMAL.defaultRuleThickness)
    assert scripts.height == pytest.approx(supShift + DIGIT_HEIGHT * SCRIPT_SCALE)


def test_compound_base_uses_the_drops(ords, findClass):
    group = Atom("group", body=ords("b"), superscript=ords("2"))
    group.body[1].type = "bin"
    root = render([group])
    scripts = scriptsOf(root, findClass)
    supShift = max(0.69444 - NORMAL.supDrop * SCRIPT_SCALE, NORMAL.sup2)
    assert scripts.height == pytest.approx(supShift + DIGIT_HEIGHT * SCRIPT_SCALE)


def test_scripts_do_not_change_the_type(ords, sym, findValue, find):
    x = Atom("rel", value="=", superscript=ords("2"))
    root = render([sym("ord", "a"), x])
    [composite] = find(root, lambda box: box.children and findValueIn(box, "=") and
                       any("msubsup" in child.classes for child in box.children))
    assert composite.type == "rel"


def findValueIn(box, value):
    return any(child.value == value for child in box.walk())


def test_scripts_carry_the_caret_and_selection(ords, findClass):
    x = Atom("ord", value="x", superscript=ords("2"))
    x.caret = "body"
    x.isSelected = True
    scripts = scriptsOf(render([x]), findClass)
    assert scripts.caret == "body"
    assert scripts.isSelected


def test_operator_limits_in_display_style(ords, find):
    op = Atom("op", value="∑", superscript=ords("n"), subscript=ords("1"),
              params=OperatorOptions(isExtensibleSymbol=True))
    display = render([op], Settings(displayMode=True))
    assert not find(display, lambda box: "msubsup" in box.classes)
    text = render([Atom("op", value="∑", superscript=ords("n"), subscript=ords("1"),
                        params=OperatorOptions(isExtensibleSymbol=True))])
    assert find(text, lambda box: "msubsup" in box.classes)


def test_operator_limits_can_be_forced(ords, find):
    op = Atom("op", value="lim", subscript=ords("n"), params=OperatorOptions(limits="over-under"))
    root = render([op])
    assert not find(root, lambda box: "msubsup" in box.classes)
    [group] = find(root, lambda box: "ML__op-group" in box.classes)
    assert group.type == "op"
    assert group.depth > 0
