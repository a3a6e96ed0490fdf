import logging

import pytest

from mathlayout import (
    AccentOptions, Atom, BoxOptions, EncloseOptions, GroupOptions, LayoutError,
    LeftRightOptions, LineOptions, OperatorOptions, OverlapOptions, OverunderOptions,
    PhantomOptions, RuleOptions, Settings, SizedDelimOptions, SpacingOptions,
    render,
)
from mathlayout.buildHTML import buildGroup
from mathlayout.fontMetrics import Metrics

NORMAL = Metrics(0)
THETA = NORMAL.defaultRuleThickness

# Math-Italic metrics
B_HEIGHT = 0.69444
G_HEIGHT = 0.43056
G_DEPTH = 0.19444
X_HEIGHT = 0.43056
# Main-Regular metrics of the circumflex
HAT_HEIGHT = 0.69444
# \fboxsep is 3pt
FBOXSEP = 0.3


def test_accent(ords, textOptions):
    atom = Atom("accent", body=ords("b"), params=AccentOptions(accent="^"))
    box = buildGroup(atom, textOptions)
    assert box.type == "ord"
    assert "ML__accent" in box.classes
    # The accent is lowered by the clearance, the x-height here
    assert box.height == pytest.approx(B_HEIGHT - NORMAL.xHeight + HAT_HEIGHT)
    assert box.depth == pytest.approx(0)


def test_accent_short_base(ords, textOptions):
    atom = Atom("accent", body=ords("x"), params=AccentOptions(accent="^"))
    box = buildGroup(atom, textOptions)
    # The clearance is the height of the base: the accent sits on the baseline
    assert box.height == pytest.approx(HAT_HEIGHT)


def test_accent_needs_one_kind():
    with pytest.raises(LayoutError):
        AccentOptions()
    with pytest.raises(LayoutError):
        AccentOptions(accent="^", svgAccent="widehat")


def test_overunder(ords, textOptions, find):
    atom = Atom("overunder", body=ords("x"), above=ords("a"),
                params=OverunderOptions(boxType="rel"))
    box = buildGroup(atom, textOptions)
    assert box.type == "rel"
    assert box.depth == pytest.approx(0)
    # The label is in scriptstyle
    label = X_HEIGHT * 0.7
    assert box.height == pytest.approx(
        X_HEIGHT + NORMAL.bigOpSpacing2 + label + NORMAL.bigOpSpacing5)
    assert find(box, lambda b: "ML__center" in b.classes)


def test_overunder_below(ords, textOptions):
    atom = Atom("overunder", body=ords("x"), below=ords("a"))
    box = buildGroup(atom, textOptions)
    assert box.type == "ord"
    assert box.height == pytest.approx(X_HEIGHT)
    assert box.depth == pytest.approx(NORMAL.bigOpSpacing5 + X_HEIGHT * 0.7)


def test_overunder_invalid_type():
    with pytest.raises(LayoutError):
        OverunderOptions(boxType="op")


def test_phantom_is_invisible(ords, textOptions, find):
    atom = Atom("phantom", body=ords("x"))
    box = buildGroup(atom, textOptions)
    assert box.height == pytest.approx(X_HEIGHT)
    assert find(box, lambda b: b.style.get("opacity") == "0")


def test_smash_height(ords, textOptions):
    atom = Atom("phantom", body=ords("g"),
                params=PhantomOptions(isInvisible=False, smashHeight=True))
    box = buildGroup(atom, textOptions)
    assert box.height == pytest.approx(0)
    assert box.depth == pytest.approx(G_DEPTH)


def test_smash_depth(ords, textOptions):
    atom = Atom("phantom", body=ords("g"),
                params=PhantomOptions(isInvisible=False, smashDepth=True))
    box = buildGroup(atom, textOptions)
    assert box.height == pytest.approx(G_HEIGHT)
    assert box.depth == pytest.approx(0)


def test_smash_width(ords, textOptions, find):
    atom = Atom("phantom", body=ords("x"), params=PhantomOptions(smashWidth=True))
    box = buildGroup(atom, textOptions)
    assert find(box, lambda b: "ML__rlap" in b.classes)


def test_visible_phantom_must_smash():
    with pytest.raises(LayoutError):
        PhantomOptions(isInvisible=False)


@pytest.mark.parametrize("align, cls", [("left", "ML__llap"), ("right", "ML__rlap")])
def test_overlap(ords, textOptions, align, cls):
    atom = Atom("overlap", body=ords("x"), params=OverlapOptions(align=align))
    box = buildGroup(atom, textOptions)
    assert cls in box.classes
    assert box.type == "ord"
    assert box.height == pytest.approx(X_HEIGHT)


def test_overline(ords, textOptions, findClass):
    atom = Atom("line", body=ords("x"), params=LineOptions("overline"))
    box = buildGroup(atom, textOptions)
    assert "ML__overline" in box.classes
    # Clearance 3θ, the rule θ, and θ of padding above
    assert box.height == pytest.approx(X_HEIGHT + 5 * THETA)
    assert findClass(box, "ML__overline-line").height == pytest.approx(THETA)


def test_underline(ords, textOptions):
    atom = Atom("line", body=ords("x"), params=LineOptions("underline"))
    box = buildGroup(atom, textOptions)
    assert "ML__underline" in box.classes
    assert box.height == pytest.approx(X_HEIGHT)
    assert box.depth == pytest.approx(5 * THETA)


def test_surd(ords, textOptions, find):
    atom = Atom("surd", body=ords("x"))
    box = buildGroup(atom, textOptions)
    assert box.type == "inner"
    assert "ML__sqrt" in box.classes
    assert find(box, lambda b: "ML__sqrt-line" in b.classes)
    # The rule is above the radicand
    assert box.height > X_HEIGHT + THETA
    assert not find(box, lambda b: "ML__sqrt-index" in b.classes)


def test_surd_index(ords, textOptions, findClass):
    atom = Atom("surd", body=ords("x"), above=ords("3"))
    box = buildGroup(atom, textOptions)
    assert findClass(box, "ML__sqrt-index").type == "ignore"


def test_left_right(ords, sym, textOptions, find):
    body = ords("a") + [sym("middle", "|")] + ords("b")
    atom = Atom("leftright", body=body, params=LeftRightOptions("(", ")"))
    box = buildGroup(atom, textOptions)
    assert box.type == "inner"
    assert find(box, lambda b: "ML__open" in b.classes)
    assert find(box, lambda b: "ML__close" in b.classes)
    # The \middle was replaced by a delimiter sized like the others
    assert not find(box, lambda b: b.delim)
    assert find(box, lambda b: b.type == "middle")


def test_left_right_null_delimiters(ords, textOptions, find):
    atom = Atom("leftright", body=ords("a"), params=LeftRightOptions())
    box = buildGroup(atom, textOptions)
    assert len(find(box, lambda b: "nulldelimiter" in b.classes)) == 2


def test_sized_delim(textOptions, findClass):
    atom = Atom("sizeddelim", params=SizedDelimOptions("(", size=2, boxType="open"))
    box = buildGroup(atom, textOptions)
    assert box.type == "open"
    findClass(box, "ML__delim-size2")


def test_sized_delim_invalid_size():
    with pytest.raises(LayoutError):
        SizedDelimOptions("(", size=5)


def test_box_padding(ords, textOptions, findClass):
    atom = Atom("box", command="\\fbox", body=ords("g"),
                params=BoxOptions(framecolor="red", backgroundcolor="#ffeeee"))
    box = buildGroup(atom, textOptions)
    assert box.type == "ord"
    assert box.height == pytest.approx(G_HEIGHT + FBOXSEP)
    assert box.depth == pytest.approx(G_DEPTH + FBOXSEP)
    assert box.left == pytest.approx(FBOXSEP)
    frame = findClass(box, "ML__box")
    # The rule is \fboxrule wide
    assert frame.style["border"] == "0.04em solid #d7170b"
    assert frame.style["background-color"] == "#ffeeee"
    assert atom.serialize() == "\\fbox{g}"


def test_box_explicit_padding(ords, textOptions):
    atom = Atom("box", body=ords("x"), params=BoxOptions(padding="0.5em"))
    box = buildGroup(atom, textOptions)
    assert box.height == pytest.approx(X_HEIGHT + 0.5)
    assert box.depth == pytest.approx(0.5)


def test_box_padding_follows_the_register(ords, textOptions):
    options = textOptions.extend()
    options.setRegister("fboxsep", "1em")
    box = buildGroup(Atom("box", body=ords("x")), options)
    assert box.height == pytest.approx(X_HEIGHT + 1)
    assert box.depth == pytest.approx(1)


@pytest.mark.parametrize("offset", [0.2, -0.2])
def test_box_offset(ords, textOptions, offset):
    atom = Atom("box", body=ords("x"),
                params=BoxOptions(padding=0, offset="{0}em".format(offset)))
    box = buildGroup(atom, textOptions)
    # The body is raised by the offset
    assert box.height == pytest.approx(X_HEIGHT + offset)
    assert box.depth == pytest.approx(-offset)


def test_enclose_padding(ords, textOptions, findClass):
    atom = Atom("enclose", command="\\cancel", body=ords("g"),
                params=EncloseOptions(notation=["updiagonalstrike"]))
    box = buildGroup(atom, textOptions)
    assert box.height == pytest.approx(G_HEIGHT + FBOXSEP)
    assert box.depth == pytest.approx(G_DEPTH + FBOXSEP)
    notation = findClass(box, "ML__notation")
    assert "ML__updiagonalstrike" in notation.classes
    assert notation.height + notation.depth == pytest.approx(G_HEIGHT + G_DEPTH + 2 * FBOXSEP)
    assert atom.serialize() == "\\cancel{g}"


def test_enclose_box_draws_every_side(ords, textOptions, findClass):
    params = EncloseOptions(notation=["box", "top", "updiagonalarrow", "updiagonalstrike"],
                            padding="0.1em")
    assert params.notation == {"box", "updiagonalarrow"}
    box = buildGroup(Atom("enclose", body=ords("x"), params=params), textOptions)
    notation = findClass(box, "ML__notation")
    assert notation.style["border"] == "1px solid"
    assert "border-top" not in notation.style
    assert box.height == pytest.approx(X_HEIGHT + 0.1)


def test_enclose_invalid_notation():
    with pytest.raises(LayoutError):
        EncloseOptions(notation=["zigzag"])
    with pytest.raises(LayoutError):
        EncloseOptions(notation=[])


def test_rule(textOptions):
    atom = Atom("rule", params=RuleOptions("1em", "0.5em", shift="0.1em"))
    box = buildGroup(atom, textOptions)
    assert "ML__rule" in box.classes
    assert box.height == pytest.approx(0.6)
    assert box.depth == pytest.approx(-0.1)
    assert box.style["border-top-width"] == "0.5em"


def test_rule_absolute_units_keep_their_size(textOptions, findClass):
    # 5pt is half an em of the text font, in any style
    rule = Atom("rule", params=RuleOptions("10pt", "5pt"))
    atom = Atom("group", body=[rule], params=GroupOptions(mathstyle="scriptstyle"))
    box = buildGroup(atom, textOptions)
    assert findClass(box, "ML__rule").height == pytest.approx(0.5 / 0.7)
    assert box.height == pytest.approx(0.5)


def test_spacing_register(textOptions):
    atom = Atom("spacing", params=SpacingOptions(register="thinmuskip"))
    box = buildGroup(atom, textOptions)
    assert box.type == "spacing"
    assert box.left == pytest.approx(1 / 6)


def test_spacing_needs_one_kind():
    with pytest.raises(LayoutError):
        SpacingOptions()
    with pytest.raises(LayoutError):
        SpacingOptions(width="1em", register="thinmuskip")


def test_text_operator(textOptions):
    atom = Atom("op", value="sin")
    box = buildGroup(atom, textOptions)
    assert box.type == "op"
    assert "ML__op-group" in box.classes


def test_symbol_operator_is_larger_in_display(textOptions, displayOptions, findClass):
    params = OperatorOptions(isExtensibleSymbol=True)
    text = buildGroup(Atom("op", value="∑", params=params), textOptions)
    display = buildGroup(Atom("op", value="∑", params=params), displayOptions)
    assert findClass(text, "ML__small-op")
    large = findClass(display, "ML__large-op")
    assert large.height + large.depth > 1.5


def test_unknown_atom_type(findClass, caplog):
    with caplog.at_level(logging.WARNING, logger="mathlayout"):
        root = render([Atom("bogus", value="x")])
    error = findClass(root, "ML__error")
    assert error.type == "error"
    assert error.style["color"] == "#cc0000"
    assert "Unknown atom type 'bogus'" in caplog.text


def test_unknown_atom_type_raises():
    with pytest.raises(LayoutError):
        render([Atom("bogus", value="x")], Settings(throwOnError=True))


def test_unresolved_infix(findClass):
    root = render([Atom("infix", command="\\over")], Settings(errorColor="red"))
    error = findClass(root, "ML__error")
    assert error.value == "\\over"
    assert error.style["color"] == "red"


def test_error_atom_never_raises(findClass):
    root = render([Atom("error", value="\\foo")], Settings(throwOnError=True))
    assert findClass(root, "ML__error").value == "\\foo"
