import pytest

from mathlayout import Atom, Settings, SpacingOptions, render
from mathlayout.spacing import traverseBoxes
from mathlayout.boxTree import Box

MEDMUSKIP = 4 / 18
THICKMUSKIP = 5 / 18


def test_leading_bin_becomes_ord(sym, findValue):
    root = render([sym("bin", "+"), sym("ord", "1")])
    assert findValue(root, "+").type == "ord"
    assert findValue(root, "1").left == 0


def test_bin_before_close_becomes_ord(sym, findValue):
    root = render([sym("ord", "x"), sym("bin", "+"), sym("close", ")")])
    plus = findValue(root, "+")
    assert plus.type == "ord"
    assert plus.left == 0
    assert findValue(root, ")").left == 0


@pytest.mark.parametrize("previous", [("bin", "+"), ("rel", "="), ("open", "("), ("punct", ",")])
def test_bin_after_operator_becomes_ord(sym, findValue, previous):
    root = render([sym("ord", "x"), sym(*previous), sym("bin", "−"), sym("ord", "1")])
    assert findValue(root, "−").type == "ord"


def test_binary_operator_is_spaced(sym, findValue):
    root = render([sym("ord", "x"), sym("bin", "+"), sym("ord", "y")])
    assert findValue(root, "+").type == "bin"
    assert findValue(root, "+").left == pytest.approx(MEDMUSKIP)
    assert findValue(root, "y").left == pytest.approx(MEDMUSKIP)


def test_relation_is_spaced(sym, findValue):
    root = render([sym("ord", "x"), sym("rel", "="), sym("ord", "y")])
    assert findValue(root, "=").left == pytest.approx(THICKMUSKIP)
    assert findValue(root, "y").left == pytest.approx(THICKMUSKIP)


def test_registers_can_be_overridden(sym, findValue):
    settings = Settings(registers={"thickmuskip": "9mu"})
    root = render([sym("ord", "x"), sym("rel", "="), sym("ord", "y")], settings)
    assert findValue(root, "=").left == pytest.approx(9 / 18)


def test_scripts_are_tightly_spaced(sym, findValue):
    script = [sym("ord", "a"), sym("bin", "+"), sym("ord", "b")]
    root = render([Atom("ord", value="x", superscript=script)])
    assert findValue(root, "+").left == 0
    assert findValue(root, "b").left == 0


def test_script_starts_a_new_list(sym, findValue):
    # The superscript does not see the `=` before its base
    x = Atom("ord", value="x", superscript=[sym("bin", "+"), sym("ord", "1")])
    root = render([sym("rel", "="), x])
    assert findValue(root, "+").type == "ord"


def test_explicit_space_is_transparent(sym, findValue):
    space = Atom("spacing", params=SpacingOptions(register="thinmuskip"))
    root = render([sym("ord", "x"), space, sym("bin", "+"), sym("ord", "y")])
    assert findValue(root, "+").type == "bin"


def test_explicit_space_width(find):
    space = Atom("spacing", params=SpacingOptions(width="1em"))
    root = render([space])
    [box] = find(root, lambda box: box.type == "spacing")
    assert box.left == pytest.approx(1)


def test_colored_runs_are_spaced_as_siblings(sym, findValue):
    plus = Atom("bin", value="+", style={"color": "red"})
    root = render([sym("ord", "x"), plus, sym("ord", "y")])
    assert findValue(root, "+").type == "bin"
    assert findValue(root, "+").left == pytest.approx(MEDMUSKIP)


def test_traverse_lifts_children():
    a = Box("a", type="ord")
    b = Box("b", type="ord")
    c = Box("c", type="ord")
    pairs = []
    traverseBoxes([Box([a, Box([b], type="lift")], type="lift"), Box([c], type="ignore")],
                  lambda prev, cur: pairs.append((prev, cur)))
    assert pairs == [(None, a), (a, b), (None, c)]
