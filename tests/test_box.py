import pytest

from mathlayout import Box, LayoutError, Options
from mathlayout.boxTree import makeStruts, makeSVGBox


def test_value_takes_the_metrics_of_its_character():
    box = Box("x")
    assert box.height == pytest.approx(0.43056)
    assert box.depth == 0


def test_multi_character_value_takes_the_largest_extent():
    box = Box("bg")
    assert box.height == pytest.approx(0.69444)
    assert box.depth == pytest.approx(0.19444)


def test_codepoint_content():
    assert Box(0x28).value == "("


def test_single_child_inherits_its_metrics():
    child = Box("g", isTight=True)
    box = Box(child)
    assert box.height == child.height
    assert box.depth == child.depth
    assert box.isTight


def test_children_are_laid_out_horizontally():
    box = Box([Box("b"), None, Box("g")])
    assert len(box.children) == 2
    assert box.height == pytest.approx(0.69444)
    assert box.depth == pytest.approx(0.19444)


def test_explicit_dimensions_override_the_content():
    box = Box("x", height=1, depth=0.5)
    assert box.height == 1
    assert box.depth == 0.5


@pytest.mark.parametrize("type", ["sparkly", "rad", "latex", "composition"])
def test_unknown_type(type):
    with pytest.raises(LayoutError):
        Box("x", type=type)


def test_wrap_without_change_returns_the_same_box():
    context = Options().extend()
    box = Box("x")
    assert box.wrap(context) is box


def test_wrap_in_a_smaller_style_scales_the_box():
    context = Options().extend(mathstyle="scriptstyle")
    box = Box("x", type="ord")
    wrapped = box.wrap(context)
    assert wrapped is not box
    assert wrapped.type == "ord"
    assert wrapped.height == pytest.approx(0.7 * 0.43056)
    assert wrapped.style["font-size"] == "70%"


def test_wrap_applies_the_color():
    box = Box("x")
    assert box.wrap(Options().extend(color="#123456")) is box
    assert box.style["color"] == "#123456"


def test_margins():
    box = Box("x")
    box.left = 0.25
    assert box.style["margin-left"] == "0.25em"
    box.left = 0
    assert "margin-left" not in box.style


def test_set_top_moves_the_box():
    box = Box("x")
    box.setTop(0.1)
    assert box.height == pytest.approx(0.33056)
    assert box.depth == pytest.approx(0.1)


def test_struts_keep_the_dimensions_of_the_content():
    content = Box("g")
    result = makeStruts(content, classes=["root"])
    assert result.height == pytest.approx(content.height)
    assert result.depth == pytest.approx(content.depth)
    assert result.children[-1] is content


def test_svg_box_is_centered_above_the_baseline():
    box = makeSVGBox("overbrace")
    assert box.svgBody == "overbrace"
    assert box.height - box.depth == pytest.approx(2 * 0.166)
    with pytest.raises(LayoutError):
        makeSVGBox("overwhatever")
