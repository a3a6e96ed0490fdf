import pytest

from mathlayout import LayoutError
from mathlayout.delimiter import (
    makeCustomSizedDelim, makeLeftRightDelim, makeNullDelimiter, makeSizedDelim,
    normalizeDelim,
)


def classesOf(box):
    return [cls for b in box.walk() for cls in b.classes]


def test_sized_delimiters_use_the_size_fonts(textOptions):
    for size in (1, 2, 3, 4):
        box = makeSizedDelim("(", size, textOptions)
        assert "ML__delim-size{0}".format(size) in classesOf(box)


def test_sized_delimiters_grow(textOptions):
    heights = [makeSizedDelim("(", size, textOptions) for size in (1, 2, 3, 4)]
    totals = [box.height + box.depth for box in heights]
    assert totals == sorted(totals)
    assert totals[0] < totals[-1]


def test_angle_brackets_are_normalized(textOptions):
    assert normalizeDelim("<") == "\\langle"
    assert normalizeDelim("⟩") == "\\rangle"
    assert "ML__delim-size2" in classesOf(makeSizedDelim("<", 2, textOptions))


def test_always_stacking_delimiter(textOptions):
    box = makeSizedDelim("\\uparrow", 3, textOptions)
    assert "ML__delim-mult" in box.classes


def test_illegal_delimiter(textOptions):
    with pytest.raises(LayoutError):
        makeSizedDelim("x", 1, textOptions)


@pytest.mark.parametrize("delim", [None, "", "."])
def test_null_delimiter(textOptions, delim):
    box = makeSizedDelim(delim, 1, textOptions)
    assert "nulldelimiter" in box.classes
    assert box.type == "ignore"
    # \nulldelimiterspace is 1.2pt
    assert box.style["width"] == "0.12em"


def test_null_delimiter_classes(textOptions):
    box = makeNullDelimiter(textOptions, ["open"])
    assert box.classes == ["nulldelimiter", "open"]
    assert box.height == 0 and box.depth == 0


def test_left_right_small_formula(textOptions):
    # A formula as tall as a letter gets the normal glyph
    box = makeLeftRightDelim("open", "(", 0.7, 0.2, textOptions)
    assert "ML__small-delim" in classesOf(box)


def test_left_right_tall_formula(textOptions):
    # Taller than the largest glyph: the delimiter is stacked
    box = makeLeftRightDelim("open", "(", 3.0, 0, textOptions)
    assert "ML__delim-mult" in box.classes


def test_left_right_null(textOptions):
    box = makeLeftRightDelim("close", ".", 3.0, 1.0, textOptions)
    assert "nulldelimiter" in box.classes


def test_custom_size_never_stacks(textOptions):
    box = makeCustomSizedDelim("open", "\\langle", 10, True, textOptions)
    assert "ML__delim-size4" in classesOf(box)
    assert "ML__delim-mult" not in classesOf(box)


def test_delimiter_type(textOptions):
    box = makeSizedDelim("(", 1, textOptions, type="open")
    assert box.type == "open"
