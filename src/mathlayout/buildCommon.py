# This module contains general functions that can be used for building
# different kinds of boxes in a consistent manner: symbols in the right font,
# vertical lists, and the stacks of limits above and below big operators.

from . import fontMetrics
from .LayoutError import LayoutError
from .boxTree import Box

greekCapitals = "ΓΔΘΛΞΠΣΥΦΨΩ"

# The following have to be loaded from Main-Italic font, using class mainit
mainitLetters = [
    "ı",   # dotless i, \imath
    "ȷ",   # dotless j, \jmath
    "£",   # \pounds
]


def isLatinLetter(value):
    return len(value) == 1 and ("a" <= value <= "z" or "A" <= value <= "Z")


def isGreekLetter(value):
    return len(value) == 1 and ("α" <= value <= "ω" or value in greekCapitals)


# Makes a symbol box, pulling the metrics of the characters from the given
# font family.
def makeSymbol(value, fontFamily, options, classes=None, type="ord"):
    classes = list(classes or [])
    isTight = False
    if options is not None:
        isTight = options.isTight
        if isTight:
            classes.append("mtight")
    return Box(value, fontFamily=fontFamily, classes=classes, type=type, isTight=isTight)


# Makes a symbol in Main-Regular or AMS-Regular.
# Used for rel, bin, open, close, inner, and punct.
def mathsym(value, options, classes=None, type="ord"):
    classes = list(classes or [])
    # Decide what font to render the symbol in by where its metrics live.
    if (fontMetrics.hasCharacterMetrics(value, "Main-Regular")
            or not fontMetrics.hasCharacterMetrics(value, "AMS-Regular")):
        return makeSymbol(value, "Main-Regular", options, classes, type)
    return makeSymbol(value, "AMS-Regular", options, classes + ["amsrm"], type)


# Decides whether a letter is set in italic, according to the letter shape
# style:
#  - tex: lowercase latin and greek, uppercase latin
#  - iso: all latin and greek letters
#  - french: lowercase latin only
#  - upright: no letter
def isItalicLetter(value, letterShapeStyle):
    if letterShapeStyle == "upright":
        return False
    if isLatinLetter(value):
        return letterShapeStyle != "french" or value.islower()
    if isGreekLetter(value):
        if letterShapeStyle == "iso":
            return True
        return value not in greekCapitals and letterShapeStyle == "tex"
    return False


# Makes a symbol in the italic math font.
def mathit(value, options, classes=None, type="ord"):
    classes = list(classes or [])
    if value in mainitLetters:
        # glyphs for \imath and \jmath do not exist in Math-Italic so we
        # need to use Main-Italic instead
        return makeSymbol(value, "Main-Italic", options, classes + ["mainit"], type)
    if isItalicLetter(value, options.letterShapeStyle if options else "tex"):
        return makeSymbol(value, "Math-Italic", options, classes + ["mathit"], type)
    return makeSymbol(value, "Main-Regular", options, classes + ["mathrm"], type)


# Makes an ord in the correct font. `font` is one of the keys of `fontMap`,
# or None for the default math font.
def makeOrd(value, options, font=None, mode="math", type="ord"):
    classes = ["mord"]

    if mode == "text":
        fontName = fontMap[font]["fontName"] if font in fontMap else "Main-Regular"
        return makeSymbol(value, fontName, options, classes + ["text"], type)

    if font:
        if font == "mathit" or value in mainitLetters:
            return mathit(value, options, classes, type)
        fontName = fontMap[font]["fontName"]
        if fontMetrics.hasCharacterMetrics(value, fontName):
            return makeSymbol(value, fontName, options, classes + [font], type)

    return mathit(value, options, classes, type)


# Maps font commands to objects containing:
# - variant: the matching MathML mathvariant attribute value
# - fontName: the family passed to fontMetrics.getCharacterMetrics
fontMap = {
    # styles
    "mathbf": {
        "variant": "bold",
        "fontName": "Main-Bold",
    },
    "mathrm": {
        "variant": "normal",
        "fontName": "Main-Regular",
    },

    # "mathit" is missing because it requires the use of two fonts: Main-Italic
    # and Math-Italic. This is handled by a special case in makeOrd which ends
    # up calling mathit.

    # families
    "mathbb": {
        "variant": "double-struck",
        "fontName": "AMS-Regular",
    },
    "mathcal": {
        "variant": "script",
        "fontName": "Caligraphic-Regular",
    },
    "mathfrak": {
        "variant": "fraktur",
        "fontName": "Fraktur-Regular",
    },
    "mathscr": {
        "variant": "script",
        "fontName": "Script-Regular",
    },
    "mathsf": {
        "variant": "sans-serif",
        "fontName": "SansSerif-Regular",
    },
    "mathtt": {
        "variant": "monospace",
        "fontName": "Typewriter-Regular",
    },
}


# The children of a vertical list are element nodes, specified as
#   {"type": "elem", "elem": box}
# (with an extra "shift" in an individualShift list, and optional
# "marginLeft", "marginRight" and "classes"), and kern nodes, specified as
#   {"type": "kern", "size": size}
# A bare Box stands for an element node and a bare number for a kern.
def elem(box, shift=None, marginLeft=None, marginRight=None, classes=None):
    child = {"type": "elem", "elem": box}
    if shift is not None:
        child["shift"] = shift
    if marginLeft:
        child["marginLeft"] = marginLeft
    if marginRight:
        child["marginRight"] = marginRight
    if classes:
        child["classes"] = classes
    return child


def kern(size):
    return {"type": "kern", "size": size}


def _normalizeChild(child):
    if isinstance(child, Box):
        return elem(child)
    if isinstance(child, (int, float)):
        return kern(child)
    if child.get("type") not in ("elem", "kern"):
        raise LayoutError("Invalid vertical list child {0!r}".format(child))
    return child


# Computes the list of children, with kerns between the elements of an
# individualShift list, and the position of the bottom of the list relative
# to the baseline (the "depth anchor").
def _getVListChildrenAndDepth(positionType, positionData, children):
    if not children:
        raise LayoutError("A vertical list needs at least one child")

    if positionType == "individualShift":
        for child in children:
            if child["type"] != "elem" or "shift" not in child:
                raise LayoutError("Each child of an individualShift list needs a box and a shift")

        # Add in kerns to the list of children to get each element to be
        # shifted to the correct specified shift
        newChildren = [children[0]]
        depth = -children[0]["shift"] - children[0]["elem"].depth
        currPos = depth
        for prevChild, child in zip(children, children[1:]):
            diff = -child["shift"] - currPos - child["elem"].depth
            size = diff - (prevChild["elem"].height + prevChild["elem"].depth)
            currPos = currPos + diff

            newChildren.append(kern(size))
            newChildren.append(child)
        return newChildren, depth

    if positionType == "top":
        # We always start at the bottom, so calculate the bottom by adding up
        # all the sizes
        bottom = positionData
        for child in children:
            if child["type"] == "kern":
                bottom -= child["size"]
            else:
                bottom -= child["elem"].height + child["elem"].depth
        return children, bottom

    if positionType == "bottom":
        return children, -positionData

    # The remaining positions are relative to the first child's baseline
    if children[0]["type"] != "elem":
        raise LayoutError("The first child of a '{0}' vertical list must be a box".format(positionType))

    if positionType == "shift":
        return children, -children[0]["elem"].depth - positionData

    return children, -children[0]["elem"].depth


# Lays out the children at their vertical positions. Each child is placed
# in a wrapper, preceded by a "pstrut" tall enough that the wrapper's
# baseline is set by the strut and not by the child.
#
# Returns the rows of the list, its height, its depth and its depth anchor.
def makeRows(positionType, positionData, children):
    children, depth = _getVListChildrenAndDepth(positionType, positionData, children)

    pstrutSize = 0
    for child in children:
        if child["type"] == "elem":
            box = child["elem"]
            pstrutSize = max(pstrutSize, box.maxFontSize, box.height)
    pstrutSize += 2
    pstrut = Box(None, classes=["pstrut"])
    pstrut.setStyle("height", pstrutSize, "em")

    # Create a new list of actual children at the correct offsets
    realChildren = []
    minPos = depth
    maxPos = depth
    currPos = depth
    for child in children:
        if child["type"] == "kern":
            currPos += child["size"]
        else:
            box = child["elem"]
            childWrap = Box([pstrut, box], classes=child.get("classes"))
            childWrap.setStyle("top", -pstrutSize - currPos - box.depth, "em")
            if child.get("marginLeft"):
                childWrap.setStyle("margin-left", child["marginLeft"], "em")
            if child.get("marginRight"):
                childWrap.setStyle("margin-right", child["marginRight"], "em")
            realChildren.append(childWrap)
            currPos += box.height + box.depth
        minPos = min(minPos, currPos)
        maxPos = max(maxPos, currPos)

    vlist = Box(realChildren, classes=["vlist"])
    vlist.setStyle("height", maxPos, "em")

    # A single row cannot hold space below the baseline, so when the list
    # goes below the baseline a second row carries the depth.
    if minPos < 0:
        depthStrut = Box(Box(None), classes=["vlist"])
        depthStrut.setStyle("height", -minPos, "em")
        topStrut = Box(0x200B, classes=["vlist-s"], height=0, depth=0, maxFontSize=0)
        rows = [
            Box([vlist, topStrut], classes=["vlist-r"]),
            Box(depthStrut, classes=["vlist-r"]),
        ]
        return rows, maxPos, -minPos, depth

    return [Box(vlist, classes=["vlist-r"])], maxPos, 0, depth


# A vertical list: boxes and kerns stacked on top of each other (the first
# child is at the bottom, the last at the top). Exactly one positioning method
# must be given:
#  - individualShift: a list of element nodes, each with a "shift" of how much
#                     its baseline is moved down from the list's baseline
#  - top: the topmost point of the list, as a height (positive values move
#         up), with the nodes in `children`
#  - bottom: the bottommost point of the list, as a depth (positive values
#            move down), with the nodes in `children`
#  - shift: the list's baseline is this far from the baseline of the first
#           child (positive values move down), with the nodes in `children`
#  - firstBaseline: a list of nodes, the list's baseline is the baseline of
#                   the first one
class VBox(Box):
    def __init__(self, individualShift=None, top=None, bottom=None, shift=None,
                 firstBaseline=None, children=None, classes=None, type=""):
        given = [(name, value) for name, value in [
            ("individualShift", individualShift),
            ("top", top),
            ("bottom", bottom),
            ("shift", shift),
            ("firstBaseline", firstBaseline),
        ] if value is not None]
        if len(given) != 1:
            raise LayoutError("A vertical list needs exactly one positioning method")
        positionType, positionData = given[0]

        if positionType == "individualShift":
            children = individualShift
        elif positionType == "firstBaseline":
            children = firstBaseline
        elif children is None:
            raise LayoutError("A '{0}' vertical list needs children".format(positionType))
        children = [_normalizeChild(child) for child in children]

        rows, height, depth, anchor = makeRows(positionType, positionData, children)

        classes = list(classes or []) + ["vlist-t"]
        if len(rows) == 2:
            classes.append("vlist-t2")
        super(VBox, self).__init__(
            rows[0] if len(rows) == 1 else rows,
            classes=classes,
            height=height,
            depth=depth,
            type=type)
        self.positionType = positionType
        self.depthAnchor = anchor


# Combines a nucleus with an atom above and an atom below, like the limits of
# a big operator (TeXbook Rule 13a). `slant` is the italic correction of the
# nucleus: the limits are shifted left and right by it.
def makeLimitsStack(options, base, above=None, below=None, baseShift=0, slant=0,
                    aboveShift=None, belowShift=None, type="op"):
    metrics = options.metrics
    base = Box(base)

    if above is not None and aboveShift is None:
        aboveShift = max(metrics.bigOpSpacing1, metrics.bigOpSpacing3 - above.depth)
    if below is not None and belowShift is None:
        belowShift = max(metrics.bigOpSpacing2, metrics.bigOpSpacing4 - below.height)

    center = ["ML__center"]
    if above is not None and below is not None:
        bottom = (metrics.bigOpSpacing5 + below.height + below.depth + belowShift
                  + base.depth + baseShift)
        result = VBox(bottom=bottom, children=[
            metrics.bigOpSpacing5,
            elem(below, marginLeft=-slant, classes=center),
            belowShift,
            elem(base, classes=center),
            aboveShift,
            elem(above, marginLeft=slant, classes=center),
            metrics.bigOpSpacing5,
        ])
    elif below is not None:
        result = VBox(top=base.height - baseShift, children=[
            metrics.bigOpSpacing5,
            elem(below, marginLeft=-slant, classes=center),
            belowShift,
            elem(base, classes=center),
        ])
    elif above is not None:
        result = VBox(bottom=base.depth + baseShift, children=[
            elem(base, classes=center),
            aboveShift,
            elem(above, marginLeft=slant, classes=center),
            metrics.bigOpSpacing5,
        ])
    else:
        result = VBox(bottom=base.depth + baseShift, children=[
            elem(base),
            metrics.bigOpSpacing5,
        ])

    return Box(result.wrap(options), type=type)
