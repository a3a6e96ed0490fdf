# This file deals with creating delimiters. When people refer to delimiters,
# they refer to the shapes like parentheses, brackets and vertical bars that
# surround a formula and grow with it. There are three kinds:
#
# - Small delimiters are the normal glyphs, set in Main-Regular at a smaller
#   or larger math style.
# - Large delimiters come from the Size1..Size4 fonts, each one taller than
#   the previous one.
# - Stacked delimiters are built out of pieces (a top, a repeated middle
#   section, an optional center and a bottom) stacked on top of each other,
#   and can be made as tall as needed.
#
# `makeSizedDelim` makes a delimiter of one of the four \big sizes,
# `makeCustomSizedDelim` one at least as tall as a given height, and
# `makeLeftRightDelim` one sized to surround a formula (\left and \right).

import logging
import math

from . import fontMetrics
from .boxTree import Box
from .buildCommon import VBox
from .LayoutError import LayoutError
from .fontMetrics import AXIS_HEIGHT, FONT_SCALE, PT_PER_EM

log = logging.getLogger(__name__)

RIGHT_DELIM = {
    "(": ")",
    "{": "}",
    "[": "]",
    "|": "|",
    "\\lbrace": "\\rbrace",
    "\\lparen": "\\rparen",
    "\\{": "\\}",
    "\\langle": "\\rangle",
    "\\lfloor": "\\rfloor",
    "\\lceil": "\\rceil",
    "\\vert": "\\vert",
    "\\lvert": "\\rvert",
    "\\Vert": "\\Vert",
    "\\lVert": "\\rVert",
    "\\lbrack": "\\rbrack",
    "\\ulcorner": "\\urcorner",
    "\\llcorner": "\\lrcorner",
    "\\lgroup": "\\rgroup",
    "\\lmoustache": "\\rmoustache",
}

LEFT_DELIM = dict((right, left) for left, right in RIGHT_DELIM.items())

symbolValues = {
    "[": 0x5B,
    "]": 0x5D,
    "(": 0x28,
    ")": 0x29,
    "\\mid": 0x2223,
    "|": 0x2223,
    "∣": 0x2223,  # DIVIDES
    "∥": 0x2225,  # PARALLEL TO
    "\\|": 0x2225,
    "\\{": 0x7B,
    "\\}": 0x7D,
    "\\lbrace": 0x7B,
    "\\rbrace": 0x7D,
    "\\lparen": 0x28,
    "\\rparen": 0x29,
    "\\lbrack": 0x5B,
    "\\rbrack": 0x5D,
    "\\vert": 0x2223,
    "\\lvert": 0x2223,
    "\\mvert": 0x2223,
    "\\rvert": 0x2223,
    "\\Vert": 0x2225,
    "\\lVert": 0x2225,
    "\\mVert": 0x2225,
    "\\rVert": 0x2225,
    "\\parallel": 0x2225,
    "\\langle": 0x27E8,
    "\\rangle": 0x27E9,
    "\\lfloor": 0x230A,
    "\\rfloor": 0x230B,
    "\\lceil": 0x2308,
    "\\rceil": 0x2309,
    "\\ulcorner": 0x250C,
    "\\urcorner": 0x2510,
    "\\llcorner": 0x2514,
    "\\lrcorner": 0x2518,
    "\\lgroup": 0x27EE,
    "\\rgroup": 0x27EF,
    "\\lmoustache": 0x23B0,
    "\\rmoustache": 0x23B1,
    "\\uparrow": 0x2191,
    "\\downarrow": 0x2193,
    "\\updownarrow": 0x2195,
    "\\Uparrow": 0x21D1,
    "\\Downarrow": 0x21D3,
    "\\Updownarrow": 0x21D5,
    "\\surd": 0x221A,
    "\\backslash": 0x5C,
}


def getSymbolValue(delim):
    if delim in symbolValues:
        return symbolValues[delim]
    return ord(delim[0])


# Returns the codepoints of the top, middle, repeat and bottom pieces of a
# stacked delimiter, and the font they come from.
def getStackPieces(delim):
    top = repeat = bottom = getSymbolValue(delim)
    middle = None
    fontFamily = "Size1-Regular"

    if delim in ("\\vert", "\\lvert", "\\rvert", "\\mvert", "\\mid", "|"):
        top = repeat = bottom = 0x2223
    elif delim in ("\\Vert", "\\lVert", "\\rVert", "\\mVert", "\\|"):
        top = repeat = bottom = 0x2225
    elif delim == "\\uparrow":
        repeat = bottom = 0x23D0
    elif delim == "\\Uparrow":
        repeat = bottom = 0x2016
    elif delim == "\\downarrow":
        top = repeat = 0x23D0
    elif delim == "\\Downarrow":
        top = repeat = 0x2016
    elif delim == "\\updownarrow":
        top, repeat, bottom = 0x2191, 0x23D0, 0x2193
    elif delim == "\\Updownarrow":
        top, repeat, bottom = 0x21D1, 0x2016, 0x21D3
    elif delim in ("[", "\\lbrack"):
        top, repeat, bottom = 0x23A1, 0x23A2, 0x23A3
        fontFamily = "Size4-Regular"
    elif delim in ("]", "\\rbrack"):
        top, repeat, bottom = 0x23A4, 0x23A5, 0x23A6
        fontFamily = "Size4-Regular"
    elif delim in ("\\lfloor", "⌊"):
        top = repeat = 0x23A2
        bottom = 0x23A3
        fontFamily = "Size4-Regular"
    elif delim in ("\\lceil", "⌈"):
        top = 0x23A1
        repeat = bottom = 0x23A2
        fontFamily = "Size4-Regular"
    elif delim in ("\\rfloor", "⌋"):
        top = repeat = 0x23A5
        bottom = 0x23A6
        fontFamily = "Size4-Regular"
    elif delim in ("\\rceil", "⌉"):
        top = 0x23A4
        repeat = bottom = 0x23A5
        fontFamily = "Size4-Regular"
    elif delim in ("(", "\\lparen"):
        top, repeat, bottom = 0x239B, 0x239C, 0x239D
        fontFamily = "Size4-Regular"
    elif delim in (")", "\\rparen"):
        top, repeat, bottom = 0x239E, 0x239F, 0x23A0
        fontFamily = "Size4-Regular"
    elif delim in ("\\{", "\\lbrace"):
        top, middle, bottom, repeat = 0x23A7, 0x23A8, 0x23A9, 0x23AA
        fontFamily = "Size4-Regular"
    elif delim in ("\\}", "\\rbrace"):
        top, middle, bottom, repeat = 0x23AB, 0x23AC, 0x23AD, 0x23AA
        fontFamily = "Size4-Regular"
    elif delim in ("\\lgroup", "⟮"):
        top, bottom, repeat = 0x23A7, 0x23A9, 0x23AA
        fontFamily = "Size4-Regular"
    elif delim in ("\\rgroup", "⟯"):
        top, bottom, repeat = 0x23AB, 0x23AD, 0x23AA
        fontFamily = "Size4-Regular"
    elif delim in ("\\lmoustache", "⎰"):
        top, bottom, repeat = 0x23A7, 0x23AD, 0x23AA
        fontFamily = "Size4-Regular"
    elif delim in ("\\rmoustache", "⎱"):
        top, bottom, repeat = 0x23AB, 0x23A9, 0x23AA
        fontFamily = "Size4-Regular"
    elif delim == "\\surd":
        top, bottom, repeat = 0xE001, 0x23B7, 0xE000
        fontFamily = "Size4-Regular"
    elif delim == "\\ulcorner":
        top = 0x250C
        repeat = bottom = 0x20
    elif delim == "\\urcorner":
        top = 0x2510
        repeat = bottom = 0x20
    elif delim == "\\llcorner":
        bottom = 0x2514
        repeat = top = 0x20
    elif delim == "\\lrcorner":
        bottom = 0x2518
        repeat = top = 0x20

    return top, middle, repeat, bottom, fontFamily


# Makes a small delimiter. This is a delimiter that comes in the Main-Regular
# font, but is restyled to either be in textstyle, scriptstyle, or
# scriptscriptstyle.
def makeSmallDelim(delim, options, center, type="", classes=None):
    text = Box(getSymbolValue(delim), fontFamily="Main-Regular")
    box = text.wrap(options, classes=["ML__small-delim"] + list(classes or []), type=type)
    if center:
        box.setTop((1 - options.scalingFactor) * AXIS_HEIGHT)
    return box


# Makes a large delimiter. This is a delimiter that comes in the Size1, Size2,
# Size3, or Size4 fonts. It is always rendered in textstyle.
def makeLargeDelim(delim, size, center, options, type="", classes=None):
    options = options.extend(mathstyle="textstyle")
    result = Box(
        getSymbolValue(delim),
        fontFamily="Size{0}-Regular".format(size),
        classes=list(classes or []) + ["ML__delim-size{0}".format(size)],
        type=type or "ignore").wrap(options)
    if center:
        result.setTop((1 - options.scalingFactor) * AXIS_HEIGHT)
    return result


# Makes a stacked delimiter out of its pieces, with enough repeated pieces to
# reach `heightTotal`.
def makeStackedDelim(delim, heightTotal, center, options, type="", classes=None):
    top, middle, repeat, bottom, fontFamily = getStackPieces(delim)

    # Get the metrics of the four sections
    topMetrics = fontMetrics.getCharacterMetrics(top, fontFamily)
    topHeightTotal = topMetrics["height"] + topMetrics["depth"]
    repeatMetrics = fontMetrics.getCharacterMetrics(repeat, fontFamily)
    repeatHeightTotal = repeatMetrics["height"] + repeatMetrics["depth"]
    bottomMetrics = fontMetrics.getCharacterMetrics(bottom, fontFamily)
    bottomHeightTotal = bottomMetrics["height"] + bottomMetrics["depth"]

    middleHeightTotal = 0
    middleFactor = 1
    if middle is not None:
        middleMetrics = fontMetrics.getCharacterMetrics(middle, fontFamily)
        middleHeightTotal = middleMetrics["height"] + middleMetrics["depth"]
        # Repeat symmetrically above and below middle
        middleFactor = 2

    # Calculate the minimal height that the delimiter can have.
    # It is at least the size of the top, bottom, and optional middle combined.
    minHeight = topHeightTotal + bottomHeightTotal + middleHeightTotal

    # Compute the number of copies of the repeat symbol we will need
    repeatCount = max(0, int(math.ceil(
        (heightTotal - minHeight) / (middleFactor * repeatHeightTotal))))

    # Compute the total height of the delimiter including all the symbols
    realHeightTotal = minHeight + repeatCount * middleFactor * repeatHeightTotal

    # The center of the delimiter is placed at the center of the axis. Note
    # that in this context, "center" means that the delimiter should be
    # centered around the axis in the current style, while normally it is
    # centered around the axis in textstyle.
    axisHeight = AXIS_HEIGHT
    if center:
        axisHeight *= options.scalingFactor

    # Calculate the depth
    depth = realHeightTotal / 2 - axisHeight

    # The pieces overlap a little to avoid gaps between them
    overlap = 0.008

    # Now, we start building the pieces that will go into the vlist. The
    # stack goes from bottom to top.
    stack = [Box(bottom, fontFamily=fontFamily), -overlap]
    if middle is None:
        stack.extend(Box(repeat, fontFamily=fontFamily) for i in range(repeatCount))
    else:
        stack.extend(Box(repeat, fontFamily=fontFamily) for i in range(repeatCount))
        stack.append(-overlap)
        stack.append(Box(middle, fontFamily=fontFamily))
        stack.append(-overlap)
        stack.extend(Box(repeat, fontFamily=fontFamily) for i in range(repeatCount))
    stack.append(-overlap)
    stack.append(Box(top, fontFamily=fontFamily))

    sizeClass = []
    if fontFamily == "Size1-Regular":
        sizeClass = ["delim-size1"]
    elif fontFamily == "Size4-Regular":
        sizeClass = ["delim-size4"]

    inner = VBox(bottom=depth, children=stack, classes=sizeClass)
    return Box(inner, type=type, classes=list(classes or []) + ["ML__delim-mult"])


# There are three kinds of delimiters, delimiters that stack when they become
# too large
stackLargeDelimiters = frozenset([
    "(", ")", "\\lparen", "\\rparen",
    "[", "]", "\\lbrack", "\\rbrack",
    "\\{", "\\}", "\\lbrace", "\\rbrace",
    "\\lfloor", "\\rfloor", "\\lceil", "\\rceil",
    "\\surd",
    "⌊", "⌋", "⌈", "⌉",
])

# delimiters that always stack
stackAlwaysDelimiters = frozenset([
    "\\uparrow", "\\downarrow", "\\updownarrow",
    "\\Uparrow", "\\Downarrow", "\\Updownarrow",
    "|", "\\|", "\\vert", "\\Vert", "\\lvert", "\\rvert", "\\lVert", "\\rVert",
    "\\mvert", "\\mid",
    "\\lgroup", "\\rgroup", "\\lmoustache", "\\rmoustache",
    "⟮", "⟯", "⎰", "⎱",
])

# and delimiters that never stack
stackNeverDelimiters = frozenset([
    "<", ">", "\\langle", "\\rangle", "/", "\\backslash", "\\lt", "\\gt",
])

# Metrics of the different sizes. Found by looking at TeX's output of
# $\bigl| // \Bigl| \biggl| \Biggl| \showlists$
# Used to create stacked delimiters of appropriate sizes in makeSizedDelim.
sizeToMaxHeight = [0, 1.2, 1.8, 2.4, 3.0]


def normalizeDelim(delim):
    if delim in ("<", "\\lt", "⟨"):
        return "\\langle"
    if delim in (">", "\\gt", "⟩"):
        return "\\rangle"
    return delim


# Used to create a delimiter of a specific size, where `size` is 1, 2, 3, or 4.
def makeSizedDelim(delim, size, options, type="", classes=None):
    if not delim or delim == ".":
        return makeNullDelimiter(options, classes)

    delim = normalizeDelim(delim)

    # Sized delimiters are never centered.
    if delim in stackLargeDelimiters or delim in stackNeverDelimiters:
        return makeLargeDelim(delim, size, False, options, type, classes)
    if delim in stackAlwaysDelimiters:
        return makeStackedDelim(delim, sizeToMaxHeight[size], False, options, type, classes)

    raise LayoutError("Illegal delimiter: '{0}'".format(delim))


# There are three different sequences of delimiter sizes that the delimiters
# follow depending on the kind of delimiter. This is used when creating custom
# sized delimiters to decide whether to create a small, large, or stacked
# delimiter.
#
# In real TeX, these sequences aren't explicitly defined, but are instead
# defined inside the font metrics. Since there are only three sequences that
# are possible for the delimiters that TeX defines, it is easier to just
# encode them explicitly here.

# Delimiters that never stack try small delimiters and large delimiters only
stackNeverDelimiterSequence = [
    {"type": "small", "mathstyle": "scriptscriptstyle"},
    {"type": "small", "mathstyle": "scriptstyle"},
    {"type": "small", "mathstyle": "textstyle"},
    {"type": "large", "size": 1},
    {"type": "large", "size": 2},
    {"type": "large", "size": 3},
    {"type": "large", "size": 4},
]

# Delimiters that always stack try the small delimiters first, then stack
stackAlwaysDelimiterSequence = [
    {"type": "small", "mathstyle": "scriptscriptstyle"},
    {"type": "small", "mathstyle": "scriptscriptstyle"},
    {"type": "small", "mathstyle": "textstyle"},
    {"type": "stack"},
]

# Delimiters that stack when large try the small and then large delimiters,
# and stack afterwards
stackLargeDelimiterSequence = [
    {"type": "small", "mathstyle": "scriptscriptstyle"},
    {"type": "small", "mathstyle": "scriptstyle"},
    {"type": "small", "mathstyle": "textstyle"},
    {"type": "large", "size": 1},
    {"type": "large", "size": 2},
    {"type": "large", "size": 3},
    {"type": "large", "size": 4},
    {"type": "stack"},
]


# Get the font used in a delimiter based on what kind of delimiter it is.
def delimTypeToFont(info):
    if info["type"] == "small":
        return "Main-Regular"
    if info["type"] == "large":
        return "Size{0}-Regular".format(info["size"])
    return "Size4-Regular"


# Traverse a sequence of types of delimiters to decide what kind of delimiter
# should be used to create a delimiter of the given height+depth.
def traverseSequence(delim, height, sequence, options):
    # Here, we choose the index we should start at in the sequences. In smaller
    # sizes (which correspond to larger numbers in style.size) we start earlier
    # in the sequence. Thus, scriptscript starts at index 3-3=0, script starts
    # at index 3-2=1, text starts at 3-1=2, and display starts at min(2,3-0)=2
    start = {-4: 0, -3: 1, 0: 2}[options.mathstyle.sizeDelta]
    for info in sequence[start:]:
        if info["type"] == "stack":
            # This is always the last delimiter, so we just break the loop now.
            break

        metrics = fontMetrics.getCharacterMetrics(delim, delimTypeToFont(info))
        if metrics["defaultMetrics"]:
            # If we don't have metrics info for this character,
            # assume we'll construct as a small delimiter
            return {"type": "small", "mathstyle": "scriptstyle"}

        heightDepth = metrics["height"] + metrics["depth"]

        # Small delimiters are scaled down versions of the same font, so we
        # account for the style change size.
        if info["type"] == "small":
            if info["mathstyle"] == "scriptscriptstyle":
                heightDepth *= max(FONT_SCALE[max(1, options.size - 2)], options.minFontScale)
            elif info["mathstyle"] == "scriptstyle":
                heightDepth *= max(FONT_SCALE[max(1, options.size - 1)], options.minFontScale)

        # Check if the delimiter at this size works for the given height.
        if heightDepth > height:
            return info

    # If we reached the end of the sequence, return the last sequence element.
    return sequence[-1]


# Make a delimiter of a given height+depth, with optional centering. Here, we
# traverse the sequences, and create a delimiter that the sequence tells us
# to.
def makeCustomSizedDelim(type, delim, height, center, options, classes=None):
    if not delim or delim == ".":
        return makeNullDelimiter(options, classes)

    delim = normalizeDelim(delim)

    # Decide what sequence to use
    if delim in stackNeverDelimiters:
        sequence = stackNeverDelimiterSequence
    elif delim in stackLargeDelimiters:
        sequence = stackLargeDelimiterSequence
    else:
        sequence = stackAlwaysDelimiterSequence

    # Look through the sequence
    delimType = traverseSequence(getSymbolValue(delim), height, sequence, options)
    log.debug("Delimiter %s of height %.3f: %s", delim, height, delimType)

    # Depending on the sequence element we decided on, call the appropriate
    # function.
    delimOptions = options.extend(mathstyle=delimType.get("mathstyle"))
    if delimType["type"] == "small":
        return makeSmallDelim(delim, delimOptions, center, type, classes)
    if delimType["type"] == "large":
        return makeLargeDelim(delim, delimType["size"], center, delimOptions, type, classes)
    return makeStackedDelim(delim, height, center, delimOptions, type, classes)


# Make a delimiter for use with `\left` and `\right`, given a height and depth
# of an expression that the delimiters surround.
def makeLeftRightDelim(type, delim, height, depth, options, classes=None):
    if not delim or delim == ".":
        return makeNullDelimiter(options, classes)

    # We always center \left/\right delimiters, so the axis is always shifted
    axisHeight = AXIS_HEIGHT * options.scalingFactor

    # Taken from TeX source, tex.web, function make_left_right
    delimiterFactor = options.getRegisterAsNumber("delimiterfactor") or 901
    delimiterExtend = options.getRegisterAsEm("delimitershortfall") or 5 / PT_PER_EM

    maxDistFromAxis = max(height - axisHeight, depth + axisHeight)

    totalHeight = max(
        # In real TeX, calculations are done using integral values which are
        # 65536 per pt, or 655360 per em. So, the division here truncates in
        # TeX but doesn't here, producing different results. If we wanted to
        # exactly match TeX's calculation, we could do
        #   Math.floor(655360 * maxDistFromAxis / 500) *
        #    delimiterFactor / 655360
        # (To see the difference, compare
        #    x^{x^{\left(\rule{0.1em}{0.68em}\right)}}
        # in TeX and here)
        maxDistFromAxis / 500 * delimiterFactor,
        2 * maxDistFromAxis - delimiterExtend)

    # Finally, we defer to `makeCustomSizedDelim` with our calculated total
    # height
    return makeCustomSizedDelim(type, delim, totalHeight, True, options, classes)


# An empty box, as wide as `nulldelimiterspace`, standing in for a missing
# delimiter so that stacked constructs stay horizontally aligned.
def makeNullDelimiter(options, classes=None):
    box = Box(None, classes=["nulldelimiter"] + list(classes or []), type="ignore")
    box.width = options.getRegisterAsEm("nulldelimiterspace")
    return box.wrap(options.extend(mathstyle="textstyle"))
