# This file does the main work of building a box tree from an atom tree. The
# `buildGroup` function dispatches each atom to the function of its type in
# `groupTypes`, which builds the box of the atom with its branches.
#
# Most of the numeric rules come from Appendix G of the TeXbook, and the rule
# numbers in the comments refer to it.

import logging

from .Atom import (
    AccentOptions, Atom, BoxOptions, EncloseOptions, GenfracOptions, GroupOptions,
    LeftRightOptions, LineOptions, OperatorOptions, OverlapOptions, OverunderOptions,
    PhantomOptions,
)
from .LayoutError import LayoutError
from .boxTree import Box, makeSVGBox
from .buildCommon import VBox, elem, makeLimitsStack, makeOrd, makeSymbol, mathsym
from .delimiter import (
    makeCustomSizedDelim, makeLeftRightDelim, makeNullDelimiter, makeSizedDelim,
)
from .fontMetrics import AXIS_HEIGHT, BASELINE_SKIP, X_HEIGHT
from .utils import toCss
from . import registers

log = logging.getLogger(__name__)

# The types of atoms which are laid out as a symbol of the same type
symbolTypes = ["ord", "bin", "rel", "open", "close", "punct", "inner", "middle"]


def reportError(atom, options, message):
    if options.settings.throwOnError:
        raise LayoutError(message, atom)
    log.warning("%s (in atom of type '%s')", message, atom.type)
    return makeErrorBox(atom, options)


def makeErrorBox(atom, options):
    value = atom.command or atom.value or "?"
    box = makeSymbol(value, "Main-Regular", options, classes=["ML__error"], type="error")
    box.setStyle("color", options.settings.errorColor)
    return box


# Converts a dimension to em. Dimensions in em, ex and mu scale with the font
# size; the others are absolute, so they are made larger in smaller styles.
def dimensionToEm(value, options):
    number, unit = registers.parseDimension(value)
    result = registers.convertDimensionToEm((number, unit))
    if unit not in ("em", "ex", "mu"):
        result /= options.mathstyle.sizeMultiplier
    return result


# Superscript and subscripts are handled in the TeXbook on page 445-446,
# rules 18(a-f).
#
# Returns a box combining `base` with the scripts of the atom, or `base`
# itself when the atom has none.
def attachSupsub(atom, options, base, isCharacterBox=None, type=None):
    superscript = atom.superscript
    subscript = atom.subscript

    # If no superscript or subscript, nothing to do.
    if not superscript and not subscript:
        return base

    metrics = options.metrics
    if isCharacterBox is None:
        isCharacterBox = atom.isCharacterBox()

    # Rule 18a
    supBox = None
    supShift = 0
    if superscript:
        context = options.extend(mathstyle="superscript")
        supBox = Atom.createBox(context, superscript)
        if supBox is not None and not isCharacterBox:
            supShift = base.height - metrics.supDrop * context.scalingFactor

    subBox = None
    subShift = 0
    if subscript:
        context = options.extend(mathstyle="subscript")
        subBox = Atom.createBox(context, subscript)
        if subBox is not None and not isCharacterBox:
            subShift = base.depth + metrics.subDrop * context.scalingFactor

    # An empty branch (only its sentinel) has nothing to attach
    if supBox is None and subBox is None:
        return base

    # Rule 18c
    if options.isDisplayStyle:
        minSupShift = metrics.sup1
    elif options.isCramped:
        minSupShift = metrics.sup3
    else:
        minSupShift = metrics.sup2

    # scriptspace is a font-size-independent size, so scale it
    # appropriately
    scriptspace = options.getRegisterAsEm("scriptspace") / options.scalingFactor

    if supBox is not None and subBox is not None:
        # Rule 18e
        supShift = max(supShift, minSupShift, supBox.depth + 0.25 * metrics.xHeight)
        subShift = max(subShift, metrics.sub2)
        ruleWidth = metrics.defaultRuleThickness
        if (supShift - supBox.depth) - (subBox.height - subShift) < 4 * ruleWidth:
            subShift = 4 * ruleWidth - (supShift - supBox.depth) + subBox.height
            psi = 0.8 * metrics.xHeight - (supShift - supBox.depth)
            if psi > 0:
                supShift += psi
                subShift -= psi

        # Subscripts shouldn't be shifted by the nucleus' italic correction.
        # Account for that by shifting the subscript back the appropriate
        # amount. Note we only do this when the nucleus is a single symbol.
        slant = -base.italic if atom.isExtensibleSymbol and base.italic else 0
        supsub = VBox(individualShift=[
            elem(subBox, shift=subShift, marginLeft=slant, marginRight=scriptspace),
            elem(supBox, shift=-supShift, marginRight=scriptspace),
        ]).wrap(options)
    elif subBox is not None:
        # Rule 18b
        subShift = max(subShift, metrics.sub1, subBox.height - 0.8 * X_HEIGHT)
        supsub = VBox(shift=subShift, children=[
            elem(subBox, marginLeft=-base.italic if isCharacterBox else 0,
                 marginRight=scriptspace),
        ])
    else:
        # Rule 18c, d
        supShift = max(supShift, minSupShift, supBox.depth + 0.25 * X_HEIGHT)
        supsub = VBox(shift=-supShift, children=[
            elem(supBox, marginRight=scriptspace),
        ])

    # The caret and the selection go with the scripts, so that they cover
    # the base and its scripts together.
    scripts = Box(supsub, classes=["msubsup"])
    scripts.caret = atom.caret
    scripts.isSelected = atom.isSelected

    return Box([base, scripts], type=type or base.type, isTight=base.isTight)


# Places the superscript and subscript of the atom above and below `base`,
# like the limits of a big operator.
def attachLimits(atom, options, base, baseShift=0, slant=0, type="op"):
    above = None
    if atom.superscript:
        above = Atom.createBox(options.extend(mathstyle="superscript"), atom.superscript)
    below = None
    if atom.subscript:
        below = Atom.createBox(options.extend(mathstyle="subscript"), atom.subscript)

    if above is None and below is None:
        return base

    return makeLimitsStack(options, base, above=above, below=below,
                           baseShift=baseShift, slant=slant, type=type)


groupTypes = {}


def groupSymbol(atom, options):
    type = atom.type
    if atom.value is None:
        base = Atom.createBox(options, atom.body, type=type) or Box(None, type=type)
    elif atom.mode == "text":
        base = makeOrd(atom.value, options, options.font, mode="text", type=type)
        # The italic correction applies only in math mode
        base.italic = 0
        base.right = 0
    elif type == "ord":
        base = makeOrd(atom.value, options, options.font)
    else:
        base = mathsym(atom.value, options, ["m" + type], type)

    if type == "middle":
        # Sized by the enclosing \left...\right
        base.delim = atom.value

    if atom.caret and not atom.superscript and not atom.subscript:
        base.caret = atom.caret
    return attachSupsub(atom, options, base)

for symbolType in symbolTypes:
    groupTypes[symbolType] = groupSymbol


def groupPlaceholder(atom, options):
    base = makeSymbol(atom.value or "⬚", "Main-Regular", options,
                      classes=["ML__placeholder"], type="ord")
    return attachSupsub(atom, options, base)
groupTypes["placeholder"] = groupPlaceholder


def groupError(atom, options):
    return makeErrorBox(atom, options)
groupTypes["error"] = groupError


def groupInfix(atom, options):
    return reportError(atom, options, "Unresolved infix command '{0}'".format(atom.command))
groupTypes["infix"] = groupInfix


# A braced group is laid out as an ordinary symbol
def groupGroup(atom, options):
    params = atom.params or GroupOptions()
    context = options.extend(mathstyle=params.mathstyle)
    base = Atom.createBox(context, atom.body, type="ord") or Box(None, type="ord")
    return attachSupsub(atom, options, base)
groupTypes["group"] = groupGroup


def groupText(atom, options):
    if atom.body is not None:
        box = Atom.createBox(options, atom.body, type="ord", classes=["ML__text"])
        return box or Box(None, type="ord")
    return makeOrd(atom.value or "", options, options.font, mode="text")
groupTypes["text"] = groupText


def groupSpacing(atom, options):
    params = atom.params
    if params is None:
        return reportError(atom, options, "A space needs a width or a register")
    if params.register is not None:
        width = options.getRegisterAsEm(params.register)
    else:
        width = dimensionToEm(params.width, options)
    box = Box(None, classes=["ML__spacing"], type="spacing")
    box.left = width
    return box
groupTypes["spacing"] = groupSpacing


def groupRule(atom, options):
    params = atom.params
    if params is None:
        return reportError(atom, options, "A rule needs a width and a height")

    shift = dimensionToEm(params.shift, options)
    width = dimensionToEm(params.width, options)
    height = dimensionToEm(params.height, options)

    rule = Box(None, classes=["ML__rule"], type="ord")
    rule.setStyle("border-right-width", width, "em")
    rule.setStyle("border-top-width", height, "em")
    rule.setStyle("bottom", shift, "em")
    rule.width = width
    rule.height = height + shift
    rule.depth = -shift
    return attachSupsub(atom, options, rule)
groupTypes["rule"] = groupRule


# Fractions are handled in the TeXbook on pages 444-445, rules 15(a-e).
def groupGenfrac(atom, options):
    params = atom.params or GenfracOptions()

    # Figure out what style this fraction should be in
    fracContext = options.extend(mathstyle=params.mathstyle)
    metrics = fracContext.metrics

    numContext = fracContext.extend(mathstyle="" if params.continuousFraction else "numerator")
    numerBox = Atom.createBox(numContext, atom.above, type="ignore") or Box(None, type="ignore")
    if params.numerPrefix:
        numerBox = Box([Box(params.numerPrefix), numerBox], isTight=numContext.isTight, type="ignore")

    denomContext = fracContext.extend(mathstyle="" if params.continuousFraction else "denominator")
    denomBox = Atom.createBox(denomContext, atom.below, type="ignore") or Box(None, type="ignore")
    if params.denomPrefix:
        denomBox = Box([Box(params.denomPrefix), denomBox], isTight=denomContext.isTight, type="ignore")

    ruleThickness = metrics.defaultRuleThickness if params.hasBarLine else 0

    # Rule 15b
    if fracContext.isDisplayStyle:
        numShift = metrics.num1
        if ruleThickness > 0:
            clearance = 3 * ruleThickness
        else:
            clearance = 7 * metrics.defaultRuleThickness
        denomShift = metrics.denom1
    else:
        if ruleThickness > 0:
            numShift = metrics.num2
            clearance = ruleThickness
        else:
            numShift = metrics.num3
            clearance = 3 * metrics.defaultRuleThickness
        denomShift = metrics.denom2

    center = ["ML__center"]
    if params.align != "center":
        center = ["ML__" + params.align]

    if ruleThickness == 0:
        # Rule 15c
        candidateClearance = (numShift - numerBox.depth) - (denomBox.height - denomShift)
        if candidateClearance < clearance:
            numShift += (clearance - candidateClearance) / 2
            denomShift += (clearance - candidateClearance) / 2

        frac = VBox(individualShift=[
            elem(denomBox, shift=denomShift, classes=center),
            elem(numerBox, shift=-numShift, classes=center),
        ])
    else:
        # Rule 15d
        axisHeight = metrics.axisHeight

        if (numShift - numerBox.depth) - (axisHeight + ruleThickness / 2) < clearance:
            numShift += clearance - ((numShift - numerBox.depth) - (axisHeight + ruleThickness / 2))

        if (axisHeight - ruleThickness / 2) - (denomBox.height - denomShift) < clearance:
            denomShift += clearance - ((axisHeight - ruleThickness / 2) - (denomBox.height - denomShift))

        # The line is centered on the axis
        fracLine = Box(None, classes=["ML__frac-line"],
                       height=ruleThickness / 2, depth=ruleThickness / 2)

        frac = VBox(individualShift=[
            elem(denomBox, shift=denomShift, classes=center),
            elem(fracLine, shift=-axisHeight),
            elem(numerBox, shift=-numShift, classes=center),
        ])

    # The style of the fraction may differ from the enclosing style (\dfrac,
    # \tfrac): account for the size change
    frac = frac.wrap(fracContext)

    # Rule 15e
    delimSize = metrics.delim1 if fracContext.isDisplayStyle else metrics.delim2

    if params.leftDelim:
        leftDelim = makeCustomSizedDelim("open", params.leftDelim, delimSize, True, options)
    else:
        leftDelim = makeNullDelimiter(fracContext, ["open"])

    if params.continuousFraction:
        # Zero width for \cfrac
        rightDelim = Box(None, type="close")
    elif params.rightDelim:
        rightDelim = makeCustomSizedDelim("close", params.rightDelim, delimSize, True, options)
    else:
        rightDelim = makeNullDelimiter(fracContext, ["close"])

    # TeXbook p. 170: "fractions are treated as type Inner."
    result = Box([leftDelim, frac, rightDelim], isTight=fracContext.isTight,
                 type="inner", classes=["mfrac"])
    result.caret = atom.caret
    return attachSupsub(atom, options, result)
groupTypes["genfrac"] = groupGenfrac


# Accents are handled in the TeXbook pg. 443, rule 12.
def groupAccent(atom, options):
    params = atom.params
    if not isinstance(params, AccentOptions):
        return reportError(atom, options, "An accent needs a character or a stretchy graphic")

    # Build the base atom in the cramped style
    base = Atom.createBox(options.extend(mathstyle="cramp"), atom.body) or Box(None)

    # Calculate the skew of the accent. This is based on the line "If the
    # nucleus is not a single character, let s = 0; otherwise set s to the
    # kern amount for the nucleus followed by the \skewchar of its font."
    # Note that our skew metrics are just the kern between each character
    # and the skewchar.
    skew = 0
    if not atom.hasEmptyBranch("body") and len(atom.body) == 2 and atom.body[1].isCharacterBox():
        skew = base.skew

    # Calculate the amount of space between the body and the accent
    clearance = min(base.height, options.metrics.xHeight)

    if params.svgAccent:
        accentBody = makeSVGBox(params.svgAccent)
        clearance = -clearance + options.metrics.bigOpSpacing1
    else:
        # Build the accent
        accent = makeSymbol(params.accent, "Main-Regular", options)
        # Remove the italic correction of the accent, because it only serves to
        # shift the accent over to a place we don't want.
        accent.italic = 0
        accent.right = 0
        # The \vec character that the fonts use is a combining character, and
        # thus shows up much too far to the left. To account for this, we add a
        # specific class which shifts the accent over to where we want it.
        classes = ["ML__accent-body"]
        if params.accent == "⃗":
            classes.append("ML__accent-vec")
        accentBody = Box(Box(accent), classes=classes)

    # Shift the accent over by the skew. Note we shift by twice the skew
    # because we are centering the accent, so by adding 2*skew to the left,
    # we shift it to the right by 1*skew.
    accentStack = VBox(firstBaseline=[
        base,
        -clearance,
        elem(accentBody, marginLeft=2 * skew),
    ])

    result = Box(accentStack, classes=["ML__accent"], type="ord")
    result.caret = atom.caret
    return attachSupsub(atom, options, result)
groupTypes["accent"] = groupAccent


# Combines a base with the boxes above and below it
def makeOverunderStack(options, base, above=None, below=None, type="ord", paddedLabels=False):
    # If nothing above and nothing below, nothing to do.
    if above is None and below is None:
        box = Box(base, type=type)
        box.setStyle("position", "relative")
        return box

    metrics = options.metrics
    aboveShift = 0
    if above is not None:
        aboveShift = -above.depth + metrics.bigOpSpacing2

    classes = ["ML__center"]
    if paddedLabels:
        classes.append("ML__label_padding")

    if above is not None and below is not None:
        bottom = metrics.bigOpSpacing5 + below.height + below.depth + base.depth
        result = VBox(bottom=bottom, children=[
            metrics.bigOpSpacing5,
            elem(below, classes=classes),
            elem(base, classes=["ML__center"]),
            aboveShift,
            elem(above, classes=classes),
            metrics.bigOpSpacing5,
        ])
    elif below is not None:
        result = VBox(top=base.height, children=[
            metrics.bigOpSpacing5,
            elem(below, classes=classes),
            elem(base, classes=["ML__center"]),
        ])
    else:
        result = VBox(bottom=base.depth, children=[
            elem(base, classes=["ML__center"]),
            aboveShift,
            elem(above, classes=classes),
            metrics.bigOpSpacing5,
        ])

    return Box(result, type=type)


def groupOverunder(atom, options):
    params = atom.params or OverunderOptions()

    if params.svgBody:
        body = makeSVGBox(params.svgBody)
    else:
        body = Atom.createBox(options, atom.body, type="skip") or Box(None, type="skip")

    # The labels are in scriptstyle
    labelContext = options.extend(mathstyle="scriptstyle")
    above = None
    if params.svgAbove:
        above = makeSVGBox(params.svgAbove)
    elif atom.above:
        above = Atom.createBox(labelContext, atom.above, type="skip")

    below = None
    if params.svgBelow:
        below = makeSVGBox(params.svgBelow)
    elif atom.below:
        below = Atom.createBox(labelContext, atom.below, type="skip")

    if params.paddedBody:
        # The base of \overset is padded, but the base of \overbrace isn't
        body = Box([
            makeNullDelimiter(options, ["open"]),
            body,
            makeNullDelimiter(options, ["close"]),
        ], type="skip")

    base = makeOverunderStack(options, body, above=above, below=below,
                              type=params.boxType, paddedLabels=params.paddedLabels)

    if params.supsubPlacement == "over-under":
        base = attachLimits(atom, options, base, type=base.type)
    else:
        base = attachSupsub(atom, options, base)

    base.caret = atom.caret
    return base
groupTypes["overunder"] = groupOverunder


# \llap and \rlap: the body overlaps what is on its left or right
def groupOverlap(atom, options):
    params = atom.params or OverlapOptions()
    content = Atom.createBox(options, atom.body) or Box(None)
    result = Box([
        Box(content, classes=["ML__inner"]),
        Box(None, classes=["ML__fix"]),
    ], classes=["ML__llap" if params.align == "left" else "ML__rlap"], type=params.boxType)
    return attachSupsub(atom, options, result)
groupTypes["overlap"] = groupOverlap


def groupPhantom(atom, options):
    params = atom.params or PhantomOptions()
    phantom = options.extend(isPhantom=True)

    if not params.smashHeight and not params.smashDepth and not params.smashWidth:
        return Atom.createBox(phantom, atom.body, classes=["ML__inner"])

    content = Atom.createBox(phantom if params.isInvisible else options, atom.body)
    if content is None:
        return None

    if params.smashWidth:
        fix = Box(None, classes=["ML__fix"])
        return Box([content, fix], classes=["ML__rlap"]).wrap(options)

    if not params.smashHeight and not params.smashDepth:
        return content

    if params.smashHeight:
        content.height = 0
    if params.smashDepth:
        content.depth = 0
    for box in content.children or []:
        if params.smashHeight:
            box.height = 0
        if params.smashDepth:
            box.depth = 0

    # A stack of one box keeps the smashed dimensions whatever the box holds
    return VBox(firstBaseline=[content], type="ord").wrap(options)
groupTypes["phantom"] = groupPhantom


def makeColGap(width):
    separator = Box(None, classes=["ML__arraycolsep"])
    separator.width = width
    return separator


# A column made of the same atoms on each row
def makeColOfRepeatingElements(options, rows, offset, atoms):
    col = []
    for row in rows:
        cell = Box(Atom.createBox(options, atoms))
        cell.depth = row["depth"]
        cell.height = row["height"]
        col.append(elem(cell, shift=row["pos"] - offset))
    return VBox(individualShift=col)


# See http://tug.ctan.org/macros/latex/base/ltfsstrc.dtx
# and http://tug.ctan.org/macros/latex/base/lttab.dtx
def groupArray(atom, options):
    params = atom.params
    colFormat = params.colFormat

    cellContext = options.extend(mathstyle=params.mathstyle)
    axisHeight = cellContext.metrics.axisHeight

    # Row spacing
    arraystretch = atom.getArraystretch(options)
    arraycolsep = atom.getArraycolsep(options)
    jotSize = atom.getJot(options)
    arrayskip = arraystretch * BASELINE_SKIP
    arstrutHeight = 0.7 * arrayskip
    arstrutDepth = 0.3 * arrayskip  # \@arstrutbox in lttab.dtx

    totalHeight = 0
    nc = 0
    body = []
    nr = len(atom.array)
    for r, inrow in enumerate(atom.array):
        nc = max(nc, len(inrow))
        height = arstrutHeight  # \@array adds an \@arstrut
        depth = arstrutDepth  # to each row (via the template)
        cells = []
        for cell in inrow:
            cellBox = Atom.createBox(cellContext, cell, type="ignore")
            elt = Box(cellBox, type="ignore")
            depth = max(depth, elt.depth)
            height = max(height, elt.height)
            cells.append(elt)

        jot = 0 if r == nr - 1 else jotSize
        if r < len(params.rowGaps) and params.rowGaps[r]:
            jot = params.rowGaps[r]
            if jot > 0:
                # \@argarraycr
                jot += arstrutDepth
                if depth < jot:
                    depth = jot  # \@xargarraycr
                jot = 0

        totalHeight += height
        body.append({"cells": cells, "height": height, "depth": depth, "pos": totalHeight})
        totalHeight += depth + jot  # \@yargarraycr

    # Center the array on the axis
    offset = totalHeight / 2 + axisHeight
    contentCols = []
    for colIndex in range(nc):
        col = []
        for row in body:
            if colIndex >= len(row["cells"]):
                continue
            element = row["cells"][colIndex]
            element.depth = row["depth"]
            element.height = row["height"]
            col.append(elem(element, shift=row["pos"] - offset))
        if col:
            contentCols.append(VBox(individualShift=col))

    # Iterate over each column description. Each one indicates whether to
    # insert a gap, a rule or a column from `contentCols`.
    cols = []
    previousColContent = False
    previousColRule = False
    currentContentCol = 0
    firstColumn = not params.leftDelim
    for colDesc in colFormat:
        if "align" in colDesc:
            if currentContentCol >= len(contentCols):
                break
            if previousColContent:
                # If no gap was provided, insert a default gap between
                # consecutive columns of content
                cols.append(makeColGap(2 * arraycolsep))
            elif previousColRule or firstColumn:
                # If the previous column was a rule or this is the first
                # column add a smaller gap
                cols.append(makeColGap(arraycolsep))
            cols.append(Box(contentCols[currentContentCol], classes=["col-align-" + colDesc["align"]]))
            currentContentCol += 1
            previousColContent = True
            previousColRule = False
            firstColumn = False
        elif "gap" in colDesc:
            if isinstance(colDesc["gap"], (int, float)):
                # A number: how much space, in em, to leave between the columns
                cols.append(makeColGap(colDesc["gap"]))
            else:
                # A list of atoms, repeated on each row
                cols.append(makeColOfRepeatingElements(options, body, offset, colDesc["gap"]))
            previousColContent = False
            previousColRule = False
            firstColumn = False
        elif colDesc.get("rule"):
            separator = Box(None, classes=["ML__vertical-separator"])
            separator.setStyle("height", totalHeight, "em")
            separator.setStyle("margin-top", 3 * axisHeight - offset, "em")
            separator.setStyle("vertical-align", "top")
            gap = 0
            if previousColRule:
                gap = options.getRegisterAsEm("doublerulesep") - options.getRegisterAsEm("arrayrulewidth")
            elif previousColContent:
                gap = arraycolsep - options.getRegisterAsEm("arrayrulewidth")
            separator.left = gap
            cols.append(separator)
            previousColContent = False
            previousColRule = True
            firstColumn = False

    if previousColContent and not params.rightDelim:
        # If the last column was content, add a small gap
        cols.append(makeColGap(arraycolsep))

    if (not params.leftDelim or params.leftDelim == ".") and (not params.rightDelim or params.rightDelim == "."):
        # There are no delimiters around the array, just return what we've
        # built so far.
        result = Box(cols, classes=["mtable"], type="ord")
    else:
        # Wrap the core of the array with the delimiters
        inner = Box(cols, classes=["mtable"])
        result = Box([
            makeLeftRightDelim("open", params.leftDelim, inner.height, inner.depth, options),
            inner,
            makeLeftRightDelim("close", params.rightDelim, inner.height, inner.depth, options),
        ], type="ord")

    result.caret = atom.caret
    return attachSupsub(atom, options, result)
groupTypes["array"] = groupArray


# Big operators, TeXbook rule 13
def groupOp(atom, options):
    params = atom.params or OperatorOptions()
    baseShift = 0
    slant = 0
    if params.isExtensibleSymbol:
        # Most symbol operators get larger in displaystyle (rule 13)
        # except \smallint
        large = options.isDisplayStyle and atom.command != "\\smallint"
        base = Box(atom.value,
                   fontFamily="Size2-Regular" if large else "Size1-Regular",
                   classes=["ML__op-symbol", "ML__large-op" if large else "ML__small-op"],
                   type="op",
                   maxFontSize=options.scalingFactor)

        # Shift the symbol so its center lies on the axis (rule 13). It
        # appears that our fonts have the centers of the symbols already
        # almost on the axis, so these numbers are very small.
        baseShift = (base.height - base.depth) / 2 - AXIS_HEIGHT * options.scalingFactor

        # The slant of the symbol is just its italic correction.
        slant = base.italic
        base.setTop(baseShift)
    else:
        # A text operator (\sin, \lim...), set upright
        base = makeSymbol(atom.value or "", "Main-Regular", options, classes=["ML__op"], type="op")
        base.maxFontSize = options.scalingFactor

    result = base
    if atom.superscript or atom.subscript:
        limits = params.limits
        if limits == "over-under" or (limits == "auto" and options.isDisplayStyle):
            result = attachLimits(atom, options, base, baseShift=baseShift, slant=slant)
        else:
            result = attachSupsub(atom, options, base)

    result = Box(result, type="op", classes=["ML__op-group"])
    result.isSelected = atom.isSelected
    return result
groupTypes["op"] = groupOp


def _replaceMiddleDelims(box, height, depth, options):
    for index, child in enumerate(box.children or []):
        if child.delim:
            delim = makeLeftRightDelim("middle", child.delim, height, depth, options)
            delim.caret = child.caret
            box.children[index] = delim
        elif child.type == "lift":
            _replaceMiddleDelims(child, height, depth, options)


def groupLeftRight(atom, options):
    params = atom.params or LeftRightOptions()

    # The size of delimiters is the same, regardless of what mathstyle we are
    # in. Thus, to correctly calculate the size of delimiter we need around
    # a group, we scale down the inner size based on the size.
    delimContext = options.extend(mathstyle="textstyle")
    inner = Atom.createBox(options, atom.body, type="ignore") or Box(None, type="ignore")

    innerHeight = inner.height / delimContext.scalingFactor
    innerDepth = inner.depth / delimContext.scalingFactor

    # Replace the \middle boxes with delimiters now that we know the
    # height and depth
    _replaceMiddleDelims(inner, innerHeight, innerDepth, options)

    boxes = [
        makeLeftRightDelim("open", params.leftDelim, innerHeight, innerDepth,
                           delimContext, classes=["ML__open"]),
        inner,
        makeLeftRightDelim("close", params.rightDelim, innerHeight, innerDepth,
                           delimContext, classes=["ML__close"]),
    ]

    result = Box(boxes, type="inner", classes=["ML__left-right"])
    result.caret = atom.caret
    return attachSupsub(atom, options, result)
groupTypes["leftright"] = groupLeftRight


# \big, \Big, \bigg and \Bigg
def groupSizedDelim(atom, options):
    params = atom.params
    if params is None:
        return reportError(atom, options, "A sized delimiter needs a delimiter and a size")
    result = makeSizedDelim(params.delim, params.size, options, type=params.boxType)
    return attachSupsub(atom, options, result, isCharacterBox=False)
groupTypes["sizeddelim"] = groupSizedDelim


# Overlines and underlines are handled in the TeXbook pg 443, Rules 9 and 10.
def groupLine(atom, options):
    params = atom.params or LineOptions()
    ruleWidth = options.metrics.defaultRuleThickness

    # Create the line
    line = Box(None, classes=["ML__" + params.position + "-line"],
               height=ruleWidth, maxFontSize=1.0)

    if params.position == "overline":
        # Build the inner group in the cramped style.
        inner = Atom.createBox(options.extend(mathstyle="cramp"), atom.body) or Box(None)
        vlist = VBox(firstBaseline=[inner, 3 * ruleWidth, line, ruleWidth])
    else:
        inner = Atom.createBox(options, atom.body) or Box(None)
        vlist = VBox(top=inner.height, children=[ruleWidth, line, 3 * ruleWidth, inner])

    result = Box(vlist, classes=["ML__" + params.position], type="ord")
    result.caret = atom.caret
    return attachSupsub(atom, options, result)
groupTypes["line"] = groupLine


# The padding of a box, in em: the `fboxsep` register unless given
def _framePadding(padding, options):
    if padding is None or padding == "auto":
        return options.getRegisterAsEm("fboxsep")
    return dimensionToEm(padding, options)


def groupBox(atom, options):
    params = atom.params or BoxOptions()
    base = Atom.createBox(options, atom.body, type="ord")
    if base is None:
        return None

    # A positive offset raises the body, like \raisebox
    base.setTop(-dimensionToEm(params.offset, options))
    padding = _framePadding(params.padding, options)

    # The frame overlaps the base, extended by the padding on every side
    frame = Box(None, classes=["ML__box"])
    frame.height = base.height + padding
    frame.depth = base.depth + padding
    frame.setStyle("height", frame.height + frame.depth, "em")
    if params.backgroundcolor:
        frame.setStyle("background-color", options.mapColor(params.backgroundcolor))
    if params.framecolor:
        frame.setStyle("border", "{0} solid {1}".format(
            toCss(options.getRegisterAsEm("fboxrule"), "em"),
            options.mapColor(params.framecolor)))
    if params.border:
        frame.setStyle("border", params.border)

    result = Box([frame, base], type="ord")
    result.height = base.height + padding
    result.depth = base.depth + padding
    result.left = padding
    result.right = padding
    result.caret = atom.caret
    return attachSupsub(atom, options, result)
groupTypes["box"] = groupBox


def groupEnclose(atom, options):
    params = atom.params or EncloseOptions()
    base = Atom.createBox(options, atom.body)
    if base is None:
        return None

    padding = _framePadding(params.padding, options)
    notation = Box(None, classes=["ML__notation"])
    notation.height = base.height + padding
    notation.depth = base.depth + padding
    notation.setStyle("height", notation.height + notation.depth, "em")
    notation.attributes["data-notation"] = " ".join(sorted(params.notation))

    if "box" in params.notation:
        notation.setStyle("border", params.borderStyle)
    if "roundedbox" in params.notation:
        notation.setStyle("border-radius", "8px")
        notation.setStyle("border", params.borderStyle)
    if "circle" in params.notation:
        notation.setStyle("border-radius", "50%")
        notation.setStyle("border", params.borderStyle)
    if "actuarial" in params.notation:
        notation.setStyle("border-top", params.borderStyle)
        notation.setStyle("border-right", params.borderStyle)
    if "madruwb" in params.notation:
        notation.setStyle("border-bottom", params.borderStyle)
        notation.setStyle("border-right", params.borderStyle)
    for side in ("top", "bottom", "left", "right"):
        if side in params.notation:
            notation.setStyle("border-" + side, params.borderStyle)

    # The strikes are drawn by the markup layer over the notation box
    for strike in ("horizontalstrike", "verticalstrike", "updiagonalstrike",
                   "downdiagonalstrike", "updiagonalarrow"):
        if strike in params.notation:
            notation.classes.append("ML__" + strike)
    if params.strokeColor:
        notation.attributes["stroke"] = options.mapColor(params.strokeColor)
    if params.svgStrokeStyle:
        notation.attributes["stroke-dasharray"] = params.svgStrokeStyle

    result = Box([notation, base], type="ord")
    result.height = base.height + padding
    result.depth = base.depth + padding
    result.left = padding
    result.right = padding
    result.caret = atom.caret
    return attachSupsub(atom, options, result)
groupTypes["enclose"] = groupEnclose


# Square roots are handled in the TeXbook pg. 443, Rule 11.
def groupSurd(atom, options):
    # > Math accents, and the operations \sqrt and \overline, change
    # > uncramped styles to their cramped counterparts
    innerContext = options.extend(mathstyle="cramp")
    innerBox = Atom.createBox(innerContext, atom.body, type="inner") or Box(None)

    factor = innerContext.scalingFactor
    ruleWidth = innerContext.metrics.defaultRuleThickness / factor

    # > let phi=sigma5 if C>T (TeXbook p. 443)
    phi = X_HEIGHT if options.isDisplayStyle else ruleWidth

    line = Box(None, classes=["ML__sqrt-line"], height=ruleWidth)

    # Calculate the clearance between the body and line
    # > Set psi = theta + 1/4 |phi|
    lineClearance = factor * (ruleWidth + phi / 4)
    innerTotalHeight = max(factor * 2 * phi, innerBox.height + innerBox.depth)

    # Create a radical delimiter of the required minimum size
    minDelimiterHeight = innerTotalHeight + lineClearance + ruleWidth
    delimBox = Box(makeCustomSizedDelim("inner", "\\surd", minDelimiterHeight, False, options),
                   classes=["ML__sqrt-sign"])
    delimBox.isSelected = atom.isSelected

    delimDepth = delimBox.height + delimBox.depth - ruleWidth

    # Adjust the clearance based on the delimiter size
    if delimDepth > innerBox.height + innerBox.depth + lineClearance:
        lineClearance = (lineClearance + delimDepth - (innerBox.height + innerBox.depth)) / 2

    # Shift the delimiter so that its top lines up with the top of the line
    delimBox.setTop(delimBox.height - innerBox.height - lineClearance)

    bodyBox = VBox(firstBaseline=[
        Box(innerBox),
        lineClearance - 2 * ruleWidth,
        line,
        ruleWidth,
    ])

    # The index is always in scriptscript style
    # TeXbook p. 360:
    # > \def\root#1\of{\setbox\rootbox=
    # > \hbox{$\m@th \scriptscriptstyle{#1}$}\mathpalette\r@@t}
    indexBox = Atom.createBox(options.extend(mathstyle="scriptscriptstyle"), atom.above, type="ignore")

    if indexBox is None:
        result = Box([delimBox, bodyBox], classes=["ML__sqrt"], type="inner")
        result.setStyle("display", "inline-block")
        result.setStyle("height", result.height + result.depth, "em")
    else:
        # The amount the index is shifted by is taken from the TeX source, in
        # the definition of \r@@t.
        indexStack = VBox(
            shift=-0.6 * (max(delimBox.height, bodyBox.height) - max(delimBox.depth, bodyBox.depth)),
            children=[indexBox])
        result = Box([
            Box(indexStack, classes=["ML__sqrt-index"], type="ignore"),
            delimBox,
            bodyBox,
        ], classes=["ML__sqrt"], type="inner")
        result.height = delimBox.height
        result.depth = delimBox.depth

    result.caret = atom.caret
    return attachSupsub(atom, options, result, isCharacterBox=False)
groupTypes["surd"] = groupSurd


# buildGroup is the function that takes an atom and calls the correct
# groupType function for it. It also handles the color, background color
# and size of the atom.
def buildGroup(atom, options):
    if atom.type == "first":
        return None

    style = atom.style
    context = options.extend(
        color=style.get("color"),
        backgroundColor=style.get("backgroundColor"),
        size=style.get("fontSize"),
        font=style.get("fontFamily"))

    if atom.type in groupTypes:
        result = groupTypes[atom.type](atom, context)
    else:
        result = reportError(atom, context, "Unknown atom type '{0}'".format(atom.type))

    if result is None:
        return None
    return result.wrap(context)
