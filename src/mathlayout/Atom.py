# An atom is an abstract node of the math tree, representing one construct:
# a symbol, a fraction, an accent, an array... It owns zero or more branches
# (lists of child atoms), and can render itself into a box given a rendering
# context (see `Options`).
#
# Each named branch starts with a `first` sentinel atom. The sentinel is
# never rendered as content: it anchors the operations at offset 0 of the
# branch.
#
# The layout of each construct is read from `params`, one of the option
# classes below, validated when it is created.

from . import boxTree
from .LayoutError import LayoutError
from .boxTree import Box

NAMED_BRANCHES = ["body", "above", "below", "superscript", "subscript"]

mathstyleNames = [None, "auto", "displaystyle", "textstyle", "scriptstyle", "scriptscriptstyle"]


def isNamedBranch(branch):
    return branch in NAMED_BRANCHES


def isCellBranch(branch):
    return isinstance(branch, tuple) and len(branch) == 2


def _check(condition, message):
    if not condition:
        raise LayoutError(message)


# Options of a generalized fraction:
#  - hasBarLine: whether a rule separates the numerator and the denominator
#  - leftDelim, rightDelim: the delimiters around the fraction, or None
#  - mathstyle: forces the style of the fraction (\dfrac, \tfrac)
#  - continuousFraction: \cfrac, the numerator and denominator keep the
#    style of the fraction
#  - align: the horizontal alignment of the numerator and denominator
#  - numerPrefix, denomPrefix: text placed before the numerator/denominator
class GenfracOptions(object):
    def __init__(self, hasBarLine=True, leftDelim=None, rightDelim=None, mathstyle=None,
                 continuousFraction=False, align="center", numerPrefix=None, denomPrefix=None):
        _check(mathstyle in mathstyleNames, "Invalid fraction style '{0}'".format(mathstyle))
        _check(align in ("left", "center", "right"), "Invalid fraction alignment '{0}'".format(align))
        self.hasBarLine = hasBarLine
        self.leftDelim = leftDelim
        self.rightDelim = rightDelim
        self.mathstyle = mathstyle
        self.continuousFraction = continuousFraction
        self.align = align
        self.numerPrefix = numerPrefix
        self.denomPrefix = denomPrefix


# An accent is either a character (e.g. U+02C6 for \hat) or the name of a
# stretchy graphic (e.g. "widehat").
class AccentOptions(object):
    def __init__(self, accent=None, svgAccent=None):
        _check((accent is None) != (svgAccent is None),
               "An accent needs either a character or a stretchy graphic")
        if svgAccent is not None:
            boxTree.svgBodyHeight(svgAccent)
        self.accent = accent
        self.svgAccent = svgAccent


# Options of an over/under stack. The body, and what is above and below, can
# be stretchy graphics instead of the corresponding branches.
class OverunderOptions(object):
    def __init__(self, svgBody=None, svgAbove=None, svgBelow=None, paddedBody=False,
                 paddedLabels=False, boxType="ord", supsubPlacement="adjacent"):
        _check(boxType in ("ord", "bin", "rel"), "Invalid over/under type '{0}'".format(boxType))
        _check(supsubPlacement in ("adjacent", "over-under"),
               "Invalid superscript placement '{0}'".format(supsubPlacement))
        for name in (svgBody, svgAbove, svgBelow):
            if name is not None:
                boxTree.svgBodyHeight(name)
        self.svgBody = svgBody
        self.svgAbove = svgAbove
        self.svgBelow = svgBelow
        self.paddedBody = paddedBody
        self.paddedLabels = paddedLabels
        self.boxType = boxType
        self.supsubPlacement = supsubPlacement


# \llap (align="left") and \rlap (align="right")
class OverlapOptions(object):
    def __init__(self, align="left", boxType="ord"):
        _check(align in ("left", "right"), "Invalid overlap alignment '{0}'".format(align))
        self.align = align
        self.boxType = boxType


# \phantom is invisible and takes space. \smash and its variants are visible
# and zero out some of the dimensions of their body.
class PhantomOptions(object):
    def __init__(self, isInvisible=True, smashHeight=False, smashDepth=False, smashWidth=False):
        _check(isInvisible or smashHeight or smashDepth or smashWidth,
               "A visible phantom must smash its height, depth or width")
        self.isInvisible = isInvisible
        self.smashHeight = smashHeight
        self.smashDepth = smashDepth
        self.smashWidth = smashWidth


# Big operators: `limits` is one of "auto" (limits above and below in
# displaystyle, corner scripts otherwise), "over-under" or "adjacent".
class OperatorOptions(object):
    def __init__(self, limits="auto", isExtensibleSymbol=False):
        _check(limits in ("auto", "over-under", "adjacent"), "Invalid limits '{0}'".format(limits))
        self.limits = limits
        self.isExtensibleSymbol = isExtensibleSymbol


class LeftRightOptions(object):
    def __init__(self, leftDelim=".", rightDelim="."):
        self.leftDelim = leftDelim
        self.rightDelim = rightDelim


# A delimiter of one of the \big sizes (1 to 4)
class SizedDelimOptions(object):
    def __init__(self, delim, size=1, boxType="ord"):
        _check(size in (1, 2, 3, 4), "Invalid delimiter size '{0}'".format(size))
        self.delim = delim
        self.size = size
        self.boxType = boxType


class LineOptions(object):
    def __init__(self, position="overline"):
        _check(position in ("overline", "underline"), "Invalid line position '{0}'".format(position))
        self.position = position


# The dimensions of a rule, as accepted by `registers.parseDimension`
class RuleOptions(object):
    def __init__(self, width, height, shift=0):
        self.width = width
        self.height = height
        self.shift = shift


# An explicit space: either a dimension, or the name of a register
# (e.g. "thinmuskip").
class SpacingOptions(object):
    def __init__(self, width=None, register=None):
        _check((width is None) != (register is None), "A space needs either a width or a register")
        self.width = width
        self.register = register


# A framed or colored box around its body (\fbox, \colorbox, \boxed...).
# `padding` and `offset` are dimensions; the padding defaults to the
# `fboxsep` register. A positive offset raises the body.
class BoxOptions(object):
    def __init__(self, framecolor=None, backgroundcolor=None, padding=None, offset=0,
                 border=None):
        self.framecolor = framecolor
        self.backgroundcolor = backgroundcolor
        self.padding = padding
        self.offset = offset
        self.border = border


ENCLOSE_NOTATIONS = frozenset([
    "box", "roundedbox", "circle", "top", "bottom", "left", "right",
    "actuarial", "madruwb", "horizontalstrike", "verticalstrike",
    "updiagonalstrike", "downdiagonalstrike", "updiagonalarrow",
])


# The notations drawn around the body of an \enclose (or \cancel, \bcancel...)
class EncloseOptions(object):
    def __init__(self, notation=("box",), padding=None, borderStyle="1px solid",
                 strokeColor=None, svgStrokeStyle=None):
        notation = set(notation)
        _check(notation, "An enclosure needs at least one notation")
        unknown = notation - ENCLOSE_NOTATIONS
        _check(not unknown, "Invalid notation '{0}'".format(" ".join(sorted(unknown))))
        # The arrow is drawn over the strike, and the box is drawn with all
        # its sides
        if "updiagonalarrow" in notation:
            notation.discard("updiagonalstrike")
        if "box" in notation:
            notation -= set(["top", "bottom", "left", "right"])
        self.notation = notation
        self.padding = padding
        self.borderStyle = borderStyle
        self.strokeColor = strokeColor
        self.svgStrokeStyle = svgStrokeStyle


class GroupOptions(object):
    def __init__(self, mathstyle=None, latexOpen="{", latexClose="}"):
        _check(mathstyle in mathstyleNames, "Invalid group style '{0}'".format(mathstyle))
        self.mathstyle = mathstyle
        self.latexOpen = latexOpen
        self.latexClose = latexClose


# Style properties whose value "none" or "auto" means "inherit"
inheritValues = {
    "color": "none",
    "backgroundColor": "none",
    "fontFamily": "none",
    "fontShape": "auto",
    "fontSeries": "auto",
    "fontSize": "auto",
}


class Atom(object):
    def __init__(self, type, mode="math", value=None, command=None, style=None, body=None,
                 above=None, below=None, superscript=None, subscript=None, params=None,
                 verbatimLatex=None):
        if value is not None and body is not None:
            raise LayoutError("An atom has either a value or a body")

        self.type = type
        self.mode = mode
        self.value = value
        self.command = command
        self.style = dict(style or {})
        self.params = params

        self.parent = None
        self.parentBranch = None
        self.isSelected = False
        self.caret = None

        self._branches = {}
        self._children = None
        self._changeCounter = 0

        self.setChildren(body, "body")
        self.setChildren(above, "above")
        self.setChildren(below, "below")
        self.setChildren(superscript, "superscript")
        self.setChildren(subscript, "subscript")
        self.verbatimLatex = verbatimLatex

    def __repr__(self):
        if self.value is not None:
            return "Atom({0!r}, {1!r})".format(self.type, self.value)
        return "Atom({0!r})".format(self.type)

    #
    # Branches
    #

    def branch(self, name):
        if not isNamedBranch(name):
            raise LayoutError("Unknown branch {0!r}".format(name), self)
        return self._branches.get(name)

    @property
    def branches(self):
        return [name for name in NAMED_BRANCHES if self._branches.get(name) is not None]

    # Returns the branch, creating it (with its sentinel) if necessary
    def createBranch(self, name):
        if self.branch(name) is None:
            self._setBranch(name, [self.makeFirstAtom(name)])
            self.markDirty()
        return self.branch(name)

    @property
    def body(self):
        return self.branch("body")

    @property
    def above(self):
        return self.branch("above")

    @property
    def below(self):
        return self.branch("below")

    @property
    def superscript(self):
        return self.branch("superscript")

    @property
    def subscript(self):
        return self.branch("subscript")

    @property
    def row(self):
        return self.parentBranch[0] if isCellBranch(self.parentBranch) else -1

    @property
    def col(self):
        return self.parentBranch[1] if isCellBranch(self.parentBranch) else -1

    def hasEmptyBranch(self, name):
        atoms = self.branch(name)
        if not atoms:
            return True
        if atoms[0].type != "first":
            raise LayoutError("The branch {0!r} does not start with a 'first' atom".format(name), self)
        return len(atoms) == 1

    #
    # Mutation
    #

    # Replaces the content of a branch. Setting None does nothing, setting
    # an empty list creates an empty branch. The children must not start
    # with a `first` atom: it is added here.
    def setChildren(self, children, branch):
        if children is None:
            return
        children = list(children)
        if children and children[0].type == "first":
            raise LayoutError("The children of a branch are given without their 'first' atom", self)
        previous = self.branch(branch) or []
        for child in children:
            if child.parent is not None and not (child.parent is self and child in previous):
                raise LayoutError("The atom {0!r} already belongs to a branch".format(child), self)
        self._releaseAll(previous)
        self._setBranch(branch, [self.makeFirstAtom(branch)] + children)
        for child in children:
            child.parent = self
            child.parentBranch = branch
        self.markDirty()

    def _setBranch(self, branch, atoms):
        if not isNamedBranch(branch):
            raise LayoutError("Unknown branch {0!r}".format(branch), self)
        self._branches[branch] = atoms

    def makeFirstAtom(self, branch):
        result = Atom("first", mode=self.mode)
        result.parent = self
        result.parentBranch = branch
        return result

    # Detaches the atoms of a branch that is being replaced
    @staticmethod
    def _releaseAll(atoms):
        for atom in atoms:
            atom.parent = None
            atom.parentBranch = None

    def _adopt(self, child, branch):
        if child.type == "first":
            raise LayoutError("A 'first' atom cannot be added to a branch", self)
        if child.parent is not None:
            raise LayoutError("The atom {0!r} already belongs to a branch".format(child), self)
        child.parent = self
        child.parentBranch = branch

    def addChild(self, child, branch):
        self._adopt(child, branch)
        self.createBranch(branch).append(child)
        self.markDirty()

    def addChildBefore(self, child, before):
        atoms = self.createBranch(before.parentBranch)
        index = atoms.index(before)
        if index == 0:
            raise LayoutError("Nothing can be added before the 'first' atom", self)
        self._adopt(child, before.parentBranch)
        atoms.insert(index, child)
        self.markDirty()

    def addChildAfter(self, child, after):
        atoms = self.createBranch(after.parentBranch)
        self._adopt(child, after.parentBranch)
        atoms.insert(atoms.index(after) + 1, child)
        self.markDirty()

    def addChildren(self, children, branch):
        atoms = self.createBranch(branch)
        for child in children:
            self._adopt(child, branch)
            atoms.append(child)
        self.markDirty()

    # Returns the last atom that was added
    def addChildrenAfter(self, children, after):
        atoms = self.createBranch(after.parentBranch)
        index = atoms.index(after) + 1
        for child in children:
            self._adopt(child, after.parentBranch)
        atoms[index:index] = children
        self.markDirty()
        return children[-1] if children else after

    # Removes a branch and returns its children, without the sentinel
    def removeBranch(self, name):
        children = self.branch(name)
        self._setBranch(name, None)
        if not children:
            return []
        if children[0].type != "first":
            raise LayoutError("The branch {0!r} does not start with a 'first' atom".format(name), self)
        for child in children:
            child.parent = None
            child.parentBranch = None
        self.markDirty()
        return children[1:]

    def removeChild(self, child):
        if child.parent is not self:
            raise LayoutError("The atom to remove is not a child of this atom", self)
        if child.type == "first":
            raise LayoutError("The 'first' atom of a branch cannot be removed", self)
        atoms = self.branch(child.parentBranch)
        atoms.remove(child)
        self.markDirty()
        child.parent = None
        child.parentBranch = None

    # Invalidates the derived state (children list, serialization) of this
    # atom and of all its ancestors, and bumps the change counter of the
    # root.
    def markDirty(self):
        atom = self
        while atom is not None:
            atom._children = None
            atom.verbatimLatex = None
            if atom.parent is None:
                atom._changeCounter += 1
            atom = atom.parent

    @property
    def changeCounter(self):
        if self.parent is not None:
            return self.parent.changeCounter
        return self._changeCounter

    #
    # Queries
    #

    # All the atoms in the branches of this atom, depth first, in the order
    # in which they are navigated.
    @property
    def children(self):
        if self._children is not None:
            return self._children
        result = []
        for atoms in self._allBranches():
            for atom in atoms:
                result.extend(atom.children)
                result.append(atom)
        self._children = result
        return result

    def _allBranches(self):
        for name in NAMED_BRANCHES:
            atoms = self._branches.get(name)
            if atoms:
                yield atoms

    @property
    def hasChildren(self):
        return len(self.children) > 0

    @property
    def firstChild(self):
        if not self.hasChildren:
            raise LayoutError("The atom has no children", self)
        return self.children[0]

    @property
    def lastChild(self):
        if not self.hasChildren:
            raise LayoutError("The atom has no children", self)
        return self.children[-1]

    @property
    def siblings(self):
        if self.parent is None:
            return []
        return self.parent.branch(self.parentBranch)

    @property
    def leftSibling(self):
        siblings = self.siblings
        index = siblings.index(self)
        return siblings[index - 1] if index > 0 else None

    @property
    def rightSibling(self):
        siblings = self.siblings
        index = siblings.index(self)
        return siblings[index + 1] if index + 1 < len(siblings) else None

    @property
    def treeDepth(self):
        result = 1
        atom = self.parent
        while atom is not None:
            atom = atom.parent
            result += 1
        return result

    @staticmethod
    def commonAncestor(a, b):
        if a is b or a.parent is b.parent:
            return a.parent
        parents = set()
        atom = a.parent
        while atom is not None:
            parents.add(id(atom))
            atom = atom.parent
        atom = b.parent
        while atom is not None:
            if id(atom) in parents:
                return atom
            atom = atom.parent
        return None

    def getInitialBaseElement(self):
        if self.hasEmptyBranch("body"):
            return self
        return self.body[1].getInitialBaseElement()

    def getFinalBaseElement(self):
        if self.hasEmptyBranch("body"):
            return self
        return self.body[-1].getFinalBaseElement()

    # Whether this atom is a single character: its scripts are then placed
    # without the supDrop/subDrop corrections.
    def isCharacterBox(self):
        if self.type in ("leftright", "genfrac", "sizeddelim", "array", "surd"):
            return False
        return self.getFinalBaseElement().type == "ord"

    @property
    def isExtensibleSymbol(self):
        return isinstance(self.params, OperatorOptions) and self.params.isExtensibleSymbol

    #
    # Style
    #

    @property
    def computedStyle(self):
        result = dict(self.parent.computedStyle) if self.parent is not None else {}
        result.update(self.style)
        # Variants are not inherited
        result.pop("variant", None)
        return result

    def applyStyle(self, style):
        self.markDirty()
        self.style.update(style)
        for prop, value in inheritValues.items():
            if self.style.get(prop) == value:
                del self.style[prop]
        for atoms in self._allBranches():
            for atom in atoms:
                atom.applyStyle(style)

    #
    # Serialization
    #

    # Returns a LaTeX-like string for this atom and its scripts. The result
    # is kept in `verbatimLatex` until the atom changes.
    def serialize(self):
        if self.verbatimLatex is None:
            self.verbatimLatex = self._serialize()
        return self.verbatimLatex

    @staticmethod
    def serializeList(atoms):
        return "".join(atom.serialize() for atom in atoms or [])

    def _serialize(self):
        if self.type == "first":
            return ""
        if self.type == "genfrac":
            result = "{0}{{{1}}}{{{2}}}".format(
                self.command or "\\frac",
                Atom.serializeList(self.above),
                Atom.serializeList(self.below))
        elif self.type == "surd":
            index = Atom.serializeList(self.above)
            result = "\\sqrt"
            if index:
                result += "[" + index + "]"
            result += "{" + Atom.serializeList(self.body) + "}"
        elif self.type == "leftright":
            params = self.params or LeftRightOptions()
            result = "\\left{0}{1}\\right{2}".format(
                params.leftDelim, Atom.serializeList(self.body), params.rightDelim)
        elif self.type == "group":
            params = self.params or GroupOptions()
            result = params.latexOpen + Atom.serializeList(self.body) + params.latexClose
        elif self.command and self.body is not None:
            result = "{0}{{{1}}}".format(self.command, Atom.serializeList(self.body))
        elif self.body is not None:
            result = Atom.serializeList(self.body)
        elif self.command:
            result = self.command
        elif self.value is None or self.value == "\u200b":
            result = ""
        else:
            result = self.value
        return result + self.serializeScripts()

    def serializeScripts(self):
        result = ""
        for name, prefix in (("subscript", "_"), ("superscript", "^")):
            atoms = self.branch(name)
            if atoms is None:
                continue
            text = Atom.serializeList(atoms)
            if len(text) == 1 and text.isdigit():
                result += prefix + text
            else:
                result += prefix + "{" + text + "}"
        return result

    #
    # Rendering
    #

    # Renders this atom into a box, or None for atoms that display nothing.
    def render(self, context):
        from . import buildHTML
        return buildHTML.buildGroup(self, context)

    # Renders a list of atoms (usually a branch) into a box. Consecutive atoms
    # with the same color, background color and size are grouped into a
    # `lift` box: their boxes are spaced as if they were siblings.
    @staticmethod
    def createBox(context, atoms, type=None, classes=None):
        if not atoms:
            return None

        boxes = []
        for run in getStyleRuns(atoms):
            box = renderStyleRun(context, run)
            if box is not None:
                boxes.append(box)
        if not boxes:
            return None

        if len(boxes) == 1 and not classes and not type:
            return boxes[0].wrap(context)
        return Box(boxes, classes=classes, type=type or "").wrap(context)


def getStyleRuns(atoms):
    runs = []
    run = []
    runStyle = None
    for atom in atoms:
        style = atom.computedStyle
        key = (style.get("color"), style.get("backgroundColor"), style.get("fontSize"))
        if run and key != runStyle:
            runs.append(run)
            run = []
        runStyle = key
        run.append(atom)
    if run:
        runs.append(run)
    return runs


# Renders a list of atoms sharing the same color, background color and size
def renderStyleRun(parentContext, atoms):
    style = atoms[0].computedStyle
    context = parentContext.extend(
        color=style.get("color"),
        backgroundColor=style.get("backgroundColor"),
        size=style.get("fontSize"))

    boxes = []
    for atom in atoms:
        box = atom.render(context)
        if box is None:
            continue
        if atom.isSelected:
            box.selected(True)
        boxes.append(box)

    if not boxes:
        return None

    result = Box(boxes, isTight=context.isTight, type="lift")
    result.isSelected = all(box.isSelected for box in boxes)
    return result.wrap(context)

