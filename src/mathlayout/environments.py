# This file contains the array atom, used by the environments that arrange
# their content in rows and columns (array, matrix, cases, aligned...), and
# the defaults of each of these environments.
#
# The content of an array is a grid of cells. Each cell is a branch of the
# atom, indexed by a (row, col) tuple, and starts with a `first` sentinel
# like the named branches.

from .Atom import Atom, mathstyleNames
from .LayoutError import LayoutError
from .utils import deflt

# A column format is a list of column descriptions, each one of:
#  - {"align": "l" | "c" | "r"}: a column of content
#  - {"gap": number}: a space, in em, between two columns
#  - {"gap": [atoms]}: a column repeating the atoms on each row
#  - {"rule": True}: a vertical rule
defaultColFormat = [{"align": "l"}] * 10

columnAlignments = ["l", "c", "r"]

# The environments whose rows are not spaced by the `jot` register
NO_JOT_ENVIRONMENTS = frozenset([
    "array", "subequations", "matrix", "pmatrix", "bmatrix", "Bmatrix", "vmatrix",
    "Vmatrix", "smallmatrix", "cases", "rcases",
])

# The defaults of each environment
ENVIRONMENTS = {
    "array": {},
    "subequations": {},
    "matrix": {"colFormat": [{"align": "c"}] * 10},
    "pmatrix": {"colFormat": [{"align": "c"}] * 10,
                "leftDelim": "(", "rightDelim": ")"},
    "bmatrix": {"colFormat": [{"align": "c"}] * 10,
                "leftDelim": "[", "rightDelim": "]"},
    "Bmatrix": {"colFormat": [{"align": "c"}] * 10,
                "leftDelim": "\\lbrace", "rightDelim": "\\rbrace"},
    "vmatrix": {"colFormat": [{"align": "c"}] * 10,
                "leftDelim": "\\vert", "rightDelim": "\\vert"},
    "Vmatrix": {"colFormat": [{"align": "c"}] * 10,
                "leftDelim": "\\Vert", "rightDelim": "\\Vert"},
    "smallmatrix": {"colFormat": [{"align": "c"}] * 10,
                    "arraystretch": 0.5, "arraycolsep": 0.2, "mathstyle": "scriptstyle"},
    "cases": {"colFormat": [{"align": "l"}, {"gap": 1.0}, {"align": "l"}],
              "leftDelim": "\\lbrace", "rightDelim": "."},
    "rcases": {"colFormat": [{"align": "l"}, {"gap": 1.0}, {"align": "l"}],
               "leftDelim": ".", "rightDelim": "\\rbrace"},
    "aligned": {"colFormat": [{"align": "r"}, {"gap": 0}, {"align": "l"}] * 5},
    "align": {"colFormat": [{"align": "r"}, {"gap": 0}, {"align": "l"}] * 5},
    "split": {"colFormat": [{"align": "r"}, {"gap": 0}, {"align": "l"}]},
    "gathered": {"colFormat": [{"align": "c"}]},
    "gather": {"colFormat": [{"align": "c"}]},
    "multline": {"colFormat": [{"align": "c"}]},
}


def _checkColFormat(colFormat):
    for colDesc in colFormat:
        keys = [key for key in ("align", "gap", "rule") if key in colDesc]
        if len(keys) != 1:
            raise LayoutError("Invalid column description {0!r}".format(colDesc))
        if "align" in colDesc and colDesc["align"] not in columnAlignments:
            raise LayoutError("Invalid column alignment '{0}'".format(colDesc["align"]))
    if not any("align" in colDesc for colDesc in colFormat):
        raise LayoutError("A column format needs at least one column of content")


# Options of an array:
#  - colFormat: the column descriptions (see above)
#  - rowGaps: extra space, in em, below each row
#  - leftDelim, rightDelim: the delimiters around the array, or None
#  - arraystretch: a factor applied to the height of the rows. Defaults to
#    the `arraystretch` register.
#  - arraycolsep: half the space between two columns, in em. Defaults to the
#    `arraycolsep` register.
#  - jot: the extra depth of each row but the last, in em. Defaults to the
#    `jot` register.
#  - mathstyle: the style of the cells
class ArrayOptions(object):
    def __init__(self, colFormat=None, rowGaps=None, leftDelim=None, rightDelim=None,
                 arraystretch=None, arraycolsep=None, jot=None, mathstyle=None):
        colFormat = list(colFormat or defaultColFormat)
        _checkColFormat(colFormat)
        if mathstyle not in mathstyleNames:
            raise LayoutError("Invalid array style '{0}'".format(mathstyle))
        if arraystretch is not None and arraystretch <= 0:
            raise LayoutError("arraystretch must be positive")
        self.colFormat = colFormat
        self.rowGaps = list(rowGaps or [])
        self.leftDelim = leftDelim
        self.rightDelim = rightDelim
        self.arraystretch = arraystretch
        self.arraycolsep = arraycolsep
        self.jot = jot
        self.mathstyle = mathstyle

    @property
    def columnCount(self):
        return len([colDesc for colDesc in self.colFormat if "align" in colDesc])


# Returns the options of an environment, with `overrides` on top of its
# defaults
def getEnvironmentOptions(environmentName, **overrides):
    if environmentName not in ENVIRONMENTS:
        raise LayoutError("Unknown environment '{0}'".format(environmentName))
    options = dict(ENVIRONMENTS[environmentName])
    options.update((key, value) for key, value in overrides.items() if value is not None)
    return ArrayOptions(**options)


def isEmptyCell(cell):
    return not cell or all(atom.type == "first" for atom in cell)


def makePlaceholder():
    return Atom("placeholder", value="\u2b1a")


# Brings a grid of cells in shape for the layout:
#  - the rows with more cells than there are columns of content in the
#    column format are folded into several rows
#  - a trailing empty row is dropped (unless it is the only one)
#  - the short rows are padded with placeholder cells
#  - each cell starts with a `first` atom
#  - each atom knows its (row, col) branch
def normalizeArray(atom, array, colFormat):
    columnCount = max(1, len([colDesc for colDesc in colFormat if "align" in colDesc]))

    rows = []
    for row in array or [[]]:
        row = [list(cell or []) for cell in row] or [[]]
        for index in range(0, len(row), columnCount):
            rows.append(row[index:index + columnCount])

    # A \\ at the end of the last row creates an empty row, which TeX
    # ignores
    if len(rows) > 1 and all(isEmptyCell(cell) for cell in rows[-1]):
        rows.pop()

    width = max(len(row) for row in rows)
    result = []
    for r, row in enumerate(rows):
        while len(row) < width:
            row.append([makePlaceholder()])
        cells = []
        for c, cell in enumerate(row):
            if not cell or cell[0].type != "first":
                cell = [atom.makeFirstAtom((r, c))] + cell
            for child in cell:
                if child.parent is not None and child.parent is not atom:
                    raise LayoutError("The atom {0!r} already belongs to a branch".format(child), atom)
                child.parent = atom
                child.parentBranch = (r, c)
            cells.append(cell)
        result.append(cells)
    return result


class ArrayAtom(Atom):
    def __init__(self, environmentName="array", array=None, params=None, style=None,
                 superscript=None, subscript=None, verbatimLatex=None):
        self.array = []
        super(ArrayAtom, self).__init__(
            "array",
            style=style,
            superscript=superscript,
            subscript=subscript,
            params=params or getEnvironmentOptions(environmentName))
        self.environmentName = environmentName
        self.array = normalizeArray(self, array, self.params.colFormat)
        self.verbatimLatex = verbatimLatex

    @property
    def rowCount(self):
        return len(self.array)

    @property
    def colCount(self):
        return len(self.array[0]) if self.array else 0

    def branch(self, name):
        if isinstance(name, tuple):
            row, col = name
            if row >= len(self.array) or col >= len(self.array[row]):
                return None
            return self.array[row][col]
        return super(ArrayAtom, self).branch(name)

    @property
    def branches(self):
        result = super(ArrayAtom, self).branches
        for r, row in enumerate(self.array):
            result.extend((r, c) for c in range(len(row)))
        return result

    def _setBranch(self, branch, atoms):
        if not isinstance(branch, tuple):
            return super(ArrayAtom, self)._setBranch(branch, atoms)
        row, col = branch
        if row >= len(self.array) or col >= len(self.array[row]):
            raise LayoutError("No cell at row {0}, column {1}".format(row, col), self)
        self.array[row][col] = atoms if atoms is not None else [self.makeFirstAtom(branch)]

    def getCell(self, row, col):
        return self.branch((row, col))

    def setCell(self, row, col, atoms):
        self.setChildren(atoms, (row, col))

    def _allBranches(self):
        for atoms in super(ArrayAtom, self)._allBranches():
            yield atoms
        for row in self.array:
            for cell in row:
                yield cell

    # The extra depth of each row but the last
    def getJot(self, options):
        if self.params.jot is not None:
            return self.params.jot
        if self.environmentName in NO_JOT_ENVIRONMENTS:
            return 0
        return options.getRegisterAsEm("jot")

    def getArraystretch(self, options):
        return deflt(self.params.arraystretch, options.getRegisterAsNumber("arraystretch") or 1)

    def getArraycolsep(self, options):
        return deflt(self.params.arraycolsep, options.getRegisterAsEm("arraycolsep"))

    def _serialize(self):
        rows = []
        for row in self.array:
            rows.append(" & ".join(Atom.serializeList(cell) for cell in row))
        result = "\\begin{{{0}}}{1}\\end{{{0}}}".format(self.environmentName, " \\\\ ".join(rows))
        return result + self.serializeScripts()
