# This file contains information and classes for the various kinds of styles
# used in TeX. It provides a generic `Style` class, which holds information
# about a specific style. It then provides instances of all the different kinds
# of styles possible, and provides functions to move between them and get
# information about them.
#
# The eight styles are considered to be D > D' > T > T' > S > S' > SS > SS',
# in decreasing order. A primed ("cramped") style raises superscripts less.

from . import fontMetrics

# IDs of the different styles
D = 0
Dc = 1
T = 2
Tc = 3
S = 4
Sc = 5
SS = 6
SSc = 7

# Display and text style share the normal-size column of the layout constants
metricsColumn = [0, 0, 1, 2]

# Font size steps (relative to the base size) of each style size
sizeDeltas = [0, 0, -3, -4]

# The main style class. Contains a unique id for the style, a size (which is
# the same for cramped and uncramped version of a style), a cramped flag, and a
# size multiplier, which gives the size difference between a style and
# textstyle.
class Style(object):
    def __init__(self, id, size, multiplier, cramped):
        self.id = id
        self.size = size
        self.cramped = cramped
        self.sizeMultiplier = multiplier
        self.sizeDelta = sizeDeltas[size]
        self.metrics = fontMetrics.Metrics(metricsColumn[size])

    # Get the style of a superscript given a base in the current style.
    def sup(self):
        return styles[supTable[self.id]]

    # Get the style of a subscript given a base in the current style.
    def sub(self):
        return styles[subTable[self.id]]

    # Get the style of a fraction numerator given the fraction in the current
    # style.
    def fracNum(self):
        return styles[fracNumTable[self.id]]

    # Get the style of a fraction denominator given the fraction in the
    # current style.
    def fracDen(self):
        return styles[fracDenTable[self.id]]

    # Get the cramped version of a style (in particular, cramping a cramped
    # style doesn't change the style).
    def cramp(self):
        return styles[crampTable[self.id]]

    # HTML class name, like "displaystyle cramped"
    def cls(self):
        return sizeNames[self.size] + (" cramped" if self.cramped else " uncramped")

    # Return if this style is tightly spaced (scriptstyle/scriptscriptstyle)
    def isTight(self):
        return self.size >= 2

    def __repr__(self):
        return "Style({0})".format(names[self.id])


# String names for the different sizes
sizeNames = [
    "displaystyle textstyle",
    "textstyle",
    "scriptstyle",
    "scriptscriptstyle",
]

names = ["D", "Dc", "T", "Tc", "S", "Sc", "SS", "SSc"]

# Instances of the different styles
styles = [
    Style(D, 0, 1.0, False),
    Style(Dc, 0, 1.0, True),
    Style(T, 1, 1.0, False),
    Style(Tc, 1, 1.0, True),
    Style(S, 2, 0.7, False),
    Style(Sc, 2, 0.7, True),
    Style(SS, 3, 0.5, False),
    Style(SSc, 3, 0.5, True),
]

# Lookup tables for switching from one style to another
supTable = [S, Sc, S, Sc, SS, SSc, SS, SSc]
subTable = [Sc, Sc, Sc, Sc, SSc, SSc, SSc, SSc]
fracNumTable = [T, Tc, S, Sc, SS, SSc, SS, SSc]
fracDenTable = [Tc, Tc, Sc, Sc, SSc, SSc, SSc, SSc]
crampTable = [Dc, Dc, Tc, Tc, Sc, Sc, SSc, SSc]

DISPLAY = styles[D]
TEXT = styles[T]
SCRIPT = styles[S]
SCRIPTSCRIPT = styles[SS]

# The named styles a construct can ask for
styleNames = {
    "displaystyle": DISPLAY,
    "textstyle": TEXT,
    "scriptstyle": SCRIPT,
    "scriptscriptstyle": SCRIPTSCRIPT,
}
