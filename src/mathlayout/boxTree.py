# These objects store the data about the box tree nodes the layout engine
# builds. A box is the most elementary element that can be rendered: it has
# an optional textual value or a list of children (other boxes), a type used
# for the spacing between boxes, and the dimensions of the ink it holds.
#
# The classes, style and attributes of a box carry no layout meaning: they
# are passed through to whatever turns the box tree into markup.

from . import fontMetrics
from .LayoutError import LayoutError
from .utils import toCss

# The types a box can have. The first eight mirror the TeX atom classes and
# take part in the spacing between boxes. The others are structural:
#  - first: the sentinel that starts a branch, never rendered
#  - ignore: starts a new list, its children are spaced on their own
#  - lift: its children are spaced as if they were siblings of the box
#  - skip: left out of the spacing (e.g. the sup/sub of a base)
#  - spacing: explicit space, left out of the spacing
BOX_TYPES = frozenset([
    "",
    "ord",
    "bin",
    "op",
    "rel",
    "open",
    "close",
    "punct",
    "inner",
    "middle",
    "first",
    "ignore",
    "lift",
    "skip",
    "spacing",
    "error",
    "placeholder",
])

# Height, in em, of the stretchy graphics the markup layer knows how to draw.
SVG_BODY_HEIGHTS = {
    "overrightarrow": 0.522,
    "overleftarrow": 0.522,
    "overleftrightarrow": 0.522,
    "overlinesegment": 0.522,
    "overgroup": 0.342,
    "undergroup": 0.342,
    "overbrace": 0.548,
    "underbrace": 0.548,
    "widehat": 0.24,
    "widecheck": 0.24,
    "widetilde": 0.26,
    "xrightarrow": 0.522,
    "xleftarrow": 0.522,
    "xleftrightarrow": 0.522,
    "xRightarrow": 0.56,
    "xLeftarrow": 0.56,
    "xLeftrightarrow": 0.716,
    "xmapsto": 0.522,
    "xlongequal": 0.334,
}


def svgBodyHeight(name):
    if name not in SVG_BODY_HEIGHTS:
        raise LayoutError("Unknown stretchy graphic '{0}'".format(name))
    return SVG_BODY_HEIGHTS[name]


class Box(object):
    def __init__(self, content=None, type="", classes=None, style=None, attributes=None,
                 isTight=False, fontFamily="Main-Regular",
                 height=None, depth=None, maxFontSize=None):
        if type not in BOX_TYPES:
            raise LayoutError("Unknown box type '{0}'".format(type))

        self.value = None
        self.children = None
        if isinstance(content, int):
            self.value = chr(content)
        elif isinstance(content, str):
            self.value = content
        elif isinstance(content, (list, tuple)):
            self.children = [child for child in content if child is not None]
        elif isinstance(content, Box):
            self.children = [content]

        self.type = type
        self.classes = list(classes or [])
        self.style = {}
        self.attributes = dict(attributes or {})
        self.isTight = isTight
        self.isSelected = False
        self.caret = None
        self.fontFamily = fontFamily

        self.svgBody = None
        self.delim = None

        self._left = 0
        self._right = 0

        self.height = 0
        self.depth = 0
        self.skew = 0
        self.italic = 0
        self.maxFontSize = 0

        if self.value:
            # A multi-character value ("cos") or a multi-codepoint grapheme
            # takes the largest extent of its characters.
            self.height = max(self._metrics("height"))
            self.depth = max(self._metrics("depth"))
            self.skew = max(self._metrics("skew"))
            self.italic = max(self._metrics("italic"))
            # Account for the italic slant in the right margin
            self.right = self.italic
        elif self.children:
            if len(self.children) == 1:
                child = self.children[0]
                self.height = child.height
                self.depth = child.depth
                self.maxFontSize = child.maxFontSize
                self.skew = child.skew
                self.italic = child.italic
                self.isTight = isTight or child.isTight
            else:
                # More than one child: assume they are laid out horizontally.
                # A vertical layout overrides the height and depth later.
                self.height = max(child.height for child in self.children)
                self.depth = max(child.depth for child in self.children)
                self.maxFontSize = max(child.maxFontSize for child in self.children)

        if style:
            for prop, value in style.items():
                self.setStyle(prop, value)

        if height is not None:
            self.height = height
        if depth is not None:
            self.depth = depth
        if maxFontSize is not None:
            self.maxFontSize = maxFontSize

    def _metrics(self, name):
        return [fontMetrics.getCharacterMetrics(char, self.fontFamily)[name]
                for char in self.value]

    def __repr__(self):
        content = repr(self.value) if self.value else "{0} children".format(len(self.children or []))
        return "Box({0}, type={1!r}, height={2:.4f}, depth={3:.4f})".format(
            content, self.type, self.height, self.depth)

    # Sets a style property. Numbers are formatted with `unit`; empty values
    # are ignored.
    def setStyle(self, prop, value, unit=""):
        if value is None:
            return
        value = toCss(value, unit)
        if value:
            self.style[prop] = value

    # Moves the box down by `top` (negative values move it up). The
    # height and depth are adjusted to match.
    def setTop(self, top):
        if abs(top) > 1e-2:
            self.style["top"] = toCss(top, "em")
            self.height -= top
            self.depth += top

    @property
    def left(self):
        return self._left

    @left.setter
    def left(self, value):
        self._left = value
        if value == 0:
            self.style.pop("margin-left", None)
        else:
            self.style["margin-left"] = toCss(value, "em")

    @property
    def right(self):
        return self._right

    @right.setter
    def right(self, value):
        self._right = value
        if value == 0:
            self.style.pop("margin-right", None)
        else:
            self.style["margin-right"] = toCss(value, "em")

    @property
    def width(self):
        return self.style.get("width")

    @width.setter
    def width(self, value):
        self.style["width"] = toCss(value, "em")

    def selected(self, isSelected):
        self.isSelected = isSelected
        for child in self.children or []:
            child.selected(isSelected)

    # If necessary wrap this box with another one that adjusts the font size
    # to account for a change in size between the options and their parent.
    # Also, apply color and background-color.
    #
    # The font size is applied to the wrapper, not to the nucleus, so the
    # dimensions of the nucleus stay in its own em. The wrapper keeps the
    # type of the nucleus unless told otherwise.
    def wrap(self, options, classes=None, type=None):
        parent = options.parent

        # At the root, nothing to do
        if parent is None:
            return self

        if options.isPhantom:
            self.setStyle("opacity", 0)

        if options.computedColor != parent.computedColor:
            self.setStyle("color", options.getColor())

        newSize = None
        if options.effectiveFontSize != parent.effectiveFontSize:
            newSize = options.effectiveFontSize

        newBackgroundColor = None
        if options.computedBackgroundColor != parent.computedBackgroundColor:
            newBackgroundColor = options.computedBackgroundColor

        if not newSize and not newBackgroundColor and not classes and not type:
            return self

        if newBackgroundColor:
            result = makeStruts(self, classes=classes, type=type or self.type)
            result.selected(self.isSelected)
            result.setStyle("background-color", newBackgroundColor)
            result.setStyle("display", "inline-block")
        else:
            result = Box(self, classes=classes, type=type or self.type)

        # Adjust the dimensions to account for the size variations
        factor = options.scalingFactor
        if factor != 1.0:
            result.setStyle("font-size", factor * 100, "%")
            result.height *= factor
            result.depth *= factor
            result.italic *= factor
            result.skew *= factor
        return result

    # Returns the boxes of this tree, depth first, this box included.
    def walk(self):
        yield self
        for child in self.children or []:
            for box in child.walk():
                yield box


# Wraps `content` with invisible struts so that a background (or a border)
# covers its full height and depth.
def makeStruts(content, classes=None, type=""):
    if content is None:
        return Box(None, classes=classes, type=type)

    topStrut = Box(None, classes=["ML__strut"])
    topStrut.setStyle("height", max(0, content.height), "em")
    struts = [topStrut]

    if content.depth != 0:
        bottomStrut = Box(None, classes=["ML__strut--bottom"])
        bottomStrut.setStyle("height", content.height + content.depth, "em")
        bottomStrut.setStyle("vertical-align", -content.depth, "em")
        struts.append(bottomStrut)

    struts.append(content)

    return Box(struts, classes=classes, type=type)


# Creates a box that holds a stretchy graphic, drawn by the markup layer. The
# graphic is centered on a line 0.166em above the baseline.
def makeSVGBox(svgBodyName):
    height = svgBodyHeight(svgBodyName) / 2
    box = Box(None, height=height + 0.166, depth=height - 0.166, maxFontSize=0)
    box.svgBody = svgBodyName
    return box
