# This file contains information about the options that the layout engine
# carries around with it while building boxes. Data is held in an `Options`
# object, and when recursing into a new subtree (a braced group, the cells of
# an array, the numerator of a fraction, ...) a new `Options` object is created
# with the `.extend` function.

# This is the main options class. It contains the math style, size, color and
# font of the current level. It also keeps a reference to the parent level, so
# size changes can be handled efficiently: all sizes are in em, and the
# absolute value of an em depends on the font size of the parent.
#
# When the subtree is exited, a wrapper box adjusts the font size on entry and
# scales the height/depth of the subtree (see `Box.wrap`).

from . import Style
from . import fontMetrics
from . import registers
from .LayoutError import LayoutError
from .Settings import Settings

# The valid values of `size`, the indexes of `fontMetrics.FONT_SCALE`
FONT_SIZES = range(1, len(fontMetrics.FONT_SCALE))


class Options(object):
    def __init__(self, parent=None, mathstyle=None, size=None, color=None,
                 backgroundColor=None, isPhantom=None, font=None, settings=None):
        self.parent = parent

        if parent is not None:
            self.settings = parent.settings
            self.registers = {}
        else:
            self.settings = settings or Settings()
            self.registers = registers.getDefaultRegisters(self.settings.registers)

        self.letterShapeStyle = self.settings.letterShapeStyle
        self.minFontScale = self.settings.minFontScale

        if isPhantom is None:
            isPhantom = parent.isPhantom if parent else False
        self.isPhantom = isPhantom

        if color and color != "none":
            self.color = color
        else:
            self.color = parent.color if parent else ""

        if backgroundColor and backgroundColor != "none":
            self.backgroundColor = backgroundColor
        else:
            self.backgroundColor = parent.backgroundColor if parent else ""

        if size is not None and size != "auto" and size not in FONT_SIZES:
            raise LayoutError("Invalid font size {0!r}, expected 1 to 10".format(size))
        if size and size != "auto" and (parent is None or size != parent.size):
            self.size = size
        else:
            self.size = parent.size if parent else fontMetrics.DEFAULT_FONT_SIZE

        if font is None and parent is not None:
            font = parent.font
        self.font = font

        self.mathstyle = self._resolveMathstyle(mathstyle)

    def _resolveMathstyle(self, mathstyle):
        if self.parent is not None:
            current = self.parent.mathstyle
        elif self.settings.displayMode:
            current = Style.DISPLAY
        else:
            current = Style.TEXT

        if mathstyle is None or mathstyle in ("", "auto"):
            return current
        if isinstance(mathstyle, Style.Style):
            return mathstyle
        if mathstyle == "cramp":
            return current.cramp()
        if mathstyle == "superscript":
            return current.sup()
        if mathstyle == "subscript":
            return current.sub()
        if mathstyle == "numerator":
            return current.fracNum()
        if mathstyle == "denominator":
            return current.fracDen()
        return Style.styleNames[mathstyle]

    # Returns a new options object, child of this one. Properties passed in
    # override the inherited ones.
    def extend(self, mathstyle=None, size=None, color=None, backgroundColor=None,
               isPhantom=None, font=None):
        return Options(
            parent=self,
            mathstyle=mathstyle,
            size=size,
            color=color,
            backgroundColor=backgroundColor,
            isPhantom=isPhantom,
            font=font)

    # The font size, in em relative to the base font size, accounting both
    # for the size and the math style
    @property
    def effectiveFontSize(self):
        return max(
            fontMetrics.FONT_SCALE[max(1, self.size + self.mathstyle.sizeDelta)],
            self.minFontScale)

    @property
    def scalingFactor(self):
        if self.parent is None:
            return 1.0
        return self.effectiveFontSize / self.parent.effectiveFontSize

    @property
    def metrics(self):
        return self.mathstyle.metrics

    @property
    def isDisplayStyle(self):
        return self.mathstyle.id in (Style.D, Style.Dc)

    @property
    def isCramped(self):
        return self.mathstyle.cramped

    @property
    def isTight(self):
        return self.mathstyle.isTight()

    @property
    def computedColor(self):
        return self.getColor()

    @property
    def computedBackgroundColor(self):
        if self.isPhantom:
            return "transparent"
        return self.mapColor(self.backgroundColor)

    def mapColor(self, color):
        if not color:
            return ""
        if color in self.settings.colorMap:
            return self.settings.colorMap[color]
        return colorMap.get(color, color)

    # Gets the CSS color of the current options object, accounting for the
    # `colorMap`.
    def getColor(self):
        if self.isPhantom:
            return "transparent"
        return self.mapColor(self.color)

    def getRegister(self, name):
        if name in self.registers:
            return self.registers[name]
        if self.parent is not None:
            return self.parent.getRegister(name)
        return None

    def setRegister(self, name, value):
        if value is None:
            self.registers.pop(name, None)
        else:
            self.registers[name] = value

    def getRegisterAsEm(self, name):
        value = self.getRegister(name)
        if value is None:
            return 0
        return registers.convertDimensionToEm(value)

    def getRegisterAsNumber(self, name):
        value = self.getRegister(name)
        if value is None:
            return None
        return float(value)


# A map of color names to CSS colors.
colorMap = {
    "red": "#d7170b",
    "orange": "#fe8a2b",
    "yellow": "#ffc02b",
    "lime": "#63b215",
    "green": "#21ba3a",
    "teal": "#17cfcf",
    "blue": "#0d80f2",
    "indigo": "#63c",
    "purple": "#a219e6",
    "magenta": "#eb4799",
    "black": "#000",
    "dark-grey": "#666",
    "grey": "#A6A6A6",
    "light-grey": "#d4d5d2",
    "white": "#ffffff",
}
