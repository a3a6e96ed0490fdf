# This is a module for storing settings passed into the layout engine. It
# correctly handles default settings.

from .LayoutError import LayoutError

letterShapeStyles = ["tex", "iso", "french", "upright"]

# The main Settings object
#
# The current options stored are:
#  - displayMode: Whether the formula is laid out in display mode (in which
#                 case it uses displaystyle) or not (in which case it uses
#                 textstyle)
#  - throwOnError: Whether an unresolvable construct raises a LayoutError or
#                  is laid out as an error box
#  - errorColor: The color of error boxes
#  - minFontScale: The smallest effective font scale a context can reach
#  - letterShapeStyle: Which letters are set in italic (see `mathit`)
#  - registers: Overrides of the default TeX registers
#  - colorMap: Extra named colors
class Settings(object):
    def __init__(self, displayMode=False, throwOnError=False, errorColor="#cc0000",
                 minFontScale=0, letterShapeStyle="tex", registers=None, colorMap=None):
        if letterShapeStyle not in letterShapeStyles:
            raise LayoutError("Unknown letter shape style '{0}'".format(letterShapeStyle))
        if minFontScale < 0:
            raise LayoutError("minFontScale must not be negative")

        self.displayMode = displayMode
        self.throwOnError = throwOnError
        self.errorColor = errorColor
        self.minFontScale = minFontScale
        self.letterShapeStyle = letterShapeStyle
        self.registers = registers or {}
        self.colorMap = colorMap or {}
