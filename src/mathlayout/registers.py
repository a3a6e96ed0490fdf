# This module holds the TeX registers the layout engine reads (the spacing
# glue between atoms, the array separators, ...) and converts the dimensions
# they hold to em.

import re

from .LayoutError import LayoutError
from .fontMetrics import PT_PER_EM

# Conversion factors from each TeX unit to pt
unitToPt = {
    "pt": 1,
    "mm": 7227 / 2540,
    "cm": 7227 / 254,
    "ex": 35271 / 8192,
    "px": 3 / 4,
    "em": PT_PER_EM,
    "bp": 803 / 800,
    "dd": 1238 / 1157,
    "pc": 12,
    "in": 72.27,
    "mu": 10 / 18,
}

# Glue is written as "<dimen> plus <dimen> minus <dimen>". Only the natural
# size takes part in the layout.
dimensionRe = re.compile(r'^\s*(-?[0-9]*\.?[0-9]+)\s*([a-z]{2})?')

defaultDimensionRegisters = {
    "jot": "3pt",
    "doublerulesep": "2pt",
    "arrayrulewidth": "0.4pt",
    "arraycolsep": "5pt",
    "nulldelimiterspace": "1.2pt",
    "scriptspace": "0.5pt",
    "delimitershortfall": "5pt",
    "fboxsep": "3pt",
    "fboxrule": "0.4pt",
}

defaultGlueRegisters = {
    "thinmuskip": "3mu",
    "medmuskip": "4mu plus 2mu minus 4mu",
    "thickmuskip": "5mu plus 5mu",
}

defaultNumberRegisters = {
    "delimiterfactor": 901,
    "arraystretch": 1,
}


# A dimension is a number and a unit. It can be given as a string ("3mu",
# "0.4pt plus 1fil"), a (number, unit) pair, or a plain number of pt.
def parseDimension(value):
    if isinstance(value, (int, float)):
        return (float(value), "pt")
    if isinstance(value, (tuple, list)):
        number, unit = value
        if unit not in unitToPt:
            raise LayoutError("Unknown unit '{0}'".format(unit))
        return (float(number), unit)
    match = dimensionRe.match(value)
    if match is None:
        raise LayoutError("Invalid dimension '{0}'".format(value))
    unit = match.group(2) or "pt"
    if unit not in unitToPt:
        raise LayoutError("Unknown unit '{0}'".format(unit))
    return (float(match.group(1)), unit)


def convertDimensionToPt(value):
    number, unit = parseDimension(value)
    return number * unitToPt[unit]


def convertDimensionToEm(value):
    return convertDimensionToPt(value) / PT_PER_EM


# Returns a fresh register table: the defaults, with `overrides` on top.
def getDefaultRegisters(overrides=None):
    registers = {}
    registers.update(defaultNumberRegisters)
    registers.update(defaultDimensionRegisters)
    registers.update(defaultGlueRegisters)
    if overrides:
        registers.update(overrides)
    return registers
