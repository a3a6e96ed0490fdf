# This file contains a list of utility functions which are useful in other
# files.


# Returns `value` unless it is None, in which case `default` is returned.
def deflt(value, default):
    return default if value is None else value


# Formats a number for a style property. Values are rounded to the hundredth,
# and zero is written without a unit.
def toCss(num, unit=""):
    if isinstance(num, str):
        return num
    value = round(num, 2)
    if value == 0:
        return "0"
    if value == int(value):
        value = int(value)
    return "{0}{1}".format(value, unit)
