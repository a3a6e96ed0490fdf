# This module contains metrics regarding fonts and individual symbols. The
# sigma variables, as well as the CHARACTER_METRICS_MAP map contain data
# extracted from TeX, TeX font metrics, and the TTF files. These data are then
# exposed via the `Metrics` class and the getCharacterMetrics function.

import logging
import re

from . import fontMetricsData

log = logging.getLogger(__name__)

# This value determines how large a pt is, for metrics which are defined in
# terms of pts.
PT_PER_EM = 10.0

# The math axis is the horizontal reference line on which fraction rules and
# the minus sign sit. `AXIS_HEIGHT` is its offset from the baseline.
AXIS_HEIGHT = 0.25

# The minimum space between the bottom of two successive lines, in em
BASELINE_SKIP = 1.2

X_HEIGHT = 0.431  # sigma 5

# In TeX, there are actually three sets of dimensions, one for each of
# textstyle (and displaystyle), scriptstyle, and scriptscriptstyle. These are
# provided in the lists below, in that order.
#
# The font metrics are stored in fonts cmsy10, cmsy7, and cmsy5 respectively.
# The values were retrieved with `tftopl`: the part we care about is the
# FONTDIMEN section. Each value is measured in EMs.
FONT_METRICS = {
    "slant": [0.25, 0.25, 0.25],
    "space": [0.0, 0.0, 0.0],
    "stretch": [0.0, 0.0, 0.0],
    "shrink": [0.0, 0.0, 0.0],
    "xHeight": [X_HEIGHT, X_HEIGHT, X_HEIGHT],
    "quad": [1.0, 1.171, 1.472],
    "extraSpace": [0.0, 0.0, 0.0],
    "num1": [0.5, 0.732, 0.925],
    "num2": [0.394, 0.384, 0.5],
    "num3": [0.444, 0.471, 0.504],
    "denom1": [0.686, 0.752, 1.025],
    "denom2": [0.345, 0.344, 0.532],
    "sup1": [0.413, 0.503, 0.504],
    "sup2": [0.363, 0.431, 0.404],
    "sup3": [0.289, 0.286, 0.294],
    "sub1": [0.15, 0.143, 0.2],
    "sub2": [0.247, 0.286, 0.4],
    "supDrop": [0.386, 0.353, 0.494],
    "subDrop": [0.05, 0.071, 0.1],
    "delim1": [2.39, 1.7, 1.98],
    "delim2": [1.01, 1.157, 1.42],
    "axisHeight": [AXIS_HEIGHT, AXIS_HEIGHT, AXIS_HEIGHT],

    # These are the xi variables from cmex10
    "defaultRuleThickness": [0.04, 0.049, 0.049],
    "bigOpSpacing1": [0.111, 0.111, 0.111],
    "bigOpSpacing2": [0.166, 0.166, 0.166],
    "bigOpSpacing3": [0.2, 0.2, 0.2],
    "bigOpSpacing4": [0.6, 0.611, 0.611],
    "bigOpSpacing5": [0.1, 0.143, 0.143],
    "sqrtRuleThickness": [0.04, 0.04, 0.04],
}

# Maps a scale index from 1..10 to a value expressed in `em` relative to the
# base font size.
FONT_SCALE = [
    0,  # not used
    0.5,  # size 1 = scriptscriptstyle
    0.7,  # size 2 = scriptstyle
    0.8,
    0.9,
    1.0,  # size 5 = default
    1.2,
    1.44,
    1.728,
    2.074,
    2.488,  # size 10
]

DEFAULT_FONT_SIZE = 5


# The layout constants of one column of FONT_METRICS (0: normal size,
# 1: script size, 2: scriptscript size) as an object with attributes.
class Metrics(object):
    def __init__(self, column):
        for name, values in FONT_METRICS.items():
            setattr(self, name, values[column])
        self.emPerEx = self.xHeight / self.quad

    def __getitem__(self, name):
        return getattr(self, name)


# Very rough stand-ins for characters without metrics. The metrics do not
# account for extra height from the accents. For Cyrillic letters with both
# ascenders and descenders we prefer approximations with ascenders, primarily
# to prevent the fraction bar or root line from intersecting the glyph.
extraCharacterMap = {
    "\u00a0": " ",
    "\u200b": " ",
    # Latin-1
    "Å": "A", "Ç": "C", "Ð": "D", "Þ": "o",
    "å": "a", "ç": "c", "ð": "d", "þ": "o",
    # Cyrillic
    "А": "A", "Б": "B", "В": "B", "Г": "F", "Д": "A", "Е": "E", "Ж": "K",
    "З": "3", "И": "N", "Й": "N", "К": "K", "Л": "N", "М": "M", "Н": "H",
    "О": "O", "П": "N", "Р": "P", "С": "C", "Т": "T", "У": "y", "Ф": "O",
    "Х": "X", "Ц": "U", "Ч": "h", "Ш": "W", "Щ": "W", "Ъ": "B", "Ы": "X",
    "Ь": "B", "Э": "3", "Ю": "X", "Я": "R",
    "а": "a", "б": "b", "в": "a", "г": "r", "д": "y", "е": "e", "ж": "m",
    "з": "e", "и": "n", "й": "n", "к": "n", "л": "n", "м": "m", "н": "n",
    "о": "o", "п": "n", "р": "p", "с": "c", "т": "o", "у": "y", "ф": "b",
    "х": "x", "ц": "n", "ч": "n", "ш": "w", "щ": "w", "ъ": "a", "ы": "m",
    "ь": "a", "э": "e", "ю": "m", "я": "r",
}

# Hiragana, Katakana, CJK ideograms and Hangul syllables
cjkRe = re.compile("[\u3040-\u309f\u30a0-\u30ff\u4e00-\u9faf\uac00-\ud7af]")

PLACEHOLDER = 0x2B1A

CHARACTER_METRICS_MAP = dict(
    (family, dict(table))
    for family, table in fontMetricsData.CHARACTER_METRICS_MAP.items())


def _toCodepoint(char):
    if char is None:
        return 77  # 'M'
    if isinstance(char, int):
        return char
    return ord(char[0])


def _makeMetrics(metrics, defaultMetrics=False):
    return {
        "depth": metrics[0],
        "height": metrics[1],
        "italic": metrics[2],
        "skew": metrics[3],
        "width": metrics[4],
        "defaultMetrics": defaultMetrics,
    }


# Adds (or overrides) the metrics of a font family. `table` maps codepoints or
# characters to [depth, height, italic, skew, width].
def registerFontMetrics(fontFamily, table):
    family = CHARACTER_METRICS_MAP.setdefault(fontFamily, {})
    for char, metrics in table.items():
        family[_toCodepoint(char)] = list(metrics)


def hasCharacterMetrics(char, fontFamily):
    return _toCodepoint(char) in CHARACTER_METRICS_MAP.get(fontFamily, {})


# This function is a convenience function for looking up information in the
# CHARACTER_METRICS_MAP table. It takes a character (or a codepoint) and a font
# family name, e.g. 'Main-Regular'.
#
# Characters without metrics never fail: they get a default box, and the
# `defaultMetrics` flag of the result is set.
def getCharacterMetrics(char, fontFamily):
    codepoint = _toCodepoint(char)
    family = CHARACTER_METRICS_MAP.get(fontFamily, {})

    metrics = family.get(codepoint)
    if metrics is not None:
        return _makeMetrics(metrics)

    if codepoint == PLACEHOLDER:
        return _makeMetrics([0.2, 0.8, 0, 0, 0.8], True)

    value = chr(codepoint)
    if value in extraCharacterMap:
        metrics = family.get(ord(extraCharacterMap[value]))
        if metrics is not None:
            return _makeMetrics(metrics, True)
    elif cjkRe.match(value):
        return _makeMetrics([0.2, 0.9, 0, 0, 1.0], True)

    log.debug("No metrics for U+%04X in %s", codepoint, fontFamily)
    return _makeMetrics([0.2, 0.7, 0, 0, 0.8], True)
