# This file contains metrics for the characters the layout engine reaches on
# its own: Latin letters and digits, the common binary operators and
# relations, the accents, and the delimiter glyphs (including the pieces used
# to build stacked delimiters).
#
# Each entry maps a codepoint to [depth, height, italic, skew, width], in em.
# More families (or more characters) can be added with
# `fontMetrics.registerFontMetrics`.

def _fill(table, chars, metrics):
    for char in chars:
        table[ord(char)] = metrics
    return table


mainRegular = {
    0x20: [0, 0, 0, 0, 0.25],
    0x21: [0, 0.69444, 0, 0, 0.27778],  # !
    0x28: [0.25, 0.75, 0, 0, 0.38889],  # (
    0x29: [0.25, 0.75, 0, 0, 0.38889],  # )
    0x2A: [0, 0.75, 0, 0, 0.5],  # *
    0x2B: [0.08333, 0.58333, 0, 0, 0.77778],  # +
    0x2C: [0.19444, 0.10556, 0, 0, 0.27778],  # ,
    0x2D: [0, 0.43056, 0, 0, 0.33333],  # -
    0x2E: [0, 0.10556, 0, 0, 0.27778],  # .
    0x2F: [0.25, 0.75, 0, 0, 0.5],  # /
    0x3A: [0, 0.43056, 0, 0, 0.27778],  # :
    0x3B: [0.19444, 0.43056, 0, 0, 0.27778],  # ;
    0x3C: [0.0391, 0.5391, 0, 0, 0.77778],  # <
    0x3D: [-0.13313, 0.36687, 0, 0, 0.77778],  # =
    0x3E: [0.0391, 0.5391, 0, 0, 0.77778],  # >
    0x5B: [0.25, 0.75, 0, 0, 0.27778],  # [
    0x5C: [0.25, 0.75, 0, 0, 0.5],  # backslash
    0x5D: [0.25, 0.75, 0, 0, 0.27778],  # ]
    0x5E: [0, 0.69444, 0, 0, 0.5],  # ^
    0x60: [0, 0.69444, 0, 0, 0.5],  # grave
    0x7B: [0.25, 0.75, 0, 0, 0.5],  # {
    0x7C: [0.25, 0.75, 0, 0, 0.27778],  # |
    0x7D: [0.25, 0.75, 0, 0, 0.5],  # }
    0x7E: [0.35, 0.34444, 0, 0, 0.5],  # ~
    0xA8: [0, 0.66786, 0, 0, 0.5],  # diaeresis
    0xAF: [0, 0.56778, 0, 0, 0.5],  # macron
    0xB4: [0, 0.69444, 0, 0, 0.5],  # acute
    0xB7: [0, 0.31, 0, 0, 0.27778],  # cdot
    0xD7: [0.08333, 0.58333, 0, 0, 0.77778],  # times
    0xF7: [0.08333, 0.58333, 0, 0, 0.77778],  # div
    0x2C6: [0, 0.69444, 0, 0, 0.5],  # circumflex
    0x2C7: [0, 0.62847, 0, 0, 0.5],  # caron
    0x2D8: [0, 0.69444, 0, 0, 0.5],  # breve
    0x2D9: [0, 0.66786, 0, 0, 0.5],  # dot above
    0x2DA: [0, 0.69444, 0, 0, 0.75],  # ring above
    0x2DC: [0, 0.66786, 0, 0, 0.5],  # small tilde
    0x393: [0, 0.68333, 0, 0, 0.625],  # Gamma
    0x394: [0, 0.68333, 0, 0, 0.83334],  # Delta
    0x398: [0, 0.68333, 0, 0, 0.77778],  # Theta
    0x39B: [0, 0.68333, 0, 0, 0.69445],  # Lambda
    0x39E: [0, 0.68333, 0, 0, 0.66667],  # Xi
    0x3A0: [0, 0.68333, 0, 0, 0.75],  # Pi
    0x3A3: [0, 0.68333, 0, 0, 0.72222],  # Sigma
    0x3A5: [0, 0.68333, 0, 0, 0.77778],  # Upsilon
    0x3A6: [0, 0.68333, 0, 0, 0.72222],  # Phi
    0x3A8: [0, 0.68333, 0, 0, 0.77778],  # Psi
    0x3A9: [0, 0.68333, 0, 0, 0.72222],  # Omega
    0x200B: [0, 0, 0, 0, 0],  # zero width space
    0x2016: [0.25, 0.75, 0, 0, 0.5],  # double vertical line
    0x2020: [0.19444, 0.69444, 0, 0, 0.44445],  # dagger
    0x20D7: [0, 0.71444, 0.15382, 0, 0],  # combining vector arrow
    0x2190: [-0.13313, 0.36687, 0, 0, 1],  # leftarrow
    0x2191: [0.19444, 0.69444, 0, 0, 0.5],  # uparrow
    0x2192: [-0.13313, 0.36687, 0, 0, 1],  # rightarrow
    0x2193: [0.19444, 0.69444, 0, 0, 0.5],  # downarrow
    0x21D1: [0.19444, 0.69444, 0, 0, 0.61111],  # Uparrow
    0x21D2: [-0.13313, 0.36687, 0, 0, 1],  # Rightarrow
    0x21D3: [0.19444, 0.69444, 0, 0, 0.61111],  # Downarrow
    0x2200: [0, 0.69444, 0, 0, 0.55556],  # forall
    0x2202: [0, 0.69444, 0.05556, 0.08334, 0.5309],  # partial
    0x2203: [0, 0.69444, 0, 0, 0.55556],  # exists
    0x2208: [0.0391, 0.5391, 0, 0, 0.66667],  # in
    0x2212: [0.08333, 0.58333, 0, 0, 0.77778],  # minus
    0x2213: [0.13333, 0.63333, 0, 0, 0.77778],  # mp
    0x2218: [-0.03472, 0.46528, 0, 0, 0.5],  # circ
    0x221A: [0.2, 0.8, 0, 0, 0.83334],  # surd
    0x221E: [0, 0.43056, 0, 0, 1],  # infty
    0x2223: [0.25, 0.75, 0, 0, 0.27778],  # divides
    0x2225: [0.25, 0.75, 0, 0, 0.5],  # parallel
    0x2227: [0, 0.55556, 0, 0, 0.66667],  # wedge
    0x2228: [0, 0.55556, 0, 0, 0.66667],  # vee
    0x2229: [0, 0.55556, 0, 0, 0.66667],  # cap
    0x222A: [0, 0.55556, 0, 0, 0.66667],  # cup
    0x222B: [0.19444, 0.69444, 0.11111, 0, 0.41667],  # int
    0x223C: [-0.13313, 0.36687, 0, 0, 0.77778],  # sim
    0x2248: [-0.01688, 0.48312, 0, 0, 0.77778],  # approx
    0x2260: [0.19444, 0.69444, 0, 0, 0.77778],  # neq
    0x2261: [-0.03625, 0.46375, 0, 0, 0.77778],  # equiv
    0x2264: [0.13597, 0.63597, 0, 0, 0.77778],  # leq
    0x2265: [0.13597, 0.63597, 0, 0, 0.77778],  # geq
    0x2282: [0.0391, 0.5391, 0, 0, 0.77778],  # subset
    0x2283: [0.0391, 0.5391, 0, 0, 0.77778],  # supset
    0x2286: [0.13597, 0.63597, 0, 0, 0.77778],  # subseteq
    0x2295: [0.08333, 0.58333, 0, 0, 0.77778],  # oplus
    0x2297: [0.08333, 0.58333, 0, 0, 0.77778],  # otimes
    0x22C5: [-0.05555, 0.44445, 0, 0, 0.27778],  # cdot
    0x22EF: [-0.05555, 0.44445, 0, 0, 1.172],  # cdots
    0x2308: [0.25, 0.75, 0, 0, 0.44445],  # lceil
    0x2309: [0.25, 0.75, 0, 0, 0.44445],  # rceil
    0x230A: [0.25, 0.75, 0, 0, 0.44445],  # lfloor
    0x230B: [0.25, 0.75, 0, 0, 0.44445],  # rfloor
    0x23D0: [0.19444, 0.69444, 0, 0, 0.5],  # vertical line extension
    0x27E8: [0.25, 0.75, 0, 0, 0.38889],  # langle
    0x27E9: [0.25, 0.75, 0, 0, 0.38889],  # rangle
    0x27EE: [0.24982, 0.74947, 0, 0, 0.38865],  # lgroup
    0x27EF: [0.24982, 0.74947, 0, 0, 0.38865],  # rgroup
}
_fill(mainRegular, "0123456789", [0, 0.64444, 0, 0, 0.5])
_fill(mainRegular, "ABCDEFGHIJKLMNOPRSTUVWXYZ", [0, 0.68333, 0, 0, 0.75])
_fill(mainRegular, "Q", [0.19444, 0.68333, 0, 0, 0.77778])
_fill(mainRegular, "acemnorsuvwxz", [0, 0.43056, 0, 0, 0.5])
_fill(mainRegular, "bdfhkl", [0, 0.69444, 0, 0, 0.55556])
_fill(mainRegular, "gpqy", [0.19444, 0.43056, 0, 0, 0.5])
_fill(mainRegular, "i", [0, 0.66786, 0, 0, 0.27778])
_fill(mainRegular, "j", [0.19444, 0.66786, 0, 0, 0.30556])
_fill(mainRegular, "t", [0, 0.61508, 0, 0, 0.38889])


mathItalic = {
    0x41: [0, 0.68333, 0, 0.13889, 0.75],  # A
    0x42: [0, 0.68333, 0.05017, 0.08334, 0.75851],  # B
    0x43: [0, 0.68333, 0.07153, 0.08334, 0.71472],  # C
    0x44: [0, 0.68333, 0.02778, 0.05556, 0.82792],  # D
    0x45: [0, 0.68333, 0.05764, 0.08334, 0.7382],  # E
    0x46: [0, 0.68333, 0.13889, 0.08334, 0.64306],  # F
    0x47: [0, 0.68333, 0, 0.08334, 0.78625],  # G
    0x48: [0, 0.68333, 0.08125, 0.05556, 0.83125],  # H
    0x49: [0, 0.68333, 0.07847, 0.11111, 0.43958],  # I
    0x4A: [0, 0.68333, 0.09618, 0.16667, 0.55451],  # J
    0x4B: [0, 0.68333, 0.07153, 0.05556, 0.84931],  # K
    0x4C: [0, 0.68333, 0, 0.02778, 0.68056],  # L
    0x4D: [0, 0.68333, 0.10903, 0.08334, 0.97014],  # M
    0x4E: [0, 0.68333, 0.10903, 0.08334, 0.80347],  # N
    0x4F: [0, 0.68333, 0.02778, 0.08334, 0.76278],  # O
    0x50: [0, 0.68333, 0.13889, 0.08334, 0.64201],  # P
    0x51: [0.19444, 0.68333, 0, 0.08334, 0.79056],  # Q
    0x52: [0, 0.68333, 0.00773, 0.08334, 0.75929],  # R
    0x53: [0, 0.68333, 0.05764, 0.08334, 0.6132],  # S
    0x54: [0, 0.68333, 0.13889, 0.08334, 0.58438],  # T
    0x55: [0, 0.68333, 0.10903, 0.02778, 0.68278],  # U
    0x56: [0, 0.68333, 0.22222, 0, 0.58333],  # V
    0x57: [0, 0.68333, 0.13889, 0, 0.94445],  # W
    0x58: [0, 0.68333, 0.07847, 0.08334, 0.82847],  # X
    0x59: [0, 0.68333, 0.22222, 0, 0.58056],  # Y
    0x5A: [0, 0.68333, 0.07153, 0.08334, 0.68264],  # Z
    0x61: [0, 0.43056, 0, 0.02778, 0.52859],  # a
    0x62: [0, 0.69444, 0, 0, 0.42917],  # b
    0x63: [0, 0.43056, 0, 0.05556, 0.43276],  # c
    0x64: [0, 0.69444, 0, 0.16667, 0.52049],  # d
    0x65: [0, 0.43056, 0, 0.05556, 0.46563],  # e
    0x66: [0.19444, 0.69444, 0.10764, 0.16667, 0.48959],  # f
    0x67: [0.19444, 0.43056, 0.03588, 0.02778, 0.47697],  # g
    0x68: [0, 0.69444, 0, -0.02778, 0.57616],  # h
    0x69: [0, 0.65952, 0, 0.05556, 0.34451],  # i
    0x6A: [0.19444, 0.65952, 0.05724, 0, 0.41181],  # j
    0x6B: [0, 0.69444, 0.03148, 0, 0.5206],  # k
    0x6C: [0, 0.69444, 0.01968, 0.08334, 0.29838],  # l
    0x6D: [0, 0.43056, 0, 0, 0.87801],  # m
    0x6E: [0, 0.43056, 0, 0, 0.60023],  # n
    0x6F: [0, 0.43056, 0, 0.05556, 0.48472],  # o
    0x70: [0.19444, 0.43056, 0, 0.08334, 0.50313],  # p
    0x71: [0.19444, 0.43056, 0.03588, 0.08334, 0.44641],  # q
    0x72: [0, 0.43056, 0.02778, 0.05556, 0.45116],  # r
    0x73: [0, 0.43056, 0, 0.05556, 0.46875],  # s
    0x74: [0, 0.61508, 0, 0.08334, 0.36111],  # t
    0x75: [0, 0.43056, 0, 0.02778, 0.57246],  # u
    0x76: [0, 0.43056, 0.03588, 0.02778, 0.48472],  # v
    0x77: [0, 0.43056, 0.02691, 0.08334, 0.71592],  # w
    0x78: [0, 0.43056, 0, 0.02778, 0.57153],  # x
    0x79: [0.19444, 0.43056, 0.03588, 0.05556, 0.49028],  # y
    0x7A: [0, 0.43056, 0.04398, 0.05556, 0.46505],  # z
    0x3B1: [0, 0.43056, 0.0037, 0.02778, 0.6397],  # alpha
    0x3B2: [0.19444, 0.69444, 0.05278, 0.08334, 0.56563],  # beta
    0x3B3: [0.19444, 0.43056, 0.05556, 0, 0.51773],  # gamma
    0x3B4: [0, 0.69444, 0.03785, 0.05556, 0.44444],  # delta
    0x3B5: [0, 0.43056, 0, 0.08334, 0.46632],  # epsilon
    0x3B8: [0, 0.69444, 0.02778, 0.08334, 0.46944],  # theta
    0x3BB: [0, 0.69444, 0, 0, 0.58333],  # lambda
    0x3BC: [0.19444, 0.43056, 0, 0.02778, 0.60255],  # mu
    0x3C0: [0, 0.43056, 0.03588, 0, 0.57003],  # pi
    0x3C1: [0.19444, 0.43056, 0, 0.08334, 0.51702],  # rho
    0x3C3: [0, 0.43056, 0.03588, 0, 0.57141],  # sigma
    0x3C4: [0, 0.43056, 0.1132, 0.02778, 0.43715],  # tau
    0x3C6: [0.19444, 0.43056, 0, 0.08334, 0.65417],  # phi
    0x3C9: [0, 0.43056, 0.03588, 0, 0.62245],  # omega
}


mainItalic = {
    0xA3: [0, 0.69444, 0, 0, 0.76666],  # pounds
    0x131: [0, 0.43056, 0, 0.02778, 0.32246],  # dotless i
    0x237: [0.19444, 0.43056, 0, 0.08334, 0.38403],  # dotless j
}
_fill(mainItalic, "0123456789", [0, 0.64444, 0.13556, 0, 0.51111])
_fill(mainItalic, "acemnorsuvwxz", [0, 0.43056, 0.06616, 0, 0.51111])
_fill(mainItalic, "bdfhkl", [0, 0.69444, 0.10333, 0, 0.46])
_fill(mainItalic, "gpqy", [0.19444, 0.43056, 0.08847, 0, 0.46])


mainBold = {
    0x28: [0.25, 0.75, 0, 0, 0.4472],
    0x29: [0.25, 0.75, 0, 0, 0.4472],
    0x2B: [0.13333, 0.63333, 0, 0, 0.89444],
    0x3D: [-0.10889, 0.39111, 0, 0, 0.89444],
}
_fill(mainBold, "0123456789", [0, 0.64444, 0, 0, 0.575])
_fill(mainBold, "ABCDEFGHIJKLMNOPRSTUVWXYZ", [0, 0.68611, 0, 0, 0.86944])
_fill(mainBold, "acemnorsuvwxz", [0, 0.44444, 0, 0, 0.55902])
_fill(mainBold, "bdfhkl", [0, 0.69444, 0, 0, 0.63889])
_fill(mainBold, "gpqy", [0.19444, 0.44444, 0, 0, 0.575])


amsRegular = {
    0x2115: [0, 0.68889, 0, 0, 0.72222],  # N
    0x211A: [0.16667, 0.68889, 0, 0, 0.77778],  # Q
    0x211D: [0, 0.68889, 0, 0, 0.72222],  # R
    0x2124: [0, 0.68889, 0, 0, 0.66667],  # Z
    0x2A7D: [0.13597, 0.63597, 0, 0, 0.77778],  # leqslant
    0x2A7E: [0.13597, 0.63597, 0, 0, 0.77778],  # geqslant
    0x250C: [0.19444, 0.69224, 0, 0, 0.5],  # ulcorner
    0x2510: [0.19444, 0.69224, 0, 0, 0.5],  # urcorner
    0x2514: [0.19444, 0.69224, 0, 0, 0.5],  # llcorner
    0x2518: [0.19444, 0.69224, 0, 0, 0.5],  # lrcorner
}
_fill(amsRegular, "ABCDEFGHIJKLMOPSTUVWXY", [0, 0.68889, 0, 0, 0.72222])


size1Regular = {
    0x28: [0.35001, 0.85, 0, 0, 0.45834],
    0x29: [0.35001, 0.85, 0, 0, 0.45834],
    0x2F: [0.35001, 0.85, 0, 0, 0.57778],
    0x5B: [0.35001, 0.85, 0, 0, 0.41667],
    0x5C: [0.35001, 0.85, 0, 0, 0.57778],
    0x5D: [0.35001, 0.85, 0, 0, 0.41667],
    0x7B: [0.35001, 0.85, 0, 0, 0.58334],
    0x7D: [0.35001, 0.85, 0, 0, 0.58334],
    0x2016: [-0.00099, 0.601, 0, 0, 0.77778],
    0x2191: [1e-05, 0.6, 0, 0, 0.66667],
    0x2193: [1e-05, 0.6, 0, 0, 0.66667],
    0x21D1: [1e-05, 0.6, 0, 0, 0.77778],
    0x21D3: [1e-05, 0.6, 0, 0, 0.77778],
    0x220F: [0.25001, 0.75, 0, 0, 0.94445],  # prod
    0x2210: [0.25001, 0.75, 0, 0, 0.94445],  # coprod
    0x2211: [0.25001, 0.75, 0, 0, 1.05556],  # sum
    0x221A: [0.35001, 0.85, 0, 0, 1.0],
    0x2223: [-0.00099, 0.601, 0, 0, 0.33333],
    0x2225: [-0.00099, 0.601, 0, 0, 0.55556],
    0x222B: [0.30612, 0.805, 0.19445, 0, 0.47222],  # int
    0x222E: [0.30612, 0.805, 0.19445, 0, 0.47222],  # oint
    0x22C0: [0.25001, 0.75, 0, 0, 0.83334],  # bigwedge
    0x22C1: [0.25001, 0.75, 0, 0, 0.83334],  # bigvee
    0x22C2: [0.25001, 0.75, 0, 0, 0.83334],  # bigcap
    0x22C3: [0.25001, 0.75, 0, 0, 0.83334],  # bigcup
    0x2308: [0.35001, 0.85, 0, 0, 0.47222],
    0x2309: [0.35001, 0.85, 0, 0, 0.47222],
    0x230A: [0.35001, 0.85, 0, 0, 0.47222],
    0x230B: [0.35001, 0.85, 0, 0, 0.47222],
    0x23D0: [-0.00099, 0.601, 0, 0, 0.66667],
    0x27E8: [0.35001, 0.85, 0, 0, 0.47222],
    0x27E9: [0.35001, 0.85, 0, 0, 0.47222],
    0x2A00: [0.25001, 0.75, 0, 0, 1.11111],  # bigodot
    0x2A01: [0.25001, 0.75, 0, 0, 1.11111],  # bigoplus
    0x2A02: [0.25001, 0.75, 0, 0, 1.11111],  # bigotimes
}


size2Regular = {
    0x28: [0.65002, 1.15, 0, 0, 0.59722],
    0x29: [0.65002, 1.15, 0, 0, 0.59722],
    0x2F: [0.65002, 1.15, 0, 0, 0.81111],
    0x5B: [0.65002, 1.15, 0, 0, 0.47222],
    0x5C: [0.65002, 1.15, 0, 0, 0.81111],
    0x5D: [0.65002, 1.15, 0, 0, 0.47222],
    0x7B: [0.65002, 1.15, 0, 0, 0.66667],
    0x7D: [0.65002, 1.15, 0, 0, 0.66667],
    0x220F: [0.55001, 1.05, 0, 0, 1.27778],  # prod
    0x2210: [0.55001, 1.05, 0, 0, 1.27778],  # coprod
    0x2211: [0.55001, 1.05, 0, 0, 1.44445],  # sum
    0x221A: [0.65002, 1.15, 0, 0, 1.0],
    0x222B: [0.86225, 1.36, 0.44445, 0, 0.55556],  # int
    0x222E: [0.86225, 1.36, 0.44445, 0, 0.55556],  # oint
    0x22C0: [0.55001, 1.05, 0, 0, 1.11111],  # bigwedge
    0x22C1: [0.55001, 1.05, 0, 0, 1.11111],  # bigvee
    0x22C2: [0.55001, 1.05, 0, 0, 1.11111],  # bigcap
    0x22C3: [0.55001, 1.05, 0, 0, 1.11111],  # bigcup
    0x2308: [0.65002, 1.15, 0, 0, 0.52778],
    0x2309: [0.65002, 1.15, 0, 0, 0.52778],
    0x230A: [0.65002, 1.15, 0, 0, 0.52778],
    0x230B: [0.65002, 1.15, 0, 0, 0.52778],
    0x27E8: [0.65002, 1.15, 0, 0, 0.61111],
    0x27E9: [0.65002, 1.15, 0, 0, 0.61111],
    0x2A00: [0.55001, 1.05, 0, 0, 1.51112],  # bigodot
    0x2A01: [0.55001, 1.05, 0, 0, 1.51112],  # bigoplus
    0x2A02: [0.55001, 1.05, 0, 0, 1.51112],  # bigotimes
}


size3Regular = {
    0x28: [0.95003, 1.45, 0, 0, 0.73611],
    0x29: [0.95003, 1.45, 0, 0, 0.73611],
    0x2F: [0.95003, 1.45, 0, 0, 1.04445],
    0x5B: [0.95003, 1.45, 0, 0, 0.52778],
    0x5C: [0.95003, 1.45, 0, 0, 1.04445],
    0x5D: [0.95003, 1.45, 0, 0, 0.52778],
    0x7B: [0.95003, 1.45, 0, 0, 0.75],
    0x7D: [0.95003, 1.45, 0, 0, 0.75],
    0x221A: [0.95003, 1.45, 0, 0, 1.0],
    0x2308: [0.95003, 1.45, 0, 0, 0.58334],
    0x2309: [0.95003, 1.45, 0, 0, 0.58334],
    0x230A: [0.95003, 1.45, 0, 0, 0.58334],
    0x230B: [0.95003, 1.45, 0, 0, 0.58334],
    0x27E8: [0.95003, 1.45, 0, 0, 0.75],
    0x27E9: [0.95003, 1.45, 0, 0, 0.75],
}


size4Regular = {
    0x28: [1.25003, 1.75, 0, 0, 0.79167],
    0x29: [1.25003, 1.75, 0, 0, 0.79167],
    0x2F: [1.25003, 1.75, 0, 0, 1.27778],
    0x5B: [1.25003, 1.75, 0, 0, 0.58334],
    0x5C: [1.25003, 1.75, 0, 0, 1.27778],
    0x5D: [1.25003, 1.75, 0, 0, 0.58334],
    0x7B: [1.25003, 1.75, 0, 0, 0.80556],
    0x7D: [1.25003, 1.75, 0, 0, 0.80556],
    0x221A: [1.25003, 1.75, 0, 0, 1.0],
    0x2308: [1.25003, 1.75, 0, 0, 0.63889],
    0x2309: [1.25003, 1.75, 0, 0, 0.63889],
    0x230A: [1.25003, 1.75, 0, 0, 0.63889],
    0x230B: [1.25003, 1.75, 0, 0, 0.63889],
    0x239B: [0.64502, 1.155, 0, 0, 0.875],  # left paren upper hook
    0x239C: [1e-05, 0.6, 0, 0, 0.875],  # left paren extension
    0x239D: [0.64502, 1.155, 0, 0, 0.875],  # left paren lower hook
    0x239E: [0.64502, 1.155, 0, 0, 0.875],
    0x239F: [1e-05, 0.6, 0, 0, 0.875],
    0x23A0: [0.64502, 1.155, 0, 0, 0.875],
    0x23A1: [0.64502, 1.155, 0, 0, 0.66667],  # left bracket upper corner
    0x23A2: [-0.00099, 0.601, 0, 0, 0.66667],  # left bracket extension
    0x23A3: [0.64502, 1.155, 0, 0, 0.66667],  # left bracket lower corner
    0x23A4: [0.64502, 1.155, 0, 0, 0.66667],
    0x23A5: [-0.00099, 0.601, 0, 0, 0.66667],
    0x23A6: [0.64502, 1.155, 0, 0, 0.66667],
    0x23A7: [1e-05, 0.9, 0, 0, 0.88889],  # left curly upper hook
    0x23A8: [0.65002, 1.15, 0, 0, 0.88889],  # left curly middle piece
    0x23A9: [0.90001, 0, 0, 0, 0.88889],  # left curly lower hook
    0x23AA: [0, 0.3, 0, 0, 0.88889],  # curly extension
    0x23AB: [1e-05, 0.9, 0, 0, 0.88889],
    0x23AC: [0.65002, 1.15, 0, 0, 0.88889],
    0x23AD: [0.90001, 0, 0, 0, 0.88889],
    0x23B7: [0.88502, 0.915, 0, 0, 1.05556],  # radical bottom
    0x27E8: [1.25003, 1.75, 0, 0, 0.80556],
    0x27E9: [1.25003, 1.75, 0, 0, 0.80556],
    0xE000: [-0.00499, 0.605, 0, 0, 1.05556],  # radical extension
    0xE001: [-0.00099, 0.601, 0, 0, 1.05556],  # radical top
}


CHARACTER_METRICS_MAP = {
    "Main-Regular": mainRegular,
    "Main-Italic": mainItalic,
    "Main-Bold": mainBold,
    "Math-Italic": mathItalic,
    "AMS-Regular": amsRegular,
    "Size1-Regular": size1Regular,
    "Size2-Regular": size2Regular,
    "Size3-Regular": size3Regular,
    "Size4-Regular": size4Regular,
}
