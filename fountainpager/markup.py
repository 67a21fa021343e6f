# inline markup of Fountain text: emphasis, boneyard comments, inline
# notes and template tokens.
# http://fountain.io

import re

import fountainpager.edit as edit

# emphasis styles, can be or'd together
ITALIC = 1
BOLD = 2
UNDERLINE = 4

# keys template tokens may refer to
TEMPLATE_KEYS = ("title", "time", "fullname", "nick", "email")

# regular expressions for fountain emphasis. based on
# https://github.com/vilcans/screenplain/blob/master/screenplain/richstring.py
_boldItalicRe = re.compile(
    # three stars, not followed by space
    r"\*\*\*(?=\S)"
    # inside text
    r"(.+?)"
    # three stars, not preceded by space
    r"(?<=\S)\*\*\*"
)

_boldRe = re.compile(
    # two stars
    r"\*\*"
    # must not be followed by space
    r"(?=\S)"
    # inside text
    r"(.+?[*_]*)"
    # finishing with two stars
    r"(?<=\S)\*\*"
)

_italicRe = re.compile(
    # one star
    r"\*"
    # anything but a space, then text
    r"([^\s].*?)"
    # finishing with one star
    r"\*"
    # must not be followed by star
    r"(?!\*)"
)

_underlineRe = re.compile(
    # underline
    r"_"
    # must not be followed by space
    r"(?=\S)"
    # inside text
    r"([^_]+)"
    # finishing with underline
    r"(?<=\S)_"
)

_literalStarRe = re.compile(r"\\\*")

# /* ... */ on one line, or an opening /* running to the end of the line
_boneyardRe = re.compile(r"/\*.*?(?:\*/|$)")

# [[ ... ]] on one line
_noteRe = re.compile(r"\[\[.*?\]\]")

# {{key}} or {{key: default}}
_templateRe = re.compile(
    r"\{\{[ \t]*(?P<key>[A-Za-z]+)[ \t]*(?::[ \t]*(?P<default>[^}]*?))?"
    r"[ \t]*\}\}"
)


# replace s[start:end] with NUL characters so later patterns skip it
def _mask(s, start, end):
    return s[:start] + "\0" * (end - start) + s[end:]


# return list of (start, end, style, width) for each emphasized run in s,
# where width is the length of the delimiter on each side.
def _scanEmphasis(s):
    ret = []

    tmp = _literalStarRe.sub("\0\0", s)

    for style, rx, width in (
        (BOLD | ITALIC, _boldItalicRe, 3),
        (BOLD, _boldRe, 2),
        (ITALIC, _italicRe, 1),
        (UNDERLINE, _underlineRe, 1),
    ):
        found = [(m.start(), m.end()) for m in rx.finditer(tmp)]

        for start, end in found:
            ret.append((start, end, style, width))
            tmp = _mask(tmp, start, start + width)
            tmp = _mask(tmp, end - width, end)

    ret.sort()

    return ret


# return list of (start, end, style) emphasis spans in s. spans include
# the delimiters.
def findEmphasis(s):
    return [(start, end, style) for start, end, style, w in _scanEmphasis(s)]


# returns s with emphasis markup removed.
def unmarkdown(s):
    return visible(s)[0]


# return text as it would be printed: s[start:end] without emphasis
# delimiters, boneyard comments or inline notes. also returns a list
# mapping each character of the result to its column in s, with one extra
# entry for the end position.
def visible(s, start=0, end=None):
    if end is None:
        end = len(s)

    drop = [False] * len(s)

    for rx in (_boneyardRe, _noteRe):
        for m in rx.finditer(s):
            for i in range(m.start(), m.end()):
                drop[i] = True

    for m in _literalStarRe.finditer(s):
        drop[m.start()] = True

    for first, last, style, width in _scanEmphasis(s):
        for i in range(first, first + width):
            drop[i] = True

        for i in range(last - width, last):
            drop[i] = True

    chars = []
    cols = []

    for i in range(start, end):
        if not drop[i]:
            chars.append(s[i])
            cols.append(i)

    cols.append(end)

    return ("".join(chars), cols)


# return list of (start, end, key, default) template tokens in s. key is
# lower-cased, default is None if not given.
def findTemplates(s):
    ret = []

    for m in _templateRe.finditer(s):
        ret.append((m.start(), m.end(), m.group("key").lower(),
                    m.group("default")))

    return ret


# return edits replacing every template token whose key is in
# TEMPLATE_KEYS with its value from 'values' (a dict), or the token's
# default if there is no value. tokens with other keys are left alone.
def expandTemplates(sp, values):
    edits = []

    for i, s in enumerate(sp.lines):
        for start, end, key, default in findTemplates(s):
            if key not in TEMPLATE_KEYS:
                continue

            val = values.get(key)

            if val is None:
                val = default or ""

            edits.append(edit.Edit(sp.offset(i, start), sp.offset(i, end),
                                   str(val)))

    return edits
