# -*- coding: utf-8 -*-

import re

import fountainpager.error as error

# characters that end a sentence, possibly followed by closing quotes or
# brackets
_sentenceEndRe = re.compile(r"[.?!][\"')\]]*(?=\s+\S)")


def replace(s, new, start, width):
    return s[0:start] + new + s[start + width:]


# returns s with all possible different types of newlines converted to
# unix newlines, i.e. a single "\n"
def fixNL(s):
    return s.replace("\r\n", "\n").replace("\r", "\n")


# clamps the given value to a specific range. both limits are optional.
def clamp(val, minVal=None, maxVal=None):
    ret = val

    if minVal is not None:
        ret = max(ret, minVal)

    if maxVal is not None:
        ret = min(ret, maxVal)

    return ret


# like clamp, but gets/sets value directly from given object
def clampObj(obj, name, minVal=None, maxVal=None):
    setattr(obj, name, clamp(getattr(obj, name), minVal, maxVal))


# convert given string to int, clamping it to the given range (optional).
# never throws any exceptions, return defVal (possibly clamped as well) on
# any errors.
def str2int(s, defVal, minVal=None, maxVal=None, radix=10):
    val = defVal

    try:
        val = int(s, radix)
    except ValueError:
        pass

    return clamp(val, minVal, maxVal)


# return items, which is a list of strings, as a single string with \n
# between each string. any \ characters in the individual strings are
# escaped as \\.
def escapeStrings(items):
    return "\\n".join([s.replace("\\", "\\\\") for s in items])


# opposite of escapeStrings. takes in a string, returns a list of strings.
def unescapeStrings(s):
    if not s:
        return []

    items = []

    tmp = ""
    i = 0
    while i < (len(s) - 1):
        ch = s[i]

        if ch != "\\":
            tmp += ch
            i += 1
        else:
            ch = s[i + 1]

            if ch == "n":
                items.append(tmp)
                tmp = ""
            else:
                tmp += ch

            i += 2

    if i < len(s):
        tmp += s[i]

    items.append(tmp)

    return items


# True if s has at least one upper-case letter and no lower-case ones.
# works for any script that has case, unlike comparing against A-Z.
def isUpper(s):
    hasUpper = False

    for c in s:
        if c.islower():
            return False

        if c.isupper():
            hasUpper = True

    return hasUpper


# True if line is empty or consists only of whitespace
def isBlank(s):
    return not s.strip()


# word-wrap text to the given width and return the wrapped lines as a list
# of (start, end) offsets into text. never returns an empty list. words
# longer than width are cut at width. spaces at a wrap point belong to
# neither line.
def wrapRanges(text, width):
    ret = []
    width = max(width, 1)

    start = 0
    length = len(text)

    while 1:
        if (length - start) <= width:
            ret.append((start, length))
            break

        i = text.rfind(" ", start, start + width + 1)

        if i > start:
            ret.append((start, i))

            start = i + 1
            while text[start:start + 1] == " ":
                start += 1

            if start >= length:
                break
        else:
            ret.append((start, start + width))
            start += width

    return ret


# return column of the start of the sentence containing column 'col' of
# 's', i.e. the nearest sentence boundary at or before col. returns 0 if
# there is none.
def sentenceStart(s, col):
    ret = 0

    for m in _sentenceEndRe.finditer(s):
        # first character of the next sentence
        nxt = m.end()
        while nxt < len(s) and s[nxt].isspace():
            nxt += 1

        if nxt > col:
            break

        ret = nxt

    return ret


# return the offset in 's' where trailing whitespace before 'col' starts
def skipSpaceBack(s, col):
    while (col > 0) and s[col - 1].isspace():
        col -= 1

    return col


# return percentage of 'val1' of 'val2' (both ints) as an int (50% -> 50
# etc.), or 0 if val2 is 0.
def pct(val1, val2):
    if val2 != 0:
        return (100 * val1) // val2
    else:
        return 0


# return contents of dict d as a list of (key, value) tuples, sorted by
# value descending, ties by key.
def sortDict(d):
    return sorted(d.items(), key=lambda it: (-it[1], it[0]))


# load at most maxSize (all if -1) bytes from 'filename', returning the
# data as a string. raises FountainError on errors.
def loadFile(filename, maxSize=-1):
    try:
        with open(filename, "r", encoding="UTF-8") as f:
            return f.read(maxSize)
    except (IOError, UnicodeDecodeError) as e:
        raise error.FountainError("Error loading file '%s': %s" %
                                  (filename, e))


# write 'data' to 'filename'. raises FountainError on errors.
def writeToFile(filename, data):
    try:
        with open(filename, "w", encoding="UTF-8", newline="") as f:
            f.write(data)
    except IOError as e:
        raise error.FountainError("Error writing file '%s': %s" %
                                  (filename, e))
