# structural moves: swapping a block with its neighbour, and changing the
# level of section headings.

import logging

import fountainpager.edit as edit
import fountainpager.element as element
from fountainpager.error import NotMoveableError, ShiftBoundaryError

log = logging.getLogger(__name__)

# outline levels of blocks. sections use their heading level (1-5) instead.
LEVEL_SCENE = 6
LEVEL_PARA = 7


# return (first, last, level) of the block containing line. raises
# NotMoveableError if line is not inside a block.
def getBlock(sp, line):
    bounds = sp.getBlockIndexes(line)

    if bounds is None:
        raise NotMoveableError("Nothing to move on line %d" % (line + 1))

    first, last = bounds
    el = sp.getElement(first)

    if el.kind == element.SECTION:
        return (first, last, el.level)

    if el.kind == element.SCENE:
        return (first, last, LEVEL_SCENE)

    # a paragraph running straight into a heading doesn't own it
    while (first < line) and \
          (sp.kind(first) in (element.SCENE, element.SECTION)):
        first += 1

    return (first, last, LEVEL_PARA)


# return (first, last) of the block just above the block starting at line
# with the given level. raises ShiftBoundaryError if there is none.
def getPrevSibling(sp, first, level):
    last = sp.skipBlankBack(first - 1)

    if (last < 0) or (sp.kind(last) == element.METADATA):
        raise ShiftBoundaryError("Already at the top")

    if level == LEVEL_PARA:
        if sp.kind(last) in (element.SCENE, element.SECTION):
            raise ShiftBoundaryError("Can't move past a heading")

        return getBlock(sp, last)[:2]

    # find the heading owning 'last'
    i = last
    while i >= 0:
        el = sp.getElement(i)

        if el.kind == element.SECTION:
            if (level == LEVEL_SCENE) or (el.level < level):
                raise ShiftBoundaryError("Can't move out of section '%s'" %
                                         el.get("text"))

            if el.level == level:
                return (i, last)

        elif (el.kind == element.SCENE) and (level == LEVEL_SCENE):
            return (i, last)

        i -= 1

    raise ShiftBoundaryError("Already at the top")


# return (first, last) of the block just below the block ending at line
# with the given level. raises ShiftBoundaryError if there is none.
def getNextSibling(sp, last, level):
    first = sp.skipBlankForward(last + 1)

    if first >= len(sp.lines):
        raise ShiftBoundaryError("Already at the bottom")

    nFirst, nLast, nLevel = getBlock(sp, first)

    if nLevel < level:
        raise ShiftBoundaryError("Can't move past a higher level heading")

    if nLevel > level:
        raise ShiftBoundaryError("Can't move past a lower level block")

    return (nFirst, nLast)


# return edits swapping the block containing line with the next block of
# the same level (down=True) or the previous one (down=False).
def shiftBlock(sp, line, down):
    first, last, level = getBlock(sp, line)

    if down:
        upper = (first, last)
        lower = getNextSibling(sp, last, level)
    else:
        upper = getPrevSibling(sp, first, level)
        lower = (first, last)

    ls = sp.lines
    top = ls[upper[0]:upper[1] + 1]
    gap = ls[upper[1] + 1:lower[0]]
    bottom = ls[lower[0]:lower[1] + 1]

    log.debug("swapping lines %d-%d with %d-%d", upper[0] + 1, upper[1] + 1,
              lower[0] + 1, lower[1] + 1)

    return [edit.Edit(sp.offset(upper[0]),
                      sp.offset(lower[1], len(ls[lower[1]])),
                      "\n".join(bottom + gap + top))]


# return edits changing the level of the section heading on line, and of
# all its subsections, by delta.
def changeSectionLevel(sp, line, delta):
    bounds = sp.getSectionIndexes(line)

    if bounds is None:
        raise NotMoveableError("Line %d is not a section heading" %
                               (line + 1))

    edits = []

    for i in range(bounds[0], bounds[1] + 1):
        el = sp.getElement(i)

        if el.kind != element.SECTION:
            continue

        level = el.level + delta

        if not (1 <= level <= 5):
            raise ShiftBoundaryError("Section level must be between 1 and 5")

        start, end = el.spans["marker"]
        edits.append(edit.Edit(sp.offset(i, start), sp.offset(i, end),
                               "#" * level))

    return edits


def promoteSection(sp, line):
    return changeSectionLevel(sp, line, -1)


def demoteSection(sp, line):
    return changeSectionLevel(sp, line, 1)
