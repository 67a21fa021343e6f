# page break simulation. a page is filled element by element, counting
# word-wrapped lines against Config.linesOnPage; when an element doesn't
# fit, findBreakPoint() backs up to a place where a page may legally end,
# which can be inside a line (at a sentence boundary) for action and
# dialogue.
#
# positions are (line, column) tuples into the Screenplay's lines.

import logging

import fountainpager.edit as edit
import fountainpager.element as element
import fountainpager.markup as markup
import fountainpager.util as util
from fountainpager.error import NotMoveableError

log = logging.getLogger(__name__)


# where a page ends and the next one starts
class PageBreak:
    def __init__(self, pos, forced, split=False, speaker=None):

        # (line, column) of the first thing on the next page. for forced
        # breaks this is the page break marker line.
        self.pos = pos

        # True if the break comes from a page break marker in the script
        self.forced = forced

        # True if the break falls inside a dialogue block, in which case
        # speaker is the block's character cue Element
        self.split = split
        self.speaker = speaker

    def __repr__(self):
        return "PageBreak(%r, %r, %r)" % (self.pos, self.forced, self.split)


# line counts of the page being filled
class PageState:
    def __init__(self, consumed=0):
        self.consumed = consumed

        # dual dialogue columns, folded into consumed when the pair ends
        self.left = 0
        self.right = 0

    # lines used, as seen from the given dual dialogue side (or None)
    def used(self, side):
        if side == element.DUAL_LEFT:
            return self.consumed + self.left
        elif side == element.DUAL_RIGHT:
            return self.consumed + self.right

        return self.consumed + max(self.left, self.right)

    def add(self, side, lines):
        if side == element.DUAL_LEFT:
            self.left += lines
        elif side == element.DUAL_RIGHT:
            self.right += lines
        else:
            self.fold()
            self.consumed += lines

    # a blank line. the one between the two halves of a dual dialogue pair
    # takes no space, the one closing the pair first folds it.
    def addBlank(self):
        if self.right:
            self.fold()

        if not self.left:
            self.consumed += 1

    def fold(self):
        self.consumed += max(self.left, self.right)
        self.left = 0
        self.right = 0


class Paginator:
    def __init__(self, sp, progress=None):
        self.sp = sp
        self.cfg = sp.cfg

        # called with the count of pages done so far, or None
        self.progress = progress

    def isIncluded(self, kind):
        return kind in self.cfg.exportKinds

    # return visible text of el from column col on, a list mapping each of
    # its characters to a column in el.text, and its word-wrapped rows as
    # (start, end) offsets into the visible text.
    def measure(self, el, col=0):
        first, last = el.getBodyRange()
        first = max(first, col)
        last = max(first, last)

        text, cols = markup.visible(el.text, first, last)
        rows = util.wrapRanges(text, self.cfg.getType(el.kind).width)

        return (text, cols, rows)

    # return position of the first thing at or after pos that can start a
    # page, or None if there is nothing left.
    def skipToContent(self, pos):
        line, col = pos

        if col > 0:
            return pos

        sp = self.sp

        while line < len(sp.lines):
            kind = sp.kind(line)

            if (kind not in element.SPACE_KINDS) and \
               (kind not in (element.METADATA, element.PAGEBREAK)) and \
               self.isIncluded(kind):
                return (line, 0)

            line += 1

        return None

    # fill the page starting at pos. returns the PageBreak ending it, or
    # None if the script ends on this page.
    def advancePage(self, pos):
        sp = self.sp

        start = self.skipToContent(pos)
        if start is None:
            return None

        line, col = start

        # a page starting inside a dialogue block begins with the
        # speaker's name restated
        st = PageState()
        if sp.kind(line) in (element.DIALOGUE, element.PAREN):
            st.consumed = 1

        budget = self.cfg.linesOnPage

        i = line
        while i < len(sp.lines):
            el = sp.getElement(i)
            kind = el.kind

            if kind == element.BLANK:
                st.addBlank()
                i += 1

                continue

            if (kind in (element.COMMENT, element.METADATA)) or \
                   not self.isIncluded(kind):
                i += 1

                continue

            if kind == element.PAGEBREAK:
                log.debug("forced page break on line %d", i + 1)

                return PageBreak((i, 0), True)

            c = col if i == line else 0
            text, cols, rows = self.measure(el, c)

            side = None
            if kind in element.DIALOGUE_KINDS:
                side = sp.getDualSide(i)

            avail = budget - st.used(side)
            limit = avail

            # keep a line free for the "more" marker if the dialogue
            # continues on the next line
            isSpeech = kind in (element.DIALOGUE, element.PAREN)
            if isSpeech and ((i + 1) < len(sp.lines)) and \
                   (sp.kind(i + 1) in (element.DIALOGUE, element.PAREN)):
                limit -= 1

            if len(rows) > limit:
                fits = avail - 1 if isSpeech else avail

                if 0 < fits < len(rows):
                    over = (i, cols[rows[fits][0]])
                else:
                    over = (i, c)

                return self.makeBreak(self.getBreak(over, start))

            st.add(side, len(rows))
            i += 1

        return None

    # find a legal break for an overflow at pos on a page starting at
    # start, making sure the page holds more than headings.
    def getBreak(self, pos, start):
        bp = self.findBreakPoint(pos, start)

        if (bp <= start) or not self.hasContent(start, bp):
            log.debug("no legal page break between %r and %r", start, pos)

            bp = pos
            if bp <= start:
                bp = (pos[0] + 1, 0)

        return bp

    # True if the page from start up to bp holds something besides
    # headings
    def hasContent(self, start, bp):
        if bp[1] > 0:
            return True

        sp = self.sp

        for i in range(start[0], bp[0]):
            kind = sp.kind(i)

            if (kind in element.SPACE_KINDS) or \
                   (kind in (element.METADATA, element.PAGEBREAK,
                             element.SCENE, element.SECTION)) or \
                   not self.isIncluded(kind):
                continue

            return True

        return False

    # back up from pos to a position the page may end at, i.e. the
    # position of the first thing on the next page.
    def findBreakPoint(self, pos, start):
        sp = self.sp
        line, col = pos
        el = sp.getElement(line)
        kind = el.kind

        if (kind in element.SPACE_KINDS) or not self.isIncluded(kind):
            return (line, 0)

        if kind in element.DIALOGUE_KINDS:
            side = sp.getDualSide(line)

            if side == element.DUAL_RIGHT:
                partner = sp.getDualPartner(line)

                if partner is not None:
                    return self.findBreakPoint((partner, 0), start)

                return (sp.getDialogueIndexes(line)[0], 0)

            elif side == element.DUAL_LEFT:
                return (sp.getDialogueIndexes(line)[0], 0)

        if kind in (element.SECTION, element.SCENE, element.CHARACTER):
            return (line, 0)

        if kind == element.PAREN:
            if (line > 0) and (sp.kind(line - 1) == element.CHARACTER):
                return self.findBreakPoint((line - 1, 0), start)

            return (line, 0)

        if kind == element.DIALOGUE:
            bcol = self.sentenceBoundary(el, col)

            if bcol == 0:
                if (line > 0) and (sp.kind(line - 1) in
                                   (element.CHARACTER, element.PAREN)):
                    return self.findBreakPoint((line - 1, 0), start)

            return (line, bcol)

        if kind in (element.TRANSITION, element.CENTERED):
            prev = sp.skipBlankBack(line - 1)

            if (prev < 0) or (sp.kind(prev) == element.METADATA):
                return (line, 0)

            return self.findBreakPoint((prev, len(sp.lines[prev])), start)

        if kind == element.ACTION:
            bcol = self.sentenceBoundary(el, col)

            if bcol == 0:
                prev = sp.skipBlankBack(line - 1)

                if (prev >= 0) and (sp.kind(prev) == element.SCENE):
                    return self.findBreakPoint((prev, 0), start)

            return (line, bcol)

        return (line, 0)

    # return column of the sentence start at or before col in el's text,
    # or 0 if that's the beginning of the element's text.
    def sentenceBoundary(self, el, col):
        first = el.getBodyRange()[0]
        bcol = util.sentenceStart(el.text, col)

        if bcol <= first:
            return 0

        return bcol

    def makeBreak(self, pos):
        sp = self.sp
        line = pos[0]

        if line >= len(sp.lines):
            return None

        if sp.kind(line) in (element.DIALOGUE, element.PAREN):
            cue = sp.getElement(sp.getDialogueIndexes(line)[0])

            if cue.kind == element.CHARACTER:
                return PageBreak(pos, False, True, cue)

        return PageBreak(pos, False)

    # return list of PageBreaks for the whole script
    def getPageBreaks(self):
        ret = []
        pos = (0, 0)

        while 1:
            pb = self.advancePage(pos)

            if pb is None:
                break

            ret.append(pb)

            if pb.forced:
                pos = (pb.pos[0] + 1, 0)
            else:
                pos = pb.pos

            if self.progress:
                self.progress(len(ret))

        log.info("script has %d pages", len(ret) + 1)

        return ret

    # return (current page, total pages) for the given line
    def locatePage(self, line):
        breaks = self.getPageBreaks()
        current = 1

        for pb in breaks:
            if pb.pos > (line, 0):
                break

            current += 1

        return (current, len(breaks) + 1)

    # budget used by lines first - last, as if they were on one page
    def countLines(self, first, last):
        sp = self.sp
        st = PageState()

        for i in range(first, last + 1):
            el = sp.getElement(i)

            if el.kind == element.BLANK:
                st.addBlank()
            elif (el.kind not in (element.COMMENT, element.METADATA,
                      element.PAGEBREAK)) and self.isIncluded(el.kind):
                side = None
                if el.kind in element.DIALOGUE_KINDS:
                    side = sp.getDualSide(i)

                st.add(side, len(self.measure(el)[2]))

        st.fold()

        return st.consumed

    def getMarker(self, pageNr):
        if pageNr is None:
            return "==="

        return "=== %d ===" % pageNr

    # character cue restated at the top of a page after a dialogue split
    def getContinuedCue(self, cue):
        s = "%s %s" % (cue.get("name"), self.cfg.strContinued)

        if cue.forced:
            s = "@" + s

        return s

    # return the Edit writing a page break marker for pb. pageNr is the
    # number of the page starting at the break, or None.
    def getBreakEdit(self, pb, pageNr=None):
        sp = self.sp
        line, col = pb.pos
        s = sp.lines[line]
        marker = self.getMarker(pageNr)

        if col > 0:
            first = util.skipSpaceBack(s, col)
            prefix = "\n"
        else:
            first = 0
            prefix = ""

        if pb.split:
            text = "%s%s\n\n%s\n\n%s\n" % (prefix, self.cfg.strMore, marker,
                self.getContinuedCue(pb.speaker))
        elif col > 0:
            text = "\n\n%s\n\n" % marker
        else:
            text = "%s\n\n" % marker

            if (line > 0) and not util.isBlank(sp.lines[line - 1]):
                text = "\n" + text

        return edit.Edit(sp.offset(line, first), sp.offset(line, col), text)

    # return edits adding a page break marker at every computed page
    # break. with pageNumbers existing markers get renumbered too.
    def paginationEdits(self, pageNumbers=None):
        if pageNumbers is None:
            pageNumbers = self.cfg.pageBreakNumbers

        sp = self.sp
        edits = []

        for pageNr, pb in enumerate(self.getPageBreaks(), 2):
            if not pageNumbers:
                pageNr = None

            if not pb.forced:
                edits.append(self.getBreakEdit(pb, pageNr))

            elif pageNr is not None:
                line = pb.pos[0]
                s = sp.lines[line]
                marker = self.getMarker(pageNr)

                if s.strip() != marker:
                    edits.append(edit.Edit(sp.offset(line),
                        sp.offset(line, len(s)), marker))

        log.info("adding %d page breaks", len(edits))

        return edits


# return edits paginating the whole script
def paginateDocument(sp, pageNumbers=None, progress=None):
    return Paginator(sp, progress).paginationEdits(pageNumbers)


# return edits inserting one page break at the last legal place at or
# before the given position.
def insertPageBreak(sp, line, column=0):
    el = sp.getElement(line)

    if (el.kind in element.SPACE_KINDS) or \
           (el.kind in (element.METADATA, element.PAGEBREAK)):
        raise NotMoveableError("Can't insert a page break on line %d" %
                               (line + 1))

    pg = Paginator(sp)
    pos = pg.findBreakPoint((line, column), (0, 0))

    if pos[1] == 0:
        prev = sp.skipBlankBack(pos[0] - 1)

        if (prev < 0) or (sp.kind(prev) == element.METADATA):
            raise NotMoveableError("Nothing before line %d to put on its "
                                   "own page" % (line + 1))

    return [pg.getBreakEdit(pg.makeBreak(pos))]
