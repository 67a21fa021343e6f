import bisect
import logging

import fountainpager.element as element
import fountainpager.markup as markup
import fountainpager.paginate as paginate
import fountainpager.scenenumber as scenenumber
import fountainpager.util as util
from fountainpager.error import OutOfOrderError
from fountainpager.pagelist import PageList

log = logging.getLogger(__name__)


class SceneReport:
    def __init__(self, sp):
        self.sp = sp

        # start positions of pages 2..n
        self.breaks = [pb.pos for pb in
                       paginate.Paginator(sp).getPageBreaks()]
        self.allPages = list(range(1, len(self.breaks) + 2))

        try:
            numbers = scenenumber.SceneNumberResolver(sp).resolveAll()
            numbers = [num.toStr(sp.cfg) for num in numbers]
        except OutOfOrderError as e:
            log.warning("%s, showing scene numbers as written", e)

            numbers = [el.get("number") or "?"
                       for el in sp.getSceneHeadings()]

        # list of SceneInfos
        self.scenes = []

        for el, number in zip(sp.getSceneHeadings(), numbers):
            startLine, endLine = sp.getSceneIndexes(el.line)

            si = SceneInfo(self.allPages)
            si.number = number
            si.read(self, startLine, endLine)
            self.scenes.append(si)

    # return page number the given line is on
    def line2page(self, line):
        return bisect.bisect_right(self.breaks, (line, 0)) + 1

    def generate(self):
        s = ""

        for si in self.scenes:
            s += "\n%-4s %s\n" % (si.number, si.name)
            s += "     Lines: %d (%s%% action), Pages: %d (%s)\n" % (
                si.lines, util.pct(si.actionLines, si.lines),
                len(si.pages), si.pages)

            if si.chars:
                s += "\n"

            for name, count in util.sortDict(si.chars):
                s += "     %3d  %s\n" % (count, name)

        return s


# information about one scene
class SceneInfo:
    def __init__(self, allPages):
        # scene number, e.g. "42A"
        self.number = None

        # scene name, e.g. "INT. MOTEL ROOM - NIGHT"
        self.name = None

        # non-blank lines, excluding the scene heading
        self.lines = 0

        # action lines
        self.actionLines = 0

        self.pages = PageList(allPages)

        # key = character name (upper cased), value = number of dialogue
        # lines
        self.chars = {}

    # read information for the scene within given lines.
    def read(self, report, startLine, endLine):
        sp = report.sp

        heading = sp.getElement(startLine)
        first, last = heading.getBodyRange()
        self.name = markup.unmarkdown(heading.text[first:last]).upper()

        self.pages.addPage(report.line2page(startLine))

        speaker = None

        for i in range(startLine + 1, endLine + 1):
            el = sp.getElement(i)

            if el.isBlank() or not (el.kind in sp.cfg.exportKinds):
                continue

            self.lines += 1
            self.pages.addPage(report.line2page(i))

            if el.kind == element.ACTION:
                self.actionLines += 1

            elif el.kind == element.CHARACTER:
                speaker = markup.unmarkdown(el.get("name")).upper()

            elif (el.kind == element.DIALOGUE) and speaker:
                self.chars[speaker] = self.chars.get(speaker, 0) + 1
