# scene numbers. a number is a positive base plus an optional sequence of
# revisions, e.g. "10" = (10, ()), "10A" = (10, (1,)), "10B" = (10, (2,)).
# revisions let a new scene be numbered between two existing fixed numbers
# without renumbering the rest of the script.
#
# revision entries are letters in bijective base 26 (A = 1, Z = 26,
# AA = 27). second and later revision levels are separated by
# Config.sceneNumberSeparator: (10, (1, 2)) = "10A.B".
#
# with Config.prefixRevisions the letters go in front of the number of the
# scene that follows, so "A11" is (10, (1,)) and sorts between 10 and 11
# like "10A" does.

import functools
import logging
import re

import fountainpager.edit as edit
import fountainpager.element as element
from fountainpager.error import OutOfOrderError

log = logging.getLogger(__name__)


# 1 -> "A", 26 -> "Z", 27 -> "AA"
def rev2letters(n):
    s = ""

    while n > 0:
        n, r = divmod(n - 1, 26)
        s = chr(ord("A") + r) + s

    return s


# opposite of rev2letters
def letters2rev(s):
    n = 0

    for c in s.upper():
        n = n * 26 + (ord(c) - ord("A") + 1)

    return n


@functools.total_ordering
class SceneNumber:
    def __init__(self, base, revision=()):
        self.base = base
        self.revision = tuple(revision)

    def key(self):
        return (self.base, self.revision)

    def __eq__(self, other):
        if not isinstance(other, SceneNumber):
            return NotImplemented

        return self.key() == other.key()

    def __lt__(self, other):
        return self.key() < other.key()

    def __hash__(self):
        return hash(self.key())

    def __repr__(self):
        return "SceneNumber(%d, %r)" % (self.base, self.revision)

    def toStr(self, cfg):
        if not self.revision:
            return str(self.base)

        letters = cfg.sceneNumberSeparator.join(
            [rev2letters(r) for r in self.revision])

        if cfg.prefixRevisions:
            return "%s%d" % (letters, self.base + 1)
        else:
            return "%d%s" % (self.base, letters)

    # parse a scene number annotation. returns None if s is not a scene
    # number. numbers written in the other placement style are accepted
    # too, they mean the same thing.
    @staticmethod
    def fromStr(s, cfg):
        sep = cfg.sceneNumberSeparator
        s = s.strip()

        letters = r"[A-Za-z]+"
        if sep:
            letters = r"[A-Za-z]+(?:%s[A-Za-z]+)*" % re.escape(sep)

        suffixRe = r"^(?P<base>\d+)(?P<rev>%s)?$" % letters
        prefixRe = r"^(?P<rev>%s)?(?P<base>\d+)$" % letters

        if cfg.prefixRevisions:
            order = ((prefixRe, True), (suffixRe, False))
        else:
            order = ((suffixRe, False), (prefixRe, True))

        for rx, isPrefix in order:
            m = re.match(rx, s)

            if not m:
                continue

            base = int(m.group("base"))
            rev = m.group("rev")

            if not rev:
                return SceneNumber(base)

            if sep:
                parts = rev.split(sep)
            else:
                parts = [rev]

            revision = [letters2rev(p) for p in parts]

            if isPrefix:
                base -= 1

            return SceneNumber(base, revision)

        return None


# works out the number of every scene heading in a script, honoring any
# numbers already written into the script.
class SceneNumberResolver:
    def __init__(self, sp, progress=None):
        self.sp = sp
        self.cfg = sp.cfg

        # called with the count of scenes done so far, or None
        self.progress = progress

    # return list of scene heading Elements in document order
    def getHeadings(self):
        return [el for el in self.sp.getElements()
                if el.kind == element.SCENE]

    # return number for the scene heading with the given index (0-based,
    # counting scene headings only).
    def resolve(self, sceneIndex):
        return self.resolveAll()[sceneIndex]

    # return list of SceneNumbers, one for each scene heading. raises
    # OutOfOrderError if the fixed numbers leave no room for a scene.
    def resolveAll(self):
        headings = self.getHeadings()

        # with no numbers in the script at all scenes just get 1..n
        isNumbered = bool([el for el in headings if "number" in el.spans])

        # nextFixed[i] = first fixed number after heading i, or None
        nextFixed = [None] * len(headings)
        nxt = None

        for i in range(len(headings) - 1, -1, -1):
            nextFixed[i] = nxt
            el = headings[i]

            if "number" in el.spans:
                if el.sceneNumber is None:
                    raise OutOfOrderError("Scene number '%s' on line %d is "
                        "not understood" % (el.get("number"), el.line + 1),
                        el.line)

                nxt = el.sceneNumber

        ret = []
        prev = None

        for i, el in enumerate(headings):
            if not isNumbered:
                num = SceneNumber(i + 1)

            elif "number" in el.spans:
                num = el.sceneNumber

                if (prev is not None) and (num <= prev):
                    self.outOfOrder(el, num)

            elif prev is None:
                num = SceneNumber(1)

            else:
                num = self.increment(el, prev, nextFixed[i])

            if (nextFixed[i] is not None) and (num >= nextFixed[i]):
                self.outOfOrder(el, num)

            ret.append(num)
            prev = num

            if self.progress:
                self.progress(i + 1)

        return ret

    # return the number for an unnumbered scene coming after 'prev' and
    # before 'nxt' (None if no fixed number follows).
    def increment(self, el, prev, nxt):
        num = SceneNumber(prev.base + 1)

        if (nxt is None) or (num < nxt):
            return num

        if not self.cfg.revisedSceneNumbers:
            self.outOfOrder(el, num)

        rev = prev.revision

        if rev:
            num = SceneNumber(prev.base, rev[:-1] + (rev[-1] + 1,))
        else:
            num = SceneNumber(prev.base, (1,))

        if num < nxt:
            return num

        # go down one revision level, "10A" -> "10A.A". without a
        # separator that can't be written unambiguously.
        if rev and self.cfg.sceneNumberSeparator:
            num = SceneNumber(prev.base, rev + (1,))

            if num < nxt:
                return num

        self.outOfOrder(el, num)

    def outOfOrder(self, el, num):
        log.debug("scene on line %d would get %s", el.line + 1,
                  num.toStr(self.cfg))

        raise OutOfOrderError("Scene %s on line %d seems to be out of "
            "order" % (num.toStr(self.cfg), el.line + 1), el.line)


# return edits that write a number after every scene heading that has
# none. nothing is returned if any scene number would be out of order.
def addSceneNumbers(sp, progress=None):
    resolver = SceneNumberResolver(sp, progress)
    headings = resolver.getHeadings()
    numbers = resolver.resolveAll()

    edits = []

    for el, num in zip(headings, numbers):
        if "number" in el.spans:
            continue

        end = len(el.text.rstrip())

        edits.append(edit.Edit(sp.offset(el.line, end),
            sp.offset(el.line, len(el.text)), " #%s#" % num.toStr(sp.cfg)))

    log.info("numbering %d of %d scenes", len(edits), len(headings))

    return edits


# return edits that remove every scene number annotation
def removeSceneNumbers(sp):
    edits = []

    for el in sp.getElements():
        if (el.kind != element.SCENE) or ("number" not in el.spans):
            continue

        start = el.spans["heading"][1]
        end = len(el.text)

        edits.append(edit.Edit(sp.offset(el.line, start),
                               sp.offset(el.line, end), ""))

    log.info("removing %d scene numbers", len(edits))

    return edits
