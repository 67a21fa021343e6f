# classify lines of a Fountain script into elements.
# http://fountain.io
#
# a line's kind depends on its neighbours (a character cue needs a blank
# line before it, dialogue needs a cue or dialogue before it, etc.), so
# lines are classified in a forward scan that carries a small Context of
# what came before. single lines are classified by restarting that scan
# from the nearest blank line above them.

import re

import fountainpager.element as element
import fountainpager.scenenumber as scenenumber
import fountainpager.util as util
from fountainpager.element import Element

_metadataKeyRe = re.compile(
    r"^(?P<key>[A-Za-z][A-Za-z _\-]*?)[ \t]*:[ \t]*(?P<value>.*?)[ \t]*$")
_metadataContRe = re.compile(r"^[ \t]+(?P<value>[^:\s][^:]*?)[ \t]*$")

_forcedActionRe = re.compile(r"^[ \t]*(?P<forced>!)(?P<text>.*?)[ \t]*$")

_sectionRe = re.compile(
    r"^[ \t]*(?P<marker>#{1,5})[ \t]*(?P<text>[^#\s].*?)[ \t]*$")

_characterRe = re.compile(
    r"^[ \t]*(?P<forced>@)?[ \t]*(?P<name>[^(^\s][^(^]*?)[ \t]*"
    r"(?P<extension>\(.*\))?[ \t]*(?P<dual>\^)?[ \t]*$")

_parenRe = re.compile(r"^[ \t]*(?P<text>\(.*\))[ \t]*$")

_forcedTransitionRe = re.compile(
    r"^[ \t]*(?P<forced>>)[ \t]*(?P<text>.*?)[ \t]*$")

_centeredRe = re.compile(r"^[ \t]*>[ \t]*(?P<text>.*?)[ \t]*<[ \t]*$")

_synopsisRe = re.compile(r"^[ \t]*=(?!==)[ \t]*(?P<text>.*?)[ \t]*$")

_pageBreakRe = re.compile(
    r"^[ \t]*={3,}[ \t]*(?:(?P<page>[A-Za-z0-9.\-]+)[ \t]*=*)?[ \t]*$")

# a line holding only a note. without a closing "]]" the note continues on
# the following lines.
_noteStartRe = re.compile(
    r"^[ \t]*\[\[[ \t]*(?P<text>(?:(?!\]\]).)*?)[ \t]*(?:\]\])?[ \t]*$")
_noteContRe = re.compile(r"^[ \t]*(?P<text>.*?)[ \t]*(?:\]\])?[ \t]*$")

_textRe = re.compile(r"^[ \t]*(?P<text>.*?)[ \t]*$")

# characters a character name can not start with, as they force some
# other element
_forbiddenNameStart = "!#=>.[~@"


# True if s is a forced blank line, which continues dialogue
def isForcedBlank(s):
    return s.startswith("  ") and not s.strip()


# true if line opens a boneyard that it doesn't close
def _opensBoneyard(s):
    i = s.rfind("/*")

    return (i != -1) and (s.find("*/", i + 2) == -1)


# state of a forward scan, describing the lines before the current one
class Context:
    def __init__(self):

        # kind of the previous line, or None at the start of the document
        self.prevKind = None

        # True while every line so far has been metadata
        self.metadataOpen = True

        # inside a /* */ comment
        self.inBoneyard = False

        # inside a multi-line [[ ]] note
        self.inNote = False

    # True if the previous line counts as blank for context purposes
    def prevBlank(self):
        return (self.prevKind is None) or \
               (self.prevKind in element.SPACE_KINDS)


class Classifier:
    def __init__(self, cfg):
        self.cfg = cfg

        # longest first so "INT./EXT" wins over "INT"
        prefixes = sorted(cfg.scenePrefixes, key=len, reverse=True)

        if prefixes:
            prefixRe = "|".join([re.escape(p) for p in prefixes])
        else:
            prefixRe = "(?!)"

        self.sceneRe = re.compile(
            r"^[ \t]*(?P<heading>"
            r"(?:(?P<forced>\.)(?=\w)|(?P<prefix>%s)(?:\.[ \t]*|[ \t]+))"
            r"(?P<location>.*?)"
            r"(?:(?P<separator>[ \t]+-+[ \t]+)(?P<suffix>.*?))?)"
            r"(?:[ \t]+#(?P<number>[\w.\-]+)#)?[ \t]*$" % prefixRe,
            re.IGNORECASE)

        if cfg.transitionSuffixes:
            suffixRe = "|".join([re.escape(s) for s in
                                 cfg.transitionSuffixes])
        else:
            suffixRe = "(?!)"

        self.transitionRe = re.compile(
            r"^[ \t]*(?P<text>.*(?:%s))[ \t]*$" % suffixRe)

    # classify all lines, returning a list of Elements of the same length
    def classifyAll(self, lines):
        ctx = Context()
        ret = []

        for i in range(len(lines)):
            ret.append(self.step(ctx, lines, i))

        return ret

    # classify line i of lines.
    def classify(self, lines, i):
        start = self.findRestart(lines, i)

        ctx = Context()

        if start > 0:
            ctx.prevKind = element.BLANK
            ctx.metadataOpen = False
            ctx.inBoneyard = self.isInBoneyard(lines, start)

            if ctx.inBoneyard:
                ctx.prevKind = element.COMMENT

        el = None
        for j in range(start, i + 1):
            el = self.step(ctx, lines, j)

        return el

    # return index of the line to restart a scan from to classify line
    # i: the line after the nearest truly empty line above i, or 0.
    def findRestart(self, lines, i):
        j = i

        while j > 0:
            s = lines[j - 1]

            if util.isBlank(s) and not isForcedBlank(s):
                break

            j -= 1

        return j

    # True if line i lies inside a boneyard opened on some line above it
    def isInBoneyard(self, lines, i):
        j = i - 1

        while j >= 0:
            s = lines[j]
            opening = s.rfind("/*")
            closing = s.rfind("*/")

            if closing > opening:
                return False

            if opening != -1:
                return True

            j -= 1

        return False

    # True if the line after i counts as blank. the end of the document
    # counts as blank.
    def isNextBlank(self, lines, i):
        if (i + 1) >= len(lines):
            return True

        s = lines[i + 1].strip()

        return (not s) or s.startswith("//") or s.startswith("/*")

    # classify line i given the context of the lines before it, and
    # update the context.
    def step(self, ctx, lines, i):
        s = lines[i]
        el = self.getElement(ctx, lines, i, s)

        if el.kind != element.METADATA:
            ctx.metadataOpen = False

        if el.kind != element.COMMENT and _opensBoneyard(s):
            ctx.inBoneyard = True

        ctx.prevKind = el.kind

        return el

    def getElement(self, ctx, lines, i, s):
        st = s.strip()

        # boneyard
        if ctx.inBoneyard:
            if "*/" in s:
                ctx.inBoneyard = False

            return Element(element.COMMENT, i, s)

        if st.startswith("//"):
            return Element(element.COMMENT, i, s)

        if st.startswith("/*"):
            if "*/" not in s[s.find("/*") + 2:]:
                ctx.inBoneyard = True

            return Element(element.COMMENT, i, s)

        # continuation of a multi-line note. a blank line ends it.
        if ctx.inNote:
            if not st:
                ctx.inNote = False

                return Element(element.BLANK, i, s)

            if "]]" in s:
                ctx.inNote = False

            return self.makeText(element.NOTE, i, s, _noteContRe)

        if not st and not (isForcedBlank(s) and
                           ctx.prevKind in element.DIALOGUE_KINDS):
            return Element(element.BLANK, i, s)

        if ctx.metadataOpen:
            el = self.matchMetadata(ctx, i, s)

            if el:
                return el

        m = _forcedActionRe.match(s)
        if m:
            el = Element(element.ACTION, i, s, True)
            el.addSpan("forced", m)
            el.addSpan("text", m)

            return el

        m = _sectionRe.match(s)
        if m:
            el = Element(element.SECTION, i, s)
            el.addSpan("marker", m)
            el.addSpan("text", m)
            el.level = len(m.group("marker"))

            return el

        if ctx.prevBlank():
            el = self.matchScene(i, s)

            if el:
                return el

            if not self.isNextBlank(lines, i):
                el = self.matchCharacter(i, s)

                if el:
                    return el

        isParen = ctx.prevKind in (element.CHARACTER, element.DIALOGUE) \
                  and bool(_parenRe.match(s))

        if (ctx.prevKind in element.DIALOGUE_KINDS) and not isParen:
            return self.makeText(element.DIALOGUE, i, s, _textRe)

        if isParen:
            return self.makeText(element.PAREN, i, s, _parenRe)

        if ctx.prevBlank() and self.isNextBlank(lines, i):
            el = self.matchTransition(i, s)

            if el:
                return el

        m = _centeredRe.match(s)
        if m:
            el = Element(element.CENTERED, i, s, True)
            el.addSpan("text", m)

            return el

        m = _synopsisRe.match(s)
        if m:
            el = Element(element.SYNOPSIS, i, s, True)
            el.addSpan("text", m)

            return el

        m = _pageBreakRe.match(s)
        if m:
            el = Element(element.PAGEBREAK, i, s, True)
            el.addSpan("page", m)

            return el

        m = _noteStartRe.match(s)
        if m:
            if "]]" not in s:
                ctx.inNote = True

            el = Element(element.NOTE, i, s, True)
            el.addSpan("text", m)

            return el

        return self.makeText(element.ACTION, i, s, _textRe)

    def makeText(self, kind, i, s, rx):
        el = Element(kind, i, s)
        el.addSpan("text", rx.match(s))

        return el

    def matchMetadata(self, ctx, i, s):
        if ctx.prevKind is None:
            # a script starting with "FADE IN:" has no title page
            if s.strip().lower().startswith("fade"):
                return None

            m = _metadataKeyRe.match(s)
        else:
            m = _metadataKeyRe.match(s) or _metadataContRe.match(s)

        if not m:
            return None

        el = Element(element.METADATA, i, s)
        el.addSpan("value", m)

        if "key" in m.groupdict():
            el.addSpan("key", m)

        return el

    def matchScene(self, i, s):
        m = self.sceneRe.match(s)

        if not m:
            return None

        el = Element(element.SCENE, i, s, m.group("forced") is not None)

        for name in ("forced", "heading", "prefix", "location",
                     "separator", "suffix", "number"):
            el.addSpan(name, m)

        if m.group("number"):
            el.sceneNumber = scenenumber.SceneNumber.fromStr(
                m.group("number"), self.cfg)

        return el

    def matchCharacter(self, i, s):
        m = _characterRe.match(s)

        if not m:
            return None

        forced = m.group("forced") is not None
        name = m.group("name")

        if not forced:
            if (name[0] in _forbiddenNameStart) or not util.isUpper(name):
                return None

        el = Element(element.CHARACTER, i, s, forced)

        for n in ("forced", "name", "extension", "dual"):
            el.addSpan(n, m)

        el.dual = m.group("dual") is not None

        return el

    def matchTransition(self, i, s):
        m = _forcedTransitionRe.match(s)

        if m:
            if m.group("text").endswith("<"):
                return None

            el = Element(element.TRANSITION, i, s, True)
            el.addSpan("forced", m)
            el.addSpan("text", m)

            return el

        m = self.transitionRe.match(s)

        if m and util.isUpper(m.group("text")):
            el = Element(element.TRANSITION, i, s)
            el.addSpan("text", m)

            return el

        return None
