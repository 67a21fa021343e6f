# configuration for classifying, numbering and paginating scripts. all
# settings are plain attributes created from the mypickle.Vars
# definitions below; load() / save() read and write them in "Name:value"
# lines.

import fountainpager.element as element
import fountainpager.mypickle as mypickle
import fountainpager.util as util
from fountainpager.error import ConfigError

# paper sizes we know the line count of
PAPER_LETTER = "letter"
PAPER_A4 = "a4"


# script-specific information about an element type
class Type:
    cvars = None

    def __init__(self, kind):

        # element kind
        self.kind = kind

        if not self.__class__.cvars:
            v = self.__class__.cvars = mypickle.Vars()

            # indent from the left margin and fill width, in characters
            v.addInt("indent", 0, "Indent", 0, 80)
            v.addInt("width", 61, "Width", 5, 80)

            v.makeDicts()

        self.__class__.cvars.setDefaults(self)

    def save(self, prefix):
        prefix += "%s/" % element.kind2name(self.kind)

        return self.cvars.save(prefix, self)

    def load(self, vals, prefix):
        prefix += "%s/" % element.kind2name(self.kind)

        self.cvars.load(vals, prefix, self)


class Config:
    cvars = None

    def __init__(self):

        if not self.__class__.cvars:
            self.setupVars()

        self.__class__.cvars.setDefaults(self)

        # type configs, key = element kind, value = Type
        self.types = {}

        for kind, indent, width in (
            (element.SCENE, 0, 61),
            (element.ACTION, 0, 61),
            (element.CHARACTER, 20, 38),
            (element.DIALOGUE, 10, 35),
            (element.PAREN, 15, 26),
            (element.TRANSITION, 42, 15),
            (element.CENTERED, 0, 61),
            (element.SECTION, 0, 61),
            (element.SYNOPSIS, 0, 61),
            (element.NOTE, 0, 61),
            (element.PAGEBREAK, 0, 61),
            (element.METADATA, 0, 61),
        ):
            t = Type(kind)
            t.indent = indent
            t.width = width
            self.types[t.kind] = t

        self.recalc()

    def setupVars(self):
        v = self.__class__.cvars = mypickle.Vars()

        # words that start a scene heading. matched case-insensitively and
        # must be followed by a dot or a space.
        v.addList("scenePrefixes", ["INT", "EXT", "EST", "INT./EXT",
            "INT/EXT", "I/E"], "SceneHeadingPrefixes",
            mypickle.StrVar("", "", ""))

        # endings that make an all-caps line a transition
        v.addList("transitionSuffixes", ["TO:", "WITH:", "FADE OUT",
            "THE END"], "TransitionSuffixes", mypickle.StrVar("", "", ""))

        # paper size, PAPER_LETTER or PAPER_A4
        v.addStr("paperSize", PAPER_LETTER, "Paper/Size")

        # how many lines fit on one page, per paper size
        v.addInt("linesLetter", 55, "Paper/LinesLetter", 10, 200)
        v.addInt("linesA4", 60, "Paper/LinesA4", 10, 200)

        # elements included in export. everything else is skipped by
        # pagination.
        v.addList("exportElements", [element.SCENE, element.ACTION,
            element.CHARACTER, element.DIALOGUE, element.PAREN,
            element.TRANSITION, element.CENTERED, element.PAGEBREAK],
            "ExportElements", mypickle.ElementNameVar("", None, ""))

        # whether to write page numbers into page breaks we add
        v.addBool("pageBreakNumbers", False, "PageBreakNumbers")

        # whether numbering may insert revised numbers like "10A" between
        # fixed scene numbers
        v.addBool("revisedSceneNumbers", True, "SceneNumber/Revised")

        # whether revision letters go before the number ("A11") instead of
        # after ("10A")
        v.addBool("prefixRevisions", False, "SceneNumber/PrefixRevisions")

        # separates second and later revision levels, e.g. "10A.B"
        v.addStr("sceneNumberSeparator", ".", "SceneNumber/Separator")

        # various strings we add to the script
        v.addStr("strMore", "(MORE)", "String/MoreDialogue")
        v.addStr("strContinued", "(CONT'D)", "String/DialogueContinued")

        # external program that turns a script file into something else.
        # %b is replaced with the script's file name and %B with the file
        # name without its extension.
        v.addStr("exportCommand",
                 "afterwriter --source %b --pdf %B.pdf --overwrite",
                 "Export/Command")

        v.makeDicts()

    # load config from string 's'. does not throw any exceptions, silently
    # ignores any errors, and always leaves config in an ok state.
    def load(self, s):
        vals = self.cvars.makeVals(s)

        self.cvars.load(vals, "", self)

        for t in self.types.values():
            t.load(vals, "Element/")

        self.recalc()

    # save config into a string and return that.
    def save(self):
        s = self.cvars.save("", self)

        for t in self.types.values():
            s += t.save("Element/")

        return s

    # fix up all invalid config values and recalculate all variables
    # dependent on other variables.
    def recalc(self):
        for it in self.cvars.numeric.values():
            util.clampObj(self, it.name, it.minVal, it.maxVal)

        for t in self.types.values():
            for it in t.cvars.numeric.values():
                util.clampObj(t, it.name, it.minVal, it.maxVal)

        self.paperSize = self.paperSize.strip().lower()

        if self.paperSize not in (PAPER_LETTER, PAPER_A4):
            self.paperSize = PAPER_LETTER

        # how many lines on a page
        if self.paperSize == PAPER_A4:
            self.linesOnPage = self.linesA4
        else:
            self.linesOnPage = self.linesLetter

        self.scenePrefixes = [s.strip() for s in self.scenePrefixes
                              if s.strip()]
        self.transitionSuffixes = [s.strip() for s in
                                   self.transitionSuffixes if s.strip()]

        # unknown element names were loaded as None
        self.exportElements = [k for k in self.exportElements
                               if k is not None]

        self.exportKinds = set(self.exportElements)

    def getType(self, kind):
        t = self.types.get(kind)

        if t is None:
            raise ConfigError("no formatting for element '%s'" %
                              element.kind2name(kind))

        return t
