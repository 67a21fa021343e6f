# -*- coding: utf-8 -*-

import collections

import fountainpager.classifier as classifier
import fountainpager.config as config
import fountainpager.edit as edit
import fountainpager.element as element
import fountainpager.util as util


# one immutable snapshot of a script's text. everything derived from the
# text (elements, blocks, numbers, pages) is computed from this snapshot
# on demand; operations that change the text return edits, and apply()
# turns those into a new Screenplay.
class Screenplay:
    def __init__(self, text, cfg=None, filename=None):
        if cfg is None:
            cfg = config.Config()

        self.cfg = cfg
        self.classifier = classifier.Classifier(cfg)

        # file the text was read from, or None
        self.filename = filename

        self.text = util.fixNL(text)
        self.lines = self.text.split("\n")

        # offset of the first character of each line in self.text
        self.lineStarts = []

        pos = 0
        for s in self.lines:
            self.lineStarts.append(pos)
            pos += len(s) + 1

        # list of Elements, filled in by getElements()
        self._elements = None

    @staticmethod
    def load(filename, cfg=None):
        return Screenplay(util.loadFile(filename), cfg, filename)

    # return a new Screenplay with the given edits applied
    def apply(self, edits):
        return Screenplay(edit.applyEdits(self.text, edits), self.cfg,
                          self.filename)

    def __len__(self):
        return len(self.lines)

    # character offset in self.text of the given position
    def offset(self, line, column=0):
        return self.lineStarts[line] + column

    def getElements(self):
        if self._elements is None:
            self._elements = self.classifier.classifyAll(self.lines)

        return self._elements

    def getElement(self, line):
        return self.getElements()[line]

    def kind(self, line):
        return self.getElement(line).kind

    # True if line is blank or a comment
    def isBlank(self, line):
        return self.getElement(line).isBlank()

    # return index of the nearest line at or before 'line' that is not
    # blank, or -1
    def skipBlankBack(self, line):
        while (line >= 0) and self.isBlank(line):
            line -= 1

        return line

    # return index of the nearest line at or after 'line' that is not
    # blank, or len(self)
    def skipBlankForward(self, line):
        while (line < len(self.lines)) and self.isBlank(line):
            line += 1

        return line

    # move 'last' up past blank lines, but not above 'first'
    def trimBlankEnd(self, first, last):
        while (last > first) and self.isBlank(last):
            last -= 1

        return last

    # get first and last index of the blank-delimited paragraph containing
    # line, or None if line is blank.
    def getParaIndexes(self, line):
        if self.isBlank(line):
            return None

        first = line
        while (first > 0) and not self.isBlank(first - 1):
            first -= 1

        last = line
        while ((last + 1) < len(self.lines)) and not self.isBlank(last + 1):
            last += 1

        return (first, last)

    # get first and last index of the dialogue block (character cue,
    # parentheticals, dialogue) containing line, or None if line is not
    # part of one.
    def getDialogueIndexes(self, line):
        if self.kind(line) not in element.DIALOGUE_KINDS:
            return None

        first = line
        while (first > 0) and (self.kind(first) != element.CHARACTER) and \
              (self.kind(first - 1) in element.DIALOGUE_KINDS):
            first -= 1

        last = line
        while ((last + 1) < len(self.lines)) and \
              (self.kind(last + 1) in (element.DIALOGUE, element.PAREN)):
            last += 1

        return (first, last)

    # get first and last index of the scene containing line: from its
    # scene heading up to the next scene or section heading. returns None
    # for lines not inside a scene.
    def getSceneIndexes(self, line):
        first = line

        while self.kind(first) != element.SCENE:
            if (first == 0) or (self.kind(first) == element.SECTION):
                return None

            first -= 1

        last = first
        while (last + 1) < len(self.lines):
            if self.kind(last + 1) in (element.SCENE, element.SECTION):
                break

            last += 1

        return (first, self.trimBlankEnd(first, last))

    # get first and last index of the section whose heading is on the
    # given line, including all its subsections. returns None if line is
    # not a section heading.
    def getSectionIndexes(self, line):
        el = self.getElement(line)

        if el.kind != element.SECTION:
            return None

        last = line
        while (last + 1) < len(self.lines):
            nxt = self.getElement(last + 1)

            if (nxt.kind == element.SECTION) and (nxt.level <= el.level):
                break

            last += 1

        return (line, self.trimBlankEnd(line, last))

    # get first and last index of the block containing line: a section
    # for section headings, a scene for scene headings, a dialogue block
    # for dialogue elements, and a paragraph for everything else. returns
    # None for blank lines and the title page.
    def getBlockIndexes(self, line):
        kind = self.kind(line)

        if kind in element.SPACE_KINDS or (kind == element.METADATA):
            return None

        if kind == element.SECTION:
            return self.getSectionIndexes(line)

        if kind == element.SCENE:
            return self.getSceneIndexes(line)

        if kind in element.DIALOGUE_KINDS:
            return self.getDialogueIndexes(line)

        return self.getParaIndexes(line)

    # return which column of a dual dialogue line belongs to: DUAL_LEFT,
    # DUAL_RIGHT or None if it's not dual dialogue. the right block's cue
    # carries the "^" marker.
    def getDualSide(self, line):
        bounds = self.getDialogueIndexes(line)

        if bounds is None:
            return None

        first, last = bounds

        if self.getElement(first).dual:
            return element.DUAL_RIGHT

        nxt = self.skipBlankForward(last + 1)

        if nxt < len(self.lines):
            el = self.getElement(nxt)

            if (el.kind == element.CHARACTER) and el.dual:
                return element.DUAL_LEFT

        return None

    # return line of the left column's character cue for a right column
    # dual dialogue line, or None
    def getDualPartner(self, line):
        if self.getDualSide(line) != element.DUAL_RIGHT:
            return None

        first = self.getDialogueIndexes(line)[0]
        prev = self.skipBlankBack(first - 1)

        if (prev < 0) or (self.kind(prev) not in element.DIALOGUE_KINDS):
            return None

        return self.getDialogueIndexes(prev)[0]

    # return name of the character speaking on given line, or None
    def getSpeaker(self, line):
        bounds = self.getDialogueIndexes(line)

        if bounds is None:
            return None

        el = self.getElement(bounds[0])

        if el.kind != element.CHARACTER:
            return None

        return el.get("name")

    def getSceneHeadings(self):
        return [el for el in self.getElements() if el.kind == element.SCENE]

    # return the title page as an ordered dict of lower-cased key -> list
    # of values. continuation lines add values to the previous key.
    def getMetadata(self):
        ret = collections.OrderedDict()
        key = None

        for el in self.getElements():
            if el.kind != element.METADATA:
                break

            if "key" in el.spans:
                key = el.get("key").lower()
                ret[key] = []

            val = el.get("value")

            if val and key:
                ret[key].append(val)

        return ret
