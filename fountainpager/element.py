# -*- coding: utf-8 -*-

# element kinds

BLANK = 0
SECTION = 1
SCENE = 2
ACTION = 3
CHARACTER = 4
DIALOGUE = 5
PAREN = 6
TRANSITION = 7
CENTERED = 8
SYNOPSIS = 9
PAGEBREAK = 10
NOTE = 11
METADATA = 12
COMMENT = 13

# dual dialogue sides
DUAL_LEFT = 1
DUAL_RIGHT = 2

# kinds that make up a dialogue block
DIALOGUE_KINDS = (CHARACTER, DIALOGUE, PAREN)

# kinds that are not part of the script text proper: they separate
# elements, so for context purposes they count as blank.
SPACE_KINDS = (BLANK, COMMENT)

# mapping from kind to textual name, e.g. ACTION -> "Action"
_kind2name = {}

# reverse of above, keys lower-cased
_name2kind = {}


def kind2name(kind):
    return _kind2name[kind]


# returns None for unknown names
def name2kind(name):
    return _name2kind.get(name.strip().lower())


def getKinds():
    return list(_kind2name.keys())


# one classified line
class Element:
    def __init__(self, kind, line, text, forced=False):

        # kind, e.g. SCENE
        self.kind = kind

        # line index in the document, and its text
        self.line = line
        self.text = text

        # True if an explicit sigil overrode heuristic detection
        self.forced = forced

        # key = capture name, value = (start, end) column range in text
        self.spans = {}

        # section headings only, 1-5
        self.level = 0

        # scene headings only, SceneNumber or None
        self.sceneNumber = None

        # character cues only, True if marked with a trailing "^"
        self.dual = False

    def __repr__(self):
        return "<Element %s line %d %r>" % (kind2name(self.kind), self.line,
                                           self.text)

    # set capture span from a regex match group, if the group matched
    def addSpan(self, name, m, group=None, offset=0):
        if group is None:
            group = name

        if m.group(group) is not None:
            self.spans[name] = (m.start(group) + offset, m.end(group) + offset)

    # return captured text, or None if there is no such capture
    def get(self, name):
        sp = self.spans.get(name)

        if sp is None:
            return None

        return self.text[sp[0]:sp[1]]

    def isBlank(self):
        return self.kind in SPACE_KINDS

    # range of the text that is printed for this element, i.e. the text
    # without sigils and scene number annotations
    def getBodyRange(self):
        if self.kind == SCENE:
            return self.spans["heading"]

        elif self.kind == CHARACTER:
            first = self.spans["name"][0]
            last = self.spans.get("extension", self.spans["name"])[1]

            return (first, last)

        elif self.kind == SECTION:
            return self.spans["text"]

        elif "text" in self.spans:
            return self.spans["text"]

        return (0, len(self.text))


def _init():
    for kind, name in (
        (BLANK, "Blank"),
        (SECTION, "Section Heading"),
        (SCENE, "Scene Heading"),
        (ACTION, "Action"),
        (CHARACTER, "Character"),
        (DIALOGUE, "Dialogue"),
        (PAREN, "Parenthetical"),
        (TRANSITION, "Transition"),
        (CENTERED, "Center"),
        (SYNOPSIS, "Synopsis"),
        (PAGEBREAK, "Page Break"),
        (NOTE, "Note"),
        (METADATA, "Metadata"),
        (COMMENT, "Comment"),
    ):
        _kind2name[kind] = name
        _name2kind[name.lower()] = kind


_init()
