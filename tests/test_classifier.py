import fountainpager.element as el
import u
from fountainpager.paginate import Paginator

# test classifying lines


def testSceneCharacterDialogue():
    sp = u.loadString("INT. HOUSE - DAY\n\nJOHN\nHello.\n")

    assert u.kinds(sp) == [el.SCENE, el.BLANK, el.CHARACTER, el.DIALOGUE,
                           el.BLANK]

    scene = sp.getElement(0)
    assert scene.get("prefix") == "INT"
    assert scene.get("location") == "HOUSE"
    assert scene.get("suffix") == "DAY"
    assert scene.get("number") is None
    assert not scene.forced

    assert sp.getElement(2).get("name") == "JOHN"
    assert sp.getElement(3).get("text") == "Hello."


def testFixture():
    sp = u.load()

    assert u.kinds(sp) == [
        el.METADATA, el.METADATA, el.METADATA, el.METADATA, el.METADATA,
        el.METADATA, el.METADATA, el.BLANK,
        el.SECTION, el.BLANK,
        el.SYNOPSIS, el.BLANK,
        el.SECTION, el.BLANK,
        el.ACTION, el.BLANK,
        el.SCENE, el.BLANK,
        el.ACTION, el.BLANK,
        el.CHARACTER, el.PAREN, el.DIALOGUE, el.BLANK,
        el.NOTE, el.BLANK,
        el.SCENE, el.BLANK,
        el.ACTION, el.BLANK,
        el.CHARACTER, el.DIALOGUE, el.BLANK,
        el.CHARACTER, el.DIALOGUE, el.BLANK,
        el.COMMENT, el.COMMENT, el.COMMENT, el.COMMENT, el.BLANK,
        el.TRANSITION, el.BLANK,
        el.SCENE, el.BLANK,
        el.ACTION, el.BLANK,
        el.CENTERED, el.BLANK,
    ]

    assert sp.getElement(8).level == 1
    assert sp.getElement(12).level == 2
    assert sp.getElement(12).get("text") == "The Farm"

    scene = sp.getElement(26)
    assert scene.get("location") == "FARMHOUSE"
    assert scene.get("suffix") == "KITCHEN - CONTINUOUS"

    assert sp.getElement(33).dual
    assert sp.getElement(33).get("name") == "STEEL"
    assert not sp.getElement(30).dual

    assert sp.getElement(43).forced
    assert sp.getElement(43).get("location") == "FLASHBACK"

    assert sp.getElement(47).get("text") == "THE END"


# classifying single lines must give the same result as a full scan
def testSingleLine():
    sp = u.load()
    full = sp.getElements()

    for i in range(len(sp.lines)):
        assert sp.classifier.classify(sp.lines, i).kind == full[i].kind


def testSceneNumber():
    sp = u.loadString("EXT. BRICK'S PATIO - DAY #12A#\n")
    scene = sp.getElement(0)

    assert scene.kind == el.SCENE
    assert scene.get("number") == "12A"
    assert scene.get("heading") == "EXT. BRICK'S PATIO - DAY"
    assert scene.sceneNumber.base == 12
    assert scene.sceneNumber.revision == (1,)


def testScenePrefixes():
    sp = u.loadString("int. house\n\nI/E CAR - MOVING\n\nINTERIOR DESIGN\n")

    assert u.kinds(sp)[:5] == [el.SCENE, el.BLANK, el.SCENE, el.BLANK,
                               el.ACTION]
    assert sp.getElement(2).get("prefix") == "I/E"

    # prefixes come from the config
    c = u.cfg(scenePrefixes=["INT", "EXT", "INTERIOR"])
    sp = u.loadString("INTERIOR DESIGN\n", c)

    assert sp.kind(0) == el.SCENE


# a scene heading needs a blank line before it
def testSceneNeedsBlankBefore():
    sp = u.loadString("Something happens.\nINT. HOUSE - DAY\n")

    assert u.kinds(sp)[:2] == [el.ACTION, el.ACTION]


def testForcedElements():
    sp = u.loadString("!INT. NOT A SCENE\n\n.SNIPER SCOPE POV\n\n"
                      "@McCLANE\nYippee ki-yay.\n\n>Burn to white.\n\n"
                      "...and then nothing.\n")

    assert u.kinds(sp) == [el.ACTION, el.BLANK, el.SCENE, el.BLANK,
        el.CHARACTER, el.DIALOGUE, el.BLANK, el.TRANSITION, el.BLANK,
        el.ACTION, el.BLANK]

    for i in (0, 2, 4, 7):
        assert sp.getElement(i).forced

    assert sp.getElement(0).get("text") == "INT. NOT A SCENE"
    assert sp.getElement(4).get("name") == "McCLANE"
    assert sp.getElement(7).get("text") == "Burn to white."


def testCharacter():
    sp = u.loadString("\nMOM (O. S.)\nLuke!\n\nHANS (on the radio) ^\nOK.\n")

    mom = sp.getElement(1)
    assert mom.kind == el.CHARACTER
    assert mom.get("name") == "MOM"
    assert mom.get("extension") == "(O. S.)"

    hans = sp.getElement(4)
    assert hans.kind == el.CHARACTER
    assert hans.get("name") == "HANS"
    assert hans.get("extension") == "(on the radio)"
    assert hans.dual


# a character cue needs a non-blank line after it, and must not have
# lower case letters
def testNotCharacter():
    sp = u.loadString("\nJOHN\n\nJohn\nwalks in.\n")

    assert u.kinds(sp)[:5] == [el.BLANK, el.ACTION, el.BLANK, el.ACTION,
                               el.ACTION]


def testParenthetical():
    sp = u.loadString("\nSTEEL\n(starting the engine)\nSo much for retirement!"
                      "\n(beat)\n(still)\nYes.\n")

    assert u.kinds(sp)[:7] == [el.BLANK, el.CHARACTER, el.PAREN,
        el.DIALOGUE, el.PAREN, el.DIALOGUE, el.DIALOGUE]
    assert sp.getElement(2).get("text") == "(starting the engine)"


# two spaces keep dialogue going across an otherwise empty line
def testForcedBlankDialogue():
    sp = u.loadString("JOHN\nHello.\n  \nStill me.\n")

    assert u.kinds(sp) == [el.CHARACTER, el.DIALOGUE, el.DIALOGUE,
                           el.DIALOGUE, el.BLANK]


def testTransition():
    sp = u.loadString("\nCUT TO:\n\nSMASH CUT TO:\n\nFADE OUT\n\nSee you TO:\n\n"
                      "JOHN\nCUT TO:\n")

    assert u.kinds(sp) == [el.BLANK, el.TRANSITION, el.BLANK, el.TRANSITION,
        el.BLANK, el.TRANSITION, el.BLANK, el.ACTION, el.BLANK,
        el.CHARACTER, el.DIALOGUE, el.BLANK]

    # suffixes come from the config
    c = u.cfg(transitionSuffixes=["OUT:"])
    sp = u.loadString("\nCUT TO:\n\nBLACK OUT:\n", c)

    assert u.kinds(sp)[:4] == [el.BLANK, el.ACTION, el.BLANK, el.TRANSITION]

    # words merely ending like a transition are not one
    sp = u.loadString("\nLEGEND\n\nWEEKEND\n\nTHE END\n")

    assert u.kinds(sp)[:6] == [el.BLANK, el.ACTION, el.BLANK, el.ACTION,
                               el.BLANK, el.TRANSITION]


def testCentered():
    sp = u.loadString("\n> THE END <\n\n>INTERMISSION<\n")

    assert sp.kind(1) == el.CENTERED
    assert sp.kind(3) == el.CENTERED
    assert sp.getElement(3).get("text") == "INTERMISSION"


def testSynopsisAndPageBreak():
    sp = u.loadString("\n= Set up the hero.\n\n===\n\n=== 12 ===\n")

    assert u.kinds(sp) == [el.BLANK, el.SYNOPSIS, el.BLANK, el.PAGEBREAK,
                           el.BLANK, el.PAGEBREAK, el.BLANK]
    assert sp.getElement(1).get("text") == "Set up the hero."
    assert sp.getElement(3).get("page") is None
    assert sp.getElement(5).get("page") == "12"


def testSections():
    sp = u.loadString("# Act\n\n### Sequence\n\n#### \n")

    assert sp.kind(0) == el.SECTION
    assert sp.getElement(0).level == 1
    assert sp.getElement(2).level == 3
    assert sp.getElement(2).get("marker") == "###"
    assert sp.kind(4) == el.ACTION


def testNotes():
    sp = u.loadString("[[A note\nthat continues]]\n\nAction.\n\n[[Open note\n\n"
                      "Action again.\n")

    assert u.kinds(sp) == [el.NOTE, el.NOTE, el.BLANK, el.ACTION, el.BLANK,
                           el.NOTE, el.BLANK, el.ACTION, el.BLANK]

    # a note followed by text on the same line is action
    sp = u.loadString("INT. A\n\n[[note]] John walks in and sits down.\n")

    assert sp.kind(2) == el.ACTION
    assert Paginator(sp).countLines(2, 2) == 1


def testBoneyard():
    sp = u.loadString("/* start\nJOHN\nHi\n*/\nAction.\n\n"
                      "Action /* hidden */ text.\n\n// line comment\n")

    assert u.kinds(sp) == [el.COMMENT, el.COMMENT, el.COMMENT, el.COMMENT,
        el.ACTION, el.BLANK, el.ACTION, el.BLANK, el.COMMENT, el.BLANK]


def testMetadata():
    sp = u.load()
    md = sp.getMetadata()

    assert list(md.keys()) == ["title", "credit", "author", "draft date",
                               "contact"]
    assert md["title"] == ["The Long Way Home"]
    assert md["contact"] == ["Jane Doe", "jane@example.com"]


# a script starting with a transition has no title page
def testFadeInIsNotMetadata():
    sp = u.loadString("FADE IN:\n\nINT. HOUSE - DAY\n")

    assert u.kinds(sp)[:3] == [el.ACTION, el.BLANK, el.SCENE]
    assert not sp.getMetadata()


# a colon in the first line of action does not make a title page
def testActionWithColonIsNotMetadata():
    for s in ("It's 10:30 PM. She waits.\n\nINT. A\n",
              "At 10:30 she leaves.\n\nINT. A\n"):
        sp = u.loadString(s)

        assert u.kinds(sp)[:3] == [el.ACTION, el.BLANK, el.SCENE]
        assert not sp.getMetadata()


# lines that satisfy a rule must not be taken by a later one
def testPrecedence():
    data = [
        # forced action beats everything after it
        ("!# not a section", el.ACTION),
        ("\n!JOHN\nHello", el.ACTION),

        # section beats scene heading
        ("\n#INT. HOUSE", el.SECTION),

        # scene heading beats character
        ("\nINT. HOUSE\nSomething.", el.SCENE),
        ("\n.JOHN\nHello", el.SCENE),

        # character beats dialogue
        ("\nJOHN\nHello", el.CHARACTER),

        # centered beats forced transition
        ("\n> CENTER <\n", el.CENTERED),

        # page break beats synopsis
        ("\n===\n", el.PAGEBREAK),
    ]

    for s, kind in data:
        sp = u.loadString(s)

        assert sp.kind(1 if s.startswith("\n") else 0) == kind, s

    # dialogue beats transition
    sp = u.loadString("JOHN\nCUT TO:\n")
    assert sp.kind(1) == el.DIALOGUE

    # paren beats dialogue
    sp = u.loadString("JOHN\n(beat)\n")
    assert sp.kind(1) == el.PAREN


# every line gets exactly one kind, whatever it contains
def testTotal():
    lines = ["", " ", "  ", "\t", "#", "##", "=", "==", "===", "[[", "]]",
             "/*", "*/", "//", ">", "<", "><", "!", "@", "^", ".", "...",
             "(", ")", "()", ":", "a:", " a", "INT.", "INT", "TO:", "#1#"]

    text = "\n".join(lines)
    sp = u.loadString(text)

    assert len(sp.getElements()) == len(lines)

    for i in range(len(lines)):
        assert sp.classifier.classify(sp.lines, i).kind in el.getKinds()
