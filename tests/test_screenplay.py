import pytest

import fountainpager.edit as edit
import fountainpager.element as el
import u
from fountainpager.error import EditConflictError

# test Screenplay: block bounds, dual dialogue, edits


def testLines():
    sp = u.loadString("INT. A\r\n\r\nAction.\r\n")

    assert sp.lines == ["INT. A", "", "Action.", ""]
    assert sp.offset(2) == 8
    assert sp.offset(2, 3) == 11
    assert len(sp) == 4
    assert sp.filename is None


def testLoad():
    sp = u.load()

    assert sp.filename.endswith("test.fountain")
    assert sp.lines[0] == "Title: The Long Way Home"


def testBlockIndexes():
    sp = u.load()

    # blank lines and the title page are not part of any block
    assert sp.getBlockIndexes(0) is None
    assert sp.getBlockIndexes(5) is None
    assert sp.getBlockIndexes(7) is None

    # sections run until the next section of the same or higher level
    assert sp.getBlockIndexes(8) == (8, 47)
    assert sp.getBlockIndexes(12) == (12, 47)

    # scenes
    assert sp.getBlockIndexes(16) == (16, 24)
    assert sp.getBlockIndexes(26) == (26, 41)
    assert sp.getBlockIndexes(43) == (43, 47)

    # dialogue blocks
    assert sp.getBlockIndexes(20) == (20, 22)
    assert sp.getBlockIndexes(21) == (20, 22)
    assert sp.getBlockIndexes(22) == (20, 22)

    # paragraphs
    assert sp.getBlockIndexes(18) == (18, 18)
    assert sp.getBlockIndexes(24) == (24, 24)


def testSceneIndexes():
    sp = u.load()

    assert sp.getSceneIndexes(18) == (16, 24)
    assert sp.getSceneIndexes(34) == (26, 41)

    # before the first scene
    assert sp.getSceneIndexes(14) is None
    assert sp.getSceneIndexes(12) is None


def testSectionIndexes():
    sp = u.loadString("# One\n\n## Two\n\nINT. A\n\n## Three\n\n# Four\n")

    assert sp.getSectionIndexes(0) == (0, 6)
    assert sp.getSectionIndexes(2) == (2, 4)
    assert sp.getSectionIndexes(6) == (6, 6)
    assert sp.getSectionIndexes(8) == (8, 8)
    assert sp.getSectionIndexes(4) is None


def testParaIndexes():
    sp = u.loadString("One.\nTwo.\n\nThree.\n")

    assert sp.getParaIndexes(0) == (0, 1)
    assert sp.getParaIndexes(1) == (0, 1)
    assert sp.getParaIndexes(2) is None
    assert sp.getParaIndexes(3) == (3, 3)


def testDualDialogue():
    sp = u.load()

    assert sp.getDualSide(30) == el.DUAL_LEFT
    assert sp.getDualSide(31) == el.DUAL_LEFT
    assert sp.getDualSide(33) == el.DUAL_RIGHT
    assert sp.getDualSide(34) == el.DUAL_RIGHT

    assert sp.getDualSide(20) is None
    assert sp.getDualSide(22) is None
    assert sp.getDualSide(18) is None

    assert sp.getDualPartner(34) == 30
    assert sp.getDualPartner(31) is None


def testSpeaker():
    sp = u.load()

    assert sp.getSpeaker(22) == "MARCUS"
    assert sp.getSpeaker(34) == "STEEL"
    assert sp.getSpeaker(18) is None


def testSceneHeadings():
    sp = u.load()

    assert [e.line for e in sp.getSceneHeadings()] == [16, 26, 43]


def testApply():
    sp = u.loadString("INT. A\n\nAction.\n")
    sp2 = sp.apply([edit.Edit(sp.offset(2), sp.offset(2, 6), "Reaction")])

    assert sp2.text == "INT. A\n\nReaction.\n"

    # the original is untouched
    assert sp.text == "INT. A\n\nAction.\n"

    with pytest.raises(EditConflictError):
        sp.apply([edit.Edit(0, 3, "x"), edit.Edit(2, 4, "y")])
