import fountainpager.scenereport as scenereport
import u

# test scene report


def testFixture():
    report = scenereport.SceneReport(u.load())

    assert [si.number for si in report.scenes] == ["1", "2", "3"]

    si = report.scenes[0]
    assert si.name == "EXT. FARMHOUSE - DAY"
    assert si.lines == 4
    assert si.actionLines == 1
    assert si.chars == {"MARCUS": 1}
    assert str(si.pages) == "1"

    # comments and notes are not counted, transitions are
    si = report.scenes[1]
    assert si.lines == 6
    assert si.chars == {"BRICK": 1, "STEEL": 1}

    s = report.generate()

    assert s.startswith("\n1    EXT. FARMHOUSE - DAY\n"
                        "     Lines: 4 (25% action), Pages: 1 (1)\n"
                        "\n"
                        "       1  MARCUS\n")
    assert "     Lines: 6 (16% action), Pages: 1 (1)\n" in s


def testPages():
    s = "INT. A\n\n"

    for i in range(60):
        s += "Line %d happens here.\n\n" % i

    report = scenereport.SceneReport(u.loadString(s + "INT. B\n\nEnd.\n"))

    assert report.allPages == [1, 2, 3]
    assert report.line2page(55) == 1
    assert report.line2page(56) == 2

    assert str(report.scenes[0].pages) == "1-3"
    assert report.scenes[0].lines == 60
    assert str(report.scenes[1].pages) == "3"


# scene numbers as written are shown if they can't be resolved
def testOutOfOrder():
    sp = u.loadString("INT. A #5#\n\nINT. B #3#\n\nINT. C\n")
    report = scenereport.SceneReport(sp)

    assert [si.number for si in report.scenes] == ["5", "3", "?"]
