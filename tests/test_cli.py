from unittest import mock

import fountainpager.cli as cli

# test the command line interface


def makeFiles(tmp_path, text):
    conf = tmp_path / "config.txt"
    conf.write_text("")

    script = tmp_path / "script.fountain"
    script.write_text(text)

    return str(conf), str(script)


def testClassify(tmp_path, capsys):
    conf, script = makeFiles(tmp_path, "INT. A\n\nJOHN\nHi.\n")

    assert cli.main(["--conf", conf, "classify", script]) == 0

    lines = capsys.readouterr().out.split("\n")
    assert lines[0] == "    1  Scene Heading    INT. A"
    assert lines[2] == "    3  Character        JOHN"


def testNumber(tmp_path, capsys):
    conf, script = makeFiles(tmp_path, "INT. A\n\nINT. B\n")

    assert cli.main(["--conf", conf, "number", script]) == 0
    assert capsys.readouterr().out == "INT. A #1#\n\nINT. B #2#\n"

    # in place
    assert cli.main(["--conf", conf, "number", "-i", script]) == 0
    assert capsys.readouterr().out == "%s: 2 changes\n" % script

    with open(script) as f:
        assert f.read() == "INT. A #1#\n\nINT. B #2#\n"

    assert cli.main(["--conf", conf, "unnumber", script]) == 0
    assert capsys.readouterr().out == "INT. A\n\nINT. B\n"


def testPaginate(tmp_path, capsys):
    s = "INT. A\n\n"

    for i in range(60):
        s += "Line %d happens here.\n\n" % i

    conf, script = makeFiles(tmp_path, s)

    assert cli.main(["--conf", conf, "paginate", "--page-numbers",
                     script]) == 0

    out = capsys.readouterr().out
    assert "\n=== 2 ===\n" in out
    assert "\n=== 3 ===\n" in out

    assert cli.main(["--conf", conf, "page", script, "60"]) == 0
    assert capsys.readouterr().out == "Page 2 of 3\n"


def testConfig(tmp_path, capsys):
    conf, script = makeFiles(tmp_path,
                             "INT. A #10#\n\nINT. B\n\nINT. C #11#\n")

    with open(conf, "w") as f:
        f.write("SceneNumber/PrefixRevisions:True\n")

    assert cli.main(["--conf", conf, "number", script]) == 0
    assert "INT. B #A11#" in capsys.readouterr().out


def testScenes(tmp_path, capsys):
    conf, script = makeFiles(tmp_path, "INT. A\n\nJOHN\nHi.\n")

    assert cli.main(["--conf", conf, "scenes", script]) == 0
    assert "1    INT. A" in capsys.readouterr().out


def testExport(tmp_path):
    conf, script = makeFiles(tmp_path, "INT. A\n")

    with mock.patch("subprocess.run") as run:
        run.return_value.returncode = 0

        assert cli.main(["--conf", conf, "export", script]) == 0
        assert run.call_args[0][0][2] == script


def testErrors(tmp_path):
    conf, script = makeFiles(tmp_path, "INT. A\n")

    assert cli.main(["--conf", conf, "page", script, "5"]) == 1
    assert cli.main(["--conf", conf, "classify",
                     str(tmp_path / "missing.fountain")]) == 1
