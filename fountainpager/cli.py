"""
fountainpager - command line interface

Classify, number and paginate Fountain screenplays.

Usage:
    fountainpager classify script.fountain
    fountainpager number script.fountain -i
    fountainpager paginate script.fountain --page-numbers
"""
import argparse
import logging
import os.path
import sys

from tqdm import tqdm

import fountainpager.config as config
import fountainpager.element as element
import fountainpager.export as export
import fountainpager.misc as misc
import fountainpager.paginate as paginate
import fountainpager.scenenumber as scenenumber
import fountainpager.scenereport as scenereport
import fountainpager.screenplay as screenplay
import fountainpager.util as util
from fountainpager.error import FountainError

log = logging.getLogger(__name__)


def makeParser():
    parser = argparse.ArgumentParser(
        prog="fountainpager",
        description="Classify, number and paginate Fountain screenplays",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
    fountainpager classify script.fountain         # Show element of each line
    fountainpager number -i script.fountain        # Number scenes in place
    fountainpager paginate script.fountain         # Print with page breaks
    fountainpager page script.fountain 120         # Which page is line 120 on
        """
    )
    parser.add_argument(
        "--conf",
        help="Config file (default: %s)" % misc.getConfFilename()
    )
    parser.add_argument(
        "-v", "--verbose",
        action="store_true",
        help="Show detailed output"
    )

    sub = parser.add_subparsers(dest="command", required=True)

    def addCommand(name, help, writes=False):
        p = sub.add_parser(name, help=help)
        p.add_argument("input", help="Input Fountain file")

        if writes:
            p.add_argument(
                "-i", "--in-place",
                action="store_true",
                help="Modify the file instead of printing the result"
            )

        return p

    addCommand("classify", "Show the element kind of every line")
    addCommand("number", "Add scene numbers to unnumbered scenes",
               writes=True)
    addCommand("unnumber", "Remove all scene numbers", writes=True)

    p = addCommand("paginate", "Insert page breaks", writes=True)
    p.add_argument(
        "--page-numbers",
        action="store_true",
        help="Write page numbers into page breaks"
    )

    p = addCommand("page", "Show which page a line is on")
    p.add_argument(
        "line",
        type=int,
        help="Line number, starting from 1"
    )

    addCommand("scenes", "Show a report of all scenes")
    addCommand("export", "Run the configured export program")

    return parser


def loadConfig(filename):
    cfg = config.Config()

    if filename is None:
        filename = misc.getConfFilename()

        if not os.path.exists(filename):
            return cfg

    log.debug("loading config from %s", filename)
    cfg.load(util.loadFile(filename))

    return cfg


# print or write back the result of applying edits to sp
def output(sp, edits, args):
    newSp = sp.apply(edits)

    if args.in_place:
        if edits:
            util.writeToFile(sp.filename, newSp.text)

        print("%s: %d changes" % (sp.filename, len(edits)))
    else:
        sys.stdout.write(newSp.text)


def cmdClassify(sp, args):
    for el in sp.getElements():
        print("%5d  %-16s %s" % (el.line + 1, element.kind2name(el.kind),
                                 el.text))


def cmdNumber(sp, args):
    output(sp, scenenumber.addSceneNumbers(sp), args)


def cmdUnnumber(sp, args):
    output(sp, scenenumber.removeSceneNumbers(sp), args)


def cmdPaginate(sp, args):
    pageNumbers = args.page_numbers or None

    with tqdm(desc="Paginating", unit=" pages",
              disable=not sys.stderr.isatty()) as pbar:
        def progress(count):
            pbar.update(count - pbar.n)

        edits = paginate.paginateDocument(sp, pageNumbers, progress)

    output(sp, edits, args)


def cmdPage(sp, args):
    if not (1 <= args.line <= len(sp.lines)):
        raise FountainError("Line must be between 1 and %d" %
                            len(sp.lines))

    current, total = paginate.Paginator(sp).locatePage(args.line - 1)

    print("Page %d of %d" % (current, total))


def cmdScenes(sp, args):
    sys.stdout.write(scenereport.SceneReport(sp).generate())


def cmdExport(sp, args):
    export.run(sp)


commands = {
    "classify": cmdClassify,
    "number": cmdNumber,
    "unnumber": cmdUnnumber,
    "paginate": cmdPaginate,
    "page": cmdPage,
    "scenes": cmdScenes,
    "export": cmdExport,
}


def main(argv=None):
    args = makeParser().parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s")

    try:
        cfg = loadConfig(args.conf)
        sp = screenplay.Screenplay.load(args.input, cfg)

        commands[args.command](sp, args)
    except FountainError as e:
        log.error("%s", e)

        return 1

    return 0


if __name__ == "__main__":
    sys.exit(main())
