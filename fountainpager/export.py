# handing a script over to an external program (e.g. a PDF renderer). the
# program is configured as a command line in Config.exportCommand.

import logging
import os.path
import subprocess

from fountainpager.error import FountainError, NoDestinationError

log = logging.getLogger(__name__)


# return the export command for sp as a list of arguments. %b in the
# configured command is replaced with the script's file name and %B with
# the file name without its extension.
def getCommand(sp, filename=None):
    if filename is None:
        filename = sp.filename

    if not filename:
        raise NoDestinationError("Script has no file name, save it first")

    cmd = sp.cfg.exportCommand.split()

    if not cmd:
        raise FountainError("No export command configured")

    base = os.path.splitext(filename)[0]

    return [s.replace("%b", filename).replace("%B", base) for s in cmd]


# run the export command for sp and wait for it to finish
def run(sp, filename=None):
    args = getCommand(sp, filename)

    log.info("running %s", " ".join(args))

    try:
        ret = subprocess.run(args)
    except OSError as e:
        raise FountainError("Could not run export program '%s': %s" %
                            (args[0], e))

    if ret.returncode != 0:
        raise FountainError("Export program '%s' failed with exit code %d" %
                            (args[0], ret.returncode))
