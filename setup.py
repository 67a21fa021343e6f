# setup.py
from setuptools import setup

import os.path
import re

# read version from the package without importing it
def getVersion():
    path = os.path.join(os.path.dirname(__file__), "fountainpager", "misc.py")

    with open(path, "r", encoding="UTF-8") as f:
        return re.search(r'^version = "(.*)"', f.read(), re.M).group(1)

setup(
    name = "fountainpager",
    version = getVersion(),
    description = "Classify, number and paginate Fountain screenplays",

    long_description = """\
fountainpager reads screenplays written in the Fountain plain text markup
language and works out their structure the way a screenwriting program
does.

Features:

 * Classification: Every line is classified as a scene heading, action,
   character cue, dialogue, parenthetical, transition, section, note, etc.
 * Scene numbers: Adds scene numbers, respecting numbers already in the
   script by inserting revised numbers ("10A") between them.
 * Pagination: Simulates page breaks with industry rules: dialogue is
   split with (MORE) / (CONT'D), dual dialogue stays together, scene
   headings never end a page.
 * Outline: Move scenes, sections and paragraphs, promote and demote
   sections.
 * Reports: Per-scene line counts, speakers and pages.
""",
      author = "fountainpager developers",
      license = "GPL",
      packages = ["fountainpager"],
      python_requires = ">=3.8",
      install_requires = [
          "tqdm",
      ],
      extras_require = {
          "test": [
              "pytest",
          ],
      },
      entry_points = {
          "console_scripts": [
              "fountainpager = fountainpager.cli:main",
          ],
      },
)
