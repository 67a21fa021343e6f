import os
import os.path

version = "0.3.0"

# directory holding the user's settings
confPath = None


def init():
    global confPath

    confPath = os.path.join(os.path.expanduser("~"), ".fountainpager")


# return full path of the default config file
def getConfFilename():
    if confPath is None:
        init()

    return os.path.join(confPath, "config.txt")
