# exception classes. every mutating operation raises one of these before
# producing any edits, so callers can show the message knowing the text
# they passed in was not touched.


class FountainError(Exception):
    def __init__(self, msg):
        Exception.__init__(self, msg)
        self.msg = msg

    def __str__(self):
        return str(self.msg)


class ConfigError(FountainError):
    def __init__(self, msg):
        FountainError.__init__(self, msg)


# a scene number is not strictly between its neighbours
class OutOfOrderError(FountainError):
    def __init__(self, msg, line=None):
        FountainError.__init__(self, msg)

        # line of the offending scene heading, if known
        self.line = line


# operation requested at a position with no enclosing block
class NotMoveableError(FountainError):
    def __init__(self, msg):
        FountainError.__init__(self, msg)


# block move would cross a higher outline level, or run off the document
class ShiftBoundaryError(FountainError):
    def __init__(self, msg):
        FountainError.__init__(self, msg)


# export requested for text that has no file behind it
class NoDestinationError(FountainError):
    def __init__(self, msg):
        FountainError.__init__(self, msg)


class EditConflictError(FountainError):
    def __init__(self, msg):
        FountainError.__init__(self, msg)
