# edit scripts. operations never change text in place; they return a list
# of Edits computed against one snapshot of the text, and applyEdits()
# produces the new text in one go.

import fountainpager.util as util
from fountainpager.error import EditConflictError


# replace text[start:end] with 'text'. start == end is an insertion.
class Edit:
    def __init__(self, start, end, text):
        self.start = start
        self.end = end
        self.text = text

    def __repr__(self):
        return "Edit(%d, %d, %r)" % (self.start, self.end, self.text)

    def __eq__(self, other):
        return (self.start, self.end, self.text) == \
               (other.start, other.end, other.text)


# sort edits by position and check they don't overlap. two insertions at
# the same offset keep their relative order.
def sortEdits(edits):
    ret = sorted(edits, key=lambda e: (e.start, e.end))

    for i in range(1, len(ret)):
        prev = ret[i - 1]
        cur = ret[i]

        if cur.start < prev.end:
            raise EditConflictError("overlapping edits at offset %d" %
                                    cur.start)

    return ret


# return text with all edits applied. raises EditConflictError, without
# applying anything, if edits overlap or fall outside the text.
def applyEdits(text, edits):
    edits = sortEdits(edits)

    if edits and ((edits[0].start < 0) or (edits[-1].end > len(text))):
        raise EditConflictError("edit outside of text")

    # apply from the end so earlier offsets stay valid
    for e in reversed(edits):
        text = util.replace(text, e.text, e.start, e.end - e.start)

    return text
