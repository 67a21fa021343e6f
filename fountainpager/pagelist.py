# -*- coding: utf-8 -*-


# keeps a collection of page numbers from a given script, and allows
# formatting of the list intelligently, e.g. "4-7, 9, 11-16".
class PageList:
    def __init__(self, allPages):
        # list of all page numbers (ints) in the script, in order
        self.allPages = allPages

        # set of page numbers in this list
        self.pages = set()

    # add page to page list if it's not already there
    def addPage(self, page):
        self.pages.add(page)

    def __len__(self):
        return len(self.pages)

    # return list of (first, last) page ranges, consecutive meaning
    # adjacent in allPages
    def getRanges(self):
        ret = []
        rangeStart = None
        prev = None

        for p in self.allPages:
            if p in self.pages:
                if rangeStart is None:
                    rangeStart = p
            elif rangeStart is not None:
                ret.append((rangeStart, prev))
                rangeStart = None

            prev = p

        if rangeStart is not None:
            ret.append((rangeStart, prev))

        return ret

    # return textual representation of pages where consecutive pages are
    # formatted as "x-y". example: "3, 5-8, 11".
    def __str__(self):
        items = []

        for first, last in self.getRanges():
            if first == last:
                items.append(str(first))
            else:
                items.append("%s-%s" % (first, last))

        return ", ".join(items)
