"""Print a table row by row"""

import sys


class Table:
    def __init__(self, headers: list[str], formats: list[str], file=None):
        self.headers = list(headers)
        self.formats = ["{:" + f + "}" for f in formats]
        self.widths = [len(header) for header in self.headers]
        self.file = file
        self.row = 0

    def format(self, *data) -> list[str]:
        lines = []
        text = [self.formats[i].format(d) for i, d in enumerate(data)]
        if self.row == 0:
            for i, s in enumerate(text):
                self.widths[i] = max(self.widths[i], len(s))
                self.headers[i] = self.headers[i].center(self.widths[i])
            lines.append(" | ".join(self.headers))
        lines.append(" | ".join(t.rjust(self.widths[i]) for i, t in enumerate(text)))
        self.row += 1
        return lines

    def print(self, *data):
        for line in self.format(*data):
            print(line, file=self.file or sys.stdout)
