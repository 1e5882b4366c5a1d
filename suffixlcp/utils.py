# Copyright (C) 2020 Björn Lindqvist <bjourne@gmail.com>
#
# Printing utils.
from termtables import to_string

class StructuredPrinter:
    def __init__(self, enabled):
        self.indent = 0
        self.enabled = enabled

    def print_indented(self, text):
        if self.enabled:
            print(' ' * self.indent + text)

    def header(self, name, fmt = None, args = None):
        if fmt is not None:
            self.print_indented('* %s %s' % (name, fmt % args))
        else:
            self.print_indented('* %s' % name)
        self.indent += 2

    def print(self, fmt, args = None):
        if args is not None:
            s = fmt % args
        else:
            s = str(fmt)
        self.print_indented(s)

    def leave(self):
        self.indent -= 2
        assert self.indent >= 0

SP = StructuredPrinter(False)

def format_suffix(suffix, width):
    '''Printable and at most width characters long. No limit if width
    is None.
    '''
    if isinstance(suffix, bytes):
        s = suffix.decode('ascii', 'backslashreplace')
    elif isinstance(suffix, str):
        s = suffix
    else:
        s = ' '.join(map(str, suffix))
    if width is not None and len(s) > width:
        if width <= 3:
            return s[:width]
        return s[:width - 3] + '...'
    return s

def term_table(row_fmt, rows, header, alignment):
    def format_col(fmt, col):
        if callable(fmt):
            return fmt(col)
        return fmt % col
    rows = [[format_col(*e) for e in zip(row_fmt, row)] for row in rows]
    s = to_string(rows,
                  header = header,
                  padding = (0, 0, 0, 0),
                  alignment = alignment,
                  style = "            -- ")
    m = len(s.splitlines()[1]) - 2
    rule = ' ' + '=' * m
    return '\n'.join([rule, s, rule])

def print_term_table(row_fmt, rows, header, alignment):
    print(term_table(row_fmt, rows, header, alignment))
