# Copyright (C) 2020 Björn Lindqvist <bjourne@gmail.com>
#
# Tool for printing suffix array and lcp array tables.
"""Suffix array and LCP table printer

Usage:
    suffix-table.py [-v] [--width=<int>] [--words] <text>
    suffix-table.py [-v] [--width=<int>] [--words] --file=<path>
    suffix-table.py [-v] [--width=<int>] --demo

Options:
    -h --help              show this screen
    -v --verbose           print more output
    --width=<int>          max width of the suffix column [default: 20]
    --words                index whitespace separated words
    --file=<path>          read the text from a file
    --demo                 run the demo texts
"""
from docopt import docopt
from pathlib import Path
from suffixlcp.report import DEMO_TEXTS, print_report
from suffixlcp.utils import SP

def main():
    args = docopt(__doc__, version = 'Suffix table printer 1.0')
    SP.enabled = args['--verbose']

    width = int(args['--width'])
    if width <= 0:
        raise ValueError('Width must be positive.')
    if args['--demo']:
        texts = DEMO_TEXTS
    else:
        if args['--file']:
            path = Path(args['--file'])
            if not path.is_file():
                raise ValueError(f'No such file "{path}"!')
            text = path.read_text().rstrip('\n')
            desc = str(path)
        else:
            text = args['<text>']
            desc = 'Text'
        if args['--words']:
            text = text.split()
        if not text:
            raise ValueError('The text is empty!')
        texts = [(desc, text)]

    print('--- Suffix Array & LCP (Kasai\'s Algorithm) ---')
    for desc, text in texts:
        print()
        print_report(text, desc, width)

if __name__ == '__main__':
    main()
