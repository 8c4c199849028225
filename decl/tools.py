import argparse
import json
import os
import sys

from .result    import Kind, Result
from .scanner   import Scanner, split_lines

class Tools:
    def __init__(self, reporter):
        self.reporter = reporter

    def parseargs(self, argv = None):
        """
        return input, output and json file names and the pause flag
        """
        parser = argparse.ArgumentParser(
            prog        = os.path.basename(sys.argv[0]),
            description = "check variable declarations of the form "
                          "'type name [= expression];'",
        )

        parser.add_argument('input', nargs = '?', default = 'input.txt',
                            help = 'source to check (default: input.txt)')
        parser.add_argument('-o', '--output', default = 'output.txt',
                            help = 'report file (default: output.txt)')
        parser.add_argument('--json', metavar = 'FILE',
                            help = 'also write the result as json')
        parser.add_argument('--pause', action = 'store_true',
                            help = 'wait for Enter before exiting')

        return parser.parse_args(argv)

    def readlines(self, filename):
        """
        physical lines of the file without their terminators, None if unreadable
        """
        try:
            with open(filename, "r", encoding = "utf-8", errors = "replace",
                      newline = "") as f:
                return split_lines(f.read())

        except OSError:
            return None

    def analyze(self, filename, scanner = None) -> Result:
        lines = self.readlines(filename)
        if lines is None:
            return Result.failure(Kind.IO_ERROR)

        scanner = scanner or Scanner(self.reporter)
        return scanner.scan(lines)

    def writereport(self, result, filename):
        """
        write the report file
        """
        try:
            with open(filename, "w") as f:
                for line in result.pprint():
                    f.write(line + "\n")

        except OSError as e:
            self.reporter.log(f"Error writing report file: {e}")

    def writejson(self, data, filename):
        """
        write the json file
        """
        try:
            with open(filename, "w") as f:
                json.dump(data, f, indent = 2)

        except OSError as e:
            self.reporter.log(f"Error writing JSON file: {e}")
