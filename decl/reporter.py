import sys

class Reporter():
    """
    report scan results on stdout, keep a backlog of tool errors for stderr
    """
    def __init__(self, stream = None):
        self.errors  = []
        self.section = None
        self.stream  = stream               # None prints to sys.stdout

    def crash(self, errstr):
        print("=== Error backlog ===", file=sys.stderr)

        for err in self.errors:
            print(f"[ Error ] {err}", file=sys.stderr)

        errstr = f"{{{self.section}}} \t| " + errstr if self.section else errstr
        print(f"[ Fatal Error ] | {errstr}", file=sys.stderr)

        sys.exit(1)

    def log(self, error):
        self.errors.append(f"{{{self.section}}} \t| " + str(error))

    def checkpoint(self, section = None):
        self.section = section

        if self.errors:
            self.crash("error backlog at checkpoint")

    def report(self, result):
        for line in result.pprint():
            print(line, file=self.stream)

    def pause(self, prompt = "Press Enter to exit..."):
        print(file=self.stream)
        input(prompt)
