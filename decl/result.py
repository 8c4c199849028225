import dataclasses as dc
import enum

### RESULT CLASS ###

# outcome of one full scan, built once and never changed
# two transformers:
# pprint()  -> [str] lines of the human readable report
# json()    -> dict for json.dump

CORRECT = "Correct variable declaration"

class Kind(enum.Enum):
    """
    what went wrong, the value is the reported message
    """
    IO_ERROR                = "Cannot open input file"
    DUPLICATE_VARIABLE      = "Duplicate variable name"
    SYNTAX_ERROR            = "Syntax error"
    MISSING_TERMINATOR      = "Missing semicolon at end of line"
    UNEXPECTED_END_OF_INPUT = "Unexpected end of input"

@dc.dataclass(frozen = True)
class Result:
    success     : bool
    message     : str
    line        : int           = 0     # 0 when not applicable
    position    : int           = 0     # 0-based column
    duplicate   : str           = ""
    kind        : Kind | None   = None

    @classmethod
    def correct(cls):
        return cls(success = True, message = CORRECT)

    @classmethod
    def failure(cls, kind: Kind, line = 0, position = 0, duplicate = ""):
        return cls(
            success     = False,
            message     = kind.value,
            line        = line,
            position    = position,
            duplicate   = duplicate,
            kind        = kind,
        )

    def pprint(self):
        if self.success:
            return [self.message]

        lines = [f"Error: {self.message}"]
        if self.line > 0:
            lines.append(f"At line {self.line}, position {self.position + 1}")
        if self.duplicate:
            lines.append(f"Duplicate variable: {self.duplicate}")
        return lines

    def json(self):
        return {
                "success"   : self.success,
                "message"   : self.message,
                "kind"      : self.kind.name if self.kind else None,
                "line"      : self.line,
                "position"  : self.position + 1 if self.line > 0 else 0,
                "duplicate" : self.duplicate or None,
                }
