from .lexer     import Lexer
from .reporter  import Reporter
from .result    import Kind, Result
from .state     import State

### SCANNER CLASS ###

# finite-state automaton over the classified characters of the source
# holds the scan state:
# state             -> State
# line, column      -> int, 1-based line, 0-based column of the last character
# type, identifier  -> str, pending type and identifier being read
# declared          -> set of names whose declaration was confirmed
# duplicate         -> str, the re-declared name once found
# methods:
# scan()            -> Result for a whole source given as physical lines
# feed(), finish()  -> streaming use of the automaton, without line checks

def split_lines(text: str):
    """
    split text into physical lines like a line reading loop does,
    a trailing newline does not open an extra empty line
    """
    lines = text.split("\n")
    if lines[-1] == "":
        lines.pop()
    return lines

class Scanner:
    def __init__(self, reporter: Reporter | None = None):
        self.reporter   = reporter or Reporter()
        self.lexer      = Lexer(self.reporter)
        self.reset()

    def reset(self):
        self.state      = State.AWAITING_TYPE
        self.line       = 1
        self.column     = 0
        self.type       = ""
        self.identifier = ""
        self.declared   = set()
        self.duplicate  = ""
        self.lexer.reset()

    def scan(self, lines) -> Result:
        """
        check every line of the source, stop at the first error

        each line must leave the automaton in an accepting state as soon
        as it holds anything but whitespace, a synthetic newline is fed
        after the check
        """
        self.reset()

        for text in lines:
            content = False

            for tok in self.lexer.tokenize(text.removesuffix("\n") + "\n"):
                self.line, self.column = tok.lineno, tok.column

                match tok.type:
                    case 'NEWLINE':
                        if content and not self.state.accepting:
                            return Result.failure(Kind.MISSING_TERMINATOR,
                                                  self.line, self.column)
                    case 'SPACE':
                        pass
                    case _:
                        content = True

                self.step(tok)
                if self.state is State.ERROR:
                    return self.failure()

        return self.finish()

    def scan_text(self, text: str) -> Result:
        return self.scan(split_lines(text))

    def feed(self, text: str) -> State:
        """
        push raw characters through the automaton, newlines included
        """
        for tok in self.lexer.tokenize(text):
            if self.state is State.ERROR:
                break
            self.line, self.column = tok.lineno, tok.column
            self.step(tok)

        return self.state

    def finish(self) -> Result:
        if self.state is State.ERROR:
            return self.failure()
        if self.state.accepting:
            return Result.correct()
        return Result.failure(Kind.UNEXPECTED_END_OF_INPUT, self.line, self.column)

    def failure(self) -> Result:
        if self.duplicate:
            return Result.failure(Kind.DUPLICATE_VARIABLE,
                                  self.line, self.column, self.duplicate)
        return Result.failure(Kind.SYNTAX_ERROR, self.line, self.column)

    ### TRANSITIONS ###

    def step(self, tok):
        """
        one transition for one classified character
        """
        match self.state, tok.type:
            case State.ERROR, _:
                pass

            case State.AWAITING_TYPE, ('SPACE' | 'NEWLINE'):
                pass
            case State.AWAITING_TYPE, 'LETTER':
                self.start_type(tok.value)

            case State.READING_TYPE, 'SPACE':
                self.state = State.AWAITING_IDENTIFIER
            case State.READING_TYPE, ('LETTER' | 'DIGIT'):
                self.type += tok.value

            case State.AWAITING_IDENTIFIER, 'SPACE':
                pass
            case State.AWAITING_IDENTIFIER, 'LETTER':
                self.identifier = tok.value
                self.state      = State.READING_IDENTIFIER

            case State.READING_IDENTIFIER, ('LETTER' | 'DIGIT'):
                self.identifier += tok.value
            case State.READING_IDENTIFIER, ('SPACE' | 'NEWLINE'):
                if self.check_free():
                    self.state = State.AWAITING_TERMINATOR_OR_ASSIGN
            case State.READING_IDENTIFIER, 'SEMICOLON':
                if self.check_free():
                    self.commit()
                    self.complete()
            case State.READING_IDENTIFIER, 'EQ':
                if self.check_free():
                    self.commit()
                    self.state = State.READING_EXPRESSION

            case State.AWAITING_TERMINATOR_OR_ASSIGN, 'SPACE':
                pass
            case State.AWAITING_TERMINATOR_OR_ASSIGN, 'SEMICOLON':
                self.commit()
                self.complete()
            case State.AWAITING_TERMINATOR_OR_ASSIGN, 'EQ':
                self.commit()
                self.state = State.READING_EXPRESSION

            # expressions are not validated, they only have to end on their line
            case State.READING_EXPRESSION, 'SEMICOLON':
                self.complete()
            case State.READING_EXPRESSION, 'NEWLINE':
                self.state = State.ERROR
            case State.READING_EXPRESSION, _:
                pass

            case State.DECLARATION_COMPLETE, 'SPACE':
                pass
            case State.DECLARATION_COMPLETE, 'NEWLINE':
                self.state = State.AWAITING_TYPE
            case State.DECLARATION_COMPLETE, 'LETTER':
                self.start_type(tok.value)

            case _:
                self.state = State.ERROR

    def start_type(self, c):
        self.type   = c
        self.state  = State.READING_TYPE

    def check_free(self):
        """
        the pending identifier must not be declared yet,
        checked when the identifier ends and before it is committed
        """
        if self.identifier in self.declared:
            self.duplicate  = self.identifier
            self.state      = State.ERROR
            return False
        return True

    def commit(self):
        self.declared.add(self.identifier)
        self.identifier = ""

    def complete(self):
        self.type   = ""
        self.state  = State.DECLARATION_COMPLETE
