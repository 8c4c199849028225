import enum

### AUTOMATON STATES ###

# one state is active at any time
# ERROR is absorbing, AWAITING_TYPE and DECLARATION_COMPLETE are accepting

class State(enum.Enum):
    AWAITING_TYPE                   = 0
    READING_TYPE                    = 1
    AWAITING_IDENTIFIER             = 2
    READING_IDENTIFIER              = 3
    AWAITING_TERMINATOR_OR_ASSIGN   = 4
    READING_EXPRESSION              = 5
    DECLARATION_COMPLETE            = 6
    ERROR                           = 7

    @property
    def accepting(self):
        return self in (State.AWAITING_TYPE, State.DECLARATION_COMPLETE)

    def pprint(self):
        match self:
            case State.AWAITING_TYPE:
                return "awaiting type"
            case State.READING_TYPE:
                return "reading type"
            case State.AWAITING_IDENTIFIER:
                return "awaiting identifier"
            case State.READING_IDENTIFIER:
                return "reading identifier"
            case State.AWAITING_TERMINATOR_OR_ASSIGN:
                return "awaiting ';' or '='"
            case State.READING_EXPRESSION:
                return "reading expression"
            case State.DECLARATION_COMPLETE:
                return "declaration complete"
            case State.ERROR:
                return "error"
