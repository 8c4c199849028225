import ply.lex

### CHARACTER CLASSES ###

# every token is exactly one character long, so the scanner still
# consumes its input one character at a time
# tokens carry:
# lineno            -> int, 1-based, advanced by NEWLINE
# column            -> int, 0-based position inside the line

class Lexer:
    tokens = (
        'NEWLINE'   ,
        'SPACE'     ,               # space, tab, carriage return
        'LETTER'    ,               # may start a type or a name
        'DIGIT'     ,               # may only continue one
        'SEMICOLON' ,
        'EQ'        ,
        'OTHER'     ,
    )

    def __init__(self, reporter):
        self.lexer      = ply.lex.lex(module = self)
        self.reporter   = reporter
        self.reset()

    def reset(self):
        self.lexer.lineno   = 1
        self.column         = 0

    def tokenize(self, text: str):
        """
        yield one classified token per character of text
        """
        self.lexer.input(text)

        for tok in self.lexer:
            tok.column = self.column
            self.column = 0 if tok.type == 'NEWLINE' else self.column + 1
            yield tok

    # rules are functions so ply keeps them in this order, OTHER last

    def t_NEWLINE(self, t):
        r'\n'
        t.lexer.lineno += 1
        return t

    def t_SPACE(self, t):
        r'[ \t\r]'
        return t

    def t_LETTER(self, t):
        r'[A-Za-z_]'
        return t

    def t_DIGIT(self, t):
        r'[0-9]'
        return t

    def t_SEMICOLON(self, t):
        r';'
        return t

    def t_EQ(self, t):
        r'='
        return t

    def t_OTHER(self, t):
        r'.'
        return t

    def t_error(self, t):
        self.reporter.log(f"lexer: illegal character '{t.value[0]}' -- skipping")
        t.lexer.skip(1)
