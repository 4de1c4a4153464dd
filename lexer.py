from dataclasses import dataclass
from enum import Enum, auto

class TokenType(Enum):
    WORD = auto()
    NUMBER = auto()
    STRING = auto()
    LABEL = auto()
    LINE = auto()
    EQUALS = auto()
    OPERATOR = auto()
    LEFT_PAREN = auto()
    RIGHT_PAREN = auto()
    EOF = auto()

class LexState(Enum):
    DEFAULT = auto()
    WORD = auto()
    NUMBER = auto()
    STRING = auto()
    LABEL = auto()
    COMMENT = auto()

SINGLE_CHAR_TOKENS = {
    '\n': TokenType.LINE,
    '=': TokenType.EQUALS,
    '+': TokenType.OPERATOR,
    '-': TokenType.OPERATOR,
    '*': TokenType.OPERATOR,
    '/': TokenType.OPERATOR,
    '<': TokenType.OPERATOR,
    '>': TokenType.OPERATOR,
    '(': TokenType.LEFT_PAREN,
    ')': TokenType.RIGHT_PAREN,
}

LABEL_MARKER = ':'
COMMENT_MARKER = "'"
QUOTE = '"'

def is_word_char(char):
    return char.isalpha() or char.isdigit()

@dataclass(frozen=True)
class Token:
    type: TokenType
    text: str
    line: int = 0
    column: int = 0

class Lexer:
    """
    Splits Jasic source into tokens with a small character-class state
    machine. Never fails: characters outside every class are skipped and an
    unterminated string at end of input is dropped.

    A line break is appended when the source does not end with one, so the
    last statement (and any word or number in progress) is always closed.
    """
    def __init__(self, source):
        if source and not source.endswith('\n'):
            source += '\n'
        self.source = source
        self.pos = 0
        self.line = 1
        self.column = 1
        self.current_char = self.source[0] if source else None

    def advance(self):
        if self.current_char == '\n':
            self.line += 1
            self.column = 0
        self.pos += 1
        self.column += 1
        if self.pos < len(self.source):
            self.current_char = self.source[self.pos]
        else:
            self.current_char = None

    def tokenize(self):
        tokens = []
        state = LexState.DEFAULT
        text = ''
        start_line = start_column = 0

        while self.current_char is not None:
            char = self.current_char

            if state == LexState.DEFAULT:
                start_line, start_column = self.line, self.column
                if char in SINGLE_CHAR_TOKENS:
                    tokens.append(Token(SINGLE_CHAR_TOKENS[char], char, start_line, start_column))
                elif char.isalpha():
                    text, state = char, LexState.WORD
                elif char.isdecimal():
                    text, state = char, LexState.NUMBER
                elif char == QUOTE:
                    text, state = '', LexState.STRING
                elif char == LABEL_MARKER:
                    text, state = '', LexState.LABEL
                elif char == COMMENT_MARKER:
                    state = LexState.COMMENT
                self.advance()

            elif state == LexState.WORD:
                if is_word_char(char):
                    text += char
                    self.advance()
                else:
                    # reprocess this character in DEFAULT
                    tokens.append(Token(TokenType.WORD, text, start_line, start_column))
                    state = LexState.DEFAULT

            elif state == LexState.NUMBER:
                if char.isdecimal():
                    text += char
                    self.advance()
                else:
                    tokens.append(Token(TokenType.NUMBER, text, start_line, start_column))
                    state = LexState.DEFAULT

            elif state == LexState.STRING:
                if char == QUOTE:
                    tokens.append(Token(TokenType.STRING, text, start_line, start_column))
                    state = LexState.DEFAULT
                else:
                    text += char
                self.advance()

            elif state == LexState.LABEL:
                if not text and char in ' \t':
                    self.advance()
                elif not text and not char.isalpha():
                    # a label name starts with a letter; otherwise the colon is ignored
                    state = LexState.DEFAULT
                elif is_word_char(char):
                    text += char
                    self.advance()
                else:
                    tokens.append(Token(TokenType.LABEL, text, start_line, start_column))
                    state = LexState.DEFAULT

            elif state == LexState.COMMENT:
                if char == '\n':
                    state = LexState.DEFAULT
                else:
                    self.advance()

        tokens.append(Token(TokenType.EOF, '', self.line, self.column))
        return tokens
