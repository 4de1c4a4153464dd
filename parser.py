from lexer import Token, TokenType
from jasic_ast import *
from errors import ParseError
from values import NumberValue, StringValue

MAX_NESTING = 50

class Parser:
    """
    Recursive-descent parser for Jasic.

    Grammar (one statement or label per line):

        program   := ( LINE* ( LABEL | assign | print | goto | if_then ) )*
        assign    := WORD "=" expr
        print     := "print" expr
        goto      := "goto" WORD
        if_then   := "if" expr "then" WORD
        expr      := atomic ( (OPERATOR | "=") atomic )*
        atomic    := WORD | NUMBER | STRING | "(" expr ")"

    Every binary operator shares one precedence level and associates to the
    left, so `1 + 2 * 3` is `(1 + 2) * 3`. Keywords are ordinary words
    compared by text.

    Parentheses may nest at most MAX_NESTING levels deep.
    """
    def __init__(self, tokens):
        self.tokens = tokens
        self.pos = 0
        self.depth = 0

    @property
    def current_token(self):
        return self.peek(0)

    def peek(self, offset):
        if self.pos + offset < len(self.tokens):
            return self.tokens[self.pos + offset]
        last = self.tokens[-1] if self.tokens else None
        return Token(TokenType.EOF, '', last.line if last else 0, last.column if last else 0)

    def advance(self):
        token = self.current_token
        self.pos += 1
        return token

    def error(self, message, token=None):
        token = token or self.current_token
        return ParseError(f"Line {token.line}:{token.column} - {message}", token.line, token.column)

    def describe(self, token):
        if token.type == TokenType.EOF:
            return 'end of input'
        if token.type == TokenType.LINE:
            return 'line break'
        return f"{token.type.name}('{token.text}')"

    def look_ahead(self, *types):
        return all(self.peek(i).type == t for i, t in enumerate(types))

    def look_ahead_word(self, word):
        token = self.current_token
        return token.type == TokenType.WORD and token.text == word

    def match(self, token_type):
        if not self.look_ahead(token_type):
            return False
        self.advance()
        return True

    def match_word(self, word):
        if not self.look_ahead_word(word):
            return False
        self.advance()
        return True

    def expect(self, token_type):
        if not self.look_ahead(token_type):
            raise self.error(f"Expected {token_type.name}, found {self.describe(self.current_token)}")
        return self.advance()

    def expect_word(self, word):
        if not self.look_ahead_word(word):
            raise self.error(f"Expected '{word}', found {self.describe(self.current_token)}")
        return self.advance()

    def parse_expression(self):
        expr = self.parse_atomic()
        while self.look_ahead(TokenType.OPERATOR) or self.look_ahead(TokenType.EQUALS):
            op = self.advance().text
            right = self.parse_atomic()
            expr = BinaryOp(expr, op, right)
        return expr

    def parse_atomic(self):
        token = self.current_token
        if token.type == TokenType.WORD:
            self.advance()
            return Variable(token.text)
        elif token.type == TokenType.NUMBER:
            self.advance()
            return Literal(NumberValue(float(token.text)))
        elif token.type == TokenType.STRING:
            self.advance()
            return Literal(StringValue(token.text))
        elif token.type == TokenType.LEFT_PAREN:
            if self.depth >= MAX_NESTING:
                raise self.error(f"Expression nested too deeply (more than {MAX_NESTING} parentheses)")
            self.advance()
            self.depth += 1
            expr = self.parse_expression()
            self.depth -= 1
            if not self.look_ahead(TokenType.RIGHT_PAREN):
                raise self.error(
                    f"Unmatched '(' opened at {token.line}:{token.column}, "
                    f"found {self.describe(self.current_token)}"
                )
            self.advance()
            return expr
        raise self.error(f"Invalid expression: found {self.describe(token)}")

    def parse_statement(self):
        if self.look_ahead(TokenType.WORD, TokenType.EQUALS):
            name = self.advance().text
            self.advance()
            return AssignStatement(name, self.parse_expression())

        elif self.match_word('print'):
            return PrintStatement(self.parse_expression())

        elif self.match_word('goto'):
            label = self.expect(TokenType.WORD).text
            return GotoStatement(label)

        elif self.match_word('if'):
            condition = self.parse_expression()
            self.expect_word('then')
            label = self.expect(TokenType.WORD).text
            return IfThenStatement(condition, label)

        raise self.error(f"Unexpected token: {self.describe(self.current_token)}")

    def parse_program(self):
        program = Program()

        while True:
            while self.match(TokenType.LINE):
                pass

            if self.look_ahead(TokenType.EOF):
                break

            if self.look_ahead(TokenType.LABEL):
                # a label marks the index of the statement that follows it
                program.labels[self.advance().text] = len(program.statements)
                continue

            program.statements.append(self.parse_statement())

        return program
