class JasicError(Exception):
    pass

class LoadError(JasicError):
    pass

class ParseError(JasicError):
    def __init__(self, message, line=None, column=None):
        super().__init__(message)
        self.line = line
        self.column = column

class EvalError(JasicError):
    pass

class StepLimitError(JasicError):
    pass
