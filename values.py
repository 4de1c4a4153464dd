from dataclasses import dataclass

from errors import EvalError

@dataclass(frozen=True)
class NumberValue:
    value: float

    def __post_init__(self):
        object.__setattr__(self, 'value', float(self.value))

    def to_number(self):
        return self.value

    def to_text(self):
        return str(self.value)

    def __str__(self):
        return self.to_text()

@dataclass(frozen=True)
class StringValue:
    value: str

    def to_number(self):
        if '_' in self.value:
            raise EvalError(f"Cannot convert {self.value!r} to a number")
        try:
            return float(self.value)
        except ValueError:
            raise EvalError(f"Cannot convert {self.value!r} to a number") from None

    def to_text(self):
        return self.value

    def __str__(self):
        return self.to_text()

TRUE = NumberValue(1.0)
FALSE = NumberValue(0.0)

def truth(flag):
    return TRUE if flag else FALSE
