class MathplexError(Exception):
    def __init__(self, message: str):
        super().__init__(message)
        self.message = message

    def __str__(self):
        return f"{self.__class__.__name__}: {self.message}"


class TypeMismatch(MathplexError, TypeError):
    pass


class ParseError(MathplexError, ValueError):
    pass


class DomainError(MathplexError, ZeroDivisionError):
    pass


class InvalidArgument(MathplexError, ValueError):
    pass
