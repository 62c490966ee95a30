class SchemeError(Exception):
    """ Base class for all minischeme errors"""
    pass

class SchemeSyntaxError(SchemeError):
    """ Raised when source text or a special form is malformed"""

class IncompleteInputError(SchemeSyntaxError):
    """ Raised when the input ends inside a list, a string or after a quote"""

class UnboundSymbolError(SchemeError):
    """ Raised when a symbol is looked up or assigned before it is bound"""

class ArityError(SchemeError):
    """ Raised when a procedure receives the wrong number of arguments"""

class SchemeTypeError(SchemeError):
    """ Raised when a value of the wrong kind is passed or applied"""

class DivisionByZeroError(SchemeError):
    """ Raised when dividing by zero"""

class DomainError(SchemeError):
    """ Raised when a math function is called outside its domain or overflows"""
