from collections import deque, namedtuple
import enum
import logging

log = logging.getLogger(__name__)
log.addHandler(logging.NullHandler())


# every stage raises a subclass of this, the REPL catches it
class ForthError(Exception):

    def __init__(self, message, line=None):
        super().__init__(message)
        self.message = message
        self.line = line

    def __str__(self):
        if self.line is None:
            return self.message
        return '{!r}\n{}: {}'.format(self.line, type(self).__name__, self.message)


class Operation(enum.Enum):
    NOP = enum.auto()
    ABS = enum.auto()
    ADD = enum.auto()
    BYE = enum.auto()
    CMP_EQ = enum.auto()
    CMP_GT = enum.auto()
    CMP_LT = enum.auto()
    CMP_NE = enum.auto()
    DIV = enum.auto()
    DROP = enum.auto()
    DUP = enum.auto()
    MAX = enum.auto()
    MIN = enum.auto()
    MOD = enum.auto()
    MUL = enum.auto()
    NEGATE = enum.auto()
    SUB = enum.auto()
    ZERO_EQ = enum.auto()
    ZERO_GT = enum.auto()
    ZERO_LT = enum.auto()
    ZERO_NE = enum.auto()

    def __repr__(self):
        return self.name


class DataType(enum.Enum):
    NUMBER = 'number'
    STRING = 'string'


class Data(namedtuple('Data', 'data_type value')):
    """A single cell of the data stack."""

    __slots__ = ()

    @classmethod
    def number(cls, value):
        return cls(DataType.NUMBER, value)

    @classmethod
    def string(cls, value):
        return cls(DataType.STRING, value)

    @property
    def is_number(self):
        return self.data_type is DataType.NUMBER

    def __repr__(self):
        return '{}({!r})'.format(self.data_type.name, self.value)


# built-in words, one primitive each
CORE_WORDS = {
    'NOP': Operation.NOP,
    'ABS': Operation.ABS,
    '+': Operation.ADD,
    'BYE': Operation.BYE,
    '=': Operation.CMP_EQ,
    '<': Operation.CMP_LT,
    '>': Operation.CMP_GT,
    '<>': Operation.CMP_NE,
    '/': Operation.DIV,
    'DROP': Operation.DROP,
    'DUP': Operation.DUP,
    'MAX': Operation.MAX,
    'MIN': Operation.MIN,
    'MOD': Operation.MOD,
    '*': Operation.MUL,
    'NEGATE': Operation.NEGATE,
    '-': Operation.SUB,
    '0=': Operation.ZERO_EQ,
    '0<': Operation.ZERO_LT,
    '0>': Operation.ZERO_GT,
    '0<>': Operation.ZERO_NE,
}


class VM:
    """
    State shared by the scanner, parser, and interpreter.

    The dictionary maps case-sensitive word names to lists of operations.
    Tokens and operations are FIFO queues, the data stack is a list
    whose last element is the top of the stack.
    """

    def __init__(self):
        self.dictionary = {}
        self.tokens = deque()
        self.operations = deque()
        self.data_stack = []
        self.ops_applied = 0

    def __repr__(self):
        s = '{}(words={}, tokens={!r}, operations={!r}, data_stack={!r}, ops_applied={})'
        s = s.format(type(self).__name__, len(self.dictionary), list(self.tokens),
            list(self.operations), self.data_stack, self.ops_applied)
        return s

    def define(self, name, operations):
        self.dictionary[name] = list(operations)

    def define_core_words(self):
        for name, operation in CORE_WORDS.items():
            self.define(name, [operation])
        log.info('loaded {} core words'.format(len(CORE_WORDS)))

    def reset_pending(self):
        """Discard queued tokens and operations left over from a failed line."""
        self.tokens.clear()
        self.operations.clear()
