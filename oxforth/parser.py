import logging

from oxforth.scanner import Classification
from oxforth.vm import Data, ForthError

log = logging.getLogger(__name__)
log.addHandler(logging.NullHandler())

INT64_MIN = -2**63
INT64_MAX = 2**63 - 1


class ParseError(ForthError):
    pass


class UndefinedWord(ParseError):

    def __init__(self, name):
        super().__init__('undefined word: {}'.format(name))
        self.name = name


class NumberOutOfRange(ParseError):

    def __init__(self, text):
        super().__init__('number out of range: {}'.format(text))
        self.text = text


def parse_number(text):
    # int64 holds at most 19 significant digits, reject before converting
    if len(text.lstrip('0')) > 19:
        raise NumberOutOfRange(text)
    value = int(text)
    if value < INT64_MIN or value > INT64_MAX:
        raise NumberOutOfRange(text)
    return value


def parse(vm):
    """
    Resolve the VM's queued tokens.

    Numbers are pushed straight onto the data stack, words have their
    operations appended to the operation queue. Any error leaves the
    token queue empty, values already pushed stay on the stack.
    """

    while len(vm.tokens) > 0:
        token = vm.tokens.popleft()

        if token.classification is Classification.NUMBER:
            try:
                value = parse_number(token.text)
            except NumberOutOfRange:
                vm.tokens.clear()
                raise
            vm.data_stack.append(Data.number(value))
            log.info('parse: "{}" -> push {}'.format(token.text, value))
        elif token.classification is Classification.WORD:
            # the scanner only classifies WORD if the entry exists
            operations = vm.dictionary[token.text]
            vm.operations.extend(operations)
            log.info('parse: "{}" -> {}'.format(token.text, operations))
        else:
            vm.tokens.clear()
            raise UndefinedWord(token.text)
