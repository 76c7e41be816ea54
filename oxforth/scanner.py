from collections import namedtuple
import enum
import logging
import string

from oxforth.vm import ForthError

log = logging.getLogger(__name__)
log.addHandler(logging.NullHandler())


class ScanError(ForthError):
    pass


class NonAscii(ScanError):

    def __init__(self, line=None):
        super().__init__('non-ASCII input', line)


class MissingTrailingWhitespace(ScanError):

    def __init__(self, line=None):
        super().__init__('missing trailing whitespace', line)


class Classification(enum.Enum):
    NUMBER = 'number'
    WORD = 'word'
    UNDEFINED = 'undefined'


Token = namedtuple('Token', 'text classification')


def is_graphic(char):
    return '!' <= char <= '~'


def classify(text, dictionary):
    if all(c in string.digits for c in text):
        return Classification.NUMBER
    if text in dictionary:
        return Classification.WORD
    return Classification.UNDEFINED


def scan(line, vm, start=0):
    """
    Scan a line of text onto the VM's token queue.

    Numbers are scanned through, but scanning stops right after the
    first word (defined or not) so that it can be resolved before the
    rest of the line is looked at.

    :param line: Text to scan, must end with whitespace or a control char
    :param vm: VM whose dictionary classifies words and whose queue receives tokens
    :param start: Offset into the line to begin scanning from
    :returns: Offset at which scanning stopped
    """

    try:
        line.encode('ascii')
    except UnicodeEncodeError:
        raise NonAscii(line) from None

    # a trailing graphic char would leave a token unterminated
    if len(line) > 0 and is_graphic(line[-1]):
        raise MissingTrailingWhitespace(line)

    buffer = []
    for position in range(start, len(line)):
        char = line[position]
        if is_graphic(char):
            buffer.append(char)
            continue

        # skip runs of whitespace / control chars
        if len(buffer) == 0:
            continue

        text = ''.join(buffer)
        buffer = []
        token = Token(text, classify(text, vm.dictionary))
        vm.tokens.append(token)
        log.info('scan: "{}" -> {}'.format(token.text, token.classification.name))

        if token.classification is not Classification.NUMBER:
            return position + 1

    return len(line)
