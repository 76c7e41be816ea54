import logging

from oxforth.interpreter import execute
from oxforth.parser import parse
from oxforth.scanner import scan

log = logging.getLogger(__name__)
log.addHandler(logging.NullHandler())


# Line evaluation:
#   - Scan  (up to and including the next word)
#   - Parse  (push literals, queue the word's operations)
#   - Execute  (apply queued operations to the data stack)
#   - Repeat from where the scan stopped until the line is consumed
def evaluate(line, vm):
    """
    Evaluate a line of source text against a VM.

    :param line: Source text, expected to end with a line terminator
    :param vm: VM to evaluate against (its core words should be loaded)
    :raises ForthError: The first scan, parse, or execution error
    """

    position = 0
    while position < len(line):
        position = scan(line, vm, position)
        log.info('tokens: {}'.format(list(vm.tokens)))
        parse(vm)
        log.info('data stack: {}, operations: {}'.format(vm.data_stack, list(vm.operations)))
        execute(vm)
        log.info('data stack: {}, ops applied: {}'.format(vm.data_stack, vm.ops_applied))
