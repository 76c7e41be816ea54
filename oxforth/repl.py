import atexit
import logging
import os
import readline

from oxforth.forth import evaluate
from oxforth.vm import VM, ForthError

log = logging.getLogger(__name__)
log.addHandler(logging.NullHandler())

PROMPT = '< '
HISTORY_PATH = os.path.join(os.path.expanduser('~'), '.oxforth_history')
HISTORY_LENGTH = 1000


def setup_history(path=HISTORY_PATH):
    try:
        readline.read_history_file(path)
        readline.set_history_length(HISTORY_LENGTH)
    except FileNotFoundError:
        pass

    atexit.register(readline.write_history_file, path)


def format_stack(vm):
    return ' '.join(str(cell.value) for cell in vm.data_stack)


def log_state(vm):
    log.info('\tdata stack: {}'.format(vm.data_stack))
    log.info('\toperations: {}'.format(list(vm.operations)))
    log.info('\tops applied: {}'.format(vm.ops_applied))


def run_line(line, vm):
    """Evaluate one line of input and report the outcome, returns success."""
    try:
        evaluate(line + '\n', vm)
        if len(vm.data_stack) > 0:
            print('ok: {}'.format(format_stack(vm)))
        else:
            print('ok')
        return True
    except ForthError as e:
        print('error: {}'.format(e.message))
        return False
    finally:
        log_state(vm)
        vm.reset_pending()


def repl(vm=None, history=True):
    if vm is None:
        vm = VM()
        vm.define_core_words()

    if history:
        setup_history()

    print('Ctrl-C to exit')
    print()

    while True:
        try:
            line = input(PROMPT)
        except (EOFError, KeyboardInterrupt):
            print()
            break

        if len(line.strip()) == 0:
            continue

        run_line(line, vm)
