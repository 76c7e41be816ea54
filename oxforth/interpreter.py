from functools import partial
import logging
import operator

from oxforth.vm import Data, ForthError, Operation

log = logging.getLogger(__name__)
log.addHandler(logging.NullHandler())

GOODBYE = "It's time to say goodbye~"


class ExecutionError(ForthError):
    pass


class StackUnderflow(ExecutionError):

    def __init__(self):
        super().__init__('stack underflow')


class TypeMismatch(ExecutionError):

    def __init__(self):
        super().__init__('refusing cast: string->number')


class DivisionByZero(ExecutionError):

    def __init__(self):
        super().__init__('divisor cannot be zero')


# results wrap around like 64-bit two's complement registers
def sign_extend(value, bits=64):
    sign_bit = 1 << (bits - 1)
    return (value & (sign_bit - 1)) - (value & sign_bit)


def flag(condition):
    return 1 if condition else 0


def compare(op, n1, n2):
    return flag(op(n1, n2))


def compare_zero(op, n):
    return flag(op(n, 0))


def divide(n1, n2):
    if n2 == 0:
        raise DivisionByZero()
    # floor division rounds toward -inf, truncate toward zero instead
    quotient = abs(n1) // abs(n2)
    if (n1 < 0) != (n2 < 0):
        quotient = -quotient
    return quotient


def modulo(n1, n2):
    if n2 == 0:
        raise DivisionByZero()
    return n1 % abs(n2)


def require(vm, count):
    if len(vm.data_stack) < count:
        raise StackUnderflow()


def peek_numbers(vm, count):
    require(vm, count)
    cells = vm.data_stack[-count:]
    if not all(cell.is_number for cell in cells):
        raise TypeMismatch()
    return [cell.value for cell in cells]


# nothing is popped until every check (and the computation) has passed
def apply_numeric(func, arity, vm):
    args = peek_numbers(vm, arity)
    result = sign_extend(func(*args))
    del vm.data_stack[-arity:]
    vm.data_stack.append(Data.number(result))


def nop(vm):
    pass


def drop(vm):
    require(vm, 1)
    vm.data_stack.pop()


def dup(vm):
    require(vm, 1)
    vm.data_stack.append(vm.data_stack[-1])


def bye(vm):
    print(GOODBYE)
    raise SystemExit(0)


UNARY_OPERATIONS = {
    Operation.ABS: abs,
    Operation.NEGATE: operator.neg,
    Operation.ZERO_EQ: partial(compare_zero, operator.eq),
    Operation.ZERO_GT: partial(compare_zero, operator.gt),
    Operation.ZERO_LT: partial(compare_zero, operator.lt),
    Operation.ZERO_NE: partial(compare_zero, operator.ne),
}

BINARY_OPERATIONS = {
    Operation.ADD: operator.add,
    Operation.SUB: operator.sub,
    Operation.MUL: operator.mul,
    Operation.DIV: divide,
    Operation.MOD: modulo,
    Operation.MAX: max,
    Operation.MIN: min,
    Operation.CMP_EQ: partial(compare, operator.eq),
    Operation.CMP_GT: partial(compare, operator.gt),
    Operation.CMP_LT: partial(compare, operator.lt),
    Operation.CMP_NE: partial(compare, operator.ne),
}

OPERATIONS = {
    Operation.NOP: nop,
    Operation.DROP: drop,
    Operation.DUP: dup,
    Operation.BYE: bye,
}
OPERATIONS.update({k: partial(apply_numeric, v, 1) for k, v in UNARY_OPERATIONS.items()})
OPERATIONS.update({k: partial(apply_numeric, v, 2) for k, v in BINARY_OPERATIONS.items()})


def execute(vm):
    """
    Apply the VM's queued operations to its data stack.

    Stops at the first failing operation: the data stack is left as it
    was before that operation and the operations after it stay queued.
    """

    while len(vm.operations) > 0:
        operation = vm.operations.popleft()
        try:
            OPERATIONS[operation](vm)
        except ExecutionError as e:
            log.info('execute: {!r} -> error: {}'.format(operation, e))
            raise
        vm.ops_applied += 1
        log.info('execute: {!r} -> {}'.format(operation, vm.data_stack))
