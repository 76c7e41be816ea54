import pytest

from oxforth import repl
from oxforth.vm import VM, Data, Operation


@pytest.fixture
def vm():
    vm = VM()
    vm.define_core_words()
    return vm


def feed(monkeypatch, lines):
    lines = iter(lines)

    def fake_input(prompt):
        try:
            return next(lines)
        except StopIteration:
            raise EOFError

    monkeypatch.setattr('builtins.input', fake_input)


def test_run_line_ok(vm, capsys):
    assert repl.run_line('1 2 +', vm)
    assert capsys.readouterr().out == 'ok: 3\n'


def test_run_line_empty_stack(vm, capsys):
    assert repl.run_line('NOP', vm)
    assert capsys.readouterr().out == 'ok\n'


def test_run_line_error(vm, capsys):
    assert not repl.run_line('5 0 /', vm)
    assert capsys.readouterr().out == 'error: divisor cannot be zero\n'
    assert vm.data_stack == [Data.number(5), Data.number(0)]


def test_run_line_resets_pending(vm):
    vm.define('BAD', [Operation.DROP, Operation.NOP])
    assert not repl.run_line('BAD', vm)
    assert len(vm.tokens) == 0
    assert len(vm.operations) == 0


def test_repl(vm, monkeypatch, capsys):
    feed(monkeypatch, ['1 2', '', '   ', '+', 'foo', 'DUP *'])
    repl.repl(vm, history=False)
    out = capsys.readouterr().out
    assert out.splitlines() == [
        'Ctrl-C to exit',
        '',
        'ok: 1 2',
        'ok: 3',
        'error: undefined word: foo',
        'ok: 9',
        '',
    ]
    assert vm.data_stack == [Data.number(9)]


def test_repl_creates_vm(monkeypatch, capsys):
    feed(monkeypatch, ['3 NEGATE ABS'])
    repl.repl(history=False)
    assert 'ok: 3' in capsys.readouterr().out


def test_repl_bye(vm, monkeypatch, capsys):
    feed(monkeypatch, ['BYE', '1'])
    with pytest.raises(SystemExit):
        repl.repl(vm, history=False)
    assert "It's time to say goodbye~" in capsys.readouterr().out


def test_setup_history(tmp_path, monkeypatch):
    registered = []
    monkeypatch.setattr(repl.atexit, 'register', lambda *args: registered.append(args))
    path = str(tmp_path / 'history')
    repl.setup_history(path)
    assert registered == [(repl.readline.write_history_file, path)]


def test_run_line_huge_number(vm, capsys):
    assert not repl.run_line('9' * 5000, vm)
    assert capsys.readouterr().out.startswith('error: number out of range: 999')
    assert vm.data_stack == []
    assert len(vm.tokens) == 0

    assert repl.run_line('1 2 +', vm)
    assert vm.data_stack == [Data.number(3)]
