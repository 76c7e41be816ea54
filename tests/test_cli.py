import pytest

from oxforth import __version__
from oxforth import __main__ as cli


def test_parse_args_default():
    args = cli.parse_args([])
    assert not args.verbose
    assert not args.version


@pytest.mark.parametrize('flag', ['-v', '--verbose'])
def test_parse_args_verbose(flag):
    assert cli.parse_args([flag]).verbose


def test_parse_args_unknown():
    with pytest.raises(SystemExit) as e:
        cli.parse_args(['--invalid-argument'])
    assert e.value.code == 2


def test_parse_args_help(capsys):
    with pytest.raises(SystemExit) as e:
        cli.parse_args(['--invalid-argument', '--help'])
    assert e.value.code == 0
    assert '--verbose' in capsys.readouterr().out


def test_version():
    with pytest.raises(SystemExit) as e:
        cli.cli_main(['--version'])
    assert e.value.code == 'oxforth {}'.format(__version__)


def test_cli_main(monkeypatch, capsys):
    started = []
    monkeypatch.setattr(cli, 'repl', lambda vm: started.append(vm))
    cli.cli_main([])
    assert capsys.readouterr().out.startswith('OxForth {} - '.format(__version__))
    assert len(started) == 1
    assert '+' in started[0].dictionary


def test_help_shows_license(capsys):
    with pytest.raises(SystemExit):
        cli.parse_args(['--help'])
    out = capsys.readouterr().out
    assert 'GNU General Public License' in out
    assert 'ABSOLUTELY NO WARRANTY' in out
