import io

from inty.interpreter import Interpreter
from inty.shell import Shell


def make_shell():
    out = io.StringIO()
    return Shell(stdout=out), out


def test_shell_keeps_bindings_between_lines():
    shell, out = make_shell()
    shell.onecmd('let x = 2')
    shell.onecmd('x ^ 3')
    assert out.getvalue() == '8\n'


def test_shell_reports_errors_and_continues():
    shell, out = make_shell()
    shell.onecmd('let y = 5')
    shell.onecmd('z')
    shell.onecmd('y')
    assert out.getvalue() == 'error: unknown identifier: z\n5\n'


def test_shell_accepts_lines_starting_with_symbols():
    shell, out = make_shell()
    shell.onecmd('{ let a = 1; a + 1 }')
    shell.onecmd('!true')
    shell.onecmd('[1, 2]')
    assert out.getvalue() == '2\nfalse\n[1, 2]\n'


def test_shell_uses_given_interpreter():
    interpreter = Interpreter()
    interpreter.run_source('let preset = 9')
    out = io.StringIO()
    Shell(interpreter, stdout=out).onecmd('preset')
    assert out.getvalue() == '9\n'


def test_shell_exit():
    shell, _ = make_shell()
    assert shell.onecmd('exit')
    assert shell.onecmd('EOF')
    assert not shell.emptyline()
