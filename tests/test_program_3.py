from pathlib import Path

from inty.__main__ import main

EXAMPLES = Path(__file__).resolve().parent.parent / 'examples'


def test_program_3_conditionals(capsys):
    main(['run', str(EXAMPLES / 'program_3.inty')])
    out = capsys.readouterr().out.strip()
    # `if false 1` has no else branch and prints nothing
    assert out.splitlines() == ['100', '20', '2']
