from pathlib import Path

from inty.__main__ import main

EXAMPLES = Path(__file__).resolve().parent.parent / 'examples'


def test_program_2_scopes(capsys):
    main(['run', str(EXAMPLES / 'program_2.inty')])
    out = capsys.readouterr().out.strip()
    assert out.splitlines() == ['20', '1', '6']
