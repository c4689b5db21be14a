from pathlib import Path

import pytest

from inty.__main__ import main

EXAMPLES = Path(__file__).resolve().parent.parent / 'examples'


def test_program_5_divide_by_zero(capsys):
    with pytest.raises(SystemExit) as exc:
        main(['run', str(EXAMPLES / 'program_5.inty')])
    assert exc.value.code == 1
    captured = capsys.readouterr()
    # no partial results are printed when a statement fails
    assert captured.out == ''
    assert captured.err.strip() == 'error: cannot divide by zero'
