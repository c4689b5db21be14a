from pathlib import Path

from inty.interpreter import Interpreter, parse_source
from inty.values import IntegerVal

EXAMPLES = Path(__file__).resolve().parent.parent / 'examples'


def test_program_1_arithmetic(capsys):
    with open(EXAMPLES / 'program_1.inty', 'r', encoding='utf-8') as f:
        source = f.read()
    statements = parse_source(source)
    interp = Interpreter()
    results = interp.run(statements)
    assert results == [IntegerVal(v) for v in (14, 20, 512, -9, 9, 11, -3)]
