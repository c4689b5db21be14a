"""CLI entry point for the Inty interpreter.

Usage:
    python -m inty run [-v|-vv|-vvv] [--parser {descent,lark}] <program_file>
    python -m inty eval [-v...] <source>
    python -m inty repl [-v...]
    python -m inty emit-ast <program_file>
    python -m inty ast <ast_json_file>

Options:
  -v            Increase debug verbosity (can be repeated)
  --parser      Front-end used to parse source text (default: descent)
  --debug-file  Where debug traces are written (default: debug.txt)

`run` and `eval` print one line for every top-level statement that
produces a value. `emit-ast` parses a program and writes its AST as JSON
next to the source file; `ast` evaluates such a JSON file.
"""

import argparse
import json
import sys
from pathlib import Path
from typing import List, Optional

from .ast_json import program_from_obj, program_to_obj
from .errors import IntyError
from .interpreter import PARSERS, Interpreter, parse_source
from .shell import Shell
from .values import Value, to_string


def read_path(name: str) -> Path:
    path = Path(name)
    if not path.exists():
        print(f"Error: file {path} not found", file=sys.stderr)
        sys.exit(1)
    return path


def read_source(name: str) -> str:
    with open(read_path(name), 'r', encoding='utf-8') as f:
        return f.read()


def print_results(results: List[Optional[Value]]) -> None:
    for value in results:
        if value is not None:
            print(to_string(value))


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog='inty', description="Inty language interpreter")
    common = argparse.ArgumentParser(add_help=False)
    common.add_argument('-v', action='count', default=0, help='increase debug verbosity (can be repeated)')
    common.add_argument('--parser', choices=PARSERS, default='descent', help='front-end used to parse source text')
    common.add_argument('--debug-file', default='debug.txt', help='file receiving debug traces when -v is given')

    commands = parser.add_subparsers(dest='command', required=True)
    run = commands.add_parser('run', parents=[common], help='run a file containing inty code')
    run.add_argument('program', help='Inty program file (.inty) to execute')
    inline = commands.add_parser('eval', parents=[common], help='evaluate an inline source string')
    inline.add_argument('source', help='Inty source text')
    commands.add_parser('repl', parents=[common], help='start an interactive session')
    emit = commands.add_parser('emit-ast', parents=[common], help='emit AST JSON for the given .inty file')
    emit.add_argument('program', help='Inty program file to parse')
    ast = commands.add_parser('ast', parents=[common], help='execute AST from a JSON file')
    ast.add_argument('ast_file', help='AST JSON file produced by emit-ast')
    return parser


def main(argv: Optional[List[str]] = None) -> None:
    args = build_parser().parse_args(argv)

    if args.command == 'emit-ast':
        program_file = Path(args.program)
        source = read_source(args.program)
        try:
            statements = parse_source(source, args.parser)
        except IntyError as e:
            print(f"error: {e}", file=sys.stderr)
            sys.exit(1)
        out_path = program_file.with_name(program_file.name + '.ast.json')
        with open(out_path, 'w', encoding='utf-8') as out:
            json.dump(program_to_obj(statements), out, ensure_ascii=False, indent=2)
        print(str(out_path))
        return

    interpreter = Interpreter(debug_level=args.v, debug_file=args.debug_file, parser=args.parser)
    try:
        if args.command == 'repl':
            Shell(interpreter).cmdloop()
            return
        if args.command == 'ast':
            with open(read_path(args.ast_file), 'r', encoding='utf-8') as f:
                try:
                    statements = program_from_obj(json.load(f))
                except (ValueError, KeyError, TypeError) as e:
                    # json.JSONDecodeError is a ValueError
                    print(f"error: invalid AST file {args.ast_file}: {e}", file=sys.stderr)
                    sys.exit(1)
            print_results(interpreter.run(statements))
            return
        source = args.source if args.command == 'eval' else read_source(args.program)
        print_results(interpreter.run_source(source))
    except IntyError as e:
        print(f"error: {e}", file=sys.stderr)
        sys.exit(1)
    finally:
        interpreter.close()


if __name__ == '__main__':
    main()
