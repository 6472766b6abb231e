# takc

Support library for a compiler front end for the Tak language. It holds the
pieces that a lexer, parser and checker are built on:

- `takc.tokens`: `TokenType` and `TokenKind`, the `Token` dataclass,
  `precedence_of`, `literal_to_int`, and operator classification helpers
  such as `is_arithmetic`, `is_bitwise`, `is_comparison` and `is_logical`.
- `takc.typedata`: `PrimitiveType`, `TypeKind`, `TypeFlag` and the
  `TypeData` description of a type, with its string form (`to_string`,
  `format`) and its predicates (`is_integer`, `is_aggregate`, ...).
- `takc.nodes`: the syntax tree node classes (`AstVardecl`, `AstProcdecl`,
  `AstBinexpr`, ...), `NodeType`, and the predicates `needs_evaluating`,
  `needs_generating`, `valid_subexpression`, `valid_at_toplevel` and
  `never_needs_terminal`.
- `takc.text`: escape handling for string and character literals
  (`remove_escaped_chars`, `actual_string`, `actual_char`), namespace path
  splitting (`split_string`), and `panic`, which raises `InternalError`.
- `takc.config`: the process-wide `Config`, set once with `init_config`,
  read with `get_config`, cleared with `reset_config`.
- `takc.cli_args`: a small command-line flag parser (`Handler`,
  `Parameter`, `Argument`) with typed values, defaults, required flags and
  value predicates.
- `takc.terminal`: coloured and styled terminal output using ANSI escape
  sequences (`styled_print`, `bold`, `underline`, `red_bold`, ...).

## Installation

```
pip install .
```

To run the tests:

```
pip install .[test]
pytest
```

## Examples

Turning a literal's source text into its value:

```python
from takc.text import actual_string, actual_char, split_string

actual_string('"hello\\n"')      # 'hello\n'
actual_char("'a'")               # 'a'
split_string("\\std\\io", "\\")  # ['std', 'io']
```

Describing a type:

```python
from takc.typedata import TypeData

TypeData.const_int32().to_string()   # 'const rvalue i32'
TypeData.const_string().to_string()  # 'i8^'
```

Parsing command-line flags. `Handler.from_argv` skips the first element,
the program name:

```python
from takc.cli_args import Handler, Parameter

handler = Handler.from_argv(["takc", "--jobs", "4"])
handler.add_parameter(Parameter("--jobs", "-j", int, default=1))
handler.parse()
handler.get("-j")  # 4
```

Values are read as `bool` (`true` / `false`), then as a 64-bit integer,
otherwise as a string; a flag given with no value gets `None`. Errors in
the input raise `BadChunkError`, `RequiredArgumentError` or
`PredicateError`, each a subclass of `ArgumentError`. `help_text` returns a
table of the parameters and `display_help` prints it.

## What this package does not do

There is no lexer, parser, type checker or code generator here, and no
command to compile Tak source files. The package provides only the data
types and helpers listed above.