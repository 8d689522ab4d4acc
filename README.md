# syntaxkit

A small scanner and recursive-descent parser for a compact, block-structured
language. Source text is read through a `Scanner` and turned into plain,
comparable syntax-tree objects: frozen dataclasses defined in
`syntaxkit.ast`.

## The language

A struct declaration and a function declaration look like this:

```
Ham : struct
    a : i32
    b : bool
.
```

```
add : ( a : i32 , b : i32 ) -> i32
    c = 123
    d : i32 = 5 * 7
    if a <= b
        e = 1
    elif flag
    else
        f = Vec { x, y: 2 }
    .
.
```

- A function header is `[ns.]name : ( params ) -> type`; its body is a block
  of statements closed by `.`.
- A struct header is `Name : struct`, followed by one `prop : type` per line
  and a closing `.`.
- Statements are variable declarations (`name [: type] = expr`) and if
  statements (`if`, any number of `elif`, an optional `else`, closed by `.`).
- An if condition is a single operand (`true`, `false` or a variable name) or
  a comparison of two operands with `==`, `!=`, `<`, `<=`, `>`, `>=`.
- Expressions support `-`, `+`, `/`, `*` (from loosest to tightest binding),
  parenthesised groups, negated groups `-( ... )`, integers of any length
  (kept as text, with an optional leading `-`), `true`/`false`, variables and
  struct literals, named or anonymous, with `key: value` or shorthand `key`
  fields and an optional trailing comma.

## Usage

Every parser takes a `Scanner` and returns a node, or `None` when the input
does not match. A parser that fails part way may already have consumed
input; use `Scanner.copy()` and `Scanner.replace()`, or
`syntaxkit.common.try_parse`, to backtrack.

```python
from syntaxkit.scanner import Scanner
from syntaxkit.expressions import parse_expr
from syntaxkit.declarations import parse_fn_decl, parse_struct_decl
from syntaxkit.statements import parse_block, parse_var_decl

expr = parse_expr(Scanner("1 + 2 + 3"))
# Add(ops=[IntLit(value='1'), IntLit(value='2'), IntLit(value='3')])

decl = parse_var_decl(Scanner("cheese : Cheese = 1234567"))
# VarDecl(id='cheese', typ='Cheese', expr=IntLit(value='1234567'))

fn = parse_fn_decl(Scanner("main : () -> void\n."))
struct = parse_struct_decl(Scanner("Cheese : struct\n."))
```

The modules:

- `syntaxkit.ast` – node types: `Cursor`, `Span`, `BoolLit`, `IntLit`,
  `StructLit`, `StructLitArg`, `Var`, `Add`, `Sub`, `Mul`, `Div`, `Group`,
  `Neg`, `IfOperator`, `IfCompare`, `If`, `VarDecl`, `Block`, `Param`
  (also available as `Prop`), `StructDecl`, `FnDecl`. An if condition that
  is a single operand is returned as a `bool` (literal) or a `str`
  (variable name).
- `syntaxkit.scanner` – the `Scanner`.
- `syntaxkit.common` – `parse_bool`, `parse_int`, `parse_uint`, `parse_id`,
  `parse_two_ids`, `try_parse`.
- `syntaxkit.expressions` – `parse_expr`, `parse_bool_lit`, `parse_int_lit`,
  `parse_struct_lit`, `parse_struct_lit_arg`, `parse_var`.
- `syntaxkit.statements` – `parse_block`, `parse_stmt`, `parse_if`,
  `parse_if_expr`, `parse_if_operand`, `parse_if_operator`, `parse_var_decl`.
- `syntaxkit.declarations` – `parse_param`, `parse_fn_decl`,
  `parse_struct_decl`.

`parse_block` never fails: it collects statements until one does not parse
and returns the `Block` so far, leaving the scanner before that point.

The scanner also works on its own:

```python
scn = Scanner("12ham!")
scn.scan_digits()     # "12"
scn.scan("ham")       # "ham"
scn.has("!")          # True
scn.current_cursor()  # Cursor(column=6, line=0, offset=6)
```

Its other methods are `scan_alphabetic`, `scan_alphanumeric`, `scan_digit`,
`skip_any`, `skip_newline`, `skip_spaces` and `skip_whitespaces`.
Variables record where they were found as a `Span`, built from two `Cursor`
positions with `Cursor.span_to`.

## What it does not do

There is no parser for a whole source file: struct and function
declarations are parsed one at a time with `parse_struct_decl` and
`parse_fn_decl`. Failed parses return `None` without any error message or
position. The package does no type checking, evaluation or code generation,
and has no command-line tool.

## Tests

```
pip install -e .[test]
pytest
```