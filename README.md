# rustdrill

`rustdrill` is a small library for people working through Rust exercises. It
provides:

- terminal status lines in colour (`rustdrill.ui`);
- a generator for the `rust-project.json` file that rust-analyzer reads
  (`rustdrill.project`);
- worked solutions to many of the exercises, written in Python
  (`rustdrill.drills`).

It has no dependencies outside the standard library. Python 3.11 or later is
required.

## Terminal output: `rustdrill.ui`

```python
from rustdrill.ui import style, warn, success

print(style("bold blue", color="blue", bold=True))
warn("Compiling of exercises/intro/intro2.rs failed!")
success("Successfully ran exercises/intro/intro1.rs")
```

- `style(text, color=None, bold=False)` wraps `text` in ANSI codes. The
  colours are `black`, `red`, `green`, `yellow`, `blue`, `magenta`, `cyan`
  and `white`; any other name raises `ValueError`. Codes are added only when
  colours are on: always when `CLICOLOR_FORCE` is set to something other
  than `0`, never when `NO_COLOR` is set or `CLICOLOR` is `0`, and otherwise
  only when standard output is a terminal.
- `warn(message)` prints a red line starting with a warning sign.
- `success(message)` prints a green line starting with a check mark.

Set the `NO_EMOJI` environment variable to get the plain markers `!` and `✓`
instead of emoji.

## rust-analyzer project file: `rustdrill.project`

```python
from rustdrill.project import RustAnalyzerProject

project = RustAnalyzerProject()
project.get_sysroot_src()
project.exercises_to_json("./exercises")
project.write_to_disk("./rust-project.json")
```

- `get_sysroot_src()` takes the standard library sources from the
  `RUST_SRC_PATH` environment variable when it is set. Otherwise it runs
  `rustc --print sysroot`, prints the toolchain it found and uses
  `<sysroot>/lib/rustlib/src/rust/library`.
- `exercises_to_json(root="./exercises")` walks everything below `root`, in
  sorted order, and passes each path to `add_path`.
- `add_path(path)` adds a `Crate` when the text after the first dot of the
  path is exactly `rs`. Each crate has edition `2021`, no dependencies and
  the `test` cfg, so rust-analyzer also works inside test blocks.
- `to_dict()` returns the project as a dictionary, and
  `write_to_disk(path="./rust-project.json")` writes it as compact JSON.

## Worked solutions: `rustdrill.drills`

Each module holds Python versions of the solved exercises:

- `quizzes` – `calculate_price_of_apples`, a `transformer` driven by the
  commands `Uppercase`, `Trim` and `Append(times)`, and `ReportCard.render()`.
- `errors` – `generate_nametag_text`, `total_cost`, `purchase`,
  `PositiveNonzeroInteger`, `parse_positive` and `parse_pos_nonzero`, which
  raises `ParsePosNonzeroError` with either its `creation` or its
  `parse_int` cause set.
- `enums` – the messages `Echo`, `Move`, `ChangeColor` and `Quit`, applied to
  a `State` with `State.process(message)`.
- `iterators` – `capitalize_first`, `capitalize_words_vector`,
  `capitalize_words_string`, checked `divide` with `DivideByZero` and
  `NotDivisibleError`, `result_with_list`, `list_of_results`, `factorial`,
  and counting `Progress` values with `count_for`, `count_iterator`,
  `count_collection_for` and `count_collection_iterator`.
- `hashmaps` – `default_fruit_basket`, `fill_fruit_basket` over the `Fruit`
  enum, and `build_scores_table`, which tallies goals per `Team` from lines
  of `team1,team2,goals1,goals2`.
- `basics` – small functions on numbers, strings and lists, such as
  `sale_price`, `bigger`, `foo_if_fizz`, `maybe_icecream`, `trim_me`,
  `replace_me`, `vec_loop` and `vec_map`, and the generic `Wrapper`.
- `records` – `ColorClassicStruct`, `ColorTupleStruct`, `UnitLikeStruct`,
  `Order` with `create_order_template`, `Package` with its fees, `append_bar`
  for strings and lists, and the `Licensed` software types compared with
  `compare_license_types`.

```python
from rustdrill.drills.quizzes import Append, Trim, Uppercase, transformer
from rustdrill.drills.errors import ParsePosNonzeroError, parse_pos_nonzero

transformer([("hello", Uppercase()), (" hi ", Trim()), ("foo", Append(1))])
# ['HELLO', 'hi', 'foobar']

try:
    parse_pos_nonzero("-555")
except ParsePosNonzeroError as err:
    print(err.creation.kind)  # CreationErrorKind.NEGATIVE
```

## What this package does not do

`rustdrill` installs no command. It does not read an exercise list, compile
or run exercises, check whether an exercise is still marked as not done,
watch files for changes, show hints or reset exercises. It offers only the
library pieces described above.