# rustdrill

Worked solutions to a course of small compile-and-fix programming exercises,
written as ordinary importable Python, together with two helpers that a course
runner needs: coloured status lines for the terminal, and a generator for the
`rust-project.json` file that lets an editor's language server treat each
exercise file as its own crate.

## Requirements

- Python 3.11 or newer
- `rich` (installed automatically)
- A `rustc` toolchain on your `PATH`, only if you ask
  `RustAnalyzerProject.get_sysroot_src()` to locate the standard library
  sources and `RUST_SRC_PATH` is not set

## Terminal status lines – `rustdrill.ui`

    from rustdrill.ui import warn, success, separator

    warn("Compiling of exercises/intro1.rs failed!")   # red, prefixed with ⚠️
    success("Successfully ran exercises/intro1.rs")    # green, prefixed with ✅
    separator()                                        # a bold rich Text of 20 "="

When the `NO_EMOJI` environment variable is set, the markers become `!` and
`✓`.

## rust-project.json – `rustdrill.project`

    from rustdrill.project import RustAnalyzerProject

    project = RustAnalyzerProject()
    project.get_sysroot_src()          # RUST_SRC_PATH, or `rustc --print sysroot`
    project.exercises_to_json("exercises")
    project.write_to_disk("rust-project.json")

`exercises_to_json` adds a `Crate` (edition `2021`, no dependencies, `cfg`
set to `["test"]`) for every `.rs` file below the given directory, in sorted
order; `add_path` does the same for a single path and ignores anything that
is not a `.rs` file. `to_json` returns the compact JSON text that
`write_to_disk` writes. When `RUST_SRC_PATH` is unset, `get_sysroot_src`
prints the toolchain it found and points at its
`lib/rustlib/src/rust/library` directory.

## Worked solutions – `rustdrill.lessons`

Each module holds the solutions for one group of exercises:

| Module | Contents |
| --- | --- |
| `quizzes` | `calculate_price_of_apples`, `Command` / `CommandKind` with `transformer`, `ReportCard` |
| `branching` | `bigger`, `foo_if_fizz`, `is_even`, `sale_price` |
| `colors` | `Color.try_from`, raising `IntoColorError` with an `IntoColorErrorKind` |
| `errors` | `generate_nametag_text`, `total_cost`, `PositiveNonzeroInteger`, `parse_pos_nonzero` |
| `options` | `maybe_icecream` |
| `text` | `is_a_color_word`, `trim_me`, `compose_me`, `replace_me` |
| `packages` | `Package` with `is_international` and `get_fees` |
| `iterators` | `capitalize_first`, `capitalize_words_vector`, `capitalize_words_string`, `divide`, `result_with_list`, `list_of_results`, `factorial`, `Progress` and the `count_*` functions |
| `hashmaps` | `fruit_basket`, `Fruit`, `fill_fruit_basket`, `Team`, `build_scores_table` |
| `vectors` | `array_and_vec`, `vec_loop`, `vec_map` |
| `traits` | `append_bar`, `Licensed`, `SomeSoftware`, `OtherSoftware`, `compare_license_types` |
| `messages` | `Point`, the messages `ChangeColor`, `Echo`, `Move`, `Quit`, and `State.process` |
| `records` | `ColorClassicStruct`, `ColorTupleStruct`, `UnitLikeStruct`, `Order`, `create_order_template`, `Wrapper` |
| `pointers` | the cons list `Cons` / `Nil`, `Cow` and `abs_all` |
| `threads` | `run_timed_threads`, `Queue`, `send_tx`, `receive_all`, `offset_sums` |

For example:

    from rustdrill.lessons.quizzes import calculate_price_of_apples, transformer, Command
    from rustdrill.lessons.colors import Color
    from rustdrill.lessons.iterators import divide, NotDivisibleError

    calculate_price_of_apples(41)                  # 41
    transformer([("foo", Command.append(1))])      # ["foobar"]
    Color.try_from((183, 65, 14))                  # Color(red=183, green=65, blue=14)
    divide(81, 9)                                  # 9
    divide(81, 6)                                  # raises NotDivisibleError(81, 6)

Failures are raised as exceptions: `parse_pos_nonzero("-555")` raises
`ParsePosNonzeroError` whose `creation` holds a `CreationError` of kind
`NEGATIVE`, and `Package("Spain", "Austria", -2210)` raises `ValueError`.

## What this package does not do

There is no command-line program. The package does not read a course's
`info.toml`, does not compile, run, test or lint exercise files, does not
track which exercises are done, and has no watch mode, hint lookup, listing
or reset commands. It supplies the solutions and the helpers above for use
from your own code.