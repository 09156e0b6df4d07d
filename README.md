# rustlings

A library for working through a collection of small Rust exercises: it reads
the exercise list, compiles and runs or tests each exercise with `rustc`
(and `cargo clippy` for lint exercises), tells whether an exercise still
carries its `// I AM NOT DONE` marker, and writes a `rust-project.json` for
rust-analyzer. It also holds worked solutions to many of the exercises as
plain Python functions.

## Installing

```
pip install .
```

Compiling and running exercises calls `rustc` (and `cargo` for the Clippy
exercises), so a working Rust toolchain must be on your `PATH`. Resetting an
exercise calls `git`.

## Exercises and progress

`rustlings.exercise` describes exercises and their state:

```python
from rustlings.exercise import load_exercises

exercises = load_exercises("info.toml")
for exercise in exercises:
    print(exercise.name, "done" if exercise.looks_done() else "pending")
```

- `load_exercises(path)` reads the `[[exercises]]` entries (`name`, `path`,
  `mode`, `hint`) of an `info.toml` file into `Exercise` objects.
- `Exercise.mode` is a `Mode`: `COMPILE`, `TEST` or `CLIPPY`.
- `Exercise.state()` returns a `State`. `State.is_done()` is true when the
  marker is gone; otherwise `State.context` holds `ContextLine` entries for the
  marker line and up to two lines either side of it.
- `Exercise.compile()` returns a `CompiledExercise` (usable as a context
  manager that removes the temporary binary on exit) or raises
  `ExerciseFailed`, whose `output` holds the compiler's `stdout` and `stderr`.
- `CompiledExercise.run()` runs the binary (with `--show-output` for test
  exercises) and returns an `ExerciseOutput`, or raises `ExerciseFailed`.

## Checking exercises

`rustlings.verify.verify(exercises, (num_done, total), verbose, success_hints)`
checks exercises in order, printing a progress bar. It raises
`VerificationFailed` (with the failing `exercise`) at the first one that fails
to compile, run or pass its tests, or that still carries its marker; for a
pending exercise it prints the success message, the program output, the hint
if `success_hints` is set, and the lines around the marker.

`rustlings.run.run(exercise, verbose)` compiles and runs or tests a single
exercise without asking about the marker, raising `VerificationFailed` on
failure. `rustlings.run.reset(exercise)` runs `git stash -- <path>` on the
exercise file.

Set `NO_EMOJI` in the environment to get plain-text markers in the coloured
lines printed by `rustlings.ui.warn` and `rustlings.ui.success`.

## rust-analyzer support

```python
from rustlings.project import RustAnalyzerProject

project = RustAnalyzerProject()
project.get_sysroot_src()          # uses RUST_SRC_PATH, or asks rustc
project.exercises_to_json("./exercises")
project.write_to_disk("./rust-project.json")
```

Every `.rs` file under the folder becomes a crate with edition 2021 and the
`test` cfg enabled.

## Worked solutions

- `rustlings.quizzes`: `calculate_price_of_apples`, `transformer` with the
  `Uppercase`, `Trim` and `Append` commands, and `ReportCard`.
- `rustlings.basics`: functions, conditionals, vectors and strings.
- `rustlings.iterators`: `capitalize_first`, `divide` with `DivisionError`,
  `DivideByZeroError` and `NotDivisibleError`, `factorial`.
- `rustlings.records`: structs, the message-processing `State`, `Rectangle`,
  `Package`, and the `Cons`/`Nil` list.
- `rustlings.baskets`: fruit baskets, `build_scores_table`, `maybe_icecream`
  and progress counting.
- `rustlings.errors`: `generate_nametag_text`, `total_cost`, `purchase`,
  `PositiveNonzeroInteger` and `parse_pos_nonzero`.
- `rustlings.traits`: `Wrapper`, `append_bar`, the `Licensed` classes and
  `some_func`.

```python
from rustlings.quizzes import calculate_price_of_apples
from rustlings.iterators import divide

calculate_price_of_apples(41)      # 41
divide(81, 9)                      # 9
```

## What this package does not do

There is no `rustlings` command: no watch mode that re-checks exercises as
files change, no interactive `hint`/`clear`/`quit` prompt, and no `list`
view. Drive the checks from Python with the functions above. Solutions to the
concurrency and conversion exercises are not included.

## Running the tests

```
pip install .[test]
pytest
```