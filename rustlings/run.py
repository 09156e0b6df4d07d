"""Running a single exercise, and resetting it."""

from __future__ import annotations

import subprocess

from rich.console import Console

from .exercise import Exercise, ExerciseFailed, Mode
from .ui import success, warn
from .verify import VerificationFailed
from .verify import test as _test_exercise


def run(exercise: Exercise, verbose: bool = False) -> None:
    """Compile and run, or test, one exercise; raise VerificationFailed on failure."""
    match exercise.mode:
        case Mode.TEST:
            _test_exercise(exercise, verbose)
        case Mode.COMPILE | Mode.CLIPPY:
            compile_and_run(exercise)


def reset(exercise: Exercise) -> subprocess.CompletedProcess:
    """Stash local changes to the exercise file with git."""
    return subprocess.run(["git", "stash", "--", str(exercise.path)])


def compile_and_run(exercise: Exercise) -> None:
    """Compile the exercise and run the binary, showing its output."""
    console = Console(stderr=True, highlight=False, markup=False, emoji=False)
    with console.status(f"Compiling {exercise}...", spinner="dots") as status:
        try:
            compiled = exercise.compile()
        except ExerciseFailed as failure:
            status.stop()
            warn(f"Compilation of {exercise} failed!, Compiler error message:\n")
            print(failure.output.stderr)
            raise VerificationFailed(exercise) from failure
        with compiled:
            status.update(f"Running {exercise}...")
            try:
                output = compiled.run()
            except ExerciseFailed as failure:
                status.stop()
                print(failure.output.stdout)
                print(failure.output.stderr)
                warn(f"Ran {exercise} with errors")
                raise VerificationFailed(exercise) from failure
    print(output.stdout)
    success(f"Successfully ran {exercise}")