"""Checking exercises: compile, run or test them and report progress."""

from __future__ import annotations

from collections.abc import Iterable
from enum import Enum, auto

from rich.console import Console
from rich.status import Status
from rich.text import Text

from .exercise import CompiledExercise, Exercise, ExerciseFailed, Mode
from .ui import no_emoji, success, warn

BAR_WIDTH = 60
SEPARATOR = "===================="


class RunMode(Enum):
    """Whether a passing exercise asks the learner to remove its marker."""

    INTERACTIVE = auto()
    NON_INTERACTIVE = auto()


class VerificationFailed(Exception):
    """An exercise failed to compile, run, pass its tests, or is still pending."""

    def __init__(self, exercise: Exercise) -> None:
        super().__init__(f"{exercise} did not pass")
        self.exercise = exercise


def _console(stderr: bool = False) -> Console:
    return Console(
        stderr=stderr, highlight=False, soft_wrap=True, emoji=False, markup=False
    )


def _spinner(message: str) -> Status:
    return _console(stderr=True).status(message, spinner="dots")


def _progress_bar(position: int, total: int, percentage: float) -> Text:
    if total <= 0:
        filled = BAR_WIDTH
    else:
        filled = min(BAR_WIDTH, position * BAR_WIDTH // total)
    bar = Text("Progress: [")
    bar.append("#" * filled, style="green")
    if filled < BAR_WIDTH:
        bar.append(">" + "-" * (BAR_WIDTH - filled - 1), style="red")
    bar.append(f"] {position}/{total} ({percentage:.1f} %)")
    return bar


def verify(
    exercises: Iterable[Exercise],
    progress: tuple[int, int],
    verbose: bool = False,
    success_hints: bool = False,
) -> None:
    """Check each exercise in turn; raise VerificationFailed at the first one that fails."""
    num_done, total = progress
    percentage = num_done / total * 100 if total else float("nan")
    position = num_done
    err = _console(stderr=True)
    err.print(_progress_bar(position, total, percentage))

    for exercise in exercises:
        match exercise.mode:
            case Mode.TEST:
                passed = _compile_and_test(
                    exercise, RunMode.INTERACTIVE, verbose, success_hints
                )
            case Mode.COMPILE:
                passed = _compile_and_run_interactively(exercise, success_hints)
            case Mode.CLIPPY:
                passed = _compile_only(exercise, success_hints)
        if not passed:
            raise VerificationFailed(exercise)
        percentage += 100 / total
        position += 1
        err.print(_progress_bar(position, total, percentage))


def test(exercise: Exercise, verbose: bool = False) -> None:
    """Compile and run the test harness of an exercise without prompting."""
    _compile_and_test(exercise, RunMode.NON_INTERACTIVE, verbose, False)


def _compile(exercise: Exercise, status: Status) -> CompiledExercise:
    try:
        return exercise.compile()
    except ExerciseFailed as failure:
        status.stop()
        warn(f"Compiling of {exercise} failed! Please try again. Here's the output:")
        print(failure.output.stderr)
        raise VerificationFailed(exercise) from failure


def _compile_only(exercise: Exercise, success_hints: bool) -> bool:
    with _spinner(f"Compiling {exercise}...") as status:
        compiled = _compile(exercise, status)
    compiled.close()
    return prompt_for_completion(exercise, None, success_hints)


def _compile_and_run_interactively(exercise: Exercise, success_hints: bool) -> bool:
    with _spinner(f"Compiling {exercise}...") as status:
        with _compile(exercise, status) as compiled:
            status.update(f"Running {exercise}...")
            try:
                output = compiled.run()
            except ExerciseFailed as failure:
                status.stop()
                warn(f"Ran {exercise} with errors")
                print(failure.output.stdout)
                print(failure.output.stderr)
                raise VerificationFailed(exercise) from failure
    return prompt_for_completion(exercise, output.stdout, success_hints)


def _compile_and_test(
    exercise: Exercise, run_mode: RunMode, verbose: bool, success_hints: bool
) -> bool:
    with _spinner(f"Testing {exercise}...") as status:
        with _compile(exercise, status) as compiled:
            try:
                output = compiled.run()
            except ExerciseFailed as failure:
                status.stop()
                warn(
                    f"Testing of {exercise} failed! Please try again. "
                    "Here's the output:"
                )
                print(failure.output.stdout)
                raise VerificationFailed(exercise) from failure
    if verbose:
        print(output.stdout)
    if run_mode is RunMode.INTERACTIVE:
        return prompt_for_completion(exercise, None, success_hints)
    return True


def prompt_for_completion(
    exercise: Exercise, prompt_output: str | None, success_hints: bool
) -> bool:
    """Return True if the exercise is done; otherwise explain how to move on."""
    state = exercise.state()
    if state.is_done():
        return True

    match exercise.mode:
        case Mode.COMPILE:
            success(f"Successfully ran {exercise}!")
        case Mode.TEST:
            success(f"Successfully tested {exercise}!")
        case Mode.CLIPPY:
            success(f"Successfully compiled {exercise}!")

    plain = no_emoji()
    clippy_message = (
        "The code is compiling, and Clippy is happy!"
        if plain
        else "The code is compiling, and 📎 Clippy 📎 is happy!"
    )
    success_message = {
        Mode.COMPILE: "The code is compiling!",
        Mode.TEST: "The code is compiling, and the tests pass!",
        Mode.CLIPPY: clippy_message,
    }[exercise.mode]

    out = _console()
    separator = Text(SEPARATOR, style="bold")
    print()
    if plain:
        print(f"~*~ {success_message} ~*~")
    else:
        print(f"🎉 🎉  {success_message} 🎉 🎉")
    print()

    if prompt_output is not None:
        print("Output:")
        out.print(separator)
        print(prompt_output)
        out.print(separator)
        print()
    if success_hints:
        print("Hints:")
        out.print(separator)
        print(exercise.hint)
        out.print(separator)
        print()

    print("You can keep working on this exercise,")
    out.print(
        Text.assemble(
            "or jump into the next one by removing the ",
            ("`I AM NOT DONE`", "bold"),
            " comment:",
        )
    )
    print()
    for context_line in state.context:
        out.print(
            Text.assemble(
                (f"{context_line.number:>2}", "bold blue"),
                " ",
                ("|", "blue"),
                "  ",
                (context_line.line, "bold" if context_line.important else ""),
            )
        )
    return False