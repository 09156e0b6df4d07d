import os
import subprocess
from pathlib import Path
from unittest import mock

import pytest

from rustlings.exercise import (
    CLIPPY_CARGO_TOML_PATH,
    CompiledExercise,
    ContextLine,
    Exercise,
    ExerciseFailed,
    ExerciseOutput,
    Mode,
    State,
    clean,
    load_exercises,
    temp_file,
)

PENDING = "// fake_exercise\n\n// I AM NOT DONE\n\nfn main() {\n\n}\n"
FINISHED = "// fake_exercise\n\nfn main() {\n\n}\n"


def _completed(code=0, stdout=b"", stderr=b""):
    return subprocess.CompletedProcess([], code, stdout=stdout, stderr=stderr)


@pytest.fixture
def pending(tmp_path):
    path = tmp_path / "pending_exercise.rs"
    path.write_text(PENDING)
    return Exercise("pending_exercise", path, Mode.COMPILE, "")


@pytest.fixture
def finished(tmp_path):
    path = tmp_path / "finished_exercise.rs"
    path.write_text(FINISHED)
    return Exercise("finished_exercise", path, Mode.COMPILE, "")


def test_pending_state(pending):
    expected = State(
        (
            ContextLine("// fake_exercise", 1, False),
            ContextLine("", 2, False),
            ContextLine("// I AM NOT DONE", 3, True),
            ContextLine("", 4, False),
            ContextLine("fn main() {", 5, False),
        )
    )
    assert pending.state() == expected
    assert not pending.looks_done()


def test_finished_exercise(finished):
    assert finished.state() == State()
    assert finished.state().is_done()
    assert finished.looks_done()


@pytest.mark.parametrize(
    "text,done",
    [
        ("/// I   AM NOT DONE\n", False),
        ("//I AM NOT DONE\n", False),
        ("   // I AM NOT DONE\n", False),
        ("# I AM NOT DONE\n", True),
        ("let x = 1; // I AM NOT DONE\n", True),
    ],
)
def test_marker_variants(tmp_path, text, done):
    path = tmp_path / "x.rs"
    path.write_text(text)
    assert Exercise("x", path, Mode.TEST).looks_done() is done


def test_context_at_end_of_file(tmp_path):
    path = tmp_path / "x.rs"
    path.write_text("a\nb\nc\r\nd\r\n// I AM NOT DONE")
    state = Exercise("x", path, Mode.COMPILE).state()
    assert [c.number for c in state.context] == [3, 4, 5]
    assert [c.line for c in state.context] == ["c", "d", "// I AM NOT DONE"]
    assert [c.important for c in state.context] == [False, False, True]


def test_display_is_path(pending):
    assert str(pending) == str(pending.path)


def test_temp_file_includes_pid():
    assert temp_file().startswith(f"./temp_{os.getpid()}_")


def test_clean(tmp_path, monkeypatch, pending):
    monkeypatch.chdir(tmp_path)
    Path(temp_file()).touch()
    with mock.patch("subprocess.run", return_value=_completed()):
        compiled = pending.compile()
    assert isinstance(compiled, CompiledExercise)
    assert Path(temp_file()).exists()
    compiled.close()
    assert not Path(temp_file()).exists()


def test_clean_without_file_is_silent(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    clean()
    assert not Path(temp_file()).exists()


def test_compile_arguments_for_test_mode(tmp_path, monkeypatch, pending):
    monkeypatch.chdir(tmp_path)
    pending.mode = Mode.TEST
    with mock.patch("subprocess.run", return_value=_completed()) as run_mock:
        with pending.compile():
            pass
    args = run_mock.call_args[0][0]
    assert args[:2] == ["rustc", "--test"]
    assert str(pending.path) in args
    assert "--edition" in args and "2021" in args


def test_compile_failure_raises(tmp_path, monkeypatch, pending):
    monkeypatch.chdir(tmp_path)
    Path(temp_file()).touch()
    with mock.patch("subprocess.run", return_value=_completed(1, b"", b"error[E0425]")):
        with pytest.raises(ExerciseFailed) as info:
            pending.compile()
    assert info.value.output == ExerciseOutput("", "error[E0425]")
    assert not Path(temp_file()).exists()


def test_clippy_compile_writes_manifest(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    (tmp_path / "exercises" / "22_clippy").mkdir(parents=True)
    exercise = Exercise("clippy1", Path("exercises/22_clippy/clippy1.rs"), Mode.CLIPPY)
    with mock.patch("subprocess.run", return_value=_completed()) as run_mock:
        exercise.compile().close()
    manifest = Path(CLIPPY_CARGO_TOML_PATH).read_text()
    assert 'name = "clippy1"' in manifest
    assert 'path = "clippy1.rs"' in manifest
    assert run_mock.call_count == 3
    assert run_mock.call_args_list[1][0][0][:2] == ["cargo", "clean"]
    assert run_mock.call_args_list[2][0][0][:2] == ["cargo", "clippy"]


def test_run_success_and_show_output_flag(pending):
    pending.mode = Mode.TEST
    with mock.patch(
        "subprocess.run", return_value=_completed(0, b"THIS TEST TOO SHALL PASS", b"")
    ) as run_mock:
        out = CompiledExercise(pending).run()
    assert "THIS TEST TOO SHALL PASS" in out.stdout
    assert run_mock.call_args[0][0][1:] == ["--show-output"]


def test_run_failure_raises(pending):
    with mock.patch("subprocess.run", return_value=_completed(101, b"out", b"panic")):
        with pytest.raises(ExerciseFailed) as info:
            pending.run()
    assert info.value.output.stdout == "out"
    assert info.value.output.stderr == "panic"


def test_load_exercises(tmp_path):
    info = tmp_path / "info.toml"
    info.write_text(
        '[[exercises]]\nname = "intro1"\npath = "exercises/00_intro/intro1.rs"\n'
        'mode = "compile"\nhint = "No hints this time ;)"\n\n'
        '[[exercises]]\nname = "if1"\npath = "exercises/03_if/if1.rs"\n'
        'mode = "test"\nhint = ""\n'
    )
    exercises = load_exercises(info)
    assert [e.name for e in exercises] == ["intro1", "if1"]
    assert exercises[0].mode is Mode.COMPILE
    assert exercises[1].mode is Mode.TEST
    assert exercises[0].path == Path("exercises/00_intro/intro1.rs")
    assert exercises[0].hint == "No hints this time ;)"


def test_load_exercises_rejects_unknown_mode(tmp_path):
    info = tmp_path / "info.toml"
    info.write_text('[[exercises]]\nname = "a"\npath = "a.rs"\nmode = "bogus"\nhint = ""\n')
    with pytest.raises(ValueError):
        load_exercises(info)