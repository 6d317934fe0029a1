from __future__ import annotations

import subprocess

import pytest

from mpd_fzf import mpc
from mpd_fzf.errors import CollaboratorError


def _fake_run(outputs: dict[str, tuple[int, str]], calls: list[list[str]]):
    def fake_run(cmd, **kwargs):
        calls.append(cmd)
        assert kwargs["stderr"] is subprocess.STDOUT
        returncode, stdout = outputs.get(cmd[1], (0, ""))
        return subprocess.CompletedProcess(cmd, returncode, stdout=stdout)

    return fake_run


def test_queue_lists_files(monkeypatch) -> None:
    calls: list[list[str]] = []
    outputs = {"playlist": (0, "a.mp3\nb/c.flac\n")}
    monkeypatch.setattr(mpc.subprocess, "run", _fake_run(outputs, calls))
    client = mpc.MpcClient("mpc")
    assert client.queue() == ["a.mp3", "b/c.flac"]
    assert calls == [["mpc", "playlist", "-f", "%file%"]]


def test_find_in_queue(monkeypatch) -> None:
    calls: list[list[str]] = []
    outputs = {"playlist": (0, "a.mp3\nb/c.flac\n")}
    monkeypatch.setattr(mpc.subprocess, "run", _fake_run(outputs, calls))
    client = mpc.MpcClient()
    assert client.find_in_queue("b/c.flac") == (2, True)
    assert client.find_in_queue("missing.mp3") == (3, False)


def test_find_in_empty_queue(monkeypatch) -> None:
    monkeypatch.setattr(mpc.subprocess, "run", _fake_run({}, []))
    assert mpc.MpcClient().find_in_queue("a.mp3") == (1, False)


def test_add_and_play_commands(monkeypatch) -> None:
    calls: list[list[str]] = []
    monkeypatch.setattr(mpc.subprocess, "run", _fake_run({}, calls))
    client = mpc.MpcClient("/usr/bin/mpc")
    client.add("a b.mp3")
    client.play(4)
    assert calls == [
        ["/usr/bin/mpc", "add", "a b.mp3"],
        ["/usr/bin/mpc", "play", "4"],
    ]


def test_failure_carries_output(monkeypatch) -> None:
    outputs = {"add": (1, "error: No such directory\n")}
    monkeypatch.setattr(mpc.subprocess, "run", _fake_run(outputs, []))
    with pytest.raises(CollaboratorError, match="No such directory") as info:
        mpc.MpcClient().add("nope.mp3")
    assert info.value.returncode == 1


def test_missing_executable(monkeypatch) -> None:
    def boom(*_args, **_kwargs):
        raise FileNotFoundError("mpc")

    monkeypatch.setattr(mpc.subprocess, "run", boom)
    with pytest.raises(CollaboratorError, match="Could not run mpc"):
        mpc.MpcClient().queue()
