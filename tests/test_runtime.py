# Copyright (C) 2025 Logical Mechanism LLC
# SPDX-License-Identifier: GPL-3.0-only

# tests/test_runtime.py

import sys

import pytest

from zktls.errors import SchemaError
from zktls.runtime import GuestIO, Program, execute
from zktls.stream import ZkStdin


def echo(io: GuestIO) -> None:
    value = io.read()
    io.commit(value)
    io.commit(len(value))


def lazy(io: GuestIO) -> None:
    io.commit(io.read())


def test_execute_commits_in_order():
    program = Program.from_entrypoint("echo", echo)
    stdin = ZkStdin()
    stdin.write("hello")

    public_values, report = execute(program, stdin)

    assert public_values.read() == "hello"
    assert public_values.read() == 5
    assert report.total_instruction_count() > 0


def test_instruction_count_is_deterministic():
    program = Program.from_entrypoint("echo", echo)
    stdin = ZkStdin()
    stdin.write("hello")

    _, first = execute(program, stdin)
    _, second = execute(program, stdin)
    assert first == second


def test_unread_inputs_fail_the_run():
    program = Program.from_entrypoint("lazy", lazy)
    stdin = ZkStdin()
    stdin.write(1)
    stdin.write(2)
    with pytest.raises(SchemaError, match="unread"):
        execute(program, stdin)


def test_reading_past_the_end_fails_the_run():
    program = Program.from_entrypoint("echo", echo)
    with pytest.raises(SchemaError, match="exhausted"):
        execute(program, ZkStdin())


def test_trace_is_restored():
    before = sys.gettrace()
    stdin = ZkStdin()
    stdin.write("x")
    execute(Program.from_entrypoint("echo", echo), stdin)
    assert sys.gettrace() is before


def test_digest_depends_on_name_and_source():
    a = Program.from_entrypoint("echo", echo)
    b = Program.from_entrypoint("echo", echo)
    c = Program.from_entrypoint("other", echo)
    assert a.digest == b.digest
    assert a.digest != c.digest


if __name__ == "__main__":
    pytest.main()
