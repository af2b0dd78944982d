# Copyright (C) 2025 Logical Mechanism LLC
# SPDX-License-Identifier: GPL-3.0-only

# runtime.py

"""
Execution side of the proving machine.

A guest `Program` is a Python entrypoint taking a `GuestIO`. The runtime
feeds it the host's `ZkStdin` values in write order, collects what it
commits into `PublicValues`, and counts executed instructions (Python
line events) so execution cost can be estimated without proving.

The program digest covers the source of the guest module and of every
module it declares, so changing guest code changes the verifying key.
"""

import inspect
import logging
import sys
from dataclasses import dataclass
from types import ModuleType
from typing import Any, Callable

from zktls.constants import PROGRAM_DOMAIN_TAG
from zktls.errors import SchemaError
from zktls.hashing import generate
from zktls.stream import PublicValues, ZkStdin, decode_item, encode_item, frame

logger = logging.getLogger(__name__)


class GuestIO:
    """The guest's view of the input stream and the public-values stream."""

    def __init__(self, inputs: list[bytes]) -> None:
        self._inputs = list(inputs)
        self._next = 0
        self._output = bytearray()

    def read(self) -> Any:
        """
        Read the next host-written value.

        Raises:
            SchemaError: If the stream is exhausted or the value is not
                valid CBOR.
        """
        if self._next >= len(self._inputs):
            raise SchemaError(
                f"input stream exhausted after {self._next} values"
            )
        value = decode_item(self._inputs[self._next])
        self._next += 1
        return value

    def commit(self, value: Any) -> None:
        self._output += frame(encode_item(value))

    def remaining(self) -> int:
        return len(self._inputs) - self._next

    def public_values(self) -> PublicValues:
        return PublicValues(bytes(self._output))


@dataclass(frozen=True)
class Program:
    name: str
    entrypoint: Callable[[GuestIO], None]
    digest: str

    @classmethod
    def from_entrypoint(
        cls, name: str, entrypoint: Callable[[GuestIO], None], *modules: ModuleType
    ) -> "Program":
        sources = [inspect.getsource(sys.modules[entrypoint.__module__])]
        sources += [inspect.getsource(m) for m in modules]
        payload = name.encode("utf-8").hex()
        for source in sources:
            payload += source.encode("utf-8").hex()
        return cls(name=name, entrypoint=entrypoint, digest=generate(PROGRAM_DOMAIN_TAG + payload))


@dataclass(frozen=True)
class ExecutionReport:
    instruction_count: int

    def total_instruction_count(self) -> int:
        return self.instruction_count


class _InstructionCounter:
    def __init__(self) -> None:
        self.count = 0

    def trace(self, frame, event, arg):
        if event == "line":
            self.count += 1
        return self.trace


def execute(program: Program, stdin: ZkStdin) -> tuple[PublicValues, ExecutionReport]:
    """
    Run `program` once over `stdin` without producing a proof.

    Args:
        program: The guest program.
        stdin: Host-written inputs, consumed in write order.

    Returns:
        The committed public values and an execution report.

    Raises:
        SchemaError: If the guest reads past the end of the input stream,
            reads a malformed value, or leaves inputs unread.
    """
    guest_io = GuestIO(stdin.buffer)
    counter = _InstructionCounter()

    previous = sys.gettrace()
    sys.settrace(counter.trace)
    try:
        program.entrypoint(guest_io)
    finally:
        sys.settrace(previous)

    if guest_io.remaining():
        raise SchemaError(f"guest left {guest_io.remaining()} input values unread")

    report = ExecutionReport(instruction_count=counter.count)
    logger.info(
        "executed %s: %d instructions", program.name, report.instruction_count
    )
    return guest_io.public_values(), report
