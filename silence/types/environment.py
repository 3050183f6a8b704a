"""Runtime environment for Silence.

The EnvironmentStack is an ordered sequence of scope frames, each a mapping
from atom name to Expression. Lookup walks the frames innermost-first. The
outermost frame holds the primitives and top-level definitions and is never
popped.

Frames are stored innermost-last so that push/pop are cheap; iteration and
`snapshot()` order is an implementation detail of this module.
"""

from __future__ import annotations

from contextlib import contextmanager
from io import StringIO
from typing import Iterable, Iterator, Optional

from silence import Expression
from silence.errors import SilenceEmptyStack, SilenceNoParentScope, SilenceUnboundName

Frame = dict[str, Expression]


class EnvironmentStack:
    """Stack of mutable scope frames, threaded explicitly through evaluation."""

    __slots__ = ("frames",)

    def __init__(self, frames: Iterable[Frame] = ()):
        self.frames: list[Frame] = list(frames)

    @property
    def depth(self) -> int:
        return len(self.frames)

    def __len__(self) -> int:
        return len(self.frames)

    def lookup(self, name: str) -> Expression:
        """Return the innermost binding of `name`.

        Raises SilenceUnboundName if no frame binds it.
        """
        for frame in reversed(self.frames):
            if name in frame:
                return frame[name]
        raise SilenceUnboundName(name)

    def is_bound(self, name: str) -> bool:
        return any(name in frame for frame in self.frames)

    def push(self, frame: Optional[Frame] = None) -> None:
        self.frames.append({} if frame is None else frame)

    def pop(self) -> Frame:
        if not self.frames:
            raise SilenceEmptyStack("pop from an empty environment stack")
        return self.frames.pop()

    def innermost(self) -> Frame:
        if not self.frames:
            raise SilenceEmptyStack("empty stack")
        return self.frames[-1]

    def outermost(self) -> Frame:
        if not self.frames:
            raise SilenceEmptyStack("empty stack")
        return self.frames[0]

    def bind_innermost(self, name: str, value: Expression) -> None:
        self.innermost()[name] = value

    def bind_parent(self, name: str, value: Expression) -> None:
        if not self.frames:
            raise SilenceEmptyStack("empty stack")
        if len(self.frames) < 2:
            raise SilenceNoParentScope("no parent scope")
        self.frames[-2][name] = value

    def snapshot(self) -> tuple[Frame, ...]:
        """Capture the current shape of the stack for a closure.

        The tuple is immutable; the frames it references are shared, so
        bindings added to them later are visible through the snapshot.
        """
        return tuple(self.frames)

    @contextmanager
    def scope(self, frame: Frame, base: Optional[Iterable[Frame]] = None) -> Iterator[EnvironmentStack]:
        """Evaluate with `frame` pushed on top of `base` (default: current stack).

        The previous stack is restored on exit, whether the body returned or
        raised, so depth is unchanged once the block completes.
        """
        saved = self.frames
        self.frames = list(saved if base is None else base)
        self.frames.append(frame)
        try:
            yield self
        finally:
            self.frames = saved

    def _write_frame(self, frame: Frame, buffer: StringIO) -> None:
        """Write one frame's bindings into the buffer in a compact form."""
        buffer.write("{")
        buffer.write(", ".join(f"{k}: {v}" for k, v in frame.items()))
        buffer.write("}")

    def __str__(self) -> str:
        with StringIO() as buffer:
            if self.frames:
                self._write_frame(self.frames[-1], buffer)
            if len(self.frames) > 1:
                buffer.write(" -> ...")  # indicate parent exists
            return buffer.getvalue()

    def __repr__(self) -> str:
        with StringIO() as buffer:
            buffer.write("<EnvironmentStack: ")
            chain = []
            for frame in reversed(self.frames):
                frame_buf = StringIO()
                self._write_frame(frame, frame_buf)
                chain.append(frame_buf.getvalue())
            buffer.write(" -> ".join(chain))
            buffer.write(">")
            return buffer.getvalue()
