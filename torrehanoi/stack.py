"""Bounded stack of disks used as a Tower of Hanoi peg."""

from __future__ import annotations

from typing import Iterator


class StackError(Exception):
    """Base error for disk stack operations."""


class StackFullError(StackError):
    """Raised when pushing onto a stack that is already at capacity."""


class StackEmptyError(StackError):
    """Raised when removing a disk from an empty stack."""


class DiskStack:
    """A fixed-capacity stack of disk sizes, bottom first."""

    def __init__(self, capacity: int) -> None:
        if capacity < 0:
            raise ValueError("capacity must not be negative")
        self.capacity = capacity
        self._disks: list[int] = []

    def push(self, disk: int) -> None:
        """Place a disk on top of the stack."""
        if self.is_full():
            raise StackFullError(
                "Erro: Pilha cheia, nao eh possivel adicionar mais discos."
            )
        self._disks.append(disk)

    def pop(self) -> int:
        """Remove and return the top disk."""
        if self.is_empty():
            raise StackEmptyError(
                "Erro: Pilha vazia, nao ha discos para remover."
            )
        return self._disks.pop()

    def peek(self) -> int:
        """Return the top disk without removing it, or 0 when empty."""
        return self._disks[-1] if self._disks else 0

    def is_empty(self) -> bool:
        return not self._disks

    def is_full(self) -> bool:
        return len(self._disks) == self.capacity

    def __len__(self) -> int:
        return len(self._disks)

    def __iter__(self) -> Iterator[int]:
        """Iterate from the bottom disk to the top disk."""
        return iter(self._disks)

    def __getitem__(self, index: int) -> int:
        """Return the disk at a height, counting from the bottom."""
        return self._disks[index]

    def __repr__(self) -> str:
        return f"DiskStack(capacity={self.capacity}, disks={self._disks!r})"