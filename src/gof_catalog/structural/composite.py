"""
Composite - treat single objects and groups of objects uniformly.

Files and directories share one interface. Walking a directory visits
every child in insertion order. Traversal uses an explicit stack, so
deeply nested trees do not hit the recursion limit.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Iterator

from gof_catalog.harness.sink import OutputSink


class Component(ABC):
    def __init__(self, name: str):
        self.name = name

    @property
    @abstractmethod
    def is_composite(self) -> bool: ...

    @abstractmethod
    def children(self) -> list[Component]: ...

    def walk(self) -> Iterator[tuple[int, Component]]:
        """Yield (depth, component) pairs in pre-order, children in insertion order."""
        stack: list[tuple[int, Component]] = [(0, self)]
        while stack:
            depth, node = stack.pop()
            yield depth, node
            # Reversed so the first child is popped first
            for child in reversed(node.children()):
                stack.append((depth + 1, child))

    def display(self, sink: OutputSink) -> None:
        for depth, node in self.walk():
            sink.emit(f"{'  ' * depth}{node.name}")

    def count_files(self) -> int:
        return sum(1 for _, node in self.walk() if not node.is_composite)


class File(Component):
    """Leaf."""

    @property
    def is_composite(self) -> bool:
        return False

    def children(self) -> list[Component]:
        return []


class Directory(Component):
    """Composite."""

    def __init__(self, name: str):
        super().__init__(name)
        self._children: list[Component] = []

    @property
    def is_composite(self) -> bool:
        return True

    def add(self, component: Component) -> Directory:
        self._children.append(component)
        return self

    def remove(self, component: Component) -> None:
        self._children.remove(component)

    def children(self) -> list[Component]:
        return list(self._children)


def run_scenario(sink: OutputSink) -> None:
    """Build a small file system, print it, then remove a file."""
    root = Directory("File system")
    disk_c = Directory("Disk C")
    png = File("12345.png")
    docx = File("Document.docx")
    disk_c.add(png).add(docx)
    root.add(disk_c)
    root.add(Directory("Disk D").add(File("notes.txt")))

    root.display(sink)
    sink.emit(f"Files: {root.count_files()}")

    disk_c.remove(png)
    root.display(sink)
    sink.emit(f"Files: {root.count_files()}")
