"""Book outline tree: book, chapters, sections and subsections."""

from __future__ import annotations

from dataclasses import dataclass, field

MAX_CHILDREN = 10


@dataclass
class BookNode:
    name: str
    children: list[BookNode] = field(default_factory=list)

    @property
    def count(self) -> int:
        return len(self.children)

    def add(self, name: str) -> BookNode:
        """Append a child named ``name`` and return it."""
        if len(self.children) >= MAX_CHILDREN:
            raise ValueError(f"a node holds at most {MAX_CHILDREN} children")
        child = BookNode(name)
        self.children.append(child)
        return child

    def describe(self) -> str:
        """Outline of this node as a book with chapters, sections and subsections."""
        lines = [
            f"Name of book: {self.name}",
            f"The total chapters in the book: {self.count}",
        ]
        for i, chapter in enumerate(self.children, 1):
            lines.append(f"Name of chapter {i} is: {chapter.name}")
            lines.append(f"The total sections in chapter {i}: {chapter.count}")
            for j, section in enumerate(chapter.children, 1):
                lines.append(f"Name of section {j} is: {section.name}")
                lines.append(f"The total subsections in section {j}: {section.count}")
                lines.extend(
                    f"Name of subsection {k} is: {sub.name}"
                    for k, sub in enumerate(section.children, 1)
                )
        return "".join(line + "\n" for line in lines)