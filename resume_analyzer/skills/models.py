"""Skill set data model."""

from typing import Iterable, Iterator


class SkillSet:
    """Insertion-ordered, case-insensitive set of skill terms.

    Two entries are the same skill when their lowercase forms are equal; the
    first spelling added is the one kept. Iteration follows insertion order,
    which is what "first N skills" truncation downstream relies on.
    """

    __slots__ = ("_skills",)

    def __init__(self, skills: Iterable[str] = ()):
        self._skills: dict[str, str] = {}
        for skill in skills:
            self.add(skill)

    def add(self, skill: str) -> None:
        self._skills.setdefault(skill.lower(), skill)

    def __contains__(self, skill: object) -> bool:
        return isinstance(skill, str) and skill.lower() in self._skills

    def __iter__(self) -> Iterator[str]:
        return iter(self._skills.values())

    def __len__(self) -> int:
        return len(self._skills)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, SkillSet):
            return NotImplemented
        return self._skills.keys() == other._skills.keys()

    __hash__ = None

    def __repr__(self) -> str:
        return f"SkillSet({list(self)!r})"

    def intersection(self, other: "SkillSet") -> "SkillSet":
        """Skills present in both, keeping this set's spelling and order."""
        return SkillSet(s for s in self if s in other)

    def difference(self, other: "SkillSet") -> "SkillSet":
        """Skills in this set that are not in ``other``, in this set's order."""
        return SkillSet(s for s in self if s not in other)

    def union(self, other: "SkillSet") -> "SkillSet":
        return SkillSet([*self, *other])

    __and__ = intersection
    __sub__ = difference
    __or__ = union

    def isdisjoint(self, other: "SkillSet") -> bool:
        return not any(s in other for s in self)

    def issubset(self, other: "SkillSet") -> bool:
        return all(s in other for s in self)

    def first(self, n: int) -> list[str]:
        return list(self)[:n]

    def to_list(self) -> list[str]:
        return list(self)
