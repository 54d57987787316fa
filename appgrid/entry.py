"""
Application entries shown in the grid.

An entry is identified by the component that launches it. Two entries with the
same component are the same item regardless of their title or flags, so the
component is what collections dedupe and remove by.
"""
from __future__ import annotations

import enum
import logging
from typing import Any, Iterable

import pydantic

logger = logging.getLogger(__name__)


class AppFlags(enum.IntFlag):
    DOWNLOADED = 1
    UPDATED_SYSTEM_APP = 2
    SYSTEM = 4

    @classmethod
    def from_names(cls, names: Iterable[str]) -> AppFlags:
        flags = cls(0)
        for name in names:
            try:
                flags |= cls[name.strip().upper().replace("-", "_")]
            except KeyError:
                raise ValueError(
                    "Unknown flag '{}' (choose from {})".format(
                        name, ", ".join(flag_names())
                    )
                )
        return flags


def flag_names() -> list[str]:
    return [flag.name.lower() for flag in AppFlags]


class ComponentName(pydantic.BaseModel):
    """Package and class of the activity that launches an entry"""

    package: str
    class_name: str

    class Config:
        frozen = True

    def flatten_to_string(self) -> str:
        return "{}/{}".format(self.package, self.class_name)

    def flatten_to_short_string(self) -> str:
        if self.class_name.startswith(self.package + "."):
            return "{}/{}".format(self.package, self.class_name[len(self.package):])
        return self.flatten_to_string()

    @classmethod
    def unflatten_from_string(cls, text: str) -> ComponentName:
        """Parse "package/class", where a class starting with "." is relative to the package"""
        package, sep, class_name = text.partition("/")
        if not sep or not package or not class_name:
            raise ValueError("Invalid component name '{}'".format(text))
        if class_name.startswith("."):
            class_name = package + class_name
        return cls(package=package, class_name=class_name)

    def __str__(self) -> str:
        return self.flatten_to_short_string()


class Entry(pydantic.BaseModel):
    component: ComponentName
    title: str
    flags: int = 0

    class Config:
        frozen = True

    @pydantic.field_validator("component", mode="before")
    @classmethod
    def _parse_component(cls, value: Any) -> Any:
        if isinstance(value, str):
            return ComponentName.unflatten_from_string(value)
        return value

    @pydantic.field_validator("flags", mode="before")
    @classmethod
    def _parse_flags(cls, value: Any) -> Any:
        if isinstance(value, (list, tuple)):
            return int(AppFlags.from_names(value))
        return value

    @property
    def app_flags(self) -> AppFlags:
        return AppFlags(self.flags)

    @property
    def identity(self) -> ComponentName:
        return self.component

    def same_item(self, other: Entry) -> bool:
        return self.component == other.component

    def copy_for_drag(self) -> Entry:
        return self.model_copy(deep=True)

    def __str__(self) -> str:
        return "{} ({})".format(self.title, self.component)


def dump_entries(label: str, entries: Iterable[Entry]) -> None:
    entries = list(entries)
    logger.debug("%s size=%d", label, len(entries))
    for entry in entries:
        logger.debug(
            "   title=\"%s\" component=%s flags=%s",
            entry.title,
            entry.component.flatten_to_string(),
            entry.flags,
        )
