"""Base class of scene objects and the registry that builds them by name."""

from __future__ import annotations

from abc import ABC, abstractmethod
from enum import IntEnum
from typing import Callable, TypeVar

from noripath.properties import NoriError, PropertyList


class ClassType(IntEnum):
    """The role an object plays in a scene."""

    SCENE = 0
    MESH = 1
    BSDF = 2
    PHASE_FUNCTION = 3
    EMITTER = 4
    MEDIUM = 5
    CAMERA = 6
    INTEGRATOR = 7
    SAMPLER = 8
    TEST = 9
    RECONSTRUCTION_FILTER = 10


_TYPE_NAMES = {
    ClassType.SCENE: "scene",
    ClassType.MESH: "mesh",
    ClassType.BSDF: "bsdf",
    ClassType.EMITTER: "emitter",
    ClassType.CAMERA: "camera",
    ClassType.INTEGRATOR: "integrator",
    ClassType.SAMPLER: "sampler",
    ClassType.TEST: "test",
}


def class_type_name(class_type: ClassType) -> str:
    """Turn a class type into a human-readable name."""
    return _TYPE_NAMES.get(class_type, "<unknown>")


class NoriObject(ABC):
    """An instance that is part of a scene description."""

    @property
    @abstractmethod
    def class_type(self) -> ClassType:
        """The kind of object this instance provides."""

    @abstractmethod
    def __str__(self) -> str:
        """A brief summary of the instance."""

    def add_child(self, child: NoriObject) -> None:
        """Attach a child object; by default no children are supported."""
        raise NoriError(
            f"{type(self).__name__}.add_child(<{class_type_name(child.class_type)}>)"
            " is not supported!"
        )

    def set_parent(self, parent: NoriObject) -> None:
        """Be told about the parent object; by default nothing happens."""

    def activate(self) -> None:
        """Finish setting up once all children are attached."""
        raise NoriError(
            f"{type(self).__name__}.activate() is not supported for objects of "
            f"type <{class_type_name(self.class_type)}>!"
        )


class Emitter(NoriObject):
    """Superclass of all emitters."""

    @property
    def class_type(self) -> ClassType:
        return ClassType.EMITTER


Constructor = Callable[[PropertyList], NoriObject]
_T = TypeVar("_T")

_constructors: dict[str, Constructor] = {}


def register_class(name: str) -> Callable[[_T], _T]:
    """Class decorator registering a constructor under ``name``."""

    def decorator(constructor: _T) -> _T:
        _constructors[name] = constructor  # type: ignore[assignment]
        return constructor

    return decorator


def create_instance(name: str, properties: PropertyList) -> NoriObject:
    """Build the object registered under ``name`` from ``properties``."""
    try:
        constructor = _constructors[name]
    except KeyError:
        raise NoriError(
            f'A constructor for class "{name}" could not be found!'
        ) from None
    return constructor(properties)