"""Minimal synchronous observer primitives used by the model classes.

All notifications are delivered immediately, in the order in which the
listeners were registered, on the thread that made the change.
"""

from collections import abc
from typing import (
    Any,
    Callable,
    Generic,
    Iterable,
    List,
    Optional,
    Sequence,
    TypeVar,
    Union,
    overload,
)

_T = TypeVar("_T")

PropertyListener = Callable[[Any, Any], None]
"""Called with the new and the old value of a `Property`."""


class Emitter:
    """Notifies listeners whenever `emit` is called."""

    def __init__(self) -> None:
        self.__listeners: List[Callable[..., None]] = list()

    def add_listener(self, listener: Callable[..., None]) -> None:
        self.__listeners.append(listener)

    def remove_listener(self, listener: Callable[..., None]) -> None:
        if listener not in self.__listeners:
            raise ValueError("Listener is not registered to this emitter")
        self.__listeners.remove(listener)

    def has_listener(self, listener: Callable[..., None]) -> bool:
        return listener in self.__listeners

    def remove_all_listeners(self) -> None:
        self.__listeners.clear()

    def emit(self, *args: Any) -> None:
        for listener in list(self.__listeners):
            listener(*args)


class Property(Generic[_T]):
    """Observable value.

    Listeners are called with :code:`(new_value, old_value)` each time the
    value changes. Setting a value that is equal to the current one does not
    notify anyone. An optional :code:`validator` rejects values by returning
    `False`, in which case a `ValueError` is raised and the value is kept.
    """

    def __init__(
        self,
        value: _T,
        validator: Optional[Callable[[_T], bool]] = None,
    ) -> None:
        self.__validator = validator
        self._check(value)
        self.__initial_value = value
        self.__value = value
        self.__listeners: List[PropertyListener] = list()
        self.__is_deferred = False
        self.__deferred_old_value: Optional[_T] = None

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}({self.__value!r})"

    @property
    def value(self) -> _T:
        return self.__value

    @value.setter
    def value(self, value: _T) -> None:
        self.set(value)

    @property
    def initial_value(self) -> _T:
        return self.__initial_value

    def get(self) -> _T:
        return self.__value

    def set(self, value: _T) -> None:
        self._update(value)

    def reset(self) -> None:
        self.set(self.__initial_value)

    def link(self, listener: PropertyListener) -> None:
        """Register a listener and call it right away with the current value.

        The initial call receives `None` as the old value.
        """
        self.__listeners.append(listener)
        listener(self.__value, None)

    def lazy_link(self, listener: PropertyListener) -> None:
        """Register a listener that is only called on the next change."""
        self.__listeners.append(listener)

    def unlink(self, listener: PropertyListener) -> None:
        if listener not in self.__listeners:
            raise ValueError("Listener is not linked to this property")
        self.__listeners.remove(listener)

    def unlink_all(self) -> None:
        self.__listeners.clear()

    def has_listener(self, listener: PropertyListener) -> bool:
        return listener in self.__listeners

    def _check(self, value: _T) -> None:
        if self.__validator is not None and not self.__validator(value):
            raise ValueError(
                f"Value {value!r} is not allowed for this "
                f"{self.__class__.__name__}"
            )

    @property
    def is_deferred(self) -> bool:
        return self.__is_deferred

    def set_deferred(self, deferred: bool) -> None:
        """Hold back notifications until deferral is switched off again.

        When the deferral ends, listeners are notified once, and only if the
        value differs from the one it had when the deferral started.
        """
        if deferred:
            if not self.__is_deferred:
                self.__deferred_old_value = self.__value
            self.__is_deferred = True
            return
        if not self.__is_deferred:
            return
        self.__is_deferred = False
        old_value = self.__deferred_old_value
        self.__deferred_old_value = None
        if self.__value != old_value:
            self.__notify(self.__value, old_value)

    def _update(self, value: _T) -> None:
        self._check(value)
        old_value = self.__value
        if value == old_value:
            return
        self.__value = value
        if not self.__is_deferred:
            self.__notify(value, old_value)

    def __notify(self, value: _T, old_value: Optional[_T]) -> None:
        for listener in list(self.__listeners):
            listener(value, old_value)


class DerivedProperty(Property[_T]):
    """Read-only `Property` that is computed from other properties.

    The :code:`derivation` is called with the values of the
    :code:`dependencies` and is re-evaluated each time one of them changes.
    """

    def __init__(
        self,
        dependencies: Sequence[Property],
        derivation: Callable[..., _T],
    ) -> None:
        self.__dependencies = tuple(dependencies)
        self.__derivation = derivation
        super().__init__(self.__compute())
        for dependency in self.__dependencies:
            dependency.lazy_link(self.__on_dependency_changed)

    def __compute(self) -> _T:
        return self.__derivation(*(d.value for d in self.__dependencies))

    def __on_dependency_changed(  # pylint: disable=unused-argument
        self, value: Any, old_value: Any
    ) -> None:
        self._update(self.__compute())

    def set(self, value: _T) -> None:
        raise AttributeError(f"{self.__class__.__name__} is read-only")

    def dispose(self) -> None:
        """Stop listening to the dependencies."""
        for dependency in self.__dependencies:
            if dependency.has_listener(self.__on_dependency_changed):
                dependency.unlink(self.__on_dependency_changed)


class ObservableList(abc.MutableSequence, Generic[_T]):
    """A `list` that announces which items are added and removed.

    The `length_property` is updated before the `item_added_emitter` or
    `item_removed_emitter` fire, so listeners see the new length.
    """

    def __init__(self, items: Optional[Iterable[_T]] = None) -> None:
        self.__items: List[_T] = list()
        self.__length = Property(0)
        self.item_added_emitter = Emitter()
        self.item_removed_emitter = Emitter()
        if items is not None:
            self.extend(items)

    @property
    def length_property(self) -> Property[int]:
        return self.__length

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}({self.__items!r})"

    def __eq__(self, other: object) -> bool:
        if isinstance(other, (ObservableList, list)):
            return list(self) == list(other)
        return NotImplemented

    def __len__(self) -> int:
        return len(self.__items)

    @overload
    def __getitem__(self, index: int) -> _T:
        ...

    @overload
    def __getitem__(self, index: slice) -> List[_T]:
        ...

    def __getitem__(self, index: Union[int, slice]) -> Union[_T, List[_T]]:
        return self.__items[index]

    def __setitem__(self, index: int, item: _T) -> None:  # type: ignore
        if not isinstance(index, int):
            raise TypeError("ObservableList only supports integer indices")
        old_item = self.__items[index]
        self.__items[index] = item
        self.item_removed_emitter.emit(old_item)
        self.item_added_emitter.emit(item)

    def __delitem__(self, index: int) -> None:  # type: ignore
        if not isinstance(index, int):
            raise TypeError("ObservableList only supports integer indices")
        item = self.__items.pop(index)
        self.__length.set(len(self.__items))
        self.item_removed_emitter.emit(item)

    def insert(self, index: int, item: _T) -> None:
        self.__items.insert(index, item)
        self.__length.set(len(self.__items))
        self.item_added_emitter.emit(item)
