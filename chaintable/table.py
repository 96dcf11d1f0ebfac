from dataclasses import dataclass
from typing import Any, Iterator

from .shared import printf_err


DEFAULT_CAPACITY = 4
LOAD_FACTOR_THRESHOLD = 0.75
GROWTH_FACTOR = 2

SLOTS_INFORMATION = "Slots occupied / capacity: {0:d}/{1:d}"
ENTRIES_INFORMATION = "\nTotal number of entries: {0:d}"
SLOT_HEADER = "[ {0:2d} ]: "
EMPTY_SLOT_MESSAGE = "empty"
CHAIN_LINK = " --> "


_debug_trace_resize = False


def set_debug_trace_resize(b: bool):
    global _debug_trace_resize
    _debug_trace_resize = b


class InvalidValueError(ValueError):
    pass


@dataclass(eq=False)
class Entry:
    value: Any
    next: "Entry | None" = None


Slots = list[Entry | None]


def _new_slots(capacity: int) -> Slots:
    return [None] * capacity


def _hash_of(value: Any) -> int:
    if value is None:
        raise InvalidValueError("None is not a valid value", value)
    try:
        return abs(hash(value))
    except TypeError as e:
        raise InvalidValueError("unhashable value", value) from e


class HashTable:
    """Set of hashable values kept in separately chained buckets.

    The slot list grows by `GROWTH_FACTOR` whenever one more occupied slot
    would push the load factor (occupied slots / capacity) above the
    threshold. Entries are never removed.
    """

    def __init__(
        self,
        capacity: int = DEFAULT_CAPACITY,
        *,
        load_factor_threshold: float = LOAD_FACTOR_THRESHOLD,
        integer_load_check: bool = False,
        identity_equality: bool = False,
    ) -> None:
        if capacity <= 0:
            capacity = DEFAULT_CAPACITY
        if load_factor_threshold <= 0:
            raise ValueError("load factor threshold must be positive", load_factor_threshold)

        self._slots = _new_slots(capacity)
        self._occupied_slots = 0
        self._total_entries = 0
        self._load_factor = 0.0

        self.load_factor_threshold = load_factor_threshold
        self.integer_load_check = integer_load_check
        self.identity_equality = identity_equality

    @property
    def capacity(self) -> int:
        return len(self._slots)

    @property
    def occupied_slots(self) -> int:
        return self._occupied_slots

    @property
    def total_entries(self) -> int:
        return self._total_entries

    @property
    def load_factor(self) -> float:
        return self._load_factor

    def add(self, value: Any):
        code = _hash_of(value)

        if not self.add_load_check():
            self.resize()

        entry = Entry(value)
        position = code % self.capacity
        head = self._slots[position]
        if head is None:
            self._occupied_slots += 1
        else:
            # new entry becomes the head of the existing chain
            entry.next = head
        self._slots[position] = entry

        self._total_entries += 1
        self.reload()

    def add_load_check(self) -> bool:
        if self.integer_load_check:
            # truncates to 0 until the table is full
            load = (self._occupied_slots + 1) // self.capacity
        else:
            load = (self._occupied_slots + 1) / self.capacity
        return load <= self.load_factor_threshold

    def reload(self):
        self._load_factor = self._occupied_slots / self.capacity

    def resize(self, growth_factor: int = GROWTH_FACTOR):
        """Grow the slot list and rehash every entry into it.

        Entries are relinked, not copied. Each one is prepended to its new
        chain, so entries that share a chain after the resize come out in the
        reverse of the order they were visited in.
        """
        if (
            isinstance(growth_factor, bool)
            or not isinstance(growth_factor, int)
            or growth_factor < 1
        ):
            raise ValueError("growth factor must be an integer >= 1", growth_factor)

        old_capacity = self.capacity
        new_capacity = old_capacity * growth_factor
        new_slots = _new_slots(new_capacity)

        for head in self._slots:
            cursor = head
            while cursor is not None:
                next_entry = cursor.next
                index = abs(hash(cursor.value)) % new_capacity
                cursor.next = new_slots[index]
                new_slots[index] = cursor
                cursor = next_entry

        self._slots = new_slots
        self._occupied_slots = sum(1 for head in new_slots if head is not None)
        self.reload()

        if _debug_trace_resize:
            printf_err(
                "resize {0:d} -> {1:d} ({2:d} entries, {3:d} slots occupied)\n",
                old_capacity,
                new_capacity,
                self._total_entries,
                self._occupied_slots,
            )

    def contains(self, target: Any) -> bool:
        cursor = self._slots[_hash_of(target) % self.capacity]
        while cursor is not None:
            if self.identity_equality:
                if cursor.value is target:
                    return True
            elif cursor.value is target or cursor.value == target:
                return True
            cursor = cursor.next
        return False

    def chain(self, index: int) -> list[Any]:
        if not 0 <= index < self.capacity:
            raise IndexError("slot index out of range", index)

        values = []
        cursor = self._slots[index]
        while cursor is not None:
            values.append(cursor.value)
            cursor = cursor.next
        return values

    def to_diagnostic_string(self) -> str:
        parts = [
            SLOTS_INFORMATION.format(self._occupied_slots, self.capacity),
            ENTRIES_INFORMATION.format(self._total_entries),
        ]
        for i in range(self.capacity):
            parts.append("\n" + SLOT_HEADER.format(i))
            values = self.chain(i)
            if values:
                parts.append(CHAIN_LINK.join(str(value) for value in values))
            else:
                parts.append(EMPTY_SLOT_MESSAGE)
        return "".join(parts)

    def __contains__(self, target: Any) -> bool:
        return self.contains(target)

    def __len__(self) -> int:
        return self._total_entries

    def __iter__(self) -> Iterator[Any]:
        for i in range(self.capacity):
            yield from self.chain(i)

    def __str__(self) -> str:
        return self.to_diagnostic_string()
