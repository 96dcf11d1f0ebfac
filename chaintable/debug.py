from .shared import printf
from .table import CHAIN_LINK, EMPTY_SLOT_MESSAGE, SLOT_HEADER, HashTable


def print_table(table: HashTable, name: str):
    printf("== {0:s} ==\n", name)
    printf("{0:s}\n", table.to_diagnostic_string())


def print_chain(table: HashTable, index: int):
    values = table.chain(index)
    printf(SLOT_HEADER, index)
    if values:
        printf("{0:s}\n", CHAIN_LINK.join(str(value) for value in values))
    else:
        printf("{0:s}\n", EMPTY_SLOT_MESSAGE)


def verify_table(table: HashTable) -> list[str]:
    """Recount the table from its slots and report every broken invariant."""
    problems = []

    occupied = 0
    total = 0
    for index in range(table.capacity):
        values = table.chain(index)
        if values:
            occupied += 1
        total += len(values)

        for value in values:
            expected = abs(hash(value)) % table.capacity
            if expected != index:
                problems.append(
                    "{0!r} found in slot {1:d}, belongs in slot {2:d}".format(
                        value, index, expected
                    )
                )

    if occupied != table.occupied_slots:
        problems.append(
            "occupied slots is {0:d}, counted {1:d}".format(
                table.occupied_slots, occupied
            )
        )
    if total != table.total_entries:
        problems.append(
            "total entries is {0:d}, counted {1:d}".format(table.total_entries, total)
        )
    if table.load_factor != occupied / table.capacity:
        problems.append(
            "load factor is {0:f}, expected {1:f}".format(
                table.load_factor, occupied / table.capacity
            )
        )

    return problems
