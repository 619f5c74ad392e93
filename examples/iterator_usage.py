"""Editing an UnrolledList in place through its iterator."""

from unrolledlist import UnrolledList


def main() -> None:
    """Walk the list, replacing, deleting and inserting as we go."""
    lst = UnrolledList(range(1, 13), node_capacity=4)
    print(f"Start:    {lst.render()}")

    it = lst.iterator()
    while it.has_next():
        value = it.next()
        if value % 3 == 0:
            it.delete()
        elif value % 2 == 0:
            it.set(value * 10)
        else:
            it.insert(-value)
        print(f"  after {value:>2}: {lst.render(it)}")

    print(f"Final:    {lst.render()}")

    # Walk back to the start
    while it.has_previous():
        it.previous()
    print(f"Cursor at start: {lst.render(it)}")


if __name__ == "__main__":
    main()
