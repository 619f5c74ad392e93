"""Basic usage example for unrolledlist."""

import logging

from unrolledlist import UnrolledList


def main() -> None:
    """Demonstrate node packing, splitting and rebalancing."""
    # Show split/borrow/merge events
    logging.basicConfig(level=logging.DEBUG, format="%(name)s: %(message)s")

    lst = UnrolledList[str](node_capacity=4)

    print("=== Appending ===\n")
    for item in "ABCDE":
        lst.add(item)
    print(f"Nodes: {lst.render()}")
    print(f"Size: {lst.size()}\n")

    print("=== Inserting into a full node ===\n")
    lst.insert(1, "X")
    print(f"Nodes: {lst.render()}\n")

    print("=== Removing from the front ===\n")
    while len(lst) > 2:
        removed = lst.remove(0)
        print(f"  Removed {removed}: {lst.render()}")

    print("\n=== Sorting ===\n")
    lst.extend("QWERTY")
    lst.sort()
    print(f"Ascending:  {lst.render()}")
    lst.sort_reverse()
    print(f"Descending: {lst.render()}")


if __name__ == "__main__":
    main()
