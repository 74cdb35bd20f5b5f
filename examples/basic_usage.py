"""Basic usage example for chainlist."""

import argparse
import logging

from chainlist import IndexOutOfRangeError, LinkedList


def main(argv: list[str] | None = None) -> None:
    """Demonstrate every list operation in sequence."""
    parser = argparse.ArgumentParser(description=__doc__)
    parser.add_argument("--verbose", action="store_true", help="log structural changes")
    args = parser.parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    print("=== Basic LinkedList Example ===\n")

    lst = LinkedList[str]()
    lst.append("A")
    print(lst)

    for value in ("B", "C", "D"):
        lst.append(value)
    print(lst)

    print(f"Size: {lst.size}")
    print(f"Head: {lst.head!r}")
    print(f"Tail: {lst.tail!r}")
    print(f"At 3: {lst.at(3)!r}\n")

    lst.pop()
    print(f"After pop: {lst}")
    print(f"Contains 'A': {lst.contains('A')}")
    print(f"Contains '1': {lst.contains('1')}")
    for value in ("A", "B", "C"):
        print(f"Find {value!r}: {lst.find(value)}")

    lst.insert_at(1, "J")
    print(f"\nAfter insert_at(1, 'J'): {lst}")
    for index in (6, -1):
        try:
            lst.insert_at(index, "J")
        except IndexOutOfRangeError as e:
            print(f"insert_at({index}) failed: {e}")

    lst.remove_at(0)
    print(f"After remove_at(0): {lst}")
    lst.remove_at(1)
    print(f"After remove_at(1): {lst}")
    try:
        lst.remove_at(3)
    except IndexOutOfRangeError as e:
        print(f"remove_at(3) failed: {e}")
    print(f"Final list: {lst}")


if __name__ == "__main__":
    main()
