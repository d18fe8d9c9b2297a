"""Basic usage example for linkforge."""

from linkforge import LinkForge, forge


def main() -> None:
    """Demonstrate list operations."""
    print("=== Building ===\n")
    lst = forge([1, 2, 3])
    lst.push(4).unshift(0)
    print(f"List: {lst}")
    print(f"Length: {lst.length}\n")

    print("=== Ends ===\n")
    print(f"pop() -> {lst.pop()}")
    print(f"shift() -> {lst.shift()}")
    print(f"Now: {lst.to_list()}\n")

    print("=== Indexed access ===\n")
    print(f"at(0) -> {lst.at(0)}")
    print(f"at(-1) -> {lst.at(-1)}  (walks back from the tail, which is position 0)")
    python_style = LinkForge(lst, negative_index="python")
    print(f"at(-1) with python policy -> {python_style.at(-1)}\n")

    print("=== Transformations ===\n")
    squares = lst.map(lambda value, index: value * value)
    evens = lst.filter(lambda value, index: value % 2 == 0)
    total = lst.reduce(lambda acc, value, index, original: acc + value, 0)
    print(f"map -> {squares.to_list()}")
    print(f"filter -> {evens.to_list()}")
    print(f"reduce -> {total}")
    print(f"concat -> {lst.concat(squares).to_list()}")
    print(f"reverse -> {lst.reverse().to_list()}")
    print(f"to_set -> {forge([1, 1, 2]).to_set()}")


if __name__ == "__main__":
    main()
