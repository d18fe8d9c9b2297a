"""Example building a list from an asynchronous producer."""

import asyncio
from collections.abc import AsyncIterator

from linkforge import LinkForge


async def readings(count: int) -> AsyncIterator[float]:
    """Simulate a sensor that emits one reading at a time."""
    for i in range(count):
        await asyncio.sleep(0.05)
        yield 20.0 + i * 0.5


async def main() -> None:
    """Collect readings and summarise them."""
    print("Collecting readings...")
    lst = await LinkForge.from_async(readings(5))
    print(f"Readings: {lst.to_list()}")

    average = lst.reduce(lambda acc, value, index, original: acc + value / len(original), 0.0)
    print(f"Average: {average:.2f}")

    # Drop the warm-up reading
    lst.shift()
    print(f"After warm-up: {list(lst)}")


if __name__ == "__main__":
    asyncio.run(main())
