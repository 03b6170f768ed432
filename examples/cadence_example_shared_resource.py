"""Example: several tests sharing one in-memory store.

Run with:
    python -m cadence examples.cadence_example_shared_resource

Run only the lookup tests:
    python -m cadence examples.cadence_example_shared_resource -o "inventory.looks up*"
"""

import asyncio

from cadence import Resource, SharedResourceSuite, expect, ignore


class Inventory:
    def __init__(self) -> None:
        self.items: dict[str, int] = {}
        self.lock = asyncio.Lock()

    async def add(self, name: str, count: int) -> int:
        async with self.lock:
            self.items[name] = self.items.get(name, 0) + count
            return self.items[name]

    def close(self) -> None:
        self.items.clear()


def open_inventory() -> Inventory:
    inventory = Inventory()
    inventory.items.update({"apples": 3, "pears": 1})
    return inventory


inventory = SharedResourceSuite(
    "inventory",
    resource=Resource.make(open_inventory, Inventory.close),
    max_parallelism=4,
)


@inventory.test("looks up apples")
def _(store: Inventory):
    return expect(store.items["apples"] >= 3, "apples were seeded")


@inventory.test("looks up pears")
def _(store: Inventory):
    return expect("pears" in store.items) & expect(store.items["pears"] >= 1)


@inventory.test("adds concurrently")
async def _(store: Inventory, log):
    totals = await asyncio.gather(*(store.add("plums", 1) for _ in range(10)))
    log.info("plum totals", last=max(totals))
    return expect(max(totals) == 10, "every add was counted")


@inventory.test("exports to csv")
def _(store: Inventory):
    ignore("csv export not wired up yet")
