from . import SubCommand

class Put(SubCommand):
    """Store a value at a key, replacing any existing value."""

    def main(self, key: str, value: str) -> int:
        return self.execute(self.store_value(key, value))

    async def store_value(self, key: str, value: str) -> int:
        async with self.store().open() as store:
            await store.put(key, value)
        print(f"Stored value at key {key!r}")
        return 0
