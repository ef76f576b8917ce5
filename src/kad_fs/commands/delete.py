from . import SubCommand

class Delete(SubCommand):
    """Delete the value at a key. Deleting a missing key is not an error."""

    def main(self, key: str) -> int:
        return self.execute(self.delete_key(key))

    async def delete_key(self, key: str) -> int:
        async with self.store().open() as store:
            await store.delete(key)
        print(f"Deleted key {key!r}")
        return 0
