import sys

from kad_fs.errors import NotFound

from . import SubCommand

class Get(SubCommand):
    """Print the value stored at a key."""

    def main(self, key: str) -> int:
        return self.execute(self.fetch(key))

    async def fetch(self, key: str) -> int:
        async with self.store().open() as store:
            try:
                value = await store.get(key)
            except NotFound:
                print(f"Key {key!r} not found", file=sys.stderr)
                return 1
        print(value)
        return 0
