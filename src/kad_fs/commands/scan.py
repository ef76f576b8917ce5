import json

from . import SubCommand

class Scan(SubCommand):
    """Print every record in the store as one JSON object per line."""

    def main(self, *args) -> int:
        if args:
            print("This command does not take positional arguments")
            return 1
        return self.execute(self.dump())

    async def dump(self) -> int:
        async with self.store().open() as store:
            async for record in store.scan():
                print(json.dumps({"key": record.key, "value": record.value}, ensure_ascii=False))
        return 0
