from abc import ABC, abstractmethod
from dataclasses import dataclass

from membermatch import (
    can_throw,
    declared_in,
    describe_methods,
    is_constructor,
    is_public,
    is_static,
    is_synthetic,
    name_starts_with,
    not_,
    select,
    takes_arguments,
    throws,
)


@dataclass
class Order:
    number: str
    total: int


class Repository(ABC):
    @abstractmethod
    def save(self, order: Order) -> None: ...

    def describe(self) -> str:
        return type(self).__name__


class FileRepository(Repository):
    def __init__(self, path: str):
        self.path = path

    @throws(OSError)
    def save(self, order: Order) -> None:
        with open(self.path, "a", encoding="utf-8") as f:
            f.write(f"{order.number},{order.total}\n")

    @throws(FileNotFoundError)
    def get_order(self, number: str) -> Order:
        raise FileNotFoundError(number)

    def get_count(self) -> int:
        return 0

    def _rotate(self) -> None:
        pass

    @staticmethod
    def from_env() -> "FileRepository":
        return FileRepository("orders.csv")


# Build once, reuse for every candidate: cheap modifier checks first
getters = is_public() & name_starts_with("get") & not_(is_static())
overrides = declared_in(Repository) & not_(is_constructor())
io_bound = can_throw(FileNotFoundError)
no_arg_getters = getters & takes_arguments()


def main() -> None:
    print("Getters:")
    for d in select(getters, FileRepository):
        print(f"  {d}")

    print("Zero-argument getters:")
    for d in select(no_arg_getters, FileRepository):
        print(f"  {d}")

    print("Repository overrides:")
    for d in select(overrides, FileRepository):
        print(f"  {d}")

    print("May raise FileNotFoundError:")
    for d in select(io_bound, FileRepository):
        print(f"  {d} raises {sorted(e.__name__ for e in d.exception_types)}")

    print("Generated by @dataclass:")
    for d in describe_methods(Order):
        if is_synthetic().matches(d):
            print(f"  {d}")


if __name__ == "__main__":
    main()
