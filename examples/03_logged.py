from __future__ import annotations

from _infra import banner, run

from chainbind import bind_chain_logged, bind_logged, unit_logged
from chainbind.samples import to_exponential, to_fixed


def main() -> None:
    banner("03_logged: value + log")

    print(unit_logged(987))
    print(to_fixed("555"))

    start = unit_logged("12.34")
    print(bind_logged(start, to_fixed))
    print(bind_logged(start, to_exponential))
    print(bind_logged(bind_logged(start, to_exponential), to_fixed))

    banner("03_logged: chain bind")
    result = bind_chain_logged(start, to_exponential, to_fixed)
    print(f"value: {result.value}")
    print(f"log:\n{result.log.render()}")


if __name__ == "__main__":
    run(main)
