from __future__ import annotations

from _infra import banner, run

from chainbind import bind_chain_maybe, bind_maybe, unwrap_or
from chainbind.samples import add1, divide_by_2, divide_by_3, maybe_integer, multiply_by_2
from kungfu import Option


def show(maybe: Option[int]) -> str:
    return f"MaybeInteger of {unwrap_or(maybe, None)}"


def main() -> None:
    banner("02_maybe: Nothing short-circuits")

    n1, n2 = maybe_integer(8), maybe_integer(3.14)
    print(f"{show(n1)} -> add1 -> multiply_by_2 = {show(bind_maybe(bind_maybe(n1, add1), multiply_by_2))}")
    print(f"{show(n2)} -> add1 = {show(bind_maybe(n2, add1))}")
    print(f"{show(n1)} -> add1 -> divide_by_2 = {show(bind_maybe(bind_maybe(n1, add1), divide_by_2))}")
    print(f"{show(n1)} -> add1 -> divide_by_3 = {show(bind_maybe(bind_maybe(n1, add1), divide_by_3))}")

    banner("02_maybe: chain bind")
    print(f"bind_chain_maybe({show(n1)}, add1, multiply_by_2) = {show(bind_chain_maybe(n1, add1, multiply_by_2))}")
    print(f"bind_chain_maybe({show(n2)}, add1, multiply_by_2) = {show(bind_chain_maybe(n2, add1, multiply_by_2))}")
    result = bind_chain_maybe(n1, add1, multiply_by_2, divide_by_3, divide_by_2)
    print(f"bind_chain_maybe({show(n1)}, add1, multiply_by_2, divide_by_3, divide_by_2) = {show(result)}")


if __name__ == "__main__":
    run(main)
