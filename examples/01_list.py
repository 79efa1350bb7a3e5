from __future__ import annotations

from _infra import banner, run

from chainbind import bind_chain_seq, bind_seq, unit_seq
from chainbind.samples import faces, flags, fruits


def main() -> None:
    banner("01_list: bind flattens one level")

    start = unit_seq("start")
    print("start -> fruits")
    print(bind_seq(start, fruits))

    print("start -> fruits -> faces -> flags")
    print(bind_seq(bind_seq(bind_seq(start, fruits), faces), flags))

    banner("01_list: chain bind")
    start2 = unit_seq("start2")
    print(f"bind_chain_seq(['start2'], fruits): {bind_chain_seq(start2, fruits)}")
    print(f"bind_chain_seq(['start2'], fruits, faces): {bind_chain_seq(start2, fruits, faces)}")
    print(
        "bind_chain_seq(['start2'], fruits, faces, flags): "
        f"{bind_chain_seq(start2, fruits, faces, flags)}"
    )


if __name__ == "__main__":
    run(main)
