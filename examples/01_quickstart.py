from __future__ import annotations

from _infra import banner, run

from lazyseq import EmptySequenceError, Optional, seq


def main() -> None:
    banner("01_quickstart: build lazily, evaluate once")

    pipeline = (
        seq.infinite()
        .map(lambda n: n * n)
        .filter(lambda sq: sq % 2 == 1)
        .take(5)
    )
    print("odd squares:", pipeline.to_array())
    print("sum:", seq.sum(pipeline), "average:", seq.average(pipeline))

    words = seq.of(["pear", "apple", "plum", "avocado", "cherry", "apricot"])
    for group in words.group_by(lambda w: w[0]).to_array():
        print(f"{group.key}: {seq.join(group.values.sort(), ', ')}")

    labelled = words.zip(seq.infinite(), lambda w, i: f"{i}. {w}").to_array()
    print("\n".join(labelled))

    try:
        seq.max(seq.empty())
    except EmptySequenceError as e:
        print(f"error: {e}")

    first_long = words.filter(lambda w: len(w) > 10).first_optional()
    print("first long word:", first_long.value_or_default("<none>"))
    print("first word:", Optional.of(words.first()).map(str.upper).value)


if __name__ == "__main__":
    run(main)
