#
# Run with:
#
#     rye run python3 -m examples.fnv1_example
#

import fnvfold


def example():
    data = "asdfasdfasdfasdf".encode("utf-8")

    for length in (32, 64, 19, 1019):
        print(f"fnv1/{length}: {fnvfold.fnv1(data, length).hex()}")


if __name__ == "__main__":
    example()
