#
# Run with:
#
#     rye run python3 -m examples.fnv1a_example
#

import fnvfold


def example():
    data = "asdfasdfasdfasdf".encode("utf-8")

    for length in (32, 64, 19, 1019):
        print(f"fnv1a/{length}: {fnvfold.fnv1a(data, length).hex()}")

    # strip the sign guard byte for a fixed width digest
    digest = fnvfold.fnv_int(data, 64, fnvfold.Variant.FNV1A)
    print(f"fnv1a/64 fixed: {digest.to_bytes(8, 'big').hex()}")


if __name__ == "__main__":
    example()
