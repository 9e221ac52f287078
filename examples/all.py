#
# Run with:
#
#     rye run python3 -m examples.all
#

from examples import fnv1_example
from examples import fnv1a_example

if __name__ == "__main__":
    fnv1_example.example()
    fnv1a_example.example()
