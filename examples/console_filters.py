"""Example showing how console comparisons turn into filter queries.

Each comparison on an attribute handle returns a FilterHandle whose query
tree can be handed to a filter engine. Ordering comparisons only work on
numeric columns.
"""

from filter_bridge import Namespace, TypeCompatibilityError, ValueType


def main():
    print("filter_bridge - Console Filters Example")
    print("=" * 80)
    print()

    ns = Namespace()
    ns.add_column("age", ValueType.INTEGER)
    ns.add_column("name", ValueType.STRING)
    ns.add_column("weight", ValueType.DOUBLE, node=False)

    print("Range queries:")
    print("-" * 80)
    for handle in (ns.age > 30, ns.age >= 30, ns.age < 30, ns.weight <= 2.5):
        print(f"  {handle}")
    print()

    print("Equality and negation:")
    print("-" * 80)
    print(f"  {ns.name == 'Alice'}")
    print(f"  {ns.age != 30}")
    print(f"  {(ns.weight != 1.0).query.to_dict()}")
    print()

    print("Unsupported comparison:")
    print("-" * 80)
    try:
        ns.name > "Alice"
    except TypeCompatibilityError as exc:
        print(f"  {exc}")


if __name__ == "__main__":
    main()
