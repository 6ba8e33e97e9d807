"""
index_properties — Hello World

Every property has a name, a type and a default. Populate a store
during setup, then look values up during evaluation.
"""

from index_properties import CATALOGUE, InMemoryStore
from index_properties.properties import field, hitcollector, matchphase, rank, summary, type_tags


def main():
    # ──────────────────────────────────────
    #  1. Setup phase: populate the store
    # ──────────────────────────────────────
    store = InMemoryStore(
        {
            "vespa.rank.firstphase": "nativeRank",
            "vespa.rank.secondphase": "myModel",
            "vespa.hitcollector.heapsize": "200",
            "vespa.matchphase.degradation.attribute": "popularity",
        }
    )

    for feature in ("fieldMatch(title)", "bm25(body)"):
        store.set("vespa.summary.feature", feature)

    field.IS_FILTER_FIELD.mark(store, "category")
    type_tags.ATTRIBUTE.set(store, "embedding", "tensor<float>(x[128])")

    # ──────────────────────────────────────
    #  2. Evaluation phase: typed lookups
    # ──────────────────────────────────────
    print("=== Rank setup ===\n")
    print(f"  first phase:  {rank.FIRST_PHASE.lookup(store)}")
    print(f"  second phase: {rank.SECOND_PHASE.lookup(store)}")
    print(f"  summary:      {summary.FEATURE.lookup(store)}")

    print("\n=== Hit collector ===\n")
    print(f"  heap size:  {hitcollector.HEAP_SIZE.lookup(store)}")
    print(f"  array size: {hitcollector.ARRAY_SIZE.lookup(store)} (default)")

    print("\n=== Match phase ===\n")
    print(f"  degrade on: {matchphase.DEGRADATION_ATTRIBUTE.lookup(store)}")
    print(f"  max hits:   {matchphase.DEGRADATION_MAX_HITS.lookup(store, 5000)} (caller default)")

    print("\n=== Fields ===\n")
    for name in ("title", "category"):
        weight = field.FIELD_WEIGHT.lookup(store, name)
        is_filter = field.IS_FILTER_FIELD.check(store, name)
        print(f"  {name}: weight={weight} filter={is_filter}")
    print(f"  embedding type: {type_tags.ATTRIBUTE.lookup(store, 'embedding')}")

    # ──────────────────────────────────────
    #  3. Everything at once
    # ──────────────────────────────────────
    print("\n=== Explicitly set ===\n")
    for key, value in CATALOGUE.resolve_all(store, include_defaults=False).items():
        print(f"  {key} = {value!r}")


if __name__ == "__main__":
    main()
