"""
Example: Caching structured values in LinkedListLRU

Dicts compare by value, so lookups for a specific record go through a
matcher, and rendering goes through a formatter.
"""

from linked_lru import LinkedListLRU


def main():
    bolt = {"name": "Lightning Bolt", "cmc": 1}
    counterspell = {"name": "Counterspell", "cmc": 2}
    wrath = {"name": "Wrath of God", "cmc": 4}

    recent = LinkedListLRU(bolt, capacity=2)
    recent.access(counterspell)
    print(recent.render(lambda card: card["name"]))  # Counterspell -> Lightning Bolt

    recent.access(wrath)
    print(recent.render(lambda card: card["name"]))  # Wrath of God -> Counterspell

    cheap = recent.find(matcher=lambda card: card["cmc"] <= 2)
    print(f"Most recent cheap card: {cheap.render(lambda card: card['name'])}")

    head = recent.head
    predecessor = recent.find_predecessor(matcher=lambda card: card["cmc"] >= 4)
    if predecessor is None and head is not None and head.value["cmc"] >= 4:
        print("The expensive card is the most recently used")


if __name__ == "__main__":
    main()
