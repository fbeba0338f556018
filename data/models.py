# Data models

class Item:
    """
    Represents a shopping list entry.
    """
    def __init__(self, id, name, category, is_in_cart=False):
        self.id = id
        self.name = name
        self.category = category
        self.is_in_cart = is_in_cart

    def to_dict(self):
        return {
            "id": self.id,
            "name": self.name,
            "category": self.category,
            "isInCart": self.is_in_cart,
        }

    @classmethod
    def from_dict(cls, data):
        return cls(
            id=data["id"],
            name=data["name"],
            category=data["category"],
            is_in_cart=bool(data.get("isInCart", False)),
        )

    def __eq__(self, other):
        if not isinstance(other, Item):
            return NotImplemented
        return self.to_dict() == other.to_dict()

    def __repr__(self):
        return (f"Item(id={self.id}, name='{self.name}', "
                f"category='{self.category}', is_in_cart={self.is_in_cart})")

if __name__ == "__main__":
    # Example usage
    item = Item(1, "Yogurt", "Dairy")
    print(item)
    print(item.to_dict())
