# Command-line interface
import requests

from config import DEFAULT_CATEGORY_FILTER
from logic.services import ShoppingList
from mocks.server import MockServer

USAGE = {
    "add": "Usage: add <name> <category>",
    "toggle": "Usage: toggle <id>",
    "delete": "Usage: delete <id>",
    "filter": "Usage: filter <category>",
}


def render_item(item):
    """
    Renders one item with its cart and delete buttons.
    """
    cart_label = "Remove From Cart" if item.is_in_cart else "Add to Cart"
    return f"{item.id}. {item.name} ({item.category}) [{cart_label}] [Delete]"


def render_list(shopping_list, category=DEFAULT_CATEGORY_FILTER):
    return "\n".join(render_item(item) for item in shopping_list.visible_items(category))


def handle_command(shopping_list, command):
    """
    Handles user commands.
    """
    parts = command.split()
    if not parts:
        return
    action = parts[0]

    try:
        if action == "list":
            print(render_list(shopping_list))
        elif action == "add":
            if len(parts) != 3:
                print(USAGE[action])
                return
            item = shopping_list.add_item(parts[1], parts[2])
            print(render_item(item))
        elif action in ("toggle", "delete"):
            if len(parts) != 2:
                print(USAGE[action])
                return
            item_id = int(parts[1])
            if action == "toggle":
                print(render_item(shopping_list.toggle_cart(item_id)))
            else:
                shopping_list.delete_item(item_id)
                print(f"Deleted item {item_id}.")
        elif action == "filter":
            if len(parts) != 2:
                print(USAGE[action])
                return
            print(render_list(shopping_list, parts[1]))
        else:
            print("Unknown command.")
    except requests.exceptions.RequestException as e:
        print(f"An HTTP error occurred: {e}")
    except ValueError as e:
        print(f"A value error occurred: {e}")


def main():
    with MockServer() as server:
        shopping_list = ShoppingList(session=server.session, base_url=server.base_url)
        shopping_list.load()
        while True:
            user_input = input("Enter command (e.g., 'list', 'add Milk Dairy', 'toggle 1', 'delete 2', 'filter Dairy', 'exit'): ")
            if user_input.lower() == "exit":
                break
            handle_command(shopping_list, user_input)


if __name__ == "__main__":
    main()
