"""Pydantic field types for item references.

Models declare item fields with these types and read or write them as
reference strings:

    class Recipe(BaseModel):
        output: ItemStackField
        inputs: list[RecipeItemField]

    recipe = Recipe.model_validate_json('{"output": "stick#4", "inputs": ["plankWood"]}')
    dump_json(recipe)
"""

from typing import Annotated, Any, TypeVar

from pydantic import BaseModel, PlainSerializer, PlainValidator

from modcore.items.codec import item_stack_to_string, parse_item_stack, parse_recipe_item
from modcore.items.types import ItemStack

ModelT = TypeVar("ModelT", bound=BaseModel)


def _validate_recipe_item(value: Any) -> ItemStack | str | None:
    if value is None or isinstance(value, ItemStack):
        return value
    if not isinstance(value, str):
        raise ValueError(f"Expected an item reference string, got {type(value).__name__}")
    return parse_recipe_item(value)


def _serialize_recipe_item(value: ItemStack | str | None) -> str | None:
    if isinstance(value, ItemStack):
        return item_stack_to_string(value, damage=True, size=False)
    return value


def _validate_item_stack(value: Any) -> ItemStack | None:
    if value is None or isinstance(value, ItemStack):
        return value
    if not isinstance(value, str):
        raise ValueError(f"Expected an item reference string, got {type(value).__name__}")
    return parse_item_stack(value)


def _serialize_item_stack(value: ItemStack | None) -> str | None:
    return item_stack_to_string(value, damage=True, size=True)


# An ore name or a single item with damage
RecipeItemField = Annotated[
    ItemStack | str | None,
    PlainValidator(_validate_recipe_item),
    PlainSerializer(_serialize_recipe_item, return_type=str | None),
]

# An item stack with damage and size
ItemStackField = Annotated[
    ItemStack | None,
    PlainValidator(_validate_item_stack),
    PlainSerializer(_serialize_item_stack, return_type=str | None),
]


def dump_json(model: BaseModel) -> str:
    """Pretty-print a model as JSON."""
    return model.model_dump_json(indent=2)


def load_json(model_type: type[ModelT], data: str | bytes) -> ModelT:
    return model_type.model_validate_json(data)
