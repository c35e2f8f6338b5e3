"""
Menu item schemas (food and drink).

Both share BaseItem; ingredient names are title-cased and may arrive as a
list or a comma-separated string ("tomato, basil" -> ["Tomato", "Basil"]).
"""

from typing import Optional

from pydantic import AliasChoices, Field, model_validator

from ..base import ContractModel, check_range
from ..derive import derive
from ..enums import (
    Allergy,
    DrinkCategory,
    DrinkTemp,
    FoodCategory,
    FoodType,
    ItemSortOptions,
    SpiceLevel,
)
from ..registry import register_schema
from ..types import (
    IngredientList,
    NonNegativeInt,
    NonNegativeNumber,
    Percentage,
    PositiveInt,
    QueryBool,
    enum_list,
    upper_enum,
)
from .search import Page, SearchCriteria


class BaseItem(ContractModel):
    """Fields shared by every menu item."""

    id: PositiveInt
    name: str = Field(min_length=1, max_length=100)
    description: str = ''
    price: NonNegativeNumber
    ingredients: IngredientList = Field(default_factory=list)
    is_available: QueryBool = True


class FoodItem(BaseItem):
    category: upper_enum(FoodCategory)
    type: upper_enum(FoodType)
    is_vegan: QueryBool = False
    is_vegetarian: QueryBool = False
    is_gluten_free: QueryBool = False
    allergies: enum_list(Allergy) = Field(default_factory=list)
    spicy_level: upper_enum(SpiceLevel) = SpiceLevel.NOT_SPICY
    preparation_time: NonNegativeInt = Field(default=0, description="Minutes")
    calories: Optional[NonNegativeInt] = None


class DrinkItem(BaseItem):
    category: upper_enum(DrinkCategory)
    volume: NonNegativeNumber = Field(description="Millilitres")
    alcohol_percentage: Percentage = 0
    is_carbonated: QueryBool = False
    # Older clients send the misspelled `tempriture`; output is always `temperature`
    temperature: upper_enum(DrinkTemp) = Field(
        validation_alias=AliasChoices('temperature', 'tempriture'),
    )


CreateFoodItem = derive(FoodItem, 'CreateFoodItem', omit=['id'])
CreateDrinkItem = derive(DrinkItem, 'CreateDrinkItem', omit=['id'])

UpdateFoodItem = derive(FoodItem, 'UpdateFoodItem', omit=['id'], partial=True, require_any=True)
UpdateDrinkItem = derive(DrinkItem, 'UpdateDrinkItem', omit=['id'], partial=True, require_any=True)


class _PriceRange(SearchCriteria):
    price_min: Optional[NonNegativeNumber] = None
    price_max: Optional[NonNegativeNumber] = None
    sort_by: ItemSortOptions = ItemSortOptions.ID

    @model_validator(mode='after')
    def check_price_range(self):
        check_range(self, 'price_min', 'price_max')
        return self


FoodItemSearch = derive(
    FoodItem, 'FoodItemSearch',
    pick=['name', 'category', 'type', 'is_available', 'is_vegan', 'is_vegetarian',
          'is_gluten_free', 'spicy_level'],
    partial=True,
    base=_PriceRange,
    doc="Food menu filters with an optional price range.",
)

DrinkItemSearch = derive(
    DrinkItem, 'DrinkItemSearch',
    pick=['name', 'category', 'is_available', 'is_carbonated', 'temperature'],
    partial=True,
    base=_PriceRange,
    doc="Drink menu filters with an optional price range.",
)


class FoodItemList(Page[FoodItem]):
    """Paginated food items."""


class DrinkItemList(Page[DrinkItem]):
    """Paginated drink items."""


for _schema in (BaseItem, FoodItem, DrinkItem, CreateFoodItem, CreateDrinkItem,
                UpdateFoodItem, UpdateDrinkItem, FoodItemSearch, DrinkItemSearch,
                FoodItemList, DrinkItemList):
    register_schema(_schema)
