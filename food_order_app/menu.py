"""Fixed in-memory menu."""

from types import MappingProxyType
from typing import Mapping, Optional

from food_order_app.schemas import FoodType

FOOD_TYPE_LABELS: Mapping[FoodType, str] = MappingProxyType({
    FoodType.PIZZA: "Піца",
    FoodType.BURGER: "Бургер",
    FoodType.SUSHI: "Суші",
    FoodType.DRINKS: "Напої",
})

MENU: Mapping[FoodType, tuple[str, ...]] = MappingProxyType({
    FoodType.PIZZA: ("Маргарита", "Пепероні", "Гавайська", "Чотири сири", "М'ясна"),
    FoodType.BURGER: ("Чізбургер", "Чікенбургер", "Вегетаріанський", "Біг Мак", "Дабл Чізбургер"),
    FoodType.SUSHI: ("Філадельфія", "Каліфорнія", "Дракон", "Рол з лососем", "Рол з тунцем"),
    FoodType.DRINKS: ("Кола", "Фанта", "Спрайт", "Чай", "Кава"),
})


def parse_food_type(value: Optional[str]) -> Optional[FoodType]:
    """Match user input against the categories, ignoring case and surrounding spaces."""
    if value is None:
        return None
    try:
        return FoodType(value.strip().lower())
    except ValueError:
        return None
