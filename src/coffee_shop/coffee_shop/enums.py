from enum import StrEnum


class BeverageKind(StrEnum):
    ESPRESSO = "espresso"
    LATTE = "latte"

    @property
    def display_name(self) -> str:
        return self.value.title()


class MenuState(StrEnum):
    MAIN_MENU = "main_menu"
    COFFEE_MENU = "coffee_menu"
    EXIT = "exit"
