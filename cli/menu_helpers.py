# cli/menu_helpers.py

"""
Helper functions for CLI menus and user interaction in TeacherMate.

This module provides utilities for:
- Displaying interactive menus and result lists
- Prompting for and validating user input
- Handling user selections and confirmation flows
- Displaying standard system messages and error feedback

Every label is looked up in the active language through `use_language()`, so these helpers must
run inside a `LanguageProvider`.
"""

from enum import Enum
from typing import Any, Callable, Iterable, TypeVar

import core.formatters as formatters
from core.i18n import use_language
from core.response import Response

T = TypeVar("T")


class MenuSignal(Enum):
    CANCEL = "CANCEL"
    DEFAULT = "DEFAULT"
    EXIT = "EXIT"


# === display methods ===


def display_menu(
    title: str,
    options: list[tuple[str, Callable[..., Any]]],
    zero_option: str | None = None,
) -> MenuSignal | Callable[..., Any]:
    """
    Displays a numbered CLI menu and returns the selected action.

    Args:
        title (str): The heading displayed above the menu options.
        options (list[tuple[str, Callable[..., Any]]]): A list of (label, action) pairs to present.
        zero_option (str, optional): The label for the "back" or "exit" option. Defaults to the
            translated "back" label.

    Returns:
        MenuSignal.EXIT if the user selects the zero option.
        Callable[..., Any]: The function associated with the selected menu item.

    Notes:
        - Menu selection is repeated until a valid choice is made.
        - User input is matched by menu index, not by label.
    """
    lang = use_language()

    while True:
        print(f"\n{title}")

        for i, (label, _) in enumerate(options, 1):
            print(f"{i}. {label}")

        print(f"0. {zero_option or lang.t('common.back')}")

        choice = prompt_user_input(lang.t("common.select_option"))

        if choice == "0":
            return MenuSignal.EXIT

        try:
            # casts choice to int and adjusts for zero-index, retrieves action from tuple
            return options[int(choice) - 1][1]

        except (ValueError, IndexError):
            print(lang.t("common.invalid_selection"))


def display_results(
    results: Iterable[Any],
    show_index: bool = False,
    formatter: Callable[[Any], str] = lambda x: str(x),
) -> None:
    """
    Prints a list of results to the console, optionally numbered and formatted.

    Args:
        results (Iterable[Any]): A sequence of results to display.
        show_index (bool, optional): If True, prepends a numbered index to each result.
        formatter (Callable[[Any], str], optional): Converts each result to a display string.
    """
    for i, result in enumerate(results, 1):
        prefix = f"{i:>2}. " if show_index else ""
        print(f"{prefix}{formatter(result)}")


def display_empty_or_results(
    results: list[Any],
    formatter: Callable[[Any], str] = lambda x: str(x),
    empty_message: str | None = None,
) -> None:
    if not results:
        print(f"\n{empty_message or use_language().t('common.empty')}")
        return

    print()
    display_results(results, False, formatter)


# === confirmation methods ===


def confirm_action(prompt: str) -> bool:
    lang = use_language()

    while True:
        choice = prompt_user_input(f"{prompt} (y/n): ").lower()

        # b[ai] and s[í] cover the eu and es answers
        if choice in ("y", "yes", "b", "bai", "s", "si", "sí"):
            return True

        elif choice in ("n", "no", "ez"):
            return False

        else:
            print(lang.t("common.invalid_selection"))


def confirm_make_change() -> bool:
    return confirm_action(use_language().t("common.confirm"))


# === prompt methods ===


def prompt_user_input(prompt: str) -> str:
    return input(f"\n{prompt}\n  >> ").strip()


def prompt_user_input_or_cancel(prompt: str) -> str | MenuSignal:
    response = prompt_user_input(f"{prompt} {use_language().t('common.blank_to_cancel')}")
    return MenuSignal.CANCEL if response == "" else response


def prompt_user_input_or_default(prompt: str) -> str | MenuSignal:
    response = prompt_user_input(f"{prompt} {use_language().t('common.blank_to_skip')}")
    return MenuSignal.DEFAULT if response == "" else response


def prompt_user_input_or_none(prompt: str) -> str | None:
    response = prompt_user_input(f"{prompt} {use_language().t('common.blank_to_skip')}")
    return None if response == "" else response


# === selection methods ===


def prompt_selection_from_list(
    list_data: list[T],
    list_description: str,
    formatter: Callable[[T], str] = lambda x: str(x),
) -> T | None:
    """
    Prompts the user to select an item from a list.

    Args:
        list_data (list[T]): The items to choose from, in display order.
        list_description (str): A short heading shown above the list (e.g. "Students").
        formatter (Callable[[T], str], optional): Converts each item to a display string.

    Returns:
        The selected item, or None if the list is empty or the user cancels with "0".

    Notes:
        - Menu is repeated until a valid selection is made or canceled.
    """
    lang = use_language()

    if not list_data:
        print(f"\n{lang.t('common.empty')}")
        return None

    while True:
        print(f"\n{formatters.format_banner_text(list_description)}")

        display_results(list_data, True, formatter)

        choice = prompt_user_input(lang.t("common.select_or_cancel"))

        if choice == "0":
            return None

        try:
            index = int(choice) - 1
            if index < 0:
                raise IndexError(index)
            return list_data[index]

        except (ValueError, IndexError):
            print(f"\n{lang.t('common.invalid_selection')}")


def prompt_option_from_labels(
    title: str,
    options: list[tuple[str, T]],
) -> T | MenuSignal:
    """
    Prompts for one value out of a fixed set of labelled options, e.g. an intervention type.

    Returns:
        The value paired with the chosen label, or `MenuSignal.CANCEL` on "0".
    """
    selected = prompt_selection_from_list(
        options, title, formatter=lambda option: option[0]
    )

    return MenuSignal.CANCEL if selected is None else selected[1]


def prompt_multiple_from_labels(
    title: str,
    options: list[tuple[str, T]],
) -> list[T]:
    """
    Prompts for any number of labelled options as a comma-separated list of indexes.

    Returns:
        The values for every valid index entered, in option order. Blank input selects none.
    """
    lang = use_language()

    print(f"\n{formatters.format_banner_text(title)}")
    display_results(options, True, lambda option: option[0])

    raw = prompt_user_input(f"1,2,... {lang.t('common.blank_to_skip')}")
    chosen = set()

    for item in raw.split(","):
        item = item.strip()
        if item.isdigit() and 1 <= int(item) <= len(options):
            chosen.add(int(item) - 1)

    return [options[i][1] for i in sorted(chosen)]


# === system messages ===


def returning_without_changes() -> None:
    print(f"\n{use_language().t('common.cancelled')}")


def caution_banner() -> None:
    caution_banner = formatters.format_banner_text("(!)")
    print(f"\n{caution_banner}")


def display_response_success(response: Response) -> None:
    print(f"\n{use_language().t('common.saved')} {response.detail or ''}".rstrip())


def display_response_failure(response: Response, debug: bool = False) -> None:
    """
    Displays a formatted error message based on a failed `Response`.

    Args:
        response (Response): The response object to inspect.
        debug (bool, optional): If True, also prints the status code.

    Notes:
        - Does nothing if the response was successful.
        - Enum error codes are printed by name; string errors are printed as-is.
    """
    if response.success:
        return

    error_label = (
        response.error.name if isinstance(response.error, Enum) else str(response.error)
    )

    print(f"\n[ERROR: {error_label}] {response.detail}")

    if debug:
        print(f"\nStatus code: {response.status_code}")


def display_response(response: Response) -> None:
    if response.success:
        display_response_success(response)
    else:
        display_response_failure(response)
