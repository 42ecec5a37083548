# cli/menus/resources_menu.py

"""
Resources menu for the TeacherMate CLI: the bookmarks library with search, add, favorite
toggling and delete.
"""

from typing import cast

import cli.menu_helpers as helpers
import cli.model_formatters as model_formatters
import core.formatters as formatters
from cli.menu_helpers import MenuSignal
from controllers.resources import ResourcesController
from core.i18n import use_language
from models.resource import Resource
from storage.adapter import StorageAdapter


def run(storage: StorageAdapter) -> None:
    """
    Top-level loop with dispatch for the Resources menu.

    Raises:
        RuntimeError: If the menu response is unrecognized.
    """
    lang = use_language()
    controller = ResourcesController(storage)

    while True:
        controller.refresh()

        if controller.search_query:
            print(f"\n[{controller.search_query}]")

        helpers.display_empty_or_results(
            controller.resources,
            model_formatters.format_resource_oneline,
            empty_message=lang.t("resources.no_resources"),
        )

        title = formatters.format_banner_text(lang.t("resources.title"))
        options = [
            (lang.t("resources.search_placeholder"), search_resources),
            (lang.t("resources.add"), add_resource),
            (lang.t("resources.toggle_favorite"), toggle_favorite),
            (lang.t("resources.delete"), delete_resource),
        ]

        menu_response = helpers.display_menu(title, options)

        if menu_response is MenuSignal.EXIT:
            break

        elif callable(menu_response):
            menu_response(controller)

        else:
            raise RuntimeError(f"Unexpected MenuResponse received: {menu_response}")


def search_resources(controller: ResourcesController) -> None:
    lang = use_language()
    query = helpers.prompt_user_input(
        f"{lang.t('resources.search_placeholder')} {lang.t('common.blank_to_skip')}"
    )
    controller.search(query)


def prompt_resource_selection(
    controller: ResourcesController, title: str
) -> Resource | None:
    return helpers.prompt_selection_from_list(
        controller.resources, title, model_formatters.format_resource_oneline
    )


def add_resource(controller: ResourcesController) -> None:
    lang = use_language()

    title = helpers.prompt_user_input_or_cancel(lang.t("resources.forms.title"))
    if title is MenuSignal.CANCEL:
        helpers.returning_without_changes()
        return

    url = helpers.prompt_user_input_or_cancel(lang.t("resources.forms.url"))
    if url is MenuSignal.CANCEL:
        helpers.returning_without_changes()
        return

    category = helpers.prompt_user_input_or_none(lang.t("resources.forms.category"))
    tags = helpers.prompt_user_input_or_none(lang.t("resources.forms.tags"))

    response = controller.add_resource(
        cast(str, title), cast(str, url), tags=tags or "", category=category or ""
    )
    helpers.display_response(response)


def toggle_favorite(controller: ResourcesController) -> None:
    resource = prompt_resource_selection(
        controller, use_language().t("resources.toggle_favorite")
    )

    if resource is None:
        return

    helpers.display_response(controller.toggle_favorite(resource.id))


def delete_resource(controller: ResourcesController) -> None:
    resource = prompt_resource_selection(controller, use_language().t("resources.delete"))

    if resource is None:
        return

    if not helpers.confirm_make_change():
        helpers.returning_without_changes()
        return

    helpers.display_response(controller.delete_resource(resource.id))
