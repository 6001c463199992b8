import logging

logger = logging.getLogger(__name__)

import math

from django.http import HttpRequest, HttpResponse
from django.shortcuts import render
from django.views.decorators.http import require_GET

from ..exceptions import RecordNotFound, SettingTypeError
from ..repositories import ClientRepository
from ..services.app_settings import SettingsStore

DEFAULT_PAGE_SIZE = 10


def list_page_size(store: SettingsStore) -> int:
    try:
        size = store.get_int("list_page_size")
    except (RecordNotFound, SettingTypeError):
        logger.warning("list_page_size setting missing or not an integer, using %s", DEFAULT_PAGE_SIZE)
        return DEFAULT_PAGE_SIZE
    return size if size > 0 else DEFAULT_PAGE_SIZE


@require_GET
def home(request: HttpRequest) -> HttpResponse:
    clients = ClientRepository()
    page_size = list_page_size(SettingsStore())

    try:
        page = int(request.GET.get("page", 1))
    except ValueError:
        page = 1

    total = clients.count()
    num_pages = max(1, math.ceil(total / page_size))
    page = min(max(page, 1), num_pages)

    return render(
        request,
        "tracker/home.html",
        {
            "clients": clients.get_page(page, page_size),
            "page": page,
            "num_pages": num_pages,
            "has_previous": page > 1,
            "has_next": page < num_pages,
            "total_clients": total,
            "current_page": "clients",
        },
    )
