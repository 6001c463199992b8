# tracker/views/common.py
from __future__ import annotations

from django.http import Http404, HttpRequest, HttpResponse, HttpResponseRedirect
from django.shortcuts import render, resolve_url

from ..exceptions import RecordNotFound
from ..ports import Repository


class SeeOther(HttpResponseRedirect):
    status_code = 303


def see_other(to, *args, **kwargs) -> SeeOther:
    """Post/redirect/get: always 303 so the browser follows with a GET."""
    return SeeOther(resolve_url(to, *args, **kwargs))


def parse_pk(raw: str) -> int:
    # negative, non-numeric and non-ASCII digit ids are all "not found"
    if not raw or not (raw.isascii() and raw.isdigit()):
        raise Http404("Invalid id")
    return int(raw)


def get_or_404(repository: Repository, raw_pk: str):
    pk = parse_pk(raw_pk)
    try:
        return repository.get(pk)
    except RecordNotFound as exc:
        raise Http404(str(exc)) from exc


def require_exists(repository: Repository, raw_pk: str) -> int:
    pk = parse_pk(raw_pk)
    if not repository.exists(pk):
        raise Http404("Not found")
    return pk


def render_form(request: HttpRequest, template: str, context: dict) -> HttpResponse:
    """Render a form page; a bound form with errors comes back as 422."""
    form = context.get("form")
    status = 422 if form is not None and form.is_bound and form.errors else 200
    return render(request, template, context, status=status)
