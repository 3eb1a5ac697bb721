"""
HTML views: home page, the owner dashboard and the public wedding page.
"""

from django.conf import settings
from django.http import Http404
from django.shortcuts import redirect, render
from django.views.decorators.cache import cache_page
from django.views.decorators.http import require_GET, require_http_methods

from apps.core.exceptions import ConflictError, NotFoundError, ValidationError
from apps.weddings.forms import WeddingForm
from apps.weddings.services import registry


@require_GET
def home(request):
    return render(request, "home.html")


@require_http_methods(["GET", "POST"])
def dashboard(request):
    """List the signed-in user's sites and create new ones.

    Anonymous visitors never get here: the registry raises
    AuthenticationRequiredError, which the middleware turns into a
    redirect to the login page.
    """
    sites = registry.list_sites_for_owner(request.user)
    form = WeddingForm(request.POST or None)
    status = 200

    if request.method == "POST":
        if form.is_valid():
            try:
                registry.create_site(
                    request.user,
                    form.cleaned_data["title"],
                    form.cleaned_data["slug"],
                )
            except (ValidationError, ConflictError) as exc:
                for field, messages in exc.errors.items():
                    form.add_error(field if field in form.fields else None, messages)
                status = exc.status_code
            else:
                return redirect("weddings:dashboard")
        else:
            status = 400

    return render(
        request,
        "weddings/dashboard.html",
        {"sites": sites, "form": form},
        status=status,
    )


@require_GET
@cache_page(settings.WEDDING_PAGE_CACHE_SECONDS)
def public_site(request, slug):
    try:
        site = registry.get_site_by_slug(slug)
    except NotFoundError as exc:
        raise Http404(exc.message)
    return render(request, "weddings/site.html", {"site": site})
