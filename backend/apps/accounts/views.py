"""
HTML views for login, logout and registration.

Failures are signalled to the browser the way the login page expects:
a redirect back to the form with an ``ErrorMessage`` query parameter.
"""

from urllib.parse import urlencode

from django.conf import settings
from django.http import HttpResponseRedirect
from django.shortcuts import redirect, render
from django.utils.http import url_has_allowed_host_and_scheme
from django.views.decorators.http import require_http_methods, require_POST

from apps.accounts.forms import RegistrationForm
from apps.accounts.services.identity import identity_provider
from apps.core.exceptions import AuthenticationError, ConflictError


def _success_url(request):
    next_url = request.POST.get("next") or request.GET.get("next")
    if next_url and url_has_allowed_host_and_scheme(
        next_url,
        allowed_hosts={request.get_host()},
        require_https=request.is_secure(),
    ):
        return next_url
    return settings.LOGIN_REDIRECT_URL


@require_http_methods(["GET", "POST"])
def login_view(request):
    if request.method == "GET":
        return render(
            request,
            "accounts/login.html",
            {
                "error_message": request.GET.get("ErrorMessage", ""),
                "next": request.GET.get("next", ""),
            },
        )

    try:
        identity_provider.sign_in(
            request,
            request.POST.get("email", "").strip(),
            request.POST.get("password", ""),
        )
    except AuthenticationError as exc:
        params = {"ErrorMessage": exc.message}
        next_url = request.POST.get("next")
        if next_url:
            params["next"] = next_url
        query = urlencode(params)
        return HttpResponseRedirect(f"{settings.LOGIN_URL}?{query}")

    return HttpResponseRedirect(_success_url(request))


@require_POST
def logout_view(request):
    identity_provider.end_session(request)
    return redirect("home")


@require_http_methods(["GET", "POST"])
def register_view(request):
    form = RegistrationForm(request.POST or None)

    if request.method == "POST" and form.is_valid():
        try:
            identity_provider.register(
                request,
                form.cleaned_data["email"],
                form.cleaned_data["password"],
            )
        except ConflictError as exc:
            form.add_error("email", exc.message)
        else:
            return HttpResponseRedirect(settings.LOGIN_REDIRECT_URL)

    status = 400 if request.method == "POST" else 200
    return render(request, "accounts/register.html", {"form": form}, status=status)
